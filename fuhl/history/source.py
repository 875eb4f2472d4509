"""Browser history loading for fuhl.

This module locates the browser's history database, copies it aside (the
browser keeps the live file locked) and reads the URL table in recency order.
"""

import logging
import os
import shutil
import sqlite3
import sys
import tempfile
from dataclasses import dataclass
from typing import List, Optional
from ..utils.constants import DATABASE_ENV_VAR, DEFAULT_DATABASE_PATHS, DEFAULT_MAX_URL_LENGTH, HISTORY_QUERY

logger = logging.getLogger(__name__)


class HistorySourceError(Exception):
    """The history database is missing or cannot be read."""


@dataclass(frozen=True)
class HistoryEntry:
    """One row of the browser's ``urls`` table."""

    id: int
    url: str
    title: str
    visit_count: int
    typed_count: int
    last_visit_time: int
    hidden: int

    @property
    def label(self) -> str:
        return self.title

    @property
    def locator(self) -> str:
        return self.url


def default_database_path(platform: Optional[str] = None) -> Optional[str]:
    """Get the platform's default history database location, if it has one."""
    platform = platform or sys.platform
    for prefix, path in DEFAULT_DATABASE_PATHS.items():
        if platform.startswith(prefix):
            return os.path.expanduser(path)
    return None


def resolve_database_path(cli_path: Optional[str] = None, config_path: Optional[str] = None) -> Optional[str]:
    """Pick the history database to read.

    Order: command-line flag, ``FUHL_DB`` environment variable, config file,
    platform default.

    Returns:
        Optional[str]: Expanded path, or None when nothing is configured
    """
    for candidate in (cli_path, os.environ.get(DATABASE_ENV_VAR), config_path):
        if candidate:
            return os.path.expanduser(candidate)
    return default_database_path()


def _row_to_entry(row: sqlite3.Row) -> HistoryEntry:
    if row["url"] is None:
        raise ValueError(f"row {row['id']} has no url")
    return HistoryEntry(
        id=int(row["id"]),
        url=str(row["url"]),
        title=str(row["title"] or ""),
        visit_count=int(row["visit_count"] or 0),
        typed_count=int(row["typed_count"] or 0),
        last_visit_time=int(row["last_visit_time"] or 0),
        hidden=int(row["hidden"] or 0),
    )


def _read_entries(database_file: str, max_url_length: int) -> List[HistoryEntry]:
    connection = sqlite3.connect(database_file)
    try:
        connection.row_factory = sqlite3.Row
        # Browsers store whatever bytes a page title contained
        connection.text_factory = lambda raw: raw.decode("utf-8", errors="replace")
        entries = []
        for row in connection.execute(HISTORY_QUERY, (max_url_length,)):
            try:
                entries.append(_row_to_entry(row))
            except (TypeError, ValueError) as e:
                logger.warning("Error reading row: %s", e)
        return entries
    finally:
        connection.close()


def load_history(database_path: Optional[str], max_url_length: int = DEFAULT_MAX_URL_LENGTH) -> List[HistoryEntry]:
    """Load history entries, most recently visited first.

    Args:
        database_path: Path to the browser's history database
        max_url_length: Only URLs shorter than this are returned

    Returns:
        List[HistoryEntry]: Entries ordered by last visit, then visit count

    Raises:
        HistorySourceError: If the database is missing or cannot be queried
    """
    if not database_path or not os.path.exists(database_path):
        raise HistorySourceError(f"History DB not found at path {database_path or 'none'}")

    with tempfile.TemporaryDirectory(prefix="fuhl-") as workdir:
        database_copy = os.path.join(workdir, "History")
        try:
            shutil.copyfile(database_path, database_copy)
        except OSError as e:
            raise HistorySourceError(f"Failed to copy database file {database_path}: {e}") from e

        try:
            entries = _read_entries(database_copy, max_url_length)
        except sqlite3.Error as e:
            raise HistorySourceError(f"Failed to query urls in {database_path}: {e}") from e

    logger.debug("Loaded %d history entries from %s", len(entries), database_path)
    return entries
