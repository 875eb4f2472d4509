"""Browser history as the candidate source."""

from .source import HistoryEntry, HistorySourceError, load_history, resolve_database_path

__all__ = ["HistoryEntry", "HistorySourceError", "load_history", "resolve_database_path"]
