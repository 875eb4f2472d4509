"""Shared fixtures for fuhl tests."""

import sqlite3

import pytest

from fuhl.engine.store import CandidateStore

SCENARIO_DISPLAYS = [
    "Example Site - example.com",
    "Example Docs - docs.example.com",
    "Other - other.org",
]

URLS_SCHEMA = (
    "CREATE TABLE urls (id INTEGER PRIMARY KEY, url LONGVARCHAR, title LONGVARCHAR, "
    "visit_count INTEGER DEFAULT 0 NOT NULL, typed_count INTEGER DEFAULT 0 NOT NULL, "
    "last_visit_time INTEGER NOT NULL, hidden INTEGER DEFAULT 0 NOT NULL)"
)


@pytest.fixture
def scenario_store():
    return CandidateStore(SCENARIO_DISPLAYS)


@pytest.fixture
def make_history_db(tmp_path):
    """Build a Chromium-style history database from (url, title, visits, last_visit) rows."""

    def _make(rows, name="History"):
        path = tmp_path / name
        connection = sqlite3.connect(str(path))
        connection.execute(URLS_SCHEMA)
        connection.executemany(
            "INSERT INTO urls (url, title, visit_count, typed_count, last_visit_time, hidden) "
            "VALUES (?, ?, ?, 0, ?, 0)",
            rows,
        )
        connection.commit()
        connection.close()
        return str(path)

    return _make
