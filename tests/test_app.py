"""Tests for the fuhl command line flow."""

import pytest

from fuhl import app
from fuhl.app import HistoryPicker, apply_overrides, build_parser, main
from fuhl.config.defaults import default_config


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path):
    monkeypatch.delenv("FUHL_DB", raising=False)
    monkeypatch.setattr("fuhl.config.manager.get_config_path", lambda: str(tmp_path / "no-config.json"))


@pytest.fixture
def history_db(make_history_db):
    return make_history_db([
        ("https://docs.example.com/", "Example Docs", 3, 200),
        ("https://example.com/", "Example Site", 9, 100),
    ])


def test_overrides():
    args = build_parser().parse_args(["--limit", "5", "--max-url-length", "100", "--print"])
    config = apply_overrides(default_config(), args)
    assert config["pickerSettings"]["resultLimit"] == 5
    assert config["historySettings"]["maxUrlLength"] == 100
    assert config["launchSettings"]["openInBrowser"] is False


def test_picker_builds_store(history_db):
    picker = HistoryPicker(default_config())
    store = picker.load(history_db)
    assert [candidate.display for candidate in store] == [
        "Example Docs - https://docs.example.com/",
        "Example Site - https://example.com/",
    ]
    assert picker.entry_for(store[1]).url == "https://example.com/"


def test_pick_on_empty_store_does_not_touch_terminal():
    class Untouchable:
        def __enter__(self):
            raise AssertionError("terminal entered")

        def __exit__(self, *exc):
            return None

    assert HistoryPicker(default_config()).pick(terminal=Untouchable()) is None


def test_missing_database_exits_with_error(tmp_path, capsys):
    assert main(["--db", str(tmp_path / "missing")]) == 1
    assert "History DB not found" in capsys.readouterr().err


def test_empty_history(make_history_db, capsys):
    assert main(["--db", make_history_db([])]) == 0
    assert "No URLs found" in capsys.readouterr().err


def test_database_from_environment(make_history_db, monkeypatch, capsys):
    monkeypatch.setenv("FUHL_DB", make_history_db([]))
    assert main([]) == 0
    assert "No URLs found" in capsys.readouterr().err


def test_print_selected_url(history_db, monkeypatch, capsys):
    monkeypatch.setattr(HistoryPicker, "pick", lambda self, terminal=None: self.store[1])
    assert main(["--db", history_db, "--print"]) == 0
    assert capsys.readouterr().out == "https://example.com/\n"


def test_open_selected_url(history_db, monkeypatch):
    opened = []
    monkeypatch.setattr(HistoryPicker, "pick", lambda self, terminal=None: self.store[0])
    monkeypatch.setattr(app, "open_selection", lambda url, display: opened.append((url, display)))

    assert main(["--db", history_db]) == 0
    assert opened == [("https://docs.example.com/", "Example Docs - https://docs.example.com/")]


def test_cancelled_selection(history_db, monkeypatch, capsys):
    monkeypatch.setattr(HistoryPicker, "pick", lambda self, terminal=None: None)
    assert main(["--db", history_db]) == 0
    assert "No selection made" in capsys.readouterr().err


def test_terminal_error_exits_with_error(history_db, monkeypatch, capsys):
    def failing_pick(self, terminal=None):
        raise OSError("not a terminal")

    monkeypatch.setattr(HistoryPicker, "pick", failing_pick)
    assert main(["--db", history_db]) == 1
    assert "not a terminal" in capsys.readouterr().err


@pytest.mark.parametrize("argv", [
    ["--limit", "0"],
    ["--limit", "-2"],
    ["--max-url-length", "-1"],
    ["--max-url-length", "abc"],
])
def test_non_positive_numbers_are_rejected(argv, capsys):
    with pytest.raises(SystemExit) as excinfo:
        build_parser().parse_args(argv)
    assert excinfo.value.code == 2
    assert "--" in capsys.readouterr().err


def test_interactive_screen_uses_stderr():
    assert HistoryPicker(default_config()).console.stderr is True
