"""Tests for configuration loading."""

import io
import json

import pytest
from rich.console import Console

from fuhl.config.defaults import default_config
from fuhl.config.manager import ConfigManager


@pytest.fixture
def manager():
    return ConfigManager(Console(file=io.StringIO()))


def _write(tmp_path, data):
    path = tmp_path / "config.json"
    path.write_text(json.dumps(data) if not isinstance(data, str) else data)
    return str(path)


def test_defaults():
    config = default_config()
    assert config["databasePath"] is None
    assert config["historySettings"]["maxUrlLength"] == 60
    assert config["pickerSettings"]["resultLimit"] == 50
    assert config["pickerSettings"]["pollTimeout"] == 0.2
    assert config["launchSettings"]["openInBrowser"] is True


def test_missing_default_file_returns_defaults(manager, monkeypatch, tmp_path):
    monkeypatch.setattr("fuhl.config.manager.get_config_path", lambda: str(tmp_path / "absent.json"))
    assert manager.load_configuration() == default_config()
    assert manager.console.file.getvalue() == ""


def test_missing_explicit_file_is_reported(manager, tmp_path):
    assert manager.load_configuration(str(tmp_path / "absent.json")) == default_config()
    assert "Configuration file not found" in manager.console.file.getvalue()


def test_values_are_applied(manager, tmp_path):
    path = _write(tmp_path, {
        "databasePath": "~/History",
        "historySettings": {"maxUrlLength": 120},
        "pickerSettings": {"resultLimit": 20, "pollTimeout": 0.5},
        "launchSettings": {"openInBrowser": False},
    })

    config = manager.load_configuration(path)

    assert config["databasePath"] == "~/History"
    assert config["historySettings"]["maxUrlLength"] == 120
    assert config["pickerSettings"] == {"resultLimit": 20, "pollTimeout": 0.5}
    assert config["launchSettings"]["openInBrowser"] is False


def test_invalid_values_fall_back(manager, tmp_path):
    path = _write(tmp_path, {
        "databasePath": 7,
        "historySettings": {"maxUrlLength": "long"},
        "pickerSettings": {"resultLimit": -3, "pollTimeout": True},
    })

    config = manager.load_configuration(path)

    assert config == default_config()


def test_malformed_json_falls_back(manager, tmp_path):
    path = _write(tmp_path, "{not json")
    assert manager.load_configuration(path) == default_config()
    assert "Error loading configuration" in manager.console.file.getvalue()


def test_non_object_json_falls_back(manager, tmp_path):
    path = _write(tmp_path, [1, 2, 3])
    assert manager.load_configuration(path) == default_config()
