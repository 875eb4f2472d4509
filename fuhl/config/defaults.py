"""Default configuration settings for fuhl.

This module provides default settings and paths used throughout the application.
"""

import os
from ..utils.constants import (
    DEFAULT_CONFIG_DIR,
    DEFAULT_CONFIG_FILE,
    DEFAULT_MAX_URL_LENGTH,
    DEFAULT_POLL_TIMEOUT,
    DEFAULT_RESULT_LIMIT,
)

def default_config() -> dict:
    """Get default configuration settings.

    Returns:
        dict: Default configuration dictionary
    """

    return {
        "databasePath": None,  # None falls back to FUHL_DB or the platform default
        "historySettings": {
            "maxUrlLength": DEFAULT_MAX_URL_LENGTH
        },
        "pickerSettings": {
            "resultLimit": DEFAULT_RESULT_LIMIT,
            "pollTimeout": DEFAULT_POLL_TIMEOUT
        },
        "launchSettings": {
            "openInBrowser": True
        }
    }

def get_config_path() -> str:
    """Get the path to the configuration file.

    Returns:
        str: Path to the configuration file
    """
    return os.path.join(DEFAULT_CONFIG_DIR, DEFAULT_CONFIG_FILE)
