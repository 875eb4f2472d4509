"""Configuration management for fuhl.

This module handles loading and validating configuration settings for fuhl,
including the history database location and picker behaviour.
"""

import json
import logging
import os
from typing import Dict, Any, Optional
from rich.console import Console
from rich.panel import Panel
from .defaults import default_config, get_config_path

logger = logging.getLogger(__name__)

class ConfigManager:
    """Manages configuration for fuhl.

    This class handles loading and validating configuration settings. A missing
    default config file is normal; every unusable value falls back to its default.
    """

    def __init__(self, console: Optional[Console] = None):
        """Initialize the ConfigManager.

        Args:
            console: Rich console for output (optional)
        """
        self.console = console or Console(stderr=True)

    def load_configuration(self, config_path: Optional[str] = None) -> Dict[str, Any]:
        """Load configuration settings from a JSON file.

        Args:
            config_path: Optional path to the config file (defaults to ~/.config/fuhl/config.json)

        Returns:
            Dict containing the configuration settings
        """
        explicit = config_path is not None
        config_path = os.path.expanduser(config_path) if explicit else get_config_path()

        # Check if config file exists
        if not os.path.exists(config_path):
            if explicit:
                self.console.print(Panel(
                    f"[yellow]Configuration file not found:[/yellow]\n"
                    f"[blue]{config_path}[/blue]",
                    title="Config Not Found", border_style="yellow", expand=False
                ))
            return default_config()

        # Read config file
        try:
            with open(config_path, 'r') as f:
                config_data = json.load(f)

            logger.debug("Loaded configuration from %s", config_path)
            return self._validate_config(config_data)

        except (OSError, ValueError) as e:
            self.console.print(Panel(
                f"[red]Error loading configuration:[/red]\n"
                f"{str(e)}",
                title="Error", border_style="red", expand=False
            ))
            return default_config()

    def _positive_number(self, value: Any, cast, default):
        """Convert value with cast, keeping the default unless the result is positive."""
        try:
            converted = cast(value)
        except (TypeError, ValueError):
            logger.warning("Ignoring invalid config value %r", value)
            return default
        if isinstance(value, bool) or converted <= 0:
            logger.warning("Ignoring invalid config value %r", value)
            return default
        return converted

    def _validate_config(self, config_data: Dict[str, Any]) -> Dict[str, Any]:
        """Validate configuration data and provide defaults for missing fields.

        Args:
            config_data: Configuration data to validate

        Returns:
            Dict: Validated configuration with defaults applied where needed
        """
        # Start with default configuration
        validated = default_config()

        if not isinstance(config_data, dict):
            logger.warning("Ignoring configuration that is not a JSON object")
            return validated

        # Apply values from the loaded configuration if they exist
        if isinstance(config_data.get("databasePath"), str) and config_data["databasePath"]:
            validated["databasePath"] = config_data["databasePath"]

        if "historySettings" in config_data and isinstance(config_data["historySettings"], dict):
            history_settings = config_data["historySettings"]
            if "maxUrlLength" in history_settings:
                validated["historySettings"]["maxUrlLength"] = self._positive_number(
                    history_settings["maxUrlLength"], int, validated["historySettings"]["maxUrlLength"])

        if "pickerSettings" in config_data and isinstance(config_data["pickerSettings"], dict):
            picker_settings = config_data["pickerSettings"]
            if "resultLimit" in picker_settings:
                validated["pickerSettings"]["resultLimit"] = self._positive_number(
                    picker_settings["resultLimit"], int, validated["pickerSettings"]["resultLimit"])
            if "pollTimeout" in picker_settings:
                validated["pickerSettings"]["pollTimeout"] = self._positive_number(
                    picker_settings["pollTimeout"], float, validated["pickerSettings"]["pollTimeout"])

        if "launchSettings" in config_data and isinstance(config_data["launchSettings"], dict):
            if "openInBrowser" in config_data["launchSettings"]:
                validated["launchSettings"]["openInBrowser"] = bool(config_data["launchSettings"]["openInBrowser"])

        return validated
