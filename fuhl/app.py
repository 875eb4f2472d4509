"""fuhl application: load history, run the picker and act on the selection."""

import argparse
import logging
from typing import Any, Dict, List, Optional
from rich.console import Console
from rich.panel import Panel

from . import __version__
from .config.manager import ConfigManager
from .engine.loop import run_session
from .engine.store import Candidate, CandidateStore
from .history.source import HistoryEntry, HistorySourceError, load_history, resolve_database_path
from .ui.terminal import TerminalSession
from .utils.constants import DATABASE_ENV_VAR
from .utils.launcher import open_selection, print_selection
from .utils.logging_setup import configure_logging

logger = logging.getLogger(__name__)

class HistoryPicker:
    """Fuzzy picker over browser history entries."""

    def __init__(self, config: Dict[str, Any], console: Optional[Console] = None):
        """Initialize the picker.

        Args:
            config: Validated configuration dictionary
            console: Rich console for the interactive screen (optional, defaults to stderr)
        """
        self.config = config
        self.console = console or Console(stderr=True)
        self.entries: List[HistoryEntry] = []
        self.store = CandidateStore()

    def load(self, database_path: Optional[str]) -> CandidateStore:
        """Load history entries and build the candidate store

        Raises:
            HistorySourceError: If the history database cannot be read
        """
        self.entries = load_history(database_path, self.config["historySettings"]["maxUrlLength"])
        self.store = CandidateStore.from_records((entry.label, entry.locator) for entry in self.entries)
        return self.store

    def pick(self, terminal: Optional[TerminalSession] = None) -> Optional[Candidate]:
        """Run one interactive session over the loaded candidates

        Returns:
            Optional[Candidate]: The selected candidate, or None when cancelled
        """
        if self.store.is_empty():
            return None

        picker_settings = self.config["pickerSettings"]
        with terminal or TerminalSession(console=self.console) as session:
            return run_session(
                self.store,
                session,
                session,
                limit=picker_settings["resultLimit"],
                poll_timeout=picker_settings["pollTimeout"],
            )

    def entry_for(self, candidate: Candidate) -> HistoryEntry:
        """Map a selected candidate back to its history entry"""
        return self.entries[candidate.index]

def positive_int(value: str) -> int:
    """argparse type accepting only integers greater than zero"""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}")
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be greater than zero: {value}")
    return number

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="fuhl", description="Fuzzy-find a URL in your browser history and open it")

    source_group = parser.add_argument_group("history options")
    source_group.add_argument("--db", help=f"Path to the browser history database. Overrides ${DATABASE_ENV_VAR}")
    source_group.add_argument("--max-url-length", type=positive_int, help="Only list URLs shorter than this")

    picker_group = parser.add_argument_group("picker options")
    picker_group.add_argument("--limit", type=positive_int, help="Maximum number of matches shown")
    picker_group.add_argument("--print", dest="print_only", action="store_true", default=False,
                              help="Print the selected URL instead of opening it")

    parser.add_argument("--config", help="Path to a JSON configuration file")
    parser.add_argument("--debug", action="store_true", default=False, help="Log debug output to stderr")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser

def apply_overrides(config: Dict[str, Any], args: argparse.Namespace) -> Dict[str, Any]:
    """Apply command-line overrides on top of the loaded configuration"""
    if args.max_url_length is not None:
        config["historySettings"]["maxUrlLength"] = args.max_url_length
    if args.limit is not None:
        config["pickerSettings"]["resultLimit"] = args.limit
    if args.print_only:
        config["launchSettings"]["openInBrowser"] = False
    return config

def main(argv: Optional[List[str]] = None) -> int:
    """Run fuhl

    Returns:
        int: Process exit status
    """
    args = build_parser().parse_args(argv)
    configure_logging(args.debug)

    err_console = Console(stderr=True)
    config = apply_overrides(ConfigManager(err_console).load_configuration(args.config), args)
    database_path = resolve_database_path(args.db, config["databasePath"])

    picker = HistoryPicker(config)
    try:
        store = picker.load(database_path)
    except HistorySourceError as e:
        err_console.print(Panel(
            f"[bold red]{e}[/bold red]\n\n"
            f"Point fuhl at a history database with --db or the {DATABASE_ENV_VAR} environment variable.",
            title="History Not Available", border_style="red", expand=False
        ))
        return 1

    if store.is_empty():
        err_console.print("No URLs found")
        return 0

    try:
        selected = picker.pick()
    except OSError as e:
        logger.debug("Terminal failure", exc_info=True)
        err_console.print(Panel(
            f"[bold red]Terminal error:[/bold red] {e}",
            title="Error", border_style="red", expand=False
        ))
        return 1

    if selected is None:
        err_console.print("No selection made")
        return 0

    entry = picker.entry_for(selected)
    if config["launchSettings"]["openInBrowser"]:
        open_selection(entry.url, selected.display)
    else:
        print_selection(entry.url)
    return 0
