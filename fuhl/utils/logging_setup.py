"""Logging configuration for fuhl."""

import logging
from rich.console import Console
from rich.logging import RichHandler

def configure_logging(debug: bool = False) -> None:
    """Send log records to stderr through rich.

    Args:
        debug: Log at DEBUG instead of WARNING
    """
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=debug, rich_tracebacks=True)],
        force=True,
    )
