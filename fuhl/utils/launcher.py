"""
Acceptance sink for fuhl.

This module hands the selected history entry to the default web browser,
falling back to printing the selection when that is not possible.
"""
import logging
import sys
import webbrowser
from typing import Callable, TextIO

logger = logging.getLogger(__name__)

def open_selection(url: str, display: str, opener: Callable[[str], bool] = webbrowser.open,
                   out: TextIO = None, err: TextIO = None) -> bool:
    """Open a selected URL in the browser

    Args:
        url: URL of the selected entry
        display: Display string of the selected entry, printed as a fallback
        opener: Function opening a URL, returning False on failure
        out: Stream for the fallback output (default stdout)
        err: Stream for error messages (default stderr)

    Returns:
        bool: True if the browser accepted the URL
    """
    out = out or sys.stdout
    err = err or sys.stderr

    try:
        opened = opener(url)
        reason = "no usable browser found"
    except (webbrowser.Error, OSError) as e:
        opened = False
        reason = str(e)

    if opened:
        logger.debug("Opened %s", url)
        return True

    print(f"Failed to open URL {url}: {reason}", file=err)
    print(display, file=out)
    return False

def print_selection(url: str, out: TextIO = None) -> None:
    """Print a selected URL for use in pipelines"""
    print(url, file=out or sys.stdout)
