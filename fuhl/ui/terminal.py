"""Scoped interactive terminal session.

Raw input mode and the alternate screen are acquired together when the
session is entered and released together, exactly once, when it is left:
after accept, cancel, or any error raised while drawing or polling.
"""

import logging
from contextlib import ExitStack
from typing import Callable, List, Optional
from prompt_toolkit.input import Input, create_input
from rich.console import Console
from rich.live import Live
from ..engine.state import Event
from .keys import KeyInput
from .render import RichRenderer

logger = logging.getLogger(__name__)


class TerminalSession:
    """Context manager owning the terminal for one picker session.

    While active it is both the input collaborator (``poll``) and the render
    sink (``render``) of the event loop. A session cannot be entered twice.
    """

    def __init__(self, console: Optional[Console] = None, input_factory: Callable[[], Input] = create_input):
        """Initialize the terminal session.

        Args:
            console: Rich console to draw on (optional, defaults to stderr so stdout stays free for the result)
            input_factory: Creates the prompt_toolkit input to read keys from
        """
        self.console = console or Console(stderr=True)
        self.input_factory = input_factory
        self.exit_stack: Optional[ExitStack] = None
        self.key_input: Optional[KeyInput] = None
        self.renderer: Optional[RichRenderer] = None
        self._used = False

    @property
    def active(self) -> bool:
        return self.exit_stack is not None

    def __enter__(self) -> "TerminalSession":
        if self._used:
            raise RuntimeError("Terminal session has already been used")
        self._used = True

        exit_stack = ExitStack()
        try:
            terminal_input = self.input_factory()
            exit_stack.enter_context(terminal_input.raw_mode())
            live = exit_stack.enter_context(
                Live(console=self.console, screen=True, auto_refresh=False, transient=True)
            )
        except BaseException:
            exit_stack.close()
            raise

        self.exit_stack = exit_stack
        self.key_input = KeyInput(terminal_input)
        self.renderer = RichRenderer(live, self.console)
        logger.debug("Entered interactive terminal mode")
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        exit_stack, self.exit_stack = self.exit_stack, None
        self.key_input = None
        self.renderer = None
        if exit_stack is not None:
            exit_stack.close()
            logger.debug("Left interactive terminal mode")

    def poll(self, timeout: float) -> List[Event]:
        if self.key_input is None:
            raise RuntimeError("Terminal session is not active")
        return self.key_input.poll(timeout)

    def render(self, query: str, items: List[str], selected: int) -> None:
        if self.renderer is None:
            raise RuntimeError("Terminal session is not active")
        self.renderer.render(query, items, selected)
