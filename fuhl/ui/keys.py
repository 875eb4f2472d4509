"""Key input for the picker using prompt_toolkit.

This module reads raw key presses from a prompt_toolkit ``Input`` and turns
them into picker events.
"""

import logging
import select
from typing import Iterable, List
from prompt_toolkit.input import Input
from prompt_toolkit.key_binding import KeyPress
from prompt_toolkit.keys import Keys
from ..engine.state import Char, Event, Key

logger = logging.getLogger(__name__)

KEY_EVENTS = {
    Keys.ControlH: Key.BACKSPACE,  # also Backspace / DEL
    Keys.Up: Key.UP,
    Keys.ControlP: Key.UP,
    Keys.ControlK: Key.UP,
    Keys.Down: Key.DOWN,
    Keys.ControlN: Key.DOWN,
    Keys.ControlJ: Key.DOWN,
    Keys.Escape: Key.CANCEL,
    Keys.ControlC: Key.CANCEL,
    Keys.ControlG: Key.CANCEL,
    Keys.ControlM: Key.ACCEPT,  # Enter
}


def _is_printable(char: str) -> bool:
    return len(char) == 1 and char.isprintable()


def translate_key_press(key_press: KeyPress) -> List[Event]:
    """Convert one prompt_toolkit key press into picker events.

    Args:
        key_press: Key press as parsed by prompt_toolkit

    Returns:
        List[Event]: Usually a single event; a bracketed paste yields one
        character event per printable pasted character
    """
    key = key_press.key
    if key == Keys.BracketedPaste:
        return [Char(char) for char in key_press.data if _is_printable(char)]
    if isinstance(key, Keys):
        return [KEY_EVENTS.get(key, Key.OTHER)]
    if _is_printable(key):
        return [Char(key)]
    return [Key.OTHER]


def translate_key_presses(key_presses: Iterable[KeyPress]) -> List[Event]:
    """Convert a batch of key presses, keeping their order.

    An Escape followed by another key in the same batch is an Alt/Meta chord
    (``ESC b`` for Alt-B) and becomes a single ``Key.OTHER``. Only a lone
    Escape cancels.
    """
    key_presses = list(key_presses)
    events = []
    position = 0
    while position < len(key_presses):
        key_press = key_presses[position]
        if key_press.key == Keys.Escape and position + 1 < len(key_presses):
            events.append(Key.OTHER)
            position += 2
            continue
        events.extend(translate_key_press(key_press))
        position += 1
    return events


class KeyInput:
    """Input collaborator polling a prompt_toolkit ``Input`` with a timeout."""

    def __init__(self, terminal_input: Input):
        """Initialize the key input.

        Args:
            terminal_input: prompt_toolkit input, already in raw mode
        """
        self.terminal_input = terminal_input

    def poll(self, timeout: float) -> List[Event]:
        """Wait up to ``timeout`` seconds for key presses.

        When nothing arrives the parser is flushed, so a lone Escape held back
        while waiting for the rest of an escape sequence is delivered.

        Raises:
            OSError: The input stream was closed or could not be read
        """
        if self.terminal_input.closed:
            raise OSError("terminal input closed")

        ready, _, _ = select.select([self.terminal_input.fileno()], [], [], timeout)
        if ready:
            key_presses = self.terminal_input.read_keys()
        else:
            key_presses = self.terminal_input.flush_keys()

        events = translate_key_presses(key_presses)
        if events:
            logger.debug("Polled %d event(s)", len(events))
        return events
