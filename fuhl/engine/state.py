"""Session state and the update dispatcher.

The dispatcher is a pure ``(state, event) -> transition`` function. The event
loop holds the only mutable binding to the current state.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional, Sequence, Union
from .matcher import RankedView, match
from .store import Candidate
from ..utils.constants import DEFAULT_RESULT_LIMIT


class Key(Enum):
    """Non-character input events."""

    BACKSPACE = "backspace"
    UP = "up"
    DOWN = "down"
    CANCEL = "cancel"
    ACCEPT = "accept"
    OTHER = "other"


@dataclass(frozen=True)
class Char:
    """A printable character typed by the user."""

    char: str


Event = Union[Char, Key]


@dataclass(frozen=True)
class SessionState:
    """Query text, selection cursor and the most recent ranked view."""

    query: str = ""
    selection: int = 0
    ranked_view: RankedView = ()


@dataclass(frozen=True)
class Transition:
    """Result of dispatching one event.

    ``done`` ends the session; ``selected`` is the accepted candidate index,
    or None when the session was cancelled.
    """

    state: SessionState
    done: bool = False
    selected: Optional[int] = None


def clamp_selection(selection: int, view_size: int) -> int:
    """Clamp a selection into ``[0, view_size - 1]``, or 0 for an empty view."""
    if view_size <= 0:
        return 0
    return max(0, min(selection, view_size - 1))


def refresh(state: SessionState, candidates: Sequence[Candidate], limit: int = DEFAULT_RESULT_LIMIT) -> SessionState:
    """Re-run the matcher for the current query and clamp the selection."""
    ranked_view = match(state.query, candidates, limit)
    return replace(
        state,
        ranked_view=ranked_view,
        selection=clamp_selection(state.selection, len(ranked_view)),
    )


def dispatch(state: SessionState, event: Event) -> Transition:
    """Apply one input event to the session state.

    Never raises: every event is valid in every state. Accept on an empty
    ranked view is a no-op and keeps the session running.
    """
    if isinstance(event, Char):
        return Transition(replace(state, query=state.query + event.char, selection=0))

    if event is Key.BACKSPACE:
        return Transition(replace(state, query=state.query[:-1], selection=0))

    if event is Key.UP:
        return Transition(replace(state, selection=max(state.selection - 1, 0)))

    if event is Key.DOWN:
        if not state.ranked_view:
            return Transition(state)
        return Transition(replace(state, selection=min(state.selection + 1, len(state.ranked_view) - 1)))

    if event is Key.CANCEL:
        return Transition(state, done=True)

    if event is Key.ACCEPT:
        if not state.ranked_view:
            return Transition(state)
        return Transition(state, done=True, selected=state.ranked_view[clamp_selection(state.selection, len(state.ranked_view))])

    return Transition(state)
