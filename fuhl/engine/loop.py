"""Single-threaded render/input loop driving one picker session."""

import logging
from typing import Iterable, List, Optional, Protocol, Sequence
from .state import Event, SessionState, dispatch, refresh
from .store import Candidate
from ..utils.constants import DEFAULT_POLL_TIMEOUT, DEFAULT_RESULT_LIMIT

logger = logging.getLogger(__name__)


class EventSource(Protocol):
    """Supplies key events. ``poll`` must return within ``timeout`` seconds."""

    def poll(self, timeout: float) -> Iterable[Event]: ...


class RenderSink(Protocol):
    """Draws one full frame."""

    def render(self, query: str, items: List[str], selected: int) -> None: ...


def run_session(
    candidates: Sequence[Candidate],
    events: EventSource,
    renderer: RenderSink,
    limit: int = DEFAULT_RESULT_LIMIT,
    poll_timeout: float = DEFAULT_POLL_TIMEOUT,
) -> Optional[Candidate]:
    """Run the picker until the user accepts or cancels.

    Each iteration refreshes the ranked view, draws a frame and waits at most
    ``poll_timeout`` seconds for input. A timeout just redraws the unchanged
    state.

    Args:
        candidates: Candidates in their original order
        events: Input collaborator
        renderer: Render sink
        limit: Maximum size of the ranked view
        poll_timeout: Seconds to wait for input per iteration

    Returns:
        Optional[Candidate]: The accepted candidate, or None if cancelled
    """
    state = SessionState()
    while True:
        state = refresh(state, candidates, limit)
        renderer.render(
            state.query,
            [candidates[index].display for index in state.ranked_view],
            state.selection,
        )

        for event in events.poll(poll_timeout):
            transition = dispatch(state, event)
            if transition.done:
                if transition.selected is None:
                    logger.debug("Session cancelled with query %r", state.query)
                    return None
                logger.debug("Accepted candidate %d with query %r", transition.selected, state.query)
                return candidates[transition.selected]
            # Later events in the same batch must see the view for the new query
            state = refresh(transition.state, candidates, limit)
