"""Fuzzy filtering and selection engine."""

from .loop import EventSource, RenderSink, run_session
from .matcher import MatchResult, RankedView, match, rank
from .state import Char, Key, SessionState, Transition, dispatch, refresh
from .store import Candidate, CandidateStore, format_display

__all__ = [
    "Candidate",
    "CandidateStore",
    "Char",
    "EventSource",
    "Key",
    "MatchResult",
    "RankedView",
    "RenderSink",
    "SessionState",
    "Transition",
    "dispatch",
    "format_display",
    "match",
    "rank",
    "refresh",
    "run_session",
]
