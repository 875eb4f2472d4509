"""Fuzzy subsequence matching for the picker.

A query matches a candidate when its characters appear, in order, somewhere
in the candidate's display string after Unicode case folding. Matching
candidates are scored so that contiguous runs, matches near the start of the
string and matches right after a word boundary beat scattered matches.

Every frame re-scores the whole candidate list. Candidate counts are in the
hundreds to low thousands, so no incremental index is kept.
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple
from .store import Candidate, normalize
from ..utils.constants import DEFAULT_RESULT_LIMIT

# Per-character scoring. A character at position 0 earns SCORE_MATCH +
# BONUS_FIRST; any later query character earns at most SCORE_MATCH +
# BONUS_CONSECUTIVE. Gaps only subtract, so a whole-query prefix match always
# has the highest score a candidate can reach.
SCORE_MATCH = 16
BONUS_FIRST = 12
BONUS_CONSECUTIVE = 14
BONUS_BOUNDARY = 8
PENALTY_GAP = 1
PENALTY_LEADING = 1
MAX_LEADING_PENALTY = 12

WORD_SEPARATORS = frozenset(" \t-_./:?&=#@,;()[]|")

RankedView = Tuple[int, ...]


@dataclass(frozen=True)
class MatchResult:
    """Score of one matching candidate for one query."""

    candidate_index: int
    score: int


def _is_boundary(text: str, position: int) -> bool:
    if position == 0:
        return True
    previous = text[position - 1]
    return previous in WORD_SEPARATORS or previous.isspace()


def _align_from(query: str, text: str, start: int) -> Optional[int]:
    """Greedily match ``query`` in ``text`` with its first character at ``start``.

    Returns:
        Optional[int]: The alignment's score, or None if the rest of the query
        cannot be placed after ``start``
    """
    if start == 0:
        score = SCORE_MATCH + BONUS_FIRST
    else:
        score = SCORE_MATCH - min(start * PENALTY_LEADING, MAX_LEADING_PENALTY)
        if _is_boundary(text, start):
            score += BONUS_BOUNDARY

    last = start
    for char in query[1:]:
        position = text.find(char, last + 1)
        if position < 0:
            return None
        if position == last + 1:
            score += SCORE_MATCH + BONUS_CONSECUTIVE
        else:
            score += SCORE_MATCH - (position - last - 1) * PENALTY_GAP
            if _is_boundary(text, position):
                score += BONUS_BOUNDARY
        last = position
    return score


def score_candidate(query: str, text: str) -> Optional[int]:
    """Score an already-normalized query against an already-normalized text.

    Every occurrence of the query's first character is tried as a starting
    point and the best alignment wins.

    Returns:
        Optional[int]: Best score, or None when the query is not a subsequence
    """
    if not query:
        return 0
    if len(query) > len(text):
        return None

    best = None
    start = text.find(query[0])
    while start >= 0:
        score = _align_from(query, text, start)
        if score is None:
            # Later starts leave even less room for the rest of the query
            break
        if best is None or score > best:
            best = score
        start = text.find(query[0], start + 1)
    return best


def is_subsequence(query: str, text: str) -> bool:
    """Check whether ``query`` occurs in ``text`` as a case-insensitive subsequence."""
    remaining = iter(normalize(text))
    return all(char in remaining for char in normalize(query))


def rank(query: str, candidates: Sequence[Candidate], limit: int = DEFAULT_RESULT_LIMIT) -> List[MatchResult]:
    """Score and order the candidates matching a non-empty query.

    Args:
        query: Query text as typed
        candidates: Candidates in their original order
        limit: Maximum number of results to keep

    Returns:
        List[MatchResult]: Highest score first, ties by ascending index
    """
    folded_query = normalize(query)
    results = []
    for candidate in candidates:
        score = score_candidate(folded_query, candidate.folded)
        if score is not None:
            results.append(MatchResult(candidate.index, score))
    results.sort(key=lambda result: (-result.score, result.candidate_index))
    return results[:limit]


def match(query: str, candidates: Sequence[Candidate], limit: int = DEFAULT_RESULT_LIMIT) -> RankedView:
    """Compute the ranked view of ``candidates`` for ``query``.

    An empty or all-whitespace query keeps the original order and returns the
    first ``limit`` indices without scoring anything.

    Args:
        query: Query text as typed
        candidates: Candidates in their original order
        limit: Maximum size of the view

    Returns:
        RankedView: Tuple of candidate indices
    """
    if not query.strip():
        return tuple(candidate.index for candidate in candidates[:limit])
    return tuple(result.candidate_index for result in rank(query, candidates, limit))
