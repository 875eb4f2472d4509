"""Candidate storage for the picker.

This module turns raw (label, locator) records into the immutable,
index-addressable list of display strings the matcher and the session
work against.
"""

import unicodedata
from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Sequence, Tuple, overload
from ..utils.constants import DISPLAY_SEPARATOR


def normalize(text: str) -> str:
    """Fold text for case-insensitive comparison independent of the locale."""
    return unicodedata.normalize("NFKC", text).casefold()


@dataclass(frozen=True)
class Candidate:
    """One selectable item: its position in the original order and its text.

    ``folded`` is ``normalize(display)``, computed once at construction.
    """

    index: int
    display: str
    folded: str = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "folded", normalize(self.display))


def _single_line(text: str) -> str:
    """Replace line breaks with single spaces."""
    return text.replace("\r\n", " ").replace("\n", " ").replace("\r", " ")


def format_display(label: str, locator: str) -> str:
    """Build the display string for one record.

    Args:
        label: Human-readable title (may be empty)
        locator: Raw locator such as a URL

    Returns:
        str: ``"<label> - <locator>"``, or just the locator when the label is blank
    """
    label = _single_line(label or "").strip()
    locator = _single_line(locator or "")
    if not label:
        return locator
    return f"{label}{DISPLAY_SEPARATOR}{locator}"


class CandidateStore(Sequence[Candidate]):
    """Read-only, index-aligned sequence of candidates.

    The store is built once before the interactive session starts and is
    never mutated afterwards. Everything else refers to candidates by index.
    """

    def __init__(self, displays: Iterable[str] = ()):
        self._candidates: Tuple[Candidate, ...] = tuple(
            Candidate(index, _single_line(display)) for index, display in enumerate(displays)
        )

    @classmethod
    def from_records(cls, records: Iterable[Tuple[str, str]]) -> "CandidateStore":
        """Build a store from ``(label, locator)`` pairs, keeping their order."""
        return cls(format_display(label, locator) for label, locator in records)

    @overload
    def __getitem__(self, index: int) -> Candidate: ...

    @overload
    def __getitem__(self, index: slice) -> Sequence[Candidate]: ...

    def __getitem__(self, index):
        return self._candidates[index]

    def __len__(self) -> int:
        return len(self._candidates)

    def __iter__(self) -> Iterator[Candidate]:
        return iter(self._candidates)

    def is_empty(self) -> bool:
        return not self._candidates

    def displays(self, indices: Iterable[int]) -> List[str]:
        """Resolve candidate indices to their display strings."""
        return [self._candidates[i].display for i in indices]
