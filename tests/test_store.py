"""Tests for the candidate store."""

import pytest

from fuhl.engine.store import Candidate, CandidateStore, format_display


def test_format_display_with_label():
    assert format_display("  Example Docs ", "docs.example.com") == "Example Docs - docs.example.com"


@pytest.mark.parametrize("label", ["", "   ", "\n", None])
def test_format_display_blank_label_uses_locator(label):
    assert format_display(label, "https://example.com/") == "https://example.com/"


def test_format_display_replaces_newlines():
    display = format_display("Multi\nline title", "https://example.com/a\nb")
    assert "\n" not in display
    assert display == "Multi line title - https://example.com/a b"


def test_store_is_index_aligned():
    records = [("B", "b.org"), ("", "a.org"), ("C", "c.org")]
    store = CandidateStore.from_records(records)

    assert len(store) == 3
    assert [candidate.index for candidate in store] == [0, 1, 2]
    assert store[1] == Candidate(1, "a.org")
    assert store.displays([2, 0]) == ["C - c.org", "B - b.org"]


def test_store_normalizes_display_strings():
    store = CandidateStore(["line one\nline two"])
    assert store[0].display == "line one line two"


def test_store_keeps_duplicates():
    store = CandidateStore(["same", "same"])
    assert [candidate.index for candidate in store] == [0, 1]


def test_empty_store():
    store = CandidateStore.from_records([])
    assert store.is_empty()
    assert len(store) == 0


def test_candidates_are_immutable():
    store = CandidateStore(["a"])
    with pytest.raises(AttributeError):
        store[0].display = "b"


def test_candidates_carry_folded_text():
    store = CandidateStore(["Straße DOCS"])
    assert store[0].folded == "strasse docs"
    assert store[0] == Candidate(0, "Straße DOCS")
