"""Unit tests for definition normalization."""

from __future__ import annotations

import pytest

from registry.dto import CandidateDefinition, Definition
from registry.normalize import coerce_candidate, normalize_candidate, normalize_type_key, sanitize_label

pytestmark = pytest.mark.unit


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("Movie", "movie"),
        ("  Movie  ", "movie"),
        ("My Movies!", "mymovies"),
        ("book_review-2", "book_review-2"),
        ("Émile", "mile"),
        ("!!!", ""),
        ("", ""),
        (None, ""),
    ],
)
def test_normalize_type_key(raw: object, expected: str) -> None:
    """Identifiers are trimmed, lowercased, and restricted to `[a-z0-9_-]`."""

    assert normalize_type_key(raw) == expected


def test_sanitize_label_strips_markup_and_collapses_whitespace() -> None:
    """Tags, script bodies, control characters, and whitespace runs are removed."""

    assert sanitize_label("  <b>Movie</b>  ") == "Movie"
    assert sanitize_label("<script>alert(1)</script>Films") == "Films"
    assert sanitize_label("Line\nbreak\tTab") == "Line break Tab"
    assert sanitize_label("\u200bMovie\ufeff") == "Movie"
    assert sanitize_label("Bell\x07") == "Bell"


def test_sanitize_label_stores_text_unescaped() -> None:
    """Labels are stored as plain text; escaping belongs to the renderer."""

    assert sanitize_label("Fish & Chips") == "Fish & Chips"
    assert sanitize_label("Q&A \"Threads\"") == "Q&A \"Threads\""


def test_coerce_candidate_accepts_sequences_and_mappings() -> None:
    """Form mappings and 3-sequences both coerce into CandidateDefinition."""

    assert coerce_candidate(("movie", "Movie", "Movies")) == CandidateDefinition("movie", "Movie", "Movies")
    assert coerce_candidate(
        {"cptg_post_type": "movie", "cptg_singular_name": "Movie", "cptg_plural_name": "Movies"}
    ) == CandidateDefinition("movie", "Movie", "Movies")
    assert coerce_candidate({"cptg_post_type": "movie"}) == CandidateDefinition("movie", "", "")


@pytest.mark.parametrize("raw", ["abc", 5, ["movie", "Movie"], ("a", "b", "c", "d")])
def test_coerce_candidate_rejects_malformed_input(raw: object) -> None:
    """Anything other than a mapping or 3-item sequence is rejected."""

    with pytest.raises(ValueError):
        coerce_candidate(raw)  # type: ignore[arg-type]


def test_normalize_candidate() -> None:
    """All three fields are normalized together."""

    assert normalize_candidate(("  Movie ", " Movie ", "<i>Movies</i>")) == Definition("movie", "Movie", "Movies")
    assert normalize_candidate((None, None, None)) == Definition("", "", "")
