"""Normalization and validation of raw definition input.

Normalization is pure: it turns one raw candidate into a Definition and never
looks at what is already stored. Merging into the stored sequence is the
store's job.
"""

from __future__ import annotations

import re
import unicodedata
from collections.abc import Mapping, Sequence

from .codec import FIELD_PLURAL, FIELD_SINGULAR, FIELD_TYPE_KEY
from .dto import CandidateDefinition, Definition

_INVALID_KEY_CHARS_RE = re.compile(r"[^a-z0-9_-]")
_TAG_BLOCK_RE = re.compile(r"<(script|style)\b[^>]*>.*?</\1\s*>", re.IGNORECASE | re.DOTALL)
_TAG_RE = re.compile(r"<[^>]*>")
_WHITESPACE_RE = re.compile(r"\s+")
_INVISIBLE_CHARS = ("\ufeff", "\u200b")


def normalize_type_key(raw: object) -> str:
    """Normalize a raw identifier.

    The identifier is trimmed, lowercased, and restricted to `[a-z0-9_-]`;
    every other character is removed.

    Args:
        raw: Raw identifier as submitted.

    Returns:
        The normalized identifier, possibly empty.
    """

    text = _as_text(raw).strip().lower()
    return _INVALID_KEY_CHARS_RE.sub("", text)


def sanitize_label(raw: object) -> str:
    """Sanitize a display label for storage.

    Markup tags (and the contents of script/style blocks) and control
    characters are removed and whitespace runs collapse to a single space.
    The result is stored unescaped; escaping belongs to the renderer.

    Args:
        raw: Raw label as submitted.

    Returns:
        The sanitized label, possibly empty.
    """

    text = _as_text(raw)
    for char in _INVISIBLE_CHARS:
        text = text.replace(char, "")
    text = _TAG_BLOCK_RE.sub("", text)
    text = _TAG_RE.sub("", text)
    text = "".join(" " if unicodedata.category(char) == "Cc" else char for char in text)
    return _WHITESPACE_RE.sub(" ", text).strip()


def coerce_candidate(raw: CandidateDefinition | Sequence[object] | Mapping[str, object]) -> CandidateDefinition:
    """Coerce form or file input into a CandidateDefinition.

    Args:
        raw: A 3-sequence `(type_key, singular, plural)` or a mapping keyed by
            the serialized field names.

    Returns:
        A CandidateDefinition with string fields.

    Raises:
        ValueError: When `raw` is neither a mapping nor a 3-item sequence.
    """

    if isinstance(raw, CandidateDefinition):
        return raw
    if isinstance(raw, Mapping):
        return CandidateDefinition(
            type_key=_as_text(raw.get(FIELD_TYPE_KEY)),
            singular_label=_as_text(raw.get(FIELD_SINGULAR)),
            plural_label=_as_text(raw.get(FIELD_PLURAL)),
        )
    if isinstance(raw, (str, bytes)) or not isinstance(raw, Sequence) or len(raw) != 3:
        raise ValueError("A candidate definition needs exactly three fields.")
    type_key, singular, plural = raw
    return CandidateDefinition(_as_text(type_key), _as_text(singular), _as_text(plural))


def normalize_candidate(raw: CandidateDefinition | Sequence[object] | Mapping[str, object]) -> Definition:
    """Normalize one raw candidate into a Definition.

    Args:
        raw: Raw candidate input (see `coerce_candidate`).

    Returns:
        A Definition whose fields are normalized but not validated for
        uniqueness. The type key may be empty.
    """

    candidate = coerce_candidate(raw)
    return Definition(
        type_key=normalize_type_key(candidate.type_key),
        singular_label=sanitize_label(candidate.singular_label),
        plural_label=sanitize_label(candidate.plural_label),
    )


def _as_text(value: object) -> str:
    """Return `value` as text, mapping None to an empty string."""

    if value is None:
        return ""
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    return str(value)
