"""Encoding/decoding helpers for the persisted definition sequence.

The persisted slot holds a JSON array of mappings, one per definition, keyed
by the same field names the settings form posts.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, Final

from .dto import Definition

FIELD_TYPE_KEY: Final[str] = "cptg_post_type"
FIELD_SINGULAR: Final[str] = "cptg_singular_name"
FIELD_PLURAL: Final[str] = "cptg_plural_name"


class DefinitionStorageError(ValueError):
    """Raised when the persisted slot does not hold a sequence of definitions."""


def encode_definition(definition: Definition) -> dict[str, str]:
    """Encode a Definition into a JSON-serializable dictionary."""

    return {
        FIELD_TYPE_KEY: definition.type_key,
        FIELD_SINGULAR: definition.singular_label,
        FIELD_PLURAL: definition.plural_label,
    }


def encode_definitions(definitions: Iterable[Definition]) -> list[dict[str, str]]:
    """Encode definitions into a list payload, preserving order.

    Args:
        definitions: Definitions in stored order.

    Returns:
        List payload safe for JSONField storage.
    """

    return [encode_definition(definition) for definition in definitions]


def decode_definitions(payload: Any) -> tuple[Definition, ...]:
    """Decode a stored payload into definitions.

    Missing fields decode as empty strings so partially-filled historical
    records survive as incomplete definitions instead of being dropped.

    Args:
        payload: Value previously produced by `encode_definitions`, or None when
            nothing has been stored yet.

    Returns:
        Definitions in stored order.

    Raises:
        DefinitionStorageError: When the payload is not a list of mappings.
    """

    if payload is None:
        return ()
    if not isinstance(payload, list):
        raise DefinitionStorageError(
            f"Stored definitions must be a list; got {type(payload).__name__}."
        )

    definitions: list[Definition] = []
    for index, row in enumerate(payload):
        if not isinstance(row, Mapping):
            raise DefinitionStorageError(
                f"Stored definition #{index} must be a mapping; got {type(row).__name__}."
            )
        definitions.append(
            Definition(
                type_key=_text(row.get(FIELD_TYPE_KEY)),
                singular_label=_text(row.get(FIELD_SINGULAR)),
                plural_label=_text(row.get(FIELD_PLURAL)),
            )
        )
    return tuple(definitions)


def _text(value: object) -> str:
    """Return a stored field value as a string."""

    if value is None:
        return ""
    return str(value)
