"""Definition store: append-with-dedup over a host-supplied persisted slot."""

from __future__ import annotations

import json
import logging
import threading
from collections.abc import Iterator, Mapping, Sequence
from contextlib import AbstractContextManager, contextmanager
from typing import Any, Protocol

from .codec import decode_definitions, encode_definitions
from .dto import AppendResult, CandidateDefinition, Definition, RejectReason
from .normalize import normalize_candidate

logger = logging.getLogger(__name__)


class DefinitionSlot(Protocol):
    """An opaque key/value cell holding the serialized definition sequence.

    `load` returns the JSON-compatible payload (or None when nothing has been
    stored). `save` replaces it. `locked` opens an exclusive write section;
    a load-check-save sequence inside it is atomic with respect to other
    writers.
    """

    def load(self) -> Any: ...

    def save(self, payload: list[dict[str, str]]) -> None: ...

    def locked(self) -> AbstractContextManager[None]: ...


class MemorySlot:
    """In-process slot that round-trips payloads through JSON."""

    def __init__(self, payload: Any = None) -> None:
        """Initialize the slot, optionally with an existing payload."""

        self._raw: str | None = None if payload is None else json.dumps(payload)
        self._lock = threading.RLock()

    def load(self) -> Any:
        """Return a fresh copy of the stored payload."""

        with self._lock:
            if self._raw is None:
                return None
            return json.loads(self._raw)

    def save(self, payload: list[dict[str, str]]) -> None:
        """Replace the stored payload."""

        with self._lock:
            self._raw = json.dumps(payload)

    @contextmanager
    def locked(self) -> Iterator[None]:
        """Hold the slot lock for the duration of the block."""

        with self._lock:
            yield


class DefinitionStore:
    """Owns the ordered, persisted sequence of definitions.

    The store's only uniqueness constraint is the normalized type key. Labels
    may collide freely.
    """

    def __init__(self, slot: DefinitionSlot, *, max_key_length: int | None = None) -> None:
        """Initialize a store.

        Args:
            slot: Persisted slot holding the serialized sequence.
            max_key_length: Host-enforced maximum identifier length, or None
                for no limit.
        """

        self._slot = slot
        self._max_key_length = max_key_length

    def read_all(self) -> tuple[Definition, ...]:
        """Return every stored definition in insertion order."""

        return decode_definitions(self._slot.load())

    def append(self, candidate: CandidateDefinition | Sequence[object] | Mapping[str, object]) -> AppendResult:
        """Normalize a candidate and append it when its identifier is new.

        Args:
            candidate: Raw 3-field input from a form submission or import file.

        Returns:
            AppendResult describing whether the definition was stored and, when
            it was not, why.
        """

        definition = normalize_candidate(candidate)
        if not definition.type_key or not self._key_length_ok(definition.type_key):
            logger.info("Rejected content type definition: invalid identifier %r", definition.type_key)
            return AppendResult(stored=False, reason=RejectReason.INVALID_IDENTIFIER, definition=definition)

        with self._slot.locked():
            existing = decode_definitions(self._slot.load())
            if any(row.type_key == definition.type_key for row in existing):
                logger.info("Rejected content type definition: duplicate identifier %r", definition.type_key)
                return AppendResult(stored=False, reason=RejectReason.DUPLICATE_IDENTIFIER, definition=definition)
            self._slot.save(encode_definitions((*existing, definition)))

        logger.info("Stored content type definition %r", definition.type_key)
        return AppendResult(stored=True, definition=definition)

    def _key_length_ok(self, type_key: str) -> bool:
        """Return True when `type_key` fits within the configured limit."""

        return self._max_key_length is None or len(type_key) <= self._max_key_length
