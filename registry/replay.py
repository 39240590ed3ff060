"""Registration replay: derive runtime registrations from stored definitions.

Replay is a pure function of the store's contents. It holds no state of its
own, so running it more than once over unchanged storage yields identical
registrations.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Protocol

from .dto import Definition, Registration, RegistrationLabels, ReplayResult
from .normalize import normalize_type_key, sanitize_label
from .store import DefinitionStore

logger = logging.getLogger(__name__)

Translate = Callable[[str], str]


class RegistrationSink(Protocol):
    """Host API that makes a Registration effective at runtime."""

    def register(self, registration: Registration) -> None: ...


def _identity(message: str) -> str:
    return message


def derive_registration(definition: Definition, *, translate: Translate = _identity) -> Registration:
    """Build the Registration for one complete definition.

    Args:
        definition: A complete Definition.
        translate: Localization lookup keyed by message id.

    Returns:
        The derived Registration with the fixed configuration template applied.
    """

    labels = RegistrationLabels(
        name=definition.plural_label,
        singular_name=definition.singular_label,
        menu_name=definition.plural_label,
        admin_bar_name=definition.singular_label,
        add_new=translate("Add New"),
        all_items=translate("All ") + definition.plural_label,
    )
    return Registration(
        type_key=definition.type_key,
        labels=labels,
        rewrite_slug=definition.type_key,
    )


class RegistrationReplayer:
    """Re-derive and emit registrations for every complete stored definition."""

    def __init__(
        self,
        store: DefinitionStore,
        *,
        sink: RegistrationSink | None = None,
        translate: Translate = _identity,
    ) -> None:
        """Initialize a replayer.

        Args:
            store: Source of stored definitions.
            sink: Optional host registration sink; each derived registration is
                handed to `sink.register` in stored order.
            translate: Localization lookup for fixed label strings.
        """

        self._store = store
        self._sink = sink
        self._translate = translate

    def replay_all(self) -> ReplayResult:
        """Derive registrations for all complete definitions.

        Stored rows are normalized first, so a row that only holds whitespace
        or markup counts as incomplete. Incomplete definitions are skipped and
        counted; they never block the others.

        Returns:
            ReplayResult with registrations in stored order and the skipped count.
        """

        registrations: list[Registration] = []
        skipped = 0
        for stored in self._store.read_all():
            definition = Definition(
                type_key=normalize_type_key(stored.type_key),
                singular_label=sanitize_label(stored.singular_label),
                plural_label=sanitize_label(stored.plural_label),
            )
            if not definition.is_complete:
                skipped += 1
                logger.debug("Skipping incomplete content type definition %r", stored)
                continue
            registration = derive_registration(definition, translate=self._translate)
            if self._sink is not None:
                self._sink.register(registration)
            registrations.append(registration)

        logger.info("Replayed content types: registered=%d skipped=%d", len(registrations), skipped)
        return ReplayResult(registrations=tuple(registrations), skipped=skipped)
