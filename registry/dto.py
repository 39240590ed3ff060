"""DTO types for the definition registry.

DTOs are plain, immutable data containers. They intentionally avoid any
Django/ORM dependencies so the store and replayer stay testable in isolation.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Final, NamedTuple

GENERATED_BY: Final[str] = "cptg_plugin"
SUPPORTED_SURFACES: Final[tuple[str, ...]] = ("title", "editor", "thumbnail")


class RejectReason(StrEnum):
    """Why an append was refused."""

    INVALID_IDENTIFIER = "invalid_identifier"
    DUPLICATE_IDENTIFIER = "duplicate_identifier"


class CandidateDefinition(NamedTuple):
    """Raw, unnormalized form input for one definition."""

    type_key: str
    singular_label: str
    plural_label: str


@dataclass(frozen=True, slots=True)
class Definition:
    """A persisted content type definition.

    Attributes:
        type_key: Normalized identifier (`[a-z0-9_-]`), also used as the rewrite slug.
        singular_label: Display label for one item.
        plural_label: Display label for many items.
    """

    type_key: str
    singular_label: str
    plural_label: str

    @property
    def is_complete(self) -> bool:
        """Return True when every field is non-empty."""

        return bool(self.type_key and self.singular_label and self.plural_label)


@dataclass(frozen=True, slots=True)
class RegistrationLabels:
    """Label bundle for a runtime registration."""

    name: str
    singular_name: str
    menu_name: str
    admin_bar_name: str
    add_new: str
    all_items: str


@dataclass(frozen=True, slots=True)
class Registration:
    """A fully-configured runtime content type derived from a Definition.

    Registrations are transient: they are recomputed on every replay and never
    persisted.

    Attributes:
        type_key: Identifier the host registers the content type under.
        labels: Display labels derived from the definition.
        public: Whether the content type is publicly queryable.
        has_archive: Whether an archive listing is enabled.
        rewrite_slug: URL slug for the content type.
        supports: Editing surfaces enabled for the content type.
        source_tag: Marker distinguishing generated registrations from host-owned ones.
    """

    type_key: str
    labels: RegistrationLabels
    public: bool = True
    has_archive: bool = True
    rewrite_slug: str = ""
    supports: tuple[str, ...] = SUPPORTED_SURFACES
    source_tag: str = GENERATED_BY

    @property
    def is_generated(self) -> bool:
        """Return True when this registration came from a stored definition."""

        return self.source_tag == GENERATED_BY


@dataclass(frozen=True, slots=True)
class AppendResult:
    """Outcome for a single append attempt.

    Attributes:
        stored: True when the definition was persisted.
        reason: Rejection reason when `stored` is False; otherwise None.
        definition: The normalized definition that was considered.
    """

    stored: bool
    reason: RejectReason | None = None
    definition: Definition | None = None


@dataclass(frozen=True, slots=True)
class ReplayResult:
    """Outcome for a replay pass.

    Attributes:
        registrations: Registrations emitted, in stored order.
        skipped: Number of incomplete definitions that were skipped.
    """

    registrations: tuple[Registration, ...] = ()
    skipped: int = 0
