"""Database-backed slot for the definition store."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from django.conf import settings
from django.db import DEFAULT_DB_ALIAS, transaction

from definitions.models import SettingsOption


class OptionSlot:
    """Persist the serialized definition sequence in one SettingsOption row.

    `locked` opens a transaction and takes a row lock (`SELECT ... FOR
    UPDATE`) on the option so a load-check-save sequence cannot interleave
    with another writer. Database errors propagate to the caller.
    """

    def __init__(self, name: str | None = None, *, using: str = DEFAULT_DB_ALIAS) -> None:
        """Initialize the slot.

        Args:
            name: Option row name; defaults to `settings.CPTG_OPTION_NAME`.
            using: Database alias.
        """

        self.name = name or settings.CPTG_OPTION_NAME
        self.using = using

    def load(self) -> Any:
        """Return the stored payload, or None when the option does not exist."""

        return (
            SettingsOption.objects.using(self.using)
            .filter(name=self.name)
            .values_list("value", flat=True)
            .first()
        )

    def save(self, payload: list[dict[str, str]]) -> None:
        """Replace the stored payload."""

        SettingsOption.objects.using(self.using).update_or_create(name=self.name, defaults={"value": payload})

    @contextmanager
    def locked(self) -> Iterator[None]:
        """Hold a row lock on the option for the duration of the block."""

        with transaction.atomic(using=self.using):
            SettingsOption.objects.using(self.using).get_or_create(name=self.name, defaults={"value": []})
            SettingsOption.objects.using(self.using).select_for_update().get(name=self.name)
            yield
