"""Runtime content type catalog.

The catalog is the host's registration sink: replay hands each derived
Registration to `register`, and views list what is currently registered.
Registrations live only for the life of the process.
"""

from __future__ import annotations

import threading

from registry.dto import Registration


class ContentTypeCatalog:
    """In-process catalog of registered content types, keyed by type key."""

    def __init__(self) -> None:
        """Initialize an empty catalog."""

        self._entries: dict[str, Registration] = {}
        self._lock = threading.Lock()

    def register(self, registration: Registration) -> None:
        """Register a content type, replacing any entry with the same key.

        Args:
            registration: Registration to make effective.
        """

        with self._lock:
            self._entries[registration.type_key] = registration

    def get(self, type_key: str) -> Registration | None:
        """Return the registration for `type_key`, or None when missing."""

        with self._lock:
            return self._entries.get(type_key)

    def all(self) -> tuple[Registration, ...]:
        """Return all registrations in first-registered order."""

        with self._lock:
            return tuple(self._entries.values())

    def generated(self) -> tuple[Registration, ...]:
        """Return only registrations derived from stored definitions."""

        return tuple(registration for registration in self.all() if registration.is_generated)

    def clear(self) -> None:
        """Remove every registration."""

        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


CATALOG = ContentTypeCatalog()
