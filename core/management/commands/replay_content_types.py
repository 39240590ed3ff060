"""Replay stored content type definitions into the runtime catalog.

This is the same pass the WSGI/ASGI entry points run at process start; the
command prints what was registered so operators can inspect the result.
"""

from __future__ import annotations

from django.core.management.base import BaseCommand

from core.services import replay_content_types


class Command(BaseCommand):
    """Replay stored content type definitions."""

    help = "Derive runtime registrations from stored content type definitions."

    def handle(self, *args, **options) -> str | None:
        """Run the command."""

        result = replay_content_types()
        self.stdout.write(f"registered={len(result.registrations)} skipped={result.skipped}")
        for registration in result.registrations:
            self.stdout.write(
                f"- {registration.type_key}: {registration.labels.name} "
                f"(singular={registration.labels.singular_name}, slug={registration.rewrite_slug})"
            )
        return None
