"""Print the stored content type definitions in serialized form."""

from __future__ import annotations

import json

import yaml
from django.core.management.base import BaseCommand

from core.services import definition_store
from registry.codec import encode_definitions


class Command(BaseCommand):
    """Export stored content type definitions."""

    help = "Print stored content type definitions as YAML or JSON."

    def add_arguments(self, parser) -> None:
        """Add command arguments."""

        parser.add_argument(
            "--format",
            choices=("yaml", "json"),
            default="yaml",
            help="Output format.",
        )

    def handle(self, *args, **options) -> str | None:
        """Run the command."""

        payload = encode_definitions(definition_store().read_all())
        if options["format"] == "json":
            self.stdout.write(json.dumps(payload, indent=2, ensure_ascii=False))
        else:
            self.stdout.write(yaml.safe_dump(payload, sort_keys=False, allow_unicode=True), ending="")
        return None
