"""Append content type definitions from a YAML or JSON file.

Each entry goes through the definition store exactly like a form submission,
so normalization and identifier-only dedup apply. Entries may be mappings
keyed by the serialized field names or `[type_key, singular, plural]` lists.
Every entry is shape-checked before anything is written. Replay is left to
the serving processes, which pick the new definitions up on their next start.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from django.conf import settings
from django.core.management.base import BaseCommand, CommandError
from django.db import transaction

from core.services import definition_store
from registry.codec import encode_definitions
from registry.dto import AppendResult, CandidateDefinition
from registry.normalize import coerce_candidate
from registry.store import DefinitionStore, MemorySlot


class Command(BaseCommand):
    """Load content type definitions from a file."""

    help = "Append content type definitions from a YAML/JSON list."

    def add_arguments(self, parser) -> None:
        """Add command arguments."""

        parser.add_argument("path", help="Path to a YAML or JSON file containing a list of definitions.")
        parser.add_argument(
            "--check",
            action="store_true",
            help="Dry-run: report what would be stored without writing.",
        )

    def handle(self, *args, **options) -> str | None:
        """Run the command."""

        entries = _read_entries(Path(options["path"]))
        check: bool = options["check"]

        candidates: list[CandidateDefinition] = []
        for index, entry in enumerate(entries):
            try:
                candidates.append(coerce_candidate(entry))
            except ValueError as exc:
                raise CommandError(f"Entry #{index} is not a valid definition: {exc}") from exc

        store = definition_store()
        if check:
            store = DefinitionStore(
                MemorySlot(encode_definitions(store.read_all())),
                max_key_length=settings.CPTG_TYPE_KEY_MAX_LENGTH,
            )

        mode = "CHECK" if check else "WRITE"
        results: list[AppendResult] = []
        with transaction.atomic():
            for candidate in candidates:
                result = store.append(candidate)
                results.append(result)
                type_key = result.definition.type_key if result.definition is not None else ""
                if result.stored:
                    self.stdout.write(f"[{mode}] stored {type_key}")
                else:
                    self.stdout.write(f"[{mode}] rejected {type_key or '<empty>'} ({result.reason})")

        stored = sum(1 for result in results if result.stored)
        self.stdout.write(f"[{mode}] stored={stored} rejected={len(results) - stored}")
        return None


def _read_entries(path: Path) -> list[Any]:
    """Read and shape-check the definition list from `path`.

    Raises:
        CommandError: When the file is unreadable, unparsable, or not a list.
    """

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise CommandError(f"Unable to read {path}: {exc}") from exc
    try:
        payload = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise CommandError(f"Unable to parse {path}: {exc}") from exc
    if payload is None:
        return []
    if not isinstance(payload, list):
        raise CommandError(f"{path} must contain a list of definitions.")
    return payload
