"""Template context processors for cptgen."""

from __future__ import annotations

from django.http import HttpRequest

from core.catalog import CATALOG
from registry.dto import Registration


def generated_content_types(request: HttpRequest) -> dict[str, tuple[Registration, ...]]:
    """Expose generated content types to all templates for navigation.

    Args:
        request: Current request object.

    Returns:
        Context dict with `generated_content_types`.
    """

    return {"generated_content_types": CATALOG.generated()}
