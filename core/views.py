"""Views for the content type generator settings page."""

from __future__ import annotations

from dataclasses import asdict
from typing import Final

from django.conf import settings
from django.contrib import messages
from django.contrib.auth.decorators import login_required, permission_required
from django.http import HttpRequest, HttpResponse, JsonResponse
from django.shortcuts import redirect, render
from django.utils.translation import gettext as _
from django.utils.translation import gettext_lazy

from core.catalog import CATALOG
from core.forms import ContentTypeDefinitionForm
from core.services import submit_definition
from registry.codec import FIELD_TYPE_KEY
from registry.dto import RejectReason

MANAGE_PERMISSION: Final[str] = "definitions.change_settingsoption"

_REJECTION_MESSAGES = {
    RejectReason.INVALID_IDENTIFIER: gettext_lazy(
        "Enter a post type using letters, numbers, underscores or hyphens (at most %(limit)s characters)."
    ),
    RejectReason.DUPLICATE_IDENTIFIER: gettext_lazy("A custom post type named “%(key)s” already exists."),
}


@login_required
@permission_required(MANAGE_PERMISSION, raise_exception=True)
def content_type_generator(request: HttpRequest) -> HttpResponse:
    """Render the generator form and the list of generated content types.

    A POST appends one definition. Stored submissions redirect back to the
    page; rejected ones re-render the form with a message that distinguishes
    an invalid identifier from a duplicate.
    """

    if request.method == "POST":
        form = ContentTypeDefinitionForm(request.POST)
        if form.is_valid():
            result = submit_definition(form.to_candidate())
            if result.stored:
                messages.success(request, _("Settings saved."))
                return redirect("core:content_type_generator")
            type_key = result.definition.type_key if result.definition is not None else ""
            message = _REJECTION_MESSAGES[result.reason] % {
                "key": type_key,
                "limit": settings.CPTG_TYPE_KEY_MAX_LENGTH,
            }
            form.add_error(FIELD_TYPE_KEY, message)
    else:
        form = ContentTypeDefinitionForm()

    return render(
        request,
        "core/content_type_generator.html",
        {
            "form": form,
            "registered_types": CATALOG.generated(),
        },
    )


@login_required
def content_types_api(request: HttpRequest) -> JsonResponse:
    """Return generated content type registrations as JSON."""

    payload = [asdict(registration) for registration in CATALOG.generated()]
    return JsonResponse({"content_types": payload})

