"""Admin registrations for definitions models."""

from __future__ import annotations

from django.contrib import admin
from django.http import HttpRequest

from definitions.models import SettingsOption


@admin.register(SettingsOption)
class SettingsOptionAdmin(admin.ModelAdmin):
    """Read-only admin for stored options.

    Definitions are appended through the content type generator page so the
    normalization and dedup rules always apply.
    """

    list_display = ("name", "updated_at")
    search_fields = ("name",)
    readonly_fields = ("name", "value", "updated_at")

    def has_add_permission(self, request: HttpRequest) -> bool:
        """Disallow creating options from the admin."""

        return False

    def has_change_permission(self, request: HttpRequest, obj: SettingsOption | None = None) -> bool:
        """Disallow editing options from the admin."""

        return False
