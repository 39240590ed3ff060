"""Database models for the Definitions layer."""

from __future__ import annotations

from django.db import models
from django.utils import timezone


class SettingsOption(models.Model):
    """A named key/value option holding a JSON payload.

    The content type generator keeps its whole definition sequence in one
    option row. The payload is written only through the definition store;
    the admin exposes it read-only.
    """

    name = models.CharField(max_length=191, unique=True)
    value = models.JSONField(default=list, blank=True)
    updated_at = models.DateTimeField(default=timezone.now)

    class Meta:
        verbose_name = "Settings option"
        verbose_name_plural = "Settings options"

    def save(self, *args, **kwargs) -> None:
        """Save the option, refreshing `updated_at`."""

        self.updated_at = timezone.now()
        update_fields = kwargs.get("update_fields")
        if update_fields is not None and "updated_at" not in update_fields:
            kwargs["update_fields"] = [*update_fields, "updated_at"]
        super().save(*args, **kwargs)

    def __str__(self) -> str:
        """Return the option name for display contexts."""

        return self.name
