"""ASGI config for cptgen.

This exposes the ASGI callable as a module-level variable named `application`
and replays stored content type definitions into the runtime catalog once
per process.
"""

from __future__ import annotations

import os

from django.core.asgi import get_asgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "cptgen.settings")

application = get_asgi_application()

from core.services import replay_on_startup  # noqa: E402

replay_on_startup()
