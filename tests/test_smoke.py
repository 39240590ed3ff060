"""Minimal smoke tests for project wiring."""

from __future__ import annotations

from pathlib import Path

import pytest

pytestmark = pytest.mark.unit


def test_registry_imports() -> None:
    """Import the registry package and verify the public entry points exist."""

    from registry import DefinitionStore, RegistrationReplayer

    assert callable(DefinitionStore.append)
    assert callable(RegistrationReplayer.replay_all)


def test_django_project_loads() -> None:
    """Import and initialize Django to verify settings are valid."""

    import os

    import django
    from django.conf import settings

    os.environ.setdefault("DJANGO_SETTINGS_MODULE", "cptgen.settings")
    django.setup()
    assert "core.apps.CoreConfig" in settings.INSTALLED_APPS
    assert "definitions.apps.DefinitionsConfig" in settings.INSTALLED_APPS
    assert settings.CPTG_OPTION_NAME == "cptg_settings"


def test_registry_package_has_no_django_imports() -> None:
    """The registry package stays Django-free."""

    registry_dir = Path(__file__).resolve().parent.parent / "registry"
    for path in registry_dir.rglob("*.py"):
        source = path.read_text(encoding="utf-8")
        assert "import django" not in source, path
        assert "from django" not in source, path


def test_server_entry_points_call_the_startup_replay() -> None:
    """WSGI and ASGI modules run the startup replay, and locale paths exist."""

    from django.conf import settings

    project_dir = Path(__file__).resolve().parent.parent / "cptgen"
    for name in ("wsgi.py", "asgi.py"):
        source = (project_dir / name).read_text(encoding="utf-8")
        assert "replay_on_startup()" in source, name
    for locale_path in getattr(settings, "LOCALE_PATHS", ()):
        assert Path(locale_path).is_dir(), locale_path
