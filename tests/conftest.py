"""Pytest fixtures shared across registry and Django integration tests."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

import pytest
from django.contrib.auth import get_user_model

from core.catalog import CATALOG


@pytest.fixture(autouse=True)
def _reset_catalog() -> Iterator[None]:
    """Start and finish every test with an empty runtime catalog."""

    CATALOG.clear()
    yield
    CATALOG.clear()


@pytest.fixture
def user(db):
    """Return a regular user without content type permissions."""

    user_model = get_user_model()
    return user_model.objects.create_user(username="alice", password="password")


@pytest.fixture
def auth_client(client, user):
    """Return a Django test client authenticated as the regular user."""

    client.force_login(user)
    return client


@pytest.fixture
def manager(db):
    """Return a staff user allowed to manage content type settings."""

    from django.contrib.auth.models import Permission

    user_model = get_user_model()
    manager = user_model.objects.create_user(username="manager", password="password", is_staff=True)
    manager.user_permissions.add(
        Permission.objects.get(content_type__app_label="definitions", codename="change_settingsoption")
    )
    return manager


@pytest.fixture
def manager_client(client, manager):
    """Return a Django test client authenticated as the manager."""

    client.force_login(manager)
    return client


def pytest_collection_modifyitems(items: Sequence[pytest.Item]) -> None:
    """Enforce that every test has exactly one speed marker.

    - `unit`: pure, fast tests with no database access.
    - `integration`: tests touching Django, database, views, commands, or IO.
    """

    invalid: list[str] = []
    for item in items:
        has_unit = item.get_closest_marker("unit") is not None
        has_integration = item.get_closest_marker("integration") is not None
        if has_unit == has_integration:
            markers = []
            if has_unit:
                markers.append("unit")
            if has_integration:
                markers.append("integration")
            invalid.append(f"{item.nodeid} (markers={markers or 'none'})")

    if invalid:
        joined = "\n".join(f"- {nodeid}" for nodeid in invalid)
        raise pytest.UsageError(
            "Each test must have exactly one speed marker: `@pytest.mark.unit` or "
            "`@pytest.mark.integration`.\n"
            f"Offending tests:\n{joined}"
        )
