"""Integration tests for the content type generator settings page."""

from __future__ import annotations

import pytest
from django.urls import reverse

from core.catalog import CATALOG
from definitions.models import SettingsOption
from definitions.storage import OptionSlot
from registry.store import DefinitionStore

pytestmark = pytest.mark.integration


def _post(client, post_type: str, singular: str, plural: str):
    return client.post(
        reverse("core:content_type_generator"),
        data={
            "cptg_post_type": post_type,
            "cptg_singular_name": singular,
            "cptg_plural_name": plural,
        },
    )


@pytest.mark.django_db
def test_anonymous_users_are_redirected_to_login(client) -> None:
    """The page requires authentication."""

    response = client.get(reverse("core:content_type_generator"))

    assert response.status_code == 302
    assert response["Location"].startswith("/accounts/login/")


def test_users_without_manage_permission_are_forbidden(auth_client) -> None:
    """Authenticated users need the manage permission."""

    response = auth_client.get(reverse("core:content_type_generator"))

    assert response.status_code == 403


def test_page_renders_form_and_empty_list(manager_client) -> None:
    """The page shows the form and the empty-state message."""

    response = manager_client.get(reverse("core:content_type_generator"))

    assert response.status_code == 200
    html = response.content.decode("utf-8")
    assert "Custom Post Type Generator" in html
    assert "Create a New Custom Post Type" in html
    assert "Fill in the details to create a new custom post type." in html
    assert 'name="cptg_post_type"' in html
    assert 'name="cptg_singular_name"' in html
    assert 'name="cptg_plural_name"' in html
    assert "Save Settings" in html
    assert "Registered Custom Post Types" in html
    assert "No custom post types found." in html


def test_valid_submission_is_stored_and_registered(manager_client) -> None:
    """A fresh definition is persisted, replayed, and listed."""

    response = _post(manager_client, "Movie", "Movie", "Movies")

    assert response.status_code == 302
    assert response["Location"] == reverse("core:content_type_generator")
    assert [definition.type_key for definition in DefinitionStore(OptionSlot()).read_all()] == ["movie"]
    registration = CATALOG.get("movie")
    assert registration is not None
    assert registration.labels.name == "Movies"

    html = manager_client.get(reverse("core:content_type_generator")).content.decode("utf-8")
    assert "<p>movie</p>" in html
    assert "No custom post types found." not in html
    assert "Settings saved." in html


def test_duplicate_submission_is_rejected_with_duplicate_message(manager_client) -> None:
    """A second submission with the same identifier is rejected and reported."""

    _post(manager_client, "Movie", "Movie", "Movies")
    before = SettingsOption.objects.get(name="cptg_settings").value

    response = _post(manager_client, "movie", "Film", "Films")

    assert response.status_code == 200
    assert "already exists" in response.content.decode("utf-8")
    assert SettingsOption.objects.get(name="cptg_settings").value == before
    assert CATALOG.get("movie").labels.name == "Movies"


def test_invalid_identifier_is_rejected_with_invalid_message(manager_client) -> None:
    """Identifiers without allowed characters are rejected and reported."""

    response = _post(manager_client, "!!!", "Thing", "Things")

    assert response.status_code == 200
    html = response.content.decode("utf-8")
    assert "Enter a post type" in html
    assert "already exists" not in html
    assert not SettingsOption.objects.filter(name="cptg_settings").exists()


def test_incomplete_submission_is_stored_but_not_registered(manager_client) -> None:
    """Definitions with empty labels are kept in storage and skipped at replay."""

    response = _post(manager_client, "draft", "Draft", "")

    assert response.status_code == 302
    assert [definition.type_key for definition in DefinitionStore(OptionSlot()).read_all()] == ["draft"]
    assert CATALOG.get("draft") is None


def test_labels_are_escaped_when_rendered(manager_client) -> None:
    """Stored labels are plain text and escaped by the template layer."""

    _post(manager_client, "fish", "Fish & Chips", "Fish & Chips")

    html = manager_client.get(reverse("core:content_type_generator")).content.decode("utf-8")
    assert "Fish &amp; Chips" in html
    assert DefinitionStore(OptionSlot()).read_all()[0].singular_label == "Fish & Chips"


def test_content_types_api_lists_generated_registrations(manager_client) -> None:
    """The JSON endpoint exposes generated registrations."""

    _post(manager_client, "Movie", "Movie", "Movies")

    response = manager_client.get(reverse("core:content_types_api"))

    assert response.status_code == 200
    payload = response.json()["content_types"]
    assert len(payload) == 1
    assert payload[0]["type_key"] == "movie"
    assert payload[0]["rewrite_slug"] == "movie"
    assert payload[0]["labels"]["all_items"] == "All Movies"
    assert payload[0]["supports"] == ["title", "editor", "thumbnail"]
    assert payload[0]["source_tag"] == "cptg_plugin"
