"""Service-layer functions for the core app.

Services in `core` wire the Django-backed option slot, the runtime catalog,
and Django's translation lookup into the pure `registry` store and replayer.
Collaborators are passed explicitly; nothing here keeps a global store.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence

from django.conf import settings
from django.utils.translation import gettext

from core.catalog import CATALOG, ContentTypeCatalog
from definitions.storage import OptionSlot
from registry.dto import AppendResult, CandidateDefinition, ReplayResult
from registry.replay import RegistrationReplayer
from registry.store import DefinitionStore

logger = logging.getLogger(__name__)


def definition_store() -> DefinitionStore:
    """Return a DefinitionStore backed by the configured option row."""

    return DefinitionStore(OptionSlot(), max_key_length=settings.CPTG_TYPE_KEY_MAX_LENGTH)


def replay_content_types(
    *, catalog: ContentTypeCatalog = CATALOG, store: DefinitionStore | None = None
) -> ReplayResult:
    """Replay stored definitions into a catalog.

    Args:
        catalog: Registration sink to populate.
        store: Definition source; defaults to `definition_store()`.

    Returns:
        The ReplayResult for this pass.
    """

    replayer = RegistrationReplayer(store or definition_store(), sink=catalog, translate=gettext)
    return replayer.replay_all()


def replay_on_startup(*, catalog: ContentTypeCatalog = CATALOG) -> ReplayResult | None:
    """Run the startup replay when `CPTG_REPLAY_ON_STARTUP` is enabled.

    Returns:
        The ReplayResult, or None when startup replay is disabled.
    """

    if not settings.CPTG_REPLAY_ON_STARTUP:
        logger.info("Startup content type replay disabled")
        return None
    return replay_content_types(catalog=catalog)


def submit_definition(
    candidate: CandidateDefinition | Sequence[object] | Mapping[str, object],
    *,
    catalog: ContentTypeCatalog = CATALOG,
) -> AppendResult:
    """Append a submitted definition and make it live when stored.

    A successful append is followed by a replay so the new content type is
    registered without waiting for the next process start.

    Args:
        candidate: Raw form or import input.
        catalog: Registration sink refreshed after a successful append.

    Returns:
        The store's AppendResult.
    """

    store = definition_store()
    result = store.append(candidate)
    if result.stored:
        replay_content_types(catalog=catalog, store=store)
    return result
