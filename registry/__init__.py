"""Pure definition registry for the content type generator.

This package owns the definition data model, normalization rules, the
append-with-dedup store, and the replay step that derives runtime
registrations. It must not import Django or perform any database I/O;
persistence is delegated to a host-supplied slot.
"""

from .dto import AppendResult, Definition, Registration, RejectReason, ReplayResult
from .replay import RegistrationReplayer
from .store import DefinitionStore

__all__ = [
    "AppendResult",
    "Definition",
    "DefinitionStore",
    "Registration",
    "RegistrationReplayer",
    "RejectReason",
    "ReplayResult",
]
