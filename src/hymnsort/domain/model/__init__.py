"""Public domain model surface."""

from __future__ import annotations

from hymnsort.domain.model.enums import (
    HymnLanguage,
    HymnType,
    Relation,
    Source,
    UnrecognizedHymnTypeError,
)
from hymnsort.domain.model.errors import (
    AmbiguousMembershipError,
    ErrorLog,
    ErrorType,
    MultipleNamelessLinksError,
    PipelineError,
    ReconciliationInvariantError,
    ReferenceResolutionError,
    Severity,
    UnresolvedLinkTargetError,
)
from hymnsort.domain.model.hymn import Hymn, IdSequence
from hymnsort.domain.model.references import SongLink, SongReference, ref

__all__ = [
    "AmbiguousMembershipError",
    "ErrorLog",
    "ErrorType",
    "Hymn",
    "HymnLanguage",
    "HymnType",
    "IdSequence",
    "MultipleNamelessLinksError",
    "PipelineError",
    "ReconciliationInvariantError",
    "ReferenceResolutionError",
    "Relation",
    "Severity",
    "SongLink",
    "SongReference",
    "Source",
    "UnrecognizedHymnTypeError",
    "UnresolvedLinkTargetError",
    "ref",
]
