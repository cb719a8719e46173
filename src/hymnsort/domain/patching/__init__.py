"""Deterministic, source-specific corrections applied before reconciliation."""

from __future__ import annotations

from .context import PatchContext
from .operations import (
    RECIPROCAL_LABELS,
    AddLinks,
    AddReference,
    ClearLinks,
    ClearLinksMatching,
    PatchOperation,
    PurgeReferences,
    RemoveLinks,
    RemoveReference,
    ResetLinks,
    add_languages,
    add_reference,
    add_relevants,
    clear_languages,
    clear_relevants,
    link,
    remove_languages,
    remove_reference,
    remove_relevants,
    reset_languages,
    reset_relevants,
)
from .patcher import Patch, Patcher, patch

__all__ = [
    "RECIPROCAL_LABELS",
    "AddLinks",
    "AddReference",
    "ClearLinks",
    "ClearLinksMatching",
    "Patch",
    "PatchContext",
    "PatchOperation",
    "Patcher",
    "PurgeReferences",
    "RemoveLinks",
    "RemoveReference",
    "ResetLinks",
    "add_languages",
    "add_reference",
    "add_relevants",
    "clear_languages",
    "clear_relevants",
    "link",
    "patch",
    "remove_languages",
    "remove_reference",
    "remove_relevants",
    "reset_languages",
    "reset_relevants",
]
