"""Closure, audit and write-back of the cross-hymn relations."""

from __future__ import annotations

from .audit import (
    AUDIT_RULES,
    LANGUAGE_RULES,
    RELEVANT_RULES,
    AuditPolicy,
    Auditor,
    AuditRules,
    audit_components,
)
from .closure import Component, build_components, write_back
from .context import ReconciliationContext, RelationStats
from .exceptions import ExceptionRegistry, RegisteredException
from .graph import LinkGraph
from .naming import INFERRED_LINK_NAMES, infer_link_name
from .orchestrator import ReconciliationPhase, ReconciliationPipeline
from .phases import ObsoleteExceptionPhase, PatchPhase, RelationPhase
from .runner import ReconciliationResult, build_reconciliation_pipeline, run_reconciliation

__all__ = [
    "AUDIT_RULES",
    "INFERRED_LINK_NAMES",
    "LANGUAGE_RULES",
    "RELEVANT_RULES",
    "AuditPolicy",
    "AuditRules",
    "Auditor",
    "Component",
    "ExceptionRegistry",
    "LinkGraph",
    "ObsoleteExceptionPhase",
    "PatchPhase",
    "ReconciliationContext",
    "ReconciliationPhase",
    "ReconciliationPipeline",
    "ReconciliationResult",
    "RegisteredException",
    "RelationPhase",
    "RelationStats",
    "audit_components",
    "build_components",
    "build_reconciliation_pipeline",
    "infer_link_name",
    "run_reconciliation",
    "write_back",
]
