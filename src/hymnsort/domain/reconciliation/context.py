"""Shared state carried through one reconciliation run."""

from __future__ import annotations

from dataclasses import dataclass, field

from hymnsort.domain.model import ErrorLog, Relation

from .audit import AuditPolicy
from .exceptions import ExceptionRegistry


@dataclass(slots=True)
class RelationStats:
    components: int = 0
    written_back: int = 0


@dataclass(slots=True)
class ReconciliationContext:
    errors: ErrorLog = field(default_factory=ErrorLog)
    exceptions: ExceptionRegistry = field(default_factory=ExceptionRegistry)
    policy: AuditPolicy = field(default_factory=AuditPolicy)
    stats: dict[Relation, RelationStats] = field(default_factory=dict[Relation, RelationStats])

    def stats_for(self, relation: Relation) -> RelationStats:
        return self.stats.setdefault(relation, RelationStats())
