"""Concrete reconciliation phases."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from .audit import AUDIT_RULES, Auditor
from .closure import build_components, write_back

if TYPE_CHECKING:
    from hymnsort.domain.model import Hymn, Relation
    from hymnsort.domain.sources import SourceProfile

    from .context import ReconciliationContext

log = logging.getLogger(__name__)


@dataclass(slots=True)
class PatchPhase:
    """Apply one source's patches and register its exceptions for the audit."""

    profile: SourceProfile
    name: str = field(init=False)

    def __post_init__(self) -> None:
        self.name = f"patch:{self.profile.source}"

    def run(self, hymns: list[Hymn], *, context: ReconciliationContext) -> None:
        patched, _ = self.profile.patcher().apply(hymns, errors=context.errors)
        hymns[:] = patched
        context.exceptions.register_profile(self.profile)


@dataclass(slots=True)
class RelationPhase:
    """Closure, audit and write-back for one relation."""

    relation: Relation
    name: str = field(init=False)

    def __post_init__(self) -> None:
        self.name = f"reconcile:{self.relation}"

    def run(self, hymns: list[Hymn], *, context: ReconciliationContext) -> None:
        components = build_components(hymns, self.relation, errors=context.errors)
        auditor = Auditor(
            rules=AUDIT_RULES[self.relation],
            exceptions=context.exceptions,
            errors=context.errors,
            policy=context.policy,
        )
        auditor.audit(components)
        written = write_back(hymns, self.relation, components)

        stats = context.stats_for(self.relation)
        stats.components = len(components)
        stats.written_back = written
        log.info(
            "Reconciled %s: components=%s, written_back=%s",
            self.relation,
            stats.components,
            stats.written_back,
        )


@dataclass(slots=True)
class ObsoleteExceptionPhase:
    """Report every registered exception no audit needed during this run."""

    name: str = "report:obsolete_exceptions"

    def run(self, hymns: list[Hymn], *, context: ReconciliationContext) -> None:
        _ = hymns
        for relation, rules in AUDIT_RULES.items():
            Auditor(
                rules=rules,
                exceptions=context.exceptions,
                errors=context.errors,
                policy=context.policy,
            ).report_obsolete()
            log.debug("Reported obsolete %s exceptions", relation)
