"""Entry points for running reconciliation over a hymn snapshot."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from hymnsort.domain.model import Relation

from .context import ReconciliationContext, RelationStats
from .orchestrator import ReconciliationPipeline
from .phases import ObsoleteExceptionPhase, PatchPhase, RelationPhase

if TYPE_CHECKING:
    from collections.abc import Iterable

    from hymnsort.domain.model import Hymn, PipelineError
    from hymnsort.domain.sources import SourceProfile

    from .audit import AuditPolicy

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ReconciliationResult:
    hymns: list[Hymn]
    errors: tuple[PipelineError, ...]
    stats: dict[Relation, RelationStats]


def build_reconciliation_pipeline(
    profiles: Iterable[SourceProfile] = (),
) -> ReconciliationPipeline:
    """Patches per source in order, then languages, then relevants."""

    return ReconciliationPipeline(
        phases=(
            *(PatchPhase(profile) for profile in profiles),
            RelationPhase(Relation.LANGUAGES),
            RelationPhase(Relation.RELEVANTS),
            ObsoleteExceptionPhase(),
        )
    )


def run_reconciliation(
    hymns: Iterable[Hymn],
    *,
    profiles: Iterable[SourceProfile] = (),
    policy: AuditPolicy | None = None,
) -> ReconciliationResult:
    """Patch, close, audit and write back ``hymns``.

    Data-quality findings come back in ``errors``; structural violations raise
    :class:`~hymnsort.domain.model.ReconciliationInvariantError`.
    """

    working = list(hymns)
    context = ReconciliationContext()
    if policy is not None:
        context.policy = policy
    pipeline = build_reconciliation_pipeline(profiles)
    log.info("Starting reconciliation: hymns=%s, phases=%s", len(working), len(pipeline.phases))
    pipeline.run(working, context=context)
    log.info(
        "Finished reconciliation: hymns=%s, errors=%s (%s)",
        len(working),
        len(context.errors),
        ", ".join(f"{kind}={count}" for kind, count in sorted(context.errors.by_type().items())),
    )
    return ReconciliationResult(
        hymns=working, errors=tuple(context.errors), stats=dict(context.stats)
    )
