"""Phase-based orchestrator for a reconciliation run."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol

from .context import ReconciliationContext

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from hymnsort.domain.model import Hymn


class ReconciliationPhase(Protocol):
    """Contract implemented by each reconciliation phase."""

    name: str

    def run(self, hymns: list[Hymn], *, context: ReconciliationContext) -> None: ...


@dataclass(slots=True)
class ReconciliationPipeline:
    """Compose and execute the ordered reconciliation phases.

    Phases mutate ``hymns`` in place; patch phases may also delete entries.
    """

    phases: Sequence[ReconciliationPhase] = field(default_factory=tuple)

    def with_phase(self, phase: ReconciliationPhase) -> ReconciliationPipeline:
        """Return a new pipeline appending ``phase`` at the end."""

        return ReconciliationPipeline(phases=(*self.phases, phase))

    def extend(self, phases: Iterable[ReconciliationPhase]) -> ReconciliationPipeline:
        """Return a new pipeline with the provided ``phases`` concatenated."""

        return ReconciliationPipeline(phases=(*self.phases, *tuple(phases)))

    def run(
        self, hymns: list[Hymn], *, context: ReconciliationContext | None = None
    ) -> list[Hymn]:
        """Execute the configured phases in-order against ``hymns``."""

        active_context = context or ReconciliationContext()
        for phase in self.phases:
            phase.run(hymns, context=active_context)
        return hymns
