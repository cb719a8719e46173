"""Ordered application of named patches."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from hymnsort.domain.model import ErrorLog

from .context import PatchContext

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from hymnsort.domain.model import Hymn, Source

    from .operations import PatchOperation

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Patch:
    """A named, documented correction made of primitive operations."""

    name: str
    operations: tuple[PatchOperation, ...]
    description: str = ""

    def apply(self, context: PatchContext) -> None:
        for operation in self.operations:
            operation.apply(context)


def patch(name: str, *operations: PatchOperation, description: str = "") -> Patch:
    return Patch(name=name, operations=operations, description=description)


@dataclass(slots=True)
class Patcher:
    """Apply a source's patches strictly in declared order."""

    patches: Sequence[Patch] = field(default_factory=tuple)
    source: Source | None = None

    def apply(
        self, hymns: Iterable[Hymn], *, errors: ErrorLog | None = None
    ) -> tuple[list[Hymn], ErrorLog]:
        context = PatchContext(
            hymns=list(hymns),
            errors=errors if errors is not None else ErrorLog(),
            source=self.source,
        )
        before = len(context.errors)
        for entry in self.patches:
            log.debug("Applying patch %s", entry.name)
            entry.apply(context)
        log.info(
            "Applied %s patches for %s: hymns=%s, warnings=%s",
            len(self.patches),
            self.source or "unknown source",
            len(context.hymns),
            len(context.errors) - before,
        )
        return context.hymns, context.errors
