"""Per-source bundle of corrections and accepted invariant violations."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, TypeAlias

from hymnsort.domain.model import Relation, ref
from hymnsort.domain.patching import Patch, Patcher

if TYPE_CHECKING:
    from hymnsort.domain.model import SongReference, Source

ExceptionSet: TypeAlias = "frozenset[SongReference]"


@dataclass(frozen=True, slots=True, kw_only=True)
class SourceProfile:
    source: Source
    patches: tuple[Patch, ...] = ()
    language_exceptions: tuple[ExceptionSet, ...] = ()
    relevant_exceptions: tuple[ExceptionSet, ...] = ()
    description: str = field(default="", compare=False)

    def exceptions_for(self, relation: Relation) -> tuple[ExceptionSet, ...]:
        if relation is Relation.LANGUAGES:
            return self.language_exceptions
        return self.relevant_exceptions

    def patcher(self) -> Patcher:
        return Patcher(patches=self.patches, source=self.source)


def exception(*references: str) -> ExceptionSet:
    return frozenset(ref(reference) for reference in references)
