"""Registry of accepted invariant violations with consumption tracking."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from hymnsort.domain.model import Relation

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from hymnsort.domain.model import SongReference, Source
    from hymnsort.domain.sources import ExceptionSet, SourceProfile


@dataclass(slots=True, kw_only=True)
class RegisteredException:
    relation: Relation
    references: ExceptionSet
    source: Source | None = None
    consumed: bool = False

    def describe(self) -> list[str]:
        return [str(reference) for reference in sorted(self.references)]


@dataclass(slots=True)
class ExceptionRegistry:
    """Exceptions accumulated over every source of a run.

    Each exception can be consumed once. Whatever remains unconsumed after
    auditing is obsolete and should be deleted from the source profile.
    """

    entries: list[RegisteredException] = field(default_factory=list[RegisteredException])

    def register(
        self,
        relation: Relation,
        exceptions: Iterable[ExceptionSet],
        *,
        source: Source | None = None,
    ) -> None:
        for references in exceptions:
            if any(
                entry.relation is relation and entry.references == references
                for entry in self.entries
            ):
                continue
            self.entries.append(
                RegisteredException(relation=relation, references=references, source=source)
            )

    def register_profile(self, profile: SourceProfile) -> None:
        for relation in Relation:
            self.register(relation, profile.exceptions_for(relation), source=profile.source)

    def consume(
        self, relation: Relation, members: set[SongReference]
    ) -> RegisteredException | None:
        """Remove the first pending exception fully contained in ``members``."""

        for entry in self._pending(relation):
            if entry.references <= members:
                members -= entry.references
                entry.consumed = True
                return entry
        return None

    def obsolete(self, relation: Relation | None = None) -> list[RegisteredException]:
        return [
            entry
            for entry in self.entries
            if not entry.consumed and (relation is None or entry.relation is relation)
        ]

    def _pending(self, relation: Relation) -> Iterator[RegisteredException]:
        return (
            entry
            for entry in self.entries
            if entry.relation is relation and not entry.consumed
        )
