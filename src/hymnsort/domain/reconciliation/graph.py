"""Alias index and per-relation adjacency over a hymn collection."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from hymnsort.domain.model import ReferenceResolutionError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from hymnsort.domain.model import Hymn, Relation, SongLink, SongReference


@dataclass(slots=True)
class LinkGraph:
    """Directed view of one relation: reference -> owning hymn -> declared links."""

    relation: Relation
    owners: dict[SongReference, Hymn] = field(default_factory=dict["SongReference", "Hymn"])

    @classmethod
    def build(cls, hymns: Iterable[Hymn], relation: Relation) -> LinkGraph:
        graph = cls(relation=relation)
        for hymn in hymns:
            for reference in hymn.references:
                existing = graph.owners.get(reference)
                if existing is not None and existing is not hymn:
                    raise ReferenceResolutionError(reference=reference, matches=2)
                graph.owners[reference] = hymn
        return graph

    def find_owner(self, reference: SongReference) -> Hymn | None:
        return self.owners.get(reference)

    def owner_of(self, reference: SongReference) -> Hymn:
        hymn = self.owners.get(reference)
        if hymn is None:
            raise ReferenceResolutionError(reference=reference, matches=0)
        return hymn

    def links_of(self, hymn: Hymn) -> list[SongLink]:
        return hymn.links(self.relation)
