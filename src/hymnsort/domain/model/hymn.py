"""Canonical merged hymn entity."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from hymnsort.domain.model.enums import HymnLanguage, Relation

if TYPE_CHECKING:
    from collections.abc import Iterable

    from hymnsort.domain.model.references import SongLink, SongReference


@dataclass(slots=True, kw_only=True, eq=False)
class Hymn:
    """A hymn addressable by any one of its aliases.

    ``languages`` and ``relevants`` are mutated in place by the patch layer
    and the reconciliation phases; everything else is treated as content.
    """

    id: int
    references: list[SongReference]
    language: HymnLanguage = HymnLanguage.UNKNOWN
    title: str = ""
    lyrics: str = ""
    languages: list[SongLink] = field(default_factory=list["SongLink"])
    relevants: list[SongLink] = field(default_factory=list["SongLink"])

    def __post_init__(self) -> None:
        if not self.references:
            raise ValueError(f"Hymn {self.id} must carry at least one reference")

    @property
    def primary_reference(self) -> SongReference:
        return self.references[0]

    def has_reference(self, reference: SongReference) -> bool:
        return reference in self.references

    def links(self, relation: Relation) -> list[SongLink]:
        if relation is Relation.LANGUAGES:
            return self.languages
        return self.relevants

    def set_links(self, relation: Relation, links: Iterable[SongLink]) -> None:
        if relation is Relation.LANGUAGES:
            self.languages = list(links)
        else:
            self.relevants = list(links)

    def __str__(self) -> str:
        return ", ".join(str(reference) for reference in self.references)


@dataclass(slots=True)
class IdSequence:
    """Explicit id generator handed to converters instead of a global counter."""

    next_id: int = 1

    def __call__(self) -> int:
        value = self.next_id
        self.next_id += 1
        return value
