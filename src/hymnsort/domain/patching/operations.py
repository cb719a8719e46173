"""Primitive patch operations.

Each operation is immutable data with an ``apply`` method, so a source's
corrections can be declared as plain tuples and replayed in order.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final, Protocol

from hymnsort.domain.model import ErrorType, Relation, Severity, SongLink, ref

if TYPE_CHECKING:
    from hymnsort.domain.model import SongReference

    from .context import PatchContext

log = logging.getLogger(__name__)

RECIPROCAL_LABELS: Final[dict[Relation, str]] = {
    Relation.LANGUAGES: "English",
    Relation.RELEVANTS: "Original Tune",
}


class PatchOperation(Protocol):
    """Contract implemented by every primitive operation."""

    def apply(self, context: PatchContext) -> None: ...


@dataclass(frozen=True, slots=True)
class AddLinks:
    owner: SongReference
    relation: Relation
    links: tuple[SongLink, ...]

    def apply(self, context: PatchContext) -> None:
        hymn = context.hymn_for(self.owner)
        existing = hymn.links(self.relation)
        for link in self.links:
            if any(current.reference == link.reference for current in existing):
                context.errors.add(
                    ErrorType.DUPLICATE_PATCH_LINK,
                    f"{self.owner} already includes {link.reference} in its {self.relation}",
                    severity=Severity.WARNING,
                    source=context.source,
                )
                continue
            existing.append(link)


@dataclass(frozen=True, slots=True)
class RemoveLinks:
    owner: SongReference
    relation: Relation
    targets: tuple[SongReference, ...]

    def apply(self, context: PatchContext) -> None:
        hymn = context.hymn_for(self.owner)
        links = hymn.links(self.relation)
        for target in self.targets:
            remaining = [link for link in links if link.reference != target]
            if len(remaining) == len(links):
                context.errors.add(
                    ErrorType.OBSOLETE_PATCH_TARGET,
                    f"Tried to remove {target} from the {self.relation} of {self.owner} "
                    "but didn't find it",
                    severity=Severity.WARNING,
                    source=context.source,
                )
                continue
            links = remaining
        hymn.set_links(self.relation, links)


@dataclass(frozen=True, slots=True)
class ResetLinks:
    """Replace the owner's relation and point every new target back at the owner."""

    owner: SongReference
    relation: Relation
    links: tuple[SongLink, ...]

    def apply(self, context: PatchContext) -> None:
        context.hymn_for(self.owner).set_links(self.relation, self.links)
        back_link = SongLink(reference=self.owner, name=RECIPROCAL_LABELS[self.relation])
        for link in self.links:
            context.hymn_for(link.reference).set_links(self.relation, (back_link,))


@dataclass(frozen=True, slots=True)
class ClearLinks:
    owner: SongReference
    relation: Relation

    def apply(self, context: PatchContext) -> None:
        context.hymn_for(self.owner).set_links(self.relation, ())


@dataclass(frozen=True, slots=True)
class ClearLinksMatching:
    """Clear ``relation`` on every hymn owning an alias whose number matches ``pattern``."""

    relation: Relation
    pattern: str

    def apply(self, context: PatchContext) -> None:
        matcher = re.compile(self.pattern)
        cleared = 0
        for hymn in context.hymns:
            if any(matcher.fullmatch(reference.number) for reference in hymn.references):
                if hymn.links(self.relation):
                    cleared += 1
                hymn.set_links(self.relation, ())
        log.debug("Cleared %s on %s hymns matching %r", self.relation, cleared, self.pattern)


@dataclass(frozen=True, slots=True)
class RemoveReference:
    """Drop an alias; the hymn goes with it when that was its only alias."""

    reference: SongReference

    def apply(self, context: PatchContext) -> None:
        hymn = context.hymn_for(self.reference)
        if len(hymn.references) == 1:
            context.delete_hymn(hymn)
            return
        hymn.references.remove(self.reference)


@dataclass(frozen=True, slots=True)
class AddReference:
    """Attach ``reference`` as an extra alias of the hymn owning ``owner``."""

    owner: SongReference
    reference: SongReference

    def apply(self, context: PatchContext) -> None:
        existing = context.find_hymn(self.reference)
        hymn = context.hymn_for(self.owner)
        if existing is hymn:
            return
        if existing is not None:
            raise ValueError(f"{self.reference} already belongs to hymn [{existing}]")
        hymn.references.append(self.reference)


@dataclass(frozen=True, slots=True)
class PurgeReferences:
    """Block list: remove references too broken to keep, reporting stale entries."""

    references: tuple[SongReference, ...]

    def apply(self, context: PatchContext) -> None:
        for reference in self.references:
            if context.find_hymn(reference) is None:
                context.errors.add(
                    ErrorType.OBSOLETE_BLOCK_LIST_ITEM,
                    f"{reference} was not found and can be removed from the block list",
                    severity=Severity.WARNING,
                    source=context.source,
                )
                continue
            RemoveReference(reference).apply(context)


def link(reference: str, name: str = "") -> SongLink:
    return SongLink(reference=ref(reference), name=name)


def add_languages(owner: str, *links: SongLink) -> AddLinks:
    return AddLinks(ref(owner), Relation.LANGUAGES, links)


def add_relevants(owner: str, *links: SongLink) -> AddLinks:
    return AddLinks(ref(owner), Relation.RELEVANTS, links)


def remove_languages(owner: str, *targets: str) -> RemoveLinks:
    return RemoveLinks(ref(owner), Relation.LANGUAGES, tuple(ref(target) for target in targets))


def remove_relevants(owner: str, *targets: str) -> RemoveLinks:
    return RemoveLinks(ref(owner), Relation.RELEVANTS, tuple(ref(target) for target in targets))


def reset_languages(owner: str, *links: SongLink) -> ResetLinks:
    return ResetLinks(ref(owner), Relation.LANGUAGES, links)


def reset_relevants(owner: str, *links: SongLink) -> ResetLinks:
    return ResetLinks(ref(owner), Relation.RELEVANTS, links)


def clear_languages(owner: str) -> ClearLinks:
    return ClearLinks(ref(owner), Relation.LANGUAGES)


def clear_relevants(owner: str) -> ClearLinks:
    return ClearLinks(ref(owner), Relation.RELEVANTS)


def remove_reference(reference: str) -> RemoveReference:
    return RemoveReference(ref(reference))


def add_reference(owner: str, reference: str) -> AddReference:
    return AddReference(ref(owner), ref(reference))
