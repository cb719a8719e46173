"""Component closure over one relation and write-back onto hymns.

Traversal starts once per hymn that declares links, seeded with a nameless
placeholder for the hymn's primary alias. Finished components are kept in
an arena keyed by slot and addressed through a reference -> slot index, so
merging traversals only rewrites index entries.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, TypeAlias

from hymnsort.domain.model import (
    AmbiguousMembershipError,
    ErrorType,
    MultipleNamelessLinksError,
    SongLink,
    UnresolvedLinkTargetError,
)

from .graph import LinkGraph
from .naming import infer_link_name

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from hymnsort.domain.model import ErrorLog, Hymn, Relation, SongReference

log = logging.getLogger(__name__)

# Ordered member -> display name. An empty name marks a link nobody labelled yet.
Component: TypeAlias = "dict[SongReference, str]"


def build_components(
    hymns: Sequence[Hymn], relation: Relation, *, errors: ErrorLog
) -> list[Component]:
    """Close every hymn's declared links and merge traversals that share members."""

    graph = LinkGraph.build(hymns, relation)
    arena: dict[int, Component] = {}
    slots: dict[SongReference, int] = {}

    for hymn in hymns:
        links = graph.links_of(hymn)
        if not links:
            continue

        # Self links are reported but stay in the graph.
        self_linked = any(hymn.has_reference(link.reference) for link in links)
        if self_linked:
            errors.add(ErrorType.SELF_REFERENCE, *hymn.references)

        component = _traverse(graph, hymn)
        _resolve_nameless(graph, component, hymn, self_linked=self_linked, errors=errors)
        if not component:
            continue
        _merge_into(arena, slots, component)

    components = list(arena.values())
    log.info("Built %s %s components from %s hymns", len(components), relation, len(hymns))
    return components


def _traverse(graph: LinkGraph, start: Hymn) -> Component:
    component: Component = {start.primary_reference: ""}
    expanded: set[int] = {id(start)}
    stack: list[Hymn] = [start]
    while stack:
        current = stack.pop()
        for link in graph.links_of(current):
            target = link.reference
            if target in component:
                if not component[target] and link.name:
                    component[target] = link.name
                continue
            component[target] = link.name
            owner = graph.find_owner(target)
            if owner is None:
                raise UnresolvedLinkTargetError(owner=current.primary_reference, target=target)
            if id(owner) not in expanded:
                expanded.add(id(owner))
                stack.append(owner)
    return component


def _resolve_nameless(
    graph: LinkGraph,
    component: Component,
    start: Hymn,
    *,
    self_linked: bool,
    errors: ErrorLog,
) -> None:
    nameless = [reference for reference, name in component.items() if not name]
    if len(nameless) > 1:
        raise MultipleNamelessLinksError(references=nameless)
    if not nameless:
        return

    reference = nameless[0]
    name = _name_from_aliases(graph, component, reference) or infer_link_name(reference)
    if name:
        component[reference] = name
        return

    # Declared targets and self-linked starts stay as unlabelled members.
    if reference != start.primary_reference or self_linked:
        log.debug("Keeping unlabelled %s link %s", graph.relation, reference)
        return

    del component[reference]
    members = ", ".join(str(member) for member in component)
    errors.add(ErrorType.PARSE_ERROR, f"Dangling reference: {reference} in [{members}]")


def _name_from_aliases(graph: LinkGraph, component: Component, reference: SongReference) -> str:
    owner = graph.owner_of(reference)
    for alias in owner.references:
        if alias != reference and component.get(alias):
            return component[alias]
    return ""


def _merge_into(
    arena: dict[int, Component], slots: dict[SongReference, int], component: Component
) -> None:
    """Fold ``component`` into the lowest slot it shares members with.

    A traversal that reaches several finished components unions all of them
    into that slot.
    """

    matches = sorted({slots[reference] for reference in component if reference in slots})
    if not matches:
        slot = max(arena, default=-1) + 1
        arena[slot] = component
    else:
        slot = matches[0]
        if len(matches) > 1:
            log.debug("Traversal bridged components %s into slot %s", matches, slot)
        existing = arena[slot]
        for merged in (*(arena.pop(other) for other in matches[1:]), component):
            for reference, name in merged.items():
                if not existing.get(reference):
                    existing[reference] = name
    for reference in arena[slot]:
        slots[reference] = slot


def write_back(hymns: Iterable[Hymn], relation: Relation, components: Sequence[Component]) -> int:
    """Replace each hymn's relation with its component minus its own aliases.

    Hymns that appear in no component keep their relation untouched. Returns
    the number of hymns that were rewritten.
    """

    slots: dict[SongReference, int] = {}
    for slot, component in enumerate(components):
        for reference in component:
            slots[reference] = slot

    written = 0
    for hymn in hymns:
        matches = {slots[reference] for reference in hymn.references if reference in slots}
        if not matches:
            continue
        if len(matches) > 1:
            raise AmbiguousMembershipError(hymn=str(hymn), components=len(matches))
        component = components[matches.pop()]
        hymn.set_links(
            relation,
            (
                SongLink(reference=reference, name=name)
                for reference, name in component.items()
                if not hymn.has_reference(reference)
            ),
        )
        written += 1
    return written
