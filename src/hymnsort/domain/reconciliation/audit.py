"""Cardinality and type-compatibility checks over finished components.

The auditor never touches hymns. It works on a copy of each component's
members, subtracting registered exceptions from that copy when they
explain a violation.
"""

from __future__ import annotations

import logging
import re
from collections import Counter
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Final

from hymnsort.domain.model import ErrorLog, ErrorType, HymnType, Relation, Severity, SongReference

from .exceptions import ExceptionRegistry

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from hymnsort.domain.model import PipelineError
    from hymnsort.domain.sources import ExceptionSet

log = logging.getLogger(__name__)

ALTERNATE_NUMBER: Final = re.compile(r"(\D+\d+\D*)|(\D*\d+\D+)")
RETRANSLATION_NUMBER: Final = re.compile(r"8\d{3}")


@dataclass(frozen=True, slots=True, kw_only=True)
class AuditRules:
    """Per-relation invariants."""

    relation: Relation
    dangling_error: ErrorType
    incompatible_error: ErrorType
    alternate_types: frozenset[HymnType]
    incompatible_pairs: tuple[tuple[HymnType, HymnType], ...]
    retranslation_allowance: bool = False

    def allowed_count(self, hymn_type: HymnType, members: Iterable[SongReference]) -> int:
        allowed = 1
        for member in members:
            if member.type is not hymn_type:
                continue
            if hymn_type in self.alternate_types and ALTERNATE_NUMBER.fullmatch(member.number):
                allowed += 1
            elif (
                self.retranslation_allowance
                and hymn_type is HymnType.CLASSIC_HYMN
                and _is_retranslation(member, members)
            ):
                allowed += 1
        return allowed


def _is_retranslation(member: SongReference, members: Iterable[SongReference]) -> bool:
    # h/8xxx retranslates the Chinese song xxx; it only counts when that song is present.
    if not RETRANSLATION_NUMBER.fullmatch(member.number):
        return False
    original = str(int(member.number) - 8000)
    chinese = {
        SongReference(HymnType.CHINESE, original),
        SongReference(HymnType.CHINESE_SUPPLEMENTAL, original),
    }
    return not chinese.isdisjoint(members)


LANGUAGE_RULES: Final = AuditRules(
    relation=Relation.LANGUAGES,
    dangling_error=ErrorType.DANGLING_LANGUAGE_SET,
    incompatible_error=ErrorType.INCOMPATIBLE_LANGUAGES,
    alternate_types=frozenset(
        {HymnType.CLASSIC_HYMN, HymnType.NEW_SONG, HymnType.HOWARD_HIGASHI}
    ),
    incompatible_pairs=(
        (HymnType.CLASSIC_HYMN, HymnType.NEW_SONG),
        (HymnType.CLASSIC_HYMN, HymnType.CHILDREN_SONG),
        (HymnType.CHILDREN_SONG, HymnType.NEW_SONG),
        (HymnType.CLASSIC_HYMN, HymnType.BE_FILLED),
        (HymnType.NEW_SONG, HymnType.BE_FILLED),
        (HymnType.CHILDREN_SONG, HymnType.BE_FILLED),
        (HymnType.HOWARD_HIGASHI, HymnType.BE_FILLED),
        (HymnType.CHINESE, HymnType.CHINESE_SUPPLEMENTAL),
        (HymnType.CHINESE_SIMPLIFIED, HymnType.CHINESE_SUPPLEMENTAL_SIMPLIFIED),
    ),
    retranslation_allowance=True,
)

RELEVANT_RULES: Final = AuditRules(
    relation=Relation.RELEVANTS,
    dangling_error=ErrorType.DANGLING_RELEVANT_SET,
    incompatible_error=ErrorType.INCOMPATIBLE_RELEVANTS,
    alternate_types=frozenset(
        {
            HymnType.CLASSIC_HYMN,
            HymnType.NEW_TUNE,
            HymnType.NEW_SONG,
            HymnType.GERMAN,
            HymnType.CHINESE,
            HymnType.CHINESE_SIMPLIFIED,
        }
    ),
    incompatible_pairs=(
        (HymnType.CLASSIC_HYMN, HymnType.NEW_SONG),
        (HymnType.CLASSIC_HYMN, HymnType.CHILDREN_SONG),
        (HymnType.CHILDREN_SONG, HymnType.NEW_SONG),
        (HymnType.CHINESE, HymnType.CHINESE_SUPPLEMENTAL),
        (HymnType.CHINESE_SIMPLIFIED, HymnType.CHINESE_SUPPLEMENTAL_SIMPLIFIED),
    ),
)

AUDIT_RULES: Final[Mapping[Relation, AuditRules]] = {
    Relation.LANGUAGES: LANGUAGE_RULES,
    Relation.RELEVANTS: RELEVANT_RULES,
}


def _default_suppression() -> dict[Relation, bool]:
    return {Relation.LANGUAGES: False, Relation.RELEVANTS: True}


@dataclass(frozen=True, slots=True)
class AuditPolicy:
    """Tunable audit behaviour.

    ``suppress_dangling_after_exception`` decides, per relation, whether a
    component left with a single member after an exception was subtracted
    still counts as dangling.
    """

    suppress_dangling_after_exception: Mapping[Relation, bool] = field(
        default_factory=_default_suppression
    )

    def suppresses_dangling(self, relation: Relation) -> bool:
        return self.suppress_dangling_after_exception.get(relation, False)


@dataclass(slots=True)
class Auditor:
    rules: AuditRules
    exceptions: ExceptionRegistry
    errors: ErrorLog
    policy: AuditPolicy = field(default_factory=AuditPolicy)

    def audit(self, components: Iterable[Iterable[SongReference]]) -> None:
        for component in components:
            self.audit_component(set(component))

    def audit_component(
        self, members: set[SongReference], *, after_exception: bool = False
    ) -> None:
        rules = self.rules
        if len(members) == 1:
            if not (after_exception and self.policy.suppresses_dangling(rules.relation)):
                self.errors.add(rules.dangling_error, *_sorted(members))
            return

        counts = Counter(member.type for member in members)
        for hymn_type in HymnType:
            if counts[hymn_type] <= rules.allowed_count(hymn_type, members):
                continue
            if self._reaudit_without_exception(members):
                return
            self.errors.add(ErrorType.TOO_MANY_INSTANCES, hymn_type.value, *_sorted(members))

        for first, second in rules.incompatible_pairs:
            if counts[first] and counts[second]:
                if self._reaudit_without_exception(members):
                    return
                self.errors.add(rules.incompatible_error, *_sorted(members))
                break

    def _reaudit_without_exception(self, members: set[SongReference]) -> bool:
        entry = self.exceptions.consume(self.rules.relation, members)
        if entry is None:
            return False
        log.debug("Consumed %s exception %s", self.rules.relation, entry.describe())
        self.audit_component(members, after_exception=True)
        return True

    def report_obsolete(self) -> None:
        for entry in self.exceptions.obsolete(self.rules.relation):
            self.errors.add(
                ErrorType.OBSOLETE_EXCEPTION,
                f"Unused {self.rules.relation} exception",
                *entry.describe(),
                severity=Severity.WARNING,
                source=entry.source,
            )


def _sorted(members: Iterable[SongReference]) -> list[str]:
    return [str(member) for member in sorted(members)]


def audit_components(
    components: Iterable[Iterable[SongReference]],
    relation: Relation,
    exceptions: Iterable[ExceptionSet] = (),
    *,
    policy: AuditPolicy | None = None,
) -> list[PipelineError]:
    """Audit ``components`` in isolation and return every finding, obsolete exceptions included."""

    registry = ExceptionRegistry()
    registry.register(relation, exceptions)
    errors = ErrorLog()
    auditor = Auditor(
        rules=AUDIT_RULES[relation],
        exceptions=registry,
        errors=errors,
        policy=policy if policy is not None else AuditPolicy(),
    )
    auditor.audit(components)
    auditor.report_obsolete()
    return list(errors)
