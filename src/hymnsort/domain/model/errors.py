"""Pipeline error records and structural failure types.

Two tiers exist. Data-quality findings are :class:`PipelineError` records
collected in an :class:`ErrorLog` and reported after the run. Violations of
the engine's own invariants raise a :class:`ReconciliationInvariantError`
and abort the run.
"""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Sequence

    from hymnsort.domain.model.enums import Source
    from hymnsort.domain.model.references import SongReference

log = logging.getLogger(__name__)


class Severity(StrEnum):
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class ErrorType(StrEnum):
    DANGLING_LANGUAGE_SET = "dangling_language_set"
    DANGLING_RELEVANT_SET = "dangling_relevant_set"
    TOO_MANY_INSTANCES = "too_many_instances"
    INCOMPATIBLE_LANGUAGES = "incompatible_languages"
    INCOMPATIBLE_RELEVANTS = "incompatible_relevants"
    SELF_REFERENCE = "self_reference"
    OBSOLETE_EXCEPTION = "obsolete_exception"
    OBSOLETE_PATCH_TARGET = "obsolete_patch_target"
    DUPLICATE_PATCH_LINK = "duplicate_patch_link"
    OBSOLETE_BLOCK_LIST_ITEM = "obsolete_block_list_item"
    PARSE_ERROR = "parse_error"
    UNRECOGNIZED_HYMN_TYPE = "unrecognized_hymn_type"


@dataclass(frozen=True, slots=True, kw_only=True)
class PipelineError:
    severity: Severity
    error_type: ErrorType
    source: Source | None = None
    messages: tuple[str, ...] = ()

    def __str__(self) -> str:
        origin = f"{self.source.value}:" if self.source is not None else ""
        details = "; ".join(self.messages)
        return f"[{self.severity.value}] {origin}{self.error_type.value}: {details}"


@dataclass(slots=True)
class ErrorLog:
    """Ordered accumulator for soft errors; logs each record as it arrives."""

    errors: list[PipelineError] = field(default_factory=list[PipelineError])

    def add(
        self,
        error_type: ErrorType,
        *messages: object,
        severity: Severity = Severity.ERROR,
        source: Source | None = None,
    ) -> PipelineError:
        error = PipelineError(
            severity=severity,
            error_type=error_type,
            source=source,
            messages=tuple(str(message) for message in messages),
        )
        self.errors.append(error)
        level = logging.WARNING if severity is Severity.ERROR else logging.INFO
        log.log(level, "%s", error)
        return error

    def extend(self, errors: Iterable[PipelineError]) -> None:
        self.errors.extend(errors)

    def of_type(self, error_type: ErrorType) -> list[PipelineError]:
        return [error for error in self.errors if error.error_type is error_type]

    def by_type(self) -> Counter[ErrorType]:
        return Counter(error.error_type for error in self.errors)

    def __iter__(self) -> Iterator[PipelineError]:
        return iter(self.errors)

    def __len__(self) -> int:
        return len(self.errors)


class ReconciliationInvariantError(RuntimeError):
    """Base class for structural failures that must abort a run."""


class ReferenceResolutionError(ReconciliationInvariantError):
    """Raised when a reference resolves to zero or several hymns."""

    def __init__(self, *, reference: SongReference, matches: int) -> None:
        self.reference = reference
        self.matches = matches
        super().__init__(f"Wrong number of hymns with {reference} were found: {matches}")


class UnresolvedLinkTargetError(ReconciliationInvariantError):
    """Raised when closure follows a link to a reference no hymn owns."""

    def __init__(self, *, owner: SongReference, target: SongReference) -> None:
        self.owner = owner
        self.target = target
        super().__init__(f"{owner} links to {target}, which no hymn owns")


class MultipleNamelessLinksError(ReconciliationInvariantError):
    """Raised when a finished component holds more than one nameless link."""

    def __init__(self, *, references: Sequence[SongReference]) -> None:
        self.references = tuple(references)
        members = ", ".join(str(reference) for reference in references)
        super().__init__(f"Component has more than one nameless link: {members}")


class AmbiguousMembershipError(ReconciliationInvariantError):
    """Raised when a hymn's aliases are spread over several components."""

    def __init__(self, *, hymn: str, components: int) -> None:
        self.hymn = hymn
        self.components = components
        super().__init__(f"Hymn [{hymn}] belongs to {components} components")
