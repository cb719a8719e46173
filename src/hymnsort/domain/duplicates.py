"""Near-duplicate detection over the merged English hymn set.

Runs once after every source has been merged and reconciled. Each English
hymn is compared against every other English hymn by Levenshtein distance
over its flattened lyrics, and its nearest neighbour is filed into every
similarity bucket the distance qualifies for. Nothing is mutated.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from rapidfuzz.distance import Levenshtein

from hymnsort.domain.model import HymnLanguage

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Sequence

    from hymnsort.domain.model import Hymn, SongReference

log = logging.getLogger(__name__)

THRESHOLDS: Final[tuple[int, ...]] = (5, 10, 50)


@dataclass(frozen=True, slots=True)
class DuplicateCandidate:
    first: SongReference
    second: SongReference
    distance: int

    @property
    def pair(self) -> frozenset[SongReference]:
        return frozenset((self.first, self.second))


@dataclass(frozen=True, slots=True)
class DuplicationReport:
    no_difference: tuple[DuplicateCandidate, ...] = ()
    under_5: tuple[DuplicateCandidate, ...] = ()
    under_10: tuple[DuplicateCandidate, ...] = ()
    under_50: tuple[DuplicateCandidate, ...] = ()


def find_duplicates(hymns: Iterable[Hymn]) -> DuplicationReport:
    """Return likely duplicate pairs among English hymns, bucketed by distance."""

    english = [
        hymn for hymn in hymns if hymn.language is HymnLanguage.ENGLISH and hymn.lyrics
    ]
    nearest = [
        candidate
        for hymn in english
        if (candidate := _nearest(hymn, english)) is not None
    ]

    report = DuplicationReport(
        no_difference=_bucket(nearest, lambda distance: distance == 0),
        under_5=_bucket(nearest, lambda distance: distance < THRESHOLDS[0]),
        under_10=_bucket(nearest, lambda distance: distance < THRESHOLDS[1]),
        under_50=_bucket(nearest, lambda distance: distance < THRESHOLDS[2]),
    )
    log.info(
        "Duplicate scan over %s English hymns: identical=%s, <5=%s, <10=%s, <50=%s",
        len(english),
        len(report.no_difference),
        len(report.under_5),
        len(report.under_10),
        len(report.under_50),
    )
    return report


def _nearest(hymn: Hymn, candidates: Sequence[Hymn]) -> DuplicateCandidate | None:
    best: DuplicateCandidate | None = None
    # Distances at or past the widest bucket are never reported.
    cutoff = THRESHOLDS[-1] - 1
    for other in candidates:
        if other is hymn or other.language is not hymn.language or _related(hymn, other):
            continue
        distance = Levenshtein.distance(hymn.lyrics, other.lyrics, score_cutoff=cutoff)
        if distance > cutoff:
            continue
        if best is None or distance < best.distance:
            best = DuplicateCandidate(
                first=hymn.primary_reference,
                second=other.primary_reference,
                distance=distance,
            )
            cutoff = distance
    return best


def _related(first: Hymn, second: Hymn) -> bool:
    """Alternate tunes of the same song are expected to be near-identical."""

    return any(second.has_reference(link.reference) for link in first.relevants) or any(
        first.has_reference(link.reference) for link in second.relevants
    )


def _bucket(
    candidates: Iterable[DuplicateCandidate], accepts: Callable[[int], bool]
) -> tuple[DuplicateCandidate, ...]:
    seen: set[frozenset[SongReference]] = set()
    bucket: list[DuplicateCandidate] = []
    for candidate in candidates:
        if not accepts(candidate.distance) or candidate.pair in seen:
            continue
        seen.add(candidate.pair)
        bucket.append(candidate)
    return tuple(sorted(bucket, key=lambda candidate: (candidate.distance, sorted(candidate.pair))))
