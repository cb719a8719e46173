"""Mutable working state shared by patch operations."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from hymnsort.domain.model import ErrorLog, ReferenceResolutionError

if TYPE_CHECKING:
    from hymnsort.domain.model import Hymn, SongReference, Source


@dataclass(slots=True)
class PatchContext:
    """Hymn collection being patched plus the error accumulator.

    Targets are resolved by scanning every hymn's current aliases, because
    earlier operations may already have moved or deleted aliases.
    """

    hymns: list[Hymn]
    errors: ErrorLog = field(default_factory=ErrorLog)
    source: Source | None = None

    def find_hymn(self, reference: SongReference) -> Hymn | None:
        matches = [hymn for hymn in self.hymns if hymn.has_reference(reference)]
        if len(matches) > 1:
            raise ReferenceResolutionError(reference=reference, matches=len(matches))
        return matches[0] if matches else None

    def hymn_for(self, reference: SongReference) -> Hymn:
        hymn = self.find_hymn(reference)
        if hymn is None:
            raise ReferenceResolutionError(reference=reference, matches=0)
        return hymn

    def delete_hymn(self, hymn: Hymn) -> None:
        self.hymns[:] = [candidate for candidate in self.hymns if candidate is not hymn]
