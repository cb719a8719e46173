"""Fallback display names for links nobody declared with a label."""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from hymnsort.domain.model import HymnType

if TYPE_CHECKING:
    from hymnsort.domain.model import SongReference

# Types whose sources are known to link outwards without being linked back.
INFERRED_LINK_NAMES: Final[dict[HymnType, str]] = {
    HymnType.GERMAN: "German",
    HymnType.JAPANESE: "Japanese",
    HymnType.KOREAN: "Korean",
    HymnType.FARSI: "Farsi",
    HymnType.INDONESIAN: "Indonesian",
}


def infer_link_name(reference: SongReference) -> str | None:
    return INFERRED_LINK_NAMES.get(reference.type)
