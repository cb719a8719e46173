"""Source profiles: ordered patches plus accepted exceptions per upstream source."""

from __future__ import annotations

from hymnsort.domain.model import Source

from .h4a import H4A
from .hymnal_net import HYMNAL_NET
from .profile import ExceptionSet, SourceProfile, exception

_PROFILES: dict[Source, SourceProfile] = {
    Source.HYMNAL_NET: HYMNAL_NET,
    Source.H4A: H4A,
}

# Merge priority: earlier sources win when the same song appears twice.
DEFAULT_SOURCES: tuple[Source, ...] = (Source.HYMNAL_NET, Source.H4A)


def get_source_profile(source: Source) -> SourceProfile:
    """Return the profile for ``source``; sources without corrections get an empty one."""

    return _PROFILES.get(source) or SourceProfile(source=source)


__all__ = [
    "DEFAULT_SOURCES",
    "H4A",
    "HYMNAL_NET",
    "ExceptionSet",
    "SourceProfile",
    "exception",
    "get_source_profile",
]
