"""Canonical reference value types."""

from __future__ import annotations

from dataclasses import dataclass

from hymnsort.domain.model.enums import HymnType


@dataclass(frozen=True, slots=True, order=True)
class SongReference:
    """Identifies one hymn variant in the canonical space, e.g. ``h/1`` or ``nt/1b``."""

    type: HymnType
    number: str

    def __str__(self) -> str:
        return f"{self.type.value}/{self.number}"

    @classmethod
    def parse(cls, text: str) -> SongReference:
        """Parse the ``"<abbreviation>/<number>"`` form produced by ``str()``."""

        abbreviation, separator, number = text.strip().partition("/")
        if not separator or not abbreviation or not number:
            raise ValueError(f"Malformed song reference: {text!r}")
        return cls(type=HymnType.from_abbreviation(abbreviation), number=number)


@dataclass(frozen=True, slots=True)
class SongLink:
    """Directed, labelled edge from the owning hymn to ``reference``."""

    reference: SongReference
    name: str = ""

    @property
    def is_nameless(self) -> bool:
        return not self.name

    def __str__(self) -> str:
        if self.is_nameless:
            return str(self.reference)
        return f"{self.reference} ({self.name})"


def ref(text: str) -> SongReference:
    """Shorthand for :meth:`SongReference.parse`."""

    return SongReference.parse(text)
