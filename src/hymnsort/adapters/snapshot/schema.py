"""Pydantic models describing the on-disk snapshot and report documents."""

from __future__ import annotations

import logging
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field

log = logging.getLogger(__name__)


class SnapshotBaseModel(BaseModel):
    model_config = ConfigDict(extra="allow")
    _logged_extra_keys: ClassVar[set[str]] = set()

    def model_post_init(self, _context: object, /) -> None:
        extras = self.__pydantic_extra__
        if not extras:
            return
        new_keys = set(extras).difference(self._logged_extra_keys)
        if not new_keys:
            return
        self._logged_extra_keys.update(new_keys)
        log.warning(
            "Snapshot %s: unmodeled keys: %s",
            type(self).__name__,
            ", ".join(sorted(new_keys)),
        )


class LinkRecord(SnapshotBaseModel):
    reference: str
    name: str = ""


class HymnRecord(SnapshotBaseModel):
    id: int | None = None
    references: list[str]
    language: str = ""
    title: str = ""
    lyrics: str = ""
    languages: list[LinkRecord] = Field(default_factory=list[LinkRecord])
    relevants: list[LinkRecord] = Field(default_factory=list[LinkRecord])


class SnapshotDocument(SnapshotBaseModel):
    hymns: list[HymnRecord] = Field(default_factory=list[HymnRecord])


class ErrorRecord(BaseModel):
    severity: str
    error_type: str
    source: str | None = None
    messages: list[str] = Field(default_factory=list[str])


class ErrorReport(BaseModel):
    total: int = 0
    counts: dict[str, int] = Field(default_factory=dict[str, int])
    errors: list[ErrorRecord] = Field(default_factory=list[ErrorRecord])


class DuplicateRecord(BaseModel):
    first: str
    second: str
    distance: int


class DuplicationReportDocument(BaseModel):
    no_difference: list[DuplicateRecord] = Field(default_factory=list[DuplicateRecord])
    under_5: list[DuplicateRecord] = Field(default_factory=list[DuplicateRecord])
    under_10: list[DuplicateRecord] = Field(default_factory=list[DuplicateRecord])
    under_50: list[DuplicateRecord] = Field(default_factory=list[DuplicateRecord])
