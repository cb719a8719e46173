"""JSON file access for snapshots and reports."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from .schema import SnapshotDocument

if TYPE_CHECKING:
    from pathlib import Path

    from pydantic import BaseModel

log = getLogger(__name__)


def read_snapshot(path: Path) -> SnapshotDocument:
    document = SnapshotDocument.model_validate_json(path.read_text(encoding="utf-8"))
    log.info("Read %s hymns from %s", len(document.hymns), path)
    return document


def write_snapshot(path: Path, document: SnapshotDocument) -> Path:
    write_report(path, document)
    log.info("Wrote %s hymns to %s", len(document.hymns), path)
    return path


def write_report(path: Path, document: BaseModel) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(document.model_dump_json(indent=2) + "\n", encoding="utf-8")
    return path
