"""JSON snapshot adapter: the boundary between source converters and the engine."""

from __future__ import annotations

from .files import read_snapshot, write_report, write_snapshot
from .schema import (
    DuplicateRecord,
    DuplicationReportDocument,
    ErrorRecord,
    ErrorReport,
    HymnRecord,
    LinkRecord,
    SnapshotDocument,
)
from .translator import (
    duplication_document_from_report,
    error_report_from_errors,
    snapshot_from_hymns,
    translate_snapshot,
)

__all__ = [
    "DuplicateRecord",
    "DuplicationReportDocument",
    "ErrorRecord",
    "ErrorReport",
    "HymnRecord",
    "LinkRecord",
    "SnapshotDocument",
    "duplication_document_from_report",
    "error_report_from_errors",
    "read_snapshot",
    "snapshot_from_hymns",
    "translate_snapshot",
    "write_report",
    "write_snapshot",
]
