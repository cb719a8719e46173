"""Application orchestration entry points."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from hymnsort.adapters.snapshot import (
    duplication_document_from_report,
    error_report_from_errors,
    read_snapshot,
    snapshot_from_hymns,
    translate_snapshot,
    write_report,
    write_snapshot,
)
from hymnsort.config import get_reconcile_config, get_storage_config
from hymnsort.domain.duplicates import DuplicationReport, find_duplicates
from hymnsort.domain.model import ErrorLog, IdSequence
from hymnsort.domain.reconciliation import ReconciliationResult, run_reconciliation
from hymnsort.domain.sources import get_source_profile

if TYPE_CHECKING:
    from pathlib import Path

    from hymnsort.config import ReconcileConfig
    from hymnsort.domain.model import Hymn

log = getLogger(__name__)


def _load_hymns(input_path: Path, *, errors: ErrorLog) -> list[Hymn]:
    document = read_snapshot(input_path)
    return translate_snapshot(document, ids=IdSequence(), errors=errors)


def reconcile_snapshot(
    input_path: Path,
    *,
    output_path: Path | None = None,
    report_path: Path | None = None,
    config: ReconcileConfig | None = None,
) -> ReconciliationResult:
    """Reconcile the snapshot at ``input_path`` and write the result and error report."""

    effective_config = config or get_reconcile_config()
    if output_path is None or report_path is None:
        storage = get_storage_config()
        output_path = output_path or storage.reconciled_path()
        report_path = report_path or storage.error_report_path()
    log.info(
        "Starting reconciliation: input=%s, sources=%s",
        input_path,
        ", ".join(effective_config.sources) or "none",
    )

    load_errors = ErrorLog()
    hymns = _load_hymns(input_path, errors=load_errors)
    result = run_reconciliation(
        hymns,
        profiles=[get_source_profile(source) for source in effective_config.sources],
        policy=effective_config.policy,
    )

    write_snapshot(output_path, snapshot_from_hymns(result.hymns))
    write_report(report_path, error_report_from_errors((*load_errors, *result.errors)))
    log.info(
        "Finished reconciliation: hymns=%s, errors=%s, output=%s",
        len(result.hymns),
        len(load_errors) + len(result.errors),
        output_path,
    )
    return result


def detect_duplicates(input_path: Path, *, output_path: Path | None = None) -> DuplicationReport:
    """Scan the snapshot at ``input_path`` for near-duplicate English hymns."""

    if output_path is None:
        output_path = get_storage_config().duplicates_path()
    hymns = _load_hymns(input_path, errors=ErrorLog())
    report = find_duplicates(hymns)
    write_report(output_path, duplication_document_from_report(report))
    log.info("Wrote duplicate report to %s", output_path)
    return report
