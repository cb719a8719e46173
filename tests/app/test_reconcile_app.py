from __future__ import annotations

import json
from pathlib import Path  # noqa: TC003

import pytest

from hymnsort.adapters.snapshot import (
    HymnRecord,
    LinkRecord,
    SnapshotDocument,
    read_snapshot,
    write_snapshot,
)
from hymnsort.app import detect_duplicates, reconcile_snapshot
from hymnsort.config import ReconcileConfig
from hymnsort.domain.model import Source, UnresolvedLinkTargetError

VERSE = "Glory be to God the Father, glory be to God the Son"


def _snapshot(path: Path, *records: HymnRecord) -> Path:
    return write_snapshot(path, SnapshotDocument(hymns=list(records)))


def test_reconcile_snapshot_writes_closed_snapshot_and_report(tmp_path: Path) -> None:
    source = _snapshot(
        tmp_path / "snapshot.json",
        HymnRecord(
            references=["h/1"],
            languages=[
                LinkRecord(reference="ch/1", name="詩歌(繁)"),
                LinkRecord(reference="de/1", name="German"),
            ],
        ),
        HymnRecord(references=["ch/1"], languages=[LinkRecord(reference="h/1", name="English")]),
        HymnRecord(references=["de/1"]),
        HymnRecord(references=["h/2", "zz/2"]),
    )
    output = tmp_path / "out" / "reconciled.json"
    report = tmp_path / "out" / "errors.json"

    result = reconcile_snapshot(
        source, output_path=output, report_path=report, config=ReconcileConfig(sources=())
    )

    written = {tuple(record.references): record for record in read_snapshot(output).hymns}
    assert {link.reference for link in written[("de/1",)].languages} == {"h/1", "ch/1"}
    assert written[("h/2",)].languages == []
    assert len(result.hymns) == 4
    payload = json.loads(report.read_text(encoding="utf-8"))
    assert payload["total"] == 1
    assert payload["counts"] == {"unrecognized_hymn_type": 1}


def test_reconcile_snapshot_uses_storage_defaults(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    monkeypatch.setenv("HYMNSORT_DATA_DIR", str(tmp_path / "data"))
    source = _snapshot(tmp_path / "snapshot.json", HymnRecord(references=["h/1"]))

    reconcile_snapshot(source, config=ReconcileConfig(sources=(Source.SONGBASE,)))

    assert (tmp_path / "data" / "reconciled.json").is_file()
    assert (tmp_path / "data" / "errors.json").is_file()


def test_reconcile_snapshot_propagates_invariant_errors(tmp_path: Path) -> None:
    source = _snapshot(
        tmp_path / "snapshot.json",
        HymnRecord(references=["h/1"], languages=[LinkRecord(reference="ch/9", name="c")]),
    )
    output = tmp_path / "reconciled.json"

    with pytest.raises(UnresolvedLinkTargetError):
        reconcile_snapshot(
            source,
            output_path=output,
            report_path=tmp_path / "errors.json",
            config=ReconcileConfig(sources=()),
        )

    assert not output.exists()


def test_detect_duplicates_writes_buckets(tmp_path: Path) -> None:
    source = _snapshot(
        tmp_path / "snapshot.json",
        HymnRecord(references=["h/1"], lyrics=VERSE),
        HymnRecord(references=["ns/9"], lyrics=VERSE + "!"),
        HymnRecord(references=["ch/1"], lyrics=VERSE),
    )
    output = tmp_path / "duplicates.json"

    report = detect_duplicates(source, output_path=output)

    assert [candidate.distance for candidate in report.under_5] == [1]
    payload = json.loads(output.read_text(encoding="utf-8"))
    assert payload["no_difference"] == []
    assert payload["under_5"] == [{"first": "h/1", "second": "ns/9", "distance": 1}]
