"""Translate snapshot documents into domain hymns and back."""

from __future__ import annotations

from collections import Counter
from logging import getLogger
from typing import TYPE_CHECKING

from hymnsort.domain.model import (
    ErrorType,
    Hymn,
    HymnLanguage,
    SongLink,
    SongReference,
    UnrecognizedHymnTypeError,
)

from .schema import (
    DuplicateRecord,
    DuplicationReportDocument,
    ErrorRecord,
    ErrorReport,
    HymnRecord,
    LinkRecord,
    SnapshotDocument,
)

if TYPE_CHECKING:
    from collections.abc import Iterable

    from hymnsort.domain.duplicates import DuplicateCandidate, DuplicationReport
    from hymnsort.domain.model import ErrorLog, IdSequence, PipelineError

log = getLogger(__name__)


def translate_snapshot(
    document: SnapshotDocument, *, ids: IdSequence, errors: ErrorLog
) -> list[Hymn]:
    """Build domain hymns from ``document``.

    Aliases or links with an unknown hymn type are dropped and recorded as
    ``UNRECOGNIZED_HYMN_TYPE``; a hymn left without any alias is dropped too.
    Malformed reference strings are recorded as ``PARSE_ERROR``.
    """

    hymns: list[Hymn] = []
    for record in document.hymns:
        hymn = _translate_hymn(record, ids=ids, errors=errors)
        if hymn is not None:
            hymns.append(hymn)
    log.info("Translated %s of %s snapshot hymns", len(hymns), len(document.hymns))
    return hymns


def _translate_hymn(record: HymnRecord, *, ids: IdSequence, errors: ErrorLog) -> Hymn | None:
    references = [
        reference
        for text in record.references
        if (reference := _parse_reference(text, errors=errors)) is not None
    ]
    if not references:
        errors.add(
            ErrorType.UNRECOGNIZED_HYMN_TYPE,
            f"Dropped hymn without a recognisable alias: {', '.join(record.references)}",
        )
        return None
    return Hymn(
        id=record.id if record.id is not None else ids(),
        references=references,
        language=_language(record.language, references[0]),
        title=record.title,
        lyrics=record.lyrics,
        languages=_translate_links(record.languages, errors=errors),
        relevants=_translate_links(record.relevants, errors=errors),
    )


def _translate_links(records: Iterable[LinkRecord], *, errors: ErrorLog) -> list[SongLink]:
    return [
        SongLink(reference=reference, name=record.name)
        for record in records
        if (reference := _parse_reference(record.reference, errors=errors)) is not None
    ]


def _parse_reference(text: str, *, errors: ErrorLog) -> SongReference | None:
    try:
        return SongReference.parse(text)
    except UnrecognizedHymnTypeError as exc:
        errors.add(ErrorType.UNRECOGNIZED_HYMN_TYPE, text, exc.abbreviation)
    except ValueError:
        errors.add(ErrorType.PARSE_ERROR, f"Malformed reference: {text!r}")
    return None


def _language(value: str, primary: SongReference) -> HymnLanguage:
    if not value:
        return primary.type.language
    try:
        return HymnLanguage(value)
    except ValueError:
        log.warning("Unknown language %r on %s, using %s", value, primary, primary.type.language)
        return primary.type.language


def snapshot_from_hymns(hymns: Iterable[Hymn]) -> SnapshotDocument:
    return SnapshotDocument(
        hymns=[
            HymnRecord(
                id=hymn.id,
                references=[str(reference) for reference in hymn.references],
                language=hymn.language.value,
                title=hymn.title,
                lyrics=hymn.lyrics,
                languages=[_link_record(link) for link in hymn.languages],
                relevants=[_link_record(link) for link in hymn.relevants],
            )
            for hymn in hymns
        ]
    )


def _link_record(link: SongLink) -> LinkRecord:
    return LinkRecord(reference=str(link.reference), name=link.name)


def error_report_from_errors(errors: Iterable[PipelineError]) -> ErrorReport:
    records = [
        ErrorRecord(
            severity=error.severity.value,
            error_type=error.error_type.value,
            source=error.source.value if error.source is not None else None,
            messages=list(error.messages),
        )
        for error in errors
    ]
    counts = Counter(record.error_type for record in records)
    return ErrorReport(total=len(records), counts=dict(sorted(counts.items())), errors=records)


def duplication_document_from_report(report: DuplicationReport) -> DuplicationReportDocument:
    return DuplicationReportDocument(
        no_difference=_duplicate_records(report.no_difference),
        under_5=_duplicate_records(report.under_5),
        under_10=_duplicate_records(report.under_10),
        under_50=_duplicate_records(report.under_50),
    )


def _duplicate_records(candidates: Iterable[DuplicateCandidate]) -> list[DuplicateRecord]:
    return [
        DuplicateRecord(
            first=str(candidate.first),
            second=str(candidate.second),
            distance=candidate.distance,
        )
        for candidate in candidates
    ]
