from __future__ import annotations

import logging

import pytest

from hymnsort.domain.model import (
    AmbiguousMembershipError,
    ErrorLog,
    ErrorType,
    ReconciliationInvariantError,
    ReferenceResolutionError,
    Severity,
    Source,
    UnresolvedLinkTargetError,
    ref,
)


def test_error_log_records_and_counts(caplog: pytest.LogCaptureFixture) -> None:
    errors = ErrorLog()

    with caplog.at_level(logging.INFO, logger="hymnsort.domain.model.errors"):
        first = errors.add(ErrorType.DANGLING_LANGUAGE_SET, "h/1")
        errors.add(
            ErrorType.OBSOLETE_EXCEPTION,
            "Unused languages exception",
            "h/2",
            severity=Severity.WARNING,
            source=Source.HYMNAL_NET,
        )
        errors.add(ErrorType.DANGLING_LANGUAGE_SET, "h/3")

    assert len(errors) == 3
    assert first.severity is Severity.ERROR
    assert first.messages == ("h/1",)
    assert errors.by_type()[ErrorType.DANGLING_LANGUAGE_SET] == 2
    assert [error.messages for error in errors.of_type(ErrorType.OBSOLETE_EXCEPTION)] == [
        ("Unused languages exception", "h/2")
    ]
    levels = [record.levelno for record in caplog.records]
    assert levels == [logging.WARNING, logging.INFO, logging.WARNING]


def test_pipeline_error_string_names_source_and_type() -> None:
    errors = ErrorLog()

    error = errors.add(
        ErrorType.DUPLICATE_PATCH_LINK, "a", "b", severity=Severity.WARNING, source=Source.H4A
    )

    assert str(error) == "[warning] h4a:duplicate_patch_link: a; b"


def test_empty_error_log_is_falsy_but_usable() -> None:
    errors = ErrorLog()

    assert not errors
    assert list(errors) == []


def test_invariant_errors_share_a_base_and_build_messages() -> None:
    resolution = ReferenceResolutionError(reference=ref("h/1"), matches=2)
    unresolved = UnresolvedLinkTargetError(owner=ref("h/1"), target=ref("ch/9"))
    ambiguous = AmbiguousMembershipError(hymn="h/1, h/1b", components=2)

    for error in (resolution, unresolved, ambiguous):
        assert isinstance(error, ReconciliationInvariantError)
    assert str(resolution) == "Wrong number of hymns with h/1 were found: 2"
    assert str(unresolved) == "h/1 links to ch/9, which no hymn owns"
    assert "[h/1, h/1b] belongs to 2 components" in str(ambiguous)
