from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from hymnsort.domain.model import ErrorType, Relation, Severity, ref
from hymnsort.domain.reconciliation import AuditPolicy, audit_components
from hymnsort.domain.sources import exception

if TYPE_CHECKING:
    from hymnsort.domain.model import PipelineError, SongReference

LANGUAGES = Relation.LANGUAGES
RELEVANTS = Relation.RELEVANTS


def _component(*references: str) -> list[SongReference]:
    return [ref(reference) for reference in references]


def _types(errors: list[PipelineError]) -> list[ErrorType]:
    return [error.error_type for error in errors]


def test_closed_component_passes() -> None:
    errors = audit_components([_component("h/1", "ch/1", "de/1")], LANGUAGES)

    assert errors == []


@pytest.mark.parametrize(
    ("relation", "expected"),
    [(LANGUAGES, ErrorType.DANGLING_LANGUAGE_SET), (RELEVANTS, ErrorType.DANGLING_RELEVANT_SET)],
)
def test_single_member_component_is_dangling(relation: Relation, expected: ErrorType) -> None:
    errors = audit_components([_component("h/1")], relation)

    assert _types(errors) == [expected]
    assert errors[0].messages == ("h/1",)


def test_repeated_type_is_too_many_instances() -> None:
    errors = audit_components([_component("h/2", "ch/1", "h/1")], LANGUAGES)

    assert _types(errors) == [ErrorType.TOO_MANY_INSTANCES]
    assert errors[0].messages == ("h", "ch/1", "h/1", "h/2")


def test_letter_suffixed_alternate_is_allowed() -> None:
    assert audit_components([_component("h/1", "h/2b", "ch/1")], LANGUAGES) == []


def test_alternate_allowance_depends_on_relation() -> None:
    component = _component("h/1", "nt/1", "nt/1b")

    assert audit_components([component], RELEVANTS) == []
    assert _types(audit_components([component], LANGUAGES)) == [ErrorType.TOO_MANY_INSTANCES]


def test_retranslation_counts_only_with_its_chinese_original() -> None:
    assert audit_components([_component("h/79", "h/8079", "ch/79")], LANGUAGES) == []
    assert audit_components([_component("h/428", "h/8428", "ts/428")], LANGUAGES) == []

    errors = audit_components([_component("h/79", "h/8079", "de/79")], LANGUAGES)

    assert _types(errors) == [ErrorType.TOO_MANY_INSTANCES]


def test_incompatible_types_report_once_per_component() -> None:
    errors = audit_components([_component("ns/1", "h/1", "c/1")], LANGUAGES)

    assert _types(errors) == [ErrorType.INCOMPATIBLE_LANGUAGES]
    assert errors[0].messages == ("c/1", "h/1", "ns/1")


def test_be_filled_is_only_incompatible_for_languages() -> None:
    component = _component("h/1", "bf/1")

    assert _types(audit_components([component], LANGUAGES)) == [ErrorType.INCOMPATIBLE_LANGUAGES]
    assert audit_components([component], RELEVANTS) == []


def test_chinese_and_supplemental_are_incompatible() -> None:
    errors = audit_components([_component("ch/1", "ts/1")], RELEVANTS)

    assert _types(errors) == [ErrorType.INCOMPATIBLE_RELEVANTS]


def test_exception_consumes_incompatibility_and_reaudits_remainder() -> None:
    component = _component("h/8330", "ns/154", "ch/330", "de/330")

    errors = audit_components([component], LANGUAGES, [exception("h/8330", "ns/154")])

    assert errors == []


def test_languages_report_dangling_remainder_after_exception() -> None:
    component = _component("h/8330", "ns/154", "ch/330")

    errors = audit_components([component], LANGUAGES, [exception("h/8330", "ns/154")])

    assert _types(errors) == [ErrorType.DANGLING_LANGUAGE_SET]
    assert errors[0].messages == ("ch/330",)


def test_relevants_suppress_dangling_remainder_after_exception() -> None:
    component = _component("h/79", "h/8079", "nt/79")

    errors = audit_components([component], RELEVANTS, [exception("h/79", "h/8079")])

    assert errors == []


def test_policy_controls_dangling_after_exception() -> None:
    component = _component("h/8330", "ns/154", "ch/330")
    policy = AuditPolicy(suppress_dangling_after_exception={LANGUAGES: True, RELEVANTS: False})

    errors = audit_components(
        [component], LANGUAGES, [exception("h/8330", "ns/154")], policy=policy
    )

    assert errors == []
    assert policy.suppresses_dangling(LANGUAGES)
    assert not AuditPolicy().suppresses_dangling(LANGUAGES)
    assert AuditPolicy().suppresses_dangling(RELEVANTS)


def test_exception_is_consumed_only_once() -> None:
    components = [_component("h/1", "ns/1", "ch/1"), _component("h/1", "ns/1", "ch/2")]
    policy = AuditPolicy(suppress_dangling_after_exception={LANGUAGES: True})

    errors = audit_components(components, LANGUAGES, [exception("h/1", "ns/1")], policy=policy)

    assert _types(errors) == [ErrorType.INCOMPATIBLE_LANGUAGES]
    assert errors[0].messages == ("ch/2", "h/1", "ns/1")


def test_unused_exception_is_reported_obsolete() -> None:
    errors = audit_components(
        [_component("h/1", "ch/1")], LANGUAGES, [exception("ns/19", "ns/474")]
    )

    (error,) = errors
    assert error.error_type is ErrorType.OBSOLETE_EXCEPTION
    assert error.severity is Severity.WARNING
    assert error.messages == ("Unused languages exception", "ns/19", "ns/474")


def test_exception_that_does_not_cover_violation_is_left_pending() -> None:
    errors = audit_components(
        [_component("h/1", "ns/1")], LANGUAGES, [exception("h/1", "ns/1", "de/1")]
    )

    assert _types(errors) == [ErrorType.INCOMPATIBLE_LANGUAGES, ErrorType.OBSOLETE_EXCEPTION]
