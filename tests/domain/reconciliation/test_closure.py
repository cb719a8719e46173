from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from hymnsort.domain.model import (
    AmbiguousMembershipError,
    ErrorLog,
    ErrorType,
    MultipleNamelessLinksError,
    ReferenceResolutionError,
    Relation,
    UnresolvedLinkTargetError,
    ref,
)
from hymnsort.domain.reconciliation import build_components, infer_link_name, write_back
from tests.helpers.hymns import by_reference, linked, make_hymn, named

if TYPE_CHECKING:
    from hymnsort.domain.model import Hymn

LANGUAGES = Relation.LANGUAGES


def _close(hymns: list[Hymn], relation: Relation = LANGUAGES) -> ErrorLog:
    errors = ErrorLog()
    components = build_components(hymns, relation, errors=errors)
    write_back(hymns, relation, components)
    return errors


def test_one_way_links_are_closed_symmetrically() -> None:
    hymns = [
        make_hymn("h/1", languages=[("ch/1", "詩歌(繁)"), ("de/1", "German")]),
        make_hymn("ch/1", languages=[("h/1", "English")]),
        make_hymn("de/1"),
    ]

    errors = _close(hymns)

    assert len(errors) == 0
    assert linked(by_reference(hymns, "h/1"), LANGUAGES) == {"ch/1", "de/1"}
    assert named(by_reference(hymns, "ch/1"), LANGUAGES) == {"h/1": "English", "de/1": "German"}
    assert named(by_reference(hymns, "de/1"), LANGUAGES) == {
        "h/1": "English",
        "ch/1": "詩歌(繁)",
    }
    for hymn in hymns:
        for link in hymn.languages:
            target = by_reference(hymns, str(link.reference))
            assert any(hymn.has_reference(back.reference) for back in target.languages)


def test_hymns_never_list_their_own_aliases() -> None:
    hymns = [
        make_hymn("h/1", "h/1b", languages=[("ch/1", "詩歌(繁)")]),
        make_hymn("ch/1", languages=[("h/1b", "English")]),
    ]

    errors = _close(hymns)

    assert len(errors) == 0
    assert linked(by_reference(hymns, "h/1"), LANGUAGES) == {"ch/1"}
    # The nameless primary alias adopts the label its sibling alias was linked under.
    assert named(by_reference(hymns, "ch/1"), LANGUAGES) == {"h/1": "English", "h/1b": "English"}


def test_transitive_links_join_one_component() -> None:
    hymns = [
        make_hymn("h/1", languages=[("ch/1", "詩歌(繁)")]),
        make_hymn("ch/1", languages=[("h/1", "English"), ("ht/1", "Tagalog")]),
        make_hymn("ht/1", languages=[("cb/1", "Cebuano")]),
        make_hymn("cb/1", languages=[("ht/1", "Tagalog")]),
    ]

    components = build_components(hymns, LANGUAGES, errors=ErrorLog())

    assert len(components) == 1
    assert set(components[0]) == {ref("h/1"), ref("ch/1"), ref("ht/1"), ref("cb/1")}


def test_closure_is_idempotent() -> None:
    hymns = [
        make_hymn("h/1", languages=[("ch/1", "詩歌(繁)"), ("de/1", "German")]),
        make_hymn("ch/1", languages=[("h/1", "English")]),
        make_hymn("de/1"),
        make_hymn("ns/2", languages=[("K/2", "Korean")]),
        make_hymn("K/2", languages=[("ns/2", "English")]),
    ]
    _close(hymns)
    first = {hymn.id: named(hymn, LANGUAGES) for hymn in hymns}

    errors = _close(hymns)

    assert len(errors) == 0
    assert {hymn.id: named(hymn, LANGUAGES) for hymn in hymns} == first


def test_hymns_without_links_start_no_traversal() -> None:
    hymns = [make_hymn("h/1"), make_hymn("pt/1")]

    errors = ErrorLog()
    components = build_components(hymns, LANGUAGES, errors=errors)

    assert components == []
    assert write_back(hymns, LANGUAGES, components) == 0
    assert all(hymn.languages == [] for hymn in hymns)


def test_self_reference_is_reported_and_kept_in_the_graph() -> None:
    hymns = [make_hymn("h/1", languages=[("h/1", "English")])]

    errors = ErrorLog()
    components = build_components(hymns, LANGUAGES, errors=errors)
    write_back(hymns, LANGUAGES, components)

    assert [error.error_type for error in errors] == [ErrorType.SELF_REFERENCE]
    assert errors.errors[0].messages == ("h/1",)
    assert components == [{ref("h/1"): "English"}]
    assert hymns[0].languages == []


def test_unlabelled_start_is_inferred_from_its_type() -> None:
    hymns = [make_hymn("de/1", languages=[("h/1", "English")]), make_hymn("h/1")]

    errors = _close(hymns)

    assert len(errors) == 0
    assert named(by_reference(hymns, "h/1"), LANGUAGES) == {"de/1": "German"}


def test_unlabelled_start_without_inference_is_dropped() -> None:
    hymns = [make_hymn("ch/5", languages=[("h/5", "English")]), make_hymn("h/5")]

    errors = ErrorLog()
    components = build_components(hymns, LANGUAGES, errors=errors)
    write_back(hymns, LANGUAGES, components)

    assert components == [{ref("h/5"): "English"}]
    (error,) = errors
    assert error.error_type is ErrorType.PARSE_ERROR
    assert error.messages == ("Dangling reference: ch/5 in [h/5]",)
    assert linked(by_reference(hymns, "ch/5"), LANGUAGES) == {"h/5"}
    assert by_reference(hymns, "h/5").languages == []


@pytest.mark.parametrize(
    ("reference", "expected"),
    [
        ("de/1", "German"),
        ("J/1", "Japanese"),
        ("K/1", "Korean"),
        ("F/1", "Farsi"),
        ("I/1", "Indonesian"),
        ("ch/1", None),
        ("h/1", None),
    ],
)
def test_infer_link_name(reference: str, expected: str | None) -> None:
    assert infer_link_name(ref(reference)) == expected


def test_link_to_unknown_hymn_is_fatal() -> None:
    hymns = [make_hymn("h/1", languages=[("ch/9", "詩歌(繁)")])]

    with pytest.raises(UnresolvedLinkTargetError, match="h/1 links to ch/9"):
        build_components(hymns, LANGUAGES, errors=ErrorLog())


def test_several_unlabelled_members_are_fatal() -> None:
    hymns = [make_hymn("h/1", languages=["ch/1"]), make_hymn("ch/1", languages=["h/1"])]

    with pytest.raises(MultipleNamelessLinksError):
        build_components(hymns, LANGUAGES, errors=ErrorLog())


def _bridged_hymns() -> list[Hymn]:
    return [
        make_hymn("h/1", languages=[("ch/1", "詩歌(繁)")]),
        make_hymn("ch/1", languages=[("h/1", "English")]),
        make_hymn("h/2", languages=[("ch/2", "詩歌(繁)")]),
        make_hymn("ch/2", languages=[("h/2", "English")]),
        make_hymn("de/1", languages=[("h/1", "English"), ("h/2", "English")]),
    ]


@pytest.mark.parametrize("bridge_first", [False, True])
def test_traversal_bridging_two_components_unions_them(bridge_first: bool) -> None:
    hymns = _bridged_hymns()
    if bridge_first:
        hymns.insert(0, hymns.pop())

    errors = ErrorLog()
    components = build_components(hymns, LANGUAGES, errors=errors)

    assert len(errors) == 0
    assert len(components) == 1
    assert components[0] == {
        ref("h/1"): "English",
        ref("ch/1"): "詩歌(繁)",
        ref("h/2"): "English",
        ref("ch/2"): "詩歌(繁)",
        ref("de/1"): "German",
    }


def test_unlabelled_declared_link_is_kept_on_both_sides() -> None:
    hymns = [
        make_hymn("h/1", languages=["ch/1"]),
        make_hymn("ch/1", languages=[("h/1", "English")]),
    ]

    errors = _close(hymns)

    assert named(by_reference(hymns, "h/1"), LANGUAGES) == {"ch/1": ""}
    assert named(by_reference(hymns, "ch/1"), LANGUAGES) == {"h/1": "English"}
    (error,) = errors
    assert error.error_type is ErrorType.PARSE_ERROR
    assert error.messages == ("Dangling reference: ch/1 in [h/1]",)


def test_unlabelled_self_link_closes_to_a_single_member() -> None:
    hymns = [make_hymn("h/1", languages=["h/1"])]

    errors = ErrorLog()
    components = build_components(hymns, LANGUAGES, errors=errors)
    write_back(hymns, LANGUAGES, components)

    assert [error.error_type for error in errors] == [ErrorType.SELF_REFERENCE]
    assert components == [{ref("h/1"): ""}]
    assert hymns[0].languages == []


def test_duplicate_alias_is_fatal() -> None:
    hymns = [make_hymn("h/1", languages=[("ch/1", "詩歌(繁)")]), make_hymn("h/1", "ch/1")]

    with pytest.raises(ReferenceResolutionError):
        build_components(hymns, LANGUAGES, errors=ErrorLog())


def test_write_back_rejects_hymn_split_over_components() -> None:
    hymns = [make_hymn("h/1", "h/1b")]
    components = [
        {ref("h/1"): "English", ref("ch/1"): "詩歌(繁)"},
        {ref("h/1b"): "English", ref("ch/2"): "詩歌(繁)"},
    ]

    with pytest.raises(AmbiguousMembershipError):
        write_back(hymns, LANGUAGES, components)


def test_relevants_close_independently_of_languages() -> None:
    hymns = [
        make_hymn("h/1", languages=[("ch/1", "詩歌(繁)")], relevants=[("nt/1", "New Tune")]),
        make_hymn("ch/1", languages=[("h/1", "English")]),
        make_hymn("nt/1", relevants=[("h/1", "Original Tune")]),
    ]

    errors = _close(hymns, Relation.RELEVANTS)

    assert len(errors) == 0
    assert named(by_reference(hymns, "nt/1"), Relation.RELEVANTS) == {"h/1": "Original Tune"}
    assert by_reference(hymns, "ch/1").relevants == []
    assert linked(by_reference(hymns, "h/1"), LANGUAGES) == {"ch/1"}
