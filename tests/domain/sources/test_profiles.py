from __future__ import annotations

import re
from collections import Counter

import pytest

from hymnsort.domain.model import Relation, Source, ref
from hymnsort.domain.sources import (
    DEFAULT_SOURCES,
    H4A,
    HYMNAL_NET,
    SourceProfile,
    exception,
    get_source_profile,
)


@pytest.mark.parametrize("profile", [HYMNAL_NET, H4A], ids=lambda profile: profile.source)
def test_patch_names_are_unique_and_descriptive(profile: SourceProfile) -> None:
    names = Counter(entry.name for entry in profile.patches)

    assert not [name for name, count in names.items() if count > 1]
    assert all(re.fullmatch(r"[a-z0-9_]+", name) for name in names)
    assert all(entry.operations for entry in profile.patches)


@pytest.mark.parametrize("profile", [HYMNAL_NET, H4A], ids=lambda profile: profile.source)
def test_exceptions_name_at_least_two_references(profile: SourceProfile) -> None:
    for relation in Relation:
        for references in profile.exceptions_for(relation):
            assert len(references) >= 2


def test_profiles_are_registered_in_merge_order() -> None:
    assert DEFAULT_SOURCES == (Source.HYMNAL_NET, Source.H4A)
    assert get_source_profile(Source.HYMNAL_NET) is HYMNAL_NET
    assert get_source_profile(Source.H4A) is H4A


def test_sources_without_corrections_get_an_empty_profile() -> None:
    profile = get_source_profile(Source.SONGBASE)

    assert profile.source is Source.SONGBASE
    assert profile.patches == ()
    assert profile.exceptions_for(Relation.LANGUAGES) == ()
    assert profile.patcher().source is Source.SONGBASE


def test_exception_builds_a_reference_set() -> None:
    assert exception("h/79", "h/8079") == frozenset({ref("h/8079"), ref("h/79")})


def test_hymnal_net_relevant_exceptions_include_retranslations() -> None:
    assert exception("h/79", "h/8079") in HYMNAL_NET.exceptions_for(Relation.RELEVANTS)
    assert exception("h/8276", "bf/231") in H4A.exceptions_for(Relation.LANGUAGES)
