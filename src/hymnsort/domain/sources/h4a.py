"""Corrections and accepted exceptions for the Hymns For Android (H4a) export.

H4a is merged after Hymnal.net, so several fixes mirror the Hymnal.net
patches for the translations H4a adds on top (Indonesian, Japanese, Korean).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from hymnsort.domain.model import Source
from hymnsort.domain.patching import (
    add_languages,
    add_reference,
    clear_languages,
    link,
    patch,
    remove_languages,
    remove_reference,
)

from .hymnal_net import SIMPLIFIED, TRADITIONAL
from .profile import SourceProfile, exception

if TYPE_CHECKING:
    from hymnsort.domain.model import SongLink
    from hymnsort.domain.patching import PatchOperation


def _chinese(number: str, *, supplemental: bool = False) -> tuple[SongLink, SongLink]:
    prefix, simplified_prefix = ("ts", "tsx") if supplemental else ("ch", "chx")
    return (
        link(f"{prefix}/{number}", TRADITIONAL),
        link(f"{simplified_prefix}/{number}", SIMPLIFIED),
    )


def _relink(
    owner: str, wrong: tuple[str, ...], chinese: str, *, supplemental: bool = False
) -> tuple[PatchOperation, ...]:
    """Detach ``owner`` from ``wrong`` on both sides and attach it to its Chinese original."""

    return (
        remove_languages(owner, *wrong),
        *(remove_languages(target, owner) for target in wrong),
        add_languages(owner, *_chinese(chinese, supplemental=supplemental)),
    )


PATCHES = (
    patch(
        "fix_i68",
        remove_languages("I/68", "h/79"),
        description="I/68 translates ch/68, which belongs to h/8079 rather than h/79.",
    ),
    patch(
        "fix_i330",
        remove_languages("I/330", "bf/157"),
        add_languages("I/330", *_chinese("330")),
    ),
    patch(
        "fix_i773",
        remove_languages("I/773", "bf/69"),
        add_languages("I/773", *_chinese("773")),
    ),
    patch(
        "fix_bf69",
        remove_reference("bf/69"),
        add_reference("h/8773", "bf/69"),
        description="bf/69 already exists on Hymnal.net as h/8773.",
    ),
    patch(
        "fix_i269_h367",
        clear_languages("I/269"),
        add_languages("I/269", *_chinese("269")),
        remove_languages("h/367", "I/269"),
    ),
    patch("fix_i526", remove_languages("I/526", "h/720")),
    patch(
        "fix_i485_h666",
        remove_languages("I/485", "h/666"),
        remove_languages("h/666", "I/485"),
    ),
    patch(
        "fix_i664",
        remove_languages("I/664", "h/921"),
        remove_languages("h/921", "I/664"),
        description="h/921 and h/1358 share a tune but are different songs.",
    ),
    patch(
        "fix_i643_j643",
        remove_languages("I/643", "h/1017"),
        remove_languages("J/643", "h/1017"),
        remove_languages("h/1017", "I/643", "J/643"),
        add_languages("J/643", *_chinese("643")),
    ),
    patch(
        "fix_i1401",
        remove_languages("I/1401", "h/1191"),
        remove_languages("h/1191", "I/1401"),
    ),
    patch("fix_h31", add_languages("h/31", link("ht/31", "Tagalog"))),
    patch(
        "fix_k1014_h1248",
        remove_languages("K/1014", "h/1248"),
        add_languages("K/1014", link("h/1295", "English")),
        remove_languages("h/1248", "K/1014"),
    ),
    patch(
        "fix_i1832",
        remove_languages("I/1832", "ts/823", "tsx/823"),
        remove_languages("ts/823", "I/1832"),
        add_languages("I/1832", *_chinese("832", supplemental=True)),
    ),
    patch("fix_i42", *_relink("I/42", ("ch/43",), "42")),
    patch("fix_i1531", *_relink("I/1531", ("ts/513", "h/1348"), "531", supplemental=True)),
    patch("fix_k460", *_relink("K/460", ("h/605",), "460")),
    patch("fix_j539", *_relink("J/539", ("h/734",), "539")),
    patch("fix_k57", *_relink("K/57", ("h/51",), "57")),
    patch("fix_k319", *_relink("K/319", ("h/419",), "319")),
    patch("fix_i709", *_relink("I/709", ("ch/708", "h/1028"), "709")),
    patch("fix_k667", *_relink("K/667", ("h/894",), "667")),
    patch("fix_k372", *_relink("K/372", ("h/494",), "372")),
    patch(
        "fix_bf231",
        add_languages("ch/276", link("bf/231", "Be Filled")),
        add_languages("chx/276", link("bf/231", "Be Filled")),
        description="bf/231 is a second English translation of ch/276 next to h/8276.",
    ),
)

LANGUAGE_EXCEPTIONS = (
    exception("ht/c333", "ht/437"),
    # bf/231 and h/8276 both translate ch/276.
    exception("h/8276", "bf/231"),
)

H4A = SourceProfile(
    source=Source.H4A,
    patches=PATCHES,
    language_exceptions=LANGUAGE_EXCEPTIONS,
    description="Community SQLite export, merged after Hymnal.net.",
)
