"""Corrections and accepted exceptions for hymns scraped from Hymnal.net."""

from __future__ import annotations

from typing import Final

from hymnsort.domain.model import Relation, SongReference, Source
from hymnsort.domain.patching import (
    ClearLinksMatching,
    PurgeReferences,
    add_languages,
    add_relevants,
    clear_languages,
    clear_relevants,
    link,
    patch,
    remove_languages,
    remove_relevants,
    reset_languages,
    reset_relevants,
)

from .profile import SourceProfile, exception

TRADITIONAL: Final[str] = "詩歌(繁)"
SIMPLIFIED: Final[str] = "诗歌(简)"

# Songs so wrong upstream that they are purged. Remove entries once fixed.
BLOCK_LIST: Final[tuple[SongReference, ...]] = ()

LANGUAGE_PATCHES = (
    patch(
        "alternate_tunes_have_no_languages",
        ClearLinksMatching(Relation.LANGUAGES, r"\d+b"),
        description="Numbers like h/81b are alternate tunes; they belong in relevants only.",
    ),
    patch("purge_block_list", PurgeReferences(BLOCK_LIST)),
    patch(
        "fix_h1351",
        add_languages("h/1351", link("ht/1351", "Tagalog")),
        add_languages("ht/1351", link("h/1351", "English")),
    ),
    patch(
        "fix_ch1090",
        remove_languages("ch/1090", "h/1089", "ht/1089"),
        remove_languages("chx/1090", "h/1089", "ht/1089"),
        add_languages("ch/1090", link("h/1090", "English")),
        add_languages("chx/1090", link("h/1090", "English")),
        description="ch/1090 should map to the English and Tagalog 1090, not 1089.",
    ),
    patch(
        "fix_h445_h1359",
        reset_languages(
            "h/445",
            link("cb/445", "Cebuano"),
            link("ht/445", "Tagalog"),
            link("hf/79", "French"),
            link("de/445", "German"),
            link("S/190", "Spanish"),
        ),
        reset_languages(
            "h/1359",
            link("ch/339", TRADITIONAL),
            link("chx/339", SIMPLIFIED),
            link("ht/1359", "Tagalog"),
            link("S/192", "Spanish"),
        ),
        description="h/445 and h/1359 share a tune but their translations were crossed.",
    ),
    patch(
        "fix_hf15",
        clear_languages("hf/15"),
        add_languages("hf/15", link("h/1084", "English")),
        description="hf/15 is the French version of h/1084, not h/473.",
    ),
    patch(
        "fix_h79_h8079",
        reset_languages("h/79", link("cb/79", "Cebuano"), link("S/44", "Spanish")),
        reset_languages(
            "h/8079",
            link("ch/68", TRADITIONAL),
            link("chx/68", SIMPLIFIED),
            link("ht/79", "Tagalog"),
        ),
    ),
    patch(
        "fix_h267_h1360",
        reset_languages(
            "h/267",
            link("cb/267", "Cebuano"),
            link("ht/267", "Tagalog"),
            link("S/127", "Spanish"),
            link("de/267", "German"),
        ),
        reset_languages(
            "h/1360",
            link("ch/217", TRADITIONAL),
            link("chx/217", SIMPLIFIED),
            link("ht/1360", "Tagalog"),
            link("hf/46", "French"),
        ),
    ),
    patch(
        "fix_ts253",
        clear_languages("ts/253"),
        add_languages("ts/253", link("h/1164", "English")),
        clear_languages("tsx/253"),
        add_languages("tsx/253", link("h/1164", "English")),
        description="ts/253 is the Chinese version of h/1164, not h/754.",
    ),
    patch(
        "fix_ts142",
        clear_languages("ts/142"),
        add_languages("ts/142", link("h/1198", "English")),
        clear_languages("tsx/142"),
        add_languages("tsx/142", link("h/1198", "English")),
    ),
    patch(
        "fix_h720_h8526",
        reset_languages(
            "h/720",
            link("cb/720", "Cebuano"),
            link("ht/720", "Tagalog"),
            link("de/720", "German"),
        ),
        reset_languages("h/8526", link("ch/526", TRADITIONAL), link("chx/526", SIMPLIFIED)),
        description="ch/526 follows the tune of h/8526; the other translations follow h/720.",
    ),
    patch(
        "fix_h379",
        clear_languages("h/379"),
        description="ch/385 is translated by h/8385, not h/379.",
    ),
    patch(
        "fix_ch643",
        clear_languages("ch/643"),
        add_languages("ch/643", link("chx/643", SIMPLIFIED)),
        clear_languages("chx/643"),
        add_languages("chx/643", link("ch/643", TRADITIONAL)),
        description="ch/643 repeats only the chorus of h/1017 and is not a translation of it.",
    ),
    patch("fix_h528", clear_languages("h/528")),
    patch("fix_h480", clear_languages("h/480")),
    patch(
        "fix_ns154",
        add_languages("ns/154", link("ch/330", TRADITIONAL), link("chx/330", SIMPLIFIED)),
        add_languages("ch/330", link("ns/154", "English")),
        add_languages("chx/330", link("ns/154", "English")),
        description="ns/154 and h/8330 both translate ch/330.",
    ),
    patch(
        "fix_ts428",
        add_languages("ts/428", link("ns/474", "English")),
        add_languages("tsx/428", link("ns/474", "English")),
        description="ns/19 and ns/474 both translate ts/428.",
    ),
    patch(
        "fix_nt723_nt1307",
        clear_languages("nt/723"),
        clear_languages("nt/1307"),
        description="Keep the Chinese mapping on h/723 rather than on its new tunes.",
    ),
    patch("fix_de10_h10b", reset_languages("h/10b", link("de/10b", "German"))),
    patch("fix_de786b_h786b", reset_languages("h/786b", link("de/786b", "German"))),
    patch(
        "fix_ch9166",
        clear_languages("ch/9166"),
        add_languages("ch/9166", link("h/166", "English")),
        clear_languages("chx/9166"),
        add_languages("chx/9166", link("h/166", "English")),
    ),
    patch(
        "fix_ns54de",
        clear_languages("ns/54de"),
        add_languages("ns/54de", link("ns/54", "English")),
        description="ns/54de links to itself instead of back to ns/54.",
    ),
    patch(
        "fix_hd31",
        reset_languages("h/31", link("ch/29", TRADITIONAL), link("chx/29", SIMPLIFIED)),
        description="hd/31 is the Dutch version of ns/79 but is referenced by h/31.",
    ),
    patch(
        "fix_ch632",
        clear_languages("ch/632"),
        add_languages("ch/632", link("h/870", "English")),
        clear_languages("chx/632"),
        add_languages("chx/632", link("h/870", "English")),
    ),
    patch(
        "fix_ts248",
        clear_languages("ts/248"),
        add_languages("ts/248", link("h/300", "English")),
        clear_languages("tsx/248"),
        add_languages("tsx/248", link("h/300", "English")),
    ),
    patch(
        "fix_dangling_languages",
        add_languages("ch/ns568c", link("ns/568", "English")),
        add_languages("chx/ns568c", link("ns/568", "English")),
        add_languages("ts/228", link("ns/195", "English")),
        add_languages("tsx/228", link("ns/195", "English")),
        add_languages("ns/257", link("hd/4", "Dutch")),
        description="Targets that never link back and whose label cannot be inferred.",
    ),
)

RELEVANT_PATCHES = (
    patch(
        "fix_nt477b",
        remove_relevants("nt/477b", "nt/477b"),
        add_relevants("nt/477b", link("nt/477", "New Tune")),
        description="nt/477b links to itself instead of nt/477.",
    ),
    patch("fix_nt377", remove_relevants("nt/377", "nt/1079")),
    patch(
        "fix_ns98",
        remove_relevants("ns/98", "ns/80"),
        remove_relevants("ns/80", "ns/98"),
    ),
    patch(
        "fix_nt575_ns34_h711",
        remove_relevants("nt/575", "ns/34", "nt/711", "nt/1079"),
        clear_relevants("ns/34"),
        remove_relevants("h/711", "ns/34"),
        description="A web of songs sharing tunes without being alternate versions.",
    ),
    patch(
        "fix_ch9575_chnt575c",
        reset_relevants("ch/9575", link("ch/nt575c", "New Tune")),
        reset_relevants("chx/9575", link("chx/nt575c", "New Tune")),
    ),
    patch(
        "fix_h635_h481_h631",
        remove_relevants("h/635", "h/481", "h/631"),
        remove_relevants("h/481", "h/635", "h/631"),
        remove_relevants("h/631", "h/481", "h/635"),
    ),
    patch(
        "fix_ns59_ns110_ns111",
        clear_relevants("ns/59"),
        clear_relevants("ns/110"),
        clear_relevants("ns/111"),
    ),
    patch("fix_ns2", remove_relevants("ns/2", "ns/3"), remove_relevants("ns/3", "ns/2")),
    patch(
        "fix_ns4",
        remove_relevants("ns/4", "h/36", "ns/5"),
        remove_relevants("ns/5", "ns/4", "h/36"),
        remove_relevants("h/36", "ns/4", "ns/5"),
    ),
    patch(
        "fix_ns10_ns142",
        remove_relevants("ns/10", "ns/142"),
        remove_relevants("ns/142", "ns/10"),
    ),
    patch(
        "fix_h1033",
        remove_relevants("h/1033", "h/1007"),
        remove_relevants("h/1007", "h/1033"),
    ),
    patch(
        "fix_h1162_h1163",
        remove_relevants("h/1162", "h/1163"),
        remove_relevants("h/1163", "h/1162"),
    ),
    patch("fix_ns73", remove_relevants("ns/73", "ns/34", "nt/711")),
    patch("fix_ns53", remove_relevants("ns/53", "ns/34")),
    patch("fix_ns1", remove_relevants("ns/1", "h/278")),
    patch("fix_ns8", remove_relevants("ns/8", "h/1282"), remove_relevants("h/1282", "ns/8")),
    patch("fix_ns12", remove_relevants("ns/12", "h/661"), remove_relevants("h/661", "ns/12")),
    patch("fix_ns22", remove_relevants("ns/22", "h/313"), remove_relevants("h/313", "ns/22")),
    patch("fix_c31", remove_relevants("c/31", "h/1014"), remove_relevants("h/1014", "c/31")),
    patch("fix_c113", remove_relevants("c/113", "h/556")),
    patch("fix_h396_ns313", clear_relevants("h/396"), clear_relevants("ns/313")),
    patch(
        "fix_h383",
        reset_relevants("h/383", link("nt/383", "New Tune")),
        description="h/383 references itself instead of nt/383.",
    ),
    patch("fix_c162", remove_relevants("c/162", "h/993")),
    patch("fix_h163", remove_relevants("h/163", "h/163")),
    patch(
        "fix_dangling_relevants",
        add_relevants("h/18", link("ns/7", "O Father God, how faithful You are")),
        add_relevants("lb/12", link("ns/20", "Lord, I still love You")),
        remove_relevants("c/21", "h/70"),
        remove_relevants("h/70", "c/21"),
        add_relevants("c/21", link("h/70", "Related")),
        add_relevants("h/70", link("c/21", "Related")),
    ),
)

LANGUAGE_EXCEPTIONS = (
    # ns/154 and h/8330 are both English translations of ch/330.
    exception("h/8330", "ns/154"),
    # ns/19 and ns/474 are both English translations of ts/428.
    exception("ns/19", "ns/474"),
    # ch/641 and ts/917 are the same song published twice.
    exception("ch/641", "chx/641", "ts/917", "tsx/917"),
    exception("pt/855", "pt/1372"),
)

RELEVANT_EXCEPTIONS = (
    exception("h/528", "ns/306", "h/8444"),
    exception("h/79", "h/8079"),
    exception("ns/19", "ns/474"),
    exception("h/267", "h/1360"),
    exception("h/720", "h/8526", "nt/720", "nt/720b"),
    exception("h/666", "h/8661"),
    exception("h/445", "h/1359"),
    exception("h/1353", "h/8476"),
    exception("h/921", "h/1358"),
    exception("h/18", "ns/7"),
    exception("c/21", "h/70"),
    exception("h/1248", "ns/179"),
    exception("ns/154", "h/8330"),
    exception("ns/547", "ns/945"),
)

HYMNAL_NET = SourceProfile(
    source=Source.HYMNAL_NET,
    patches=(*LANGUAGE_PATCHES, *RELEVANT_PATCHES),
    language_exceptions=LANGUAGE_EXCEPTIONS,
    relevant_exceptions=RELEVANT_EXCEPTIONS,
    description="Legacy scraped site; highest priority source.",
)
