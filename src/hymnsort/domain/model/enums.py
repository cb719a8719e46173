"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum


class HymnLanguage(StrEnum):
    UNKNOWN = ""
    ENGLISH = "en"
    DUTCH = "nl"
    GERMAN = "de"
    CHINESE_TRADITIONAL = "zh_HANT"
    CHINESE_SIMPLIFIED = "zh_HANS"
    CEBUANO = "ceb"
    TAGALOG = "tl"
    FRENCH = "fr"
    SPANISH = "es"
    KOREAN = "ko"
    JAPANESE = "ja"
    INDONESIAN = "id"
    FARSI = "fa"
    RUSSIAN = "ru"
    PORTUGUESE = "pt"
    HEBREW = "he"
    SLOVAK = "sk"
    ESTONIAN = "et"
    ARABIC = "ar"


class HymnType(StrEnum):
    """Hymnal edition/language combination, keyed by its canonical abbreviation."""

    CLASSIC_HYMN = "h"
    NEW_TUNE = "nt"
    NEW_SONG = "ns"
    CHILDREN_SONG = "c"
    HOWARD_HIGASHI = "lb"
    DUTCH = "hd"
    GERMAN = "de"
    CHINESE = "ch"
    CHINESE_SIMPLIFIED = "chx"
    CHINESE_SUPPLEMENTAL = "ts"
    CHINESE_SUPPLEMENTAL_SIMPLIFIED = "tsx"
    CEBUANO = "cb"
    TAGALOG = "ht"
    FRENCH = "hf"
    SPANISH = "S"
    KOREAN = "K"
    JAPANESE = "J"
    INDONESIAN = "I"
    FARSI = "F"
    RUSSIAN = "R"
    PORTUGUESE = "pt"
    BE_FILLED = "bf"
    LIEDERBUCH = "lde"
    HEBREW = "he"
    BLUE_SONGBOOK = "sb"
    SONGBASE_OTHER = "sbx"

    @classmethod
    def from_abbreviation(cls, abbreviation: str) -> HymnType:
        try:
            return cls(abbreviation)
        except ValueError:
            raise UnrecognizedHymnTypeError(abbreviation=abbreviation) from None

    @property
    def language(self) -> HymnLanguage:
        return _TYPE_LANGUAGES.get(self, HymnLanguage.ENGLISH)


class Relation(StrEnum):
    """The two link collections every hymn carries."""

    LANGUAGES = "languages"
    RELEVANTS = "relevants"


class Source(StrEnum):
    HYMNAL_NET = "hymnal_net"
    H4A = "h4a"
    LIEDERBUCH = "liederbuch"
    SONGBASE = "songbase"


class UnrecognizedHymnTypeError(ValueError):
    """Raised when an abbreviation does not name a known hymn type."""

    def __init__(self, *, abbreviation: str) -> None:
        self.abbreviation = abbreviation
        super().__init__(f"Unrecognized hymn type: {abbreviation!r}")


_TYPE_LANGUAGES: dict[HymnType, HymnLanguage] = {
    HymnType.DUTCH: HymnLanguage.DUTCH,
    HymnType.GERMAN: HymnLanguage.GERMAN,
    HymnType.LIEDERBUCH: HymnLanguage.GERMAN,
    HymnType.CHINESE: HymnLanguage.CHINESE_TRADITIONAL,
    HymnType.CHINESE_SUPPLEMENTAL: HymnLanguage.CHINESE_TRADITIONAL,
    HymnType.CHINESE_SIMPLIFIED: HymnLanguage.CHINESE_SIMPLIFIED,
    HymnType.CHINESE_SUPPLEMENTAL_SIMPLIFIED: HymnLanguage.CHINESE_SIMPLIFIED,
    HymnType.CEBUANO: HymnLanguage.CEBUANO,
    HymnType.TAGALOG: HymnLanguage.TAGALOG,
    HymnType.FRENCH: HymnLanguage.FRENCH,
    HymnType.SPANISH: HymnLanguage.SPANISH,
    HymnType.KOREAN: HymnLanguage.KOREAN,
    HymnType.JAPANESE: HymnLanguage.JAPANESE,
    HymnType.INDONESIAN: HymnLanguage.INDONESIAN,
    HymnType.FARSI: HymnLanguage.FARSI,
    HymnType.RUSSIAN: HymnLanguage.RUSSIAN,
    HymnType.PORTUGUESE: HymnLanguage.PORTUGUESE,
    HymnType.HEBREW: HymnLanguage.HEBREW,
}
