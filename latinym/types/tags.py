"""
Closed tag sets used throughout the romanization pipeline.

Every routing decision keys on these enums rather than on free-form strings, so
a new script has to be added here before any table can refer to it.
"""
from __future__ import annotations

from enum import Enum


class ScriptTag(str, Enum):
    """Writing system detected from a string's codepoints."""

    ARABIC = "arabic"
    JAPANESE = "japanese"
    KOREAN = "korean"
    CHINESE = "chinese"
    CYRILLIC = "cyrillic"
    DEVANAGARI = "devanagari"
    GREEK = "greek"
    THAI = "thai"
    LATIN = "latin"
    UNKNOWN = "unknown"


class CountryGroup(str, Enum):
    """Group of ISO country codes that share a preferred romanization strategy."""

    ARABIC = "arabic"
    JAPANESE = "japanese"
    KOREAN = "korean"
    CHINESE = "chinese"
    CYRILLIC = "cyrillic"
    DEVANAGARI = "devanagari"
    GREEK = "greek"
    THAI = "thai"

    @property
    def script(self) -> ScriptTag:
        return ScriptTag(self.value)


class MethodTag(str, Enum):
    """Provenance of a romanized field."""

    EXACT_DICTIONARY_MATCH = "exact_dictionary_match"
    MIXED_DICTIONARY_MATCH = "mixed_dictionary_match"
    LIBRARY_CONVERSION = "library_conversion"
    CHARACTER_MAP = "character_map"
    DIACRITIC_NORMALIZATION = "diacritic_normalization"
    LATIN_PASSTHROUGH = "latin_passthrough"
    GENERAL_TRANSLITERATION = "general_transliteration"
    ERROR_FALLBACK = "error_fallback"
    FALLBACK_ORIGINAL = "fallback_original"
    EMPTY = "empty"
    CURATED_PAIR_MATCH = "curated_pair_match"


class FieldRole(str, Enum):
    """Which half of the name a field is."""

    FIRST = "first"
    LAST = "last"

    @property
    def other(self) -> FieldRole:
        return FieldRole.LAST if self is FieldRole.FIRST else FieldRole.FIRST
