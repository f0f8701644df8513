"""
Script classification service.

Decides which writing system a name field is written in by testing Unicode
ranges in a fixed priority order.

Pure-Han text cannot be told apart between Chinese and Japanese from the
characters alone; it classifies as CHINESE and only a JP country hint routes it
to the Japanese strategy. This is an accepted limitation.
"""
from __future__ import annotations

import unicodedata

from latinym.patterns import (
    ARABIC_PATTERN,
    CYRILLIC_PATTERN,
    DEVANAGARI_PATTERN,
    GREEK_PATTERN,
    HAN_PATTERN,
    HANGUL_PATTERN,
    JAPANESE_MARK_PATTERN,
    KANA_PATTERN,
    SCRIPT_PATTERNS,
    THAI_PATTERN,
)
from latinym.types import ScriptTag

# Priority order after the Japanese/Korean/Chinese checks
_ALPHABETIC_ORDER = (
    (ScriptTag.ARABIC, ARABIC_PATTERN),
    (ScriptTag.CYRILLIC, CYRILLIC_PATTERN),
    (ScriptTag.DEVANAGARI, DEVANAGARI_PATTERN),
    (ScriptTag.GREEK, GREEK_PATTERN),
    (ScriptTag.THAI, THAI_PATTERN),
)


class ScriptClassificationService:
    """Classify a string into a ScriptTag from its codepoints."""

    def classify(self, text: str) -> ScriptTag:
        if not text:
            return ScriptTag.LATIN

        if KANA_PATTERN.search(text):
            return ScriptTag.JAPANESE
        has_han = HAN_PATTERN.search(text) is not None
        if has_han and JAPANESE_MARK_PATTERN.search(text):
            return ScriptTag.JAPANESE
        if HANGUL_PATTERN.search(text):
            return ScriptTag.KOREAN
        if has_han:
            return ScriptTag.CHINESE

        for script, pattern in _ALPHABETIC_ORDER:
            if pattern.search(text):
                return script

        if self._has_foreign_letters(text):
            return ScriptTag.UNKNOWN
        return ScriptTag.LATIN

    def contains_script(self, text: str, script: ScriptTag) -> bool:
        """True when at least one character of ``script`` occurs in ``text``."""
        if script is ScriptTag.LATIN:
            return any(self._is_latin_letter(ch) for ch in text)
        pattern = SCRIPT_PATTERNS.get(script)
        return pattern is not None and pattern.search(text) is not None

    @staticmethod
    def _is_latin_letter(ch: str) -> bool:
        return ch.isalpha() and (ch.isascii() or unicodedata.name(ch, "").startswith("LATIN"))

    def _has_foreign_letters(self, text: str) -> bool:
        """Letters from a script none of the strategies know (Hebrew, Georgian, ...)."""
        return any(ch.isalpha() and not self._is_latin_letter(ch) for ch in text)
