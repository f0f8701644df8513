"""
Korean strategy: dictionary, korean-romanizer with name spellings, syllable table.
"""
from __future__ import annotations

from latinym.paths import logger
from latinym.patterns import HANGUL_PATTERN
from latinym.services.engines import HangulRomanizer
from latinym.services.formatting import NameFormattingService
from latinym.services.initialization import TransliterationData
from latinym.strategies.base import TransliterationStrategy, run_fallback_chain
from latinym.tables.korean import (
    COMPATIBILITY_JAMO,
    KOREAN_HYPHENATION,
    KOREAN_NAME_SYLLABLES,
    KOREAN_SPELLING_CORRECTIONS,
    KOREAN_STATIC_NAMES,
    compose_syllable,
)
from latinym.types import FieldRole, MethodTag, ScriptTag, StepResult


class KoreanStrategy(TransliterationStrategy):
    script = ScriptTag.KOREAN

    def __init__(self, formatter: NameFormattingService, data: TransliterationData, romanizer: HangulRomanizer):
        super().__init__(formatter)
        self._data = data
        self._romanizer = romanizer

    def transliterate(self, text: str, role: FieldRole, *, normalized: bool = False) -> StepResult:
        key = self._formatter.lookup_key(text)
        return run_fallback_chain(
            [
                ("exact_dictionary", lambda: self._exact_match(key, role)),
                ("korean_romanizer", lambda: self._library(key)),
                ("static_names", lambda: self._static_name(key)),
                ("syllable_table", lambda: self._syllable_table(key)),
            ],
            label="korean",
        )

    def _exact_match(self, key: str, role: FieldRole) -> StepResult:
        latin = self._data.dictionary(ScriptTag.KOREAN, role).get(key)
        if latin is None:
            return StepResult.failure("not in dictionary")
        return StepResult.success_with(latin, 0.95, MethodTag.EXACT_DICTIONARY_MATCH)

    def _library(self, text: str) -> StepResult:
        if not self._romanizer.is_available():
            return StepResult.failure("Korean romanizer unavailable")
        try:
            raw = self._romanizer.romanize(text)
        except Exception as e:
            logger.warning(f"korean-romanizer failed on {text!r}: {e}")
            return StepResult.failure(str(e))

        romanized = self.apply_name_spelling(self._formatter.title_case(raw))
        if not romanized or HANGUL_PATTERN.search(romanized):
            return StepResult.failure(f"incomplete conversion {romanized!r}")
        return StepResult.success_with(romanized, 0.85, MethodTag.LIBRARY_CONVERSION)

    @staticmethod
    def apply_name_spelling(romanized: str) -> str:
        """Conventional name spellings first, then syllable hyphenation."""
        return KOREAN_HYPHENATION.apply(KOREAN_SPELLING_CORRECTIONS.apply(romanized))

    def _static_name(self, key: str) -> StepResult:
        latin = KOREAN_STATIC_NAMES.get(key)
        if latin is None:
            return StepResult.failure("not a known name")
        return StepResult.success_with(latin, 0.6, MethodTag.CHARACTER_MAP)

    def _syllable_table(self, key: str) -> StepResult:
        romanized = self._formatter.title_case("".join(_syllable(ch) for ch in key))
        if "?" in romanized:
            return StepResult.success_with(romanized, 0.5, MethodTag.ERROR_FALLBACK)
        return StepResult.success_with(romanized, 0.55, MethodTag.CHARACTER_MAP)


def _syllable(ch: str) -> str:
    latin = KOREAN_NAME_SYLLABLES.get(ch)
    if latin is not None:
        return latin
    latin = compose_syllable(ch)
    if latin is not None:
        return latin
    latin = COMPATIBILITY_JAMO.get(ch)
    if latin is not None:
        return latin
    return "?" if HANGUL_PATTERN.match(ch) else ch
