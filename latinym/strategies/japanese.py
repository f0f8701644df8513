"""
Japanese strategy: dictionary, pykakasi, static names, kana table.

Kanji readings are not derivable from the characters alone, so anything past
the engine is a best effort: the kana table handles kana-only names and every
unread kanji is left as ``?``.
"""
from __future__ import annotations

from latinym.paths import logger
from latinym.patterns import JAPANESE_PATTERN
from latinym.services.engines import KakasiRomanizer
from latinym.services.formatting import NameFormattingService
from latinym.services.initialization import TransliterationData
from latinym.strategies.base import TransliterationStrategy, run_fallback_chain
from latinym.tables.japanese import (
    JAPANESE_STATIC_NAMES,
    KANA,
    LONG_VOWEL_COLLAPSE,
    LONG_VOWEL_MACRONS,
    MACRON_RESTORATION,
    MACRON_STRIPPING,
    SOKUON,
)
from latinym.types import FieldRole, MethodTag, ScriptTag, StepResult, TransliterationConfig

_VOWELS = frozenset("aeiou")


class JapaneseStrategy(TransliterationStrategy):
    script = ScriptTag.JAPANESE

    def __init__(
        self,
        formatter: NameFormattingService,
        data: TransliterationData,
        engine: KakasiRomanizer,
        config: TransliterationConfig,
    ):
        super().__init__(formatter)
        self._data = data
        self._engine = engine
        self._config = config

    def transliterate(self, text: str, role: FieldRole, *, normalized: bool = False) -> StepResult:
        key = self._formatter.lookup_key(text)
        result = run_fallback_chain(
            [
                ("exact_dictionary", lambda: self._exact_match(key, role)),
                ("pykakasi", lambda: self._library(key, normalized)),
                ("static_names", lambda: self._static_name(key)),
                ("kana_table", lambda: self._kana_table(key)),
            ],
            label="japanese",
        )
        if normalized:
            return result.map(lambda outcome: outcome.with_text(MACRON_STRIPPING.apply(outcome.text)))
        return result

    def _exact_match(self, key: str, role: FieldRole) -> StepResult:
        latin = self._data.dictionary(ScriptTag.JAPANESE, role).get(key)
        if latin is None:
            return StepResult.failure("not in dictionary")
        return StepResult.success_with(latin, 0.95, MethodTag.EXACT_DICTIONARY_MATCH)

    def _library(self, text: str, normalized: bool) -> StepResult:
        if not self._engine.is_initialized:
            return StepResult.failure("Japanese engine not initialized")
        system = self._config.japanese_normalized_system if normalized else self._config.japanese_romaji_system
        try:
            raw = self._engine.romanize(text, system)
        except Exception as e:
            logger.warning(f"pykakasi failed on {text!r}: {e}")
            return StepResult.failure(str(e))

        long_vowels = LONG_VOWEL_COLLAPSE if normalized else LONG_VOWEL_MACRONS
        romaji = self._formatter.title_case(long_vowels.apply(raw.lower()))
        if not normalized:
            romaji = MACRON_RESTORATION.apply(romaji)
        if not romaji or JAPANESE_PATTERN.search(romaji):
            return StepResult.failure(f"incomplete conversion {romaji!r}")
        return StepResult.success_with(romaji, 0.85, MethodTag.LIBRARY_CONVERSION)

    def _static_name(self, key: str) -> StepResult:
        latin = JAPANESE_STATIC_NAMES.get(key)
        if latin is None:
            return StepResult.failure("not a known name")
        return StepResult.success_with(latin, 0.6, MethodTag.CHARACTER_MAP)

    def _kana_table(self, key: str) -> StepResult:
        romaji = self._formatter.title_case(kana_to_romaji(key))
        if "?" in romaji:
            return StepResult.success_with(romaji, 0.5, MethodTag.ERROR_FALLBACK)
        return StepResult.success_with(romaji, 0.55, MethodTag.CHARACTER_MAP)


def kana_to_romaji(text: str) -> str:
    """Hepburn for kana; other Japanese characters become ``?``, everything else is kept."""
    out: list[str] = []
    double_next = False
    i = 0
    while i < len(text):
        ch = text[i]
        if ch in SOKUON:
            double_next = True
            i += 1
            continue

        pair = text[i : i + 2]
        if len(pair) == 2 and pair in KANA:
            romaji = KANA[pair]
            i += 2
        else:
            romaji = KANA.get(ch)
            if romaji is None:
                romaji = "?" if JAPANESE_PATTERN.match(ch) else ch
            i += 1

        if double_next and romaji[:1].isalpha() and romaji[0] not in _VOWELS:
            # っち is "tchi", not "cchi"
            romaji = ("t" if romaji.startswith("ch") else romaji[0]) + romaji
        double_next = False
        out.append(romaji)
    return "".join(out)
