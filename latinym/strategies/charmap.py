"""
Table-driven strategies for alphabetic scripts with regular letter mappings.
"""
from __future__ import annotations

from collections.abc import Mapping

from latinym.services.formatting import NameFormattingService
from latinym.strategies.base import TransliterationStrategy
from latinym.tables.cyrillic import CYRILLIC_MAP, CYRILLIC_MAX_KEY
from latinym.tables.devanagari import DEVANAGARI_MAP, DEVANAGARI_MAX_KEY
from latinym.tables.greek import GREEK_MAP, GREEK_MAX_KEY
from latinym.tables.rules import longest_match_translate
from latinym.tables.thai import THAI_MAP, THAI_MAX_KEY
from latinym.types import FieldRole, MethodTag, ScriptTag, StepResult


class CharacterMapStrategy(TransliterationStrategy):
    """Longest-match letter map with a fixed confidence per script."""

    def __init__(
        self,
        formatter: NameFormattingService,
        script: ScriptTag,
        table: Mapping[str, str],
        max_key_length: int,
        accuracy: float,
    ):
        super().__init__(formatter)
        self.script = script
        self._table = table
        self._max_key_length = max_key_length
        self._accuracy = accuracy

    def transliterate(self, text: str, role: FieldRole, *, normalized: bool = False) -> StepResult:
        translated = longest_match_translate(text, self._table, self._max_key_length)
        result = self._formatter.capitalize_words(translated)
        if not result:
            return StepResult.failure("nothing mapped")
        return StepResult.success_with(result, self._accuracy, MethodTag.CHARACTER_MAP)


def create_character_map_strategies(formatter: NameFormattingService) -> dict[ScriptTag, CharacterMapStrategy]:
    """Factory for the Cyrillic, Greek, Thai and Devanagari strategies."""
    return {
        ScriptTag.CYRILLIC: CharacterMapStrategy(formatter, ScriptTag.CYRILLIC, CYRILLIC_MAP, CYRILLIC_MAX_KEY, 0.9),
        ScriptTag.GREEK: CharacterMapStrategy(formatter, ScriptTag.GREEK, GREEK_MAP, GREEK_MAX_KEY, 0.9),
        ScriptTag.THAI: CharacterMapStrategy(formatter, ScriptTag.THAI, THAI_MAP, THAI_MAX_KEY, 0.7),
        ScriptTag.DEVANAGARI: CharacterMapStrategy(
            formatter,
            ScriptTag.DEVANAGARI,
            DEVANAGARI_MAP,
            DEVANAGARI_MAX_KEY,
            0.8,
        ),
    }
