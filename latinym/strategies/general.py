"""
Catch-all strategy for anything the script strategies could not handle.
"""
from __future__ import annotations

from unidecode import unidecode

from latinym.paths import logger
from latinym.strategies.base import TransliterationStrategy
from latinym.types import FieldRole, MethodTag, ScriptTag, StepResult, TransliterationOutcome


class GeneralStrategy(TransliterationStrategy):
    """unidecode over the whole field; returns the input untouched if even that fails."""

    script = ScriptTag.UNKNOWN

    def accepts(self, text: str) -> bool:
        return True

    def transliterate(self, text: str, role: FieldRole, *, normalized: bool = False) -> StepResult:
        return StepResult.success_with_outcome(self.fallback(text))

    def fallback(self, text: str) -> TransliterationOutcome:
        try:
            converted = self._formatter.capitalize_words(unidecode(text))
        except Exception as e:
            logger.warning(f"unidecode failed on {text!r}: {e}")
            converted = ""
        # Punctuation alone (々 -> '"') is not a romanization
        if not any(ch.isalnum() for ch in converted):
            return TransliterationOutcome(text, 0.1, MethodTag.FALLBACK_ORIGINAL)
        return TransliterationOutcome(converted, 0.6, MethodTag.GENERAL_TRANSLITERATION)
