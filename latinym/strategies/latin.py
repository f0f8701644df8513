"""
Latin strategy: diacritic folding or passthrough.
"""
from __future__ import annotations

import unicodedata

from latinym.strategies.base import TransliterationStrategy
from latinym.tables.latin import LATIN_DIACRITIC_CHARACTERS, LATIN_RESIDUALS
from latinym.types import FieldRole, MethodTag, ScriptTag, StepResult


def has_diacritics(text: str) -> bool:
    if any(ch in LATIN_DIACRITIC_CHARACTERS for ch in text):
        return True
    return any(unicodedata.combining(ch) for ch in unicodedata.normalize("NFD", text))


def normalize_latin(text: str) -> str:
    """Fold accented Latin letters to ASCII (José -> Jose, Straße -> Strasse)."""
    decomposed = unicodedata.normalize("NFD", text)
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return "".join(LATIN_RESIDUALS.get(ch, ch) for ch in stripped)


class LatinStrategy(TransliterationStrategy):
    script = ScriptTag.LATIN

    def accepts(self, text: str) -> bool:
        return True

    def transliterate(self, text: str, role: FieldRole, *, normalized: bool = False) -> StepResult:
        if has_diacritics(text):
            folded = self._formatter.capitalize_words(normalize_latin(text))
            return StepResult.success_with(folded, 0.98, MethodTag.DIACRITIC_NORMALIZATION)
        return StepResult.success_with(self._formatter.capitalize_words(text), 0.95, MethodTag.LATIN_PASSTHROUGH)
