"""
Chinese strategy: Hanyu Pinyin through pypinyin.
"""
from __future__ import annotations

from latinym.paths import logger
from latinym.services.cache import PinyinCacheService
from latinym.services.formatting import NameFormattingService
from latinym.strategies.base import TransliterationStrategy
from latinym.tables.chinese import CHINESE_SURNAME_MAX_KEY, CHINESE_SURNAME_READINGS
from latinym.types import FieldRole, MethodTag, ScriptTag, StepResult


class ChineseStrategy(TransliterationStrategy):
    script = ScriptTag.CHINESE

    def __init__(self, formatter: NameFormattingService, cache_service: PinyinCacheService):
        super().__init__(formatter)
        self._cache_service = cache_service

    def transliterate(self, text: str, role: FieldRole, *, normalized: bool = False) -> StepResult:
        if not self._cache_service.is_available():
            return StepResult.failure("pinyin conversion disabled")

        words = self._formatter.collapse_whitespace(text).split(" ")
        try:
            romanized = []
            for index, word in enumerate(words):
                if index == 0 and role is FieldRole.LAST:
                    romanized.append(self._surname_to_pinyin(word))
                else:
                    romanized.append("".join(self._cache_service.han_to_pinyin(word)))
        except Exception as e:
            logger.warning(f"pypinyin failed on {text!r}: {e}")
            return StepResult.failure(str(e))

        result = self._formatter.title_case(" ".join(romanized))
        if not result:
            return StepResult.failure("empty conversion")
        return StepResult.success_with(result, 0.9, MethodTag.LIBRARY_CONVERSION)

    def _surname_to_pinyin(self, word: str) -> str:
        """Pinyin for a surname word; a leading heteronym takes its surname reading."""
        for length in range(min(CHINESE_SURNAME_MAX_KEY, len(word)), 0, -1):
            reading = CHINESE_SURNAME_READINGS.get(word[:length])
            if reading is not None:
                rest = word[length:]
                return reading + ("".join(self._cache_service.han_to_pinyin(rest)) if rest else "")
        return "".join(self._cache_service.han_to_pinyin(word))
