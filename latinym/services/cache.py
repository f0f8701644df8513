"""
Cache management service for Han to Pinyin conversion.

This module provides memoised Han character to Pinyin conversion so repeated
names cost one dictionary lookup.
"""
from __future__ import annotations

from functools import lru_cache

import pypinyin

from latinym.types import TransliterationConfig


@lru_cache(maxsize=32_768)  # one entry per unique Han word
def _word_to_pinyin(word: str) -> tuple[str, ...]:
    # Phrase-level conversion so multi-character readings come from pypinyin's phrase table
    return tuple(pypinyin.lazy_pinyin(word, style=pypinyin.Style.NORMAL))


class PinyinCacheService:
    """
    * deterministic, thread‑safe, O(1) repeated look‑ups
    """

    def __init__(self, config: TransliterationConfig):
        self.enabled = config.enable_pinyin

    # ---------- public API ----------
    def is_available(self) -> bool:
        return self.enabled

    def han_to_pinyin(self, han_str: str) -> list[str]:
        """Return toneless pinyin syllables for a Han string, memoising on first sight."""
        if not self.enabled:
            raise RuntimeError("pinyin conversion is disabled")
        return list(_word_to_pinyin(han_str))

    @property
    def cache_size(self) -> int:
        return _word_to_pinyin.cache_info().currsize
