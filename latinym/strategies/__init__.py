"""
Strategies package for name romanization.

One strategy per writing system, each an ordered chain of fallback steps, plus
the General catch-all used when a script strategy gives up.
"""

from latinym.strategies.arabic import ArabicStrategy
from latinym.strategies.base import TransliterationStrategy, run_fallback_chain
from latinym.strategies.charmap import CharacterMapStrategy, create_character_map_strategies
from latinym.strategies.chinese import ChineseStrategy
from latinym.strategies.general import GeneralStrategy
from latinym.strategies.japanese import JapaneseStrategy, kana_to_romaji
from latinym.strategies.korean import KoreanStrategy
from latinym.strategies.latin import LatinStrategy, has_diacritics, normalize_latin

__all__ = [
    "ArabicStrategy",
    "CharacterMapStrategy",
    "ChineseStrategy",
    "GeneralStrategy",
    "JapaneseStrategy",
    "KoreanStrategy",
    "LatinStrategy",
    "TransliterationStrategy",
    "create_character_map_strategies",
    "has_diacritics",
    "kana_to_romaji",
    "normalize_latin",
    "run_fallback_chain",
]
