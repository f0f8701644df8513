"""
Korean Strategy Test Suite

This module tests the Korean fallback chain and its ordered rule tables:
- Spelling corrections (duplicate keys, exact word boundaries)
- Syllable hyphenation, explicit pairs and the generic catch-all
- Static names and syllable-by-syllable composition
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from latinym.services import DataInitializationService, HangulRomanizer, NameFormattingService, TransliterationConfig
from latinym.strategies import KoreanStrategy
from latinym.tables.korean import KOREAN_HYPHENATION, KOREAN_SPELLING_CORRECTIONS, compose_syllable
from latinym.types import FieldRole, MethodTag


class FakeRomanizer:
    def __init__(self, outputs=None):
        self._outputs = outputs or {}

    def is_available(self):
        return True

    def romanize(self, text):
        return self._outputs[text]


CONFIG = TransliterationConfig.create_default()
FORMATTER = NameFormattingService()
DATA = DataInitializationService(CONFIG, FORMATTER).initialize_data_structures()


def _strategy(romanizer=None):
    return KoreanStrategy(FORMATTER, DATA, romanizer or HangulRomanizer(enabled=False))


SPELLING_TEST_CASES = [
    ("Gim", "Kim"),
    ("Bak", "Park"),
    ("I", "Lee"),
    ("Minjun", "Min-jun"),
    # Listed twice: first position, last value
    ("Yuna", "Yoon-a"),
    # Whole words only
    ("Gimbap", "Gimbap"),
    ("Gim Minjun", "Kim Min-jun"),
]


def test_spelling_corrections():
    """Romanizer spellings are moved to registered name spellings."""
    passed = 0
    failed = 0

    for text, expected in SPELLING_TEST_CASES:
        result = KOREAN_SPELLING_CORRECTIONS.apply(text)
        if result == expected:
            passed += 1
        else:
            failed += 1
            print(f"FAILED: '{text}': expected '{expected}', got '{result}'")

    assert failed == 0, f"Spelling tests: {failed} failures out of {len(SPELLING_TEST_CASES)} tests"
    print(f"Spelling tests: {passed} passed, {failed} failed")


def test_spelling_rules_are_deduplicated():
    keys = [pattern.pattern for pattern, _ in KOREAN_SPELLING_CORRECTIONS.rules]
    assert len(keys) == len(set(keys))
    assert KOREAN_SPELLING_CORRECTIONS.name == "korean-spelling-corrections"


def test_hyphenation():
    assert KOREAN_HYPHENATION.apply("MinJun") == "Min-Jun"
    assert KOREAN_HYPHENATION.apply("SeoYeon Kim") == "Seo-Yeon Kim"
    # Generic catch-all for pairs outside the explicit table
    assert KOREAN_HYPHENATION.apply("HyeWon") == "Hye-Won"
    assert KOREAN_HYPHENATION.apply("Minsu") == "Minsu"
    assert KOREAN_HYPHENATION.apply("Min-jun") == "Min-jun"


def test_compose_syllable():
    assert compose_syllable("한") == "han"
    assert compose_syllable("글") == "geul"
    assert compose_syllable("아") == "a"
    assert compose_syllable("A") is None


def test_dictionary_match():
    result = _strategy().transliterate("김", FieldRole.LAST)
    assert (result.outcome.text, result.outcome.accuracy) == ("Kim", 0.95)
    assert result.outcome.method is MethodTag.EXACT_DICTIONARY_MATCH


def test_library_output_gets_name_spellings():
    romanizer = FakeRomanizer({"김민준": "gim minjun", "혜원": "hyewon"})
    strategy = _strategy(romanizer)

    result = strategy.transliterate("김민준", FieldRole.FIRST)
    assert result.outcome.text == "Kim Min-jun"
    assert result.outcome.accuracy == 0.85
    assert result.outcome.method is MethodTag.LIBRARY_CONVERSION

    assert strategy.transliterate("혜원", FieldRole.FIRST).outcome.text == "Hyewon"


def test_library_output_with_hangul_is_rejected():
    romanizer = FakeRomanizer({"민수": "min수"})
    result = _strategy(romanizer).transliterate("민수", FieldRole.FIRST)
    assert result.outcome.method is MethodTag.CHARACTER_MAP
    assert result.outcome.text == "Minsu"


SYLLABLE_TEST_CASES = [
    # Static whole-name table
    ("소영", ("So-young", 0.6, MethodTag.CHARACTER_MAP)),
    # Composed syllable by syllable
    ("민수", ("Minsu", 0.55, MethodTag.CHARACTER_MAP)),
    ("한글", ("Hangeul", 0.55, MethodTag.CHARACTER_MAP)),
    # Surname syllables use the name spelling
    ("박하", ("Parkha", 0.55, MethodTag.CHARACTER_MAP)),
    # Compatibility jamo
    ("ㅎㅏ", ("Ha", 0.55, MethodTag.CHARACTER_MAP)),
    # Archaic jamo have no mapping
    ("ㆆ", ("?", 0.5, MethodTag.ERROR_FALLBACK)),
]


def test_offline_fallback():
    """Without the romanizer, static names and syllable composition take over."""
    strategy = _strategy()

    passed = 0
    failed = 0

    for text, expected in SYLLABLE_TEST_CASES:
        outcome = strategy.transliterate(text, FieldRole.FIRST).outcome
        got = (outcome.text, outcome.accuracy, outcome.method)
        if got == expected:
            passed += 1
        else:
            failed += 1
            print(f"FAILED: '{text}': expected {expected}, got {got}")

    assert failed == 0, f"Korean fallback tests: {failed} failures out of {len(SYLLABLE_TEST_CASES)} tests"
    print(f"Korean fallback tests: {passed} passed, {failed} failed")


if __name__ == "__main__":
    test_spelling_corrections()
    test_offline_fallback()
