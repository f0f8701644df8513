"""
Script Classification Test Suite

This module tests codepoint-based script detection, including:
- The fixed priority order (Japanese, Korean, Chinese, then alphabetic scripts)
- Han text with Japanese-only marks
- Unsupported scripts reported as UNKNOWN
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from latinym.services import ScriptClassificationService
from latinym.types import ScriptTag

CLASSIFICATION_TEST_CASES = [
    # Japanese: kana anywhere, or Han with Japanese marks
    ("さくら", ScriptTag.JAPANESE),
    ("カタカナ", ScriptTag.JAPANESE),
    ("山田はなこ", ScriptTag.JAPANESE),
    ("佐々木", ScriptTag.JAPANESE),
    ("三ヶ島", ScriptTag.JAPANESE),
    # Korean
    ("김민수", ScriptTag.KOREAN),
    ("ㄱㄴ", ScriptTag.KOREAN),
    # Pure Han is Chinese without a country hint
    ("山田", ScriptTag.CHINESE),
    ("王小明", ScriptTag.CHINESE),
    # Alphabetic scripts
    ("محمد", ScriptTag.ARABIC),
    ("پرویز", ScriptTag.ARABIC),
    ("Иван", ScriptTag.CYRILLIC),
    ("राम", ScriptTag.DEVANAGARI),
    ("Νίκος", ScriptTag.GREEK),
    ("สมชาย", ScriptTag.THAI),
    # Latin, and text without letters
    ("John", ScriptTag.LATIN),
    ("José", ScriptTag.LATIN),
    ("Łukasz", ScriptTag.LATIN),
    ("123", ScriptTag.LATIN),
    ("", ScriptTag.LATIN),
    # Letters no strategy knows
    ("דוד", ScriptTag.UNKNOWN),
    ("ნინო", ScriptTag.UNKNOWN),
    # Priority order decides mixed text
    ("Kim 김", ScriptTag.KOREAN),
    ("محمد Ivan", ScriptTag.ARABIC),
    ("王 Иван", ScriptTag.CHINESE),
]


def test_script_classification():
    """Each sample is classified into the expected script."""
    classifier = ScriptClassificationService()

    passed = 0
    failed = 0

    for text, expected in CLASSIFICATION_TEST_CASES:
        result = classifier.classify(text)
        if result is expected:
            passed += 1
        else:
            failed += 1
            print(f"FAILED: '{text}': expected {expected}, got {result}")

    assert failed == 0, f"Classification tests: {failed} failures out of {len(CLASSIFICATION_TEST_CASES)} tests"
    print(f"Classification tests: {passed} passed, {failed} failed")


def test_contains_script():
    classifier = ScriptClassificationService()

    assert classifier.contains_script("山田", ScriptTag.JAPANESE)
    assert classifier.contains_script("山田", ScriptTag.CHINESE)
    assert not classifier.contains_script("Yamada", ScriptTag.JAPANESE)
    assert classifier.contains_script("Abu محمد", ScriptTag.ARABIC)
    assert classifier.contains_script("José", ScriptTag.LATIN)
    assert not classifier.contains_script("Иван", ScriptTag.LATIN)
    assert not classifier.contains_script("Иван", ScriptTag.UNKNOWN)


if __name__ == "__main__":
    test_script_classification()
