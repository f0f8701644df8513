"""
End-to-End Scenario Test Suite

This module runs complete requests through the public API:
- Dictionary hits for Arabic and Japanese
- Library conversion for Korean
- Diacritic folding and passthrough for Latin names
- The response envelope
"""

import asyncio
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from latinym import NameRequest
from latinym.types import MethodTag

# (first, last, country) -> (first, last, minimum accuracy)
SCENARIO_TEST_CASES = [
    (("محمد", "علي", "EG"), ("Mohammed", "Ali", 0.95)),
    (("太郎", "山田", "JP"), ("Tarō", "Yamada", 0.85)),
    (("민수", "김", "KR"), ("Minsu", "Kim", 0.85)),
    (("José", "García", "ES"), ("Jose", "Garcia", 0.95)),
    (("Xyz", "Abc", "ZZ"), ("Xyz", "Abc", 0.9)),
]


def test_scenarios(transliterator):
    """Reference requests produce the expected spellings and confidence."""
    passed = 0
    failed = 0

    for (first, last, country), (expected_first, expected_last, min_accuracy) in SCENARIO_TEST_CASES:
        result = transliterator.transliterate_sync(NameRequest(first, last, country))
        got = (result.first_name.text, result.last_name.text)

        if got == (expected_first, expected_last) and result.overall_accuracy >= min_accuracy:
            passed += 1
        else:
            failed += 1
            print(
                f"FAILED: '{first} {last}' ({country}): expected {(expected_first, expected_last)} "
                f">= {min_accuracy}, got {got} at {result.overall_accuracy}",
            )

    assert failed == 0, f"Scenario tests: {failed} failures out of {len(SCENARIO_TEST_CASES)} tests"
    print(f"Scenario tests: {passed} passed, {failed} failed")


def test_scenario_methods(transliterator):
    arabic = transliterator.transliterate_sync(NameRequest("محمد", "علي", "EG"))
    assert arabic.method is MethodTag.EXACT_DICTIONARY_MATCH
    assert arabic.overall_accuracy == 0.98

    spanish = transliterator.transliterate_sync(NameRequest("José", "García", "ES"))
    assert spanish.method is MethodTag.DIACRITIC_NORMALIZATION
    assert spanish.last_name.method is MethodTag.DIACRITIC_NORMALIZATION

    unmapped = transliterator.transliterate_sync(NameRequest("Xyz", "Abc", "ZZ"))
    assert unmapped.method is MethodTag.LATIN_PASSTHROUGH
    assert unmapped.overall_accuracy == 0.95


def test_async_entry_point_matches_sync(transliterator):
    request = NameRequest("Иван", "Петров", "RU")
    async_result = asyncio.run(transliterator.transliterate(request))
    assert async_result == transliterator.transliterate_sync(request)
    assert (async_result.first_name.text, async_result.last_name.text) == ("Ivan", "Petrov")


def test_response_envelope(transliterator):
    result = transliterator.transliterate_sync(NameRequest("José", "García", "ES"))
    envelope = result.to_dict()

    assert envelope["firstName"] == "Jose"
    assert envelope["lastName"] == "Garcia"
    assert envelope["country"] == "ES"
    assert envelope["accuracy"] == 0.98
    assert envelope["method"] == "diacritic_normalization"
    assert envelope["details"] == {
        "firstNameMethod": "diacritic_normalization",
        "lastNameMethod": "diacritic_normalization",
        "firstNameAccuracy": 0.98,
        "lastNameAccuracy": 0.98,
        "firstNameScript": "latin",
        "lastNameScript": "latin",
    }


if __name__ == "__main__":
    from latinym import NameTransliterator

    test_scenarios(NameTransliterator())
