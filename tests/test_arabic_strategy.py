"""
Arabic Strategy Test Suite

This module tests the Arabic fallback chain:
- Exact and per-word dictionary matches
- Library output cleanup and garbage rejection
- The character map with consonant-skeleton vowelling
- Placeholder substitution
"""

import sys
from pathlib import Path
from types import MappingProxyType

sys.path.insert(0, str(Path(__file__).parent.parent))

from latinym import NameRequest
from latinym.services import DataInitializationService, NameFormattingService, TransliterationConfig
from latinym.services.initialization import TransliterationData
from latinym.strategies import ArabicStrategy
from latinym.tables.arabic import ARABIC_DIACRITIC_STRIPPING
from latinym.types import FieldRole, MethodTag


class FakeUroman:
    """Stands in for uroman with canned output."""

    def __init__(self, outputs=None, error=None):
        self._outputs = outputs or {}
        self._error = error

    def is_available(self):
        return True

    def romanize(self, text):
        if self._error is not None:
            raise self._error
        return self._outputs.get(text, text)


class DisabledUroman:
    def is_available(self):
        return False

    def romanize(self, text):
        raise AssertionError("romanize must not be called when unavailable")


FORMATTER = NameFormattingService()
BUNDLED_DATA = DataInitializationService(TransliterationConfig.create_default(), FORMATTER).initialize_data_structures()
EMPTY_DATA = TransliterationData(dictionaries=MappingProxyType({}), pair_overrides=MappingProxyType({}))


def _strategy(romanizer=None, data=BUNDLED_DATA):
    return ArabicStrategy(FORMATTER, data, romanizer or DisabledUroman())


# (text, role) -> (text, accuracy, method)
DICTIONARY_TEST_CASES = [
    (("محمد", FieldRole.FIRST), ("Mohammed", 0.98, MethodTag.EXACT_DICTIONARY_MATCH)),
    (("علي", FieldRole.LAST), ("Ali", 0.98, MethodTag.EXACT_DICTIONARY_MATCH)),
    # Harakat are ignored when looking names up
    (("مُحَمَّد", FieldRole.FIRST), ("Mohammed", 0.98, MethodTag.EXACT_DICTIONARY_MATCH)),
    (("  محمد  ", FieldRole.FIRST), ("Mohammed", 0.98, MethodTag.EXACT_DICTIONARY_MATCH)),
    # Particles are shared by both roles
    (("أبو", FieldRole.FIRST), ("Abu", 0.98, MethodTag.EXACT_DICTIONARY_MATCH)),
    # Every word known: full ratio
    (("محمد علي", FieldRole.FIRST), ("Mohammed Ali", 0.98, MethodTag.MIXED_DICTIONARY_MATCH)),
    # Shared particles, and the other role's dictionary, are consulted per word
    (("أبو حسن", FieldRole.FIRST), ("Abu Hassan", 0.98, MethodTag.MIXED_DICTIONARY_MATCH)),
    (("محمد حداد", FieldRole.FIRST), ("Mohammed Haddad", 0.98, MethodTag.MIXED_DICTIONARY_MATCH)),
    # Half the words known
    (("محمد زهر", FieldRole.FIRST), ("Mohammed Zahar", 0.965, MethodTag.MIXED_DICTIONARY_MATCH)),
]


def test_dictionary_matches():
    """Dictionary hits beat every other tier."""
    strategy = _strategy()

    passed = 0
    failed = 0

    for (text, role), (expected_text, expected_accuracy, expected_method) in DICTIONARY_TEST_CASES:
        result = strategy.transliterate(text, role)
        outcome = result.outcome
        got = (outcome.text, round(outcome.accuracy, 3), outcome.method) if result.success else None

        if got == (expected_text, expected_accuracy, expected_method):
            passed += 1
        else:
            failed += 1
            print(f"FAILED: '{text}' ({role.value}): expected {(expected_text, expected_accuracy, expected_method)}, got {got}")

    assert failed == 0, f"Arabic dictionary tests: {failed} failures out of {len(DICTIONARY_TEST_CASES)} tests"
    print(f"Arabic dictionary tests: {passed} passed, {failed} failed")


def test_library_output_is_cleaned():
    strategy = _strategy(FakeUroman({"حامد": "ḥāmid"}))
    result = strategy.transliterate("حامد", FieldRole.FIRST)

    assert result.outcome.text == "Hamid"
    assert result.outcome.accuracy == 0.8
    assert result.outcome.method is MethodTag.LIBRARY_CONVERSION


def test_consonant_skeleton_from_library_is_rejected():
    strategy = _strategy(FakeUroman({"زهر": "zhr"}))
    result = strategy.transliterate("زهر", FieldRole.FIRST)

    assert result.outcome.method is MethodTag.CHARACTER_MAP
    assert result.outcome.accuracy == 0.75
    assert result.outcome.text == "Zahar"


# uroman spelling -> rejected?
GARBAGE_TEST_CASES = [
    ("alshryf", True),
    ("al-hsyny", True),
    ("khdyja", True),
    ("zhr", True),
    ("abd alrhmn", True),
    ("hamid", False),
    ("ashraf", False),
    ("al-sharif", False),
    ("abdullah", False),
    ("muhammad ali", False),
]


def test_library_skeleton_detection():
    """A leading article or a single vowel does not hide a consonant skeleton."""
    passed = 0
    failed = 0

    for romanized, rejected in GARBAGE_TEST_CASES:
        reason = ArabicStrategy._garbage_reason("شريف", romanized)
        if (reason is not None) == rejected:
            passed += 1
        else:
            failed += 1
            print(f"FAILED: '{romanized}': expected rejected={rejected}, got {reason!r}")

    assert failed == 0, f"Skeleton tests: {failed} failures out of {len(GARBAGE_TEST_CASES)} tests"
    print(f"Skeleton tests: {passed} passed, {failed} failed")


def test_article_skeleton_falls_through_to_character_map():
    strategy = _strategy(FakeUroman({"الشريف": "alshryf"}))
    result = strategy.transliterate("الشريف", FieldRole.LAST)

    assert result.outcome.text == "Alsherif"
    assert result.outcome.accuracy == 0.75
    assert result.outcome.method is MethodTag.CHARACTER_MAP


def test_exact_match_consults_other_role():
    strategy = _strategy(FakeUroman({"خديجة": "khdyja", "الحسيني": "alhsyny"}))

    last = strategy.transliterate("خديجة", FieldRole.LAST).outcome
    assert (last.text, last.accuracy, last.method) == ("Khadija", 0.98, MethodTag.EXACT_DICTIONARY_MATCH)

    first = strategy.transliterate("الحسيني", FieldRole.FIRST).outcome
    assert (first.text, first.accuracy, first.method) == ("Al-Husseini", 0.98, MethodTag.EXACT_DICTIONARY_MATCH)


def test_real_uroman_never_beats_offline(transliterator, offline_transliterator):
    """With uroman enabled, dictionary and character-map spellings are not replaced by skeletons."""
    requests = [
        NameRequest("خديجة", "الشريف", "EG"),
        NameRequest("الحسيني", "خديجة", "EG"),
    ]
    for request in requests:
        online = transliterator.transliterate_sync(request)
        offline = offline_transliterator.transliterate_sync(request)
        assert (online.first_name.text, online.last_name.text) == (offline.first_name.text, offline.last_name.text)

    result = transliterator.transliterate_sync(requests[0])
    assert (result.first_name.text, result.last_name.text) == ("Khadija", "Alsherif")
    assert result.last_name.method is MethodTag.CHARACTER_MAP


def test_unchanged_library_output_is_rejected():
    strategy = _strategy(FakeUroman())
    result = strategy.transliterate("زهر", FieldRole.FIRST)
    assert result.outcome.method is MethodTag.CHARACTER_MAP


def test_library_error_falls_through():
    strategy = _strategy(FakeUroman(error=RuntimeError("broken")))
    result = strategy.transliterate("زهر", FieldRole.FIRST)
    assert result.success
    assert result.outcome.method is MethodTag.CHARACTER_MAP


def test_skeleton_overrides_without_dictionaries():
    strategy = _strategy(data=EMPTY_DATA)

    assert strategy.transliterate("محمد", FieldRole.FIRST).outcome.text == "Mohammed"
    assert strategy.transliterate("خالد", FieldRole.FIRST).outcome.text == "Khalid"
    # Bare consonant clusters get vowels: CaCaC and CaCaCC
    assert strategy.transliterate("زهر", FieldRole.FIRST).outcome.text == "Zahar"
    assert strategy.transliterate("برهم", FieldRole.FIRST).outcome.text == "Barahm"


def test_character_map_handles_rare_letters_and_digits():
    strategy = _strategy(data=EMPTY_DATA)
    result = strategy.transliterate("ڪريم ٣", FieldRole.FIRST)

    assert result.outcome.method is MethodTag.CHARACTER_MAP
    assert result.outcome.text.startswith("K")
    assert result.outcome.text.endswith("3")


def test_placeholder_when_nothing_maps():
    strategy = _strategy(data=EMPTY_DATA)
    result = strategy.transliterate("ء", FieldRole.FIRST)

    assert result.outcome.text == "?"
    assert result.outcome.accuracy == 0.5
    assert result.outcome.method is MethodTag.ERROR_FALLBACK


def test_diacritic_stripping_table():
    assert ARABIC_DIACRITIC_STRIPPING.apply("ʿAbd al-Raḥmān") == "Abd al-Rahman"
    assert ARABIC_DIACRITIC_STRIPPING.apply("Ǧamāl") == "Jamal"
    assert ARABIC_DIACRITIC_STRIPPING.apply("šarīf") == "sharif"


if __name__ == "__main__":
    test_dictionary_matches()
