"""
Rule Table Test Suite

This module tests the table primitives that every strategy builds on:
- Ordered correction rule sets and their duplicate-key semantics
- Longest-match translation
- Country grouping and name formatting helpers
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from latinym.services import NameFormattingService
from latinym.tables.countries import COUNTRY_GROUPS, country_group
from latinym.tables.rules import literal_rules, longest_match_translate, pattern_rules, whole_word_rules
from latinym.types import CountryGroup, ScriptTag


def test_rules_apply_in_order():
    rules = literal_rules("demo", "1", [("ab", "x"), ("x", "y")])
    assert rules.apply("abab") == "yy"
    assert len(rules) == 2


def test_duplicate_keys_keep_first_position_last_value():
    rules = whole_word_rules("demo", "1", [("Yuna", "Yu-na"), ("Na", "Nah"), ("Yuna", "Yoon-a")])
    assert [replacement for _, replacement in rules.rules] == ["Yoon-a", "Nah"]
    assert rules.apply("Yuna") == "Yoon-a"


def test_whole_word_boundaries():
    rules = whole_word_rules("demo", "1", [("Ko", "Kō")])
    assert rules.apply("Ko Kouki Sako") == "Kō Kouki Sako"


def test_pattern_rules():
    rules = pattern_rules("demo", "1", [(r"\b([A-Z][a-z]+)([A-Z][a-z]+)\b", r"\1-\2")])
    assert rules.apply("JiHoon Park") == "Ji-Hoon Park"


def test_longest_match_translate():
    table = {"a": "1", "ab": "2", "abc": "3"}
    assert longest_match_translate("abcab", table, 3) == "32"
    assert longest_match_translate("xaz", table, 3) == "x1z"
    assert longest_match_translate("xaz", table, 3, unknown=lambda ch: "?") == "?1?"


COUNTRY_TEST_CASES = [
    ("EG", CountryGroup.ARABIC),
    ("ir", CountryGroup.ARABIC),
    (" JP ", CountryGroup.JAPANESE),
    ("KP", CountryGroup.KOREAN),
    ("HK", CountryGroup.CHINESE),
    ("UA", CountryGroup.CYRILLIC),
    ("NP", CountryGroup.DEVANAGARI),
    ("CY", CountryGroup.GREEK),
    ("TH", CountryGroup.THAI),
    ("US", None),
    ("ZZ", None),
]


def test_country_groups():
    """Country codes resolve to their romanization group, case-insensitively."""
    failed = 0
    for code, expected in COUNTRY_TEST_CASES:
        result = country_group(code)
        if result is not expected:
            failed += 1
            print(f"FAILED: '{code}': expected {expected}, got {result}")

    assert failed == 0, f"Country tests: {failed} failures out of {len(COUNTRY_TEST_CASES)} tests"


def test_every_group_has_a_script():
    assert {group.script for group in CountryGroup} == set(ScriptTag) - {ScriptTag.LATIN, ScriptTag.UNKNOWN}
    assert set(COUNTRY_GROUPS.values()) == set(CountryGroup)


def test_formatting_helpers():
    formatter = NameFormattingService()

    assert formatter.title_case("abd al-RAHMAN") == "Abd Al-Rahman"
    assert formatter.title_case("ts'ai  lin") == "Ts'ai Lin"
    assert formatter.capitalize_words("mcDonald  o'neil") == "McDonald O'neil"
    assert formatter.lookup_key(" مُحَمَّد  علي ") == "محمد علي"


if __name__ == "__main__":
    test_country_groups()
