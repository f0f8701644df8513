"""
Request and Result Test Suite

This module tests request validation, result composition, curated pair
overrides and the engine status report.
"""

import asyncio
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from latinym import NameRequest, NameTransliterator, ValidationError
from latinym.types import MethodTag, TransliterationConfig, TransliterationOutcome, TransliterationResult, round_accuracy

INVALID_PAYLOADS = [
    {},
    {"firstName": "Ivan"},
    {"firstName": "", "country": "RU"},
    {"firstName": "   ", "country": "RU"},
    {"firstName": "Ivan", "country": "  "},
    {"firstName": "Ivan", "country": "RUS"},
    {"firstName": "Ivan", "country": "R1"},
    {"firstName": 42, "country": "RU"},
    {"firstName": "Ivan", "lastName": 7, "country": "RU"},
]


def test_invalid_payloads():
    """Malformed payloads are rejected with ValidationError."""
    failed = 0
    for payload in INVALID_PAYLOADS:
        try:
            NameRequest.from_payload(payload)
        except ValidationError:
            continue
        failed += 1
        print(f"FAILED: {payload} was accepted")

    assert failed == 0, f"Payload validation: {failed} invalid payloads accepted"


def test_payload_is_trimmed_and_upper_cased():
    request = NameRequest.from_payload({"firstName": "  太郎 ", "lastName": " 山田", "country": " jp ", "normalized": True})
    assert request == NameRequest("太郎", "山田", "JP", normalized=True)


def test_payload_without_last_name():
    request = NameRequest.from_payload({"firstName": "Ivan", "country": "ru"})
    assert request.last_name == ""
    assert request.normalized is False


def test_validation_error_is_a_value_error():
    with pytest.raises(ValueError):
        NameRequest("", "Smith", "US").validate()


def test_transliterate_rejects_missing_fields(transliterator):
    with pytest.raises(ValidationError):
        transliterator.transliterate_sync(NameRequest("  ", "Smith", "US"))
    with pytest.raises(ValidationError):
        asyncio.run(transliterator.transliterate(NameRequest("John", "Smith", "")))


def test_empty_last_name(transliterator):
    result = transliterator.transliterate_sync(NameRequest("Иван", "  ", "RU"))

    assert result.last_name == TransliterationOutcome.empty()
    assert result.last_name.accuracy == 0.95
    assert result.last_name.method is MethodTag.EMPTY
    # (0.9 + 0.95) / 2 = 0.925, rounded half up
    assert result.overall_accuracy == 0.93


def test_accuracy_rounds_half_up():
    assert round_accuracy(0.875) == 0.88
    assert round_accuracy(0.965) == 0.97
    assert round_accuracy(0.5) == 0.5

    first = TransliterationOutcome("Taro", 0.85, MethodTag.LIBRARY_CONVERSION)
    last = TransliterationOutcome("Yamada", 0.9, MethodTag.LIBRARY_CONVERSION)
    assert TransliterationResult.compose(first, last, "JP").overall_accuracy == 0.88


def test_curated_pair_override(transliterator):
    result = transliterator.transliterate_sync(NameRequest("駿", "宮崎", "JP"))

    assert (result.first_name.text, result.last_name.text) == ("Hayao", "Miyazaki")
    assert result.overall_accuracy == 1.0
    assert result.method is MethodTag.CURATED_PAIR_MATCH


def test_curated_first_name_only_override(transliterator):
    result = transliterator.transliterate_sync(NameRequest("イチロー", "", "JP"))

    assert result.first_name.text == "Ichiro"
    assert result.first_name.accuracy == 1.0
    assert result.method is MethodTag.CURATED_PAIR_MATCH
    assert result.last_name == TransliterationOutcome.empty()

    # The same first name with a last name is not that entry
    with_last = transliterator.transliterate_sync(NameRequest("イチロー", "鈴木", "JP"))
    assert with_last.method is not MethodTag.CURATED_PAIR_MATCH


def test_curated_pair_needs_matching_country(transliterator):
    result = transliterator.transliterate_sync(NameRequest("駿", "宮崎", "CN"))
    assert result.method is not MethodTag.CURATED_PAIR_MATCH


def test_curated_pairs_can_be_disabled():
    config = TransliterationConfig.without_libraries().with_overrides(enable_pair_overrides=False)
    transliterator = NameTransliterator(config)

    result = transliterator.transliterate_sync(NameRequest("Юрий", "Гагарин", "RU"))
    assert result.method is MethodTag.CHARACTER_MAP
    assert (result.first_name.text, result.last_name.text) == ("Yuriy", "Gagarin")


def test_engine_status(transliterator, offline_transliterator):
    online = transliterator.engine_status()
    assert online.japanese_engine_initialized is True
    assert online.korean_romanizer_available is True
    assert online.pinyin_available is True
    assert online.dictionary_sizes["arabic.first"] > 0
    assert online.dictionary_sizes["korean.last"] > 0

    offline = offline_transliterator.engine_status()
    assert offline.japanese_engine_initialized is False
    assert offline.korean_romanizer_available is False
    assert offline.arabic_romanizer_available is False
    assert offline.pinyin_available is False
    assert offline.dictionary_sizes == online.dictionary_sizes


if __name__ == "__main__":
    test_invalid_payloads()
    test_accuracy_rounds_half_up()
