"""
Precompiled Unicode script patterns.

Each script is described by codepoint range tuples and compiled once into a
character class, so classification is a handful of regex searches per field.
"""
from __future__ import annotations

import re
from types import MappingProxyType

from latinym.types.tags import ScriptTag

HAN_RANGES = (
    (0x4E00, 0x9FFF),  # CJK Unified Ideographs
    (0x3400, 0x4DBF),  # CJK Extension A
    (0xF900, 0xFAFF),  # CJK Compatibility Ideographs
    (0x20000, 0x2A6DF),  # CJK Extension B
    (0x2A700, 0x2B73F),  # CJK Extension C
    (0x2B740, 0x2B81F),  # CJK Extension D
    (0x2B820, 0x2CEAF),  # CJK Extension E
    (0x2CEB0, 0x2EBEF),  # CJK Extension F
    (0x30000, 0x3134F),  # CJK Extension G
)

KANA_RANGES = (
    (0x3040, 0x309F),  # Hiragana
    (0x30A0, 0x30FF),  # Katakana
    (0x31F0, 0x31FF),  # Katakana Phonetic Extensions
    (0xFF66, 0xFF9F),  # Halfwidth Katakana
)

# Iteration and abbreviation marks only written in Japanese
JAPANESE_MARK_RANGES = (
    (0x3005, 0x3005),  # 々
    (0x303B, 0x303B),  # 〻
    (0x3006, 0x3006),  # 〆
    (0x30F6, 0x30F6),  # ヶ
)

HANGUL_RANGES = (
    (0xAC00, 0xD7AF),  # Hangul Syllables
    (0x1100, 0x11FF),  # Hangul Jamo
    (0x3130, 0x318F),  # Hangul Compatibility Jamo
    (0xA960, 0xA97F),  # Hangul Jamo Extended-A
    (0xD7B0, 0xD7FF),  # Hangul Jamo Extended-B
)

ARABIC_RANGES = (
    (0x0600, 0x06FF),  # Arabic
    (0x0750, 0x077F),  # Arabic Supplement
    (0x08A0, 0x08FF),  # Arabic Extended-A
    (0xFB50, 0xFDFF),  # Arabic Presentation Forms-A
    (0xFE70, 0xFEFF),  # Arabic Presentation Forms-B
)

CYRILLIC_RANGES = (
    (0x0400, 0x04FF),  # Cyrillic
    (0x0500, 0x052F),  # Cyrillic Supplement
)

DEVANAGARI_RANGES = (
    (0x0900, 0x097F),  # Devanagari
    (0xA8E0, 0xA8FF),  # Devanagari Extended
)

GREEK_RANGES = (
    (0x0370, 0x03FF),  # Greek and Coptic
    (0x1F00, 0x1FFF),  # Greek Extended
)

THAI_RANGES = ((0x0E00, 0x0E7F),)

# Harakat, superscript alef and tatweel: ignored when comparing Arabic names
ARABIC_VOWEL_MARK_RANGES = (
    (0x064B, 0x065F),
    (0x0670, 0x0670),
    (0x0640, 0x0640),
)


def _build_range_pattern(ranges: tuple[tuple[int, int], ...]) -> re.Pattern[str]:
    """Compile codepoint ranges into a single character class."""
    parts = []
    for start, end in ranges:
        if end <= 0xFFFF:
            parts.append(f"\\u{start:04X}-\\u{end:04X}")
        else:
            parts.append(f"\\U{start:08X}-\\U{end:08X}")
    return re.compile(f"[{''.join(parts)}]")


HAN_PATTERN = _build_range_pattern(HAN_RANGES)
KANA_PATTERN = _build_range_pattern(KANA_RANGES)
JAPANESE_MARK_PATTERN = _build_range_pattern(JAPANESE_MARK_RANGES)
HANGUL_PATTERN = _build_range_pattern(HANGUL_RANGES)
ARABIC_PATTERN = _build_range_pattern(ARABIC_RANGES)
CYRILLIC_PATTERN = _build_range_pattern(CYRILLIC_RANGES)
DEVANAGARI_PATTERN = _build_range_pattern(DEVANAGARI_RANGES)
GREEK_PATTERN = _build_range_pattern(GREEK_RANGES)
THAI_PATTERN = _build_range_pattern(THAI_RANGES)
ARABIC_VOWEL_MARK_PATTERN = _build_range_pattern(ARABIC_VOWEL_MARK_RANGES)

# Japanese text is written in kana and Han, so either counts
JAPANESE_PATTERN = _build_range_pattern(KANA_RANGES + JAPANESE_MARK_RANGES + HAN_RANGES)

SCRIPT_PATTERNS = MappingProxyType(
    {
        ScriptTag.ARABIC: ARABIC_PATTERN,
        ScriptTag.JAPANESE: JAPANESE_PATTERN,
        ScriptTag.KOREAN: HANGUL_PATTERN,
        ScriptTag.CHINESE: HAN_PATTERN,
        ScriptTag.CYRILLIC: CYRILLIC_PATTERN,
        ScriptTag.DEVANAGARI: DEVANAGARI_PATTERN,
        ScriptTag.GREEK: GREEK_PATTERN,
        ScriptTag.THAI: THAI_PATTERN,
    },
)

WHITESPACE_PATTERN = re.compile(r"\s+")
