"""
Thai to Latin character map (simplified RTGS).

Tone marks and silent markers map to the empty string. Vowel order is not
rearranged: leading vowels are romanized where they are written.
"""
from __future__ import annotations

from types import MappingProxyType

THAI_MAP = MappingProxyType(
    {
        # Consonants
        "ก": "k", "ข": "kh", "ฃ": "kh", "ค": "kh", "ฅ": "kh", "ฆ": "kh", "ง": "ng",
        "จ": "ch", "ฉ": "ch", "ช": "ch", "ซ": "s", "ฌ": "ch",
        "ญ": "y", "ฎ": "d", "ฏ": "t", "ฐ": "th", "ฑ": "th",
        "ฒ": "th", "ณ": "n", "ด": "d", "ต": "t", "ถ": "th",
        "ท": "th", "ธ": "th", "น": "n", "บ": "b", "ป": "p",
        "ผ": "ph", "ฝ": "f", "พ": "ph", "ฟ": "f", "ภ": "ph",
        "ม": "m", "ย": "y", "ร": "r", "ล": "l", "ว": "w",
        "ศ": "s", "ษ": "s", "ส": "s", "ห": "h", "ฬ": "l",
        "อ": "", "ฮ": "h",
        # Vowels
        "ะ": "a", "ั": "a", "า": "a", "ิ": "i", "ี": "i", "ึ": "ue", "ื": "ue",
        "ุ": "u", "ู": "u", "เ": "e", "แ": "ae", "โ": "o", "ใ": "ai",
        "ไ": "ai", "ำ": "am", "ฤ": "rue", "ฦ": "lue", "ๅ": "",
        # Tone marks and silencers
        "่": "", "้": "", "๊": "", "๋": "", "็": "", "์": "", "ํ": "", "ฺ": "",
        # Repetition mark and digits
        "ๆ": "",
        "๐": "0", "๑": "1", "๒": "2", "๓": "3", "๔": "4",
        "๕": "5", "๖": "6", "๗": "7", "๘": "8", "๙": "9",
    },
)

THAI_MAX_KEY = max(len(k) for k in THAI_MAP)
