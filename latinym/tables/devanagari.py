"""
Devanagari to Latin character map.

A bare consonant carries the inherent "a". Consonant + vowel sign and
consonant + virama sequences are generated into the table, so the longest
match replaces the inherent vowel instead of appending to it.
"""
from __future__ import annotations

from types import MappingProxyType

VOWELS = {
    "अ": "a", "आ": "aa", "इ": "i", "ई": "ii", "उ": "u", "ऊ": "uu", "ऋ": "ri",
    "ए": "e", "ऐ": "ai", "ओ": "o", "औ": "au", "ऑ": "o", "ऍ": "e",
}

VOWEL_SIGNS = {
    "ा": "aa", "ि": "i", "ी": "ii", "ु": "u", "ू": "uu", "ृ": "ri",
    "े": "e", "ै": "ai", "ो": "o", "ौ": "au", "ॉ": "o", "ॅ": "e",
}

# Consonants without the inherent vowel
CONSONANTS = {
    "क": "k", "ख": "kh", "ग": "g", "घ": "gh", "ङ": "ng",
    "च": "ch", "छ": "chh", "ज": "j", "झ": "jh", "ञ": "ny",
    "ट": "t", "ठ": "th", "ड": "d", "ढ": "dh", "ण": "n",
    "त": "t", "थ": "th", "द": "d", "ध": "dh", "न": "n",
    "प": "p", "फ": "ph", "ब": "b", "भ": "bh", "म": "m",
    "य": "y", "र": "r", "ल": "l", "व": "v", "श": "sh",
    "ष": "sh", "स": "s", "ह": "h", "ळ": "l",
}

# Nukta letters, decomposed and precomposed
NUKTA_CONSONANTS = {
    "क़": "q", "ख़": "kh", "ग़": "gh", "ज़": "z", "ड़": "r", "ढ़": "rh", "फ़": "f", "य़": "y",
    "\u0958": "q", "\u0959": "kh", "\u095a": "gh", "\u095b": "z",
    "\u095c": "r", "\u095d": "rh", "\u095e": "f", "\u095f": "y",
}

# Conjuncts with conventional spellings
CONJUNCTS = {"क्ष": "ksh", "त्र": "tr", "ज्ञ": "gy"}

VIRAMA = "्"
NUKTA = "़"

MARKS = {"ं": "n", "ँ": "n", "ः": "h", VIRAMA: "", NUKTA: "", "ऽ": "", "।": "", "॥": ""}

DIGITS = {chr(0x0966 + i): str(i) for i in range(10)}


def _build_map() -> dict[str, str]:
    table: dict[str, str] = {**VOWELS, **MARKS, **DIGITS}
    for bases in (CONSONANTS, NUKTA_CONSONANTS, CONJUNCTS):
        for consonant, latin in bases.items():
            table[consonant] = latin + "a"
            table[consonant + VIRAMA] = latin
            for sign, vowel in VOWEL_SIGNS.items():
                table[consonant + sign] = latin + vowel
    return table


DEVANAGARI_MAP = MappingProxyType(_build_map())

DEVANAGARI_MAX_KEY = max(len(k) for k in DEVANAGARI_MAP)
