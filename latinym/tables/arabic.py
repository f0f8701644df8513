"""
Static Arabic-script romanization data.

Letters cover Arabic proper plus the Persian/Urdu extensions, the lam-alef
ligatures, and a secondary table for rarer Arabic-block letters.
"""
from __future__ import annotations

from types import MappingProxyType

from latinym.tables.rules import literal_rules

# ════════════════════════════════════════════════════════════════════════════════
# CHARACTER MAP
# ════════════════════════════════════════════════════════════════════════════════

ARABIC_LETTERS = MappingProxyType(
    {
        # Base letters
        "ا": "a", "ب": "b", "ت": "t", "ث": "th", "ج": "j", "ح": "h", "خ": "kh",
        "د": "d", "ذ": "dh", "ر": "r", "ز": "z", "س": "s", "ش": "sh", "ص": "s",
        "ض": "d", "ط": "t", "ظ": "z", "ع": "a", "غ": "gh", "ف": "f", "ق": "q",
        "ك": "k", "ل": "l", "م": "m", "ن": "n", "ه": "h", "و": "w", "ي": "y",
        # Short vowels and marks
        "َ": "a", "ُ": "u", "ِ": "i", "ّ": "", "ْ": "",
        "ً": "an", "ٌ": "un", "ٍ": "in", "ـ": "",
        # Hamza carriers and finals
        "ة": "a", "ى": "a", "ء": "", "آ": "aa", "أ": "a", "إ": "i", "ؤ": "u", "ئ": "i",
        # Persian, Urdu and Maghrebi letters
        "گ": "g", "چ": "ch", "پ": "p", "ژ": "zh", "ڤ": "v", "ڨ": "q", "ڭ": "ng", "ک": "k",
        # Ligatures and common combinations
        "لا": "la", "لأ": "la", "لإ": "li", "لآ": "laa", "عبد": "abd", "عبد ال": "abd al",
    },
)

ARABIC_RARE_LETTERS = MappingProxyType(
    {
        "ڪ": "k", "ګ": "g", "ڬ": "g", "ڮ": "n", "ڰ": "p", "ڱ": "m", "ڲ": "n",
        "ڳ": "g", "ڴ": "g", "ڵ": "l", "ڶ": "l", "ڷ": "l", "ڸ": "l", "ڹ": "n",
        "ں": "n", "ڻ": "n", "ڼ": "n", "ڽ": "n", "ھ": "h", "ڿ": "ch", "ۀ": "h",
        "ہ": "h", "ۂ": "h", "ۃ": "h", "ۄ": "w", "ۅ": "o", "ۆ": "o", "ۇ": "u",
        "ۈ": "u", "ۉ": "u", "ۊ": "w", "ۋ": "v", "ی": "y", "ۍ": "y", "ێ": "y",
        "ۏ": "w", "ې": "e", "ۑ": "y",
    },
)

# Arabic-Indic and Eastern Arabic-Indic digits
ARABIC_DIGITS = MappingProxyType(
    {chr(0x0660 + i): str(i) for i in range(10)} | {chr(0x06F0 + i): str(i) for i in range(10)},
)

# ════════════════════════════════════════════════════════════════════════════════
# CONSONANT SKELETON HEURISTICS
# ════════════════════════════════════════════════════════════════════════════════

# Character-map spellings of very common unvocalized names
ARABIC_SKELETON_OVERRIDES = MappingProxyType(
    {
        "mhmd": "Mohammed",
        "aly": "Ali",
        "ahmd": "Ahmed",
        "hsn": "Hassan",
        "hsyn": "Hussein",
        "amr": "Omar",
        "khald": "Khalid",
        "mhmwd": "Mahmoud",
    },
)

LATIN_CONSONANTS = frozenset("bcdfghjklmnpqrstvwxyz")

# ════════════════════════════════════════════════════════════════════════════════
# LIBRARY OUTPUT CLEANUP
# ════════════════════════════════════════════════════════════════════════════════

ARABIC_DIACRITIC_STRIPPING = literal_rules(
    "arabic-diacritic-stripping",
    "1",
    [
        ("ʿ", ""),
        ("ʾ", ""),
        ("ḥ", "h"),
        ("ṭ", "t"),
        ("ṣ", "s"),
        ("ḍ", "d"),
        ("ẓ", "z"),
        ("ġ", "gh"),
        ("ḫ", "kh"),
        ("š", "sh"),
        ("ǧ", "j"),
        ("ā", "a"),
        ("ī", "i"),
        ("ū", "u"),
        ("ē", "e"),
        ("ō", "o"),
        ("Ḥ", "H"),
        ("Ṭ", "T"),
        ("Ṣ", "S"),
        ("Ḍ", "D"),
        ("Ẓ", "Z"),
        ("Ġ", "Gh"),
        ("Ḫ", "Kh"),
        ("Š", "Sh"),
        ("Ǧ", "J"),
        ("Ā", "A"),
        ("Ī", "I"),
        ("Ū", "U"),
        ("Ē", "E"),
        ("Ō", "O"),
    ],
)
