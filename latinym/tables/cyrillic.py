"""
Cyrillic to Latin character map.

Russian letters follow the common passport-style scheme; the extra letters
cover Ukrainian, Belarusian, Serbian, Macedonian, Kazakh and Mongolian names.
"""
from __future__ import annotations

from types import MappingProxyType

_LOWER = {
    "а": "a", "б": "b", "в": "v", "г": "g", "д": "d", "е": "e", "ё": "yo", "ж": "zh",
    "з": "z", "и": "i", "й": "y", "к": "k", "л": "l", "м": "m", "н": "n", "о": "o",
    "п": "p", "р": "r", "с": "s", "т": "t", "у": "u", "ф": "f", "х": "kh", "ц": "ts",
    "ч": "ch", "ш": "sh", "щ": "shch", "ъ": "", "ы": "y", "ь": "", "э": "e", "ю": "yu",
    "я": "ya",
    # Ukrainian and Belarusian
    "і": "i", "ї": "yi", "є": "ye", "ґ": "g", "ў": "u",
    # Serbian and Macedonian
    "ђ": "dj", "ј": "j", "љ": "lj", "њ": "nj", "ћ": "c", "џ": "dz", "ѓ": "gj", "ќ": "kj", "ѕ": "dz",
    # Kazakh and Mongolian
    "ә": "a", "ғ": "gh", "қ": "q", "ң": "ng", "ө": "o", "ұ": "u", "ү": "u", "һ": "h",
}


def _upper(latin: str) -> str:
    return latin[:1].upper() + latin[1:]


CYRILLIC_MAP = MappingProxyType({**_LOWER, **{k.upper(): _upper(v) for k, v in _LOWER.items()}})

CYRILLIC_MAX_KEY = max(len(k) for k in CYRILLIC_MAP)
