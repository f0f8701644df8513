"""
Latin letters that Unicode decomposition does not reduce to ASCII.
"""
from __future__ import annotations

from types import MappingProxyType

LATIN_RESIDUALS = MappingProxyType(
    {
        "ß": "ss", "ẞ": "SS",
        "Æ": "AE", "æ": "ae",
        "Œ": "OE", "œ": "oe",
        "Ø": "O", "ø": "o",
        "Ł": "L", "ł": "l",
        "Đ": "D", "đ": "d",
        "Ð": "D", "ð": "d",
        "Þ": "Th", "þ": "th",
        "Ħ": "H", "ħ": "h",
        "ı": "i", "ĸ": "k",
        "Ŋ": "Ng", "ŋ": "ng",
        "Ŧ": "T", "ŧ": "t",
    },
)

# Explicit accented letters recognised without decomposition
LATIN_DIACRITIC_CHARACTERS = frozenset(
    "àáâãäåāăąçćĉċčďèéêëēĕėęěĝğġģĥìíîïĩīĭįĵķĺļľŀñńņňòóôõöōŏőŕŗřśŝşšţťùúûüũūŭůűųŵýÿŷźżž"
    "ÀÁÂÃÄÅĀĂĄÇĆĈĊČĎÈÉÊËĒĔĖĘĚĜĞĠĢĤÌÍÎÏĨĪĬĮĴĶĹĻĽĿÑŃŅŇÒÓÔÕÖŌŎŐŔŖŘŚŜŞŠŢŤÙÚÛÜŨŪŬŮŰŲŴÝŸŶŹŻŽ",
) | frozenset(LATIN_RESIDUALS)
