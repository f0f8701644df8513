"""
ISO 3166 alpha-2 country codes grouped by preferred romanization strategy.

Codes outside every group get no country routing; their names are routed by
detected script alone.
"""
from __future__ import annotations

from types import MappingProxyType

from latinym.types.tags import CountryGroup

_GROUP_MEMBERS = {
    CountryGroup.ARABIC: (
        # Arab League
        "DZ", "BH", "KM", "DJ", "EG", "IQ", "JO", "KW", "LB", "LY", "MR",
        "MA", "OM", "PS", "QA", "SA", "SO", "SD", "SY", "TN", "AE", "YE",
        # Other Arabic-script names (Persian, Dari, Urdu)
        "IR", "AF", "PK",
    ),
    CountryGroup.JAPANESE: ("JP",),
    CountryGroup.KOREAN: ("KR", "KP"),
    CountryGroup.CHINESE: ("CN", "TW", "HK", "MO", "SG"),
    CountryGroup.CYRILLIC: ("RU", "BY", "UA", "KZ", "KG", "TJ", "BG", "RS", "MK", "MN"),
    CountryGroup.DEVANAGARI: ("IN", "NP"),
    CountryGroup.GREEK: ("GR", "CY"),
    CountryGroup.THAI: ("TH",),
}

COUNTRY_GROUPS = MappingProxyType(
    {code: group for group, codes in _GROUP_MEMBERS.items() for code in codes},
)


def country_group(country: str) -> CountryGroup | None:
    return COUNTRY_GROUPS.get(country.strip().upper())
