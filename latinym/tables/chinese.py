"""
Surname readings for Han characters whose everyday reading differs.

pypinyin picks the most frequent reading of a heteronym, which is usually wrong
when the character is a family name (单 is "dan" in running text but "Shan" as
a surname). These readings apply only to the leading characters of a surname
field.
"""
from __future__ import annotations

from types import MappingProxyType

CHINESE_SURNAME_READINGS = MappingProxyType(
    {
        # Compound surnames
        "尉迟": "yuchi",
        "万俟": "moqi",
        "长孙": "zhangsun",
        # Single-character heteronyms
        "曾": "zeng",
        "单": "shan",
        "解": "xie",
        "仇": "qiu",
        "区": "ou",
        "查": "zha",
        "朴": "piao",
        "乐": "yue",
        "缪": "miao",
        "翟": "zhai",
        "覃": "qin",
        "盖": "ge",
        "召": "shao",
        "黑": "he",
        "秘": "bi",
        "繁": "po",
        "员": "yun",
        "种": "chong",
        "牟": "mou",
        "谌": "chen",
        "阚": "kan",
    },
)

CHINESE_SURNAME_MAX_KEY = max(len(k) for k in CHINESE_SURNAME_READINGS)
