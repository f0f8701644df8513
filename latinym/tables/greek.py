"""
Greek to Latin character map (ELOT 743 flavoured).

Vowel and consonant digraphs are listed alongside single letters so that the
longest match wins ("ου" -> "ou" rather than "oy").
"""
from __future__ import annotations

from types import MappingProxyType

_LOWER = {
    "α": "a", "β": "v", "γ": "g", "δ": "d", "ε": "e", "ζ": "z", "η": "i", "θ": "th",
    "ι": "i", "κ": "k", "λ": "l", "μ": "m", "ν": "n", "ξ": "x", "ο": "o", "π": "p",
    "ρ": "r", "σ": "s", "ς": "s", "τ": "t", "υ": "y", "φ": "f", "χ": "ch", "ψ": "ps",
    "ω": "o",
    # Accented vowels
    "ά": "a", "έ": "e", "ή": "i", "ί": "i", "ό": "o", "ύ": "y", "ώ": "o",
    "ϊ": "i", "ϋ": "y", "ΐ": "i", "ΰ": "y",
    # Digraphs
    "ου": "ou", "ού": "ou", "αι": "ai", "αί": "ai", "ει": "ei", "εί": "ei", "οι": "oi", "οί": "oi",
    "αυ": "av", "αύ": "av", "ευ": "ev", "εύ": "ev",
    "γγ": "ng", "γκ": "gk", "γχ": "nch", "μπ": "mp", "ντ": "nt", "τσ": "ts", "τζ": "tz",
}


def _upper(greek: str) -> str:
    return greek[:1].upper() + greek[1:]


GREEK_MAP = MappingProxyType(
    {
        **_LOWER,
        **{_upper(k): v[:1].upper() + v[1:] for k, v in _LOWER.items() if k != "ς"},
    },
)

GREEK_MAX_KEY = max(len(k) for k in GREEK_MAP)
