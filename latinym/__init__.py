"""
Latinym: Personal Name Romanization Library

Converts first and last names written in Arabic, Japanese, Korean, Chinese,
Cyrillic, Greek, Thai, Devanagari or accented Latin into a Latin rendering with
a confidence score and the method used.
"""

__version__ = "0.1.0"

__all__ = [
    "NameRequest",
    "NameTransliterator",
    "TransliterationConfig",
    "TransliterationResult",
    "ValidationError",
]

_LAZY_TYPES = ("NameRequest", "TransliterationConfig", "TransliterationResult")


def __getattr__(name):
    """Lazy import to avoid eager loading of heavy dependencies."""
    if name == "NameTransliterator":
        from .transliterator import NameTransliterator
        return NameTransliterator
    if name in _LAZY_TYPES:
        from . import types
        return getattr(types, name)
    if name == "ValidationError":
        from .exceptions import ValidationError
        return ValidationError
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
