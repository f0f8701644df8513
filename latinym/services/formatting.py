"""
Name formatting service for romanized output.

This module provides the capitalization and whitespace rules shared by every
strategy, so that each script's output is cased the same way.
"""
from __future__ import annotations

import re
import unicodedata

from latinym.patterns import ARABIC_VOWEL_MARK_PATTERN, WHITESPACE_PATTERN

_HYPHEN_SPLIT = re.compile(r"(-)")


class NameFormattingService:
    """Service for casing and cleaning romanized name text."""

    @staticmethod
    def capitalize_name_part(part: str) -> str:
        """Properly capitalize a name part, handling apostrophes correctly.

        Standard .title() incorrectly capitalizes after apostrophes (ts'ai -> Ts'Ai).
        This function only capitalizes the first letter: ts'ai -> Ts'ai.
        """
        if not part:
            return part
        return part[0].upper() + part[1:].lower()

    @staticmethod
    def collapse_whitespace(text: str) -> str:
        return WHITESPACE_PATTERN.sub(" ", text).strip()

    def title_case(self, text: str) -> str:
        """Lower-case, then capitalize every space- and hyphen-separated part."""
        words = []
        for word in self.collapse_whitespace(text).split(" "):
            parts = _HYPHEN_SPLIT.split(word)
            words.append("".join(p if p == "-" else self.capitalize_name_part(p) for p in parts))
        return " ".join(words)

    def capitalize_words(self, text: str) -> str:
        """Upper-case the first letter of every word, leaving the rest untouched (McDonald stays)."""
        return " ".join(w[:1].upper() + w[1:] for w in self.collapse_whitespace(text).split(" "))

    def lookup_key(self, text: str) -> str:
        """Normalized dictionary key: NFC, Arabic vowel marks removed, whitespace collapsed."""
        text = unicodedata.normalize("NFC", text)
        text = ARABIC_VOWEL_MARK_PATTERN.sub("", text)
        return self.collapse_whitespace(text)
