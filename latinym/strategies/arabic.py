"""
Arabic-script strategy: dictionary, per-word dictionary, uroman, character map.

Unvocalized Arabic drops short vowels, so a plain letter map produces consonant
skeletons ("mhmd"). The dictionaries and the skeleton heuristics exist to put
the vowels back for the names that matter most.
"""
from __future__ import annotations

import re

from latinym.paths import logger
from latinym.patterns import ARABIC_PATTERN
from latinym.services.engines import UromanRomanizer
from latinym.services.formatting import NameFormattingService
from latinym.services.initialization import TransliterationData
from latinym.strategies.base import TransliterationStrategy, run_fallback_chain
from latinym.tables.arabic import (
    ARABIC_DIACRITIC_STRIPPING,
    ARABIC_DIGITS,
    ARABIC_LETTERS,
    ARABIC_RARE_LETTERS,
    ARABIC_SKELETON_OVERRIDES,
    LATIN_CONSONANTS,
)
from latinym.tables.rules import longest_match_translate
from latinym.types import FieldRole, MethodTag, ScriptTag, StepResult

_LATIN_VOWEL = re.compile(r"[aeiouAEIOU]")
_LATIN_LETTER = re.compile(r"[A-Za-z]")
_ARTICLE = re.compile(r"^al-?", re.IGNORECASE)
_DIGRAPH = re.compile(r"sh|kh|th|dh|gh", re.IGNORECASE)
_CONSONANT_CLUSTER = re.compile(r"[b-df-hj-np-tv-z]{3,}", re.IGNORECASE)


class ArabicStrategy(TransliterationStrategy):
    script = ScriptTag.ARABIC

    def __init__(self, formatter: NameFormattingService, data: TransliterationData, romanizer: UromanRomanizer):
        super().__init__(formatter)
        self._first = data.dictionary(ScriptTag.ARABIC, FieldRole.FIRST)
        self._last = data.dictionary(ScriptTag.ARABIC, FieldRole.LAST)
        self._romanizer = romanizer

        # Whole dictionary names join the letter map so they win inside longer strings
        char_map = {**ARABIC_LETTERS, **ARABIC_DIGITS}
        for dictionary in (self._first, self._last):
            char_map.update({native: latin.lower() for native, latin in dictionary.items()})
        self._char_map = char_map
        self._max_key = max(len(k) for k in char_map)

    def transliterate(self, text: str, role: FieldRole, *, normalized: bool = False) -> StepResult:
        key = self._formatter.lookup_key(text)
        result = run_fallback_chain(
            [
                ("exact_dictionary", lambda: self._exact_match(key, role)),
                ("per_word_dictionary", lambda: self._mixed_match(key, role)),
                ("uroman", lambda: self._library(text)),
                ("character_map", lambda: self._character_map(text)),
                ("placeholder", lambda: self._placeholder(text)),
            ],
            label="arabic",
        )
        return result.map(lambda outcome: outcome.with_text(self._formatter.title_case(outcome.text)))

    # ---------- dictionaries ----------
    def _role_dictionary(self, role: FieldRole):
        return self._first if role is FieldRole.FIRST else self._last

    def _exact_match(self, key: str, role: FieldRole) -> StepResult:
        latin = self._lookup_word(key, role)
        if latin is None:
            return StepResult.failure("not in dictionary")
        return StepResult.success_with(latin, 0.98, MethodTag.EXACT_DICTIONARY_MATCH)

    def _lookup_word(self, word: str, role: FieldRole) -> str | None:
        # The field's own role first; a surname can also be given as a first name
        for dictionary in (self._role_dictionary(role), self._role_dictionary(role.other)):
            latin = dictionary.get(word)
            if latin is not None:
                return latin
        return None

    def _mixed_match(self, key: str, role: FieldRole) -> StepResult:
        words = key.split(" ")
        if len(words) < 2:
            return StepResult.failure("single word")

        parts = []
        matched = 0
        for word in words:
            latin = self._lookup_word(word, role)
            if latin is None:
                parts.append(self._map_characters(word))
            else:
                parts.append(latin)
                matched += 1
        if matched == 0:
            return StepResult.failure("no word in dictionary")

        ratio = matched / len(words)
        accuracy = min(0.98, 0.95 + ratio * 0.03)
        return StepResult.success_with(" ".join(parts), accuracy, MethodTag.MIXED_DICTIONARY_MATCH)

    # ---------- library ----------
    def _library(self, text: str) -> StepResult:
        if not self._romanizer.is_available():
            return StepResult.failure("Arabic romanizer unavailable")
        try:
            raw = self._romanizer.romanize(text)
        except Exception as e:
            logger.warning(f"uroman failed on {text!r}: {e}")
            return StepResult.failure(str(e))

        romanized = self._formatter.collapse_whitespace(ARABIC_DIACRITIC_STRIPPING.apply(raw))
        problem = self._garbage_reason(text, romanized)
        if problem:
            return StepResult.failure(f"rejected library output {romanized!r}: {problem}")
        return StepResult.success_with(romanized, 0.8, MethodTag.LIBRARY_CONVERSION)

    @staticmethod
    def _garbage_reason(original: str, romanized: str) -> str | None:
        if not romanized:
            return "empty"
        if romanized == original.strip():
            return "unchanged"
        if ARABIC_PATTERN.search(romanized):
            return "still Arabic"
        for word in romanized.split(" "):
            stem = _ARTICLE.sub("", word, count=1)
            if not _LATIN_LETTER.search(stem):
                continue
            if not _LATIN_VOWEL.search(stem):
                return "consonant skeleton"
            if _CONSONANT_CLUSTER.search(_DIGRAPH.sub(lambda m: m.group(0)[0], stem)):
                return "consonant cluster"
        return None

    # ---------- character map ----------
    def _character_map(self, text: str) -> StepResult:
        mapped = self._map_characters(self._formatter.collapse_whitespace(text))
        if not mapped:
            return StepResult.failure("nothing mapped")
        return StepResult.success_with(mapped, 0.75, MethodTag.CHARACTER_MAP)

    def _map_characters(self, text: str) -> str:
        translated = longest_match_translate(text, self._char_map, self._max_key, unknown=_rare_letter)
        words = [_vocalize(word) for word in self._formatter.collapse_whitespace(translated).split(" ")]
        return " ".join(w for w in words if w)

    def _placeholder(self, text: str) -> StepResult:
        placeholder = ARABIC_PATTERN.sub("?", self._formatter.collapse_whitespace(text))
        return StepResult.success_with(placeholder, 0.5, MethodTag.ERROR_FALLBACK)


def _rare_letter(ch: str) -> str:
    latin = ARABIC_RARE_LETTERS.get(ch)
    if latin is not None:
        return latin
    return "?" if ARABIC_PATTERN.match(ch) else ch


def _vocalize(word: str) -> str:
    """Best guess at a vowelled spelling for a bare consonant skeleton."""
    lowered = word.lower()
    override = ARABIC_SKELETON_OVERRIDES.get(lowered)
    if override is not None:
        return override
    if not all(c in LATIN_CONSONANTS for c in lowered):
        return word
    if len(lowered) == 3:
        return f"{lowered[0]}a{lowered[1]}a{lowered[2]}"
    if len(lowered) == 4:
        return f"{lowered[0]}a{lowered[1]}a{lowered[2]}{lowered[3]}"
    return word
