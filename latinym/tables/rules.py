"""
Ordered correction rules applied to romanized text.

A rule set is a plain, versioned table of (pattern, replacement) pairs kept
apart from the strategies that use it, so each table can be tested on its own.
"""
from __future__ import annotations

import re
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass


@dataclass(frozen=True)
class CorrectionRuleSet:
    """Immutable ordered rule table; every rule is evaluated over the whole string."""

    name: str
    version: str
    rules: tuple[tuple[re.Pattern[str], str], ...]

    def apply(self, text: str) -> str:
        for pattern, replacement in self.rules:
            text = pattern.sub(replacement, text)
        return text

    def __len__(self) -> int:
        return len(self.rules)


def _deduplicate(pairs: Iterable[tuple[str, str]]) -> tuple[tuple[str, str], ...]:
    # A repeated key keeps its first position but takes the last value
    return tuple(dict(pairs).items())


def whole_word_rules(name: str, version: str, pairs: Iterable[tuple[str, str]]) -> CorrectionRuleSet:
    """Exact whole-word substitutions; word boundaries are ASCII-only."""
    rules = tuple(
        (re.compile(rf"\b{re.escape(word)}\b", re.ASCII), replacement)
        for word, replacement in _deduplicate(pairs)
    )
    return CorrectionRuleSet(name=name, version=version, rules=rules)


def literal_rules(name: str, version: str, pairs: Iterable[tuple[str, str]]) -> CorrectionRuleSet:
    """Substring substitutions anywhere in the text."""
    rules = tuple((re.compile(re.escape(old)), new) for old, new in _deduplicate(pairs))
    return CorrectionRuleSet(name=name, version=version, rules=rules)


def pattern_rules(name: str, version: str, patterns: Iterable[tuple[str, str]]) -> CorrectionRuleSet:
    """Raw regular-expression rules, applied in the order given."""
    rules = tuple((re.compile(pattern, re.ASCII), replacement) for pattern, replacement in patterns)
    return CorrectionRuleSet(name=name, version=version, rules=rules)


def longest_match_translate(
    text: str,
    table: Mapping[str, str],
    max_key_length: int,
    unknown: Callable[[str], str] | None = None,
) -> str:
    """
    Translate text left to right, preferring the longest table key at each position.

    Characters with no entry go through ``unknown`` when given, otherwise they
    are kept as they are.
    """
    out: list[str] = []
    i = 0
    n = len(text)
    while i < n:
        for length in range(min(max_key_length, n - i), 0, -1):
            chunk = text[i : i + length]
            if chunk in table:
                out.append(table[chunk])
                i += length
                break
        else:
            ch = text[i]
            out.append(unknown(ch) if unknown is not None else ch)
            i += 1
    return "".join(out)
