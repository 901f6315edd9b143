"""
Pattern Matcher

Counts and extracts dictionary hits in a text. Every analyzer goes
through these helpers, so matching semantics live in one place:

  - A literal phrase (str) is escaped and matched case-insensitively,
    with word boundaries on whichever edges are word characters.
  - A compiled pattern (re.Pattern) is used as-is, with its own flags.

All functions are pure and total over strings.
"""

from __future__ import annotations

import math
import re
from functools import lru_cache
from typing import Iterable

from docdetector.dictionaries import Pattern

_SENTENCE_SPLIT = re.compile(r"[.!?]+")


@lru_cache(maxsize=4096)
def _compile_literal(term: str) -> re.Pattern:
    escaped = re.escape(term)
    # Symbols like "©" have no word edge; \b around them never matches.
    prefix = r"\b" if re.match(r"\w", term) else ""
    suffix = r"\b" if re.search(r"\w$", term) else ""
    return re.compile(prefix + escaped + suffix, re.IGNORECASE)


def _as_regex(pattern: Pattern) -> re.Pattern:
    if isinstance(pattern, re.Pattern):
        return pattern
    return _compile_literal(pattern)


def count(text: str, patterns: Iterable[Pattern]) -> int:
    """Total number of non-overlapping hits of all patterns in text."""
    total = 0
    for pattern in patterns:
        total += sum(1 for _ in _as_regex(pattern).finditer(text))
    return total


def find_all(text: str, patterns: Iterable[Pattern]) -> tuple[str, ...]:
    """
    Distinct hits, in dictionary order.

    Literals report the dictionary term itself; compiled patterns report
    each stripped match.
    """
    seen: dict[str, None] = {}
    for pattern in patterns:
        if isinstance(pattern, re.Pattern):
            for m in pattern.finditer(text):
                hit = m.group(0).strip()
                if hit:
                    seen.setdefault(hit, None)
        elif _compile_literal(pattern).search(text):
            seen.setdefault(pattern, None)
    return tuple(seen)


def find_with_counts(text: str, terms: Iterable[Pattern]) -> tuple[tuple[str, int], ...]:
    """(term, count) for every term that occurs, most frequent first."""
    hits = []
    for term in terms:
        n = count(text, (term,))
        if n > 0:
            label = term.pattern if isinstance(term, re.Pattern) else term
            hits.append((label, n))
    # sorted() is stable, ties keep dictionary order
    return tuple(sorted(hits, key=lambda h: h[1], reverse=True))


def extract_sentences(text: str) -> list[str]:
    """Split on sentence punctuation; keep trimmed pieces longer than 10 chars."""
    return [s.strip() for s in _SENTENCE_SPLIT.split(text) if len(s.strip()) > 10]


def word_count(text: str) -> int:
    """Whitespace-delimited tokens, never less than 1."""
    return max(1, len(text.split()))


def clamp(value: float, lo: float = 0, hi: float = 100) -> float:
    return max(lo, min(hi, value))


def round_half_up(value: float) -> int:
    """Round .5 upwards (2.5 -> 3, -2.5 -> -2), unlike Python's banker's round()."""
    return int(math.floor(value + 0.5))
