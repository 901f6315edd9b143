"""
Pattern Matcher Tests

Tests the matching primitives every analyzer is built on:
  1. Literal matching (case, word boundaries, metacharacters, symbols)
  2. Precompiled patterns keep their own flags
  3. find_all ordering and de-duplication
  4. find_with_counts ordering
  5. Sentence splitting, word counts and half-up rounding
"""

from __future__ import annotations

import re

from docdetector.dictionaries import DEFAULT_DICTIONARIES
from docdetector.matcher import (
    clamp,
    count,
    extract_sentences,
    find_all,
    find_with_counts,
    round_half_up,
    word_count,
)


# ============================================================
# LITERALS
# ============================================================

class TestLiteralMatching:
    """Literal phrases are escaped, case-insensitive and word-bounded."""

    def test_case_insensitive(self):
        assert count("We LEVERAGE it and leverage it again.", ("leverage",)) == 2

    def test_word_boundary_rejects_longer_word(self):
        assert count("We leveraged the platform.", ("leverage",)) == 0

    def test_short_term_not_found_inside_word(self):
        assert count("We leverage storage.", ("RAG",)) == 0
        assert count("A RAG pipeline.", ("RAG",)) == 1

    def test_metacharacters_are_literal(self):
        assert count("Ship it with CI/CD today.", ("CI/CD",)) == 1
        assert count("see op. cit. above", ("op. cit.",)) == 1
        assert count("see opXcitX above", ("op. cit.",)) == 0

    def test_symbol_terms_match_without_word_edges(self):
        assert count("© 2024 Acme. All content ©", ("©",)) == 2
        assert count("Acme™ Platform", ("™",)) == 1

    def test_hyphenated_term(self):
        assert count("A best-in-class offer.", ("best-in-class",)) == 1

    def test_empty_text(self):
        assert count("", ("anything",)) == 0
        assert find_all("", ("anything",)) == ()


# ============================================================
# COMPILED PATTERNS
# ============================================================

class TestCompiledPatterns:
    """A precompiled pattern is used with exactly the flags it carries."""

    def test_regex_counts_every_hit(self):
        pattern = re.compile(r"\bby 20\d{2}\b", re.IGNORECASE)
        assert count("By 2027 and by 2030 we expect parity.", (pattern,)) == 2

    def test_case_sensitive_pattern_stays_case_sensitive(self):
        product_name = DEFAULT_DICTIONARIES.proprietary_framework_terms[-1]
        assert count("Meet the Velocity Index.", (product_name,)) == 1
        assert count("meet the velocity index.", (product_name,)) == 0

    def test_find_all_reports_stripped_match(self):
        puffery = DEFAULT_DICTIONARIES.percentage_puffery
        assert find_all("We saw 45% growth and 5% growth.", puffery) == ("45% growth",)


# ============================================================
# find_all / find_with_counts
# ============================================================

class TestFindAll:
    """Distinct hits, in dictionary order."""

    def test_dictionary_order_not_text_order(self):
        text = "Urgent! You must act now. URGENT."
        assert find_all(text, ("act now", "urgent")) == ("act now", "urgent")

    def test_literal_reports_dictionary_term(self):
        assert find_all("GDPR and gdpr", ("GDPR",)) == ("GDPR",)

    def test_regex_hits_deduplicated(self):
        pattern = re.compile(r"\d+%")
        assert find_all("10% then 10% then 20%", (pattern,)) == ("10%", "20%")


class TestFindWithCounts:
    """(term, count) pairs, most frequent first, ties in dictionary order."""

    def test_sorted_by_count(self):
        text = "might might could might could often"
        assert find_with_counts(text, ("often", "could", "might")) == (
            ("might", 3), ("could", 2), ("often", 1),
        )

    def test_ties_keep_dictionary_order(self):
        assert find_with_counts("might could", ("could", "might")) == (
            ("could", 1), ("might", 1),
        )

    def test_absent_terms_omitted(self):
        assert find_with_counts("nothing here", ("might",)) == ()


# ============================================================
# TEXT UTILITIES
# ============================================================

class TestTextUtilities:

    def test_extract_sentences_drops_short_pieces(self):
        text = "Short. This sentence is long enough! Tiny?"
        assert extract_sentences(text) == ["This sentence is long enough"]

    def test_extract_sentences_empty(self):
        assert extract_sentences("") == []

    def test_word_count_floor_is_one(self):
        assert word_count("") == 1
        assert word_count("   ") == 1

    def test_word_count_collapses_whitespace(self):
        assert word_count("a b  c\n d") == 4

    def test_round_half_up(self):
        assert round_half_up(2.5) == 3
        assert round_half_up(0.5) == 1
        assert round_half_up(1.49) == 1
        assert round_half_up(99.5) == 100
        # Python's round() would give 2 here
        assert round(2.5) == 2

    def test_clamp(self):
        assert clamp(150) == 100
        assert clamp(-3) == 0
        assert clamp(11, 1, 10) == 10
        assert clamp(0, 1, 10) == 1
