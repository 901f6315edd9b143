"""
Notable-Fact Extractor Tests

Tests selection order, flags, de-duplication, the five-fact cap and
the importance-vocabulary backfill.
"""

from __future__ import annotations

from docdetector.modules.facts import (
    MAX_FACTS,
    RATIONALE_CONTRARIAN,
    RATIONALE_KEY_CLAIM,
    RATIONALE_QUANTIFIED,
    extract_notable_facts,
)

QUANTIFIED = "We were the first vendor to cut costs by 40% in a single quarter"
CONTRARIAN = "However, adoption dropped sharply in regulated industries"


class TestSelection:

    def test_quantified_before_contrarian(self):
        facts = extract_notable_facts(f"{CONTRARIAN}. {QUANTIFIED}.")
        assert [f.fact for f in facts] == [QUANTIFIED, CONTRARIAN]

    def test_quantified_flags(self):
        fact = extract_notable_facts(f"{QUANTIFIED}.")[0]
        assert fact.is_quantified
        assert not fact.is_contrarian
        assert fact.rationale == RATIONALE_QUANTIFIED

    def test_contrarian_flags(self):
        fact = extract_notable_facts(f"{CONTRARIAN}.")[0]
        assert fact.is_contrarian
        assert not fact.is_quantified
        assert fact.rationale == RATIONALE_CONTRARIAN

    def test_number_without_superlative_is_ignored(self):
        assert extract_notable_facts("Revenue grew 40% last year across all regions overall.") == ()


class TestLimits:

    def test_capped_at_five(self):
        words = ["Alpha", "Bravo", "Charlie", "Delta", "Echo", "Foxtrot", "Golf"]
        text = " ".join(f"Surprisingly, {w} teams moved slower than expected." for w in words)
        facts = extract_notable_facts(text)
        assert len(facts) == MAX_FACTS

    def test_shared_prefix_deduplicated(self):
        base = "However, the migration of every single workload took far longer than planned"
        text = f"{base} in region A. {base} in region B."
        assert len(extract_notable_facts(text)) == 1


class TestBackfill:

    def test_importance_vocabulary_backfills(self):
        sentence = "The key insight is that integration effort dominates total project cost"
        facts = extract_notable_facts(f"{sentence}.")
        assert len(facts) == 1
        assert facts[0].fact == sentence
        assert facts[0].rationale == RATIONALE_KEY_CLAIM

    def test_short_important_sentence_skipped(self):
        assert extract_notable_facts("This is a key point to note.") == ()

    def test_empty_document(self):
        assert extract_notable_facts("") == ()
