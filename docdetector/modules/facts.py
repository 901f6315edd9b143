"""
Notable-Fact Extractor

Picks up to five sentences worth a reader's attention: quantified
claims with a superlative first, then statements that push against
conventional wisdom. Backfills from "importance" vocabulary when the
document offers fewer than three.
"""

from __future__ import annotations

from typing import Optional

from docdetector.dictionaries import DEFAULT_DICTIONARIES, PatternDictionaries
from docdetector.matcher import extract_sentences
from docdetector.models import NotableFact

MAX_FACTS = 5
MIN_FACTS = 3
FACT_CHARS = 200
DEDUPE_PREFIX = 50

RATIONALE_CONTRARIAN = "Contradicts conventional wisdom with specific evidence"
RATIONALE_QUANTIFIED = "Provides specific quantified claim for verification"
RATIONALE_KEY_CLAIM = "Identified as a key claim in the document"


def extract_notable_facts(
    text: str,
    sentences: Optional[list[str]] = None,
    d: PatternDictionaries = DEFAULT_DICTIONARIES,
) -> tuple[NotableFact, ...]:
    if sentences is None:
        sentences = extract_sentences(text)

    quantified = [
        s for s in sentences
        if 30 < len(s) < FACT_CHARS
        and d.numeric_token.search(s)
        and d.superlative.search(s)
    ]
    contrarian = [s for s in sentences if d.contrarian_language.search(s)]

    candidates = [(s, False) for s in quantified] + [(s, True) for s in contrarian]

    facts: list[NotableFact] = []
    seen: set[str] = set()
    for sentence, is_contrarian in candidates:
        if len(facts) >= MAX_FACTS:
            break
        key = sentence[:DEDUPE_PREFIX]
        if key in seen:
            continue
        seen.add(key)
        facts.append(NotableFact(
            fact=sentence[:FACT_CHARS],
            rationale=RATIONALE_CONTRARIAN if is_contrarian else RATIONALE_QUANTIFIED,
            is_contrarian=is_contrarian,
            is_quantified=bool(d.numeric_token.search(sentence)),
        ))

    if len(facts) < MIN_FACTS:
        for sentence in sentences:
            if len(facts) >= MAX_FACTS:
                break
            if not (50 < len(sentence) < FACT_CHARS):
                continue
            if not d.importance_vocabulary.search(sentence):
                continue
            key = sentence[:DEDUPE_PREFIX]
            if key in seen:
                continue
            seen.add(key)
            facts.append(NotableFact(
                fact=sentence,
                rationale=RATIONALE_KEY_CLAIM,
                is_contrarian=False,
                is_quantified=bool(d.numeric_token.search(sentence)),
            ))

    return tuple(facts)
