"""
Heuristic Pre-Pass

The deterministic snapshot handed to the LLM pipeline as grounding
context. It is the only heuristic output the pipeline depends on, and
it is a pure function of the text: running it twice on the same input
yields equal snapshots.
"""

from __future__ import annotations

import json

from docdetector.dictionaries import DEFAULT_DICTIONARIES, PatternDictionaries
from docdetector.matcher import extract_sentences, find_all, word_count
from docdetector.models import HeuristicPrePass, RegulatoryMentions
from docdetector.modules.advanced import analyze_data_intensity
from docdetector.modules.forensics import analyze_deception, analyze_fluff


def run_prepass(
    text: str,
    d: PatternDictionaries = DEFAULT_DICTIONARIES,
) -> HeuristicPrePass:
    return HeuristicPrePass(
        fluff=analyze_fluff(text, d),
        data_intensity=analyze_data_intensity(text, d),
        deception_raw=analyze_deception(text, d),
        regulatory_raw=RegulatoryMentions(
            regulatory_mentions=find_all(text, d.regulatory_terms),
            ethical_mentions=find_all(text, d.ethical_terms),
            privacy_mentions=find_all(text, d.privacy_terms),
        ),
        word_count=word_count(text),
        sentence_count=len(extract_sentences(text)),
    )


def prepass_json(prepass: HeuristicPrePass) -> str:
    """Stable JSON rendering used inside stage prompts."""
    return json.dumps(prepass.to_dict(), indent=2, ensure_ascii=False)
