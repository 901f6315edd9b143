"""
Content Forensics

Three linguistic checks over the raw text:
  - Deception:  weasel words, unanchored percentages, false urgency,
                jargon masking and passive voice, rolled up into a
                0-100 manipulation index
  - Fallacies:  sentence-level rhetorical fallacy detection
  - Fluff:      readability, descriptive-word density and data sparsity
"""

from __future__ import annotations

import re
from typing import Optional

from docdetector.dictionaries import DEFAULT_DICTIONARIES, PatternDictionaries
from docdetector.matcher import (
    clamp,
    count,
    extract_sentences,
    find_all,
    find_with_counts,
    round_half_up,
    word_count,
)
from docdetector.models import (
    DeceptionResult,
    Fallacy,
    FallacyResult,
    FluffResult,
    ForensicsResult,
    TermCount,
)

PASSIVE_SAMPLE_LIMIT = 10
EVIDENCE_CHARS = 120


# ============================================================
# DECEPTION
# ============================================================

def analyze_deception(
    text: str,
    d: PatternDictionaries = DEFAULT_DICTIONARIES,
) -> DeceptionResult:
    weasels = find_with_counts(text, d.weasel_words)
    puffery = find_all(text, d.percentage_puffery)
    urgency = find_all(text, d.false_urgency)
    jargon = find_all(text, d.jargon_masking)
    passive = find_all(text, d.passive_voice)[:PASSIVE_SAMPLE_LIMIT]

    total = (
        sum(n for _, n in weasels)
        + len(puffery) + len(urgency) + len(passive) + len(jargon)
    )
    index = int(clamp(round_half_up(total / word_count(text) * 2000), 0, 100))

    return DeceptionResult(
        weasel_words=tuple(TermCount(term, n) for term, n in weasels),
        percentage_puffery=puffery,
        false_urgency=urgency,
        passive_voice_instances=passive,
        jargon_masking=jargon,
        manipulation_index=index,
    )


# ============================================================
# LOGICAL FALLACIES
# ============================================================

# (type, severity, max reported, patterns) -- any pattern hit flags the sentence
FALLACY_RULES: tuple[tuple[str, str, int, tuple[re.Pattern, ...]], ...] = (
    ("False Dichotomy", "Medium", 3, (
        re.compile(r"\b(?:either|or)\b.*\b(?:or|otherwise)\b", re.IGNORECASE),
        re.compile(r"\bif you don['’]t\b.*\byou will\b", re.IGNORECASE),
    )),
    ("Appeal to Authority", "Low", 3, (
        re.compile(
            r"\bas (?:Gartner|Forrester|McKinsey|Deloitte|BCG|Accenture) "
            r"(?:says|reports|predicts|states)\b",
            re.IGNORECASE,
        ),
        re.compile(
            r"\baccording to (?:leading|top|major) (?:analysts?|experts?|firms?)\b",
            re.IGNORECASE,
        ),
    )),
    ("Straw Man", "Medium", 2, (
        re.compile(
            r"\bsome (?:people|critics|skeptics) (?:say|believe|think|argue)\b",
            re.IGNORECASE,
        ),
        re.compile(r"\bthe old way\b", re.IGNORECASE),
    )),
    ("Post Hoc", "High", 2, (
        re.compile(
            r"\bafter (?:implementing|adopting|deploying)\b.*"
            r"\b(?:increased|improved|grew|reduced)\b",
            re.IGNORECASE,
        ),
    )),
    ("Sunk Cost", "High", 2, (
        re.compile(
            r"\b(?:already invested|too far to stop|continue (?:because|since) we['’]ve)\b",
            re.IGNORECASE,
        ),
    )),
)


def analyze_fallacies(text: str, sentences: Optional[list[str]] = None) -> FallacyResult:
    if sentences is None:
        sentences = extract_sentences(text)

    found: list[Fallacy] = []
    for fallacy_type, severity, limit, patterns in FALLACY_RULES:
        hits = [s for s in sentences if any(p.search(s) for p in patterns)]
        for sentence in hits[:limit]:
            found.append(Fallacy(fallacy_type, sentence[:EVIDENCE_CHARS], severity))

    density = round_half_up(len(found) / word_count(text) * 1000 * 100) / 100
    return FallacyResult(fallacies=tuple(found), fallacy_density=density)


# ============================================================
# FLUFF INDEX
# ============================================================

_ADJECTIVE_SUFFIX = re.compile(r"(?:ly|ive|ous|ful|al|ent|ant|ible|able)$", re.IGNORECASE)
_VERB_SUFFIX = re.compile(r"(?:ing|ed|ize|ise|ate|ify)$", re.IGNORECASE)
_FLUFF_SENTENCE_SPLIT = re.compile(r"[.!?]+")


def analyze_fluff(
    text: str,
    d: PatternDictionaries = DEFAULT_DICTIONARIES,
) -> FluffResult:
    words = text.split()
    n_words = max(1, len(words))
    n_sentences = max(
        1, sum(1 for s in _FLUFF_SENTENCE_SPLIT.split(text) if len(s.strip()) > 5)
    )

    # Gunning Fog approximation; "complex" = longer than 6 characters
    complex_pct = sum(1 for w in words if len(w) > 6) / n_words * 100
    fog = 0.4 * (n_words / n_sentences + complex_pct)

    adjectives = sum(1 for w in words if _ADJECTIVE_SUFFIX.search(w))
    verbs = sum(1 for w in words if _VERB_SUFFIX.search(w)) or 1
    ratio = adjectives / verbs

    data_points = len(set(m.group(0) for m in d.numeric_token.finditer(text)))

    fluff = (
        min(fog, 25) / 25 * 40
        + min(ratio, 5) / 5 * 30
        + (1 - min(data_points, 30) / 30) * 30
    )

    return FluffResult(
        fog_index=round_half_up(fog * 10) / 10,
        adjective_verb_ratio=round_half_up(ratio * 100) / 100,
        unique_data_points=data_points,
        fluff_score=int(clamp(round_half_up(fluff), 0, 100)),
        buzzword_count=count(text, d.buzzwords),
        action_verb_count=count(text, d.action_verbs),
    )


def analyze_forensics(
    text: str,
    sentences: Optional[list[str]] = None,
    d: PatternDictionaries = DEFAULT_DICTIONARIES,
) -> ForensicsResult:
    if sentences is None:
        sentences = extract_sentences(text)
    return ForensicsResult(
        deception=analyze_deception(text, d),
        fallacies=analyze_fallacies(text, sentences),
        fluff=analyze_fluff(text, d),
    )
