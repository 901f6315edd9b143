"""
Advanced Modules

Decision-support checks layered on top of the classifiers:
  - Implementation readiness (can a team act on this document?)
  - Obsolescence risk (is the technology current?)
  - Hype vs. reality (is the tone balanced?)
  - Regulatory / ethical safety (are obvious safeguards missing?)
  - Visual and data intensity
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
    round_half_up,
)
from docdetector.models import (
    ArtifactCheck,
    DataIntensity,
    HypeReality,
    ImplementationReadiness,
    ObsolescenceRisk,
    RegulatorySafety,
    VisualIntensity,
)


# ============================================================
# IMPLEMENTATION READINESS
# ============================================================

def readiness_verdict(score: int) -> str:
    if score >= 7:
        return "Implementation Ready"
    if score >= 4:
        return "Partially Actionable"
    return "Theoretical Only"


def analyze_readiness(
    text: str,
    d: PatternDictionaries = DEFAULT_DICTIONARIES,
) -> ImplementationReadiness:
    artifacts = tuple(
        ArtifactCheck(name, bool(pattern.search(text)))
        for name, pattern in d.artifact_checks
    )
    found = sum(1 for a in artifacts if a.found)
    artifact_score = round_half_up(found / len(artifacts) * 10) if artifacts else 0

    resources = count(text, d.resource_terms)
    resource_score = int(clamp(min(10, resources * 2 + 1), 1, 10))

    specific = count(text, d.timeline_specific_terms)
    vague = count(text, d.timeline_vague_terms)
    if specific > vague * 2:
        timeline_score = 8
    elif vague > specific:
        timeline_score = 3
    else:
        timeline_score = 5

    prereqs = count(text, d.prerequisite_terms)
    prereq_score = 8 if prereqs > 3 else 5 if prereqs > 0 else 2

    readiness = round_half_up(
        artifact_score * 0.3
        + resource_score * 0.25
        + timeline_score * 0.25
        + prereq_score * 0.2
    )

    return ImplementationReadiness(
        artifact_presence=artifacts,
        resource_clarity_score=resource_score,
        timeline_reality_score=timeline_score,
        prerequisite_check_score=prereq_score,
        readiness_score=readiness,
        verdict=readiness_verdict(readiness),
    )


# ============================================================
# OBSOLESCENCE RISK
# ============================================================

def risk_level(score: int) -> str:
    if score >= 75:
        return "Critical"
    if score >= 50:
        return "High"
    if score >= 25:
        return "Medium"
    return "Low"


def analyze_obsolescence(
    text: str,
    d: PatternDictionaries = DEFAULT_DICTIONARIES,
) -> ObsolescenceRisk:
    outdated = find_all(text, d.outdated_tech)
    current = find_all(text, d.current_practices)
    missing = tuple(
        term for term in d.critical_practices_watchlist
        if count(text, (term,)) == 0
    )

    score = int(clamp(15 * len(outdated) - 5 * len(current) + 10 * len(missing), 0, 100))
    return ObsolescenceRisk(
        outdated_references=outdated,
        current_references=current,
        missing_current_practices=missing,
        risk_score=score,
        risk_level=risk_level(score),
    )


# ============================================================
# HYPE VS. REALITY
# ============================================================

def hype_classification(positive_pct: int, failures: int) -> str:
    # Propaganda requires silence on failure, not merely little of it
    if positive_pct > 90 and failures == 0:
        return "Sales Propaganda"
    if positive_pct > 75:
        return "Optimistic"
    return "Balanced Analysis"


def analyze_hype(
    text: str,
    sentences: Optional[list[str]] = None,
    d: PatternDictionaries = DEFAULT_DICTIONARIES,
) -> HypeReality:
    if sentences is None:
        sentences = extract_sentences(text)

    positive = count(text, d.positive_hype_terms)
    negative = count(text, d.negative_reality_terms)
    pct = round_half_up(positive / (positive + negative) * 100) if positive + negative else 0

    failures = sum(1 for s in sentences if d.failure_acknowledgment.search(s))

    if 60 <= pct <= 80:
        assessment = "Within optimal credibility range (60-80% positive)"
    elif pct > 80:
        assessment = f"Excessively positive ({pct}%) with {failures} risk acknowledgments"
    else:
        assessment = f"Cautious tone ({pct}% positive)"

    return HypeReality(
        positive_sentiment_pct=pct,
        risk_mentions=negative,
        failure_acknowledgments=failures,
        balance_assessment=assessment,
        hype_score=int(clamp(pct - 5 * failures, 0, 100)),
        classification=hype_classification(pct, failures),
    )


# ============================================================
# REGULATORY / ETHICAL SAFETY
# ============================================================

_DATA_COLLECTION = re.compile(r"\b(?:scraping|crawling|data collection)\b", re.IGNORECASE)
_AUTOMATED_DECISION = re.compile(
    r"\b(?:automated decision|auto-decision|machine decision)\b", re.IGNORECASE
)
_CROSS_BORDER = re.compile(
    r"\b(?:cross-border|international data|global deployment)\b", re.IGNORECASE
)
_DATA_RESIDENCY = re.compile(r"\bdata residency\b", re.IGNORECASE)
_AI_ML = re.compile(r"\b(?:AI|machine learning|ML)\b", re.IGNORECASE)


def safety_level(score: int) -> str:
    if score >= 70:
        return "Safe"
    if score >= 40:
        return "Caution"
    return "High Risk"


def analyze_regulatory(
    text: str,
    d: PatternDictionaries = DEFAULT_DICTIONARIES,
) -> RegulatorySafety:
    regulatory = find_all(text, d.regulatory_terms)
    ethical = find_all(text, d.ethical_terms)
    privacy = find_all(text, d.privacy_terms)

    red_flags: list[str] = []
    if _DATA_COLLECTION.search(text) and not regulatory:
        red_flags.append("Data collection mentioned without regulatory compliance references")
    if _AUTOMATED_DECISION.search(text) and not ethical:
        red_flags.append("Automated decision-making without bias assessment mentions")
    if _CROSS_BORDER.search(text) and not _DATA_RESIDENCY.search(text):
        red_flags.append("Cross-border operations without data residency consideration")
    if _AI_ML.search(text) and not ethical and not regulatory:
        red_flags.append("AI/ML implementation proposed without ethical or regulatory framework")

    mentions = len(regulatory) + len(ethical) + len(privacy)
    score = int(clamp(100 - 20 * len(red_flags) + 5 * mentions, 0, 100))
    return RegulatorySafety(
        regulatory_mentions=regulatory,
        ethical_mentions=ethical,
        privacy_mentions=privacy,
        red_flags=tuple(red_flags),
        safety_score=score,
        safety_level=safety_level(score),
    )


# ============================================================
# VISUAL / DATA INTENSITY
# ============================================================

_MD_HEADING = re.compile(r"^#{1,6}\s", re.MULTILINE)
_MD_BULLET = re.compile(r"^\s*[-*]\s", re.MULTILINE)


def analyze_visual_intensity(
    text: str,
    d: PatternDictionaries = DEFAULT_DICTIONARIES,
) -> VisualIntensity:
    diagrams = count(text, d.diagram_terms)
    formatting = count(text, d.formatting_terms)
    markdown = count(text, (_MD_HEADING, _MD_BULLET))

    score = int(clamp(round_half_up((diagrams * 1.5 + formatting + markdown * 0.3) / 3), 1, 10))
    if score >= 8:
        assessment = "High visual density: excellent for presentations"
    elif score >= 5:
        assessment = "Moderate visual elements: balanced"
    else:
        assessment = "Text-heavy: limited visual support"

    return VisualIntensity(
        score=score,
        diagram_references=diagrams,
        formatting_richness=formatting + markdown,
        assessment=assessment,
    )


def analyze_data_intensity(
    text: str,
    d: PatternDictionaries = DEFAULT_DICTIONARIES,
) -> DataIntensity:
    tables = count(text, d.table_terms)
    citations = count(text, d.citation_terms)
    statistics = count(text, d.statistic_terms)

    score = int(clamp(round_half_up((tables * 2 + citations * 0.5 + statistics) / 5), 1, 10))
    if score >= 8:
        assessment = "Data-rich: strong evidentiary foundation"
    elif score >= 5:
        assessment = "Moderate data density: reasonably supported"
    else:
        assessment = "Data-sparse: assertions may lack empirical support"

    return DataIntensity(
        score=score,
        tables_detected=tables,
        citations_detected=citations,
        statistics_detected=statistics,
        assessment=assessment,
    )
