"""
Bias Detector

Five independent rule checks. Each fires at most once and contributes
its severity weight to the overall score. The score is a sum, so
several simultaneous biases compound.
"""

from __future__ import annotations

from typing import Optional

from docdetector.dictionaries import DEFAULT_DICTIONARIES, PatternDictionaries
from docdetector.matcher import clamp, count, extract_sentences
from docdetector.models import BiasInstance, BiasResult

SEVERITY_WEIGHTS = {"High": 30, "Medium": 15, "Low": 5}


def bias_score(biases) -> int:
    """Severity-weighted sum of bias instances, clamped to 0-100."""
    return int(clamp(sum(SEVERITY_WEIGHTS.get(b.severity, 0) for b in biases), 0, 100))


def analyze_bias(
    text: str,
    sentences: Optional[list[str]] = None,
    d: PatternDictionaries = DEFAULT_DICTIONARIES,
) -> BiasResult:
    if sentences is None:
        sentences = extract_sentences(text)
    biases: list[BiasInstance] = []

    # Confirmation: success stories without failures
    success = count(text, d.success_terms)
    failure = count(text, d.failure_terms)
    if success > 5 and failure == 0:
        biases.append(BiasInstance(
            "Confirmation",
            f"{success} success references with zero failure acknowledgments",
            "High",
        ))
    elif success > failure * 5:
        biases.append(BiasInstance(
            "Confirmation",
            f"{success}:{failure} success-to-failure ratio is heavily skewed",
            "Medium",
        ))

    # Survival: case studies, never a failed one
    cases = count(text, d.case_study_terms)
    if cases > 2 and failure == 0:
        biases.append(BiasInstance(
            "Survival",
            f"{cases} case studies presented without any failed project examples",
            "Medium",
        ))

    # Selection: examples drawn from the best cases
    cherry_picked = [
        s for s in sentences
        if d.example_intro.search(s) and d.best_case.search(s)
    ]
    if len(cherry_picked) > 2:
        biases.append(BiasInstance(
            "Selection",
            "Multiple examples appear cherry-picked from best-case scenarios",
            "Medium",
        ))

    # Recency
    recent = count(text, d.recent_years)
    older = count(text, d.older_years)
    if recent > 5 and older == 0:
        biases.append(BiasInstance(
            "Recency",
            f"All {recent} date references are recent with no historical context",
            "Low",
        ))

    # Authority
    appeals = count(text, d.authority_appeal_terms)
    empirical = count(text, d.empirical_evidence_terms)
    if appeals > 3 and empirical == 0:
        biases.append(BiasInstance(
            "Authority",
            f"{appeals} authority appeals without independent empirical validation",
            "Medium",
        ))

    return BiasResult(biases=tuple(biases), overall_bias_score=bias_score(biases))
