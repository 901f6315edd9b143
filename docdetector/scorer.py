"""
Trust Score Calculator

Computes the 0-100 overall trust score for the heuristic-only path.
Separated from detector.py for single-responsibility.

Score = weighted blend of module outputs, each normalized so that
higher means more trustworthy:

  provider/consumer composite   .15
  rarity composite              .10
  100 - manipulation index      .15
  100 - fluff score             .10
  readiness x 10                .15
  100 - obsolescence risk       .10
  100 - hype score              .10
  regulatory safety             .10
  100 - bias score              .05
"""

from __future__ import annotations

from docdetector.matcher import clamp, round_half_up
from docdetector.models import AnalysisResult

TRUST_WEIGHTS: dict[str, float] = {
    "provider_consumer": 0.15,
    "rarity_index": 0.10,
    "manipulation": 0.15,
    "fluff": 0.10,
    "implementation_readiness": 0.15,
    "obsolescence": 0.10,
    "hype": 0.10,
    "regulatory_safety": 0.10,
    "bias": 0.05,
}


def calculate_trust_score(result: AnalysisResult) -> tuple[int, dict]:
    """
    Calculate the overall trust score from a heuristic analysis.

    Returns:
        (score, breakdown) where breakdown lists every component's
        normalized score, weight and contribution.
    """
    components = {
        "provider_consumer": result.provider_consumer.composite_score,
        "rarity_index": result.rarity_index.composite_score,
        "manipulation": 100 - result.forensics.deception.manipulation_index,
        "fluff": 100 - result.forensics.fluff.fluff_score,
        "implementation_readiness": result.implementation_readiness.readiness_score * 10,
        "obsolescence": 100 - result.obsolescence_risk.risk_score,
        "hype": 100 - result.hype_reality.hype_score,
        "regulatory_safety": result.regulatory_safety.safety_score,
        "bias": 100 - result.bias_detection.overall_bias_score,
    }

    breakdown: dict = {"components": []}
    total = 0.0
    for name, weight in TRUST_WEIGHTS.items():
        contribution = components[name] * weight
        total += contribution
        breakdown["components"].append({
            "name": name,
            "score": components[name],
            "weight": weight,
            "contribution": round(contribution, 2),
        })

    score = int(clamp(round_half_up(total), 0, 100))
    breakdown["raw_total"] = round(total, 2)
    breakdown["final_score"] = score
    return score, breakdown


def generate_summary(result: AnalysisResult) -> str:
    """Plain-language summary for the heuristic-only path."""
    parts: list[str] = []

    pc = result.provider_consumer
    if pc.classification == "Provider-Favored":
        parts.append(
            f"This document appears vendor-centric ({pc.classification}, "
            f"{pc.confidence}% confidence), suggesting it primarily serves "
            f"the service provider's interests."
        )
    elif pc.classification == "Consumer-Favored":
        parts.append(
            f"This document is consumer-oriented ({pc.confidence}% confidence), "
            f"designed to empower the reader."
        )
    else:
        parts.append("The document shows balanced provider/consumer orientation.")

    deception = result.forensics.deception
    mi = deception.manipulation_index
    if mi > 40:
        parts.append(
            f"Content forensics detected a high manipulation index of {mi}/100 "
            f"with {len(deception.weasel_words)} types of weasel words."
        )
    elif mi > 20:
        parts.append(f"Moderate linguistic manipulation detected (index: {mi}/100).")

    readiness = result.implementation_readiness
    parts.append(
        f"Implementation readiness: {readiness.verdict} "
        f"(score: {readiness.readiness_score}/10)."
    )
    parts.append(
        f"Content uniqueness: {result.rarity_index.classification} "
        f"({result.rarity_index.composite_score}/100)."
    )
    parts.append(
        f"Targeted at {result.audience_level.classification}-level audience within "
        f"{result.target_scale.classification}-scale organizations."
    )
    return " ".join(parts)
