"""
Result Merger - heuristic pre-pass + LLM layers -> AnalysisResult

Never trusts the shape of LLM output. Every field is decoded with a
typed decoder; missing or ill-typed values fall back to a documented
default, numbers are rounded and clamped to their declared range, and
labels outside their closed set are replaced with the module default.
Merging never raises on bad layer content.

Deterministic signals come from the pre-pass, not the LLM: fluff,
data intensity, the deception term lists and the regulatory mention
lists.
"""

from __future__ import annotations

from docdetector import decoders as dec
from docdetector.composite import compose, validate_weights
from docdetector.dictionaries import DICTIONARY_VERSION
from docdetector.models import (
    AUDIENCE_CLASSES,
    BIAS_TYPES,
    FALLACY_TYPES,
    HYPE_CLASSES,
    ORIGINATOR_CLASSES,
    PROVIDER_CONSUMER_CLASSES,
    RARITY_CLASSES,
    READINESS_VERDICTS,
    RISK_LEVELS,
    SAFETY_LEVELS,
    SEVERITIES,
    TARGET_CLASSES,
    AnalysisResult,
    ArtifactCheck,
    BiasInstance,
    BiasResult,
    DeceptionResult,
    Fallacy,
    FallacyResult,
    ForensicsResult,
    HeuristicPrePass,
    HypeReality,
    ImplementationReadiness,
    ModuleResult,
    NotableFact,
    ObsolescenceRisk,
    RegulatorySafety,
    VisualIntensity,
    WeightedDriver,
)
from docdetector.pipeline.orchestrator import LayerOutputs

EVIDENCE_CHARS = 120
FACT_CHARS = 200
DEFAULT_SUMMARY = "Analysis complete."
DEFAULT_TRUST_SCORE = 50

_score_0_100 = dec.number(0, 100)
_score_1_10 = dec.number(1, 10)
_count = dec.number(0, float("inf"))
_strings = dec.list_of(dec.text())


# ============================================================
# ITEM DECODERS
# ============================================================

def _driver(raw: dict) -> WeightedDriver:
    name = dec.field(raw, "name", dec.text(), None)
    weight = dec.field(raw, "weight", dec.number(0, 1, integer=False, places=4), None)
    score = dec.field(raw, "score", _score_1_10, None)
    if not name or weight is None or weight <= 0 or score is None:
        raise dec.DecodeError("incomplete driver")
    return WeightedDriver(
        name=name,
        weight=weight,
        score=score,
        rationale=dec.field(raw, "rationale", dec.text(), ""),
    )


def _fallacy(raw: dict) -> Fallacy:
    evidence = dec.field(raw, "evidence", dec.text(EVIDENCE_CHARS), "")
    return Fallacy(
        type=dec.field(raw, "type", dec.one_of(*FALLACY_TYPES), "Other"),
        evidence=evidence,
        severity=dec.field(raw, "severity", dec.one_of(*SEVERITIES), "Medium"),
    )


def _bias(raw: dict) -> BiasInstance:
    bias_type = dec.field(raw, "type", dec.one_of(*BIAS_TYPES), None)
    if bias_type is None:
        raise dec.DecodeError("unknown bias type")
    return BiasInstance(
        type=bias_type,
        evidence=dec.field(raw, "evidence", dec.text(EVIDENCE_CHARS), ""),
        severity=dec.field(raw, "severity", dec.one_of(*SEVERITIES), "Medium"),
    )


def _artifact(raw: dict) -> ArtifactCheck:
    name = dec.field(raw, "name", dec.text(), "")
    if not name:
        raise dec.DecodeError("artifact without name")
    return ArtifactCheck(name=name, found=dec.field(raw, "found", dec.boolean, False))


def _fact(raw: dict) -> NotableFact:
    fact = dec.field(raw, "fact", dec.text(FACT_CHARS), "")
    if not fact.strip():
        raise dec.DecodeError("fact without text")
    return NotableFact(
        fact=fact,
        rationale=dec.field(raw, "rationale", dec.text(), ""),
        is_contrarian=dec.field(raw, "is_contrarian", dec.boolean, False),
        is_quantified=dec.field(raw, "is_quantified", dec.boolean, False),
    )


_drivers = dec.list_of(dec.record(_driver))


# ============================================================
# SECTION DECODERS
# ============================================================

def merge_module(raw, classes: tuple[str, ...], default_class: str) -> ModuleResult:
    """Decode one externally scored classification module."""
    drivers = dec.field(raw, "drivers", _drivers, ())
    if validate_weights(drivers):
        composite = compose(drivers)
    else:
        composite = dec.field(raw, "composite_score", _score_0_100, 50)
    return ModuleResult(
        drivers=drivers,
        composite_score=composite,
        confidence=dec.field(raw, "confidence", _score_0_100, 50),
        classification=dec.field(raw, "classification", dec.one_of(*classes), default_class),
    )


def merge_deception(raw, prepass: HeuristicPrePass) -> DeceptionResult:
    base = prepass.deception_raw
    rationale = dec.field(raw, "rationale", dec.text(), "")
    return DeceptionResult(
        weasel_words=base.weasel_words,
        percentage_puffery=base.percentage_puffery,
        false_urgency=base.false_urgency,
        passive_voice_instances=base.passive_voice_instances,
        jargon_masking=base.jargon_masking,
        manipulation_index=dec.field(
            raw, "manipulation_index", _score_0_100, base.manipulation_index,
        ),
        manipulation_rationale=rationale or None,
    )


def merge_fallacies(raw) -> FallacyResult:
    return FallacyResult(
        fallacies=dec.field(raw, "fallacies", dec.list_of(dec.record(_fallacy)), ()),
        fallacy_density=dec.field(
            raw, "fallacy_density", dec.number(0, float("inf"), integer=False), 0.0,
        ),
    )


def merge_regulatory(raw, prepass: HeuristicPrePass) -> RegulatorySafety:
    mentions = prepass.regulatory_raw
    return RegulatorySafety(
        regulatory_mentions=mentions.regulatory_mentions,
        ethical_mentions=mentions.ethical_mentions,
        privacy_mentions=mentions.privacy_mentions,
        red_flags=dec.field(raw, "red_flags", _strings, ()),
        safety_score=dec.field(raw, "safety_score", _score_0_100, 50),
        safety_level=dec.field(raw, "safety_level", dec.one_of(*SAFETY_LEVELS), "Caution"),
    )


def merge_visual(raw) -> VisualIntensity:
    return VisualIntensity(
        score=dec.field(raw, "score", _score_1_10, 1),
        diagram_references=dec.field(raw, "diagram_references", _count, 0),
        formatting_richness=dec.field(raw, "formatting_richness", _count, 0),
        assessment=dec.field(raw, "assessment", dec.text(), "Unable to assess"),
    )


def merge_bias(raw) -> BiasResult:
    return BiasResult(
        biases=dec.field(raw, "biases", dec.list_of(dec.record(_bias)), ()),
        overall_bias_score=dec.field(raw, "overall_bias_score", _score_0_100, 0),
    )


def merge_obsolescence(raw) -> ObsolescenceRisk:
    return ObsolescenceRisk(
        outdated_references=dec.field(raw, "outdated_references", _strings, ()),
        current_references=dec.field(raw, "current_references", _strings, ()),
        missing_current_practices=dec.field(raw, "missing_current_practices", _strings, ()),
        risk_score=dec.field(raw, "risk_score", _score_0_100, 50),
        risk_level=dec.field(raw, "risk_level", dec.one_of(*RISK_LEVELS), "Medium"),
    )


def merge_readiness(raw) -> ImplementationReadiness:
    return ImplementationReadiness(
        artifact_presence=dec.field(
            raw, "artifact_presence", dec.list_of(dec.record(_artifact)), (),
        ),
        resource_clarity_score=dec.field(raw, "resource_clarity_score", _score_1_10, 5),
        timeline_reality_score=dec.field(raw, "timeline_reality_score", _score_1_10, 5),
        prerequisite_check_score=dec.field(raw, "prerequisite_check_score", _score_1_10, 5),
        readiness_score=dec.field(raw, "readiness_score", _score_1_10, 5),
        verdict=dec.field(
            raw, "verdict", dec.one_of(*READINESS_VERDICTS), "Partially Actionable",
        ),
    )


def merge_hype(raw) -> HypeReality:
    return HypeReality(
        positive_sentiment_pct=dec.field(raw, "positive_sentiment_pct", _score_0_100, 50),
        risk_mentions=dec.field(raw, "risk_mentions", _count, 0),
        failure_acknowledgments=dec.field(raw, "failure_acknowledgments", _count, 0),
        balance_assessment=dec.field(raw, "balance_assessment", dec.text(), ""),
        hype_score=dec.field(raw, "hype_score", _score_0_100, 50),
        classification=dec.field(
            raw, "classification", dec.one_of(*HYPE_CLASSES), "Balanced Analysis",
        ),
    )


# ============================================================
# MERGE
# ============================================================

def merge_results(prepass: HeuristicPrePass, layers: LayerOutputs) -> AnalysisResult:
    """Build a fresh AnalysisResult from the pre-pass and all four layers."""
    l1, l2, l3, l4 = layers.layer1, layers.layer2, layers.layer3, layers.layer4

    forensics = ForensicsResult(
        deception=merge_deception(l1.get("deception_judgment"), prepass),
        fallacies=merge_fallacies(l1.get("fallacies")),
        fluff=prepass.fluff,
    )

    return AnalysisResult(
        provider_consumer=merge_module(
            l3.get("provider_consumer"), PROVIDER_CONSUMER_CLASSES, "Balanced",
        ),
        originator_scale=merge_module(
            l3.get("originator_scale"), ORIGINATOR_CLASSES, "Mid-tier",
        ),
        target_scale=merge_module(l3.get("target_scale"), TARGET_CLASSES, "SME"),
        audience_level=merge_module(l3.get("audience_level"), AUDIENCE_CLASSES, "Manager"),
        rarity_index=merge_module(l4.get("rarity_index"), RARITY_CLASSES, "Differentiated"),
        forensics=forensics,
        implementation_readiness=merge_readiness(l2.get("implementation_readiness")),
        obsolescence_risk=merge_obsolescence(l2.get("obsolescence_risk")),
        hype_reality=merge_hype(l4.get("hype_reality")),
        regulatory_safety=merge_regulatory(l1.get("regulatory_judgment"), prepass),
        visual_intensity=merge_visual(l1.get("visual_intensity")),
        data_intensity=prepass.data_intensity,
        bias_detection=merge_bias(l2.get("bias_detection")),
        notable_facts=dec.decode_or_default(
            l4.get("notable_facts"), dec.list_of(dec.record(_fact)), (),
        ),
        summary=dec.field(l4, "summary", dec.text(), "") or DEFAULT_SUMMARY,
        overall_trust_score=dec.field(
            l4, "overall_trust_score", _score_0_100, DEFAULT_TRUST_SCORE,
        ),
        source="llm+heuristic",
        dictionary_version=DICTIONARY_VERSION,
    )
