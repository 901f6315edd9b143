"""
API Schemas - Request and Response Models

Pydantic models for the DocDetector API. Response models mirror the
core dataclasses' to_dict() output.
"""

from __future__ import annotations

from typing import Optional
from pydantic import BaseModel, Field


# ============================================================
# REQUESTS
# ============================================================

class PageImageIn(BaseModel):
    mime_type: str = Field(..., pattern="^image/(png|jpeg|webp)$")
    data: str = Field(..., min_length=1, description="Base64-encoded image bytes.")


class AnalyzeRequest(BaseModel):
    """POST /analyze request body."""
    text: str = Field(..., min_length=1,
                      description="Plain text of the document to analyze.")
    mode: str = Field("full", pattern="^(local|full)$",
                      description="Analysis mode: local (heuristics) or full (heuristics + LLM).")
    images: list[PageImageIn] = Field(default_factory=list, max_length=20,
                                      description="Optional rendered pages for visual assessment.")

    model_config = {"json_schema_extra": {"examples": [
        {"text": "Our proprietary platform will revolutionize your business. Act now.", "mode": "local"},
    ]}}


class TextRequest(BaseModel):
    """POST /prepass and POST /fitness request body."""
    text: str = Field(..., min_length=1)


# ============================================================
# MODULE RESULTS
# ============================================================

class WeightedDriverOut(BaseModel):
    name: str
    weight: float
    score: int
    rationale: str


class ModuleResultOut(BaseModel):
    drivers: list[WeightedDriverOut]
    composite_score: int
    confidence: int
    classification: str


class TermCountOut(BaseModel):
    term: str
    count: int


class DeceptionOut(BaseModel):
    weasel_words: list[TermCountOut]
    percentage_puffery: list[str]
    false_urgency: list[str]
    passive_voice_instances: list[str]
    jargon_masking: list[str]
    manipulation_index: int
    manipulation_rationale: Optional[str] = None


class FallacyOut(BaseModel):
    type: str
    evidence: str
    severity: str


class FallaciesOut(BaseModel):
    fallacies: list[FallacyOut]
    fallacy_density: float


class FluffOut(BaseModel):
    fog_index: float
    adjective_verb_ratio: float
    unique_data_points: int
    fluff_score: int
    buzzword_count: int = 0
    action_verb_count: int = 0


class ForensicsOut(BaseModel):
    deception: DeceptionOut
    fallacies: FallaciesOut
    fluff: FluffOut


class ArtifactOut(BaseModel):
    name: str
    found: bool


class ReadinessOut(BaseModel):
    artifact_presence: list[ArtifactOut]
    resource_clarity_score: int
    timeline_reality_score: int
    prerequisite_check_score: int
    readiness_score: int
    verdict: str


class ObsolescenceOut(BaseModel):
    outdated_references: list[str]
    current_references: list[str]
    missing_current_practices: list[str]
    risk_score: int
    risk_level: str


class HypeOut(BaseModel):
    positive_sentiment_pct: int
    risk_mentions: int
    failure_acknowledgments: int
    balance_assessment: str
    hype_score: int
    classification: str


class RegulatoryOut(BaseModel):
    regulatory_mentions: list[str]
    ethical_mentions: list[str]
    privacy_mentions: list[str]
    red_flags: list[str]
    safety_score: int
    safety_level: str


class VisualOut(BaseModel):
    score: int
    diagram_references: int
    formatting_richness: int
    assessment: str


class DataIntensityOut(BaseModel):
    score: int
    tables_detected: int
    citations_detected: int
    statistics_detected: int
    assessment: str


class BiasInstanceOut(BaseModel):
    type: str
    evidence: str
    severity: str


class BiasOut(BaseModel):
    biases: list[BiasInstanceOut]
    overall_bias_score: int


class NotableFactOut(BaseModel):
    fact: str
    rationale: str
    is_contrarian: bool
    is_quantified: bool


# ============================================================
# RESPONSES
# ============================================================

class AnalyzeResponse(BaseModel):
    """POST /analyze response body."""
    provider_consumer: ModuleResultOut
    originator_scale: ModuleResultOut
    target_scale: ModuleResultOut
    audience_level: ModuleResultOut
    rarity_index: ModuleResultOut
    forensics: ForensicsOut
    implementation_readiness: ReadinessOut
    obsolescence_risk: ObsolescenceOut
    hype_reality: HypeOut
    regulatory_safety: RegulatoryOut
    visual_intensity: VisualOut
    data_intensity: DataIntensityOut
    bias_detection: BiasOut
    notable_facts: list[NotableFactOut]
    summary: str
    overall_trust_score: int
    source: str
    dictionary_version: str
    mode: str = "full"


class RegulatoryMentionsOut(BaseModel):
    regulatory_mentions: list[str]
    ethical_mentions: list[str]
    privacy_mentions: list[str]


class PrePassResponse(BaseModel):
    """POST /prepass response body."""
    fluff: FluffOut
    data_intensity: DataIntensityOut
    deception_raw: DeceptionOut
    regulatory_raw: RegulatoryMentionsOut
    word_count: int
    sentence_count: int


class FitnessResponse(BaseModel):
    """POST /fitness response body."""
    fit: bool
    document_type: str
    document_domain: str
    reason: str
    display_name: str = ""
    author: str = ""
    summary: str = ""


class DictionariesResponse(BaseModel):
    """GET /dictionaries response body."""
    version: str
    categories: dict[str, int]
    total_entries: int


class HealthResponse(BaseModel):
    status: str
    version: str
    dictionary_version: str
    llm_provider: str
