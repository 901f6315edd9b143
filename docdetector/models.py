"""
Result Data Structures

Immutable records produced by the analyzers, the pre-pass and the
merger. Every record is a frozen dataclass with tuple sequences and a
to_dict() for JSON output. Records are built fresh per request and
never mutated.

The closed label sets (classifications, verdicts, severities) are
defined here too, since both the heuristic analyzers and the merger
validate against them.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Optional


# ============================================================
# CLOSED LABEL SETS
# ============================================================

SEVERITIES = ("Low", "Medium", "High")

PROVIDER_CONSUMER_CLASSES = ("Provider-Favored", "Balanced", "Consumer-Favored")
ORIGINATOR_CLASSES = ("Solo/Boutique", "Mid-tier", "Big 4/GSI")
TARGET_CLASSES = ("Startup", "SME", "Enterprise")
AUDIENCE_CLASSES = ("Developer", "Manager", "VP", "C-Suite")
RARITY_CLASSES = ("Commodity", "Differentiated", "Category-Defining")

READINESS_VERDICTS = ("Theoretical Only", "Partially Actionable", "Implementation Ready")
RISK_LEVELS = ("Low", "Medium", "High", "Critical")
HYPE_CLASSES = ("Balanced Analysis", "Optimistic", "Sales Propaganda")
SAFETY_LEVELS = ("Safe", "Caution", "High Risk")

FALLACY_TYPES = (
    "False Dichotomy", "Appeal to Authority", "Straw Man", "Post Hoc",
    "Sunk Cost", "Other",
)
BIAS_TYPES = ("Confirmation", "Survival", "Selection", "Recency", "Authority")


class Record:
    """Mixin giving frozen dataclasses a JSON-ready dict view."""

    def to_dict(self) -> dict:
        return _lists(asdict(self))


def _lists(value):
    """Tuples become lists so the dict equals its JSON round-trip."""
    if isinstance(value, dict):
        return {k: _lists(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_lists(v) for v in value]
    return value


# ============================================================
# CLASSIFICATION MODULES
# ============================================================

@dataclass(frozen=True)
class WeightedDriver(Record):
    """One scored dimension of a classification module."""
    name: str
    weight: float       # (0, 1]; weights in one module sum to 1.0
    score: int          # 1-10
    rationale: str


@dataclass(frozen=True)
class ModuleResult(Record):
    drivers: tuple[WeightedDriver, ...]
    composite_score: int    # 0-100
    confidence: int         # 0-100
    classification: str


# ============================================================
# CONTENT FORENSICS
# ============================================================

@dataclass(frozen=True)
class TermCount(Record):
    term: str
    count: int


@dataclass(frozen=True)
class DeceptionResult(Record):
    weasel_words: tuple[TermCount, ...]
    percentage_puffery: tuple[str, ...]
    false_urgency: tuple[str, ...]
    passive_voice_instances: tuple[str, ...]
    jargon_masking: tuple[str, ...]
    manipulation_index: int
    manipulation_rationale: Optional[str] = None


@dataclass(frozen=True)
class Fallacy(Record):
    type: str
    evidence: str
    severity: str


@dataclass(frozen=True)
class FallacyResult(Record):
    fallacies: tuple[Fallacy, ...]
    fallacy_density: float


@dataclass(frozen=True)
class FluffResult(Record):
    fog_index: float
    adjective_verb_ratio: float
    unique_data_points: int
    fluff_score: int
    buzzword_count: int = 0
    action_verb_count: int = 0


@dataclass(frozen=True)
class ForensicsResult(Record):
    deception: DeceptionResult
    fallacies: FallacyResult
    fluff: FluffResult


# ============================================================
# ADVANCED MODULES
# ============================================================

@dataclass(frozen=True)
class ArtifactCheck(Record):
    name: str
    found: bool


@dataclass(frozen=True)
class ImplementationReadiness(Record):
    artifact_presence: tuple[ArtifactCheck, ...]
    resource_clarity_score: int
    timeline_reality_score: int
    prerequisite_check_score: int
    readiness_score: int
    verdict: str


@dataclass(frozen=True)
class ObsolescenceRisk(Record):
    outdated_references: tuple[str, ...]
    current_references: tuple[str, ...]
    missing_current_practices: tuple[str, ...]
    risk_score: int
    risk_level: str


@dataclass(frozen=True)
class HypeReality(Record):
    positive_sentiment_pct: int
    risk_mentions: int
    failure_acknowledgments: int
    balance_assessment: str
    hype_score: int
    classification: str


@dataclass(frozen=True)
class RegulatorySafety(Record):
    regulatory_mentions: tuple[str, ...]
    ethical_mentions: tuple[str, ...]
    privacy_mentions: tuple[str, ...]
    red_flags: tuple[str, ...]
    safety_score: int
    safety_level: str


@dataclass(frozen=True)
class VisualIntensity(Record):
    score: int
    diagram_references: int
    formatting_richness: int
    assessment: str


@dataclass(frozen=True)
class DataIntensity(Record):
    score: int
    tables_detected: int
    citations_detected: int
    statistics_detected: int
    assessment: str


# ============================================================
# BIAS / FACTS
# ============================================================

@dataclass(frozen=True)
class BiasInstance(Record):
    type: str
    evidence: str
    severity: str


@dataclass(frozen=True)
class BiasResult(Record):
    biases: tuple[BiasInstance, ...]
    overall_bias_score: int


@dataclass(frozen=True)
class NotableFact(Record):
    fact: str
    rationale: str
    is_contrarian: bool
    is_quantified: bool


# ============================================================
# PRE-PASS / FULL RESULT
# ============================================================

@dataclass(frozen=True)
class RegulatoryMentions(Record):
    regulatory_mentions: tuple[str, ...]
    ethical_mentions: tuple[str, ...]
    privacy_mentions: tuple[str, ...]


@dataclass(frozen=True)
class HeuristicPrePass(Record):
    """Deterministic signals computed before any LLM call."""
    fluff: FluffResult
    data_intensity: DataIntensity
    deception_raw: DeceptionResult
    regulatory_raw: RegulatoryMentions
    word_count: int
    sentence_count: int


@dataclass(frozen=True)
class PageImage:
    """A rendered document page, sent to the first pipeline stage only."""
    mime_type: str
    data: bytes


@dataclass(frozen=True)
class AnalysisResult(Record):
    provider_consumer: ModuleResult
    originator_scale: ModuleResult
    target_scale: ModuleResult
    audience_level: ModuleResult
    rarity_index: ModuleResult
    forensics: ForensicsResult
    implementation_readiness: ImplementationReadiness
    obsolescence_risk: ObsolescenceRisk
    hype_reality: HypeReality
    regulatory_safety: RegulatorySafety
    visual_intensity: VisualIntensity
    data_intensity: DataIntensity
    bias_detection: BiasResult
    notable_facts: tuple[NotableFact, ...]
    summary: str
    overall_trust_score: int
    source: str = "heuristic"        # "heuristic" | "llm+heuristic"
    dictionary_version: str = ""
