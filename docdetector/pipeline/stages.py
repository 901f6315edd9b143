"""
Pipeline Stages - ordered LLM analysis layers

Each stage is a descriptor: the orchestrator runs them in order,
feeding every stage the document, the heuristic pre-pass and the
parsed output of all earlier stages. Adding or re-tuning a layer is
a data change here, not a change to the orchestrator.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

FIRST_LAYER_NOTE = "N/A: this is the first analysis layer."
NO_IMAGES_NOTE = (
    "NOTE: No page images available. Base visual assessment on text references only."
)
IMAGES_NOTE = (
    "NOTE: Rendered page images are attached. Use them for the visual assessment."
)

_PLACEHOLDER = re.compile(
    r"\{(document_text|heuristic_results|prior_results|page_images_note)\}"
)


@dataclass(frozen=True)
class StageDescriptor:
    layer: int
    name: str
    temperature: float
    max_output_tokens: int
    system_instruction: str
    prompt_template: str
    output_keys: tuple[str, ...]
    accepts_images: bool = False

    def render(
        self,
        document_text: str,
        heuristic_results: str,
        prior_results: str,
        has_images: bool = False,
    ) -> str:
        # Single pass; inserted values are never rescanned
        values = {
            "document_text": document_text,
            "heuristic_results": heuristic_results,
            "prior_results": prior_results or FIRST_LAYER_NOTE,
            "page_images_note": IMAGES_NOTE if has_images else NO_IMAGES_NOTE,
        }
        return _PLACEHOLDER.sub(lambda m: values[m.group(1)], self.prompt_template)


# ============================================================
# SHARED PROMPT FRAGMENTS
# ============================================================

_DOCUMENT_SCOPE = (
    "The documents you analyze are consulting proposals, vendor pitches, "
    "training brochures, whitepapers, and advisory decks in the domains of AI, "
    "Data & Analytics, Agentic AI, Cloud, Digital Transformation, Cybersecurity, "
    "and Governance."
)

_BUSINESS_CALIBRATION = (
    "IMPORTANT CALIBRATION: These are business documents. A degree of persuasive "
    "language, optimism, and vendor positioning is NORMAL and EXPECTED. Only flag "
    "problems when they are genuinely excessive or deceptive beyond what is typical "
    "for the document type."
)


# ============================================================
# LAYER 1: RAW FORENSICS
# ============================================================

RAW_FORENSICS = StageDescriptor(
    layer=1,
    name="Raw Forensics",
    temperature=0.1,
    max_output_tokens=4000,
    accepts_images=True,
    output_keys=("deception_judgment", "fallacies", "regulatory_judgment", "visual_intensity"),
    system_instruction=(
        "You are a forensic document analyst with expertise in detecting deception, "
        "logical fallacies, regulatory compliance gaps, and visual composition in "
        f"technology vendor and advisory documents. {_DOCUMENT_SCOPE} You are strictly "
        "evidence-based. Every finding must reference specific text from the document. "
        "Never fabricate content that is not present.\n\n"
        f"{_BUSINESS_CALIBRATION} A confident, well-written vendor pitch is not "
        "manipulative; reserve high manipulation scores for documents that are "
        "genuinely misleading or use dark patterns."
    ),
    prompt_template="""Analyze the following business document. A heuristic pre-analysis has already counted specific words and pattern matches. Treat those numbers as ground truth, then apply your judgment to the scoring tasks.

=== DOCUMENT TEXT ===
{document_text}

=== HEURISTIC PRE-ANALYSIS (treat as factual) ===
{heuristic_results}

{page_images_note}

Return a JSON object with these sections:

1. "deception_judgment": score the overall manipulation_index (0-100) from the weasel words, puffery, false urgency, passive voice and jargon found by the heuristic. Severity matters as much as quantity. Guide: 0-20 minimal, 20-40 moderate, 40-60 elevated, 60-80 high, 80-100 extreme. A typical consulting proposal scores 15-30. Return { "manipulation_index": number, "rationale": string }

2. "fallacies": logical fallacies in the argument. Types: "False Dichotomy", "Appeal to Authority", "Straw Man", "Post Hoc", "Sunk Cost". Each with a quote as evidence (max 120 chars) and severity "Low" | "Medium" | "High". Return { "fallacies": [{ "type": string, "evidence": string, "severity": string }], "fallacy_density": number } where fallacy_density is fallacies per 1000 words.

3. "regulatory_judgment": using the regulatory, ethical and privacy matches, list red flags where the document proposes activities without an appropriate compliance framework. Return { "red_flags": [string], "safety_level": "Safe" | "Caution" | "High Risk", "safety_score": number (0-100) }

4. "visual_intensity": the document's visual richness. Return { "score": number (1-10), "diagram_references": number, "formatting_richness": number, "assessment": string }

RESPOND WITH ONLY VALID JSON:
{
  "deception_judgment": { "manipulation_index": 0, "rationale": "" },
  "fallacies": { "fallacies": [], "fallacy_density": 0 },
  "regulatory_judgment": { "red_flags": [], "safety_level": "Safe", "safety_score": 0 },
  "visual_intensity": { "score": 0, "diagram_references": 0, "formatting_richness": 0, "assessment": "" }
}""",
)


# ============================================================
# LAYER 2: INFORMED ANALYSIS
# ============================================================

INFORMED_ANALYSIS = StageDescriptor(
    layer=2,
    name="Informed Analysis",
    temperature=0.2,
    max_output_tokens=4000,
    output_keys=("bias_detection", "obsolescence_risk", "implementation_readiness"),
    system_instruction=(
        "You are a strategic document analyst specializing in bias detection, "
        "technology obsolescence, and implementation readiness for technology vendor "
        f"and advisory documents. {_DOCUMENT_SCOPE} Use the prior forensic layer as "
        "context and cite specific patterns from the document.\n\n"
        "IMPORTANT CALIBRATION: Business documents naturally showcase strengths and "
        "cite respected sources. Only rate a bias Medium or High when it is genuinely "
        "misleading or contradictory evidence is systematically suppressed. A typical "
        "well-crafted proposal scores 10-25 on bias."
    ),
    prompt_template="""Analyze this business document for bias, obsolescence risk, and implementation readiness.

=== DOCUMENT TEXT ===
{document_text}

=== HEURISTIC PRE-ANALYSIS ===
{heuristic_results}

=== PRIOR ANALYSIS (Layer 1) ===
{prior_results}

Return a JSON object with:

1. "bias_detection": cognitive biases present. Types: "Confirmation", "Survival", "Selection", "Recency", "Authority". Each with an evidence quote (max 120 chars) and severity "Low" | "Medium" | "High". Return { "biases": [{ "type": string, "evidence": string, "severity": string }], "overall_bias_score": number (0-100) }

2. "obsolescence_risk": outdated technology references and missing current practices. Return { "outdated_references": [string], "current_references": [string], "missing_current_practices": [string], "risk_level": "Low" | "Medium" | "High" | "Critical", "risk_score": number (0-100) }

3. "implementation_readiness": how actionable the document is. Return { "artifact_presence": [{ "name": string, "found": boolean }], "resource_clarity_score": number (1-10), "timeline_reality_score": number (1-10), "prerequisite_check_score": number (1-10), "readiness_score": number (1-10), "verdict": "Theoretical Only" | "Partially Actionable" | "Implementation Ready" }

RESPOND WITH ONLY VALID JSON:
{
  "bias_detection": { "biases": [], "overall_bias_score": 0 },
  "obsolescence_risk": { "outdated_references": [], "current_references": [], "missing_current_practices": [], "risk_level": "Low", "risk_score": 0 },
  "implementation_readiness": { "artifact_presence": [], "resource_clarity_score": 0, "timeline_reality_score": 0, "prerequisite_check_score": 0, "readiness_score": 0, "verdict": "" }
}""",
)


# ============================================================
# LAYER 3: STRATEGIC CLASSIFICATION
# ============================================================

STRATEGIC_CLASSIFICATION = StageDescriptor(
    layer=3,
    name="Strategic Classification",
    temperature=0.25,
    max_output_tokens=5000,
    output_keys=("provider_consumer", "originator_scale", "target_scale", "audience_level"),
    system_instruction=(
        "You are a management consulting analyst who classifies technology vendor "
        f"and advisory documents along strategic dimensions. {_DOCUMENT_SCOPE} "
        "Provide weighted driver scores (1-10) with a clear rationale for each."
    ),
    prompt_template="""Classify this business document along four strategic dimensions.

=== DOCUMENT TEXT ===
{document_text}

=== HEURISTIC PRE-ANALYSIS ===
{heuristic_results}

=== PRIOR ANALYSIS (Layers 1-2) ===
{prior_results}

Each module has: "drivers", an array of { "name": string, "weight": number (0-1, summing to 1.0), "score": number (1-10), "rationale": string }; "composite_score" (0-100); "confidence" (0-100); and a "classification" label.

1. "provider_consumer": "Provider-Favored" | "Balanced" | "Consumer-Favored"
2. "originator_scale": "Solo/Boutique" | "Mid-tier" | "Big 4/GSI"
3. "target_scale": "Startup" | "SME" | "Enterprise"
4. "audience_level": "Developer" | "Manager" | "VP" | "C-Suite"

RESPOND WITH ONLY VALID JSON:
{
  "provider_consumer": { "drivers": [], "composite_score": 0, "confidence": 0, "classification": "" },
  "originator_scale": { "drivers": [], "composite_score": 0, "confidence": 0, "classification": "" },
  "target_scale": { "drivers": [], "composite_score": 0, "confidence": 0, "classification": "" },
  "audience_level": { "drivers": [], "composite_score": 0, "confidence": 0, "classification": "" }
}""",
)


# ============================================================
# LAYER 4: SYNTHESIS
# ============================================================

SYNTHESIS = StageDescriptor(
    layer=4,
    name="Synthesis",
    temperature=0.3,
    max_output_tokens=5000,
    output_keys=("hype_reality", "rarity_index", "notable_facts", "overall_trust_score", "summary"),
    system_instruction=(
        "You are a senior analyst synthesizing the complete forensic analysis of a "
        "technology vendor or advisory document. Be insightful but factual, and cite "
        "evidence for every claim.\n\n"
        "IMPORTANT CALIBRATION: Trust score bands: 70-100 excellent, 55-70 good, "
        "40-55 average, 25-40 below average, 0-25 poor. A typical well-written "
        "consulting proposal scores 50-65. In the summary, lead with the document's "
        "strengths before its weaknesses."
    ),
    prompt_template="""Provide the final synthesis for this document analysis.

=== DOCUMENT TEXT ===
{document_text}

=== HEURISTIC PRE-ANALYSIS ===
{heuristic_results}

=== ALL PRIOR ANALYSIS (Layers 1-3) ===
{prior_results}

Return a JSON object with:

1. "hype_reality": { "positive_sentiment_pct": number (0-100), "risk_mentions": number, "failure_acknowledgments": number, "balance_assessment": string, "hype_score": number (0-100), "classification": "Balanced Analysis" | "Optimistic" | "Sales Propaganda" }
2. "rarity_index": { "drivers": [...], "composite_score": number, "confidence": number, "classification": "Commodity" | "Differentiated" | "Category-Defining" }
3. "notable_facts": 3-5 findings, each { "fact": string, "rationale": string, "is_contrarian": boolean, "is_quantified": boolean }
4. "overall_trust_score": number (0-100)
5. "summary": a 200-300 word executive summary

RESPOND WITH ONLY VALID JSON:
{
  "hype_reality": { "positive_sentiment_pct": 0, "risk_mentions": 0, "failure_acknowledgments": 0, "balance_assessment": "", "hype_score": 0, "classification": "" },
  "rarity_index": { "drivers": [], "composite_score": 0, "confidence": 0, "classification": "" },
  "notable_facts": [],
  "overall_trust_score": 0,
  "summary": ""
}""",
)


STAGES: tuple[StageDescriptor, ...] = (
    RAW_FORENSICS,
    INFORMED_ANALYSIS,
    STRATEGIC_CLASSIFICATION,
    SYNTHESIS,
)
