"""
Shared test fixtures: a scripted LLM and well-formed layer payloads.
"""

from __future__ import annotations

import json

import pytest

from docdetector.llm import LLMProvider


class ScriptedLLM(LLMProvider):
    """
    Mock LLM that replays a script of responses, one per call.

    Items may be a dict (sent as JSON), a raw string, or an exception
    to raise. The last item repeats once the script runs out.
    """

    def __init__(self, responses):
        self.responses = list(responses)
        self.calls = []

    async def generate(
        self,
        prompt,
        system_instruction=None,
        temperature=0.7,
        json_mode=False,
        max_output_tokens=None,
        images=None,
    ):
        self.calls.append({
            "prompt": prompt,
            "system_instruction": system_instruction,
            "temperature": temperature,
            "json_mode": json_mode,
            "max_output_tokens": max_output_tokens,
            "images": images,
        })
        item = self.responses.pop(0) if len(self.responses) > 1 else self.responses[0]
        if isinstance(item, BaseException):
            raise item
        if isinstance(item, dict):
            return json.dumps(item)
        return item


def _module(score: int, classification: str) -> dict:
    names = ["A", "B", "C", "D", "E"]
    return {
        "drivers": [
            {"name": n, "weight": 0.2, "score": score, "rationale": f"{n} rationale"}
            for n in names
        ],
        "composite_score": score * 10,
        "confidence": 60,
        "classification": classification,
    }


@pytest.fixture
def scripted_llm():
    return ScriptedLLM


@pytest.fixture
def layer_payloads():
    """Four well-formed layer outputs, in pipeline order."""
    layer1 = {
        "deception_judgment": {
            "manipulation_index": 35,
            "rationale": "Some hedging, mostly grounded claims.",
        },
        "fallacies": {
            "fallacies": [
                {"type": "False Dichotomy", "evidence": "Adopt now or fall behind.",
                 "severity": "Medium"},
            ],
            "fallacy_density": 1.5,
        },
        "regulatory_judgment": {
            "red_flags": ["No impact assessment mentioned"],
            "safety_score": 72,
            "safety_level": "Safe",
        },
        "visual_intensity": {
            "score": 6,
            "diagram_references": 3,
            "formatting_richness": 4,
            "assessment": "Moderate visual elements: balanced",
        },
    }
    layer2 = {
        "bias_detection": {
            "biases": [
                {"type": "Confirmation", "evidence": "Only wins are cited.", "severity": "Medium"},
            ],
            "overall_bias_score": 15,
        },
        "obsolescence_risk": {
            "outdated_references": [],
            "current_references": ["LLM"],
            "missing_current_practices": ["RAG"],
            "risk_score": 10,
            "risk_level": "Low",
        },
        "implementation_readiness": {
            "artifact_presence": [{"name": "Code Snippets", "found": False}],
            "resource_clarity_score": 4,
            "timeline_reality_score": 6,
            "prerequisite_check_score": 5,
            "readiness_score": 5,
            "verdict": "Partially Actionable",
        },
    }
    layer3 = {
        "provider_consumer": _module(7, "Consumer-Favored"),
        "originator_scale": _module(5, "Mid-tier"),
        "target_scale": _module(7, "Enterprise"),
        "audience_level": _module(6, "VP"),
    }
    layer4 = {
        "hype_reality": {
            "positive_sentiment_pct": 70,
            "risk_mentions": 3,
            "failure_acknowledgments": 2,
            "balance_assessment": "Within optimal credibility range (60-80% positive)",
            "hype_score": 40,
            "classification": "Balanced Analysis",
        },
        "rarity_index": _module(4, "Differentiated"),
        "notable_facts": [
            {"fact": "Adoption dropped in regulated industries.",
             "rationale": "Contradicts conventional wisdom",
             "is_contrarian": True, "is_quantified": False},
        ],
        "overall_trust_score": 68,
        "summary": "A balanced proposal with modest evidence.",
    }
    return [layer1, layer2, layer3, layer4]
