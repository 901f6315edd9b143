"""
Detector - Analysis Entry Points

Two analysis modes:
  - local:  Heuristics only. Zero API cost. Deterministic.
  - full:   Heuristic pre-pass + four LLM layers, merged. The real product.

A full analysis whose pipeline fails falls back to the local result,
so callers always get a complete AnalysisResult.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Any, Optional, Sequence

from docdetector.config import settings
from docdetector.dictionaries import DEFAULT_DICTIONARIES, PatternDictionaries
from docdetector.interfaces import ResultStore, TextExtractor
from docdetector.llm import LLMProvider
from docdetector.logging import get_logger
from docdetector.matcher import extract_sentences
from docdetector.merger import merge_results
from docdetector.models import AnalysisResult, PageImage
from docdetector.modules import (
    analyze_audience_level,
    analyze_bias,
    analyze_data_intensity,
    analyze_forensics,
    analyze_hype,
    analyze_obsolescence,
    analyze_originator_scale,
    analyze_provider_consumer,
    analyze_rarity_index,
    analyze_readiness,
    analyze_regulatory,
    analyze_target_scale,
    analyze_visual_intensity,
    extract_notable_facts,
)
from docdetector.pipeline import PipelineError, run_pipeline
from docdetector.prepass import run_prepass
from docdetector.scorer import calculate_trust_score, generate_summary

logger = get_logger("detector")


class InputError(ValueError):
    """The document text cannot be analyzed (empty or too large)."""

    def __init__(self, message: str, too_large: bool = False):
        self.too_large = too_large
        super().__init__(message)


def validate_input(text: str) -> str:
    if not isinstance(text, str) or not text.strip():
        raise InputError("Document text is empty.")
    if len(text) > settings.MAX_INPUT_CHARS:
        raise InputError(
            f"Document text exceeds {settings.MAX_INPUT_CHARS} characters.",
            too_large=True,
        )
    return text


def analyze_local(
    text: str,
    d: PatternDictionaries = DEFAULT_DICTIONARIES,
) -> AnalysisResult:
    """
    Heuristic-only analysis. Every module runs on the raw text;
    the trust score and summary are computed locally.
    """
    validate_input(text)
    sentences = extract_sentences(text)

    partial = AnalysisResult(
        provider_consumer=analyze_provider_consumer(text, d),
        originator_scale=analyze_originator_scale(text, d),
        target_scale=analyze_target_scale(text, d),
        audience_level=analyze_audience_level(text, d),
        rarity_index=analyze_rarity_index(text, d),
        forensics=analyze_forensics(text, sentences, d),
        implementation_readiness=analyze_readiness(text, d),
        obsolescence_risk=analyze_obsolescence(text, d),
        hype_reality=analyze_hype(text, sentences, d),
        regulatory_safety=analyze_regulatory(text, d),
        visual_intensity=analyze_visual_intensity(text, d),
        data_intensity=analyze_data_intensity(text, d),
        bias_detection=analyze_bias(text, sentences, d),
        notable_facts=extract_notable_facts(text, sentences, d),
        summary="",
        overall_trust_score=0,
        source="heuristic",
        dictionary_version=d.version,
    )

    trust_score, _ = calculate_trust_score(partial)
    scored = replace(partial, overall_trust_score=trust_score)
    result = replace(scored, summary=generate_summary(scored))

    logger.info(
        "Local analysis complete",
        extra={
            "mode": "local",
            "trust_score": result.overall_trust_score,
            "word_count": len(text.split()),
        },
    )
    return result


async def analyze_full(
    text: str,
    llm: LLMProvider,
    images: Optional[Sequence[PageImage]] = None,
    d: PatternDictionaries = DEFAULT_DICTIONARIES,
) -> AnalysisResult:
    """
    Full analysis: pre-pass, four LLM layers, merge.
    Falls back to analyze_local() if any layer fails for good.
    """
    validate_input(text)
    prepass = run_prepass(text, d)

    try:
        layers = await run_pipeline(text, prepass, llm, images=images)
    except PipelineError as e:
        logger.warning(
            "LLM pipeline failed at stage %d, using heuristic analysis: %s",
            e.stage, e.cause,
            extra={"stage": e.stage, "error_type": type(e.cause).__name__, "source": "heuristic"},
        )
        return analyze_local(text, d)

    result = merge_results(prepass, layers)
    logger.info(
        "Full analysis complete",
        extra={
            "mode": "full",
            "source": result.source,
            "trust_score": result.overall_trust_score,
            "word_count": prepass.word_count,
        },
    )
    return result


async def analyze_file(
    file: Any,
    extractor: TextExtractor,
    llm: Optional[LLMProvider] = None,
    store: Optional[ResultStore] = None,
) -> tuple[AnalysisResult, Optional[str]]:
    """
    Extract, analyze, and optionally persist a document.

    Runs a full analysis when an LLM is supplied, local otherwise.
    Returns the result and the store's id (None without a store).
    """
    text, images = extractor.extract(file)
    if llm is not None:
        result = await analyze_full(text, llm, images=images)
    else:
        result = analyze_local(text)

    result_id = store.save(result) if store is not None else None
    return result, result_id
