"""
DocDetector - Business Document Trust Analysis Engine

Scores vendor pitches, consulting proposals and whitepapers by
combining deterministic text heuristics with a staged LLM pipeline.

Public API:
  - analyze_local:  Heuristic-only analysis (deterministic, zero API cost)
  - analyze_full:   Heuristic pre-pass + four LLM layers, merged
  - run_prepass:    Deterministic snapshot used to ground the LLM layers
  - merge_results:  Reconcile pre-pass and layer outputs into one result
  - calculate_trust_score: Overall trust score for heuristic results
  - check_fitness:  LLM gate for in-scope documents
  - LLMProvider:    Abstract LLM interface for provider swapping

Usage:
    from docdetector import analyze_local, analyze_full
    from docdetector import get_provider
"""

__version__ = "1.0.0"

from docdetector.dictionaries import (
    DEFAULT_DICTIONARIES,
    DICTIONARY_VERSION,
    PatternDictionaries,
)
from docdetector.composite import compose, validate_weights
from docdetector.models import AnalysisResult, HeuristicPrePass, PageImage
from docdetector.prepass import run_prepass
from docdetector.merger import merge_results
from docdetector.scorer import calculate_trust_score
from docdetector.detector import InputError, analyze_file, analyze_full, analyze_local
from docdetector.fitness import FitnessResult, check_fitness
from docdetector.pipeline import PipelineError
from docdetector.llm import LLMProvider, LLMResponseError, RateLimitError
from docdetector.llm.factory import get_provider

__all__ = [
    "DEFAULT_DICTIONARIES",
    "DICTIONARY_VERSION",
    "PatternDictionaries",
    "compose",
    "validate_weights",
    "AnalysisResult",
    "HeuristicPrePass",
    "PageImage",
    "run_prepass",
    "merge_results",
    "calculate_trust_score",
    "InputError",
    "analyze_file",
    "analyze_full",
    "analyze_local",
    "FitnessResult",
    "check_fitness",
    "PipelineError",
    "LLMProvider",
    "LLMResponseError",
    "RateLimitError",
    "get_provider",
]
