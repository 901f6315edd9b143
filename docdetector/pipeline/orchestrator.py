"""
Pipeline Orchestrator - sequential LLM analysis layers

Runs the stage list in order. Every stage sees:
  - the document text (capped at a character budget)
  - the heuristic pre-pass, serialized once
  - the parsed output of all earlier stages as {"layer_1": ..., ...}

Retry policy is defined once and applied to every stage: rate limits
back off exponentially, other failures (including unparseable JSON)
pause briefly. A stage that exhausts its retries aborts the whole
run with PipelineError; no partial layers are ever returned.
"""

from __future__ import annotations

import asyncio
import json
import re
import time
from dataclasses import dataclass
from typing import Awaitable, Callable, Optional, Sequence

from docdetector.config import settings
from docdetector.llm import LLMProvider, RateLimitError
from docdetector.logging import get_logger
from docdetector.models import HeuristicPrePass, PageImage
from docdetector.pipeline.stages import STAGES, StageDescriptor
from docdetector.prepass import prepass_json

logger = get_logger("pipeline")

TRUNCATION_MARKER = "\n\n[... document truncated for context limit ...]"

# "rate" as a word, so "generate" does not count
_RATE_LIMIT_MESSAGE = re.compile(r"\b429\b|\brate\b|\brate[ _-]?limit", re.IGNORECASE)


class PipelineError(Exception):
    """A pipeline stage failed after exhausting its retries."""

    def __init__(self, stage: int, cause: BaseException):
        self.stage = stage
        self.cause = cause
        super().__init__(f"Pipeline stage {stage} failed: {cause}")


@dataclass(frozen=True)
class RetryPolicy:
    max_retries: int = settings.STAGE_MAX_RETRIES
    backoff_base: float = settings.RETRY_BACKOFF_SECONDS
    flat_pause: float = settings.RETRY_PAUSE_SECONDS

    def delay(self, attempt: int, error: BaseException) -> float:
        """Seconds to wait after a failed attempt (0-based)."""
        if is_rate_limit(error):
            return self.backoff_base * (2 ** attempt)
        return self.flat_pause


@dataclass(frozen=True)
class LayerOutputs:
    layer1: dict
    layer2: dict
    layer3: dict
    layer4: dict


def is_rate_limit(error: BaseException) -> bool:
    if isinstance(error, RateLimitError):
        return True
    return bool(_RATE_LIMIT_MESSAGE.search(str(error)))


def truncate_document(text: str, max_chars: int = settings.PROMPT_DOCUMENT_CHARS) -> str:
    if len(text) <= max_chars:
        return text
    return text[:max_chars] + TRUNCATION_MARKER


async def run_stage(
    stage: StageDescriptor,
    llm: LLMProvider,
    prompt: str,
    images: Optional[Sequence[PageImage]] = None,
    policy: RetryPolicy = RetryPolicy(),
    sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
) -> dict:
    """One stage with retries. Raises PipelineError when attempts run out."""
    attempts = policy.max_retries + 1
    for attempt in range(attempts):
        start = time.perf_counter()
        try:
            result = await llm.generate_json(
                prompt,
                system_instruction=stage.system_instruction,
                temperature=stage.temperature,
                max_output_tokens=stage.max_output_tokens,
                images=images if stage.accepts_images else None,
            )
        except Exception as e:
            logger.warning(
                "Stage %d (%s) attempt %d failed: %s",
                stage.layer, stage.name, attempt + 1, e,
                extra={
                    "stage": stage.layer,
                    "stage_name": stage.name,
                    "attempt": attempt + 1,
                    "error_type": type(e).__name__,
                },
            )
            if attempt == attempts - 1:
                raise PipelineError(stage.layer, e) from e
            await sleep(policy.delay(attempt, e))
            continue

        logger.info(
            "Stage %d (%s) complete",
            stage.layer, stage.name,
            extra={
                "stage": stage.layer,
                "stage_name": stage.name,
                "attempt": attempt + 1,
                "duration_ms": round((time.perf_counter() - start) * 1000, 1),
            },
        )
        return result

    # range(attempts) is never empty; keeps type checkers satisfied
    raise PipelineError(stage.layer, RuntimeError("no attempts made"))


async def run_pipeline(
    text: str,
    prepass: HeuristicPrePass,
    llm: LLMProvider,
    images: Optional[Sequence[PageImage]] = None,
    stages: Sequence[StageDescriptor] = STAGES,
    policy: RetryPolicy = RetryPolicy(),
    sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
) -> LayerOutputs:
    """Run all stages in order and return their parsed outputs."""
    if len(stages) != 4:
        raise ValueError(f"Expected 4 pipeline stages, got {len(stages)}")

    document = truncate_document(text)
    heuristics = prepass_json(prepass)
    prior: dict[str, dict] = {}

    for stage in stages:
        prompt = stage.render(
            document_text=document,
            heuristic_results=heuristics,
            prior_results=json.dumps(prior, indent=2, ensure_ascii=False) if prior else "",
            has_images=bool(images) and stage.accepts_images,
        )
        prior[f"layer_{stage.layer}"] = await run_stage(
            stage, llm, prompt, images=images, policy=policy, sleep=sleep,
        )

    layers = [prior[f"layer_{s.layer}"] for s in stages]
    return LayerOutputs(*layers)
