"""
LLM Provider - Abstract Interface

All LLM calls go through this interface. Swap providers
by changing DOCDETECTOR_LLM_PROVIDER in env.
"""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from typing import Optional, Sequence


class RateLimitError(Exception):
    """Raised by a provider when the service is throttling requests."""


class LLMResponseError(ValueError):
    """The LLM answered, but not with a JSON object."""


def strip_fences(text: str) -> str:
    """Remove a ```json ... ``` wrapper if the model added one."""
    cleaned = text.strip()
    if cleaned.startswith("```"):
        cleaned = cleaned.split("\n", 1)[-1].rsplit("```", 1)[0].strip()
    return cleaned


class LLMProvider(ABC):
    """Abstract base for LLM providers."""

    @abstractmethod
    async def generate(
        self,
        prompt: str,
        system_instruction: Optional[str] = None,
        temperature: float = 0.7,
        json_mode: bool = False,
        max_output_tokens: Optional[int] = None,
        images: Optional[Sequence] = None,
    ) -> str:
        """Generate a text response from the LLM."""
        ...

    async def generate_json(
        self,
        prompt: str,
        system_instruction: Optional[str] = None,
        temperature: float = 0.3,
        max_output_tokens: Optional[int] = None,
        images: Optional[Sequence] = None,
    ) -> dict:
        """Generate and parse a JSON object response."""
        text = await self.generate(
            prompt=prompt,
            system_instruction=system_instruction,
            temperature=temperature,
            json_mode=True,
            max_output_tokens=max_output_tokens,
            images=images,
        )
        cleaned = strip_fences(text or "")
        try:
            parsed = json.loads(cleaned)
        except json.JSONDecodeError as e:
            raise LLMResponseError(
                f"LLM returned invalid JSON: {e}. Raw response: {(text or '')[:300]}"
            ) from e
        if not isinstance(parsed, dict):
            raise LLMResponseError(
                f"LLM returned JSON {type(parsed).__name__}, expected an object"
            )
        return parsed
