"""
Gemini Provider - Google Gemini API implementation.

Uses the google.genai SDK. Client is lazily initialized -
app loads without an API key and only fails on actual LLM call.

Retries are not done here: the analysis pipeline owns the retry
policy. Throttling is surfaced as RateLimitError so the pipeline can
back off instead of pausing briefly.
"""

from __future__ import annotations

import re
from typing import Optional, Sequence

from google import genai
from google.genai import errors, types

from docdetector.config import settings
from docdetector.llm import LLMProvider, RateLimitError
from docdetector.logging import get_logger

logger = get_logger("llm.gemini")

_RATE_LIMIT_MESSAGE = re.compile(
    r"\b429\b|\brate[ _-]?limit|\bquota\b|resource_exhausted", re.IGNORECASE
)


def _is_rate_limit(exc: Exception) -> bool:
    if isinstance(exc, errors.APIError) and getattr(exc, "code", None) == 429:
        return True
    return bool(_RATE_LIMIT_MESSAGE.search(str(exc)))


class GeminiProvider(LLMProvider):
    """Google Gemini LLM provider."""

    def __init__(self, api_key: Optional[str] = None, model: Optional[str] = None):
        self._api_key = api_key or settings.GEMINI_API_KEY
        self._model = model or settings.GEMINI_MODEL
        self._client: Optional[genai.Client] = None

    def _get_client(self) -> genai.Client:
        if self._client is None:
            if not self._api_key:
                raise RuntimeError(
                    "GEMINI_API_KEY not set. Get one from "
                    "https://aistudio.google.com/apikey"
                )
            self._client = genai.Client(api_key=self._api_key)
        return self._client

    async def generate(
        self,
        prompt: str,
        system_instruction: Optional[str] = None,
        temperature: float = 0.7,
        json_mode: bool = False,
        max_output_tokens: Optional[int] = None,
        images: Optional[Sequence] = None,
    ) -> str:
        config = types.GenerateContentConfig(
            temperature=temperature,
            system_instruction=system_instruction,
            max_output_tokens=max_output_tokens,
        )
        if json_mode:
            config.response_mime_type = "application/json"

        contents: list = [prompt]
        for image in images or ():
            contents.append(
                types.Part.from_bytes(data=image.data, mime_type=image.mime_type)
            )

        client = self._get_client()
        try:
            response = await client.aio.models.generate_content(
                model=self._model,
                contents=contents if images else prompt,
                config=config,
            )
        except Exception as e:
            if _is_rate_limit(e):
                logger.warning(
                    "Gemini rate limited: %s", e,
                    extra={"error_type": type(e).__name__},
                )
                raise RateLimitError(str(e)) from e
            raise
        return response.text or ""
