"""
LLM Provider factory.
"""

from typing import Optional

from docdetector.config import settings
from docdetector.llm import LLMProvider


def get_provider(provider_name: Optional[str] = None) -> LLMProvider:
    """Factory - returns the configured LLM provider."""
    provider_name = provider_name or settings.LLM_PROVIDER
    if provider_name == "gemini":
        from docdetector.llm.gemini import GeminiProvider
        return GeminiProvider()
    else:
        raise ValueError(f"Unknown LLM provider: {provider_name}")
