"""
DocDetector Configuration

Central settings loaded from environment variables.
"""

import os
from dataclasses import dataclass
from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Settings:
    """Immutable application settings."""

    # --- Versioning ---
    API_VERSION: str = "1"

    # --- LLM Provider ---
    LLM_PROVIDER: str = os.getenv("DOCDETECTOR_LLM_PROVIDER", "gemini")
    GEMINI_API_KEY: str = os.getenv("GEMINI_API_KEY", "")
    GEMINI_MODEL: str = os.getenv("GEMINI_MODEL", "gemini-2.5-flash")

    # --- Input limits ---
    MAX_INPUT_CHARS: int = int(os.getenv("DOCDETECTOR_MAX_INPUT_CHARS", "500000"))
    # Document characters sent to each pipeline stage
    PROMPT_DOCUMENT_CHARS: int = int(os.getenv("DOCDETECTOR_PROMPT_CHARS", "100000"))

    # --- Pipeline retry policy ---
    STAGE_MAX_RETRIES: int = int(os.getenv("DOCDETECTOR_STAGE_RETRIES", "2"))
    RETRY_BACKOFF_SECONDS: float = float(os.getenv("DOCDETECTOR_BACKOFF_SECONDS", "1.0"))
    RETRY_PAUSE_SECONDS: float = float(os.getenv("DOCDETECTOR_PAUSE_SECONDS", "1.0"))

    # --- Logging ---
    LOG_LEVEL: str = os.getenv("DOCDETECTOR_LOG_LEVEL", "INFO").upper()
    LOG_FORMAT: str = os.getenv("DOCDETECTOR_LOG_FORMAT", "json")  # "json" or "text"

    # --- Server ---
    HOST: str = os.getenv("DOCDETECTOR_HOST", "0.0.0.0")
    PORT: int = int(os.getenv("DOCDETECTOR_PORT", "8000"))

    # --- CORS ---
    CORS_ORIGINS: str = os.getenv("DOCDETECTOR_CORS_ORIGINS", "*")


settings = Settings()
