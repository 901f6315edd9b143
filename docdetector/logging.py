"""
Logging for the analysis pipeline and API.

One handler on the "docdetector" logger: JSON lines by default, plain
text when DOCDETECTOR_LOG_FORMAT=text. Pipeline stages, the detector
and the API attach context through ``extra=``; only the keys in
CONTEXT_FIELDS reach the output.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Optional

from docdetector.config import settings

NAMESPACE = "docdetector"

CONTEXT_FIELDS = frozenset({
    # pipeline / detector
    "stage", "stage_name", "attempt", "source", "trust_score",
    "word_count", "sentence_count", "fit", "error_type",
    # api
    "mode", "method", "path", "status_code", "duration_ms", "error",
})

TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class JSONFormatter(logging.Formatter):
    """One JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        entry.update(
            (key, value) for key, value in vars(record).items()
            if key in CONTEXT_FIELDS and value is not None
        )
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


def setup_logging(level: Optional[str] = None, fmt: Optional[str] = None) -> logging.Logger:
    """Install the single docdetector handler; safe to call more than once."""
    logger = logging.getLogger(NAMESPACE)
    logger.setLevel(getattr(logging, (level or settings.LOG_LEVEL).upper(), logging.INFO))

    handler = logging.StreamHandler(sys.stdout)
    if (fmt or settings.LOG_FORMAT) == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(TEXT_FORMAT))
    logger.handlers[:] = [handler]

    # The Gemini SDK logs every request at INFO
    logging.getLogger("google_genai").setLevel(logging.WARNING)
    return logger


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(f"{NAMESPACE}.{name}")
