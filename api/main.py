"""
DocDetector API - Main Application

POST /analyze      - Analyze a document (local or full)
POST /prepass      - Deterministic heuristic pre-pass only
POST /fitness      - Is this document in scope for analysis?
GET  /dictionaries - Pattern dictionary version and table sizes
GET  /health       - Health check
"""

from __future__ import annotations

import base64
import binascii
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.requests import Request

from docdetector import __version__
from docdetector.config import settings
from docdetector.detector import InputError, analyze_full, analyze_local, validate_input
from docdetector.dictionaries import DEFAULT_DICTIONARIES, DICTIONARY_VERSION
from docdetector.fitness import check_fitness
from docdetector.llm.factory import get_provider
from docdetector.logging import get_logger, setup_logging
from docdetector.models import PageImage
from docdetector.prepass import run_prepass
from docdetector.schemas.analysis import (
    AnalyzeRequest,
    AnalyzeResponse,
    DictionariesResponse,
    FitnessResponse,
    HealthResponse,
    PageImageIn,
    PrePassResponse,
    TextRequest,
)

logger = get_logger("api")


# ============================================================
# STARTUP / SHUTDOWN
# ============================================================

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Wire up dependencies on startup."""
    setup_logging()
    logger.info("DocDetector API starting (dictionaries %s, provider %s)",
                DICTIONARY_VERSION, settings.LLM_PROVIDER)
    yield
    logger.info("DocDetector API shutting down")


app = FastAPI(
    title="DocDetector API",
    description="Trust analysis for vendor pitches, consulting proposals and whitepapers",
    version=f"{__version__} (dictionaries {DICTIONARY_VERSION})",
    lifespan=lifespan,
)

# CORS - set DOCDETECTOR_CORS_ORIGINS in production
app.add_middleware(
    CORSMiddleware,
    allow_origins=[o.strip() for o in settings.CORS_ORIGINS.split(",")],
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
    allow_credentials=False,
)


# ============================================================
# ERROR HANDLERS
# ============================================================

@app.exception_handler(InputError)
async def input_error_handler(request: Request, exc: InputError):
    return JSONResponse(
        status_code=413 if exc.too_large else 422,
        content={"detail": str(exc)},
    )


@app.exception_handler(Exception)
async def global_error_handler(request: Request, exc: Exception):
    """Catch unhandled exceptions - return structured error, don't leak internals."""
    logger.error(
        f"Unhandled exception: {type(exc).__name__}",
        extra={"error": str(exc), "path": request.url.path, "method": request.method},
        exc_info=True,
    )
    return JSONResponse(
        status_code=500,
        content={
            "detail": "Internal server error. The analysis could not be completed.",
        },
    )


# Lazy LLM provider
_llm = None


def _get_llm():
    global _llm
    if _llm is None:
        _llm = get_provider(settings.LLM_PROVIDER)
    return _llm


def _decode_images(images: list[PageImageIn]) -> list[PageImage]:
    decoded = []
    for image in images:
        try:
            data = base64.b64decode(image.data, validate=True)
        except (binascii.Error, ValueError):
            raise HTTPException(422, "Page image data is not valid base64.")
        decoded.append(PageImage(mime_type=image.mime_type, data=data))
    return decoded


# ============================================================
# ROUTES
# ============================================================

@app.post("/analyze", response_model=AnalyzeResponse)
async def analyze(request: AnalyzeRequest):
    """Analyze a document and return the full trust assessment."""
    start = time.time()

    if request.mode == "local":
        result = analyze_local(request.text)
    else:
        images = _decode_images(request.images)
        result = await analyze_full(request.text, llm=_get_llm(), images=images or None)

    duration = int((time.time() - start) * 1000)
    logger.info(
        f"Analysis complete: score={result.overall_trust_score} mode={request.mode}",
        extra={
            "trust_score": result.overall_trust_score,
            "mode": request.mode,
            "source": result.source,
            "duration_ms": duration,
        },
    )
    return {**result.to_dict(), "mode": request.mode}


@app.post("/prepass", response_model=PrePassResponse)
async def prepass(request: TextRequest):
    """Run the deterministic heuristic pre-pass only."""
    text = validate_input(request.text)
    return run_prepass(text).to_dict()


@app.post("/fitness", response_model=FitnessResponse)
async def fitness(request: TextRequest):
    """Check whether a document is suitable for analysis."""
    text = validate_input(request.text)
    result = await check_fitness(text, _get_llm())
    logger.info("Fitness check complete", extra={"fit": result.fit})
    return result.to_dict()


@app.get("/dictionaries", response_model=DictionariesResponse)
async def dictionaries():
    """Pattern dictionary version and entry counts per table."""
    categories = DEFAULT_DICTIONARIES.categories()
    return {
        "version": DEFAULT_DICTIONARIES.version,
        "categories": categories,
        "total_entries": sum(categories.values()),
    }


@app.get("/health", response_model=HealthResponse)
async def health():
    """Health check."""
    return {
        "status": "operational",
        "version": __version__,
        "dictionary_version": DICTIONARY_VERSION,
        "llm_provider": settings.LLM_PROVIDER,
    }


# --- Request Logging Middleware ---
@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log every API request with method, path, status, duration."""
    path = request.url.path
    if path == "/health":
        return await call_next(request)

    start = time.time()
    response = await call_next(request)
    duration_ms = round((time.time() - start) * 1000, 1)

    logger.info(
        f"{request.method} {path} → {response.status_code} ({duration_ms}ms)",
        extra={
            "method": request.method,
            "path": path,
            "status_code": response.status_code,
            "duration_ms": duration_ms,
        },
    )
    return response


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("api.main:app", host=settings.HOST, port=settings.PORT)
