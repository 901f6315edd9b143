"""
API Integration Tests - Endpoint Verification

Tests every public API endpoint using FastAPI's TestClient.
No real LLM calls: local mode runs the heuristics, and full mode and
the fitness gate use a scripted LLM patched into the app.

These tests catch:
  - Schema mismatches (response model vs actual data)
  - Route registration issues
  - Input validation status codes (422 vs 413)
  - Response format regressions
"""

from __future__ import annotations

import base64

import pytest
from fastapi.testclient import TestClient

from docdetector.config import settings

SAMPLE = (
    "Our revolutionary platform will transform your business. "
    "Act now, the window is closing! It might possibly deliver 300% growth. "
    "We comply with GDPR and use an LLM with RAG."
)


# --- Fixtures ---

@pytest.fixture(scope="module")
def client():
    """Create a test client for the DocDetector API."""
    from api.main import app
    with TestClient(app) as c:
        yield c


@pytest.fixture
def patch_llm(monkeypatch):
    """Install a scripted LLM as the app's provider."""
    from api import main

    def install(llm):
        monkeypatch.setattr(main, "_llm", llm)
        return llm
    return install


# ============================================================
# HEALTH & META
# ============================================================

class TestHealth:
    """Verify /health returns correct structure."""

    def test_health_returns_200(self, client):
        assert client.get("/health").status_code == 200

    def test_health_fields(self, client):
        data = client.get("/health").json()
        assert data["status"] == "operational"
        assert data["version"]
        assert data["dictionary_version"] == "1.0.0"
        assert data["llm_provider"] == settings.LLM_PROVIDER


class TestDictionaries:

    def test_categories(self, client):
        data = client.get("/dictionaries").json()
        assert data["version"] == "1.0.0"
        assert data["categories"]["weasel_words"] > 0
        assert data["categories"]["critical_practices_watchlist"] == 5
        assert data["total_entries"] == sum(data["categories"].values())


# ============================================================
# ANALYZE - LOCAL MODE (no LLM required)
# ============================================================

class TestAnalyzeLocal:

    def test_local_returns_full_result(self, client):
        r = client.post("/analyze", json={"text": SAMPLE, "mode": "local"})
        assert r.status_code == 200
        data = r.json()
        assert data["mode"] == "local"
        assert data["source"] == "heuristic"
        assert 0 <= data["overall_trust_score"] <= 100
        for key in (
            "provider_consumer", "originator_scale", "target_scale",
            "audience_level", "rarity_index", "forensics",
            "implementation_readiness", "obsolescence_risk", "hype_reality",
            "regulatory_safety", "visual_intensity", "data_intensity",
            "bias_detection", "notable_facts", "summary",
        ):
            assert key in data

    def test_local_detects_urgency(self, client):
        data = client.post("/analyze", json={"text": SAMPLE, "mode": "local"}).json()
        assert "act now" in data["forensics"]["deception"]["false_urgency"]

    def test_module_drivers_serialized(self, client):
        data = client.post("/analyze", json={"text": SAMPLE, "mode": "local"}).json()
        drivers = data["provider_consumer"]["drivers"]
        assert len(drivers) == 5
        assert set(drivers[0]) == {"name", "weight", "score", "rationale"}


# ============================================================
# ANALYZE - FULL MODE (scripted LLM)
# ============================================================

class TestAnalyzeFull:

    def test_full_mode_merges_layers(self, client, patch_llm, scripted_llm, layer_payloads):
        patch_llm(scripted_llm(layer_payloads))
        r = client.post("/analyze", json={"text": SAMPLE, "mode": "full"})
        assert r.status_code == 200
        data = r.json()
        assert data["mode"] == "full"
        assert data["source"] == "llm+heuristic"
        assert data["overall_trust_score"] == 68

    def test_full_mode_with_images(self, client, patch_llm, scripted_llm, layer_payloads):
        llm = patch_llm(scripted_llm(layer_payloads))
        image = {"mime_type": "image/png", "data": base64.b64encode(b"\x89PNG").decode()}
        r = client.post("/analyze", json={"text": SAMPLE, "mode": "full", "images": [image]})
        assert r.status_code == 200
        assert llm.calls[0]["images"][0].data == b"\x89PNG"

    def test_bad_image_data(self, client, patch_llm, scripted_llm, layer_payloads):
        patch_llm(scripted_llm(layer_payloads))
        image = {"mime_type": "image/png", "data": "***not base64***"}
        r = client.post("/analyze", json={"text": SAMPLE, "mode": "full", "images": [image]})
        assert r.status_code == 422


# ============================================================
# VALIDATION
# ============================================================

class TestValidation:

    def test_empty_text(self, client):
        assert client.post("/analyze", json={"text": "", "mode": "local"}).status_code == 422

    def test_whitespace_text(self, client):
        assert client.post("/analyze", json={"text": "   ", "mode": "local"}).status_code == 422

    def test_missing_text(self, client):
        assert client.post("/analyze", json={"mode": "local"}).status_code == 422

    def test_invalid_mode(self, client):
        r = client.post("/analyze", json={"text": SAMPLE, "mode": "deep"})
        assert r.status_code == 422

    def test_oversize_text(self, client):
        text = "a" * (settings.MAX_INPUT_CHARS + 1)
        r = client.post("/analyze", json={"text": text, "mode": "local"})
        assert r.status_code == 413


# ============================================================
# PREPASS / FITNESS
# ============================================================

class TestPrePass:

    def test_prepass_fields(self, client):
        r = client.post("/prepass", json={"text": SAMPLE})
        assert r.status_code == 200
        data = r.json()
        assert data["regulatory_raw"]["regulatory_mentions"] == ["GDPR"]
        assert data["word_count"] == len(SAMPLE.split())

    def test_prepass_empty(self, client):
        assert client.post("/prepass", json={"text": " "}).status_code == 422


class TestFitness:

    def test_fitness(self, client, patch_llm, scripted_llm):
        patch_llm(scripted_llm([{
            "fit": True,
            "document_type": "Vendor pitch",
            "document_domain": "AI/ML",
            "reason": "Pitches an AI platform.",
        }]))
        r = client.post("/fitness", json={"text": SAMPLE})
        assert r.status_code == 200
        data = r.json()
        assert data["fit"] is True
        assert data["document_domain"] == "AI/ML"

    def test_fitness_fails_open(self, client, patch_llm, scripted_llm):
        patch_llm(scripted_llm(["no idea"]))
        data = client.post("/fitness", json={"text": SAMPLE}).json()
        assert data["fit"] is True
        assert data["document_type"] == "Unknown"
