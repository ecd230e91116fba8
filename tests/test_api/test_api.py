"""Tests for API endpoints."""

from __future__ import annotations

import xml.etree.ElementTree as ET

from fastapi.testclient import TestClient

from rxart.api.artwork import _run
from rxart.engine.cache import ArtworkCache
from rxart.engine.pipeline import Pipeline
from rxart.main import app
from rxart.models.requests import ArtworkRequest
from tests.conftest import ANKLE_SPRAIN, FALL_FRACTURE


client = TestClient(app)


def test_health():
    response = client.get("/api/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["subspecialties"] == 6


def test_artwork_ankle():
    response = client.post("/api/artwork", json={"question": ANKLE_SPRAIN, "confidence": 0.9})
    assert response.status_code == 200
    data = response.json()
    assert data["analysis"]["subspecialty"] == "hand-foot"
    assert data["analysis"]["treatment_context"] == "general"
    assert data["analysis"]["emotional_tone"] == "neutral"
    assert "strain" in data["analysis"]["conditions"]
    assert data["palette"]["primary"].startswith("#")
    assert data["rarity"]["id"].startswith("OIQ-")
    assert data["metadata"]["medical_focus"] == "Hand & Foot"
    assert data["svg"].startswith("<?xml")
    assert data["element_count"] > 0
    assert data["processing_time_ms"] >= 0


def test_artwork_defaults():
    response = client.post("/api/artwork", json={})
    assert response.status_code == 200
    data = response.json()
    assert data["metadata"]["question_excerpt"] == "general medical artwork"
    assert data["analysis"]["complexity_level"] == 3


def test_artwork_theme():
    response = client.post("/api/artwork", json={"theme": "joint"})
    assert response.status_code == 200
    assert response.json()["metadata"]["question_excerpt"] == "joint medical artwork"


def test_artwork_second_call_is_cached():
    body = {"question": FALL_FRACTURE, "salt": "api-cache-test"}
    first = client.post("/api/artwork", json=body).json()
    second = client.post("/api/artwork", json=body).json()
    assert first["cached"] is False
    assert second["cached"] is True
    assert first["seed"] == second["seed"]
    assert first["svg"] == second["svg"]


def test_artwork_svg():
    response = client.post("/api/artwork/svg", json={"question": FALL_FRACTURE, "size": 400})
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("image/svg+xml")
    root = ET.fromstring(response.content)
    assert root.get("viewBox") == "0 0 400 400"


def test_invalid_confidence():
    response = client.post("/api/artwork", json={"question": "knee", "confidence": 1.5})
    assert response.status_code == 422


def test_invalid_size():
    response = client.post("/api/artwork", json={"question": "knee", "size": 8})
    assert response.status_code == 422


def test_invalid_theme():
    response = client.post("/api/artwork", json={"theme": "skull"})
    assert response.status_code == 422


class _BusyPipeline(Pipeline):
    """Serves another request's cache hit while rendering."""

    def __init__(self, cache: ArtworkCache, other_question: str) -> None:
        super().__init__(cache=cache)
        self.other_question = other_question

    def _generate(self, *args, **kwargs):
        self.run(self.other_question, 0.5)
        return super()._generate(*args, **kwargs)


def test_cached_flag_ignores_concurrent_hits():
    cache = ArtworkCache(maxsize=8)
    Pipeline(cache=cache).run(ANKLE_SPRAIN, 0.5)
    pipeline = _BusyPipeline(cache, ANKLE_SPRAIN)

    result, cached = _run(ArtworkRequest(question=FALL_FRACTURE), pipeline)
    assert cached is False
    assert pipeline.cache.hits == 1
    assert result.question == FALL_FRACTURE

    _, cached = _run(ArtworkRequest(question=FALL_FRACTURE), pipeline)
    assert cached is True
