import random

import pytest
from fastapi.testclient import TestClient

from conftest import PLAIN_TEXT
from detector_ia.config import DetectorConfig
from detector_ia.main import app
from detector_ia.routes import analysis
from detector_ia.services.detector import SpanishAIDetector
from detector_ia.services.paraphraser import ParaphraseEngine


@pytest.fixture
def client():
    app.dependency_overrides[analysis.get_detector] = lambda: SpanishAIDetector(DetectorConfig())
    app.dependency_overrides[analysis.get_paraphraser] = lambda: ParaphraseEngine(rng=random.Random(0))
    yield TestClient(app)
    app.dependency_overrides.clear()


class TestAnalyzeEndpoints:
    def test_root(self, client):
        assert client.get("/").status_code == 200

    def test_short_text_gives_null_result(self, client):
        response = client.post("/api/analyze", json={"text": "Muy corto."})
        assert response.status_code == 200
        assert response.json()["result"] is None

    def test_analyze(self, client):
        response = client.post("/api/analyze", json={"text": PLAIN_TEXT})
        assert response.status_code == 200
        result = response.json()["result"]
        assert result["probability"] == 35
        assert result["verdict"]["level"] == "low"
        assert result["sentence_scores"] == [30, 30, 30]
        assert result["using_api"] is False

    def test_only_json_text_is_accepted(self, client):
        assert client.post("/api/analyze-file").status_code == 404
        assert client.post("/api/analyze", json={}).status_code == 422


class TestParaphraseEndpoints:
    def test_paraphrase(self, client):
        response = client.post("/api/paraphrase", json={"text": PLAIN_TEXT, "level": "heavy"})
        assert response.status_code == 200
        body = response.json()
        assert len(body["alternatives"]) == 3
        assert body["level"] == "Profundo"
        assert body["metadata"]["rewrite_level"] == "heavy"
        assert "apa" in body["citation_suggestions"]

    def test_short_text_is_bad_request(self, client):
        response = client.post("/api/paraphrase", json={"text": "corto", "level": "light"})
        assert response.status_code == 400

    def test_unknown_level_is_rejected(self, client):
        response = client.post("/api/paraphrase", json={"text": PLAIN_TEXT, "level": "extreme"})
        assert response.status_code == 422

    def test_misuse(self, client):
        response = client.post("/api/misuse", json={"text": "Un texto.", "purpose": "examen final"})
        assert response.status_code == 200
        assert [flag["type"] for flag in response.json()] == ["academic"]

    def test_metric_description(self, client):
        response = client.get("/api/metrics/patterns", params={"value": 75})
        assert response.json() == {"label": "Muchos patrones", "severity_class": "high"}
