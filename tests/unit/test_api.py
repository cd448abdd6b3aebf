"""Tests for the FastAPI app."""

from unittest.mock import AsyncMock, patch

import pytest
from fastapi.testclient import TestClient

from blindspot_scout import __version__
from blindspot_scout.agents.orchestrator import Orchestrator
from blindspot_scout.api.main import app


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "version": __version__}


def test_analyze_returns_pipeline_state(client, make_paper):
    papers = [make_paper().model_dump(mode="json") for _ in range(3)]
    response = client.post(
        "/analyze",
        json={"query": {"disease": "crohn"}, "papers": papers, "current_year": 2025},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["query"]["disease"] == "Crohn's disease"
    assert len(body["quality_assessments"]) == 3
    assert body["analysis"]["total_papers_analyzed"] == 3
    assert body["report"]["key_metrics"]["total_papers"] == 3
    assert body["report"]["main_blind_spots"][0]["severity"] == "critical"


def test_analyze_without_papers(client):
    response = client.post("/analyze", json={"query": {"disease": "asthma"}})

    assert response.status_code == 200
    spots = response.json()["report"]["main_blind_spots"]
    assert [s["category"] for s in spots] == ["data"]


def test_analyze_blank_disease_is_unprocessable(client):
    response = client.post("/analyze", json={"query": {"disease": "   "}, "papers": []})

    assert response.status_code == 422
    assert "empty disease name" in response.json()["detail"]


def test_analyze_missing_query_is_unprocessable(client):
    response = client.post("/analyze", json={"papers": []})
    assert response.status_code == 422


def test_analyze_closes_orchestrator(client, make_paper):
    papers = [make_paper().model_dump(mode="json")]
    with patch.object(Orchestrator, "close", new_callable=AsyncMock) as close:
        response = client.post(
            "/analyze", json={"query": {"disease": "asthma"}, "papers": papers}
        )

    assert response.status_code == 200
    close.assert_awaited_once()


def test_analyze_closes_orchestrator_on_error(client):
    with patch.object(Orchestrator, "close", new_callable=AsyncMock) as close:
        response = client.post("/analyze", json={"query": {"disease": " "}, "papers": []})

    assert response.status_code == 422
    close.assert_awaited_once()
