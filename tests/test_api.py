"""Tests for the decision-support HTTP API."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from obstetric_tools.decision_support import CRITERIA_GROUPS
from obstetric_tools.main import app
from obstetric_tools import main as main_module
from obstetric_tools.config.settings import Settings
from obstetric_tools.reasoning import gemini_client
from obstetric_tools.api.routes import ectopic as ectopic_routes
from obstetric_tools.reasoning.summary_service import EctopicSummaryService


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def eligible_answers(eligible_state):
    return {key: value.value for key, value in eligible_state.items()}


class TestToolsAndHealth:

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    @pytest.mark.parametrize("api_key, expected", [("", False), ("test-key", True)])
    def test_health_reports_ai_summary_from_config_only(self, client, monkeypatch, api_key, expected):
        monkeypatch.setattr(main_module, "settings", Settings(gemini_api_key=api_key))
        monkeypatch.setattr(gemini_client, "GeminiClient", MagicMock(side_effect=AssertionError("contacted Gemini")))

        components = client.get("/health").json()["components"]

        assert components == {"ai_summary": expected}

    def test_list_tools(self, client):
        data = client.get("/api/v1/tools").json()

        assert [t["tool_id"] for t in data["tools"]] == ["ectopic", "bishop"]
        assert "reference only" in data["disclaimer"]


class TestEctopicRoutes:

    def test_criteria(self, client):
        data = client.get("/api/v1/ectopic/criteria").json()

        assert len(data["inclusion"]) == 4
        assert len(data["absolute_contraindications"]) == 11
        assert len(data["relative_contraindications"]) == 4
        assert data["absolute_contraindications"][0]["id"] == "rupture"

    def test_criteria_sections_follow_catalog_groups(self, client):
        data = client.get("/api/v1/ectopic/criteria").json()

        sections = [
            data["inclusion"],
            data["absolute_contraindications"],
            data["relative_contraindications"],
        ]
        for section, criteria in zip(sections, CRITERIA_GROUPS.values()):
            assert [c["id"] for c in section] == [c.id for c in criteria]

    def test_evaluate_empty_returns_null_recommendation(self, client):
        data = client.post("/api/v1/ectopic/evaluate", json={"answers": {}}).json()

        assert data["recommendation"] is None
        assert data["answered"] == 0
        assert data["total"] == 19
        assert data["all_answered"] is False

    def test_evaluate_absolute_contraindication(self, client):
        response = client.post(
            "/api/v1/ectopic/evaluate",
            json={"answers": {"breastfeeding": "yes", "unknownId": "no"}},
        )

        data = response.json()
        assert response.status_code == 200
        assert data["recommendation"]["level"] == "danger"
        assert data["answered"] == 1

    def test_evaluate_eligible(self, client, eligible_answers):
        data = client.post("/api/v1/ectopic/evaluate", json={"answers": eligible_answers}).json()

        assert data["recommendation"]["level"] == "success"
        assert data["all_answered"] is True

    def test_invalid_answer_value_rejected(self, client):
        response = client.post("/api/v1/ectopic/evaluate", json={"answers": {"rupture": "maybe"}})

        assert response.status_code == 422

    def test_summary_requires_all_answers(self, client):
        response = client.post("/api/v1/ectopic/summary", json={"answers": {"rupture": "no"}})

        assert response.status_code == 400

    def test_summary_returns_generated_text(self, client, eligible_answers, monkeypatch):
        generator = AsyncMock()
        generator.generate.return_value = {"response": "Suitable candidate."}
        service = EctopicSummaryService(generator=generator)
        monkeypatch.setattr(ectopic_routes, "get_summary_service", lambda: service)

        response = client.post("/api/v1/ectopic/summary", json={"answers": eligible_answers})

        assert response.status_code == 200
        assert response.json()["summary"] == "Suitable candidate."

    def test_summary_failure_is_returned_as_text(self, client, eligible_answers, monkeypatch):
        generator = AsyncMock()
        generator.generate.side_effect = RuntimeError("quota exceeded")
        service = EctopicSummaryService(generator=generator)
        monkeypatch.setattr(ectopic_routes, "get_summary_service", lambda: service)

        response = client.post("/api/v1/ectopic/summary", json={"answers": eligible_answers})

        assert response.status_code == 200
        assert "quota exceeded" in response.json()["summary"]


class TestBishopRoutes:

    def test_criteria(self, client):
        data = client.get("/api/v1/bishop/criteria").json()

        assert [c["id"] for c in data["criteria"]] == [
            "dilation", "effacement", "station", "consistency", "position",
        ]
        assert data["max_total"] == 13

    def test_incomplete_scores_hide_total(self, client):
        data = client.post("/api/v1/bishop/evaluate", json={"scores": {"dilation": 3}}).json()

        assert data["recommendation"]["level"] == "info"
        assert data["total"] is None

    def test_boundary_five_is_favorable(self, client):
        scores = {"dilation": 1, "effacement": 1, "station": 1, "consistency": 1, "position": 1}

        data = client.post("/api/v1/bishop/evaluate", json={"scores": scores}).json()

        assert data["recommendation"]["level"] == "success"
        assert data["total"] == 5

    def test_out_of_range_score_rejected(self, client):
        response = client.post("/api/v1/bishop/evaluate", json={"scores": {"position": 3}})

        assert response.status_code == 422

    def test_unknown_component_rejected(self, client):
        response = client.post("/api/v1/bishop/evaluate", json={"scores": {"parity": 1}})

        assert response.status_code == 422
