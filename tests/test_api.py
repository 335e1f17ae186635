"""
tests/test_api.py
HTTP surface via FastAPI's TestClient; settings and generator are overridden.
"""
import httpx
import pytest
from fastapi.testclient import TestClient

from backend.ai.generator import CardGenerator
from backend.config import get_settings
from backend.main import app, get_generator


@pytest.fixture
def client(make_settings):
    app.dependency_overrides[get_settings] = lambda: make_settings()
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def ai_client(make_settings, chat_client, reply_with):
    """Client whose generator is configured and answers with ``reply``."""
    def _make(reply):
        app.dependency_overrides[get_settings] = lambda: make_settings(openrouter_api_key="sk-test")
        generator = CardGenerator(chat_client(reply_with(reply)))
        app.dependency_overrides[get_generator] = lambda: generator
        return TestClient(app)
    yield _make
    app.dependency_overrides.clear()


# ── HEALTH ───────────────────────────────────────────────────

class TestHealth:

    def test_no_api_key_reports_ai_unavailable(self, client):
        response = client.get("/api/health")
        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["services"]["api"] == "operational"
        assert body["services"]["ai"] == "unavailable"
        assert body["services"]["storage"] == "operational"
        assert body["features"]["stateSpecificRights"] == "enabled"
        assert "timestamp" in body

    def test_api_key_reports_ai_operational(self, make_settings):
        app.dependency_overrides[get_settings] = lambda: make_settings(openai_api_key="sk-x")
        try:
            body = TestClient(app).get("/api/health").json()
        finally:
            app.dependency_overrides.clear()
        assert body["services"]["ai"] == "operational"


# ── RIGHTS ───────────────────────────────────────────────────

class TestRights:

    def test_get_resolves_card(self, client):
        response = client.get(
            "/api/rights",
            params={"jurisdiction": "CA", "interactionType": "traffic_stop", "language": "en"},
        )
        assert response.status_code == 200
        body = response.json()
        assert body["card"]["cardId"] == "traffic_stop-CA-en"
        assert body["card"]["content"]["keyRights"][0] == "Right to remain silent (5th Amendment)"
        assert "NOT LEGAL ADVICE" in body["disclaimer"]

    def test_get_accepts_legacy_state_param(self, client):
        body = client.get("/api/rights", params={"state": "ny", "interactionType": "questioning"}).json()
        assert body["card"]["jurisdiction"] == "NY"

    def test_get_unknown_type_is_400(self, client):
        response = client.get("/api/rights", params={"interactionType": "jaywalking"})
        assert response.status_code == 400
        assert "jaywalking" in response.json()["error"]

    def test_post_uses_custom_suffix(self, client):
        response = client.post(
            "/api/rights",
            json={"interactionType": "arrest", "state": "IL", "context": "at home"},
        )
        assert response.status_code == 200
        card = response.json()["card"]
        assert card["cardId"] == "arrest-IL-custom"
        assert card["context"] == "at home"

    def test_post_missing_type_is_400(self, client):
        response = client.post("/api/rights", json={"jurisdiction": "CA"})
        assert response.status_code == 400
        assert response.json()["error"].startswith("Invalid request")

    def test_post_malformed_json_is_400(self, client):
        response = client.post(
            "/api/rights", content=b"{oops", headers={"Content-Type": "application/json"}
        )
        assert response.status_code == 400
        assert "error" in response.json()

    def test_jurisdictions_listing(self, client):
        body = client.get("/api/jurisdictions").json()
        assert body["jurisdictions"][0]["code"] == "General"
        assert "protest" in body["interactionTypes"]
        assert body["languages"] == ["en", "es"]


# ── GENERATION ───────────────────────────────────────────────

class TestGeneration:

    @pytest.mark.parametrize("path,payload", [
        ("/api/generate-card", {"interactionType": "traffic_stop", "jurisdiction": "CA"}),
        ("/api/generate-summary", {"interactionType": "traffic_stop", "durationSeconds": 60}),
        ("/api/rights/custom", {"interactionType": "traffic_stop", "jurisdiction": "CA"}),
    ])
    def test_unconfigured_ai_is_503(self, client, path, payload):
        response = client.post(path, json=payload)
        assert response.status_code == 503
        assert response.json()["error"].startswith("AI service not configured")

    def test_unknown_type_checked_before_ai(self, client):
        response = client.post("/api/generate-summary", json={"interactionType": "x", "durationSeconds": 5})
        assert response.status_code == 400

    def test_negative_duration_is_400(self, client):
        response = client.post(
            "/api/generate-summary", json={"interactionType": "arrest", "durationSeconds": -1}
        )
        assert response.status_code == 400

    def test_generate_summary(self, ai_client):
        response = ai_client("A calm, brief stop.").post(
            "/api/generate-summary",
            json={"interactionType": "traffic_stop", "durationSeconds": 125, "location": "Austin"},
        )
        assert response.status_code == 200
        assert response.json() == {"summary": "A calm, brief stop."}

    def test_generate_card_falls_back_with_200(self, ai_client):
        response = ai_client("not json at all").post(
            "/api/generate-card", json={"interactionType": "protest", "jurisdiction": "FL"}
        )
        assert response.status_code == 200
        body = response.json()
        assert set(body) == {"title", "summary", "keyPoints", "shareableText"}
        assert len(body["shareableText"]) <= 280

    def test_custom_card_sections(self, ai_client):
        response = ai_client("Do's:\n- Stay calm\n").post(
            "/api/rights/custom", json={"interactionType": "questioning", "jurisdiction": "WA"}
        )
        assert response.status_code == 200
        body = response.json()
        assert body["origin"] == "generated"
        assert body["sections"]["dos"] == "generated"
        assert body["sections"]["phrases"] == "defaulted"
        assert body["card"]["content"]["dos"] == ["Stay calm"]
