"""
API Tests

Exercises the routers through FastAPI's TestClient. Settings are
overridden so no test ever reaches the model.
"""
from datetime import date
from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from cancel_engine.config import Settings, get_app_settings, get_settings
from cancel_engine.main import app


class FakeClient:
    def __init__(self, text):
        self.text = text

    def complete(self, prompt):
        return self.text


@pytest.fixture
def client():
    app.dependency_overrides[get_app_settings] = lambda: Settings(llm_api_key=None)
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def keyed_client():
    app.dependency_overrides[get_app_settings] = lambda: Settings(llm_api_key="test-key")
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def payload():
    return {
        "user": {
            "fullName": "Jane Doe",
            "email": "jane@x.com",
            "phone": "",
            "address": "1 Main St",
        },
        "subscription": {
            "serviceName": "Netflix",
            "accountNumber": "",
            "subscriptionPlan": "Premium",
            "cancellationReason": "Too expensive",
            "effectiveDate": "2024-01-01",
        },
        "tone": "Firm & Legalistic",
    }


# =============================================================================
# ROOT / HEALTH
# =============================================================================

class TestRoot:

    def test_root(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert response.json()["name"] == "Cancellation Engine"

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_lifespan_stores_settings(self, monkeypatch):
        monkeypatch.delenv("LLM_API_KEY", raising=False)
        monkeypatch.delenv("API_KEY", raising=False)
        get_settings.cache_clear()
        try:
            with TestClient(app):
                assert isinstance(app.state.settings, Settings)
                assert app.state.settings.has_llm_credentials is False
        finally:
            get_settings.cache_clear()


# =============================================================================
# LETTERS
# =============================================================================

class TestLetters:

    def test_template_endpoint(self, client, payload):
        response = client.post("/letters/template", params={"today": "2024-01-15"}, json=payload)

        assert response.status_code == 200
        data = response.json()
        assert data["source"] == "template"
        assert data["tone"] == "Firm & Legalistic"
        assert data["content"].startswith("Jane Doe\n1 Main St\njane@x.com\n\nDate: 1/15/2024")
        assert "Account Number: N/A" in data["content"]
        assert data["content"].endswith("Sincerely,\n\nJane Doe")
        assert data["word_count"] == len(data["content"].split())

    def test_generate_without_key_falls_back(self, client, payload):
        response = client.post("/letters/generate", json=payload)

        assert response.status_code == 200
        data = response.json()
        assert data["source"] == "template"
        assert "RE: Cancellation of Netflix Subscription" in data["content"]

    def test_generate_with_model(self, keyed_client, payload):
        fake = FakeClient("Dear Netflix team, please cancel. Jane Doe")
        with patch("cancel_engine.services.ai_letter.create_client", return_value=fake):
            response = keyed_client.post("/letters/generate", json=payload)

        assert response.status_code == 200
        assert response.json()["source"] == "ai"
        assert response.json()["content"] == "Dear Netflix team, please cancel. Jane Doe"

    def test_snake_case_fields_accepted(self, client):
        body = {
            "user": {"full_name": "Sam Lee", "email": "sam@example.com"},
            "subscription": {"service_name": "Hulu", "effective_date": "2024-02-01"},
            "tone": "direct",
        }
        response = client.post("/letters/template", json=body)

        assert response.status_code == 200
        assert response.json()["tone"] == "Direct & Concise"
        assert "Account Number: N/A" in response.json()["content"]

    def test_default_tone_is_formal(self, client, payload):
        del payload["tone"]
        response = client.post("/letters/template", json=payload)

        assert response.json()["tone"] == "Formal"

    @pytest.mark.parametrize("section,field,value", [
        ("user", "fullName", "   "),
        ("subscription", "serviceName", ""),
        ("subscription", "effectiveDate", "01/02/2024"),
        ("user", "email", "not-an-email"),
        ("user", "email", "jane@x..com"),
        ("user", "email", "a@b.c,d"),
        ("subscription", "effectiveDate", "2024-02-30"),
    ])
    def test_validation_errors(self, client, payload, section, field, value):
        payload[section][field] = value
        response = client.post("/letters/generate", json=payload)

        assert response.status_code == 422

    def test_unknown_tone_rejected(self, client, payload):
        payload["tone"] = "Sarcastic"
        response = client.post("/letters/template", json=payload)

        assert response.status_code == 422

    def test_empty_email_allowed(self, client, payload):
        payload["user"]["email"] = ""
        response = client.post("/letters/template", json=payload)

        assert response.status_code == 200
        assert response.json()["content"].startswith("Jane Doe\n1 Main St\n\nDate:")

    def test_effective_date_defaults_to_today(self, client, payload):
        del payload["subscription"]["effectiveDate"]
        response = client.post("/letters/template", json=payload)

        assert response.status_code == 200
        assert f"effective {date.today().isoformat()}." in response.json()["content"]


# =============================================================================
# SUGGESTIONS / TONES
# =============================================================================

class TestSuggestions:

    def test_defaults_without_key(self, client):
        response = client.get("/suggestions/reasons", params={"service_name": "Spotify"})

        assert response.status_code == 200
        assert response.json()["reasons"][0] == "Cost is too high"
        assert len(response.json()["reasons"]) == 4

    def test_short_name(self, client):
        response = client.get("/suggestions/reasons", params={"service_name": "Sp"})

        assert response.json()["reasons"] == []

    def test_service_name_required(self, client):
        assert client.get("/suggestions/reasons").status_code == 422


class TestTones:

    def test_list_tones(self, client):
        response = client.get("/tones")

        assert response.status_code == 200
        names = [t["name"] for t in response.json()["tones"]]
        assert names == ["Formal", "Firm & Legalistic", "Polite & Friendly", "Direct & Concise"]
