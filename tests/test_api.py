"""
Tests for the HTTP validation service.
"""

import json

import pytest
from fastapi.testclient import TestClient

from me3.config import Settings
from me3.main import app
from me3.validators import validation_engine


@pytest.fixture
def client():
    return TestClient(app)


class TestValidateEndpoint:
    """Tests for POST /api/v1/validate."""

    def test_valid_profile(self, client, full_profile):
        response = client.post("/api/v1/validate", json={"profile": full_profile})

        assert response.status_code == 200
        body = response.json()
        assert body["valid"] is True
        assert body["violations"] == []
        assert body["profile"] == full_profile

    def test_invalid_profile_is_still_200(self, client):
        response = client.post("/api/v1/validate", json={"profile": {"version": "0.2", "name": "Jane"}})

        assert response.status_code == 200
        body = response.json()
        assert body["valid"] is False
        assert body["profile"] is None
        assert body["violations"] == [{
            "field": "version",
            "message": "Unsupported version. Expected 0.1",
            "code": "INVARIANT_VIOLATION",
        }]

    def test_non_object_profile(self, client):
        response = client.post("/api/v1/validate", json={"profile": ["not", "a", "profile"]})
        assert [v["field"] for v in response.json()["violations"]] == ["root"]

    def test_missing_profile_key(self, client):
        response = client.post("/api/v1/validate", json={"document": {}})
        assert response.status_code == 422


class TestRawValidateEndpoint:
    """Tests for POST /api/v1/validate/raw."""

    def test_raw_valid(self, client, minimal_profile):
        response = client.post(
            "/api/v1/validate/raw",
            content=json.dumps(minimal_profile),
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 200
        assert response.json()["valid"] is True

    def test_raw_invalid_json(self, client):
        response = client.post("/api/v1/validate/raw", content="{not json")

        assert response.status_code == 200
        assert response.json()["violations"] == [
            {"field": "root", "message": "Invalid JSON", "code": "DECODE_FAILURE"},
        ]

    def test_raw_nan_is_invalid_json(self, client):
        payload = '{"version": "0.1", "name": "Jane", "intents": {"book": {"url": "https://cal.com/jane", "duration": NaN}}}'
        response = client.post("/api/v1/validate/raw", content=payload)

        assert response.status_code == 200
        body = response.json()
        assert body["valid"] is False
        assert body["violations"] == [
            {"field": "root", "message": "Invalid JSON", "code": "DECODE_FAILURE"},
        ]

    def test_raw_too_large(self, client, monkeypatch):
        monkeypatch.setattr("me3.api.validate.get_settings", lambda: Settings(MAX_DOCUMENT_BYTES=10))

        response = client.post("/api/v1/validate/raw", content='{"version": "0.1", "name": "Jane"}')
        assert response.status_code == 413


class TestErrorHandling:
    """Tests for the service's exception handlers."""

    def test_value_error_is_an_internal_error(self, monkeypatch, minimal_profile):
        def fail(document):
            raise ValueError("engine failure")

        monkeypatch.setattr(validation_engine, "validate", fail)
        client = TestClient(app, raise_server_exceptions=False)

        response = client.post("/api/v1/validate", json={"profile": minimal_profile})

        assert response.status_code == 500
        assert response.json()["error"] == "internal_server_error"


class TestInfoEndpoints:
    """Tests for protocol, health and root endpoints."""

    def test_protocol(self, client):
        body = client.get("/api/v1/protocol").json()

        assert body["version"] == "0.1"
        assert body["filename"] == "me.json"
        assert body["limits"]["bio"] == 500
        assert body["enums"]["frequency"] == ["daily", "weekly", "monthly", "irregular"]
        assert body["patterns"]["timeWindow"] == "[0-9]{2}:[0-9]{2}-[0-9]{2}:[0-9]{2}"

    def test_health(self, client):
        response = client.get("/api/v1/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
        assert response.json()["protocol_version"] == "0.1"

    def test_root(self, client):
        body = client.get("/").json()
        assert body["protocol_version"] == "0.1"
        assert body["health"] == "/api/v1/health"

    def test_cors_is_open(self, client):
        response = client.get("/api/v1/protocol", headers={"Origin": "https://jane.dev"})
        assert response.headers["access-control-allow-origin"] == "*"
