"""Tests for the HTTP detection service."""

import importlib

import pytest
import responses
from fastapi.testclient import TestClient

from specscout import server
from specscout.core.config import DetectorSettings
from specscout.core.errors import ConfigError
from specscout.server import create_app
from specscout.version import __version__

SPEC = {
    "openapi": "3.0.0",
    "info": {"title": "Embeddings API"},
    "paths": {"/embed": {"post": {"summary": "Embed text"}}},
}


@pytest.fixture
def client():
    return TestClient(create_app(DetectorSettings()))


class TestDetectEndpoint:
    def test_invalid_json_body(self, client):
        response = client.post(
            "/detect", content=b"{not json", headers={"Content-Type": "application/json"}
        )

        assert response.status_code == 400
        assert response.json() == {"error": "Invalid JSON body"}

    def test_missing_url(self, client):
        response = client.post("/detect", json={})

        assert response.status_code == 400
        assert response.json() == {"error": "URL is required"}

    def test_non_string_url(self, client):
        response = client.post("/detect", json={"url": 42})

        assert response.status_code == 400
        assert response.json() == {"error": "Invalid URL format"}

    @pytest.mark.parametrize(
        "url,message",
        [
            ("not a url", "Invalid URL format"),
            ("file:///etc/passwd", "Only HTTP/HTTPS URLs are allowed"),
            ("http://localhost:8080/openapi.json", "Private/reserved IP addresses are not allowed"),
            ("http://[::1]/", "Private/reserved IP addresses are not allowed"),
        ],
    )
    def test_rejected_targets(self, client, url, message):
        response = client.post("/detect", json={"url": url})

        assert response.status_code == 400
        assert response.json() == {"error": message}

    @responses.activate
    def test_detects_spec(self, client):
        responses.add(responses.GET, "https://embed.example.com/openapi.json", json=SPEC)

        response = client.post("/detect", json={"url": "https://embed.example.com/openapi.json"})

        assert response.status_code == 200
        data = response.json()
        assert data["detected"] is True
        assert data["name"] == "Embeddings API"
        assert data["suggestedCategorySlug"] == "embeddings"
        assert data["endpoints"] == [
            {"path": "/embed", "method": "POST", "summary": "Embed text", "requestSchema": None}
        ]
        assert data["warnings"] == []

    @responses.activate
    def test_fallback_is_still_200(self, client):
        responses.add(
            responses.GET,
            "https://plain.example.com/",
            body="<html><title>Plain</title></html>",
            content_type="text/html",
        )

        response = client.post("/detect", json={"url": "https://plain.example.com/"})

        assert response.status_code == 200
        data = response.json()
        assert data["detected"] is False
        assert data["name"] == "Plain"
        assert data["warnings"][0].startswith("No OpenAPI spec found")


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok", "version": __version__}


class TestAppConstruction:
    def test_import_does_not_load_settings(self, monkeypatch):
        monkeypatch.setenv("SPECSCOUT_DISCOVERY_TIMEOUT", "soon")

        reloaded = importlib.reload(server)

        assert not hasattr(reloaded, "app")

    def test_factory_reports_bad_settings(self, monkeypatch):
        monkeypatch.setenv("SPECSCOUT_DISCOVERY_TIMEOUT", "soon")

        with pytest.raises(ConfigError):
            server.create_app()
