"""Tests for the health check and root endpoints."""

from __future__ import annotations

from fastapi.testclient import TestClient

from main import app


class TestHealthCheck:
    """Tests for basic health check endpoint."""

    def test_health_check_returns_success(self) -> None:
        """Test basic health check returns healthy status."""
        client = TestClient(app)
        response = client.get("/api/v1/health")

        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["data"]["status"] == "healthy"
        assert "Service Copilot" in data["data"]["message"]
        assert data["message"] == "Health check successful"

    def test_health_check_reports_configured_generation(self) -> None:
        client = TestClient(app)
        response = client.get("/api/v1/health")

        assert response.json()["data"]["generation"] == "configured"

    def test_health_check_reports_fallback_only_without_key(self, monkeypatch) -> None:
        """Without a provider key every draft comes from the templates."""
        monkeypatch.delenv("GEMINI_API_KEY", raising=False)

        client = TestClient(app)
        response = client.get("/api/v1/health")

        assert response.status_code == 200
        assert response.json()["data"]["generation"] == "fallback-only"

    def test_health_check_response_structure(self) -> None:
        """Test health check response matches ApiResponse schema."""
        client = TestClient(app)
        response = client.get("/api/v1/health")

        data = response.json()
        assert set(data) >= {"success", "data", "message"}
        assert isinstance(data["data"], dict)


def test_read_root(client: TestClient) -> None:
    """Test the root endpoint names the service."""
    response = client.get("/")
    assert response.status_code == 200
    assert response.json() == {"message": "Service Copilot API"}
