"""Integration tests for /health, /healthz and /metrics endpoints."""

from unittest.mock import MagicMock, patch

import pytest
from fastapi.testclient import TestClient
from pydantic import SecretStr

from backend.app.main import app


@pytest.fixture
def client() -> TestClient:
    """Create test client."""
    return TestClient(app)


class TestHealthEndpoint:
    """Test /health and /healthz endpoints."""

    def test_health_always_ok(self, client: TestClient) -> None:
        """Test /health returns 200."""
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "ok"}

    def test_healthz_reports_stub_without_key(self, client: TestClient) -> None:
        """Test /healthz reports the stub client when no key is set."""
        response = client.get("/healthz")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "ok"
        assert data["components"]["llm"] == "stub"
        assert data["components"]["model"] == "gemini-3-pro-preview"

    @patch("backend.app.api.routes.health.get_settings")
    def test_healthz_reports_configured_key(
        self,
        mock_get_settings: MagicMock,
        client: TestClient,
    ) -> None:
        """Test /healthz reports a configured key without exposing it."""
        mock_get_settings.return_value.gemini_api_key = SecretStr("secret-key")
        mock_get_settings.return_value.gemini_model = "gemini-test"

        response = client.get("/healthz")

        assert response.status_code == 200
        assert response.json()["components"]["llm"] == "configured"
        assert "secret-key" not in response.text


class TestMetricsEndpoint:
    """Test /metrics endpoint."""

    def test_metrics_returns_prometheus_format(self, client: TestClient) -> None:
        """Test /metrics returns Prometheus text format."""
        response = client.get("/metrics")

        assert response.status_code == 200
        assert "text/plain" in response.headers["content-type"]

    def test_metrics_includes_llm_metrics(self, client: TestClient) -> None:
        """Test /metrics exposes the LLM metric families."""
        response = client.get("/metrics")

        content = response.text
        assert "llm_latency_ms" in content
        assert "llm_errors_total" in content
        assert "recommendations_placeholder_total" in content
