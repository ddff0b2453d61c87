"""
tests/api/test_health.py

Smoke tests for the /health endpoint and the application wiring.
"""

from fastapi.testclient import TestClient

from custom_validation.core.config import settings


class TestHealth:
    """Tests for GET /health."""

    def test_health_returns_200(self, client: TestClient) -> None:
        response = client.get("/health")
        assert response.status_code == 200

    def test_health_reports_configured_version(self, client: TestClient) -> None:
        """'version' must come from settings, 'status' must be 'ok'."""
        body = client.get("/health").json()
        assert body == {"status": "ok", "version": settings.app_version}

    def test_validation_routes_are_registered(self, client: TestClient) -> None:
        """Checked through the public OpenAPI schema, not router internals."""
        paths = set(client.app.openapi()["paths"])
        assert {"/validate/file", "/validate/min-age"} <= paths
