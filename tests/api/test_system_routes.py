"""API tests for root and health endpoints."""

import pytest

from src.core.container import get_database


@pytest.mark.integration
class TestSystemRoutes:
    """Test system endpoints."""

    def test_root(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert response.json()["status"] == "operational"

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_trace_id_header(self, client):
        response = client.get("/health", headers={"X-Trace-Id": "trace-abc"})

        assert response.headers["x-trace-id"] == "trace-abc"

    def test_health_reports_database_down(self, client, monkeypatch):
        async def unavailable() -> bool:
            return False

        monkeypatch.setattr(get_database(), "check_connection", unavailable)

        response = client.get("/health")

        assert response.status_code == 503
