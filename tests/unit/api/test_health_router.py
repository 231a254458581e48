"""Tests for the health probes."""

from fastapi.testclient import TestClient

from tunebridge.main import create_app


class TestHealthRouter:
    def test_liveness(self) -> None:
        response = TestClient(create_app()).get("/health/live")

        assert response.status_code == 200
        assert response.json()["status"] == "alive"
        assert response.json()["timestamp"]

    def test_readiness_before_startup(self) -> None:
        """Without the lifespan running the app isn't ready yet."""
        response = TestClient(create_app()).get("/health/ready")

        assert response.status_code == 503
        assert response.json()["status"] == "not_ready"

    def test_readiness_after_startup(self, monkeypatch) -> None:
        monkeypatch.setenv("SPOTIFY_ENRICHMENT_STRATEGY", "preview")

        with TestClient(create_app()) as client:
            response = client.get("/health/ready")

        body = response.json()
        assert response.status_code == 200
        assert body["status"] == "ready"
        assert body["enrichment_strategy"] == "preview"
        assert body["http_pool"] is False
