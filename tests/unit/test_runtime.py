"""Unit tests for the hookwarden.runtime module."""

from __future__ import annotations

from http import HTTPStatus

import falcon.asgi
import falcon.testing
import pytest

from hookwarden.api.app import SYNC_ROUTE
from hookwarden.runtime import _parse_port, create_app


@pytest.fixture
def health_only_client(monkeypatch: pytest.MonkeyPatch) -> falcon.testing.TestClient:
    """Create a test client for a runtime without an admin token."""
    monkeypatch.delenv("HOOKWARDEN_ADMIN_TOKEN", raising=False)
    return falcon.testing.TestClient(create_app())


class TestHealthEndpoints:
    """Tests for the probe endpoints."""

    def test_health_returns_service_status(
        self, health_only_client: falcon.testing.TestClient
    ) -> None:
        """GET /health returns JSON naming the service."""
        result = health_only_client.simulate_get("/health")
        assert result.status_code == HTTPStatus.OK
        assert result.json == {"status": "ok", "service": "hookwarden"}
        assert result.headers.get("content-type", "").startswith("application/json")

    def test_ready_returns_ready(
        self, health_only_client: falcon.testing.TestClient
    ) -> None:
        """GET /ready returns JSON with status ready."""
        result = health_only_client.simulate_get("/ready")
        assert result.status_code == HTTPStatus.OK
        assert result.json == {"status": "ready"}


class TestCreateApp:
    """Tests for the create_app factory function."""

    def test_create_app_returns_falcon_app(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """create_app returns a Falcon ASGI App instance."""
        monkeypatch.delenv("HOOKWARDEN_ADMIN_TOKEN", raising=False)
        assert isinstance(create_app(), falcon.asgi.App)

    def test_without_admin_token_sync_route_is_absent(
        self, health_only_client: falcon.testing.TestClient
    ) -> None:
        """Health-only mode does not expose the sync endpoint."""
        result = health_only_client.simulate_post(SYNC_ROUTE)
        assert result.status_code == HTTPStatus.NOT_FOUND

    def test_with_admin_token_sync_route_is_protected(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Setting an admin token registers the authenticated endpoint."""
        monkeypatch.setenv("HOOKWARDEN_ADMIN_TOKEN", "admin-secret")
        client = falcon.testing.TestClient(create_app())

        result = client.simulate_post(SYNC_ROUTE)

        assert result.status_code == HTTPStatus.UNAUTHORIZED

    def test_with_admin_token_missing_settings_return_400(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """An authenticated call without GitHub settings is a 400."""
        monkeypatch.setenv("HOOKWARDEN_ADMIN_TOKEN", "admin-secret")
        monkeypatch.delenv("HOOKWARDEN_GITHUB_TOKEN", raising=False)
        monkeypatch.delenv("HOOKWARDEN_WEBHOOK_URL", raising=False)
        client = falcon.testing.TestClient(create_app())

        result = client.simulate_post(
            SYNC_ROUTE, headers={"Authorization": "Bearer admin-secret"}
        )

        assert result.status_code == HTTPStatus.BAD_REQUEST
        assert result.json["status"] == "error"


class TestParsePort:
    """Tests for HOOKWARDEN_PORT validation."""

    @pytest.mark.parametrize(("raw", "expected"), [("1", 1), ("8080", 8080), ("65535", 65535)])
    def test_accepts_valid_ports(self, raw: str, expected: int) -> None:
        """Ports within range are returned as integers."""
        assert _parse_port(raw) == expected

    @pytest.mark.parametrize("raw", ["0", "65536", "http", ""])
    def test_rejects_invalid_ports(self, raw: str) -> None:
        """Invalid ports exit with status 1."""
        with pytest.raises(SystemExit) as exc:
            _parse_port(raw)
        assert exc.value.code == 1
