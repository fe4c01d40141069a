"""Integration tests: index, health, unmatched routes and uncaught errors."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from letter_api.chat.router import get_chat_service
from letter_api.core.settings import get_settings
from letter_api.main import create_app

_ROUTES = [
    "GET /",
    "GET /health",
    "GET /metrics",
    "POST /chatWithAi",
    "POST /generateLetter",
]


class _ExplodingChatService:
    async def chat(self, messages, *, request_id=None) -> str:
        raise RuntimeError("kaboom")


def test_index_lists_endpoints(client: TestClient) -> None:
    res = client.get("/")

    assert res.status_code == 200
    assert res.json() == {
        "message": "Letter API is running",
        "status": "ok",
        "endpoints": _ROUTES,
    }


def test_index_uses_service_name(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SERVICE_NAME", "Postmaster")
    get_settings.cache_clear()

    with TestClient(create_app()) as client:
        res = client.get("/")

    assert res.json()["message"] == "Postmaster is running"


def test_health_ok(client: TestClient) -> None:
    res = client.get("/health")
    assert res.status_code == 200
    assert res.json() == {"status": "ok"}


def test_metrics_exposed(client: TestClient) -> None:
    client.get("/health")

    res = client.get("/metrics")

    assert res.status_code == 200
    assert "http_requests_total" in res.text


@pytest.mark.parametrize(("method", "path"), [("GET", "/nope"), ("GET", "/chatWithAi")])
def test_unmatched_route_returns_404(
    client: TestClient, method: str, path: str
) -> None:
    res = client.request(method, path)

    assert res.status_code == 404
    assert res.json() == {
        "error": "Route not found",
        "success": False,
        "available_routes": _ROUTES,
    }


def _exploding_app():
    app = create_app()
    app.dependency_overrides[get_chat_service] = lambda: _ExplodingChatService()
    return app


def test_uncaught_error_returns_generic_500() -> None:
    with TestClient(_exploding_app(), raise_server_exceptions=False) as client:
        res = client.post("/chatWithAi", json={"messages": [{"role": "user", "content": "Hi"}]})

    assert res.status_code == 500
    assert res.json() == {"success": False, "error": "Something went wrong"}


def test_uncaught_error_details_in_development(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("APP_ENV", "development")
    get_settings.cache_clear()

    with TestClient(_exploding_app(), raise_server_exceptions=False) as client:
        res = client.post("/chatWithAi", json={"messages": [{"role": "user", "content": "Hi"}]})

    assert res.status_code == 500
    assert res.json()["details"] == "kaboom"


def test_cors_preflight_is_answered(client: TestClient) -> None:
    res = client.options(
        "/chatWithAi",
        headers={
            "Origin": "http://localhost:5173",
            "Access-Control-Request-Method": "POST",
        },
    )

    assert res.status_code == 200
    assert res.headers["access-control-allow-origin"] == "*"
