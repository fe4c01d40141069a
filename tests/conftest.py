from __future__ import annotations

from collections.abc import Iterator

import httpx
import pytest
from fastapi.testclient import TestClient

from letter_api.core.llm.deps import get_openai_client
from letter_api.core.settings import get_settings
from letter_api.letters.gateway import HttpChatGateway
from letter_api.letters.router import get_chat_gateway
from letter_api.main import create_app
from tests._fakes import FakeCompletionClient


@pytest.fixture(autouse=True)
def _set_test_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    monkeypatch.setenv("OPENAI_API_KEY", "test-key")
    for name in (
        "APP_ENV",
        "HOST",
        "PORT",
        "OPENAI_MODEL",
        "SERVICE_NAME",
        "CHAT_SERVICE_URL",
        "LETTER_CHAT_TRANSPORT",
        "LETTER_CHAT_TIMEOUT_SECONDS",
        "CORS_ALLOW_ORIGINS",
    ):
        monkeypatch.delenv(name, raising=False)
    # Settings are cached via @lru_cache; clear so each test sees its own environment.
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def fake_llm() -> FakeCompletionClient:
    return FakeCompletionClient(choices=["Hello"])


@pytest.fixture
def client(fake_llm: FakeCompletionClient):
    app = create_app()
    app.dependency_overrides[get_openai_client] = lambda: fake_llm
    with TestClient(app) as c:
        yield c


@pytest.fixture
def self_call_client(fake_llm: FakeCompletionClient):
    """Client whose letter route reaches /chatWithAi over HTTP, served by the same app."""

    app = create_app()
    app.dependency_overrides[get_openai_client] = lambda: fake_llm
    app.dependency_overrides[get_chat_gateway] = lambda: HttpChatGateway(
        base_url="http://testserver",
        timeout_seconds=30.0,
        transport=httpx.ASGITransport(app=app),
    )
    with TestClient(app) as c:
        yield c
