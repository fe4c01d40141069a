"""Integration tests: POST /chatWithAi."""

from __future__ import annotations

from datetime import datetime

import pytest
from starlette.testclient import TestClient

from letter_api.core.llm.openai_client import OpenAITimeoutError, OpenAIUpstreamError
from letter_api.core.settings import get_settings
from tests._fakes import FakeCompletionClient

_MESSAGES = [{"role": "user", "content": "Say hello"}]


def test_chat_success_envelope(client: TestClient, fake_llm: FakeCompletionClient) -> None:
    res = client.post("/chatWithAi", json={"messages": _MESSAGES})

    assert res.status_code == 200, res.text
    assert "X-Request-ID" in res.headers
    body = res.json()
    assert body["success"] is True
    assert body["message"] == "Chat with AI successful"
    assert body["data"] == "Hello"
    assert datetime.fromisoformat(body["timestamp"]).tzinfo is not None
    assert "error" not in body
    assert "details" not in body
    assert fake_llm.calls == [_MESSAGES]


@pytest.mark.parametrize("payload", [{}, {"messages": []}, {"messages": "hello"}])
def test_missing_messages_returns_400(
    client: TestClient, fake_llm: FakeCompletionClient, payload: dict
) -> None:
    res = client.post("/chatWithAi", json=payload)

    assert res.status_code == 400
    assert res.json() == {"success": False, "error": "Messages array is required"}
    # Validation happens before any upstream call.
    assert fake_llm.calls == []


def test_message_without_content_returns_400(
    client: TestClient, fake_llm: FakeCompletionClient
) -> None:
    res = client.post("/chatWithAi", json={"messages": [{"role": "user"}]})

    assert res.status_code == 400
    body = res.json()
    assert body["success"] is False
    assert "content" in body["error"]
    assert fake_llm.calls == []


def test_malformed_json_returns_400(client: TestClient) -> None:
    res = client.post(
        "/chatWithAi",
        content=b'{"messages": [',
        headers={"Content-Type": "application/json"},
    )

    assert res.status_code == 400
    assert res.json() == {"success": False, "error": "Invalid JSON"}


def test_non_object_json_body_returns_400(client: TestClient) -> None:
    res = client.post("/chatWithAi", json=_MESSAGES)

    assert res.status_code == 400
    assert res.json()["error"] == "Invalid JSON"


def test_empty_upstream_response_returns_500(
    client: TestClient, fake_llm: FakeCompletionClient
) -> None:
    fake_llm.choices = []

    res = client.post("/chatWithAi", json={"messages": _MESSAGES})

    assert res.status_code == 500
    assert res.json() == {"success": False, "error": "No response from AI"}


def test_upstream_error_hides_details_outside_development(
    client: TestClient, fake_llm: FakeCompletionClient
) -> None:
    fake_llm.error = OpenAIUpstreamError("LLM failed", upstream_message="Incorrect API key")

    res = client.post("/chatWithAi", json={"messages": _MESSAGES})

    assert res.status_code == 500
    assert res.json() == {"success": False, "error": "Failed to get response from AI"}


def test_upstream_error_includes_details_in_development(
    client: TestClient, fake_llm: FakeCompletionClient, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("APP_ENV", "development")
    get_settings.cache_clear()
    fake_llm.error = OpenAIUpstreamError("LLM failed", upstream_message="Incorrect API key")

    res = client.post("/chatWithAi", json={"messages": _MESSAGES})

    assert res.status_code == 500
    assert res.json()["details"] == "Incorrect API key"


def test_upstream_timeout_returns_504(
    client: TestClient, fake_llm: FakeCompletionClient
) -> None:
    fake_llm.error = OpenAITimeoutError("LLM request timed out")

    res = client.post("/chatWithAi", json={"messages": _MESSAGES})

    assert res.status_code == 504
    assert res.json()["success"] is False
    assert len(fake_llm.calls) == 1
