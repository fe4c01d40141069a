from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import httpx


class OpenAIError(Exception):
    """Base error for OpenAI client failures."""


class OpenAIUpstreamError(OpenAIError):
    """Raised when the OpenAI API fails or returns an unexpected response.

    `upstream_message` holds the provider's own error text (diagnostics only).
    """

    def __init__(
        self,
        message: str,
        *,
        upstream_message: str | None = None,
        status_code: int | None = None,
    ):
        super().__init__(message)
        self.upstream_message = upstream_message
        self.status_code = status_code


class OpenAITimeoutError(OpenAIUpstreamError):
    """Raised when the OpenAI API does not answer within the configured timeout."""


@dataclass(frozen=True)
class OpenAIConfig:
    api_key: str
    base_url: str
    model: str
    timeout_seconds: float


def _extract_upstream_message(resp: httpx.Response) -> str:
    try:
        body = resp.json()
    except ValueError:
        return resp.text[:500]
    error = body.get("error") if isinstance(body, dict) else None
    if isinstance(error, dict) and isinstance(error.get("message"), str):
        return error["message"]
    return resp.text[:500]


class OpenAIClient:
    """
    Minimal chat-completions client.

    Design notes:
    - No logging in this module (messages/outputs may contain personal data).
    - One completion per request (n=1), fixed model from configuration.
    - Returns the text of every returned choice; callers decide which to use.
    """

    def __init__(self, *, config: OpenAIConfig, transport: httpx.AsyncBaseTransport | None = None):
        self._config = config
        self._transport = transport

    @property
    def model(self) -> str:
        return self._config.model

    async def complete(self, *, messages: list[dict[str, Any]]) -> list[str | None]:
        url = f"{self._config.base_url.rstrip('/')}/chat/completions"
        headers = {
            "Authorization": f"Bearer {self._config.api_key}",
            "Content-Type": "application/json",
        }
        payload: dict[str, Any] = {
            "model": self._config.model,
            "messages": messages,
            "n": 1,
        }

        try:
            async with httpx.AsyncClient(
                timeout=self._config.timeout_seconds, transport=self._transport
            ) as client:
                resp = await client.post(url, headers=headers, json=payload)
        except httpx.TimeoutException as exc:
            raise OpenAITimeoutError("LLM request timed out", upstream_message=str(exc)) from exc
        except httpx.HTTPError as exc:
            raise OpenAIUpstreamError("LLM request failed", upstream_message=str(exc)) from exc

        if resp.status_code != 200:
            raise OpenAIUpstreamError(
                "LLM service returned an error",
                upstream_message=_extract_upstream_message(resp),
                status_code=resp.status_code,
            )

        try:
            data = resp.json()
            choices = data.get("choices") or []
            texts: list[str | None] = []
            for choice in choices:
                content = (choice.get("message") or {}).get("content")
                texts.append(content if isinstance(content, str) else None)
        except Exception as exc:  # noqa: BLE001
            raise OpenAIUpstreamError(
                "LLM response was not valid JSON", upstream_message=resp.text[:500]
            ) from exc

        return texts
