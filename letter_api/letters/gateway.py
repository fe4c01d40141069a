"""How letter generation reaches the chat capability.

`HttpChatGateway` calls this service's own `POST /chatWithAi` over the network,
exactly like a remote client would. `LocalChatGateway` calls `ChatService`
in-process. Both make a single attempt bounded by a timeout.
"""

from __future__ import annotations

import asyncio
from collections.abc import Sequence
from typing import Any, Protocol

import httpx

from letter_api.chat.service import ChatService
from letter_api.core.middleware.http_logging import REQUEST_ID_HEADER
from letter_api.domain.exceptions import (
    EmptyUpstreamResponseError,
    ServiceError,
    UpstreamError,
    UpstreamTimeoutError,
    UpstreamUnavailableError,
)
from letter_api.domain.models import Message

CHAT_PATH = "/chatWithAi"


class ChatGateway(Protocol):
    async def chat(self, messages: Sequence[Message], *, request_id: str | None = None) -> str: ...


def _error_for_status(status_code: int, error: str | None) -> ServiceError:
    details = error or f"Chat endpoint returned HTTP {status_code}"
    if status_code == 503:
        return UpstreamUnavailableError("AI service unavailable", details=details)
    if status_code == 504:
        return UpstreamTimeoutError("AI service timed out", details=details)
    return UpstreamError("Failed to generate letter", details=details)


class HttpChatGateway:
    def __init__(
        self,
        *,
        base_url: str,
        timeout_seconds: float,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._url = f"{base_url.rstrip('/')}{CHAT_PATH}"
        self._timeout_seconds = timeout_seconds
        self._transport = transport

    async def chat(self, messages: Sequence[Message], *, request_id: str | None = None) -> str:
        headers = {REQUEST_ID_HEADER: request_id} if request_id else {}
        payload = {"messages": [m.to_provider() for m in messages]}

        try:
            async with httpx.AsyncClient(
                timeout=self._timeout_seconds, transport=self._transport
            ) as client:
                # httpx timeouts apply per connect/read step; the deadline covers the whole call.
                resp = await asyncio.wait_for(
                    client.post(self._url, json=payload, headers=headers),
                    timeout=self._timeout_seconds,
                )
        except (TimeoutError, httpx.TimeoutException) as exc:
            raise UpstreamTimeoutError(
                "Letter generation timed out", details=f"No answer from {self._url}: {exc}"
            ) from exc
        except httpx.ConnectError as exc:
            raise UpstreamUnavailableError(
                "AI service unavailable", details=f"Cannot connect to {self._url}: {exc}"
            ) from exc
        except httpx.HTTPError as exc:
            raise UpstreamError("Failed to generate letter", details=str(exc)) from exc

        try:
            body: Any = resp.json()
        except ValueError as exc:
            raise UpstreamError(
                "Failed to generate letter", details="Chat endpoint returned non-JSON body"
            ) from exc
        if not isinstance(body, dict):
            raise UpstreamError(
                "Failed to generate letter", details="Chat endpoint returned unexpected body"
            )

        if resp.status_code >= 400 or body.get("success") is not True:
            error = body.get("error")
            raise _error_for_status(resp.status_code, error if isinstance(error, str) else None)

        data = body.get("data")
        if not isinstance(data, str) or not data:
            raise EmptyUpstreamResponseError("No response from AI")
        return data


class LocalChatGateway:
    def __init__(self, *, chat_service: ChatService, timeout_seconds: float):
        self._chat_service = chat_service
        self._timeout_seconds = timeout_seconds

    async def chat(self, messages: Sequence[Message], *, request_id: str | None = None) -> str:
        try:
            return await asyncio.wait_for(
                self._chat_service.chat(messages, request_id=request_id),
                timeout=self._timeout_seconds,
            )
        except TimeoutError as exc:
            raise UpstreamTimeoutError(
                "Letter generation timed out",
                details=f"No answer from chat service within {self._timeout_seconds}s",
            ) from exc
