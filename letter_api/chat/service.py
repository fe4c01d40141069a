from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any, Protocol

from letter_api.core.llm.openai_client import OpenAITimeoutError, OpenAIUpstreamError
from letter_api.core.metrics import record_llm_operation
from letter_api.domain.exceptions import (
    EmptyUpstreamResponseError,
    ServiceError,
    UpstreamError,
    UpstreamTimeoutError,
)
from letter_api.domain.models import Message

logger = logging.getLogger("letter_api.chat")


class CompletionClient(Protocol):
    async def complete(self, *, messages: list[dict[str, Any]]) -> list[str | None]: ...


class ChatService:
    """Send a validated conversation upstream and return the first completion text."""

    def __init__(self, *, completion_client: CompletionClient):
        self._client = completion_client

    async def chat(self, messages: Sequence[Message], *, request_id: str | None = None) -> str:
        try:
            text = await self._complete(messages)
        except ServiceError as exc:
            logger.warning(
                "Chat completion failed",
                extra={
                    "request_id": request_id,
                    "operation": "chat",
                    "error_kind": exc.kind.value,
                },
            )
            record_llm_operation(operation="chat", outcome=exc.kind.value)
            raise

        record_llm_operation(operation="chat", outcome="success")
        return text

    async def _complete(self, messages: Sequence[Message]) -> str:
        try:
            choices = await self._client.complete(messages=[m.to_provider() for m in messages])
        except OpenAITimeoutError as exc:
            raise UpstreamTimeoutError(
                "AI service timed out", details=exc.upstream_message
            ) from exc
        except OpenAIUpstreamError as exc:
            raise UpstreamError(
                "Failed to get response from AI", details=exc.upstream_message or str(exc)
            ) from exc

        # Single-best-completion semantics: later choices are discarded.
        if not choices or not choices[0]:
            raise EmptyUpstreamResponseError("No response from AI")
        return choices[0]
