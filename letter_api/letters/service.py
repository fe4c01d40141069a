from __future__ import annotations

import logging

from letter_api.core.metrics import record_llm_operation
from letter_api.domain.exceptions import ServiceError
from letter_api.domain.models import LetterRequest
from letter_api.letters.gateway import ChatGateway
from letter_api.letters.prompt import build_letter_prompt

logger = logging.getLogger("letter_api.letters")


class LetterService:
    def __init__(self, *, chat_gateway: ChatGateway):
        self._chat = chat_gateway

    async def generate_letter(self, req: LetterRequest, *, request_id: str | None = None) -> str:
        """
        Generate a letter body for `req`.

        Exactly one user message is sent through the chat gateway and exactly one
        attempt is made; failures propagate as `ServiceError`.
        """

        prompt = build_letter_prompt(req)
        try:
            letter = await self._chat.chat([prompt], request_id=request_id)
        except ServiceError as exc:
            logger.warning(
                "Letter generation failed",
                extra={
                    "request_id": request_id,
                    "operation": "letter",
                    "error_kind": exc.kind.value,
                },
            )
            record_llm_operation(operation="letter", outcome=exc.kind.value)
            raise

        record_llm_operation(operation="letter", outcome="success")
        return letter
