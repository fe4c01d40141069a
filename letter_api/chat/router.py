from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Depends, Request

from letter_api.api.body import read_json_object
from letter_api.api.envelope import success_envelope
from letter_api.api.schemas import ResponseEnvelope
from letter_api.chat.service import ChatService
from letter_api.core.llm.deps import get_openai_client
from letter_api.core.llm.openai_client import OpenAIClient
from letter_api.core.middleware.http_logging import get_request_id
from letter_api.domain.validators import validate_chat_messages

router = APIRouter(tags=["chat"])
logger = logging.getLogger("letter_api.chat")


def get_chat_service(openai_client: OpenAIClient = Depends(get_openai_client)) -> ChatService:
    return ChatService(completion_client=openai_client)


@router.post(
    "/chatWithAi",
    response_model=ResponseEnvelope,
    response_model_exclude_none=True,
    summary="Chat with the AI",
    description=(
        "Forward an ordered list of `{role, content}` messages to the completion provider "
        "and return the text of the first completion."
    ),
)
async def chat_with_ai(
    request: Request,
    payload: dict[str, Any] = Depends(read_json_object),
    service: ChatService = Depends(get_chat_service),
) -> ResponseEnvelope:
    messages = validate_chat_messages(payload.get("messages"))
    request_id = get_request_id(request)

    text = await service.chat(messages, request_id=request_id)

    logger.info(
        "Chat completion generated",
        extra={"request_id": request_id, "operation": "chat", "success": True},
    )
    return success_envelope(message="Chat with AI successful", data=text)
