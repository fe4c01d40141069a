from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Depends, Request

from letter_api.api.body import read_json_object
from letter_api.api.envelope import success_envelope
from letter_api.api.schemas import ResponseEnvelope
from letter_api.chat.router import get_chat_service
from letter_api.chat.service import ChatService
from letter_api.core.middleware.http_logging import get_request_id
from letter_api.core.settings import get_settings
from letter_api.domain.validators import validate_letter_request
from letter_api.letters.gateway import ChatGateway, HttpChatGateway, LocalChatGateway
from letter_api.letters.service import LetterService

router = APIRouter(tags=["letters"])
logger = logging.getLogger("letter_api.letters")


def get_chat_gateway(chat_service: ChatService = Depends(get_chat_service)) -> ChatGateway:
    """Pick the letter -> chat transport from configuration."""

    settings = get_settings()
    if settings.letter_chat_transport == "local":
        return LocalChatGateway(
            chat_service=chat_service, timeout_seconds=settings.letter_chat_timeout_seconds
        )
    return HttpChatGateway(
        base_url=settings.resolved_chat_service_url,
        timeout_seconds=settings.letter_chat_timeout_seconds,
    )


def get_letter_service(chat_gateway: ChatGateway = Depends(get_chat_gateway)) -> LetterService:
    return LetterService(chat_gateway=chat_gateway)


@router.post(
    "/generateLetter",
    response_model=ResponseEnvelope,
    response_model_exclude_none=True,
    summary="Generate a letter",
    description=(
        "Build a letter prompt from `LetterRecipientName`, `LetterOccasion` and the optional "
        "`LetterTone` (default `friendly`) and `LetterStyle` (default `formal`), then ask the "
        "chat endpoint for the letter text."
    ),
)
async def generate_letter(
    request: Request,
    payload: dict[str, Any] = Depends(read_json_object),
    service: LetterService = Depends(get_letter_service),
) -> ResponseEnvelope:
    letter_request = validate_letter_request(payload)
    request_id = get_request_id(request)

    letter = await service.generate_letter(letter_request, request_id=request_id)

    logger.info(
        "Letter generated",
        extra={"request_id": request_id, "operation": "letter", "success": True},
    )
    return success_envelope(message="Letter generated successfully", data=letter)
