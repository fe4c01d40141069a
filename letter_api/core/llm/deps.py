from __future__ import annotations

from fastapi import Request

from letter_api.core.llm.openai_client import OpenAIClient, OpenAIConfig
from letter_api.core.settings import Settings


def build_openai_client(settings: Settings) -> OpenAIClient:
    """Construct the single completion client from configured credentials."""

    config = OpenAIConfig(
        api_key=settings.openai_api_key,
        base_url=settings.openai_base_url,
        model=settings.openai_model,
        timeout_seconds=float(settings.openai_timeout_seconds),
    )
    return OpenAIClient(config=config)


def get_openai_client(request: Request) -> OpenAIClient:
    """
    Dependency provider for OpenAIClient.

    The client is built once during application startup and stored on app.state;
    it is read-only afterwards. Tests replace this provider via dependency_overrides.
    """

    return request.app.state.openai_client
