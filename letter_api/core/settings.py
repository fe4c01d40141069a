from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

_WILDCARD_HOSTS = {"", "0.0.0.0", "::", "[::]"}


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = Field(
        default="Letter API",
        validation_alias=AliasChoices("SERVICE_NAME", "app_name"),
        description="Display name reported by the index route and OpenAPI docs.",
    )
    app_env: str = Field(
        default="production",
        validation_alias=AliasChoices("APP_ENV", "app_env"),
        description="Runtime environment: development|production.",
    )
    host: str = Field(
        default="0.0.0.0",
        validation_alias=AliasChoices("HOST", "host"),
        description="Interface the HTTP server binds to.",
    )
    port: int = Field(
        default=3500,
        ge=1,
        le=65535,
        validation_alias=AliasChoices("PORT", "port"),
        description="Port the HTTP server listens on.",
    )

    # LLM integration (OpenAI-compatible chat completions)
    # The key is required: the service refuses to start without it.
    openai_api_key: str = Field(
        min_length=1,
        validation_alias=AliasChoices("OPENAI_API_KEY", "openai_api_key"),
        description="OpenAI API key used for every completion request.",
    )
    openai_model: str = Field(
        default="gpt-4o-mini",
        validation_alias=AliasChoices("OPENAI_MODEL", "openai_model"),
        description="Model identifier used for all completions.",
    )
    openai_base_url: str = Field(
        default="https://api.openai.com/v1",
        validation_alias=AliasChoices("OPENAI_BASE_URL", "openai_base_url"),
        description="Base URL for OpenAI API (override for proxies/emulators).",
    )
    openai_timeout_seconds: float = Field(
        default=30.0,
        ge=1.0,
        validation_alias=AliasChoices("OPENAI_TIMEOUT_SECONDS", "openai_timeout_seconds"),
        description="Timeout for OpenAI API requests (seconds).",
    )

    # Letter generation -> chat hop
    chat_service_url: str | None = Field(
        default=None,
        validation_alias=AliasChoices("CHAT_SERVICE_URL", "chat_service_url"),
        description=(
            "Base URL of the chat endpoint used by letter generation. "
            "Defaults to this process on HOST:PORT, or 127.0.0.1 when HOST is a wildcard."
        ),
    )
    letter_chat_transport: Literal["http", "local"] = Field(
        default="http",
        validation_alias=AliasChoices("LETTER_CHAT_TRANSPORT", "letter_chat_transport"),
        description="`http` calls POST /chatWithAi over the network; `local` calls it in-process.",
    )
    letter_chat_timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        validation_alias=AliasChoices(
            "LETTER_CHAT_TIMEOUT_SECONDS", "letter_chat_timeout_seconds"
        ),
        description="Bound on the letter -> chat round trip (seconds).",
    )

    @property
    def is_development(self) -> bool:
        return str(self.app_env).strip().lower() == "development"

    @property
    def resolved_chat_service_url(self) -> str:
        if self.chat_service_url:
            return self.chat_service_url.rstrip("/")
        host = self.host.strip()
        # Wildcard binds are not dialable.
        if host in _WILDCARD_HOSTS:
            host = "127.0.0.1"
        elif ":" in host and not host.startswith("["):
            host = f"[{host}]"
        return f"http://{host}:{self.port}"


@lru_cache
def get_settings() -> Settings:
    return Settings()
