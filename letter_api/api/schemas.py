from __future__ import annotations

from pydantic import BaseModel, Field


class HealthOut(BaseModel):
    """Health check response."""

    status: str = Field(
        description="Service status indicator. `ok` means the API process is up and responding.",
        examples=["ok"],
    )


class IndexOut(BaseModel):
    """Service banner returned by `GET /`."""

    message: str = Field(examples=["Letter API is running"])
    status: str = Field(examples=["ok"])
    endpoints: list[str] = Field(
        description="Routes exposed by this service, as `METHOD /path`.",
        examples=[["GET /", "POST /chatWithAi", "POST /generateLetter"]],
    )


class ResponseEnvelope(BaseModel):
    """
    Uniform wrapper returned by the chat and letter routes.

    Success bodies carry `message`, `data` and `timestamp`; failure bodies carry
    `error` (and `details` in development mode). Unset fields are omitted.
    """

    success: bool
    message: str | None = Field(default=None, examples=["Chat with AI successful"])
    data: str | None = Field(default=None, description="Generated text.")
    timestamp: str | None = Field(default=None, description="ISO-8601 UTC timestamp.")
    error: str | None = None
    details: str | None = Field(
        default=None, description="Diagnostic detail (development mode only)."
    )


class RouteNotFoundOut(BaseModel):
    error: str = Field(examples=["Route not found"])
    success: bool = False
    available_routes: list[str]
