from __future__ import annotations

from datetime import UTC, datetime

from fastapi.responses import JSONResponse

from letter_api.api.schemas import ResponseEnvelope

# Advertised by `GET /` and by the 404 body.
AVAILABLE_ROUTES: list[str] = [
    "GET /",
    "GET /health",
    "GET /metrics",
    "POST /chatWithAi",
    "POST /generateLetter",
]


def success_envelope(*, message: str, data: str) -> ResponseEnvelope:
    return ResponseEnvelope(
        success=True,
        message=message,
        data=data,
        timestamp=datetime.now(UTC).isoformat(),
    )


def error_response(
    *,
    status_code: int,
    error: str,
    details: str | None = None,
    include_details: bool = False,
) -> JSONResponse:
    """Build a failure envelope; `details` is dropped unless `include_details` is set."""

    envelope = ResponseEnvelope(
        success=False,
        error=error,
        details=details if include_details else None,
    )
    return JSONResponse(status_code=status_code, content=envelope.model_dump(exclude_none=True))
