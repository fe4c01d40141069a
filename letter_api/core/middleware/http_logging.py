"""HTTP logging middleware.

Design goals:
- Log *metadata only*: chat messages and generated letters never reach the logs.
- Generate or propagate X-Request-ID so a letter request and its chat self-call
  can be correlated.
- Structured logging using the standard library logger `extra` fields.
"""

from __future__ import annotations

import logging
import re
import time
import uuid

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response

logger = logging.getLogger("letter_api.http")

REQUEST_ID_HEADER = "X-Request-ID"
_SAFE_REQUEST_ID_PATTERN = re.compile(r"^[A-Za-z0-9][A-Za-z0-9._-]{0,127}$")


def _get_or_create_request_id(*, request: Request) -> str:
    """Return a safe request id, either propagated or newly generated.

    Only a narrow character set and length is accepted to avoid log injection.
    Anything else is replaced by a new UUID4.
    """

    candidate = request.headers.get(REQUEST_ID_HEADER)
    if candidate and _SAFE_REQUEST_ID_PATTERN.fullmatch(candidate):
        return candidate
    return uuid.uuid4().hex


def get_request_id(request: Request) -> str | None:
    """Request id assigned by the middleware, if it ran for this request."""
    return getattr(request.state, "request_id", None)


def _safe_route_label(*, request: Request) -> str:
    route = request.scope.get("route")
    path = getattr(route, "path", None)
    if isinstance(path, str) and path:
        return path
    return "unmatched"


class HttpLoggingMiddleware(BaseHTTPMiddleware):
    """Log request/response metadata and propagate a correlation id.

    Request/response bodies and headers are never logged.
    """

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request_id = _get_or_create_request_id(request=request)
        started = time.perf_counter()
        request.state.request_id = request_id

        try:
            response = await call_next(request)
        except Exception:  # noqa: BLE001 - we must log unexpected exceptions with stack trace
            duration_ms = (time.perf_counter() - started) * 1000.0
            logger.exception(
                "Unhandled exception while processing request",
                extra={
                    "request_id": request_id,
                    "http_method": request.method,
                    "request_path": _safe_route_label(request=request),
                    "status_code": 500,
                    "duration_ms": round(duration_ms, 2),
                },
            )
            raise

        duration_ms = (time.perf_counter() - started) * 1000.0
        response.headers[REQUEST_ID_HEADER] = request_id

        logger.info(
            "Request completed",
            extra={
                "request_id": request_id,
                "http_method": request.method,
                "request_path": _safe_route_label(request=request),
                "status_code": response.status_code,
                "duration_ms": round(duration_ms, 2),
            },
        )
        return response
