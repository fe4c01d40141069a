from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from letter_api.api.envelope import AVAILABLE_ROUTES, error_response
from letter_api.api.schemas import RouteNotFoundOut
from letter_api.core.middleware.http_logging import get_request_id
from letter_api.core.settings import get_settings
from letter_api.domain.exceptions import InvalidJSONError, ServiceError, ValidationError

logger = logging.getLogger("letter_api.errors")


def _include_details() -> bool:
    return get_settings().is_development


def register_exception_handlers(app: FastAPI) -> None:
    """Register application exception handlers.

    Every failure leaves the service as a `ResponseEnvelope`-shaped body.
    """

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError) -> JSONResponse:
        # Do not log request bodies: messages may contain personal data.
        logger.info(
            "Request validation failed",
            extra={
                "request_id": get_request_id(request),
                "http_method": request.method,
                "request_path": request.url.path,
                "status_code": exc.status_code,
                "error_kind": exc.kind.value,
            },
        )
        return error_response(status_code=exc.status_code, error=exc.message)

    @app.exception_handler(InvalidJSONError)
    async def handle_invalid_json(request: Request, exc: InvalidJSONError) -> JSONResponse:
        return error_response(
            status_code=400,
            error="Invalid JSON",
            details=exc.details,
            include_details=_include_details(),
        )

    @app.exception_handler(ServiceError)
    async def handle_service_error(request: Request, exc: ServiceError) -> JSONResponse:
        return error_response(
            status_code=exc.status_code,
            error=exc.message,
            details=exc.details,
            include_details=_include_details(),
        )

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        # Wrong method on a known path is reported like any other unmatched route.
        if exc.status_code in (404, 405):
            body = RouteNotFoundOut(error="Route not found", available_routes=AVAILABLE_ROUTES)
            return JSONResponse(status_code=404, content=body.model_dump())
        return error_response(status_code=exc.status_code, error=str(exc.detail))

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
        # The HTTP logging middleware already logged the stack trace.
        return error_response(
            status_code=500,
            error="Something went wrong",
            details=str(exc),
            include_details=_include_details(),
        )
