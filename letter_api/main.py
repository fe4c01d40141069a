from __future__ import annotations

import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from letter_api.api.envelope import AVAILABLE_ROUTES
from letter_api.api.exception_handlers import register_exception_handlers
from letter_api.api.schemas import HealthOut, IndexOut
from letter_api.chat.router import router as chat_router
from letter_api.core.llm.deps import build_openai_client
from letter_api.core.logging import setup_logging
from letter_api.core.metrics import PrometheusMetricsMiddleware, metrics_router
from letter_api.core.middleware.http_logging import HttpLoggingMiddleware
from letter_api.core.settings import get_settings
from letter_api.letters.router import router as letters_router

setup_logging()


def create_app() -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Settings are read at startup, not import: a missing OPENAI_API_KEY stops the
        # process here instead of failing every request later.
        settings = get_settings()
        app.title = settings.app_name
        app.state.openai_client = build_openai_client(settings)
        yield

    app = FastAPI(
        title="Letter API",
        description=(
            "Thin HTTP façade over an OpenAI-compatible chat-completion service.\n\n"
            "- `POST /chatWithAi` forwards a conversation and returns the first completion.\n"
            "- `POST /generateLetter` turns letter parameters into a prompt and asks the chat "
            "endpoint for the letter text.\n"
            "- Every response uses the same `{success, message, data, timestamp, error}` "
            "envelope."
        ),
        lifespan=lifespan,
        openapi_tags=[
            {"name": "health", "description": "Uptime checks for load balancers."},
            {"name": "chat", "description": "Free-form chat with the AI."},
            {"name": "letters", "description": "Letter generation."},
            {"name": "monitoring", "description": "Prometheus-compatible metrics endpoint."},
        ],
    )

    app.add_middleware(PrometheusMetricsMiddleware)
    app.add_middleware(HttpLoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=get_cors_origins(),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    @app.get("/", response_model=IndexOut, tags=["health"], summary="Service banner")
    async def index() -> IndexOut:
        return IndexOut(
            message=f"{get_settings().app_name} is running",
            status="ok",
            endpoints=AVAILABLE_ROUTES,
        )

    @app.get(
        "/health",
        response_model=HealthOut,
        tags=["health"],
        summary="Health check",
        description=(
            "Lightweight endpoint to verify the API process is running.\n\n"
            "Does not call the completion provider."
        ),
    )
    async def health() -> HealthOut:
        return HealthOut(status="ok")

    app.include_router(metrics_router)
    app.include_router(chat_router)
    app.include_router(letters_router)
    return app


def get_cors_origins() -> list[str]:
    # Read straight from the environment: middleware is installed at import time,
    # before settings (and the required API key) are validated in the lifespan.
    raw = os.getenv("CORS_ALLOW_ORIGINS", "*")
    origins = [o.strip() for o in raw.split(",") if o.strip()]
    return origins or ["*"]


app = create_app()
