from __future__ import annotations

import logging

import uvicorn

from letter_api.core.logging import setup_logging
from letter_api.core.settings import get_settings

logger = logging.getLogger("letter_api")


def main() -> None:
    setup_logging()
    # Fails fast (pydantic ValidationError) when OPENAI_API_KEY is missing.
    settings = get_settings()
    logger.info("Server starting", extra={"path": f"{settings.host}:{settings.port}"})
    uvicorn.run(
        "letter_api.main:app",
        host=settings.host,
        port=settings.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
