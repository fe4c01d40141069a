from __future__ import annotations

import json
from typing import Any

from fastapi import Request

from letter_api.domain.exceptions import InvalidJSONError


async def read_json_object(request: Request) -> dict[str, Any]:
    """
    Dependency that parses the request body as a JSON object.

    An empty body is treated as `{}` so missing fields surface as validation
    errors rather than JSON errors.
    """

    raw = await request.body()
    if not raw.strip():
        return {}

    try:
        payload = json.loads(raw)
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise InvalidJSONError(details=str(exc)) from exc

    if not isinstance(payload, dict):
        raise InvalidJSONError(details="Request body must be a JSON object")
    return payload
