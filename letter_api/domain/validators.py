"""Pure payload validators.

Each validator turns an untyped JSON value into typed domain models or raises a
`ValidationError` before any network call is made.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from letter_api.domain.exceptions import InvalidShapeError, MissingFieldError
from letter_api.domain.models import (
    DEFAULT_LETTER_STYLE,
    DEFAULT_LETTER_TONE,
    LetterRequest,
    Message,
)

# model field -> accepted keys, in lookup order; the first key is the wire name.
_LETTER_FIELDS: dict[str, tuple[str, ...]] = {
    "recipient_name": ("LetterRecipientName", "recipientName", "recipient_name"),
    "occasion": ("LetterOccasion", "occasion"),
    "tone": ("LetterTone", "tone"),
    "style": ("LetterStyle", "style"),
}
_REQUIRED_LETTER_FIELDS = ("recipient_name", "occasion")
_LETTER_DEFAULTS = {"tone": DEFAULT_LETTER_TONE, "style": DEFAULT_LETTER_STYLE}


def _is_blank(value: Any) -> bool:
    """Absent, JSON null, or a whitespace-only string."""
    return value is None or (isinstance(value, str) and not value.strip())


def validate_chat_messages(raw: Any) -> list[Message]:
    """Validate the `messages` value of a chat request.

    Returns the messages in their original order without altering them.
    """

    if raw is None or isinstance(raw, (str, bytes, Mapping)) or not isinstance(raw, Sequence):
        raise MissingFieldError("Messages array is required")
    if len(raw) == 0:
        raise MissingFieldError("Messages array is required")

    messages: list[Message] = []
    for index, item in enumerate(raw):
        if not isinstance(item, Mapping):
            raise InvalidShapeError(f"Message at index {index} must be an object")
        role = item.get("role")
        content = item.get("content")
        if not isinstance(role, str) or not role:
            raise InvalidShapeError(f"Message at index {index} must have a string role")
        if not isinstance(content, str) or not content:
            raise InvalidShapeError(f"Message at index {index} must have a string content")
        messages.append(Message.model_validate(dict(item)))

    return messages


def validate_letter_request(raw: Any) -> LetterRequest:
    """Validate letter parameters and apply the tone/style defaults.

    Accepts wire names (`LetterRecipientName`, ...), camelCase (`recipientName`)
    or field names (`recipient_name`). A falsy or blank required field is missing;
    a blank optional field falls back to its default.
    """

    if raw is None:
        raw = {}
    if not isinstance(raw, Mapping):
        raise InvalidShapeError("Letter request must be an object")

    found = {
        field: next((raw[k] for k in keys if raw.get(k) is not None), None)
        for field, keys in _LETTER_FIELDS.items()
    }

    # Missing required fields are reported before any type error.
    missing = [
        _LETTER_FIELDS[field][0]
        for field in _REQUIRED_LETTER_FIELDS
        if not found[field] or _is_blank(found[field])
    ]
    if missing:
        raise MissingFieldError(
            "Recipient name and occasion are required (missing: " + ", ".join(missing) + ")"
        )

    values: dict[str, str] = {}
    for field, value in found.items():
        if _is_blank(value):
            values[field] = _LETTER_DEFAULTS[field]
            continue
        if not isinstance(value, str):
            raise InvalidShapeError(f"{_LETTER_FIELDS[field][0]} must be a string")
        values[field] = value

    return LetterRequest.model_validate(values)
