from __future__ import annotations

from letter_api.domain.models import LetterRequest, Message

LETTER_PROMPT_TEMPLATE = (
    "Generate a {tone} {style} letter for {recipient_name} on the occasion of {occasion}."
)


def build_letter_prompt(req: LetterRequest) -> Message:
    """
    Build the single user turn sent to the chat capability.

    Fields are interpolated as-is; user-supplied text is not escaped, so a
    recipient or occasion can steer the model. Treat output accordingly.
    """

    content = LETTER_PROMPT_TEMPLATE.format(
        tone=req.tone,
        style=req.style,
        recipient_name=req.recipient_name,
        occasion=req.occasion,
    )
    return Message(role="user", content=content)
