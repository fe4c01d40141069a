from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_LETTER_TONE = "friendly"
DEFAULT_LETTER_STYLE = "formal"


class Message(BaseModel):
    """One conversation turn sent to the completion provider.

    Unknown keys (e.g. `name`) are kept so the turn reaches the provider as sent.
    """

    model_config = ConfigDict(extra="allow", frozen=True, strict=True)

    role: str = Field(min_length=1, examples=["user"])
    content: str = Field(min_length=1, examples=["Write me a haiku about autumn."])

    def to_provider(self) -> dict[str, object]:
        return self.model_dump()


class LetterRequest(BaseModel):
    """Normalized letter parameters. Wire names are the `Letter*` aliases."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    recipient_name: str = Field(alias="LetterRecipientName", min_length=1)
    occasion: str = Field(alias="LetterOccasion", min_length=1)
    tone: str = Field(default=DEFAULT_LETTER_TONE, alias="LetterTone", min_length=1)
    style: str = Field(default=DEFAULT_LETTER_STYLE, alias="LetterStyle", min_length=1)
