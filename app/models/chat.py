from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ChatMessage(BaseModel):
    model_config = ConfigDict(frozen=True)

    role: str  # "user" or "assistant"; anything else renders as the bot side
    content: str


class TranscriptRequest(BaseModel):
    """Chat transcript to mail. Both fields are checked by the handler."""

    model_config = ConfigDict(populate_by_name=True)

    chat_history: list[ChatMessage] | None = Field(default=None, alias="chatHistory")
    to_email: str | None = Field(default=None, alias="toEmail")


class TranscriptResponse(BaseModel):
    success: bool = True
    message: str
