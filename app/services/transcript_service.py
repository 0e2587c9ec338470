from __future__ import annotations

import logging
from html import escape

from app.core.errors import ConfigurationError, ValidationError
from app.models.chat import ChatMessage, TranscriptResponse
from app.services.mail_service import MailRelay

logger = logging.getLogger(__name__)

TRANSCRIPT_SUBJECT = "Your Odisha Healthcare AI Chat Transcript"

USER_COLOR = "#22C55E"
OTHER_COLOR = "#F97316"

_TRANSCRIPT_TEMPLATE = """
<h2>&#129534; Odisha Healthcare AI Chat Transcript</h2>
<div style="font-family:Arial, sans-serif; line-height:1.6;">{messages}</div>
<p style="margin-top:20px; font-size:12px; color:#555;">Sent by Odisha Healthcare AI Bot</p>
"""


def render_message(message: ChatMessage) -> str:
    color = USER_COLOR if message.role == "user" else OTHER_COLOR
    return (
        f'<p><b style="color:{color}">{escape(message.role.upper())}:</b> '
        f"{escape(message.content)}</p>"
    )


def render_transcript(history: list[ChatMessage]) -> str:
    messages = "".join(render_message(m) for m in history)
    return _TRANSCRIPT_TEMPLATE.format(messages=messages)


def render_plain_transcript(history: list[ChatMessage]) -> str:
    lines = [f"{m.role.upper()}: {m.content}" for m in history]
    return "\n".join(["Odisha Healthcare AI Chat Transcript", "", *lines])


class TranscriptService:
    def __init__(self, mailer: MailRelay):
        self._mailer = mailer

    async def send(
        self, chat_history: list[ChatMessage] | None, to_email: str | None
    ) -> TranscriptResponse:
        if chat_history is None or not to_email:
            raise ValidationError("Missing chatHistory or toEmail")
        if not self._mailer.is_configured:
            raise ConfigurationError("Mail credentials missing")

        await self._mailer.send_html(
            to_email,
            TRANSCRIPT_SUBJECT,
            render_transcript(chat_history),
            text=render_plain_transcript(chat_history),
        )
        logger.info("Sent %d-message transcript to %s", len(chat_history), to_email)

        return TranscriptResponse(message=f"Chat transcript sent to {to_email}")
