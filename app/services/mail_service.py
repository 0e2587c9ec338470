from __future__ import annotations

import asyncio
import logging
import smtplib
from email.message import EmailMessage
from typing import Protocol

from app.core.errors import ConfigurationError, UpstreamError
from app.core.settings import Settings, get_settings

logger = logging.getLogger(__name__)


class MailRelay(Protocol):
    @property
    def is_configured(self) -> bool: ...

    async def send_html(
        self, to_email: str, subject: str, html: str, text: str | None = None
    ) -> None: ...


class SmtpMailService:
    """Sends mail through an authenticated SMTP-over-SSL relay."""

    def __init__(self, settings: Settings | None = None):
        self._settings = settings or get_settings()

    @property
    def is_configured(self) -> bool:
        return self._settings.mail_configured

    def build_message(
        self, to_email: str, subject: str, html: str, text: str | None = None
    ) -> EmailMessage:
        message = EmailMessage()
        message["From"] = self._settings.email_user
        message["To"] = to_email
        message["Subject"] = subject
        message.set_content(text or "This message requires an HTML capable mail client.")
        message.add_alternative(html, subtype="html")
        return message

    async def send_html(
        self, to_email: str, subject: str, html: str, text: str | None = None
    ) -> None:
        if not self.is_configured:
            raise ConfigurationError("Mail credentials missing")

        message = self.build_message(to_email, subject, html, text)

        def _send() -> None:
            with smtplib.SMTP_SSL(self._settings.smtp_host, self._settings.smtp_port) as smtp:
                smtp.login(self._settings.email_user, self._settings.email_pass)
                smtp.send_message(message)

        try:
            await asyncio.to_thread(_send)
        except Exception as e:
            logger.exception("SMTP send to %s failed", to_email)
            raise UpstreamError("Failed to send email") from e
