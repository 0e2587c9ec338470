import smtplib

import anyio
import pytest

import app.services.mail_service as mail_module
from app.core.errors import ConfigurationError, UpstreamError
from app.core.settings import Settings
from app.services.mail_service import SmtpMailService


class _FakeSMTP:
    instances: list["_FakeSMTP"] = []

    def __init__(self, host: str, port: int):
        self.host = host
        self.port = port
        self.logins: list[tuple[str, str]] = []
        self.messages = []
        _FakeSMTP.instances.append(self)

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def login(self, user: str, password: str) -> None:
        self.logins.append((user, password))

    def send_message(self, message) -> None:
        self.messages.append(message)


class _FailingSMTP(_FakeSMTP):
    def login(self, user: str, password: str) -> None:
        raise smtplib.SMTPAuthenticationError(535, b"bad credentials")


def _settings(**overrides) -> Settings:
    values = {
        "EMAIL_USER": "bot@example.org",
        "EMAIL_PASS": "app-password",
        "SMTP_HOST": "smtp.test",
        "SMTP_PORT": 2465,
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


def test_send_html_logs_in_and_sends(monkeypatch):
    _FakeSMTP.instances = []
    monkeypatch.setattr(mail_module.smtplib, "SMTP_SSL", _FakeSMTP)
    service = SmtpMailService(settings=_settings())

    anyio.run(service.send_html, "asha@example.org", "Transcript", "<p>Hi</p>", "Hi")

    smtp = _FakeSMTP.instances[0]
    assert (smtp.host, smtp.port) == ("smtp.test", 2465)
    assert smtp.logins == [("bot@example.org", "app-password")]

    message = smtp.messages[0]
    assert message["From"] == "bot@example.org"
    assert message["To"] == "asha@example.org"
    assert message["Subject"] == "Transcript"
    assert message.get_body(preferencelist=("html",)).get_content().strip() == "<p>Hi</p>"
    assert message.get_body(preferencelist=("plain",)).get_content().strip() == "Hi"


def test_send_html_relay_failure(monkeypatch):
    monkeypatch.setattr(mail_module.smtplib, "SMTP_SSL", _FailingSMTP)
    service = SmtpMailService(settings=_settings())

    with pytest.raises(UpstreamError) as exc_info:
        anyio.run(service.send_html, "asha@example.org", "Transcript", "<p>Hi</p>")

    assert exc_info.value.message == "Failed to send email"


def test_send_html_without_credentials(monkeypatch):
    monkeypatch.delenv("EMAIL_PASS", raising=False)
    service = SmtpMailService(settings=_settings(EMAIL_PASS=None))

    assert service.is_configured is False
    with pytest.raises(ConfigurationError):
        anyio.run(service.send_html, "asha@example.org", "Transcript", "<p>Hi</p>")
