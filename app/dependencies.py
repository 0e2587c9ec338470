from __future__ import annotations

from functools import lru_cache

from fastapi import Depends

from app.core.settings import get_settings
from app.services.gemini_service import GeminiService, GenerationClient
from app.services.mail_service import MailRelay, SmtpMailService
from app.services.query_service import QueryService
from app.services.transcript_service import TranscriptService


@lru_cache
def get_gemini_service() -> GeminiService:
    return GeminiService(settings=get_settings())


@lru_cache
def get_mail_service() -> SmtpMailService:
    return SmtpMailService(settings=get_settings())


def get_query_service(
    generator: GenerationClient = Depends(get_gemini_service),
) -> QueryService:
    return QueryService(generator)


def get_transcript_service(
    mailer: MailRelay = Depends(get_mail_service),
) -> TranscriptService:
    return TranscriptService(mailer)
