from __future__ import annotations

import logging

from app.core.errors import ConfigurationError, ValidationError
from app.models.query import QueryResponse
from app.services.gemini_service import GenerationClient
from app.services.prompts import SYSTEM_INSTRUCTION, build_prompt
from app.services.text_normalizer import normalize_text

logger = logging.getLogger(__name__)

NO_ANSWER = "No answer received"


class QueryService:
    def __init__(self, generator: GenerationClient):
        self._generator = generator

    async def answer(self, query: str | None, lang: str | None) -> QueryResponse:
        if not query:
            raise ValidationError("Query missing")
        if not self._generator.is_configured:
            raise ConfigurationError("Gemini API key missing")

        prompt = build_prompt(query, lang)
        text = await self._generator.generate(prompt, SYSTEM_INSTRUCTION)
        if text is None:
            logger.warning("Gemini returned no candidate text for lang=%s", lang)
            text = NO_ANSWER

        return QueryResponse(answer=normalize_text(text))
