from __future__ import annotations

import asyncio
import logging
from typing import Any, Protocol

from google import genai
from google.genai import types

from app.core.errors import ConfigurationError, UpstreamError
from app.core.settings import Settings, get_settings

logger = logging.getLogger(__name__)


class GenerationClient(Protocol):
    """Anything that can turn a prompt into (at most) one answer text."""

    @property
    def is_configured(self) -> bool: ...

    async def generate(self, prompt: str, system_instruction: str) -> str | None: ...


def first_candidate_text(response: Any) -> str | None:
    """Return the first text part of the first candidate, or None if absent."""
    candidates = getattr(response, "candidates", None)
    if not candidates:
        return None

    content = getattr(candidates[0], "content", None)
    parts = getattr(content, "parts", None)
    if not parts:
        return None

    text = getattr(parts[0], "text", None)
    if isinstance(text, str) and text:
        return text
    return None


class GeminiService:
    def __init__(self, settings: Settings | None = None):
        self._settings = settings or get_settings()
        self._client: genai.Client | None = None

    @property
    def is_configured(self) -> bool:
        return self._settings.gemini_configured

    def _get_client(self) -> genai.Client:
        if not self.is_configured:
            raise ConfigurationError("Gemini API key missing")
        if self._client is None:
            self._client = genai.Client(api_key=self._settings.gemini_api_key)
        return self._client

    async def generate(self, prompt: str, system_instruction: str) -> str | None:
        client = self._get_client()
        config = types.GenerateContentConfig(system_instruction=system_instruction)

        def _send() -> str | None:
            response = client.models.generate_content(
                model=self._settings.gemini_model,
                contents=prompt,
                config=config,
            )
            return first_candidate_text(response)

        try:
            return await asyncio.to_thread(_send)
        except Exception as e:
            logger.exception("Gemini request failed")
            raise UpstreamError("Failed to call Gemini API") from e
