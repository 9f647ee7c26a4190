"""Gemini assistant adapter.

Implements the core AssistantPort against the Gemini ``generateContent`` REST
endpoint. Models are tried in order; a failing model (rate limit, outage,
unexpected body) moves on to the next one.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Iterable, Optional

import aiohttp

from craftref.core.errors import AssistantError

LOGGER = logging.getLogger(__name__)

GEMINI_ENDPOINT = "https://generativelanguage.googleapis.com/v1beta/models/{model}:generateContent"


def _extract_text(result: Any) -> Optional[str]:
    if not isinstance(result, dict):
        return None
    candidates = result.get("candidates")
    if not isinstance(candidates, list) or not candidates or not isinstance(candidates[0], dict):
        return None
    content = candidates[0].get("content")
    if not isinstance(content, dict):
        return None
    parts = content.get("parts")
    if not isinstance(parts, list) or not parts or not isinstance(parts[0], dict):
        return None
    text = parts[0].get("text")
    return text if isinstance(text, str) else None


class GeminiAssistant:
    """Assistant adapter that calls Gemini models over aiohttp."""

    def __init__(
        self,
        api_key: Optional[str],
        models: Iterable[str],
        timeout_seconds: float = 30.0,
        endpoint: str = GEMINI_ENDPOINT,
    ) -> None:
        self._api_key = api_key
        self._models = list(models)
        self._timeout = aiohttp.ClientTimeout(total=timeout_seconds)
        self._endpoint = endpoint

    def _payload(self, prompt: str) -> dict:
        return {
            "contents": [{"parts": [{"text": prompt}]}],
            "generationConfig": {"temperature": 0.2, "maxOutputTokens": 800},
        }

    async def generate(self, prompt: str) -> str:
        """Return the first model answer, or raise AssistantError."""

        if not self._api_key:
            raise AssistantError("GEMINI_API_KEY is not configured")

        headers = {"Content-Type": "application/json", "x-goog-api-key": self._api_key}
        async with aiohttp.ClientSession(timeout=self._timeout) as session:
            for model in self._models:
                url = self._endpoint.format(model=model)
                try:
                    async with session.post(url, headers=headers, json=self._payload(prompt)) as response:
                        if response.status != 200:
                            LOGGER.info("Model %s answered with status %s", model, response.status)
                            continue
                        result = await response.json(content_type=None)
                except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as exc:
                    LOGGER.info("Model %s failed: %s", model, exc)
                    continue

                text = _extract_text(result)
                if text is not None:
                    LOGGER.debug("Answer produced by %s", model)
                    return text
                LOGGER.info("Model %s returned no text", model)

        raise AssistantError("No Gemini model produced an answer")
