"""HTTP catalog adapter.

Implements the core CatalogFetcherPort with aiohttp. The catalog host serves
JSON as ``text/plain``, so the body is decoded here instead of relying on the
response content type.
"""

from __future__ import annotations

import asyncio
import json
import logging
from typing import Any

import aiohttp

from craftref.core.errors import CatalogFetchError, CatalogParseError

LOGGER = logging.getLogger(__name__)


class AiohttpCatalogFetcher:
    """Reads catalog JSON with one short-lived client session per request."""

    def __init__(self, timeout_seconds: float = 15.0) -> None:
        self._timeout = aiohttp.ClientTimeout(total=timeout_seconds)

    async def fetch_json(self, url: str) -> Any:
        """GET ``url`` and decode the body as JSON."""

        LOGGER.debug("Fetching catalog %s", url)
        try:
            async with aiohttp.ClientSession(timeout=self._timeout) as session:
                async with session.get(url) as response:
                    if not 200 <= response.status < 300:
                        raise CatalogFetchError(f"Unable to fetch catalog ({response.status}): {url}")
                    body = await response.read()
        except aiohttp.ClientError as exc:
            raise CatalogFetchError(f"Unable to reach {url}: {exc}") from exc
        except asyncio.TimeoutError as exc:
            raise CatalogFetchError(f"Timed out fetching {url}") from exc

        try:
            return json.loads(body)
        except ValueError as exc:
            raise CatalogParseError(f"Catalog is not valid JSON ({exc}): {url}") from exc
