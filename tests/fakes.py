"""Hand-written port implementations shared by the tests."""

from __future__ import annotations

import asyncio
from typing import Any, Optional

from craftref.core.errors import AssistantError, CatalogFetchError, PersistenceError


class FakeFetcher:
    def __init__(self, payloads: Optional[dict[str, Any]] = None) -> None:
        self.payloads = payloads or {}
        self.requested: list[str] = []

    async def fetch_json(self, url: str) -> Any:
        self.requested.append(url)
        if url not in self.payloads:
            raise CatalogFetchError(f"Unable to fetch catalog (404): {url}")
        return self.payloads[url]


class GatedFetcher(FakeFetcher):
    """Holds every response until the test releases its URL."""

    def __init__(self, payloads: dict[str, Any]) -> None:
        super().__init__(payloads)
        self._gates: dict[str, asyncio.Event] = {}

    def _gate(self, url: str) -> asyncio.Event:
        return self._gates.setdefault(url, asyncio.Event())

    def release(self, url: str) -> None:
        self._gate(url).set()

    async def fetch_json(self, url: str) -> Any:
        self.requested.append(url)
        await self._gate(url).wait()
        return self.payloads[url]


class FakeStorage:
    def __init__(self, values: Optional[dict[str, str]] = None) -> None:
        self.values = dict(values or {})
        self.writes = 0

    def read(self, key: str) -> Optional[str]:
        return self.values.get(key)

    def write(self, key: str, value: str) -> None:
        self.writes += 1
        self.values[key] = value


class BrokenStorage:
    def read(self, key: str) -> Optional[str]:
        raise PersistenceError("disk on fire")

    def write(self, key: str, value: str) -> None:
        raise PersistenceError("disk on fire")


class FakeClipboard:
    def __init__(self) -> None:
        self.copied: list[str] = []

    def write(self, text: str) -> None:
        self.copied.append(text)


class FakeAssistant:
    def __init__(self, answer: Optional[str] = None) -> None:
        self.answer = answer
        self.prompts: list[str] = []

    async def generate(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.answer is None:
            raise AssistantError("no model answered")
        return self.answer
