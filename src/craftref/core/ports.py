"""Ports (interfaces) used by the core.

Ports define the minimal contracts for the HTTP, storage, assistant and
clipboard adapters so that the core can be reused with different backends.
"""

from __future__ import annotations

from typing import Any, Optional, Protocol


class CatalogFetcherPort(Protocol):
    """Remote catalog read required by the synchronizer.

    Implementations raise ``CatalogFetchError`` for transport failures and
    non-success statuses, and ``CatalogParseError`` for undecodable bodies.
    """

    async def fetch_json(self, url: str) -> Any:
        ...


class KeyValueStoragePort(Protocol):
    """Scoped key-value persistence used by the history store."""

    def read(self, key: str) -> Optional[str]:
        ...

    def write(self, key: str, value: str) -> None:
        ...


class AssistantPort(Protocol):
    """Opaque text generation service."""

    async def generate(self, prompt: str) -> str:
        ...


class ClipboardPort(Protocol):
    """System clipboard write; failures are not reported back."""

    def write(self, text: str) -> None:
        ...
