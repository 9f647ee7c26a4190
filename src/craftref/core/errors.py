"""Exceptions raised by core operations and translated by adapters."""

from __future__ import annotations


class CraftrefError(RuntimeError):
    """Base class for every recoverable craftref failure."""


class CatalogError(CraftrefError):
    """Raised when a remote catalog cannot be turned into entries."""


class CatalogFetchError(CatalogError):
    """Raised on transport failures or non-success HTTP status."""


class CatalogParseError(CatalogError):
    """Raised when a catalog payload is not valid JSON or has the wrong shape."""


class PersistenceError(CraftrefError):
    """Raised when the key-value storage cannot be read or written."""


class AssistantError(CraftrefError):
    """Raised when the AI assistant call produced no usable answer."""


__all__ = [
    "AssistantError",
    "CatalogError",
    "CatalogFetchError",
    "CatalogParseError",
    "CraftrefError",
    "PersistenceError",
]
