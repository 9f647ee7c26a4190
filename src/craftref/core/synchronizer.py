"""Catalog synchronization: fetch, normalize, commit or fall back.

This module is integration-agnostic. It only relies on the fetcher port, so
the HTTP client can be swapped without changes here.
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional

from craftref.core.errors import CatalogError, CatalogParseError
from craftref.core.fallback import fallback_snapshot
from craftref.core.locator import DEFAULT_BASE_URL, locate
from craftref.core.models import (
    ALL,
    DEFAULT_NAMESPACE,
    ITEM_OR_BLOCK,
    PLATFORM_JAVA,
    SOURCE_REMOTE,
    CatalogSnapshot,
    Entry,
)
from craftref.core.ports import CatalogFetcherPort

LOGGER = logging.getLogger(__name__)


def project_records(raw: Any, category: str) -> List[Entry]:
    """Map raw catalog records onto entries.

    Projection rules:
    - ``id`` is the raw ``name``; records without a non-empty string name are
      skipped.
    - ``display_name`` is the raw ``displayName`` when present, else ``name``.
    - ``category`` is the requested category (``all`` maps to item_or_block).
    - ``namespace`` is always ``minecraft``.
    """

    if not isinstance(raw, list):
        raise CatalogParseError(f"Expected a JSON array, got {type(raw).__name__}")

    entry_category = ITEM_OR_BLOCK if category == ALL else category
    entries: List[Entry] = []
    for record in raw:
        if not isinstance(record, dict):
            continue
        name = record.get("name")
        if not isinstance(name, str) or not name:
            continue
        display_name = record.get("displayName")
        if not isinstance(display_name, str) or not display_name:
            display_name = name
        entries.append(
            Entry(
                id=name,
                display_name=display_name,
                category=entry_category,
                namespace=DEFAULT_NAMESPACE,
            )
        )
    return entries


class CatalogSynchronizer:
    """Owns the held catalog snapshot and replaces it on every request.

    Each ``synchronize`` call takes a request token. Only the call holding the
    latest token may commit, so a slow response for an old selection never
    overwrites the result for a newer one.
    """

    def __init__(
        self,
        fetcher: CatalogFetcherPort,
        base_url: str = DEFAULT_BASE_URL,
        platform: str = PLATFORM_JAVA,
    ) -> None:
        self._fetcher = fetcher
        self._base_url = base_url
        self._platform = platform
        self._snapshot = fallback_snapshot()
        self._latest_token = 0
        self._loading = False
        self._error: Optional[str] = None

    @property
    def snapshot(self) -> CatalogSnapshot:
        return self._snapshot

    @property
    def loading(self) -> bool:
        return self._loading

    @property
    def error(self) -> Optional[str]:
        return self._error

    def set_platform(self, platform: str) -> None:
        self._platform = platform

    async def synchronize(self, version_token: str, category: str) -> CatalogSnapshot:
        """Fetch the catalog for a selection and commit it (or the fallback).

        Never raises for fetch or parse problems. A call superseded by a newer
        one returns the currently held snapshot without committing.
        """

        self._latest_token += 1
        token = self._latest_token
        self._loading = True
        self._error = None

        url = locate(self._platform, version_token, category, self._base_url)
        try:
            snapshot = await self._fetch_snapshot(url, version_token, category)
        except CatalogError as exc:
            LOGGER.warning("Catalog sync failed for %s: %s", url, exc)
            snapshot = fallback_snapshot(str(exc), version_token, category)
        except Exception as exc:
            LOGGER.exception("Unexpected error while syncing %s", url)
            snapshot = fallback_snapshot(f"Unexpected error: {exc}", version_token, category)
        finally:
            if token == self._latest_token:
                self._loading = False

        if token != self._latest_token:
            LOGGER.debug("Discarding stale catalog response for %s", url)
            return self._snapshot

        self._snapshot = snapshot
        self._error = snapshot.error
        return snapshot

    async def _fetch_snapshot(self, url: str, version_token: str, category: str) -> CatalogSnapshot:
        raw = await self._fetcher.fetch_json(url)
        entries = project_records(raw, category)
        # An empty remote catalog would break the non-empty snapshot guarantee.
        if not entries:
            raise CatalogParseError(f"No usable records in catalog: {url}")
        LOGGER.info("Loaded %s entries from %s", len(entries), url)
        return CatalogSnapshot(
            entries=tuple(entries),
            source=SOURCE_REMOTE,
            error=None,
            version=version_token,
            category=category,
        )
