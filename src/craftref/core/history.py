"""Bounded, recency-ordered search history persisted through a storage port."""

from __future__ import annotations

import json
import logging
from typing import List, Tuple

from craftref.core.errors import PersistenceError
from craftref.core.ports import KeyValueStoragePort

LOGGER = logging.getLogger(__name__)

HISTORY_KEY = "mc_command_search_history"
HISTORY_LIMIT = 10


class HistoryStore:
    """Most-recent-first list of distinct search terms.

    ``load`` is called once at startup; every mutation is saved immediately.
    Storage problems never escape: a bad stored value loads as an empty list
    and a failed save keeps the in-memory list.
    """

    def __init__(
        self,
        storage: KeyValueStoragePort,
        key: str = HISTORY_KEY,
        limit: int = HISTORY_LIMIT,
    ) -> None:
        self._storage = storage
        self._key = key
        self._limit = limit
        self._entries: List[str] = []

    @property
    def entries(self) -> Tuple[str, ...]:
        return tuple(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def load(self) -> Tuple[str, ...]:
        """Load the stored history, treating anything unusable as empty."""

        self._entries = []
        try:
            raw = self._storage.read(self._key)
        except PersistenceError as exc:
            LOGGER.warning("History read failed, starting empty: %s", exc)
            return self.entries
        if raw is None:
            return self.entries

        try:
            decoded = json.loads(raw)
        except ValueError:
            LOGGER.warning("Stored history is not valid JSON, starting empty")
            return self.entries
        if not isinstance(decoded, list) or not all(isinstance(item, str) for item in decoded):
            LOGGER.warning("Stored history has an unexpected shape, starting empty")
            return self.entries

        for item in decoded:
            term = item.strip()
            if term and term not in self._entries:
                self._entries.append(term)
        del self._entries[self._limit :]
        LOGGER.debug("Loaded %s history entries", len(self._entries))
        return self.entries

    def record(self, term: str) -> Tuple[str, ...]:
        """Move ``term`` (trimmed) to the front, dropping the oldest overflow."""

        clean = term.strip()
        if not clean:
            return self.entries
        self._entries = [clean] + [item for item in self._entries if item != clean]
        del self._entries[self._limit :]
        self._save()
        return self.entries

    def clear(self) -> None:
        self._entries = []
        self._save()

    def _save(self) -> None:
        payload = json.dumps(self._entries, ensure_ascii=False)
        try:
            self._storage.write(self._key, payload)
        except PersistenceError as exc:
            LOGGER.warning("History save failed: %s", exc)
