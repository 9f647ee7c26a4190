"""Browser selection state and the actions that drive the core.

A selection change (platform, version or id category) triggers catalog
synchronization while the ids view is active; search submits and copy actions
write into the history store. The UI layers only call into this class.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Tuple

from craftref.core.command_table import COMMAND_TABLE
from craftref.core.config import DEFAULT_MAX_RESULTS
from craftref.core.filters import cap_results, filter_commands, filter_entries, suggest
from craftref.core.history import HistoryStore
from craftref.core.locator import VERSION_MAP, default_version
from craftref.core.models import (
    ALL,
    COMMAND_CATEGORIES,
    ENTRY_CATEGORIES,
    PLATFORM_JAVA,
    CatalogSnapshot,
    CommandRecord,
    Entry,
)
from craftref.core.ports import ClipboardPort
from craftref.core.synchronizer import CatalogSynchronizer

LOGGER = logging.getLogger(__name__)

VIEW_COMMANDS = "commands"
VIEW_IDS = "ids"
VIEWS = (VIEW_COMMANDS, VIEW_IDS)


class BrowserSession:
    """Holds the current selection and computes what the browser shows."""

    def __init__(
        self,
        synchronizer: CatalogSynchronizer,
        history: HistoryStore,
        clipboard: ClipboardPort,
        table: Iterable[CommandRecord] = COMMAND_TABLE,
        platform: str = PLATFORM_JAVA,
        view: str = VIEW_COMMANDS,
        max_results: int = DEFAULT_MAX_RESULTS,
    ) -> None:
        _require(platform, VERSION_MAP, "platform")
        _require(view, VIEWS, "view")
        self._synchronizer = synchronizer
        self._history = history
        self._clipboard = clipboard
        self._table = list(table)
        self._max_results = max_results
        self._view = view
        self._platform = platform
        self._version = default_version(platform)
        self.command_category = ALL
        self.id_category = ALL
        self.search_text = ""
        self.show_deprecated = False
        self._synchronizer.set_platform(platform)

    @property
    def view(self) -> str:
        return self._view

    @property
    def platform(self) -> str:
        return self._platform

    @property
    def version(self) -> str:
        return self._version

    @property
    def snapshot(self) -> CatalogSnapshot:
        return self._synchronizer.snapshot

    @property
    def loading(self) -> bool:
        return self._synchronizer.loading

    @property
    def history(self) -> Tuple[str, ...]:
        return self._history.entries

    async def select_view(self, view: str) -> Optional[CatalogSnapshot]:
        _require(view, VIEWS, "view")
        self._view = view
        return await self.refresh()

    async def select_platform(self, platform: str) -> Optional[CatalogSnapshot]:
        """Switch platform and reset the version to that platform's default."""

        _require(platform, VERSION_MAP, "platform")
        self._platform = platform
        self._version = default_version(platform)
        self._synchronizer.set_platform(platform)
        return await self.refresh()

    async def select_version(self, version_token: str) -> Optional[CatalogSnapshot]:
        self._version = version_token
        return await self.refresh()

    async def select_id_category(self, category: str) -> Optional[CatalogSnapshot]:
        _require(category, (ALL,) + ENTRY_CATEGORIES, "id category")
        self.id_category = category
        return await self.refresh()

    def select_command_category(self, category: str) -> None:
        _require(category, (ALL,) + COMMAND_CATEGORIES, "command category")
        self.command_category = category

    def set_search(self, text: str) -> None:
        self.search_text = text

    def set_show_deprecated(self, value: bool) -> None:
        self.show_deprecated = value

    async def refresh(self) -> Optional[CatalogSnapshot]:
        """Synchronize the catalog for the current selection (ids view only)."""

        if self._view != VIEW_IDS:
            return None
        return await self._synchronizer.synchronize(self._version, self.id_category)

    def visible_commands(self) -> List[CommandRecord]:
        return filter_commands(
            self._table,
            self._platform,
            self.search_text,
            self.command_category,
            self.show_deprecated,
        )

    def visible_entries(self) -> Tuple[List[Entry], int]:
        """Return the displayed entries and how many more matched."""

        matches = filter_entries(self._synchronizer.snapshot, self.search_text, self.id_category)
        return cap_results(matches, self._max_results)

    def suggestions(self) -> List[str]:
        return suggest(self._history.entries, self.search_text)

    def submit_search(self) -> Tuple[str, ...]:
        return self._history.record(self.search_text)

    def apply_suggestion(self, term: str) -> Tuple[str, ...]:
        self.search_text = term
        return self._history.record(term)

    def clear_history(self) -> None:
        self._history.clear()

    def copy_command(self, record: CommandRecord) -> str:
        """Copy the syntax for the current platform and remember the command."""

        detail = record.detail_for(self._platform)
        if detail is None:
            raise ValueError(f"{record.name} has no syntax for {self._platform}")
        self._clipboard.write(detail.syntax)
        self._history.record(record.name)
        return detail.syntax

    def copy_entry(self, entry: Entry) -> str:
        self._clipboard.write(entry.id)
        self._history.record(entry.id)
        return entry.id


def _require(value: str, allowed: Iterable[str], label: str) -> None:
    if value not in allowed:
        raise ValueError(f"Unsupported {label}: {value}")
