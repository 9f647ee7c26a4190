"""Factories wiring the core to its adapters.

Every surface (CLI subcommands, the Textual browser) builds its collaborators
here so the wiring stays in one place.
"""

from __future__ import annotations

import logging

from craftref import settings
from craftref.adapters.gemini_assistant import GeminiAssistant
from craftref.adapters.http_catalog import AiohttpCatalogFetcher
from craftref.adapters.sqlite_storage import SQLiteKeyValueStorage
from craftref.core.errors import PersistenceError
from craftref.core.history import HistoryStore
from craftref.core.ports import ClipboardPort
from craftref.core.session import BrowserSession
from craftref.core.synchronizer import CatalogSynchronizer

LOGGER = logging.getLogger(__name__)


def build_synchronizer(platform: str = settings.DEFAULT_PLATFORM) -> CatalogSynchronizer:
    fetcher = AiohttpCatalogFetcher(timeout_seconds=settings.CATALOG.timeout_seconds)
    return CatalogSynchronizer(fetcher, base_url=settings.CATALOG.base_url, platform=platform)


def build_history() -> HistoryStore:
    """Open the history database and load the stored list once.

    An unusable database leaves the history empty; later saves log their own failures.
    """

    storage = SQLiteKeyValueStorage(settings.HISTORY_DB_PATH)
    try:
        storage.init_db()
    except PersistenceError as exc:
        LOGGER.warning("History database unavailable: %s", exc)
    history = HistoryStore(storage)
    history.load()
    LOGGER.info("History loaded from %s (%s entries)", settings.HISTORY_DB_PATH, len(history))
    return history


def build_assistant() -> GeminiAssistant:
    # A missing key is reported when the assistant is used, not at startup,
    # so the browser stays usable without one.
    return GeminiAssistant(
        api_key=settings.GEMINI_API_KEY,
        models=settings.ASSISTANT.models,
        timeout_seconds=settings.ASSISTANT.timeout_seconds,
    )


def build_session(clipboard: ClipboardPort, platform: str = settings.DEFAULT_PLATFORM) -> BrowserSession:
    return BrowserSession(
        synchronizer=build_synchronizer(platform),
        history=build_history(),
        clipboard=clipboard,
        platform=platform,
        view=settings.DEFAULT_VIEW,
        max_results=settings.DISPLAY.max_results,
    )
