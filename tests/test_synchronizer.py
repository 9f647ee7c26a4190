from __future__ import annotations

import asyncio

from fakes import FakeFetcher, GatedFetcher

from craftref.core.fallback import FALLBACK_ENTRIES
from craftref.core.filters import filter_entries
from craftref.core.locator import locate
from craftref.core.models import ALL, ENTITY, ITEM_OR_BLOCK, SOURCE_FALLBACK, SOURCE_REMOTE
from craftref.core.synchronizer import CatalogSynchronizer, project_records

ITEMS_URL = locate("java", "pc/1.20.1", ITEM_OR_BLOCK)
ENTITIES_URL = locate("java", "pc/1.20.1", ENTITY)


def test_successful_sync_projects_records() -> None:
    fetcher = FakeFetcher(
        {
            ENTITIES_URL: [
                {"id": 1, "name": "zombie", "displayName": "Zombie", "type": "hostile"},
                {"id": 2, "name": "allay"},
            ]
        }
    )
    synchronizer = CatalogSynchronizer(fetcher)

    snapshot = asyncio.run(synchronizer.synchronize("pc/1.20.1", ENTITY))

    assert fetcher.requested == [ENTITIES_URL]
    assert snapshot.source == SOURCE_REMOTE
    assert snapshot.error is None
    assert [(e.id, e.display_name) for e in snapshot.entries] == [("zombie", "Zombie"), ("allay", "allay")]
    assert all(e.category == ENTITY and e.namespace == "minecraft" for e in snapshot.entries)
    assert synchronizer.snapshot is snapshot
    assert synchronizer.loading is False


def test_all_category_tags_entries_as_items() -> None:
    fetcher = FakeFetcher({ITEMS_URL: [{"name": "stone", "displayName": "Stone"}]})
    snapshot = asyncio.run(CatalogSynchronizer(fetcher).synchronize("pc/1.20.1", ALL))

    assert fetcher.requested == [ITEMS_URL]
    assert snapshot.entries[0].category == ITEM_OR_BLOCK


def test_fetch_failure_falls_back_with_error() -> None:
    synchronizer = CatalogSynchronizer(FakeFetcher())

    snapshot = asyncio.run(synchronizer.synchronize("pc/1.20.1", ENTITY))

    assert snapshot.source == SOURCE_FALLBACK
    assert snapshot.entries == FALLBACK_ENTRIES
    assert "404" in (snapshot.error or "")
    assert synchronizer.error == snapshot.error
    assert synchronizer.loading is False
    # Only the entity-tagged fallback rows remain once the category filter applies.
    assert [e.id for e in filter_entries(snapshot, "", ENTITY)] == ["zombie", "creeper"]


def test_malformed_payload_falls_back() -> None:
    synchronizer = CatalogSynchronizer(FakeFetcher({ITEMS_URL: {"not": "a list"}}))

    snapshot = asyncio.run(synchronizer.synchronize("pc/1.20.1", ITEM_OR_BLOCK))

    assert snapshot.source == SOURCE_FALLBACK
    assert snapshot.entries == FALLBACK_ENTRIES
    assert "JSON array" in (snapshot.error or "")


def test_payload_without_usable_records_falls_back() -> None:
    synchronizer = CatalogSynchronizer(FakeFetcher({ITEMS_URL: [{"displayName": "No id"}, "junk"]}))

    snapshot = asyncio.run(synchronizer.synchronize("pc/1.20.1", ITEM_OR_BLOCK))

    assert snapshot.source == SOURCE_FALLBACK
    assert len(snapshot) > 0


def test_unexpected_fetcher_error_never_escapes() -> None:
    class ExplodingFetcher:
        async def fetch_json(self, url: str) -> object:
            raise KeyError("boom")

    snapshot = asyncio.run(CatalogSynchronizer(ExplodingFetcher()).synchronize("pc/1.21", ENTITY))

    assert snapshot.source == SOURCE_FALLBACK
    assert "Unexpected error" in (snapshot.error or "")


def test_projection_skips_records_without_name() -> None:
    entries = project_records([{"name": ""}, {"name": 5}, None, {"name": "oak_log", "displayName": ""}], ENTITY)

    assert [(e.id, e.display_name) for e in entries] == [("oak_log", "oak_log")]


def test_stale_response_is_discarded() -> None:
    async def scenario():
        fetcher = GatedFetcher(
            {
                ITEMS_URL: [{"name": "stone"}],
                ENTITIES_URL: [{"name": "pig"}],
            }
        )
        synchronizer = CatalogSynchronizer(fetcher)
        older = asyncio.create_task(synchronizer.synchronize("pc/1.20.1", ITEM_OR_BLOCK))
        await asyncio.sleep(0)
        newer = asyncio.create_task(synchronizer.synchronize("pc/1.20.1", ENTITY))
        await asyncio.sleep(0)

        fetcher.release(ENTITIES_URL)
        newest = await newer
        assert synchronizer.loading is False

        # The older request resolves last but must not overwrite the newer result.
        fetcher.release(ITEMS_URL)
        stale = await older
        return synchronizer, newest, stale

    synchronizer, newest, stale = asyncio.run(scenario())

    assert [e.id for e in newest.entries] == ["pig"]
    assert stale is newest
    assert synchronizer.snapshot is newest


def test_loading_stays_set_until_latest_request_finishes() -> None:
    async def scenario():
        fetcher = GatedFetcher(
            {
                ITEMS_URL: [{"name": "stone"}],
                ENTITIES_URL: [{"name": "pig"}],
            }
        )
        synchronizer = CatalogSynchronizer(fetcher)
        older = asyncio.create_task(synchronizer.synchronize("pc/1.20.1", ITEM_OR_BLOCK))
        await asyncio.sleep(0)
        newer = asyncio.create_task(synchronizer.synchronize("pc/1.20.1", ENTITY))
        await asyncio.sleep(0)

        fetcher.release(ITEMS_URL)
        await older
        still_loading = synchronizer.loading
        held_before = synchronizer.snapshot

        fetcher.release(ENTITIES_URL)
        await newer
        return still_loading, held_before, synchronizer

    still_loading, held_before, synchronizer = asyncio.run(scenario())

    assert still_loading is True
    assert held_before.source == SOURCE_FALLBACK
    assert synchronizer.loading is False
    assert [e.id for e in synchronizer.snapshot.entries] == ["pig"]
