"""Fixed minimal catalog shown whenever remote synchronization fails."""

from __future__ import annotations

from typing import Optional, Tuple

from craftref.core.models import (
    BIOME,
    EFFECT,
    ENTITY,
    ITEM_OR_BLOCK,
    SOURCE_FALLBACK,
    CatalogSnapshot,
    Entry,
)

FALLBACK_ENTRIES: Tuple[Entry, ...] = (
    Entry(id="diamond", display_name="钻石", category=ITEM_OR_BLOCK),
    Entry(id="grass_block", display_name="草方块", category=ITEM_OR_BLOCK),
    Entry(id="zombie", display_name="僵尸", category=ENTITY),
    Entry(id="creeper", display_name="苦力怕", category=ENTITY),
    Entry(id="speed", display_name="速度", category=EFFECT),
    Entry(id="plains", display_name="平原", category=BIOME),
)


def fallback_snapshot(
    error: Optional[str] = None,
    version: Optional[str] = None,
    category: Optional[str] = None,
) -> CatalogSnapshot:
    """Return a fallback snapshot carrying the fixed dataset."""

    return CatalogSnapshot(
        entries=FALLBACK_ENTRIES,
        source=SOURCE_FALLBACK,
        error=error,
        version=version,
        category=category,
    )
