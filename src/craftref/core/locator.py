"""Catalog resource addressing and the per-platform version table."""

from __future__ import annotations

from typing import List, Optional, Tuple

from craftref.core.models import (
    BIOME,
    EFFECT,
    ENTITY,
    ITEM_OR_BLOCK,
    PLATFORM_BEDROCK,
    PLATFORM_EDUCATION,
    PLATFORM_JAVA,
    PLATFORM_NETEASE,
)

DEFAULT_BASE_URL = "https://raw.githubusercontent.com/PrismarineJS/minecraft-data/master/data"
DEFAULT_FILE_NAME = "items.json"

CATEGORY_FILE_MAP = {
    ITEM_OR_BLOCK: "items.json",
    ENTITY: "entities.json",
    EFFECT: "effects.json",
    BIOME: "biomes.json",
}

# (label, version token) pairs; the first one is the platform default.
VERSION_MAP: dict[str, List[Tuple[str, str]]] = {
    PLATFORM_JAVA: [
        ("1.21", "pc/1.21"),
        ("1.20.1", "pc/1.20.1"),
        ("1.19.4", "pc/1.19.4"),
        ("1.18.2", "pc/1.18.2"),
        ("1.16.5", "pc/1.16.5"),
        ("1.12.2", "pc/1.12.2"),
        ("1.8.9", "pc/1.8.9"),
    ],
    PLATFORM_BEDROCK: [
        ("1.21.0", "bedrock/1.21.0"),
        ("1.19.80", "bedrock/1.19.80"),
        ("1.18.11", "bedrock/1.18.11"),
        ("1.17.10", "bedrock/1.17.10"),
    ],
    PLATFORM_EDUCATION: [("1.19.80 (EDU)", "bedrock/1.19.80")],
    PLATFORM_NETEASE: [("1.12.2 (PC)", "pc/1.12.2")],
}


def file_name_for(category: str) -> str:
    """Return the catalog file for a category, defaulting to the items file."""

    return CATEGORY_FILE_MAP.get(category, DEFAULT_FILE_NAME)


def locate(
    platform: str,
    version_token: str,
    category: str,
    base_url: str = DEFAULT_BASE_URL,
) -> str:
    """Return the remote address of the catalog for a selection.

    The version token already encodes the platform's data directory
    (``pc/...`` or ``bedrock/...``), so ``platform`` does not take part in the
    address. The token is not validated here; callers pick it from
    ``versions_for(platform)``.
    """

    return f"{base_url.rstrip('/')}/{version_token}/{file_name_for(category)}"


def versions_for(platform: str) -> List[Tuple[str, str]]:
    return list(VERSION_MAP.get(platform, []))


def default_version(platform: str) -> str:
    versions = VERSION_MAP.get(platform)
    if not versions:
        raise ValueError(f"Unsupported platform: {platform}")
    return versions[0][1]


def version_label(platform: str, version_token: str) -> Optional[str]:
    for label, token in VERSION_MAP.get(platform, []):
        if token == version_token:
            return label
    return None
