"""Core domain models.

These dataclasses are shared across the core and adapters so that no module
depends on the raw JSON shape of the remote catalog or the UI widgets.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping, Optional, Tuple

# Platforms (editions) a command or catalog version belongs to.
PLATFORM_JAVA = "java"
PLATFORM_BEDROCK = "bedrock"
PLATFORM_EDUCATION = "education"
PLATFORM_NETEASE = "netease"
PLATFORMS = (PLATFORM_JAVA, PLATFORM_BEDROCK, PLATFORM_EDUCATION, PLATFORM_NETEASE)

# Shared filter sentinel for both command and entry categories.
ALL = "all"

ITEM_OR_BLOCK = "item_or_block"
ENTITY = "entity"
EFFECT = "effect"
STRUCTURE = "structure"
BIOME = "biome"
ENTRY_CATEGORIES = (ITEM_OR_BLOCK, ENTITY, EFFECT, STRUCTURE, BIOME)

BASIC = "basic"
CHEAT = "cheat"
ADMIN = "admin"
TECHNICAL = "technical"
COMMAND_CATEGORIES = (BASIC, CHEAT, ADMIN, TECHNICAL)

SOURCE_REMOTE = "remote"
SOURCE_FALLBACK = "fallback"

DEFAULT_NAMESPACE = "minecraft"


@dataclass(frozen=True)
class Entry:
    """One normalized identifier record (item, entity, effect, biome, structure)."""

    id: str
    display_name: str
    category: str
    namespace: Optional[str] = None

    @property
    def qualified_id(self) -> str:
        if not self.namespace:
            return self.id
        return f"{self.namespace}:{self.id}"


@dataclass(frozen=True)
class LegacySyntax:
    """Syntax a command used before its current form."""

    syntax: str
    version_range: str


@dataclass(frozen=True)
class VersionDetail:
    """Platform-specific syntax and metadata for one command."""

    syntax: str
    note: Optional[str] = None
    is_deprecated: bool = False
    deprecation_reason: Optional[str] = None
    version_range: Optional[str] = None
    permission: Optional[int] = None
    requirements: Tuple[str, ...] = ()
    legacy: Optional[LegacySyntax] = None


@dataclass(frozen=True)
class CommandRecord:
    """Static command reference row, keyed by platform in ``details``."""

    name: str
    description: str
    category: str
    details: Mapping[str, VersionDetail] = field(default_factory=dict)

    def detail_for(self, platform: str) -> Optional[VersionDetail]:
        return self.details.get(platform)


@dataclass(frozen=True)
class CatalogSnapshot:
    """Held catalog state, replaced wholesale after every synchronization.

    ``source`` is either ``remote`` or ``fallback``; ``error`` is only set for
    fallback snapshots and carries a user-facing message.
    """

    entries: Tuple[Entry, ...]
    source: str
    error: Optional[str] = None
    version: Optional[str] = None
    category: Optional[str] = None

    @property
    def is_fallback(self) -> bool:
        return self.source == SOURCE_FALLBACK

    def __len__(self) -> int:
        return len(self.entries)
