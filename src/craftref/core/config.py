"""Core configuration dataclasses.

We keep config parsing outside the core, but these dataclasses define the
shape the core expects so adapters and app layers can build safely.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple

from craftref.core.locator import DEFAULT_BASE_URL

DEFAULT_MAX_RESULTS = 450


@dataclass(frozen=True)
class CatalogConfig:
    """Remote catalog location and read timeout."""

    base_url: str = DEFAULT_BASE_URL
    timeout_seconds: float = 15.0


@dataclass(frozen=True)
class DisplayConfig:
    """Caller-side display limits."""

    max_results: int = DEFAULT_MAX_RESULTS


@dataclass(frozen=True)
class AssistantConfig:
    """Gemini models tried in order, and the per-request timeout."""

    models: Tuple[str, ...] = field(default=("gemini-2.0-flash", "gemini-1.5-flash"))
    timeout_seconds: float = 30.0
