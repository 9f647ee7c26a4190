"""Filtering of the command table, the catalog and the search history."""

from __future__ import annotations

from typing import Iterable, List, Sequence, Tuple, TypeVar

from craftref.core.config import DEFAULT_MAX_RESULTS
from craftref.core.models import ALL, CatalogSnapshot, CommandRecord, Entry

T = TypeVar("T")


def filter_commands(
    table: Iterable[CommandRecord],
    platform: str,
    search_text: str,
    category_filter: str,
    show_deprecated_only: bool,
) -> List[CommandRecord]:
    """Return commands visible for a platform, preserving table order.

    Matching logic:
    - The command must have a detail for ``platform``.
    - Name matching is case-insensitive; description matching is literal.
    - Deprecated commands are shown only in the deprecated view and vice versa.
    """

    lowered = search_text.lower()
    results: List[CommandRecord] = []
    for record in table:
        detail = record.detail_for(platform)
        if detail is None:
            continue
        if search_text and lowered not in record.name.lower() and search_text not in record.description:
            continue
        if detail.is_deprecated != show_deprecated_only:
            continue
        if category_filter != ALL and record.category != category_filter:
            continue
        results.append(record)
    return results


def filter_entries(snapshot: CatalogSnapshot, search_text: str, category_filter: str) -> List[Entry]:
    """Return snapshot entries matching the search text and category."""

    lowered = search_text.lower()
    results: List[Entry] = []
    for entry in snapshot.entries:
        if search_text and lowered not in entry.id.lower() and lowered not in entry.display_name.lower():
            continue
        if category_filter != ALL and entry.category != category_filter:
            continue
        results.append(entry)
    return results


def suggest(history: Sequence[str], search_text: str) -> List[str]:
    """Return history suggestions for the current search text.

    A blank search suggests the whole history. Otherwise the exact current
    term (ignoring case) is never suggested back.
    """

    if not search_text.strip():
        return list(history)
    lowered = search_text.lower()
    return [term for term in history if lowered in term.lower() and term.lower() != lowered]


def cap_results(results: Sequence[T], limit: int = DEFAULT_MAX_RESULTS) -> Tuple[List[T], int]:
    """Split results into the displayed prefix and the hidden remainder count."""

    visible = list(results[:limit])
    return visible, max(len(results) - limit, 0)
