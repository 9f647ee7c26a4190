"""Shared formatting helpers for commands, entries and catalog status.

Keeping formatting here prevents drift between the CLI and the Textual
browser, regardless of which surface prints the result.
"""

from __future__ import annotations

from rich.markup import escape

from craftref.core.models import CatalogSnapshot, CommandRecord, Entry, VersionDetail

CATEGORY_LABELS = {
    "all": "All",
    "basic": "Basic",
    "cheat": "Cheat",
    "admin": "Admin",
    "technical": "Technical",
    "item_or_block": "Items & Blocks",
    "entity": "Entities",
    "effect": "Effects",
    "structure": "Structures",
    "biome": "Biomes",
}

PLATFORM_LABELS = {
    "java": "Java",
    "bedrock": "Bedrock",
    "education": "Education",
    "netease": "NetEase",
}


def category_label(category: str) -> str:
    return CATEGORY_LABELS.get(category, category)


def _detail_lines(detail: VersionDetail) -> list[str]:
    lines: list[str] = []
    if detail.version_range:
        lines.append(f"Versions: {detail.version_range}")
    if detail.permission is not None:
        lines.append(f"Permission level: {detail.permission}")
    if detail.requirements:
        lines.append(f"Requires: {', '.join(detail.requirements)}")
    if detail.is_deprecated:
        reason = detail.deprecation_reason or "no longer available"
        lines.append(f"Deprecated: {reason}")
    if detail.legacy:
        lines.append(f"Legacy ({detail.legacy.version_range}): {detail.legacy.syntax}")
    if detail.note:
        lines.append(f"Note: {detail.note}")
    return lines


def _format_command_plain(record: CommandRecord, detail: VersionDetail) -> str:
    lines = [
        f"/{record.name}  [{category_label(record.category)}]",
        f"  {record.description}",
        f"  {detail.syntax}",
    ]
    lines.extend(f"  {line}" for line in _detail_lines(detail))
    return "\n".join(lines)


def _format_command_rich(record: CommandRecord, detail: VersionDetail) -> str:
    colour = "red" if detail.is_deprecated else "green"
    lines = [
        f"[{colour}]{escape(category_label(record.category))}[/] [bold]/{escape(record.name)}[/bold]",
        escape(record.description),
        f"[yellow]{escape(detail.syntax)}[/yellow]",
    ]
    lines.extend(f"[dim]{escape(line)}[/dim]" for line in _detail_lines(detail))
    return "\n".join(lines)


def format_command(record: CommandRecord, platform: str, mode: str = "plain") -> str:
    """Return a command card for the given platform and output mode."""

    detail = record.detail_for(platform)
    if detail is None:
        raise ValueError(f"{record.name} has no syntax for {platform}")
    if mode == "plain":
        return _format_command_plain(record, detail)
    if mode == "rich":
        return _format_command_rich(record, detail)
    raise ValueError(f"Unsupported format mode: {mode}")


def format_entry(entry: Entry, mode: str = "plain") -> str:
    if mode == "plain":
        return f"{entry.display_name:<24} {entry.qualified_id}"
    if mode == "rich":
        return f"[bold]{escape(entry.display_name)}[/bold]  [yellow]{escape(entry.qualified_id)}[/yellow]"
    raise ValueError(f"Unsupported format mode: {mode}")


def format_snapshot_status(snapshot: CatalogSnapshot, loading: bool = False) -> str:
    """One-line status describing where the held catalog came from."""

    if loading:
        return "Loading catalog..."
    if snapshot.is_fallback:
        if snapshot.error:
            return f"{snapshot.error} (showing local fallback data)"
        return "Showing local fallback data"
    return f"{len(snapshot)} entries from PrismarineJS minecraft-data ({snapshot.version}), namespace minecraft:"


def format_hidden_count(hidden: int) -> str:
    if hidden <= 0:
        return ""
    return f"... {hidden} more, refine the search to narrow down"
