"""Application entry point for the craftref browser."""

from __future__ import annotations

import argparse
import asyncio
import logging
import os
from logging.handlers import RotatingFileHandler
from typing import Optional

from art import tprint

from craftref import settings
from craftref.adapters.formatting import (
    format_command,
    format_entry,
    format_hidden_count,
    format_snapshot_status,
)
from craftref.client import build_assistant, build_history, build_session
from craftref.core.assistant import ask
from craftref.core.locator import VERSION_MAP, default_version
from craftref.core.models import ALL, COMMAND_CATEGORIES, ENTRY_CATEGORIES
from craftref.core.session import VIEW_IDS

NAME = "CRAFTREF"
FONT = "tarty-1"


def _print_banner() -> None:
    tprint(NAME, FONT, space=1)


class _RedactingFormatter(logging.Formatter):
    def __init__(self, secrets: list[str], fmt: str, datefmt: Optional[str] = None) -> None:
        super().__init__(fmt=fmt, datefmt=datefmt)
        self._secrets = [secret for secret in secrets if secret]

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        for secret in self._secrets:
            message = message.replace(secret, "***")
        return message


def _collect_redaction_values(config: dict) -> list[str]:
    redact_cfg = config.get("redact", {}) if config else {}
    if not redact_cfg.get("enabled", True):
        return []
    values = []
    for name in redact_cfg.get("patterns", ["GEMINI_API_KEY"]):
        value = os.getenv(name)
        if value:
            values.append(value)
    return sorted(set(values), key=len, reverse=True)


def _configure_logging() -> None:
    config = settings.LOGGING or {}
    if not config.get("enabled", False):
        return

    level_name = str(config.get("level", "INFO")).upper()
    level = getattr(logging, level_name, logging.INFO)

    fmt = "%(asctime)s %(levelname)s %(name)s: %(message)s"
    datefmt = "%Y-%m-%d %H:%M:%S"
    formatter = _RedactingFormatter(_collect_redaction_values(config), fmt=fmt, datefmt=datefmt)

    handlers: list[logging.Handler] = []

    if config.get("console", False):
        console_handler = logging.StreamHandler()
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        handlers.append(console_handler)

    file_cfg = config.get("file", {})
    if file_cfg.get("enabled", False):
        path = file_cfg.get("path", "logs/craftref.log")
        if not os.path.isabs(path):
            path = os.path.join(settings.PROJECT_ROOT, path)
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)

        max_bytes = int(file_cfg.get("max_bytes", 5 * 1024 * 1024))
        backup_count = int(file_cfg.get("backup_count", 5))
        file_handler = RotatingFileHandler(
            path,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    if not handlers:
        return

    logging.basicConfig(level=level, handlers=handlers)


class _PrintClipboard:
    """CLI stand-in for the clipboard: the copied text goes to stdout."""

    def write(self, text: str) -> None:
        print(text)


def _browse() -> None:
    from craftref.frontend.app import BrowserApp

    BrowserApp().run()


def _commands(args: argparse.Namespace) -> None:
    session = build_session(_PrintClipboard(), platform=args.platform)
    session.select_command_category(args.category)
    session.set_search(args.search)
    session.set_show_deprecated(args.deprecated)
    session.submit_search()

    records = session.visible_commands()
    if not records:
        print("No matching commands.")
        return
    print("\n\n".join(format_command(record, session.platform) for record in records))


def _ids(args: argparse.Namespace) -> None:
    session = build_session(_PrintClipboard(), platform=args.platform)
    session.set_search(args.search)

    async def _load() -> None:
        if args.version:
            await session.select_version(args.version)
        await session.select_id_category(args.category)
        await session.select_view(VIEW_IDS)

    asyncio.run(_load())
    session.submit_search()

    print(format_snapshot_status(session.snapshot))
    entries, hidden = session.visible_entries()
    if args.copy:
        for entry in entries:
            if entry.id == args.copy:
                session.copy_entry(entry)
                return
        print(f"No entry with id {args.copy}")
        return
    if not entries:
        print("No data for this version or category.")
        return
    for entry in entries:
        print(format_entry(entry))
    if hidden:
        print(format_hidden_count(hidden))


def _history(args: argparse.Namespace) -> None:
    history = build_history()
    if args.clear:
        history.clear()
        print("History cleared.")
        return
    for index, term in enumerate(history.entries, start=1):
        print(f"{index}. {term}")


def _ask(args: argparse.Namespace) -> None:
    version = args.version or default_version(args.platform)
    answer = asyncio.run(ask(build_assistant(), args.question, args.platform, version))
    print(answer or "Please enter a question.")


def _add_platform(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--platform", choices=sorted(VERSION_MAP), default=settings.DEFAULT_PLATFORM)


def main(argv: Optional[list[str]] = None) -> None:
    parser = argparse.ArgumentParser(prog="craftref")
    subparsers = parser.add_subparsers(dest="command")

    subparsers.add_parser("browse", help="Open the interactive browser")

    commands = subparsers.add_parser("commands", help="Search the command reference")
    _add_platform(commands)
    commands.add_argument("--search", default="")
    commands.add_argument("--category", choices=(ALL,) + COMMAND_CATEGORIES, default=ALL)
    commands.add_argument("--deprecated", action="store_true", help="Show removed commands instead")

    ids = subparsers.add_parser("ids", help="Look up identifiers for a game version")
    _add_platform(ids)
    ids.add_argument("--version", help="Version token, e.g. pc/1.20.1")
    ids.add_argument("--category", choices=(ALL,) + ENTRY_CATEGORIES, default=ALL)
    ids.add_argument("--search", default="")
    ids.add_argument("--copy", help="Print one id and remember it in the history")

    history = subparsers.add_parser("history", help="Show the search history")
    history.add_argument("--clear", action="store_true")

    assistant = subparsers.add_parser("ask", help="Ask the AI assistant a question")
    _add_platform(assistant)
    assistant.add_argument("--version", help="Version token used as context")
    assistant.add_argument("question")

    args = parser.parse_args(argv)
    _configure_logging()
    logging.getLogger(__name__).info("Starting craftref (%s)", args.command or "browse")

    if args.command == "commands":
        _commands(args)
    elif args.command == "ids":
        _ids(args)
    elif args.command == "history":
        _history(args)
    elif args.command == "ask":
        _ask(args)
    else:
        _print_banner()
        _browse()


if __name__ == "__main__":
    main()
