"""Clipboard adapter backed by the running Textual app."""

from __future__ import annotations

from textual.app import App


class TextualClipboard:
    """Satisfies ClipboardPort by delegating to ``App.copy_to_clipboard``."""

    def __init__(self, app: App) -> None:
        self._app = app

    def write(self, text: str) -> None:
        self._app.copy_to_clipboard(text)
