"""Modal dialogs for the Textual browser."""

from __future__ import annotations

from typing import Any

from textual import on, work
from textual.app import ComposeResult
from textual.containers import Container, Horizontal, VerticalScroll
from textual.screen import ModalScreen
from textual.widgets import Button, Input, Static

from craftref.core.assistant import ask
from craftref.core.ports import AssistantPort


class ClearHistoryScreen(ModalScreen[bool]):
    """Confirm before wiping the search history."""

    def compose(self) -> ComposeResult:
        yield Container(
            Static("Clear history?", classes="modal-title"),
            Static("All remembered search terms will be removed.", classes="modal-body"),
            Horizontal(
                Button("Clear", id="clear-confirm", variant="error"),
                Button("Cancel", id="clear-cancel"),
                classes="modal-actions",
            ),
            classes="modal-dialog modal-dialog--confirm",
        )

    def on_button_pressed(self, event: Button.Pressed) -> None:
        self.dismiss(event.button.id == "clear-confirm")


class AskScreen(ModalScreen[None]):
    """Free-text question to the AI assistant for the current edition."""

    BINDINGS = [("escape", "close", "Close")]

    def __init__(self, assistant: AssistantPort, platform: str, version: str, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self._assistant = assistant
        self._platform = platform
        self._version = version

    def compose(self) -> ComposeResult:
        yield Container(
            Static(f"Ask about {self._platform} {self._version}", classes="modal-title"),
            Input(placeholder="How do I give myself a diamond sword?", id="ask-input"),
            VerticalScroll(Static("", id="ask-answer", markup=False), id="ask-answer-box"),
            Horizontal(
                Button("Ask", id="ask-submit", variant="success"),
                Button("Close", id="ask-close"),
                classes="modal-actions",
            ),
            classes="modal-dialog modal-dialog--ask",
        )

    @on(Input.Submitted, "#ask-input")
    @on(Button.Pressed, "#ask-submit")
    def _on_submit(self) -> None:
        question = self.query_one("#ask-input", Input).value
        if not question.strip():
            return
        self.query_one("#ask-submit", Button).disabled = True
        self.query_one("#ask-answer", Static).update("Thinking...")
        self._run_question(question)

    @on(Button.Pressed, "#ask-close")
    def _on_close(self) -> None:
        self.action_close()

    def action_close(self) -> None:
        self.dismiss(None)

    @work(exclusive=True)
    async def _run_question(self, question: str) -> None:
        answer = await ask(self._assistant, question, self._platform, self._version)
        self.query_one("#ask-answer", Static).update(answer or "")
        self.query_one("#ask-submit", Button).disabled = False
