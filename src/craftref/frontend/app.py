"""Main Textual app for the craftref browser."""

from __future__ import annotations

from typing import Any, Awaitable, Optional

from rich.markup import escape
from rich.text import Text
from textual import on, work
from textual.app import App, ComposeResult
from textual.containers import Container, Horizontal, Vertical
from textual.widgets import Button, Footer, Input, OptionList, Select, Static, Switch, Tab, Tabs
from textual.widgets.option_list import Option

from craftref.adapters.formatting import (
    PLATFORM_LABELS,
    category_label,
    format_command,
    format_entry,
    format_hidden_count,
    format_snapshot_status,
)
from craftref.client import build_assistant, build_session
from craftref.core.locator import VERSION_MAP, default_version, versions_for
from craftref.core.models import ALL, COMMAND_CATEGORIES, ENTRY_CATEGORIES, CatalogSnapshot
from craftref.core.session import VIEW_COMMANDS, VIEW_IDS

from .clipboard import TextualClipboard
from .constants import COMMAND_OPTION_PREFIX, DIAMOND_BLUE, ENTRY_OPTION_PREFIX, GRASS_GREEN
from .modals import AskScreen, ClearHistoryScreen


class BrowserApp(App):
    """Command wiki and live ID library sharing one selection sidebar."""

    BINDINGS = [
        ("ctrl+f", "focus_search", "Search"),
        ("ctrl+a", "ask", "Ask AI"),
        ("q", "quit", "Quit"),
    ]

    CSS_PATH = "app.tcss"

    def __init__(self, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.session = build_session(TextualClipboard(self))
        self._assistant = build_assistant()
        self._visible_commands: list = []
        self._visible_entries: list = []

    def compose(self) -> ComposeResult:
        session = self.session
        with Container(id="header"):
            yield Static(self._title_text(), id="title")
            yield Static("Minecraft command wiki & dynamic ID library", classes="subtle")

        yield Tabs(
            Tab("Command wiki", id=VIEW_COMMANDS),
            Tab("ID library (live)", id=VIEW_IDS),
            active=session.view,
            id="tabs",
        )

        with Horizontal(id="body"):
            with Vertical(id="sidebar"):
                yield Static("Platform", classes="form-label")
                yield Select(
                    [(label, platform) for platform, label in PLATFORM_LABELS.items() if platform in VERSION_MAP],
                    value=session.platform,
                    allow_blank=False,
                    id="platform",
                )
                yield Static("Game version", classes="form-label ids-only")
                yield Select(
                    versions_for(session.platform),
                    value=session.version,
                    allow_blank=False,
                    id="version",
                    classes="ids-only",
                )
                yield Static("Category", classes="form-label")
                yield Select(
                    [(category_label(category), category) for category in (ALL,) + COMMAND_CATEGORIES],
                    value=ALL,
                    allow_blank=False,
                    id="command-category",
                    classes="commands-only",
                )
                yield Select(
                    [(category_label(category), category) for category in (ALL,) + ENTRY_CATEGORIES],
                    value=ALL,
                    allow_blank=False,
                    id="id-category",
                    classes="ids-only",
                )
                with Horizontal(id="deprecated-row", classes="commands-only"):
                    yield Static("Removed only", classes="form-label")
                    yield Switch(value=False, id="deprecated")
                yield Static("Quick filter", classes="form-label")
                yield Input(placeholder="Type a keyword...", id="search")
                yield Static("History", classes="form-label")
                yield OptionList(id="suggestions")
                with Horizontal(id="sidebar-actions"):
                    yield Button("Clear history", id="clear-history", variant="error")
                    yield Button("Ask AI", id="ask", variant="primary")
            with Vertical(id="main"):
                yield Static("", id="status")
                yield OptionList(id="results")
                yield Static("", id="hidden")
        yield Footer()

    def on_mount(self) -> None:
        self._apply_view_visibility(self.session.view)
        self._render_all()

    def on_tabs_tab_activated(self, event: Tabs.TabActivated) -> None:
        view = event.tab.id or VIEW_COMMANDS
        self._run_selection(self.session.select_view(view))
        self._apply_view_visibility(view)

    @on(Select.Changed, "#platform")
    def _on_platform_changed(self, event: Select.Changed) -> None:
        if event.value == Select.BLANK or event.value == self.session.platform:
            return
        # Session state changes once the worker runs, so derive the versions from the event.
        platform = str(event.value)
        self._run_selection(self.session.select_platform(platform))
        version_select = self.query_one("#version", Select)
        with version_select.prevent(Select.Changed):
            version_select.set_options(versions_for(platform))
            version_select.value = default_version(platform)

    @on(Select.Changed, "#version")
    def _on_version_changed(self, event: Select.Changed) -> None:
        if event.value == Select.BLANK or event.value == self.session.version:
            return
        self._run_selection(self.session.select_version(str(event.value)))

    @on(Select.Changed, "#id-category")
    def _on_id_category_changed(self, event: Select.Changed) -> None:
        if event.value == Select.BLANK or event.value == self.session.id_category:
            return
        self._run_selection(self.session.select_id_category(str(event.value)))

    @on(Select.Changed, "#command-category")
    def _on_command_category_changed(self, event: Select.Changed) -> None:
        if event.value == Select.BLANK:
            return
        self.session.select_command_category(str(event.value))
        self._render_results()

    @on(Switch.Changed, "#deprecated")
    def _on_deprecated_changed(self, event: Switch.Changed) -> None:
        self.session.set_show_deprecated(event.value)
        self._render_results()

    @on(Input.Changed, "#search")
    def _on_search_changed(self, event: Input.Changed) -> None:
        self.session.set_search(event.value)
        self._render_results()
        self._render_suggestions()

    @on(Input.Submitted, "#search")
    def _on_search_submitted(self) -> None:
        self.session.submit_search()
        self._render_suggestions()

    @on(OptionList.OptionSelected, "#suggestions")
    def _on_suggestion_selected(self, event: OptionList.OptionSelected) -> None:
        term = str(event.option.id or "")
        if not term:
            return
        self.session.apply_suggestion(term)
        self.query_one("#search", Input).value = term

    @on(OptionList.OptionSelected, "#results")
    def _on_result_selected(self, event: OptionList.OptionSelected) -> None:
        option_id = event.option.id or ""
        if option_id.startswith(COMMAND_OPTION_PREFIX):
            record = self._visible_commands[int(option_id[len(COMMAND_OPTION_PREFIX) :])]
            copied = self.session.copy_command(record)
        elif option_id.startswith(ENTRY_OPTION_PREFIX):
            entry = self._visible_entries[int(option_id[len(ENTRY_OPTION_PREFIX) :])]
            copied = self.session.copy_entry(entry)
        else:
            return
        self.notify(f"Copied: {escape(copied)}")
        self._render_suggestions()

    @on(Button.Pressed, "#clear-history")
    def _on_clear_history(self) -> None:
        self.push_screen(ClearHistoryScreen(), self._handle_clear_choice)

    @on(Button.Pressed, "#ask")
    def _on_ask(self) -> None:
        self.action_ask()

    def action_ask(self) -> None:
        self.push_screen(AskScreen(self._assistant, self.session.platform, self.session.version))

    def action_focus_search(self) -> None:
        self.query_one("#search", Input).focus()

    def _handle_clear_choice(self, confirmed: Optional[bool]) -> None:
        if confirmed:
            self.session.clear_history()
            self._render_suggestions()

    @work(group="catalog")
    async def _run_selection(self, action: Awaitable[Optional[CatalogSnapshot]]) -> None:
        # Overlapping workers are fine: the synchronizer only commits the latest request.
        if self.session.view == VIEW_IDS:
            self.query_one("#status", Static).update(format_snapshot_status(self.session.snapshot, loading=True))
        await action
        self._render_all()

    def _apply_view_visibility(self, view: str) -> None:
        is_ids = view == VIEW_IDS
        for widget in self.query(".ids-only"):
            widget.display = is_ids
        for widget in self.query(".commands-only"):
            widget.display = not is_ids

    def _render_all(self) -> None:
        self._render_results()
        self._render_suggestions()

    def _render_results(self) -> None:
        session = self.session
        results = self.query_one("#results", OptionList)
        status = self.query_one("#status", Static)
        hidden_label = self.query_one("#hidden", Static)
        results.clear_options()

        if session.view == VIEW_COMMANDS:
            self._visible_commands = session.visible_commands()
            heading = "Removed commands" if session.show_deprecated else "Commands"
            status.update(f"{heading} for {PLATFORM_LABELS.get(session.platform, session.platform)}")
            results.add_options(
                [
                    Option(Text.from_markup(format_command(record, session.platform, mode="rich")), id=f"{COMMAND_OPTION_PREFIX}{index}")
                    for index, record in enumerate(self._visible_commands)
                ]
            )
            hidden_label.update("" if self._visible_commands else "No matching commands")
            return

        self._visible_entries, hidden = session.visible_entries()
        status.update(format_snapshot_status(session.snapshot, loading=session.loading))
        results.add_options(
            [
                Option(Text.from_markup(format_entry(entry, mode="rich")), id=f"{ENTRY_OPTION_PREFIX}{index}")
                for index, entry in enumerate(self._visible_entries)
            ]
        )
        if not self._visible_entries and not session.loading:
            hidden_label.update("No data for this version or category")
        else:
            hidden_label.update(format_hidden_count(hidden))

    def _render_suggestions(self) -> None:
        suggestions = self.query_one("#suggestions", OptionList)
        suggestions.clear_options()
        suggestions.add_options([Option(Text(term), id=term) for term in self.session.suggestions()])

    @staticmethod
    def _title_text() -> Text:
        return Text.assemble(
            ("CRAFT", GRASS_GREEN),
            ("REF", DIAMOND_BLUE),
            (" > Command & ID browser", "bold"),
        )

