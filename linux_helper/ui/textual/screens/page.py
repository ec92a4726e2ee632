"""
ui/textual/screens/page.py
A record page: optional search box, result summary, records and tip sections.
"""

import logging

from rich.markup import escape
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import VerticalScroll
from textual.screen import Screen
from textual.widgets import Footer, Header, Input, Label, Static

from linux_helper.engine.page import PageModel, PageSpec
from linux_helper.models.disclosure import DisclosurePolicy

from ..widgets.extras import ExtraSection
from ..widgets.record_entry import RecordEntry, RecordList

logger = logging.getLogger(__name__)


class PageScreen(Screen):
    """Owns one PageModel for the life of the page view."""

    BINDINGS = [
        Binding("slash", "focus_search", "Search", show=False),
    ]

    def __init__(self, spec: PageSpec, query: str = ""):
        super().__init__(name=spec.slug)
        self.model = PageModel(spec)
        if query:
            self.model.set_query(query)

    def compose(self) -> ComposeResult:
        spec = self.model.spec
        yield Header()
        yield Static(escape(spec.title), id="page-title")
        yield Static(escape(spec.blurb), id="page-blurb")
        if spec.searchable:
            yield Input(
                value=self.model.query,
                placeholder=f"Search {spec.noun}s...",
                id="search",
            )
        yield Label("", id="page-status")
        with VerticalScroll(id="page-body"):
            yield RecordList(id="records")
            for extra in spec.extras:
                yield ExtraSection(extra)
        yield Footer()

    async def on_mount(self) -> None:
        await self.refresh_records()

    async def refresh_records(self) -> None:
        await self.query_one(RecordList).rebuild(self.model)
        self.query_one("#page-status", Label).update(self._status_text())

    def _status_text(self) -> str:
        if self.model.spec.policy is DisclosurePolicy.INDEPENDENT_TOGGLE:
            checked, total = self.model.progress
            return f"{checked}/{total} steps checked"
        return self.model.summary or ""

    async def on_input_changed(self, event: Input.Changed) -> None:
        if event.input.id != "search":
            return
        if event.value == self.model.query:
            return
        self.model.set_query(event.value)
        await self.refresh_records()

    async def on_record_entry_toggled(self, event: RecordEntry.Toggled) -> None:
        self.model.toggle(event.record_id)
        await self.refresh_records()

    def action_focus_search(self) -> None:
        if self.model.spec.searchable:
            self.query_one("#search", Input).focus()
