"""
ui/textual/widgets/record_entry.py
One record: a clickable header, its summary and, when open, its detail.
"""

from rich.markup import escape
from textual.app import ComposeResult
from textual.containers import Vertical
from textual.message import Message
from textual.widgets import Button, Label, Static

from linux_helper.engine.page import PageModel
from linux_helper.models.disclosure import DisclosurePolicy

from .code_block import CodeBlock


class RecordEntry(Vertical):
    """Accordion row or checklist step, depending on the page policy."""

    class Toggled(Message):
        """User clicked the record header."""

        def __init__(self, record_id: int):
            self.record_id = record_id
            super().__init__()

    def __init__(self, record, open_: bool, checklist: bool = False):
        classes = "record-entry"
        if open_:
            classes += " -open"
        if checklist:
            classes += " -checklist"
        super().__init__(classes=classes)
        self.record = record
        self.open = open_
        self.checklist = checklist

    def compose(self) -> ComposeResult:
        yield Button(escape(self._header_text()), classes="record-header")
        yield Static(escape(self.record.summary), classes="record-summary")
        # Checklist steps always show their commands.
        if self.open or self.checklist:
            with Vertical(classes="record-detail"):
                for block in self.record.detail:
                    yield Label(escape(block.heading), classes="detail-heading")
                    if block.text:
                        yield Static(escape(block.text), classes="detail-text")
                    if block.code:
                        yield CodeBlock(block.code, block.language)

    def set_open(self, open_: bool) -> None:
        """Refresh the header and state class without rebuilding the detail."""
        self.open = open_
        self.set_class(open_, "-open")
        self.query_one(".record-header", Button).label = escape(self._header_text())

    def _header_text(self) -> str:
        if self.checklist:
            mark = "☑" if self.open else "☐"
            return f"{mark} Step {self.record.id + 1}: {self.record.title}"
        chevron = "▾" if self.open else "▸"
        return f"{chevron} {self.record.title}"

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.has_class("record-header"):
            event.stop()
            self.post_message(self.Toggled(self.record.id))


class RecordList(Vertical):
    """Renders a PageModel's visible records."""

    async def rebuild(self, model: PageModel) -> None:
        checklist = model.spec.policy is DisclosurePolicy.INDEPENDENT_TOGGLE
        entries = self.entries()
        # Checklist detail never changes, so keep its code blocks mounted.
        if checklist and [e.record.id for e in entries] == [r.id for r in model.results]:
            for entry in entries:
                entry.set_open(model.is_expanded(entry.record.id))
            return

        await self.remove_children()
        if model.is_empty:
            await self.mount(Static(model.spec.empty_message, classes="empty-state"))
            return

        await self.mount_all(
            RecordEntry(record, model.is_expanded(record.id), checklist=checklist)
            for record in model.results
        )

    def entries(self) -> list[RecordEntry]:
        return list(self.query(RecordEntry))
