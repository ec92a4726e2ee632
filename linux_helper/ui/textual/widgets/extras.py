"""
ui/textual/widgets/extras.py
Static tip cards shown below a page's records.
"""

from rich.markup import escape
from textual.app import ComposeResult
from textual.containers import Vertical
from textual.widgets import Label, Static

from linux_helper.engine.page import PageExtra


class ExtraSection(Vertical):
    """Heading plus one card per row. Not searched, never collapses."""

    def __init__(self, extra: PageExtra, **kwargs):
        super().__init__(classes="extra-section", **kwargs)
        self.extra = extra

    def compose(self) -> ComposeResult:
        yield Label(escape(self.extra.heading), classes="extra-heading")
        for title, lines in self.extra.items():
            with Vertical(classes="extra-card"):
                yield Label(escape(title), classes="extra-title")
                yield Static(escape("\n".join(lines)), classes="extra-body")
