"""
ui/textual/screens/home.py
Landing screen listing the guides.
"""

from rich.markup import escape
from textual.app import ComposeResult
from textual.containers import Vertical, VerticalScroll
from textual.screen import Screen
from textual.widgets import Button, Footer, Header, Static

from linux_helper.content.pages import GUIDE_SLUGS, HOME, PAGES


class HomeScreen(Screen):
    """Home page: one button per guide."""

    def compose(self) -> ComposeResult:
        home = PAGES[HOME]
        yield Header()
        with VerticalScroll(id="home"):
            yield Static(escape(home.title), id="page-title")
            yield Static(escape(home.blurb), id="page-blurb")
            for number, slug in enumerate(GUIDE_SLUGS, 1):
                page = PAGES[slug]
                with Vertical(classes="guide-card"):
                    yield Button(
                        f"{number}. {escape(page.title)}",
                        name=slug,
                        classes="guide-link",
                    )
                    yield Static(escape(page.blurb), classes="guide-blurb")
        yield Footer()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.has_class("guide-link") and event.button.name:
            self.app.open_page(event.button.name)
