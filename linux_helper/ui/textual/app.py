"""
ui/textual/app.py
The Main Application Container.
"""

import logging
from typing import Optional

from textual.app import App
from textual.binding import Binding

from linux_helper.config.settings import Settings, get_settings
from linux_helper.content.pages import GUIDE_SLUGS, HOME, get_page
from linux_helper.utils.clipboard import ClipboardBackend, resolve_backend

from .screens.home import HomeScreen
from .screens.page import PageScreen

logger = logging.getLogger(__name__)


class LinuxHelperApp(App):
    """
    The Linux Helper TUI.
    """

    CSS_PATH = "styles/helper.tcss"
    TITLE = "Linux Helper"

    BINDINGS = [
        Binding("ctrl+c", "quit", "Quit"),
        Binding("h", "home", "Home"),
        Binding("1", "open_page('installation')", "Install", show=False),
        Binding("2", "open_page('terminal')", "Terminal", show=False),
        Binding("3", "open_page('errors')", "Errors", show=False),
        Binding("4", "open_page('troubleshooting')", "Checklist", show=False),
    ]

    def __init__(
        self,
        settings: Optional[Settings] = None,
        start_page: Optional[str] = None,
        query: str = "",
        clipboard_backend: Optional[ClipboardBackend] = None,
    ):
        super().__init__()
        self.settings = settings or get_settings()
        self.start_page = start_page or self.settings.start_page
        self.initial_query = query
        self.clipboard_backend = clipboard_backend or resolve_backend(
            self.settings, app=self
        )
        # Fail before the terminal is taken over.
        get_page(self.start_page)

    def on_mount(self) -> None:
        self.push_screen(HomeScreen())
        if self.start_page != HOME:
            self.open_page(self.start_page, self.initial_query)

    def open_page(self, slug: str, query: str = "") -> None:
        """Show ``slug`` on top of the home screen with a fresh page state."""
        spec = get_page(slug)
        self._pop_to_home()
        if slug == HOME:
            return
        logger.debug("Opening page %s", slug)
        self.sub_title = spec.title
        self.push_screen(PageScreen(spec, query=query))

    def _pop_to_home(self) -> None:
        # screen_stack[0] is the default screen, [1] is HomeScreen.
        while len(self.screen_stack) > 2:
            self.pop_screen()
        self.sub_title = ""

    def action_home(self) -> None:
        self._pop_to_home()

    def action_open_page(self, slug: str) -> None:
        if slug in GUIDE_SLUGS:
            self.open_page(slug)
