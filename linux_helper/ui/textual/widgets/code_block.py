"""
ui/textual/widgets/code_block.py
A code block with a Copy button that reads "Copied!" for a short while.
"""

import logging
from typing import Optional

from rich.syntax import Syntax
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.widgets import Button, Label, Static

from linux_helper.utils.clipboard import CopyResult, copy_and_acknowledge
from linux_helper.utils.transient import DEFAULT_DURATION, TransientFlag

logger = logging.getLogger(__name__)

COPY_LABEL = "Copy"
COPIED_LABEL = "Copied!"


class _TimerHandle:
    """Adapts a Textual Timer to the cancel() interface TransientFlag expects."""

    def __init__(self, timer):
        self._timer = timer

    def cancel(self) -> None:
        self._timer.stop()


class CodeBlock(Vertical):
    """Language label, copy button and the code itself."""

    def __init__(self, code: str, language: str = "bash", **kwargs):
        super().__init__(classes="code-block", **kwargs)
        self.code = code
        self.language = language
        self.flag = TransientFlag(
            duration=DEFAULT_DURATION,
            scheduler=self._schedule,
            on_change=self._on_flag_change,
        )
        self._button: Optional[Button] = None

    def compose(self) -> ComposeResult:
        with Horizontal(classes="code-header"):
            yield Label(self.language, classes="code-language")
            yield Button(COPY_LABEL, classes="copy-button")
        yield Static(
            Syntax(self.code, self.language, word_wrap=True, line_numbers=False),
            classes="code-body",
        )

    def on_mount(self) -> None:
        settings = getattr(self.app, "settings", None)
        if settings is not None:
            self.flag.duration = settings.copy_ack_seconds
        self._button = self.query_one(".copy-button", Button)

    def on_unmount(self) -> None:
        self.flag.close()

    def _schedule(self, delay, callback) -> _TimerHandle:
        return _TimerHandle(self.set_timer(delay, callback))

    def _on_flag_change(self, value: bool) -> None:
        if self._button is not None:
            self._button.label = COPIED_LABEL if value else COPY_LABEL

    async def copy(self) -> CopyResult:
        """Copy the code verbatim; warn instead of acknowledging on failure."""
        backend = getattr(self.app, "clipboard_backend", None)
        result = await copy_and_acknowledge(self.code, self.flag, backend)
        if not result.ok and result.error is not None:
            self.notify(result.error.user_hint, title="Clipboard", severity="warning")
        return result

    async def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.has_class("copy-button"):
            event.stop()
            await self.copy()
