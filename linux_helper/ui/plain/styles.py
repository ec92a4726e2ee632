"""
ui/plain/styles.py
Console theme for one-shot output.
"""

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.style import Style
from rich.theme import Theme

HELPER_THEME = Theme(
    {
        "helper.title": Style(color="green3", bold=True),
        "helper.text": "grey85",
        "helper.muted": "grey58",
        "helper.border": "green4",
        "helper.code": "bright_white on grey11",
        "helper.accent": Style(color="dark_orange", bold=True),
        "success": "bright_green",
        "error": Style(color="red3", bold=True),
        "warning": Style(color="gold1", bold=True),
    }
)


def make_console(**kwargs) -> Console:
    return Console(theme=HELPER_THEME, **kwargs)


def create_record_panel(content, title: str, expanded: bool) -> Panel:
    """Expanded records get the accent border, collapsed ones stay muted."""
    return Panel(
        content,
        title=f"[helper.title]{title}[/]",
        title_align="left",
        border_style="helper.accent" if expanded else "helper.border",
        box=box.ROUNDED,
        padding=(0, 1),
    )
