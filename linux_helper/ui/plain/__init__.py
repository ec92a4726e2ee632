"""Non-interactive Rich output."""

from .renderer import PlainRenderer
from .styles import HELPER_THEME, make_console

__all__ = ["HELPER_THEME", "PlainRenderer", "make_console"]
