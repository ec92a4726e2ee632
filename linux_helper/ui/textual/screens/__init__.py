"""Textual screens."""

from .home import HomeScreen
from .page import PageScreen

__all__ = ["HomeScreen", "PageScreen"]
