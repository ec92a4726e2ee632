"""
Textual TUI for Linux Helper
============================

Interactive pages: search, expandable entries, checklist toggles and
per-block copy buttons.
"""

from .app import LinuxHelperApp

__all__ = ["LinuxHelperApp"]
