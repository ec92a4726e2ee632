"""Clipboard, transient flag and logging helpers."""

from .clipboard import (
    ClipboardBackend,
    CommandClipboard,
    CopyResult,
    TerminalClipboard,
    copy_and_acknowledge,
    copy_text,
    resolve_backend,
)
from .logger import setup_logging
from .transient import TransientFlag

__all__ = [
    "ClipboardBackend",
    "CommandClipboard",
    "CopyResult",
    "TerminalClipboard",
    "TransientFlag",
    "copy_and_acknowledge",
    "copy_text",
    "resolve_backend",
    "setup_logging",
]
