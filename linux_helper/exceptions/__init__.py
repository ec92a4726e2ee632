#!/usr/bin/env python3
"""
Linux Helper Exceptions Package

Unified exception hierarchy for the knowledge-base engine.
"""

# Base exceptions
from .base import HelperBaseError

# Store exceptions
from .store import (
    DuplicateRecordError,
    EmptyTitleError,
    RecordStoreError,
)

# Clipboard exceptions
from .clipboard import (
    ClipboardError,
    ClipboardTimeoutError,
    ClipboardUnavailableError,
)

# Config exceptions
from .config import (
    ConfigError,
    UnknownPageError,
)


__all__ = [
    # Base
    "HelperBaseError",
    # Store
    "RecordStoreError",
    "DuplicateRecordError",
    "EmptyTitleError",
    # Clipboard
    "ClipboardError",
    "ClipboardUnavailableError",
    "ClipboardTimeoutError",
    # Config
    "ConfigError",
    "UnknownPageError",
]
