#!/usr/bin/env python3
"""
Clipboard Exception Definitions for Linux Helper

These are returned inside a CopyResult rather than raised to the page.
"""

from linux_helper.exceptions.base import HelperBaseError


class ClipboardError(HelperBaseError):
    """Raised when the clipboard write fails."""

    def __init__(self, message, command=None, original_error=None, user_hint=None):
        super().__init__(
            message,
            original_error=original_error,
            user_hint=user_hint or "Could not copy to the clipboard.",
            details={"command": command},
        )
        self.command = command


class ClipboardUnavailableError(ClipboardError):
    """The clipboard command does not exist on this system."""

    def __init__(self, command, original_error=None):
        super().__init__(
            f"Clipboard command not found: {command}",
            command=command,
            original_error=original_error,
            user_hint="No clipboard tool found. Set CLIPBOARD_COPY_CMD.",
        )


class ClipboardTimeoutError(ClipboardError):
    """The clipboard command did not finish in time."""

    def __init__(self, command, timeout, original_error=None):
        super().__init__(
            f"Clipboard command timed out after {timeout}s: {command}",
            command=command,
            original_error=original_error,
            user_hint="The clipboard did not respond. Try again.",
        )
        self.timeout = timeout
