#!/usr/bin/env python3
"""
Clipboard Export - copy a literal text block to the system clipboard.

Text is written verbatim. Failures come back as a CopyResult so the caller
can tell the user; nothing is raised to the page.
"""

import asyncio
import logging
import shlex
import subprocess
from dataclasses import dataclass
from typing import Optional, Protocol

from linux_helper.exceptions.clipboard import (
    ClipboardError,
    ClipboardTimeoutError,
    ClipboardUnavailableError,
)

from .transient import TransientFlag

logger = logging.getLogger(__name__)
_clipboard_lock = asyncio.Lock()


@dataclass(frozen=True, slots=True)
class CopyResult:
    """Outcome of one copy action."""

    ok: bool
    length: int = 0
    error: Optional[ClipboardError] = None


class ClipboardBackend(Protocol):
    async def copy(self, text: str) -> CopyResult: ...


def _get_command_args(command_str: str) -> list:
    """Safely parse command string into list for subprocess."""
    return shlex.split(command_str)


def _unsafe_write_clipboard(text: str, command: str, timeout: float) -> None:
    """Writes to the system clipboard without locking."""
    try:
        with subprocess.Popen(
            _get_command_args(command),
            shell=False,
            stdin=subprocess.PIPE,
            text=True,
            stderr=subprocess.PIPE,
        ) as process:
            try:
                _, stderr = process.communicate(input=text, timeout=timeout)
            except subprocess.TimeoutExpired:
                process.kill()
                process.communicate()
                raise

            if process.returncode != 0:
                raise ClipboardError(
                    f"Clipboard copy failed with code {process.returncode}: {stderr}",
                    command=command,
                )

    except subprocess.TimeoutExpired as e:
        raise ClipboardTimeoutError(command, timeout, original_error=e) from e
    except FileNotFoundError as e:
        raise ClipboardUnavailableError(command, original_error=e) from e
    except OSError as e:
        raise ClipboardError(
            f"Unexpected clipboard write error: {e}", command=command, original_error=e
        ) from e


class CommandClipboard:
    """Pipes text into a clipboard command such as ``pbcopy`` or ``xclip``."""

    def __init__(self, command: str, timeout: float = 2.0):
        self.command = command
        self.timeout = timeout

    async def copy(self, text: str) -> CopyResult:
        try:
            async with _clipboard_lock:
                await asyncio.to_thread(
                    _unsafe_write_clipboard, text, self.command, self.timeout
                )
        except ClipboardError as e:
            logger.error("Error copying to clipboard: %s", e.message, exc_info=True)
            return CopyResult(ok=False, error=e)

        logger.info("Copied %d characters to clipboard", len(text))
        return CopyResult(ok=True, length=len(text))


class TerminalClipboard:
    """Uses the running Textual app's terminal clipboard (OSC 52)."""

    def __init__(self, app):
        self.app = app

    async def copy(self, text: str) -> CopyResult:
        try:
            self.app.copy_to_clipboard(text)
        except Exception as e:  # pylint: disable=broad-exception-caught
            error = ClipboardError(
                f"Terminal clipboard write failed: {e}", command="osc52", original_error=e
            )
            logger.error("Error copying to clipboard: %s", error.message, exc_info=True)
            return CopyResult(ok=False, error=error)

        logger.info("Copied %d characters via terminal clipboard", len(text))
        return CopyResult(ok=True, length=len(text))


def resolve_backend(settings, app=None) -> ClipboardBackend:
    """Pick a backend from settings. ``auto`` prefers the terminal inside the TUI."""
    backend = settings.clipboard_backend
    if backend == "terminal" or (backend == "auto" and app is not None):
        if app is None:
            logger.warning("Terminal clipboard requested outside the TUI; using command")
        else:
            return TerminalClipboard(app)
    return CommandClipboard(settings.clipboard_copy_cmd, settings.clipboard_timeout)


async def copy_text(text: str, backend: Optional[ClipboardBackend] = None) -> CopyResult:
    """Copy ``text`` with ``backend`` (default: the configured command)."""
    if backend is None:
        from linux_helper.config.settings import get_settings

        backend = resolve_backend(get_settings())
    return await backend.copy(text)


async def copy_and_acknowledge(
    text: str, flag: TransientFlag, backend: Optional[ClipboardBackend] = None
) -> CopyResult:
    """Copy, then raise the block's "copied" flag only if the copy succeeded."""
    result = await copy_text(text, backend)
    if result.ok:
        flag.set()
    return result
