"""
utils/transient.py
A boolean that switches itself back off after a fixed delay.
"""

import asyncio
import logging
from typing import Any, Callable, Optional, Protocol

logger = logging.getLogger(__name__)

DEFAULT_DURATION = 2.0


class Cancellable(Protocol):
    def cancel(self) -> Any: ...


Scheduler = Callable[[float, Callable[[], None]], Cancellable]


def _loop_scheduler(delay: float, callback: Callable[[], None]) -> Cancellable:
    return asyncio.get_running_loop().call_later(delay, callback)


class TransientFlag:
    """
    "Just copied" acknowledgment for one code block.

    set() turns the flag on and (re)starts the reset timer; a second set()
    before the timer fires replaces it. close() is the teardown hook: it
    cancels the pending reset and freezes the flag.
    """

    def __init__(
        self,
        duration: float = DEFAULT_DURATION,
        scheduler: Optional[Scheduler] = None,
        on_change: Optional[Callable[[bool], None]] = None,
    ):
        self.duration = duration
        self._scheduler = scheduler or _loop_scheduler
        self._on_change = on_change
        self._value = False
        self._handle: Optional[Cancellable] = None
        self._closed = False

    @property
    def value(self) -> bool:
        return self._value

    @property
    def pending(self) -> bool:
        return self._handle is not None

    @property
    def closed(self) -> bool:
        return self._closed

    def __bool__(self) -> bool:
        return self._value

    def set(self) -> None:
        if self._closed:
            return
        self._cancel_pending()
        self._update(True)
        self._handle = self._scheduler(self.duration, self._expire)

    def close(self) -> None:
        self._cancel_pending()
        self._closed = True

    def _expire(self) -> None:
        self._handle = None
        if self._closed:
            return
        self._update(False)

    def _cancel_pending(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _update(self, value: bool) -> None:
        if value == self._value:
            return
        self._value = value
        if self._on_change is not None:
            self._on_change(value)
