# Shared fixtures: small record stores, a manual scheduler and a fake clipboard

import pytest

from linux_helper.config.settings import Settings
from linux_helper.engine.store import RecordStore
from linux_helper.models.records import ErrorEntry
from linux_helper.utils.clipboard import CopyResult
from linux_helper.exceptions.clipboard import ClipboardError


def make_error(record_id, title, meaning="", causes=()):
    return ErrorEntry(
        id=record_id,
        error=title,
        meaning=meaning,
        causes=tuple(causes),
        solution="echo fix",
    )


class ManualHandle:
    def __init__(self, delay, callback):
        self.delay = delay
        self.callback = callback
        self.cancelled = False
        self.fired = False

    def cancel(self):
        self.cancelled = True


class ManualScheduler:
    """Collects scheduled callbacks; ``elapse`` fires the live ones."""

    def __init__(self):
        self.handles = []

    def __call__(self, delay, callback):
        handle = ManualHandle(delay, callback)
        self.handles.append(handle)
        return handle

    @property
    def live(self):
        return [h for h in self.handles if not h.cancelled and not h.fired]

    def elapse(self):
        for handle in self.live:
            handle.fired = True
            handle.callback()


class FakeClipboard:
    def __init__(self, fail=False):
        self.fail = fail
        self.copied = []

    async def copy(self, text):
        if self.fail:
            return CopyResult(ok=False, error=ClipboardError("denied", command="fake"))
        self.copied.append(text)
        return CopyResult(ok=True, length=len(text))


@pytest.fixture
def small_store():
    return RecordStore(
        [
            make_error(0, "command not found"),
            make_error(1, "Permission denied"),
            make_error(2, "disk quota exceeded"),
        ],
        name="small",
    )


@pytest.fixture
def scheduler():
    return ManualScheduler()


@pytest.fixture
def fake_clipboard():
    return FakeClipboard()


@pytest.fixture
def settings(monkeypatch):
    for name in (
        "LOG_LEVEL",
        "LOG_FILE",
        "CLIPBOARD_BACKEND",
        "CLIPBOARD_COPY_CMD",
        "CLIPBOARD_TIMEOUT",
        "COPY_ACK_SECONDS",
        "START_PAGE",
    ):
        monkeypatch.delenv(name, raising=False)
    return Settings(_env_file=None)
