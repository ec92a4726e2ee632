# Test suite for clipboard export

import subprocess

import pytest

from linux_helper.exceptions import (
    ClipboardError,
    ClipboardTimeoutError,
    ClipboardUnavailableError,
)
from linux_helper.utils import clipboard
from linux_helper.utils.clipboard import (
    CommandClipboard,
    TerminalClipboard,
    copy_and_acknowledge,
    resolve_backend,
)
from linux_helper.utils.transient import TransientFlag

from .conftest import FakeClipboard


class FakePopen:
    """Stands in for subprocess.Popen and records what was written."""

    instances = []

    def __init__(self, args, **kwargs):
        self.args = args
        self.kwargs = kwargs
        self.returncode = self.exit_code
        self.input = None
        self.killed = False
        FakePopen.instances.append(self)

    exit_code = 0
    timeout = False

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def communicate(self, input=None, timeout=None):
        if self.timeout and not self.killed:
            raise subprocess.TimeoutExpired(self.args, timeout)
        self.input = input
        return "", "boom" if self.returncode else ""

    def kill(self):
        self.killed = True


@pytest.fixture
def fake_popen(monkeypatch):
    FakePopen.instances = []
    FakePopen.exit_code = 0
    FakePopen.timeout = False
    monkeypatch.setattr(clipboard.subprocess, "Popen", FakePopen)
    return FakePopen


class TestCommandClipboard:
    """Piping text into a clipboard command"""

    @pytest.mark.asyncio
    async def test_writes_text_verbatim(self, fake_popen):
        text = "  sudo apt install -f\n\n# keep $HOME and trailing spaces  \n"
        result = await CommandClipboard("xclip -selection clipboard").copy(text)
        assert result.ok
        assert result.length == len(text)
        assert fake_popen.instances[0].input == text
        assert fake_popen.instances[0].args == ["xclip", "-selection", "clipboard"]

    @pytest.mark.asyncio
    async def test_non_zero_exit_is_failure(self, fake_popen):
        fake_popen.exit_code = 1
        result = await CommandClipboard("pbcopy").copy("ls")
        assert not result.ok
        assert isinstance(result.error, ClipboardError)
        assert "boom" in result.error.message

    @pytest.mark.asyncio
    async def test_missing_command(self, monkeypatch):
        def missing(*args, **kwargs):
            raise FileNotFoundError("no such file")

        monkeypatch.setattr(clipboard.subprocess, "Popen", missing)
        result = await CommandClipboard("no-such-clipboard").copy("ls")
        assert not result.ok
        assert isinstance(result.error, ClipboardUnavailableError)
        assert "CLIPBOARD_COPY_CMD" in result.error.user_hint

    @pytest.mark.asyncio
    async def test_timeout(self, fake_popen):
        fake_popen.timeout = True
        result = await CommandClipboard("slowcopy", timeout=0.5).copy("ls")
        assert isinstance(result.error, ClipboardTimeoutError)
        assert result.error.timeout == 0.5
        assert fake_popen.instances[0].killed


class TestCopyAndAcknowledge:
    """The copied flag only reflects successful copies"""

    @pytest.mark.asyncio
    async def test_flag_window_and_teardown(self, fake_clipboard, scheduler):
        """Flag is on right after the copy, off once the window passes"""
        flag = TransientFlag(2.0, scheduler=scheduler)
        await copy_and_acknowledge("sudo apt update", flag, fake_clipboard)
        assert flag.value
        scheduler.elapse()
        assert not flag.value

        await copy_and_acknowledge("sudo apt update", flag, fake_clipboard)
        flag.close()
        scheduler.elapse()
        assert flag.value
        assert fake_clipboard.copied == ["sudo apt update", "sudo apt update"]

    @pytest.mark.asyncio
    async def test_success_sets_flag(self, fake_clipboard, scheduler):
        flag = TransientFlag(2.0, scheduler=scheduler)
        result = await copy_and_acknowledge("df -h", flag, fake_clipboard)
        assert result.ok
        assert flag.value
        assert fake_clipboard.copied == ["df -h"]

    @pytest.mark.asyncio
    async def test_failure_leaves_flag_clear(self, scheduler):
        flag = TransientFlag(2.0, scheduler=scheduler)
        result = await copy_and_acknowledge("df -h", flag, FakeClipboard(fail=True))
        assert not result.ok
        assert not flag.value
        assert scheduler.handles == []

    @pytest.mark.asyncio
    async def test_copying_empty_text(self, fake_clipboard, scheduler):
        flag = TransientFlag(2.0, scheduler=scheduler)
        result = await copy_and_acknowledge("", flag, fake_clipboard)
        assert result.ok
        assert fake_clipboard.copied == [""]


class TestTerminalClipboard:
    @pytest.mark.asyncio
    async def test_uses_app_clipboard(self):
        class App:
            copied = None

            def copy_to_clipboard(self, text):
                self.copied = text

        app = App()
        result = await TerminalClipboard(app).copy("uname -a")
        assert result.ok
        assert app.copied == "uname -a"

    @pytest.mark.asyncio
    async def test_app_failure_is_reported(self):
        class App:
            def copy_to_clipboard(self, text):
                raise RuntimeError("no terminal")

        result = await TerminalClipboard(App()).copy("uname -a")
        assert not result.ok
        assert isinstance(result.error.original_error, RuntimeError)


class TestResolveBackend:
    def test_command_outside_tui(self, settings):
        backend = resolve_backend(settings)
        assert isinstance(backend, CommandClipboard)
        assert backend.command == settings.clipboard_copy_cmd

    def test_auto_prefers_terminal_inside_tui(self, settings):
        assert isinstance(resolve_backend(settings, app=object()), TerminalClipboard)

    def test_command_backend_forced(self, settings):
        forced = settings.model_copy(update={"clipboard_backend": "command"})
        assert isinstance(resolve_backend(forced, app=object()), CommandClipboard)
