# Test suite for configuration loading

import logging

import pytest

from linux_helper.config.settings import Settings
from linux_helper.exceptions import ConfigError


@pytest.fixture
def clean_env(monkeypatch):
    for name in (
        "LOG_LEVEL",
        "CLIPBOARD_BACKEND",
        "CLIPBOARD_COPY_CMD",
        "CLIPBOARD_TIMEOUT",
        "START_PAGE",
        "COPY_ACK_SECONDS",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestSettings:
    """Validation and normalisation of environment settings"""

    def test_defaults(self, settings):
        assert settings.log_level == "WARNING"
        assert settings.log_level_number == logging.WARNING
        assert settings.clipboard_backend == "auto"
        assert settings.copy_ack_seconds == 2.0
        assert settings.start_page == "home"
        assert settings.clipboard_copy_cmd

    def test_values_are_normalised(self, clean_env):
        settings = Settings(
            _env_file=None,
            log_level="debug",
            clipboard_backend=" Command ",
            start_page=" Errors",
        )
        assert settings.log_level == "DEBUG"
        assert settings.clipboard_backend == "command"
        assert settings.start_page == "errors"

    def test_reads_environment(self, clean_env):
        clean_env.setenv("START_PAGE", "troubleshooting")
        clean_env.setenv("COPY_ACK_SECONDS", "0.5")
        settings = Settings(_env_file=None)
        assert settings.start_page == "troubleshooting"
        assert settings.copy_ack_seconds == 0.5

    @pytest.mark.parametrize(
        "field, value",
        [
            ("log_level", "LOUD"),
            ("clipboard_backend", "carrier-pigeon"),
            ("clipboard_copy_cmd", "   "),
            ("copy_ack_seconds", 0),
            ("clipboard_timeout", -1),
            ("start_page", "nowhere"),
        ],
    )
    def test_invalid_values_raise_config_error(self, clean_env, field, value):
        with pytest.raises(ConfigError) as exc_info:
            Settings(_env_file=None, **{field: value})
        assert exc_info.value.field_name == field
