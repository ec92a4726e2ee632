# linux_helper/config/settings.py
import logging
import sys
from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from linux_helper.content.pages import PAGE_SLUGS
from linux_helper.exceptions.config import ConfigError

logger = logging.getLogger(__name__)

CLIPBOARD_BACKENDS = ("auto", "command", "terminal")


def _default_copy_command() -> str:
    if sys.platform == "darwin":
        return "pbcopy"
    if sys.platform.startswith("win"):
        return "clip"
    return "xclip -selection clipboard"


class Settings(BaseSettings):
    # === Environment Variables ===
    log_level: str = "WARNING"
    log_file: Optional[Path] = None
    clipboard_backend: str = "auto"
    clipboard_copy_cmd: str = Field(default_factory=_default_copy_command)
    clipboard_timeout: float = 2.0
    copy_ack_seconds: float = 2.0
    start_page: str = "home"

    # === Pydantic V2 Configuration ===
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @model_validator(mode="after")
    def validate_and_normalize(self) -> "Settings":
        """Validate enumerations and normalize case."""

        # 1. Log level
        if self.log_level.upper() not in logging._nameToLevel:
            raise ConfigError(
                f"Invalid log level: {self.log_level}",
                field_name="log_level",
                invalid_value=self.log_level,
            )
        self.log_level = self.log_level.upper()

        # 2. Clipboard backend
        backend = (self.clipboard_backend or "auto").strip().lower()
        if backend not in CLIPBOARD_BACKENDS:
            raise ConfigError(
                "Invalid clipboard_backend value. Expected one of "
                f"{', '.join(CLIPBOARD_BACKENDS)}. Got: {self.clipboard_backend}",
                field_name="clipboard_backend",
                invalid_value=self.clipboard_backend,
            )
        self.clipboard_backend = backend

        if not self.clipboard_copy_cmd.strip():
            raise ConfigError(
                "clipboard_copy_cmd must not be empty",
                field_name="clipboard_copy_cmd",
                invalid_value=self.clipboard_copy_cmd,
            )

        # 3. Timers
        if self.copy_ack_seconds <= 0:
            raise ConfigError(
                f"copy_ack_seconds must be positive, got {self.copy_ack_seconds}",
                field_name="copy_ack_seconds",
                invalid_value=self.copy_ack_seconds,
            )
        if self.clipboard_timeout <= 0:
            raise ConfigError(
                f"clipboard_timeout must be positive, got {self.clipboard_timeout}",
                field_name="clipboard_timeout",
                invalid_value=self.clipboard_timeout,
            )

        # 4. Start page
        self.start_page = self.start_page.strip().lower()
        if self.start_page not in PAGE_SLUGS:
            raise ConfigError(
                f"Unknown start_page: {self.start_page}",
                field_name="start_page",
                invalid_value=self.start_page,
            )

        return self

    @property
    def log_level_number(self) -> int:
        return logging._nameToLevel[self.log_level]


def load_settings(**overrides) -> Settings:
    """Build a fresh Settings, reading .env first."""
    load_dotenv()
    return Settings(**overrides)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Process-wide settings instance."""
    settings = load_settings()
    logger.debug("Settings loaded: %s", settings.model_dump(exclude={"clipboard_copy_cmd"}))
    return settings
