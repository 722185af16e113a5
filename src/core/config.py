"""Core configuration.

Why here:
- Centralises environment variables (pydantic-settings) without leaking them
  into the domain.
- Gives the CLI a single typed contract for start-up options.
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

APP_DIR_NAME = "animal-hierarchy"


def get_user_config_dir() -> Path:
    """Per-user configuration directory (cross-platform, no extra dependencies)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / APP_DIR_NAME
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / APP_DIR_NAME

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / APP_DIR_NAME
    return Path.home() / ".config" / APP_DIR_NAME


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Application settings.

    Read from `ANIMAL_HIERARCHY_*` environment variables, then the project
    `.env`, then the user `.env`.
    """

    model_config = SettingsConfigDict(
        env_prefix="ANIMAL_HIERARCHY_",
        extra="ignore",
        case_sensitive=False,
        env_file_encoding="utf-8",
    )

    def __init__(self, **values: Any) -> None:
        # User config dir is resolved per instance, not at import.
        values.setdefault("_env_file", (".env", str(get_user_env_file())))
        super().__init__(**values)

    seed_examples: bool = Field(
        default=True,
        description="Start the shell with a dog, a cat and a bird already registered.",
    )
    show_banner: bool = Field(
        default=True,
        description="Print the welcome banner when the shell starts.",
    )
    log_level: str = Field(
        default="WARNING",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).",
    )

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {value!r}")
        return level
