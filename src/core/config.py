"""Application configuration.

Why here:
- Centralizes environment variables (pydantic-settings) without leaking them
  into the CLI.
- Lets services and the error formatter read the same contract.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def get_user_config_dir() -> Path:
    """Per-user configuration directory (cross-platform, no extra dependencies)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "schema-tour"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "schema-tour"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "schema-tour"
    return Path.home() / ".config" / "schema-tour"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Central settings for the tour.

    Why pydantic-settings:
    - Typed and validated at the edge (env vars), the same library the demos
      are about.
    - A single configuration contract for CLI and services.
    """

    model_config = SettingsConfigDict(
        env_prefix="SCHEMA_TOUR_",
        extra="ignore",
        case_sensitive=False,
        # Project first (dev), then the user's global config.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    brand_email_domain: str = Field(
        default="grow.com",
        min_length=3,
        description="Domain every brand email must end with.",
    )

    error_prefix: str = Field(
        default="Validation error",
        description="Prefix of readable validation messages.",
    )
    error_prefix_separator: str = Field(
        default=": ",
        description="Separator between the prefix and the first issue.",
    )
    error_issue_separator: str = Field(
        default="; ",
        description="Separator between issues in a readable message.",
    )
    max_issues_in_message: int = Field(
        default=99,
        ge=1,
        le=500,
        description="Maximum number of issues rendered in a readable message.",
    )

    show_banner: bool = Field(
        default=True,
        description="Print the welcome banner before running commands.",
    )
    log_level: str = Field(
        default="WARNING",
        pattern=r"^(?i:debug|info|warning|error|critical)$",
        description="Console log level when --verbose is not given.",
    )
