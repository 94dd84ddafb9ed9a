"""Core configuration.

Centralizes environment variables (pydantic-settings) so the CLI and the occ
adapters read the same values.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def get_user_config_dir() -> Path:
    """Per-user configuration directory (cross-platform, no dependencies)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "nc-quota"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "nc-quota"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "nc-quota"
    return Path.home() / ".config" / "nc-quota"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Central application settings.

    Every value can be overridden with an `NC_QUOTA_*` environment variable or
    a `.env` file (project first, then the per-user one).
    """

    model_config = SettingsConfigDict(
        env_prefix="NC_QUOTA_",
        extra="ignore",
        case_sensitive=False,
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    occ_path: Path = Field(
        default=Path("/var/www/html/nextcloud/occ"),
        description="Path to Nextcloud's occ script.",
    )
    php_binary: str = Field(
        default="php",
        min_length=1,
        description="PHP interpreter used to run occ.",
    )
    sudo_binary: str = Field(
        default="sudo",
        min_length=1,
        description="Binary used to impersonate the web server account.",
    )
    run_as_user: str = Field(
        default="www-data",
        description="Account occ runs as (`apache` on some distros). Empty runs php directly.",
    )
    log_level: str = Field(
        default="WARNING",
        description="Logging level for diagnostics written to stderr.",
    )
