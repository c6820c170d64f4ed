"""Runtime settings.

Why here:
- Centralizes environment variables (pydantic-settings) without leaking
  them into the CLI.
- Settings pick *which* constants to use (e.g. the active network); they
  never change the constants themselves.
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

from dotenv import set_key
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.domain.network import NetworkType

APP_DIR_NAME = "acme-wallet-config"
ENV_PREFIX = "ACME_WALLET_"

logger = logging.getLogger(__name__)

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def get_user_config_dir() -> Path:
    """Per-user config directory (cross-platform, no extra dependencies)."""

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


def write_user_env_vars(values: dict[str, str]) -> Path:
    """Write/update variables in the user's global .env."""

    env_path = get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)
    env_path.touch(exist_ok=True)
    for key, value in values.items():
        set_key(env_path, key, value, quote_mode="never")
        logger.info("Saved %s to %s", key, env_path)
    return env_path


class AppSettings(BaseSettings):
    """Application settings.

    Why pydantic-settings:
    - Typing + validation at the edge (env vars).
    - A single settings contract for the CLI and adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        extra="ignore",
        case_sensitive=False,
        # Project .env first (dev), then the user's global config.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    network: NetworkType = Field(
        default=NetworkType.TESTNET,
        description="Active Accumulate network (testnet/mainnet).",
    )
    http_timeout_seconds: float = Field(
        default=10.0,
        gt=0,
        description="Timeout per request in diagnostics (seconds).",
    )
    user_agent: str = Field(
        default="acme-wallet-config/0.1",
        min_length=1,
        description="User-Agent for connectivity checks.",
    )
    log_level: str = Field(
        default="WARNING",
        description="Root log level for the CLI.",
    )

    @field_validator("network", mode="before")
    @classmethod
    def parse_network(cls, value: object) -> object:
        if isinstance(value, str):
            return NetworkType.parse(value)
        return value

    @field_validator("log_level")
    @classmethod
    def check_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"unknown log level {value!r}")
        return level
