# src/terminal_tasks/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Settings only affect presentation and diagnostics, never command behavior.
- Tasks themselves are never configured or persisted.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

ENV_PREFIX = "TASKS"

DEFAULT_APP_NAME = "Terminal Task Manager"
DEFAULT_LOG_LEVEL = "WARNING"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None or v.strip() == "" else v.strip()


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_path(name: str, default: Path | None) -> Path | None:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw.strip()).expanduser()


def _env_log_level(name: str, default: str) -> str:
    raw = _env(name, default).upper()
    # Unknown names fall back instead of failing at startup.
    if raw not in {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}:
        return default
    return raw


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    log_file: Path | None

    # ---- Console ----
    show_banner: bool

    @staticmethod
    def from_env(*, dotenv: bool = True, env_file: str | Path | None = None) -> "Settings":
        if dotenv:
            # Look for .env from the working directory, not from the installed package.
            load_dotenv(env_file or find_dotenv(usecwd=True), override=False)

        return Settings(
            app_name=_env(_k("APP_NAME"), DEFAULT_APP_NAME),
            log_level=_env_log_level(_k("LOG_LEVEL"), DEFAULT_LOG_LEVEL),
            log_file=_env_path(_k("LOG_FILE"), None),
            show_banner=_env_bool(_k("SHOW_BANNER"), True),
        )


_SETTINGS: Settings | None = None


def get_settings() -> Settings:
    global _SETTINGS
    if _SETTINGS is None:
        _SETTINGS = Settings.from_env()
    return _SETTINGS
