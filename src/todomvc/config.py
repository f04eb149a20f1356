# src/todomvc/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Nothing is read at import time; `get_settings()` builds it on first use.
- Tasks are never written to disk; data_dir only holds logs.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

from .core.models import Filter

ENV_PREFIX = "TODOMVC"

logger = logging.getLogger(__name__)


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


def _env_filter(name: str, default: Filter) -> Filter:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return Filter.parse(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r: not a filter, using %s.", name, raw, default.value)
        return default


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    log_to_file: bool

    # ---- Local data paths (ignored by git) ----
    data_dir: Path

    # ---- Initial view ----
    default_filter: Filter

    @staticmethod
    def from_env(*, load_env_file: bool = True) -> "Settings":
        if load_env_file:
            load_dotenv(find_dotenv(usecwd=True), override=False)

        return Settings(
            app_name=_env(_k("APP_NAME"), "todos"),
            log_level=_env(_k("LOG_LEVEL"), "INFO").strip().upper() or "INFO",
            log_to_file=_env_bool(_k("LOG_TO_FILE"), True),
            data_dir=_env_path(_k("DATA_DIR"), Path(".local/todomvc")),
            default_filter=_env_filter(_k("DEFAULT_FILTER"), Filter.ALL),
        )


_SETTINGS: Settings | None = None


def get_settings() -> Settings:
    global _SETTINGS
    if _SETTINGS is None:
        _SETTINGS = Settings.from_env()
    return _SETTINGS
