# src/task_tracker/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app (normal "settings layer").
- Nothing is created on disk at import time.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TASK_TRACKER"

STORAGE_BACKENDS = ("sqlite", "json", "memory")
DEFAULT_STORAGE_BACKEND = "sqlite"

logger = logging.getLogger(__name__)

load_dotenv(override=False)


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_choice(name: str, choices: tuple[str, ...], default: str) -> str:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    value = raw.strip().lower()
    if value not in choices:
        logger.warning("%s=%r is not one of %s; using %s.", name, raw, ", ".join(choices), default)
        return default
    return value


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str

    # ---- Storage ----
    storage_backend: str
    storage_path: Path

    # ---- Local data paths (ignored by git) ----
    data_dir: Path
    export_path: Path

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "task-tracker").strip() or "task-tracker"
        log_level = _env(_k("LOG_LEVEL"), "INFO").strip().upper() or "INFO"

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/task-tracker"))

        storage_backend = _env_choice(_k("STORAGE"), STORAGE_BACKENDS, DEFAULT_STORAGE_BACKEND)
        default_storage_file = "storage.json" if storage_backend == "json" else "storage.sqlite3"
        storage_path = _env_path(_k("STORAGE_PATH"), data_dir / default_storage_file)

        export_path = _env_path(_k("EXPORT_PATH"), data_dir / "tasks.html")

        return Settings(
            app_name=app_name,
            log_level=log_level,
            storage_backend=storage_backend,
            storage_path=storage_path,
            data_dir=data_dir,
            export_path=export_path,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
