# src/focus_matrix/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app (normal "settings layer").
- Nothing is required at import time; every value has a default.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "FOCUS"

STORAGE_BACKENDS = ("sqlite", "json")

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
    return value if value in choices else default


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

    # ---- Local data paths (ignored by git) ----
    data_dir: Path
    log_dir: Path
    storage_backend: str
    store_path: Path

    # ---- Session defaults ----
    default_quadrant: str
    default_language: str

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "focus-matrix").strip() or "focus-matrix"
        log_level = _env(_k("LOG_LEVEL"), "WARNING")

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/focus_matrix"))
        log_dir = _env_path(_k("LOG_DIR"), data_dir)

        # Unknown backends are kept verbatim so bootstrap can reject them loudly.
        storage_backend = _env(_k("STORAGE_BACKEND"), "sqlite").strip().lower() or "sqlite"
        default_store = data_dir / ("store.json" if storage_backend == "json" else "store.sqlite3")
        store_path = _env_path(_k("STORE_PATH"), default_store)

        default_quadrant = _env_choice(_k("DEFAULT_QUADRANT"), ("q1", "q2", "q3", "q4"), "q2")
        default_language = _env_choice(_k("DEFAULT_LANGUAGE"), ("en", "zh"), "en")

        return Settings(
            app_name=app_name,
            log_level=log_level,
            data_dir=data_dir,
            log_dir=log_dir,
            storage_backend=storage_backend,
            store_path=store_path,
            default_quadrant=default_quadrant,
            default_language=default_language,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
