# src/focus_matrix/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- wires the key-value backend, TaskStore and LanguagePreference into AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState
from ..preferences.language import DEFAULT_LANGUAGE, Language, LanguagePreference
from ..storage.kv_store import open_kv_store
from ..tasks.task_models import DEFAULT_QUADRANT, Quadrant
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.store_path.parent.mkdir(parents=True, exist_ok=True)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    kv = open_kv_store(settings)

    quadrant = Quadrant.parse(getattr(settings, "default_quadrant", None)) or DEFAULT_QUADRANT
    language = Language.parse(getattr(settings, "default_language", None)) or DEFAULT_LANGUAGE

    state = AppState(
        settings=settings,
        kv=kv,
        tasks=TaskStore(kv, active_quadrant=quadrant),
        language=LanguagePreference(kv, default=language),
    )
    logger.info(
        "State ready backend=%s store=%s tasks=%d language=%s",
        getattr(settings, "storage_backend", "sqlite"),
        settings.store_path,
        len(state.tasks),
        state.language.value.value,
    )
    return state
