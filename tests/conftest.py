# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from focus_matrix.core.state import AppState
from focus_matrix.preferences.language import LanguagePreference
from focus_matrix.tasks.task_store import TaskStore

from .fakes import FakeKeyValueStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with bootstrap and AppState.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment.
    """
    return SimpleNamespace(
        app_name="focus-matrix-test",
        log_level="WARNING",
        data_dir=tmp_path / "data",
        log_dir=tmp_path / "logs",
        storage_backend="sqlite",
        store_path=tmp_path / "data" / "store.sqlite3",
        default_quadrant="q2",
        default_language="en",
    )


@pytest.fixture()
def kv() -> FakeKeyValueStore:
    return FakeKeyValueStore()


@pytest.fixture()
def store(kv: FakeKeyValueStore) -> TaskStore:
    return TaskStore(kv)


@pytest.fixture()
def state(settings: SimpleNamespace, kv: FakeKeyValueStore) -> AppState:
    """AppState wired with the in-memory key-value fake."""
    return AppState(
        settings=settings,
        kv=kv,
        tasks=TaskStore(kv),
        language=LanguagePreference(kv),
    )
