# tests/test_bootstrap.py

from __future__ import annotations

import logging

import pytest

from focus_matrix.cli.bootstrap import create_initial_state
from focus_matrix.logging_setup import _ConsoleNoiseFilter, setup_logging
from focus_matrix.preferences.language import Language
from focus_matrix.storage.kv_store import JsonFileKeyValueStore, SQLiteKeyValueStore
from focus_matrix.tasks.task_models import Quadrant


def test_state_persists_across_restarts(settings) -> None:
    state = create_initial_state(settings=settings)
    assert isinstance(state.kv, SQLiteKeyValueStore)
    assert state.tasks.active_quadrant is Quadrant.Q2
    assert state.language.value is Language.EN

    state.tasks.add("Write report")
    state.language.toggle()
    state.kv.close()

    again = create_initial_state(settings=settings)
    assert [(t.text, t.quadrant) for t in again.tasks.all()] == [("Write report", Quadrant.Q2)]
    assert again.language.value is Language.ZH


def test_json_backend_and_session_defaults(settings) -> None:
    settings.storage_backend = "json"
    settings.store_path = settings.data_dir / "store.json"
    settings.default_quadrant = "q4"
    settings.default_language = "zh"

    state = create_initial_state(settings=settings)

    assert isinstance(state.kv, JsonFileKeyValueStore)
    assert state.tasks.active_quadrant is Quadrant.Q4
    assert state.language.value is Language.ZH
    assert settings.data_dir.is_dir()


def test_unknown_backend_fails_at_bootstrap(settings) -> None:
    settings.storage_backend = "redis"
    with pytest.raises(ValueError):
        create_initial_state(settings=settings)


def test_setup_logging_writes_file(settings) -> None:
    root = logging.getLogger()
    saved = list(root.handlers), root.level
    try:
        log_file = setup_logging(log_dir=settings.log_dir)
        logging.getLogger("focus_matrix.test").debug("hello file")
        for h in root.handlers:
            h.flush()
        assert log_file.exists()
        assert "hello file" in log_file.read_text("utf-8")
    finally:
        for h in list(root.handlers):
            root.removeHandler(h)
            h.close()
        for h in saved[0]:
            root.addHandler(h)
        root.setLevel(saved[1])
        logging.captureWarnings(False)


@pytest.mark.parametrize(
    "name, level, shown",
    [
        ("focus_matrix.tasks", logging.WARNING, True),
        ("focus_matrix", logging.DEBUG, True),
        ("py.warnings", logging.WARNING, False),
        ("urllib3", logging.WARNING, False),
        ("urllib3", logging.ERROR, True),
    ],
)
def test_console_filter_hides_foreign_noise(name: str, level: int, shown: bool) -> None:
    record = logging.LogRecord(name, level, __file__, 1, "msg", None, None)
    assert _ConsoleNoiseFilter().filter(record) is shown
