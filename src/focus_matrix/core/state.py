# src/focus_matrix/core/state.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..preferences.language import LanguagePreference
from ..tasks.task_store import TaskStore
from .ports import KeyValueStore


@dataclass
class AppState:
    """
    Application state passed by reference to the console layer.

    Owns the storage medium and the two components that write to it
    (task collection under 'tasks', language under 'language').
    """

    settings: Any
    kv: KeyValueStore
    tasks: TaskStore
    language: LanguagePreference
