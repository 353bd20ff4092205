# src/focus_matrix/tasks/task_store.py

from __future__ import annotations

import json
import logging
from collections.abc import Iterator

from ..core.ports import KeyValueStore
from .task_models import DEFAULT_QUADRANT, Quadrant, Task, new_task_id

logger = logging.getLogger(__name__)

TASKS_KEY = "tasks"


class TaskStore:
    """
    Ordered task collection mirrored to a key-value store.

    - the whole collection is loaded once, in __init__
    - every mutation rewrites the full collection under TASKS_KEY before returning
    - invalid input (blank text, unknown id) is a silent no-op

    The active quadrant is session state: it picks the quadrant for add() when
    none is passed and is never persisted.
    """

    def __init__(
        self,
        kv: KeyValueStore,
        *,
        key: str = TASKS_KEY,
        active_quadrant: Quadrant = DEFAULT_QUADRANT,
    ) -> None:
        self._kv = kv
        self._key = key
        self._active_quadrant = Quadrant(active_quadrant)
        self._tasks: list[Task] = self.load()
        logger.info("TaskStore ready key=%s total=%d", self._key, len(self._tasks))

    # ---- persistence ----

    def load(self) -> list[Task]:
        """
        Read the persisted collection. Never raises.

        - absent key, unparseable JSON or a non-list payload -> empty list
        - records with a wrong shape or a duplicate id are dropped, the rest keep their order
        """
        try:
            raw = self._kv.get(self._key)
        except Exception:
            logger.exception("Failed to read %s from storage; starting empty.", self._key)
            return []

        if not raw:
            return []

        try:
            data = json.loads(raw)
        except (ValueError, RecursionError):
            logger.warning("Persisted %s is not valid JSON; starting empty.", self._key)
            return []

        if not isinstance(data, list):
            logger.warning("Persisted %s is not a list (%s); starting empty.", self._key, type(data).__name__)
            return []

        out: list[Task] = []
        seen: set[str] = set()
        dropped = 0
        for item in data:
            task = Task.from_dict(item)
            if task is None or task.id in seen:
                dropped += 1
                continue
            seen.add(task.id)
            out.append(task)

        if dropped:
            logger.warning("Dropped %d malformed task record(s) from %s.", dropped, self._key)
        return out

    def _commit(self, tasks: list[Task]) -> None:
        """Persist the new collection, then make it current. A failed write keeps the old one."""
        payload = json.dumps([t.to_dict() for t in tasks], ensure_ascii=False)
        self._kv.set(self._key, payload)
        self._tasks = tasks

    # ---- active quadrant ----

    @property
    def active_quadrant(self) -> Quadrant:
        return self._active_quadrant

    def set_active_quadrant(self, quadrant: Quadrant) -> None:
        self._active_quadrant = Quadrant(quadrant)

    # ---- mutations ----

    def add(self, text: str, quadrant: Quadrant | None = None) -> Task | None:
        if not text or not text.strip():
            logger.debug("Ignoring add with blank text.")
            return None

        task = Task(
            id=new_task_id(),
            text=text,
            quadrant=Quadrant(quadrant) if quadrant is not None else self._active_quadrant,
        )
        self._commit([*self._tasks, task])
        logger.debug("Task added id=%s quadrant=%s", task.id, task.quadrant.value)
        return task

    def delete(self, task_id: str) -> None:
        remaining = [t for t in self._tasks if t.id != task_id]
        if len(remaining) == len(self._tasks):
            logger.debug("Delete ignored, no task id=%s", task_id)
        self._commit(remaining)

    def update_quadrant(self, task_id: str, quadrant: Quadrant) -> None:
        new_q = Quadrant(quadrant)
        found = False
        updated: list[Task] = []
        for t in self._tasks:
            if t.id == task_id:
                found = True
                updated.append(t.with_quadrant(new_q))
            else:
                updated.append(t)
        if not found:
            logger.debug("Quadrant update ignored, no task id=%s", task_id)
        self._commit(updated)

    # ---- queries ----

    def by_quadrant(self, quadrant: Quadrant) -> list[Task]:
        q = Quadrant(quadrant)
        return [t for t in self._tasks if t.quadrant is q]

    def all(self) -> list[Task]:
        return list(self._tasks)

    def get(self, task_id: str) -> Task | None:
        for t in self._tasks:
            if t.id == task_id:
                return t
        return None

    def counts(self) -> dict[Quadrant, int]:
        out = dict.fromkeys(Quadrant, 0)
        for t in self._tasks:
            out[t.quadrant] += 1
        return out

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(list(self._tasks))
