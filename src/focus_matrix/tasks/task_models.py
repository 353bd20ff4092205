# src/focus_matrix/tasks/task_models.py

from __future__ import annotations

import uuid
from dataclasses import dataclass, replace
from enum import StrEnum
from typing import Any


class Quadrant(StrEnum):
    """
    Eisenhower Matrix quadrant.

    q1: urgent & important ("Do First")
    q2: important, not urgent ("Schedule")
    q3: urgent, not important ("Delegate")
    q4: neither ("Don't Do")
    """

    Q1 = "q1"
    Q2 = "q2"
    Q3 = "q3"
    Q4 = "q4"

    @classmethod
    def parse(cls, raw: Any) -> Quadrant | None:
        """Accept 'q1'..'q4' (any case) or bare '1'..'4'; None for anything else."""
        if not isinstance(raw, str):
            return None
        s = raw.strip().lower()
        if s in {"1", "2", "3", "4"}:
            s = "q" + s
        try:
            return cls(s)
        except ValueError:
            return None


DEFAULT_QUADRANT = Quadrant.Q2


def new_task_id() -> str:
    return str(uuid.uuid4())


@dataclass(frozen=True, slots=True)
class Task:
    id: str
    text: str
    quadrant: Quadrant

    def with_quadrant(self, quadrant: Quadrant) -> Task:
        return replace(self, quadrant=quadrant)

    def to_dict(self) -> dict[str, str]:
        return {"id": self.id, "text": self.text, "quadrant": self.quadrant.value}

    @classmethod
    def from_dict(cls, raw: Any) -> Task | None:
        """
        Build a Task from one persisted record.

        Returns None when the record does not have the expected shape:
        a dict with non-empty string id/text and a known quadrant tag.
        """
        if not isinstance(raw, dict):
            return None
        task_id = raw.get("id")
        text = raw.get("text")
        quadrant_raw = raw.get("quadrant")
        if not isinstance(task_id, str) or not task_id:
            return None
        if not isinstance(text, str) or not text.strip():
            return None
        # Stored tags are exact; the lenient forms of parse() are for user input only.
        try:
            quadrant = Quadrant(quadrant_raw)
        except ValueError:
            return None
        return cls(id=task_id, text=text, quadrant=quadrant)
