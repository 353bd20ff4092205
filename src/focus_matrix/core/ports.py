# src/focus_matrix/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The task store and the language preference depend on this Protocol instead of a
concrete storage medium, so the SQLite/JSON backends stay swappable and tests
can use an in-memory fake.
"""

from typing import Protocol


class KeyValueStore(Protocol):
    """
    Local persistent key-value medium with plain get/set-by-key semantics.

    No transactional guarantee spans two keys; a single set is either fully
    durable or the previous value stays in place.
    """

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...

    def delete(self, key: str) -> None: ...

    def close(self) -> None: ...
