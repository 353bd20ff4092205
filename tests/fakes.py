# tests/fakes.py

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True)
class FakeKeyValueStore:
    """
    In-memory KeyValueStore for unit tests.

    - Keeps values in a dict
    - Records every write so tests can assert "persisted on each mutation"
    """

    data: dict[str, str] = field(default_factory=dict)
    writes: list[tuple[str, str]] = field(default_factory=list)
    closed: bool = False

    def get(self, key: str) -> str | None:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = value
        self.writes.append((key, value))

    def delete(self, key: str) -> None:
        self.data.pop(key, None)

    def close(self) -> None:
        self.closed = True


class BrokenKeyValueStore(FakeKeyValueStore):
    """Storage whose reads always fail."""

    def get(self, key: str) -> str | None:
        raise OSError("disk on fire")


class ReadOnlyKeyValueStore(FakeKeyValueStore):
    """Storage that serves reads but rejects every write."""

    def set(self, key: str, value: str) -> None:
        raise OSError("read-only medium")
