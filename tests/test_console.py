# tests/test_console.py

from __future__ import annotations

from collections.abc import Iterable

import pytest

from focus_matrix.cli import commands
from focus_matrix.connectors.console_connector import handle_line, run_console_loop
from focus_matrix.tasks.task_models import Quadrant


def _scripted(lines: Iterable[str], end: type[BaseException] = EOFError):
    it = iter(lines)
    prompts: list[str] = []

    def read(prompt: str) -> str:
        prompts.append(prompt)
        try:
            return next(it)
        except StopIteration:
            raise end() from None

    return read, prompts


def test_plain_text_adds_to_active_quadrant(state) -> None:
    reply = handle_line(state, "  Water the plants  ")

    assert reply == "Added #1 to q2 Schedule: Water the plants"
    assert [t.text for t in state.tasks.by_quadrant(Quadrant.Q2)] == ["Water the plants"]


def test_blank_line_is_ignored(state) -> None:
    assert handle_line(state, "   ") is None
    assert len(state.tasks) == 0


def test_handler_crash_is_reported_not_raised(state, monkeypatch) -> None:
    def boom(state, args):
        raise RuntimeError("boom")

    monkeypatch.setitem(commands.registry._handlers, "list", boom)

    assert handle_line(state, "/list") == "Internal error while handling a command."


def test_console_session_end_to_end(state) -> None:
    read, prompts = _scripted(
        [
            "/q q1",
            "Ship the release",
            "",
            "/q q3",
            "Answer vendor email",
            "/mv 2 q4",
            "/lang",
            "/exit",
            "never reached",
        ]
    )
    out: list[str] = []

    run_console_loop(state, read=read, write=out.append)

    assert [(t.text, t.quadrant) for t in state.tasks.all()] == [
        ("Ship the release", Quadrant.Q1),
        ("Answer vendor email", Quadrant.Q4),
    ]
    assert prompts[0] == "[q2] > "
    assert prompts[-1] == "[q3] > "
    assert out[0].startswith("Focus Matrix")
    assert any(line.startswith("语言：中文") for line in out)
    assert out[-1] == "再见。"


@pytest.mark.parametrize("end", [EOFError, KeyboardInterrupt])
def test_console_exits_on_eof_and_interrupt(state, end) -> None:
    read, _ = _scripted(["hello"], end=end)
    out: list[str] = []

    run_console_loop(state, read=read, write=out.append)

    assert [t.text for t in state.tasks.all()] == ["hello"]
    assert out[-1] == "Bye."
