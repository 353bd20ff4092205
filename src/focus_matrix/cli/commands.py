# src/focus_matrix/cli/commands.py

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import cast

from ..core.state import AppState
from ..i18n import quadrant_label, tr
from ..tasks.task_models import Quadrant, Task

CommandHandler2 = Callable[[AppState, list[str]], str]
CommandHandler3 = Callable[[AppState, list[str], str], str]
CommandHandler = CommandHandler2 | CommandHandler3

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by the console (/help, /add, /list, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}
        self._aliases: dict[str, list[str]] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_key: str,
        aliases: list[str] | None = None,
    ) -> None:
        """
        Register a handler under a name and optional aliases.

        help_key is a translation key (see i18n.TRANSLATIONS); unknown keys are
        shown verbatim, so plain help text works too.
        """
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_key
        self._aliases[key] = [a.lower() for a in aliases]
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, state: AppState, line: str) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.

        Handlers taking a third parameter also get the raw text after the
        command name, with its inner whitespace intact.
        """
        if not line.startswith("/"):
            return None

        lang = state.language.value
        parts = line[1:].split()
        if not parts:
            return tr(lang, "console.emptyCommand")

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return tr(lang, "console.unknownCommand", name=name)

        try:
            nparams = len(inspect.signature(handler).parameters)
        except (TypeError, ValueError):
            nparams = 2

        if nparams >= 3:
            rest = line[1:].lstrip()[len(parts[0]) :].lstrip()
            h3 = cast(CommandHandler3, handler)
            return h3(state, args, rest)

        h2 = cast(CommandHandler2, handler)
        return h2(state, args)

    def build_help(self, state: AppState) -> str:
        lang = state.language.value
        lines = [tr(lang, "console.helpHeader")]
        for name, help_key in self._help.items():
            names = " ".join(f"/{n}" for n in [name, *self._aliases.get(name, [])])
            lines.append(f"  {names} - {tr(lang, help_key)}")
        return "\n".join(lines)


registry = CommandRegistry()


# ---- task references ----


@dataclass(frozen=True, slots=True)
class RefResult:
    task: Task | None
    error: str | None = None


def resolve_task_ref(state: AppState, ref: str) -> RefResult:
    """
    Resolve a user reference to a task.

    - "3" -> third task of the board, in collection order (as numbered by /list)
    - otherwise -> exact id, or a unique id prefix
    """
    lang = state.language.value
    tasks = state.tasks.all()
    ref = ref.strip()

    # Out-of-range numbers fall through: an all-digit id prefix is still a valid ref.
    if ref.isascii() and ref.isdigit():
        idx = int(ref)
        if 1 <= idx <= len(tasks):
            return RefResult(tasks[idx - 1])

    exact = state.tasks.get(ref)
    if exact is not None:
        return RefResult(exact)

    matches = [t for t in tasks if ref and t.id.startswith(ref)]
    if len(matches) == 1:
        return RefResult(matches[0])
    if len(matches) > 1:
        return RefResult(None, tr(lang, "console.ambiguous", ref=ref))
    return RefResult(None, tr(lang, "console.notFound", ref=ref))


# ---- rendering ----


def render_quadrant(state: AppState, quadrant: Quadrant) -> str:
    lang = state.language.value
    numbers = {t.id: i for i, t in enumerate(state.tasks.all(), start=1)}
    marker = "*" if quadrant is state.tasks.active_quadrant else " "

    lines = [
        f"{marker} {quadrant.value.upper()} {tr(lang, f'quadrants.{quadrant.value}.title')}"
        f" ({tr(lang, f'options.{quadrant.value}')})",
        f"    {tr(lang, f'quadrants.{quadrant.value}.description')}",
    ]
    tasks = state.tasks.by_quadrant(quadrant)
    if not tasks:
        lines.append(f"    {tr(lang, 'console.noTasks')}")
    for t in tasks:
        lines.append(f"    {numbers[t.id]:>3}. {t.text}  [{t.id[:8]}]")
    return "\n".join(lines)


def render_board(state: AppState) -> str:
    lang = state.language.value
    header = f"{tr(lang, 'title')} - {tr(lang, 'subtitle')}"
    sections = [render_quadrant(state, q) for q in Quadrant]
    return "\n\n".join([header, *sections])


# ---- handlers ----


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help(state)


def cmd_add(state: AppState, args: list[str], rest: str) -> str:
    if not rest:
        return tr(state.language.value, "console.usageAdd")
    return add_text(state, rest)


def add_text(state: AppState, text: str) -> str:
    """Add a task to the active quadrant and describe the result."""
    lang = state.language.value
    task = state.tasks.add(text)
    if task is None:
        return tr(lang, "console.emptyText")
    return tr(
        lang,
        "console.added",
        index=len(state.tasks),
        quadrant=quadrant_label(lang, task.quadrant),
        text=task.text,
    )


def cmd_quadrant(state: AppState, args: list[str]) -> str:
    """
    /q        -> show the active quadrant
    /q q1     -> make q1 the active quadrant (new tasks go there)
    """
    lang = state.language.value
    if args:
        quadrant = Quadrant.parse(args[0])
        if quadrant is None:
            return tr(lang, "console.badQuadrant", raw=args[0])
        state.tasks.set_active_quadrant(quadrant)
    return tr(
        lang,
        "console.activeQuadrant",
        quadrant=quadrant_label(lang, state.tasks.active_quadrant),
    )


def cmd_list(state: AppState, args: list[str]) -> str:
    if not args:
        return render_board(state)
    quadrant = Quadrant.parse(args[0])
    if quadrant is None:
        return tr(state.language.value, "console.badQuadrant", raw=args[0])
    return render_quadrant(state, quadrant)


def cmd_move(state: AppState, args: list[str]) -> str:
    lang = state.language.value
    if len(args) < 2:
        return tr(lang, "console.usageMove")

    quadrant = Quadrant.parse(args[1])
    if quadrant is None:
        return tr(lang, "console.badQuadrant", raw=args[1])

    ref = resolve_task_ref(state, args[0])
    if ref.task is None:
        return ref.error or tr(lang, "console.notFound", ref=args[0])

    label = quadrant_label(lang, quadrant)
    if ref.task.quadrant is quadrant:
        return tr(lang, "console.unchanged", text=ref.task.text, quadrant=label)

    state.tasks.update_quadrant(ref.task.id, quadrant)
    logger.info("Moved task id=%s %s -> %s", ref.task.id, ref.task.quadrant.value, quadrant.value)
    return tr(lang, "console.moved", text=ref.task.text, quadrant=label)


def cmd_delete(state: AppState, args: list[str]) -> str:
    lang = state.language.value
    if not args:
        return tr(lang, "console.usageDelete")

    ref = resolve_task_ref(state, args[0])
    if ref.task is None:
        return ref.error or tr(lang, "console.notFound", ref=args[0])

    state.tasks.delete(ref.task.id)
    logger.info("Deleted task id=%s", ref.task.id)
    return tr(lang, "console.deleted", text=ref.task.text)


def cmd_lang(state: AppState, args: list[str]) -> str:
    new_lang = state.language.toggle()
    return tr(new_lang, "console.language", switch=tr(new_lang, "switchTo"))


def cmd_status(state: AppState, args: list[str]) -> str:
    lang = state.language.value
    counts = state.tasks.counts()
    storage = getattr(state.settings, "store_path", None) or getattr(state.kv, "path", "-")
    return tr(
        lang,
        "console.status",
        language=lang.value,
        quadrant=quadrant_label(lang, state.tasks.active_quadrant),
        total=len(state.tasks),
        counts=", ".join(f"{q.value}={n}" for q, n in counts.items()),
        storage=storage,
    )


registry.register("help", cmd_help, help_key="help.help", aliases=["h", "?"])
registry.register("add", cmd_add, help_key="help.add", aliases=["a"])
registry.register("q", cmd_quadrant, help_key="help.quadrant", aliases=["quadrant"])
registry.register("list", cmd_list, help_key="help.list", aliases=["ls"])
registry.register("move", cmd_move, help_key="help.move", aliases=["mv"])
registry.register("del", cmd_delete, help_key="help.delete", aliases=["rm", "delete"])
registry.register("lang", cmd_lang, help_key="help.lang", aliases=["language"])
registry.register("status", cmd_status, help_key="help.status")
