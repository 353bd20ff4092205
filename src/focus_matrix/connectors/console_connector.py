# src/focus_matrix/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..cli.commands import add_text, registry as command_registry, render_board
from ..core.state import AppState
from ..i18n import tr

logger = logging.getLogger(__name__)

EXIT_COMMANDS = ("/exit", "/quit")


def handle_line(state: AppState, line: str) -> str | None:
    """
    Process one line of console input and return the reply to print.

    Slash commands go to the registry; any other non-empty text is added as a
    task to the active quadrant. Handler crashes are logged and reported, so the
    session survives them.
    """
    line = line.strip()
    if not line:
        return None

    try:
        reply = command_registry.handle(state, line)
        if reply is None:
            reply = add_text(state, line)
    except Exception:
        logger.exception("Command handler crashed (line=%r).", line)
        reply = tr(state.language.value, "console.internalError")
    return reply


def run_console_loop(
    state: AppState,
    *,
    read: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
) -> None:
    logger.info("Console started (tasks=%d language=%s).", len(state.tasks), state.language.value.value)

    write(render_board(state))
    write("")
    write(tr(state.language.value, "console.welcome"))

    while True:
        lang = state.language.value
        prompt = tr(lang, "console.prompt", quadrant=state.tasks.active_quadrant.value)
        try:
            user_input = read(prompt).strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            write("")
            break

        if user_input.lower() in EXIT_COMMANDS:
            logger.info("Console exit command received.")
            break

        reply = handle_line(state, user_input)
        if reply is not None:
            write(reply)

    write(tr(state.language.value, "console.bye"))
    logger.info("Console finished.")
