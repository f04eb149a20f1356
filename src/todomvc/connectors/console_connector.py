# src/todomvc/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..cli.commands import add_task_from_text
from ..cli.commands import registry as command_registry
from ..core.state import AppState
from .console_view import render_view

logger = logging.getLogger(__name__)

EXIT_COMMANDS = ("/exit", "/quit")


def handle_line(state: AppState, line: str) -> str | None:
    """
    Turn one console line into a reply.

    Slash commands go to the registry; any other non-empty text becomes a new
    task. Returns None for blank lines.
    """
    line = line.strip()
    if not line:
        return None

    try:
        reply = command_registry.handle(state, line)
    except Exception:
        logger.exception("Command handler crashed.")
        return "Internal error while handling a command."

    if reply is not None:
        return reply
    return add_task_from_text(state, line)


def run_console_loop(
    state: AppState,
    *,
    read: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
) -> None:
    app_name = str(getattr(state.settings, "app_name", "todos"))
    logger.info("Console connector started.")
    write("[CONSOLE] Type a task to add it. Use /help for commands. Use /exit to quit.\n")
    write(render_view(state.store, title=app_name))

    while True:
        try:
            user_input = read("> ").strip()
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

    logger.info("Console connector finished (tasks=%d).", state.store.total())
