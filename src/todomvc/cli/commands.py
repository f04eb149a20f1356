# src/todomvc/cli/commands.py

from __future__ import annotations

import logging
import re
from collections.abc import Callable

from ..connectors.console_view import render_view
from ..core.messages import (
    Add,
    ClearCompleted,
    Edit,
    IndexedMessage,
    Message,
    Remove,
    SetFilter,
    Toggle,
    ToggleAll,
    ToggleEdit,
    Update,
    UpdateEdit,
)
from ..core.models import Filter
from ..core.state import AppState

# Handlers get the argument text exactly as typed after "/name ".
CommandHandler = Callable[[AppState, str], str]

# One word, then (optionally) a single separator and everything after it verbatim.
_HEAD_RE = re.compile(r"(\S*)(?:\s(.*))?\Z", re.DOTALL)

logger = logging.getLogger(__name__)


def split_head(text: str) -> tuple[str, str]:
    """
    "2 two  spaces" -> ("2", "two  spaces").

    Only the single separator after the first word is consumed; the tail keeps
    its spaces and tabs.
    """
    m = _HEAD_RE.match(text.lstrip())
    if m is None:
        return "", ""
    return m.group(1), m.group(2) or ""


class CommandRegistry:
    """Simple slash-command registry used by the console connector (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, state: AppState, line: str) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        head, rest = split_head(line[1:])
        if not head:
            return "Empty command. Use /help to list available commands."

        name = head.lower()
        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        return handler(state, rest)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        lines.append("  Any other text adds a new task.")
        return "\n".join(lines)


registry = CommandRegistry()


def _title(state: AppState) -> str:
    return str(getattr(state.settings, "app_name", "todos"))


def _view(state: AppState) -> str:
    return render_view(state.store, title=_title(state))


def _parse_number(token: str) -> int | None:
    """A 1-based console number as a 0-based view index."""
    try:
        n = int(token)
    except ValueError:
        return None
    if n < 1:
        return None
    return n - 1


def _apply(state: AppState, *messages: Message) -> str:
    if state.dispatch_many(messages):
        return _view(state)

    err = state.last_error
    if err is None:
        return "Nothing changed."
    return (
        f"No task #{err.view_index + 1} in the current view "
        f"({err.visible_count} visible). Use /list to refresh."
    )


def _apply_indexed(
    state: AppState,
    text: str,
    make: Callable[[int], IndexedMessage],
    usage: str,
) -> str:
    idx = _parse_number(split_head(text)[0])
    if idx is None:
        return usage
    return _apply(state, make(idx))


def add_task_from_text(state: AppState, text: str) -> str:
    """Plain input: type the draft, then press Enter."""
    return _apply(state, Update(text), Add())


def cmd_help(state: AppState, text: str) -> str:
    return registry.build_help()


def cmd_list(state: AppState, text: str) -> str:
    return _view(state)


def cmd_status(state: AppState, text: str) -> str:
    store = state.store
    return (
        "Status:\n"
        f"  Tasks: {store.total()} total, {store.total_completed()} completed, "
        f"{store.total_active()} active\n"
        f"  Filter: {store.filter.value} ({store.filter.href})\n"
        f"  Edit draft: {store.edit_draft!r}"
    )


def cmd_add(state: AppState, text: str) -> str:
    # Empty descriptions are accepted as-is.
    return add_task_from_text(state, text)


def cmd_toggle(state: AppState, text: str) -> str:
    return _apply_indexed(state, text, Toggle, "Usage: /toggle <n>")


def cmd_remove(state: AppState, text: str) -> str:
    return _apply_indexed(state, text, Remove, "Usage: /rm <n>")


def cmd_edit(state: AppState, text: str) -> str:
    """
    /edit <n>         -> enter (or leave) editing mode, edit draft = description
    /edit <n> <text>  -> rename in one step
    """
    number, new_text = split_head(text)
    idx = _parse_number(number)
    if idx is None:
        return "Usage: /edit <n> [new text]"

    if not new_text:
        return _apply(state, ToggleEdit(idx))

    rows = state.store.view()
    if idx < len(rows) and rows[idx][1].editing:
        return _apply(state, UpdateEdit(new_text), Edit(idx))
    return _apply(state, ToggleEdit(idx), UpdateEdit(new_text), Edit(idx))


def cmd_cancel(state: AppState, text: str) -> str:
    # ToggleEdit leaves editing mode without writing the draft into the task.
    return _apply_indexed(state, text, ToggleEdit, "Usage: /cancel <n>")


def cmd_draft(state: AppState, text: str) -> str:
    state.dispatch(UpdateEdit(text))
    return f"Edit draft: {state.store.edit_draft!r}. Use /save <n> to apply it."


def cmd_save(state: AppState, text: str) -> str:
    return _apply_indexed(state, text, Edit, "Usage: /save <n>")


def cmd_filter(state: AppState, text: str) -> str:
    """
    /filter            -> show current filter
    /filter active     -> switch view (also accepts #/active style routes)
    """
    name, _ = split_head(text)
    if not name:
        return f"Filter is {state.store.filter.value}. Use /filter all|active|completed."
    try:
        new_filter = Filter.parse(name)
    except ValueError:
        return "Usage: /filter all|active|completed"
    return _apply(state, SetFilter(new_filter))


def cmd_toggle_all(state: AppState, text: str) -> str:
    return _apply(state, ToggleAll())


def cmd_clear(state: AppState, text: str) -> str:
    return _apply(state, ClearCompleted())


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("list", cmd_list, help_text="Show the current view.", aliases=["ls"])
registry.register("status", cmd_status, help_text="Show counters, filter and edit draft.")
registry.register("add", cmd_add, help_text="Add a task: /add <text>.")
registry.register("toggle", cmd_toggle, help_text="Mark task n done/undone: /toggle <n>.", aliases=["t"])
registry.register("rm", cmd_remove, help_text="Remove task n: /rm <n>.", aliases=["remove"])
registry.register(
    "edit", cmd_edit, help_text="Start/stop editing task n, or rename it: /edit <n> [text]."
)
registry.register("cancel", cmd_cancel, help_text="Leave editing task n without saving: /cancel <n>.")
registry.register("draft", cmd_draft, help_text="Set the edit draft: /draft <text>.")
registry.register("save", cmd_save, help_text="Write the edit draft into task n: /save <n>.")
registry.register(
    "filter", cmd_filter, help_text="Switch view: /filter all | active | completed.", aliases=["f"]
)
registry.register("all", cmd_toggle_all, help_text="Toggle all visible tasks.")
registry.register("clear", cmd_clear, help_text="Remove every completed task (any view).")
