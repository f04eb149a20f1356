# tests/test_commands.py

from __future__ import annotations

from todomvc.cli.commands import CommandRegistry, registry
from todomvc.core.models import Filter
from todomvc.core.state import AppState


def _descriptions(state: AppState) -> list[str]:
    return [t.description for t in state.store.tasks]


def test_command_registry_routes_and_aliases(state: AppState) -> None:
    reg = CommandRegistry()
    called = {"a": 0}

    def handler(state, text):
        called["a"] += 1
        return text

    reg.register("alpha", handler, "a", aliases=["A"])

    assert reg.handle(state, "/alpha x  y") == "x  y"
    assert reg.handle(state, "/a z") == "z"
    assert called["a"] == 2
    assert "/alpha - a" in reg.build_help()


def test_command_registry_unknown_and_non_command(state: AppState) -> None:
    reg = CommandRegistry()
    assert reg.handle(state, "hello") is None
    assert "Unknown command" in (reg.handle(state, "/nope") or "")
    assert "Empty command" in (reg.handle(state, "/") or "")


def test_add_toggle_and_filter(state: AppState) -> None:
    registry.handle(state, "/add buy milk")
    registry.handle(state, "/add call mom")
    registry.handle(state, "/add pay rent")
    registry.handle(state, "/toggle 2")

    assert _descriptions(state) == ["buy milk", "call mom", "pay rent"]
    assert [t.completed for t in state.store.tasks] == [False, True, False]

    reply = registry.handle(state, "/filter active") or ""
    assert state.store.filter is Filter.ACTIVE
    assert "pay rent" in reply and "call mom" not in reply

    # Number 2 in the Active view is "pay rent".
    registry.handle(state, "/toggle 2")
    assert [t.completed for t in state.store.tasks] == [False, True, True]


def test_remove_by_view_number(state: AppState) -> None:
    for text in ("a", "b", "c"):
        registry.handle(state, f"/add {text}")
    registry.handle(state, "/toggle 1")
    registry.handle(state, "/filter #/active")

    registry.handle(state, "/rm 1")
    assert _descriptions(state) == ["a", "c"]


def test_stale_number_gets_a_friendly_reply(state: AppState) -> None:
    registry.handle(state, "/add only")
    reply = registry.handle(state, "/toggle 3") or ""

    assert "No task #3" in reply
    assert "1 visible" in reply
    assert state.store.tasks[0].completed is False


def test_bad_arguments_show_usage(state: AppState) -> None:
    assert (registry.handle(state, "/toggle") or "").startswith("Usage")
    assert (registry.handle(state, "/rm zero") or "").startswith("Usage")
    assert (registry.handle(state, "/save 0") or "").startswith("Usage")
    assert (registry.handle(state, "/filter done") or "").startswith("Usage")


def test_edit_flow_with_shared_draft(state: AppState) -> None:
    registry.handle(state, "/add old name")
    registry.handle(state, "/edit 1")
    assert state.store.tasks[0].editing is True
    assert state.store.edit_draft == "old name"

    registry.handle(state, "/draft new name")
    registry.handle(state, "/save 1")
    assert state.store.tasks[0].description == "new name"
    assert state.store.tasks[0].editing is False
    assert state.store.edit_draft == ""


def test_edit_with_text_renames_in_one_step(state: AppState) -> None:
    registry.handle(state, "/add first")
    registry.handle(state, "/edit 1 renamed task")
    assert state.store.tasks[0].description == "renamed task"
    assert state.store.tasks[0].editing is False

    registry.handle(state, "/edit 1")
    registry.handle(state, "/edit 1 again")
    assert state.store.tasks[0].description == "again"
    assert state.store.tasks[0].editing is False


def test_toggle_all_and_clear(state: AppState) -> None:
    for text in ("a", "b"):
        registry.handle(state, f"/add {text}")
    registry.handle(state, "/all")
    assert state.store.total_completed() == 2

    registry.handle(state, "/filter active")
    registry.handle(state, "/clear")
    assert state.store.total() == 0


def test_status_and_help(state: AppState) -> None:
    registry.handle(state, "/add a")
    status = registry.handle(state, "/status") or ""
    assert "1 total" in status
    assert "#/" in status
    assert "/toggle" in (registry.handle(state, "/help") or "")


def test_cancel_leaves_editing_without_saving(state: AppState) -> None:
    registry.handle(state, "/add keep me")
    registry.handle(state, "/edit 1")
    registry.handle(state, "/draft thrown away")
    registry.handle(state, "/cancel 1")

    assert state.store.tasks[0].description == "keep me"
    assert state.store.tasks[0].editing is False
    assert (registry.handle(state, "/cancel") or "").startswith("Usage")
    assert "No task #4" in (registry.handle(state, "/cancel 4") or "")


def test_text_arguments_keep_their_whitespace(state: AppState) -> None:
    registry.handle(state, "/add a  b\tc")
    registry.handle(state, "/add second")
    registry.handle(state, "/edit 2 two  spaces")
    registry.handle(state, "/draft  lead\tand  gaps ")

    assert _descriptions(state) == ["a  b\tc", "two  spaces"]
    assert state.store.edit_draft == " lead\tand  gaps "


def test_tab_separates_command_name(state: AppState) -> None:
    registry.handle(state, "/add\tx")
    registry.handle(state, "/TOGGLE\t1")
    assert _descriptions(state) == ["x"]
    assert state.store.tasks[0].completed is True
