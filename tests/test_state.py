# tests/test_state.py

from __future__ import annotations

import logging

import pytest

from todomvc.core.messages import Add, Remove, SetFilter, Toggle, Update
from todomvc.core.models import Filter, Task
from todomvc.core.state import AppState
from todomvc.core.store import Store


def test_dispatch_replaces_store(state: AppState) -> None:
    first = state.store
    assert state.dispatch(Update("walk the dog")) is True
    assert state.dispatch(Add()) is True

    assert state.store is not first
    assert [t.description for t in state.store.tasks] == ["walk the dog"]
    assert first.tasks == []


def test_stale_index_is_logged_and_ignored(state: AppState, caplog: pytest.LogCaptureFixture) -> None:
    state.store = Store(tasks=[Task("a"), Task("b", completed=True)])
    before = state.store

    # The view shrinks between render and dispatch.
    state.dispatch(SetFilter(Filter.ACTIVE))
    shrunk = state.store

    with caplog.at_level(logging.WARNING, logger="todomvc.core.state"):
        assert state.dispatch(Toggle(1)) is False

    assert state.store is shrunk
    assert state.last_error is not None
    assert state.last_error.visible_count == 1
    assert "Rejected" in caplog.text
    assert before.tasks == shrunk.tasks


def test_dispatch_many_stops_at_first_rejection(state: AppState) -> None:
    ok = state.dispatch_many([Update("x"), Add(), Remove(5), Update("never")])

    assert ok is False
    assert state.store.total() == 1
    assert state.store.draft == ""


def test_successful_dispatch_clears_last_error(state: AppState) -> None:
    state.dispatch(Toggle(0))
    assert state.last_error is not None
    state.dispatch(Update("x"))
    assert state.last_error is None
