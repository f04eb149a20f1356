# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from todomvc.core.models import Filter, Task
from todomvc.core.state import AppState
from todomvc.core.store import Store


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the CLI modules.

    We intentionally use a SimpleNamespace rather than reading the environment,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="todos",
        log_level="INFO",
        log_to_file=False,
        data_dir=tmp_path,
        default_filter=Filter.ALL,
    )


@pytest.fixture()
def abc_store() -> Store:
    """[A(active), B(completed), C(active)] viewed through the Active filter."""
    return Store(
        tasks=[
            Task("A"),
            Task("B", completed=True),
            Task("C"),
        ],
        filter=Filter.ACTIVE,
    )


@pytest.fixture()
def state(settings: SimpleNamespace) -> AppState:
    return AppState(settings=settings)
