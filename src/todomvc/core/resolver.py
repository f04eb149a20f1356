# src/todomvc/core/resolver.py

"""
Translation between view positions and storage positions.

A view index is a position inside the filtered sequence the user sees.
A storage index is a position inside the full task list. The mapping is
derived from scratch on every call: the task list and the filter can both
change between two messages, so a remembered mapping would point at the
wrong task.
"""

from __future__ import annotations

from collections.abc import Sequence

from .filters import fits
from .models import Filter, Task


class IndexOutOfRange(IndexError):
    """A view index has no task behind it under the current filter."""

    def __init__(self, view_index: int, visible_count: int, filter: Filter) -> None:
        super().__init__(
            f"view index {view_index} out of range "
            f"({visible_count} visible task(s), filter={filter.value})"
        )
        self.view_index = view_index
        self.visible_count = visible_count
        self.filter = filter


def visible(tasks: Sequence[Task], filter: Filter) -> list[tuple[int, Task]]:
    """(storage index, task) pairs of the filtered view, in storage order."""
    return [(i, t) for i, t in enumerate(tasks) if fits(filter, t)]


def resolve(tasks: Sequence[Task], filter: Filter, view_index: int) -> int:
    """Return the storage index of the `view_index`-th task passing `filter`."""
    survivors = visible(tasks, filter)
    if view_index < 0 or view_index >= len(survivors):
        raise IndexOutOfRange(view_index, len(survivors), filter)
    storage_index, _ = survivors[view_index]
    return storage_index
