# src/todomvc/core/filters.py

from __future__ import annotations

from .models import Filter, Task


def fits(filter: Filter, task: Task) -> bool:
    """Return True if `task` belongs to the view selected by `filter`."""
    if filter is Filter.ACTIVE:
        return not task.completed
    if filter is Filter.COMPLETED:
        return task.completed
    return True
