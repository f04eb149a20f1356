# src/todomvc/connectors/console_view.py

"""
Plain-text rendering of the store for the console connector.

Task numbers shown here are 1-based view positions; commands subtract one
before dispatching, so `/toggle 2` always means "the second line you see".
"""

from __future__ import annotations

from ..core.models import Filter, Task
from ..core.store import Store


def render_task(number: int, task: Task) -> str:
    mark = "x" if task.completed else " "
    line = f"{number:>3}. [{mark}] {task.description}"
    if task.editing:
        line += "  (editing)"
    return line


def render_filters(current: Filter) -> str:
    parts = []
    for f in Filter:
        label = f.value.capitalize()
        parts.append(f"[{label}]" if f is current else label)
    return " | ".join(parts)


def render_view(store: Store, *, title: str = "todos") -> str:
    lines = [f"== {title} ({store.filter.value}) =="]

    rows = store.view()
    if rows:
        all_mark = "x" if store.is_all_completed_in_view() else " "
        lines.append(f"     [{all_mark}] toggle all")
        for view_idx, task in rows:
            lines.append(render_task(view_idx + 1, task))
    else:
        lines.append("     (nothing to show)")

    left = store.total_active()
    lines.append(
        f"{left} item{'' if left == 1 else 's'} left · "
        f"{render_filters(store.filter)} · "
        f"Clear completed ({store.total_completed()})"
    )
    if store.draft:
        lines.append(f"draft: {store.draft}")
    return "\n".join(lines)
