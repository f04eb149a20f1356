# src/todomvc/core/store.py

from __future__ import annotations

from dataclasses import dataclass, field, replace

from .filters import fits
from .models import Filter, Task
from .resolver import visible


@dataclass(slots=True)
class Store:
    """
    Aggregate root of the application state.

    - tasks: insertion order is display order; only Add appends and only
      Remove / ClearCompleted delete, nothing reorders.
    - draft: text of a task not yet created.
    - edit_draft: one buffer shared by every task in editing mode.
    """

    tasks: list[Task] = field(default_factory=list)
    filter: Filter = Filter.ALL
    draft: str = ""
    edit_draft: str = ""

    def copy(self) -> Store:
        return replace(self, tasks=[replace(t) for t in self.tasks])

    # ---- queries ----

    def total(self) -> int:
        return len(self.tasks)

    def total_completed(self) -> int:
        return sum(1 for t in self.tasks if fits(Filter.COMPLETED, t))

    def total_active(self) -> int:
        return sum(1 for t in self.tasks if fits(Filter.ACTIVE, t))

    def is_all_completed_in_view(self) -> bool:
        """False for an empty view, else whether every visible task is completed."""
        shown = [t for t in self.tasks if fits(self.filter, t)]
        if not shown:
            return False
        return all(t.completed for t in shown)

    def view(self) -> list[tuple[int, Task]]:
        """
        Visible tasks paired with their view index.

        The index is what Toggle/Remove/Edit/ToggleEdit expect, not a
        position in `tasks`.
        """
        return [(view_idx, t) for view_idx, (_, t) in enumerate(visible(self.tasks, self.filter))]
