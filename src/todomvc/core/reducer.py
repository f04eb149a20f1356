# src/todomvc/core/reducer.py

"""
The update function: (store, message) -> next store.

All state changes pass through `update`. The incoming store is never
mutated; a copy is changed and returned. Index-bearing messages resolve their
view index before touching anything, so an IndexOutOfRange leaves the
caller's store exactly as it was.
"""

from __future__ import annotations

import logging
from typing import assert_never

from .filters import fits
from .messages import (
    Add,
    ClearCompleted,
    Edit,
    Message,
    Nope,
    Remove,
    SetFilter,
    Toggle,
    ToggleAll,
    ToggleEdit,
    Update,
    UpdateEdit,
)
from .models import Filter, Task
from .resolver import resolve
from .store import Store

logger = logging.getLogger(__name__)


def update(store: Store, message: Message) -> Store:
    """
    Apply one message and return the next store.

    Raises IndexOutOfRange when Toggle/Remove/Edit/ToggleEdit name a view
    position that the current filter does not have.
    """
    logger.debug("update %r (tasks=%d filter=%s)", message, store.total(), store.filter.value)

    match message:
        case Add():
            nxt = store.copy()
            nxt.tasks.append(Task(description=store.draft))
            nxt.draft = ""
            return nxt

        case Update(text=text):
            nxt = store.copy()
            nxt.draft = text
            return nxt

        case UpdateEdit(text=text):
            nxt = store.copy()
            nxt.edit_draft = text
            return nxt

        case ToggleEdit(index=index):
            idx = resolve(store.tasks, store.filter, index)
            nxt = store.copy()
            task = nxt.tasks[idx]
            nxt.edit_draft = task.description
            task.editing = not task.editing
            return nxt

        case Edit(index=index):
            idx = resolve(store.tasks, store.filter, index)
            nxt = store.copy()
            # Shared buffer: whatever was typed last lands in the targeted task.
            task = nxt.tasks[idx]
            task.description = store.edit_draft
            task.editing = not task.editing
            nxt.edit_draft = ""
            return nxt

        case Toggle(index=index):
            idx = resolve(store.tasks, store.filter, index)
            nxt = store.copy()
            task = nxt.tasks[idx]
            task.completed = not task.completed
            return nxt

        case Remove(index=index):
            idx = resolve(store.tasks, store.filter, index)
            nxt = store.copy()
            del nxt.tasks[idx]
            return nxt

        case SetFilter(filter=new_filter):
            nxt = store.copy()
            nxt.filter = new_filter
            return nxt

        case ToggleAll():
            target = not store.is_all_completed_in_view()
            nxt = store.copy()
            for task in nxt.tasks:
                if fits(store.filter, task):
                    task.completed = target
            return nxt

        case ClearCompleted():
            # Global purge: the current filter is ignored on purpose.
            nxt = store.copy()
            nxt.tasks = [t for t in nxt.tasks if fits(Filter.ACTIVE, t)]
            return nxt

        case Nope():
            return store

        case _:
            assert_never(message)
