# src/todomvc/core/__init__.py

from .filters import fits
from .messages import (
    Add,
    ClearCompleted,
    Edit,
    IndexedMessage,
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
from .reducer import update
from .resolver import IndexOutOfRange, resolve, visible
from .store import Store

__all__ = [
    "Add",
    "ClearCompleted",
    "Edit",
    "Filter",
    "IndexOutOfRange",
    "IndexedMessage",
    "Message",
    "Nope",
    "Remove",
    "SetFilter",
    "Store",
    "Task",
    "Toggle",
    "ToggleAll",
    "ToggleEdit",
    "Update",
    "UpdateEdit",
    "fits",
    "resolve",
    "update",
    "visible",
]
