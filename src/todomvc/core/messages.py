# src/todomvc/core/messages.py

"""
Messages accepted by the reducer.

The set is closed: `Message` is a union of these dataclasses and the reducer
matches on it exhaustively. Index-bearing messages carry a *view* index
(a position in the filtered list the user sees).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .models import Filter


@dataclass(frozen=True, slots=True)
class Add:
    """Append the current draft as a new task."""


@dataclass(frozen=True, slots=True)
class Update:
    text: str


@dataclass(frozen=True, slots=True)
class UpdateEdit:
    text: str


@dataclass(frozen=True, slots=True)
class ToggleEdit:
    index: int


@dataclass(frozen=True, slots=True)
class Edit:
    index: int


@dataclass(frozen=True, slots=True)
class Toggle:
    index: int


@dataclass(frozen=True, slots=True)
class Remove:
    index: int


@dataclass(frozen=True, slots=True)
class SetFilter:
    filter: Filter


@dataclass(frozen=True, slots=True)
class ToggleAll:
    pass


@dataclass(frozen=True, slots=True)
class ClearCompleted:
    pass


@dataclass(frozen=True, slots=True)
class Nope:
    """Input that does not change anything (e.g. a non-Enter keypress)."""


IndexedMessage = Union[ToggleEdit, Edit, Toggle, Remove]

Message = Union[
    Add,
    Update,
    UpdateEdit,
    ToggleEdit,
    Edit,
    Toggle,
    Remove,
    SetFilter,
    ToggleAll,
    ClearCompleted,
    Nope,
]
