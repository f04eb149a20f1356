# src/todomvc/core/models.py

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class Filter(StrEnum):
    """
    Display mode selecting a subset of tasks.

    Notes:
    - ACTIVE means "not completed", COMPLETED means "completed".
    - Values are plain names; `href` gives the route fragment used by web views.
    """

    ALL = "all"
    ACTIVE = "active"
    COMPLETED = "completed"

    @property
    def href(self) -> str:
        if self is Filter.ALL:
            return "#/"
        return f"#/{self.value}"

    @classmethod
    def parse(cls, raw: str | None) -> Filter:
        """
        Accept a filter name ("active"), a route fragment ("#/active") or an
        empty route ("", "#/") which means ALL.
        """
        text = (raw or "").strip().lower()
        if text.startswith("#"):
            text = text[1:]
        text = text.strip("/")
        if not text:
            return cls.ALL
        try:
            return cls(text)
        except ValueError:
            raise ValueError(f"unknown filter: {raw!r}") from None


@dataclass(slots=True)
class Task:
    description: str
    completed: bool = False
    editing: bool = False  # true while the description is being revised
