# src/todomvc/core/state.py

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from .messages import Message
from .reducer import update
from .resolver import IndexOutOfRange
from .store import Store

logger = logging.getLogger(__name__)


@dataclass
class AppState:
    """
    Process-wide holder of the current store.

    Collaborators (console, commands) never call the reducer directly; they
    dispatch here so a stale view index is handled the same way everywhere:
    logged, ignored, previous store kept.
    """

    # Store Settings on the state for easy access in other modules later.
    settings: object

    store: Store = field(default_factory=Store)
    last_error: IndexOutOfRange | None = None

    def dispatch(self, message: Message) -> bool:
        """Apply `message`. Returns False if it was rejected (stale view index)."""
        try:
            self.store = update(self.store, message)
        except IndexOutOfRange as e:
            logger.warning("Rejected %r: %s", message, e)
            self.last_error = e
            return False
        self.last_error = None
        return True

    def dispatch_many(self, messages: Iterable[Message]) -> bool:
        """Apply messages in order; stop at the first rejected one."""
        for message in messages:
            if not self.dispatch(message):
                return False
        return True
