# src/todomvc/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root": it loads settings once and wires an
empty store into AppState. Nothing is loaded from disk; tasks live only for
the lifetime of the process.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.models import Filter
from ..core.state import AppState
from ..core.store import Store

logger = logging.getLogger(__name__)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    default_filter = getattr(settings, "default_filter", Filter.ALL)
    state = AppState(settings=settings, store=Store(filter=default_filter))
    logger.debug("Initial state ready (filter=%s).", default_filter.value)
    return state
