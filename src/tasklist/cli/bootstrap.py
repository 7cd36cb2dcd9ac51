# src/tasklist/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root": it takes the settings once and
wires a fresh in-memory TaskList into AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState
from ..tasks.task_models import IdMode
from ..tasks.task_store import TaskList

logger = logging.getLogger(__name__)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    id_mode = IdMode.from_str(getattr(settings, "id_mode", None))
    state = AppState(settings=settings, task_list=TaskList(id_mode=id_mode))
    logger.debug("Initial state created id_mode=%s", id_mode)
    return state
