# src/tasklist/core/state.py

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import date

from .ports import TaskRepo


@dataclass
class AppState:
    # Settings live on the state for easy access from commands and connectors.
    settings: object
    task_list: TaskRepo

    # Reference date for "today"; injectable so tests do not depend on the wall clock.
    today: Callable[[], date] = field(default=date.today)
