# tests/conftest.py

from __future__ import annotations

from datetime import date
from types import SimpleNamespace

import pytest

from tasklist.core.state import AppState
from tasklist.tasks.task_store import TaskList

FIXED_TODAY = date(2020, 7, 25)


@pytest.fixture()
def settings() -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the console connector.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment.
    """
    return SimpleNamespace(
        app_name="tasklist-test",
        log_level="DEBUG",
        log_dir=None,
        log_to_file=False,
        id_mode="numeric",
        prompt="> ",
    )


@pytest.fixture()
def task_list() -> TaskList:
    return TaskList()


@pytest.fixture()
def state(settings: SimpleNamespace, task_list: TaskList) -> AppState:
    """AppState with a fresh store and the clock pinned to FIXED_TODAY."""
    return AppState(settings=settings, task_list=task_list, today=lambda: FIXED_TODAY)
