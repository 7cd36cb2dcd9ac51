# src/tasklist/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the command layer.

Commands depend on this Protocol instead of the concrete TaskList,
which keeps the store swappable and makes testing easier.
"""

from datetime import date
from typing import Protocol

from ..tasks.task_models import DeadlineGroup, IdMode, ProjectWithTasks, Task


class TaskRepo(Protocol):
    id_mode: IdMode

    @property
    def last_id(self) -> int: ...

    def add_project(self, name: str) -> None: ...

    def add_task(self, project_name: str, description: str, raw_id: str | None = None) -> Task: ...

    def find_task(self, raw_id: str) -> Task: ...

    def set_done(self, raw_id: str, done: bool) -> Task: ...

    def set_deadline(self, raw_id: str, raw_date: str) -> Task: ...

    def delete_task(self, raw_id: str) -> Task: ...

    def list_by_project(self) -> list[ProjectWithTasks]: ...

    def list_due_today(self, reference: date) -> list[ProjectWithTasks]: ...

    def list_by_deadline(self) -> list[DeadlineGroup]: ...
