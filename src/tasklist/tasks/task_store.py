# src/tasklist/tasks/task_store.py

from __future__ import annotations

import logging
import uuid
from collections.abc import Iterator
from datetime import date

from .errors import DuplicateIdentifier, InvalidIdentifier, ProjectNotFound, TaskNotFound
from .task_models import (
    EMPTY_DEADLINE,
    Deadline,
    DeadlineGroup,
    IdMode,
    Identifier,
    NumericId,
    ProjectWithTasks,
    Task,
    TokenId,
    parse_identifier,
)

logger = logging.getLogger(__name__)


class TaskList:
    """
    In-memory task store: projects (by name) -> tasks (in insertion order).

    One instance per session, nothing is persisted.
    Not thread-safe: a single console loop owns the instance.

    Identifier policy:
    - numeric mode: ids are 1, 2, 3, ... across all projects
    - token mode: ids are caller-chosen tokens ([A-Za-z0-9_-]) or, when none
      is given, short random hex tokens; unique within the store
    Ids are never reused, even after a task is deleted.
    """

    def __init__(self, id_mode: IdMode = IdMode.NUMERIC) -> None:
        self.id_mode = id_mode
        self._projects: dict[str, list[Task]] = {}
        self._last_id = 0
        self._issued_tokens: set[str] = set()
        logger.debug("TaskList ready id_mode=%s", self.id_mode)

    @property
    def last_id(self) -> int:
        """Last numeric id handed out (0 when none yet; unused in token mode)."""
        return self._last_id

    # ---- low-level helpers ----

    def _next_id(self) -> Identifier:
        if self.id_mode is IdMode.TOKEN:
            while True:
                token = uuid.uuid4().hex[:8]
                if token not in self._issued_tokens:
                    self._issued_tokens.add(token)
                    return TokenId(token)
        self._last_id += 1
        return NumericId(self._last_id)

    def _claim_id(self, raw_id: str) -> Identifier:
        if self.id_mode is not IdMode.TOKEN:
            raise InvalidIdentifier(raw_id)
        task_id = TokenId.parse(raw_id)
        if task_id.value in self._issued_tokens:
            raise DuplicateIdentifier(task_id)
        self._issued_tokens.add(task_id.value)
        return task_id

    def _sorted_names(self) -> list[str]:
        return sorted(self._projects)

    def _iter_tasks(self) -> Iterator[tuple[str, Task]]:
        # Deterministic scan: sorted project names, then insertion order.
        for name in self._sorted_names():
            for task in self._projects[name]:
                yield name, task

    def _locate(self, raw_id: str) -> tuple[str, Task]:
        task_id = parse_identifier(raw_id, self.id_mode)
        for name, task in self._iter_tasks():
            if task.id == task_id:
                return name, task
        raise TaskNotFound(task_id)

    # ---- public API ----

    def project_names(self) -> list[str]:
        return self._sorted_names()

    def add_project(self, name: str) -> None:
        if name in self._projects:
            logger.debug("Project reset name=%r (had %d tasks)", name, len(self._projects[name]))
        self._projects[name] = []

    def add_task(self, project_name: str, description: str, raw_id: str | None = None) -> Task:
        """
        raw_id is only accepted in token mode. All checks run before anything
        is allocated, so a rejected call leaves the store unchanged.
        """
        tasks = self._projects.get(project_name)
        if tasks is None:
            raise ProjectNotFound(project_name)

        if raw_id is None:
            task_id = self._next_id()
        else:
            task_id = self._claim_id(raw_id)

        task = Task(id=task_id, description=description)
        tasks.append(task)
        logger.debug("Task added id=%s project=%r", task.id, project_name)
        return task

    def find_task(self, raw_id: str) -> Task:
        return self._locate(raw_id)[1]

    def set_done(self, raw_id: str, done: bool) -> Task:
        task = self.find_task(raw_id)
        task.set_done(done)
        logger.debug("Task id=%s done=%s", task.id, task.done)
        return task

    def set_deadline(self, raw_id: str, raw_date: str) -> Task:
        """
        Parse the date before touching anything: an invalid date
        leaves the target task exactly as it was.
        """
        deadline = Deadline.parse(raw_date)
        task = self.find_task(raw_id)
        task.set_deadline(deadline)
        logger.debug("Task id=%s deadline=%s", task.id, deadline.day)
        return task

    def delete_task(self, raw_id: str) -> Task:
        name, task = self._locate(raw_id)
        self._projects[name].remove(task)
        logger.debug("Task deleted id=%s project=%r", task.id, name)
        return task

    def list_by_project(self) -> list[ProjectWithTasks]:
        """Projects sorted by name with their tasks in insertion order (fresh lists)."""
        return [
            ProjectWithTasks(name=name, tasks=list(self._projects[name]))
            for name in self._sorted_names()
        ]

    def list_due_today(self, reference: date) -> list[ProjectWithTasks]:
        """
        Same shape as list_by_project(), but only tasks due on or before `reference`.

        Projects without due tasks are kept (with an empty task list) so that
        `today` renders every project block the way `show` does.
        """
        return [
            ProjectWithTasks(
                name=name,
                tasks=[t for t in self._projects[name] if t.is_due_on_or_before(reference)],
            )
            for name in self._sorted_names()
        ]

    def list_by_deadline(self) -> list[DeadlineGroup]:
        """
        Tasks grouped by deadline date (ascending); tasks without a deadline come last.
        Inside a group: project name order, then insertion order.
        """
        groups: dict[Deadline, DeadlineGroup] = {}
        for _, task in self._iter_tasks():
            group = groups.get(task.deadline)
            if group is None:
                group = groups[task.deadline] = DeadlineGroup(deadline=task.deadline)
            group.tasks.append(task)

        dated = sorted(
            (g for d, g in groups.items() if not d.is_empty()),
            key=lambda g: g.deadline.day,
        )
        undated = groups.get(EMPTY_DEADLINE)
        return dated + ([undated] if undated is not None else [])
