# src/tasklist/tasks/task_api.py

from __future__ import annotations

from collections.abc import Iterable

from ..core.state import AppState
from .task_models import DATE_FORMAT, DeadlineGroup, ProjectWithTasks

NO_DEADLINE_HEADER = "No deadline"


def render_projects(projects: Iterable[ProjectWithTasks]) -> list[str]:
    """
    Project blocks: header line, one line per task, then a blank line.
    Empty projects still get their header and blank line.
    """
    lines: list[str] = []
    for project in projects:
        lines.append(project.name)
        lines.extend(task.render() for task in project.tasks)
        lines.append("")
    return lines


def render_deadline_groups(groups: Iterable[DeadlineGroup]) -> list[str]:
    lines: list[str] = []
    for group in groups:
        day = group.deadline.day
        lines.append(NO_DEADLINE_HEADER if day is None else day.strftime(DATE_FORMAT))
        lines.extend(task.render() for task in group.tasks)
        lines.append("")
    return lines


def show_lines(state: AppState) -> list[str]:
    return render_projects(state.task_list.list_by_project())


def today_lines(state: AppState) -> list[str]:
    """Uses state.today() as the reference date so tests can pin the clock."""
    return render_projects(state.task_list.list_due_today(state.today()))


def deadline_view_lines(state: AppState) -> list[str]:
    return render_deadline_groups(state.task_list.list_by_deadline())
