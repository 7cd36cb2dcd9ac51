# src/tasklist/tasks/errors.py

"""
Error kinds raised by the task store and the command dispatcher.

Two families with different handling:
- DomainError: bad project/task/date references typed by the user.
  The dispatcher prints the message and the line counts as processed.
- CommandError: malformed commands (missing arguments, unknown sub-verb).
  Returned to the adapter as the error of that line; the session continues.
"""

from __future__ import annotations


class TaskListError(Exception):
    """Base class for all task manager errors."""


class DomainError(TaskListError):
    pass


class ProjectNotFound(DomainError):
    def __init__(self, project_name: str) -> None:
        self.project_name = project_name
        super().__init__(f'Could not find a project with the name "{project_name}".')


class TaskNotFound(DomainError):
    def __init__(self, task_id: object) -> None:
        self.task_id = task_id
        super().__init__(f'Task with ID "{task_id}" not found.')


class InvalidIdentifier(DomainError):
    def __init__(self, raw: str) -> None:
        self.raw = raw
        super().__init__(f'Invalid ID "{raw}".')


class DuplicateIdentifier(DomainError):
    def __init__(self, task_id: object) -> None:
        self.task_id = task_id
        super().__init__(f'Task with ID "{task_id}" already exists.')


class InvalidDate(DomainError):
    def __init__(self, raw: str, expected: str = "YYYY-MM-DD") -> None:
        self.raw = raw
        super().__init__(f'Invalid date "{raw}". Expected format {expected}.')


class CommandError(TaskListError):
    pass


class ArityError(CommandError):
    def __init__(self, command: str, usage: str) -> None:
        self.command = command
        self.usage = usage
        super().__init__(f"Could not execute {command}. Usage: {usage}")


class UnknownSubcommand(CommandError):
    def __init__(self, command: str, subcommand: str, usage: str) -> None:
        self.command = command
        self.subcommand = subcommand
        self.usage = usage
        super().__init__(f'Unknown subcommand "{subcommand}" for {command}. Usage: {usage}')
