# src/tasklist/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from ..core.state import AppState
from ..tasks.errors import ArityError, CommandError, DomainError, UnknownSubcommand
from ..tasks.task_api import deadline_view_lines, show_lines, today_lines
from ..tasks.task_models import IdMode

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class CommandResult:
    """
    Outcome of one input line.

    lines: output lines (without trailing newlines)
    quit:  the session should end
    error: malformed command; the adapter reports it and keeps going
    """

    lines: list[str] = field(default_factory=list)
    quit: bool = False
    error: CommandError | None = None

    def emit(self, text: str) -> None:
        self.lines.extend(text.split("\n"))


CommandHandler = Callable[[AppState, str, CommandResult], None]


@dataclass(frozen=True, slots=True)
class _Command:
    handler: CommandHandler
    usage: tuple[str, ...]


class CommandRegistry:
    """
    Command table for the task manager (show, add, check, ...).

    The first whitespace-delimited token selects the command (case-sensitive);
    the handler receives the rest of the line untouched.
    """

    def __init__(self) -> None:
        self._commands: dict[str, _Command] = {}
        self._order: list[str] = []

    def register(self, name: str, handler: CommandHandler, usage: list[str] | None = None) -> None:
        if name not in self._commands:
            self._order.append(name)
        self._commands[name] = _Command(handler=handler, usage=tuple(usage or [name]))

    def handle(self, state: AppState, line: str) -> CommandResult:
        result = CommandResult()

        parts = line.strip().split(None, 1)
        if not parts:
            return result

        name = parts[0]
        rest = parts[1] if len(parts) > 1 else ""

        command = self._commands.get(name)
        if command is None:
            result.emit(f'Unknown command "{name}".')
            return result

        try:
            command.handler(state, rest, result)
        except DomainError as e:
            logger.debug("Command %s rejected: %s", name, e)
            result.emit(str(e))
        except CommandError as e:
            result.error = e
        return result

    def build_help(self) -> str:
        lines = ["Commands:"]
        for name in self._order:
            lines.extend(self._commands[name].usage)
        return "\n".join(lines)


registry = CommandRegistry()


def _split(rest: str, maxsplit: int) -> list[str]:
    return rest.split(None, maxsplit) if rest.strip() else []


ADD_PROJECT_USAGE = "add project <project name>"
ADD_TASK_USAGE = "add task <project name> <task description>"
ADD_TASK_ID_USAGE = "add task <project name> #<task ID> <task description>"
ADD_USAGE = f"{ADD_PROJECT_USAGE} | {ADD_TASK_USAGE}"
VIEW_USAGE = "view by project | view by deadline"


def cmd_show(state: AppState, rest: str, result: CommandResult) -> None:
    result.lines.extend(show_lines(state))


def cmd_today(state: AppState, rest: str, result: CommandResult) -> None:
    result.lines.extend(today_lines(state))


def cmd_add(state: AppState, rest: str, result: CommandResult) -> None:
    """
    add project <name...>          -> name is the rest of the line
    add task <project> <desc...>   -> description may be empty
    add task <project> #<id> <desc...> -> caller-chosen id (token mode only)
    """
    args = _split(rest, 1)
    if len(args) < 2:
        raise ArityError("add", ADD_USAGE)

    sub, tail = args
    if sub == "project":
        state.task_list.add_project(tail.strip())
        return

    if sub == "task":
        task_args = tail.split(None, 1)
        project = task_args[0]
        description = task_args[1] if len(task_args) > 1 else ""

        raw_id = None
        if state.task_list.id_mode is IdMode.TOKEN and description.startswith("#"):
            id_part = description.split(None, 1)
            raw_id = id_part[0][1:]
            description = id_part[1] if len(id_part) > 1 else ""
        state.task_list.add_task(project, description, raw_id)
        return

    raise UnknownSubcommand("add", sub, ADD_USAGE)


def _set_done(command: str, done: bool) -> CommandHandler:
    def handler(state: AppState, rest: str, result: CommandResult) -> None:
        args = _split(rest, 1)
        if not args:
            raise ArityError(command, f"{command} <task ID>")
        state.task_list.set_done(args[0], done)

    return handler


cmd_check = _set_done("check", True)
cmd_uncheck = _set_done("uncheck", False)


def cmd_deadline(state: AppState, rest: str, result: CommandResult) -> None:
    args = _split(rest, 2)
    if len(args) < 2:
        raise ArityError("deadline", "deadline <task ID> <date>")
    state.task_list.set_deadline(args[0], args[1])


def cmd_delete(state: AppState, rest: str, result: CommandResult) -> None:
    args = _split(rest, 1)
    if not args:
        raise ArityError("delete", "delete <task ID>")
    state.task_list.delete_task(args[0])


def cmd_view(state: AppState, rest: str, result: CommandResult) -> None:
    args = rest.split()
    if not args:
        raise ArityError("view", VIEW_USAGE)
    if args[0] != "by":
        raise UnknownSubcommand("view", args[0], VIEW_USAGE)
    if len(args) < 2:
        raise ArityError("view", VIEW_USAGE)

    if args[1] == "project":
        result.lines.extend(show_lines(state))
        return
    if args[1] == "deadline":
        result.lines.extend(deadline_view_lines(state))
        return

    raise UnknownSubcommand("view", args[1], VIEW_USAGE)


def cmd_help(state: AppState, rest: str, result: CommandResult) -> None:
    result.emit(registry.build_help())


def cmd_quit(state: AppState, rest: str, result: CommandResult) -> None:
    result.quit = True


registry.register("show", cmd_show)
registry.register("today", cmd_today)
registry.register("add", cmd_add, usage=[ADD_PROJECT_USAGE, ADD_TASK_USAGE, ADD_TASK_ID_USAGE])
registry.register("check", cmd_check, usage=["check <task ID>"])
registry.register("uncheck", cmd_uncheck, usage=["uncheck <task ID>"])
registry.register("deadline", cmd_deadline, usage=["deadline <task ID> <date>"])
registry.register("delete", cmd_delete, usage=["delete <task ID>"])
registry.register("view", cmd_view, usage=["view by project", "view by deadline"])
registry.register("help", cmd_help)
registry.register("quit", cmd_quit)
