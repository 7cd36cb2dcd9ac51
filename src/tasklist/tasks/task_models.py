# src/tasklist/tasks/task_models.py

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import date, datetime
from enum import StrEnum

from .errors import InvalidDate, InvalidIdentifier

DATE_FORMAT = "%Y-%m-%d"

_INT_RE = re.compile(r"-?[0-9]+")
_TOKEN_RE = re.compile(r"[A-Za-z0-9_-]+")
_DATE_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


class IdMode(StrEnum):
    """How a store assigns and parses task identifiers."""

    NUMERIC = "numeric"
    TOKEN = "token"

    @classmethod
    def from_str(cls, raw: str | None) -> IdMode:
        if not raw:
            return cls.NUMERIC
        try:
            return cls(raw.strip().lower())
        except ValueError:
            return cls.NUMERIC


@dataclass(frozen=True, slots=True)
class NumericId:
    value: int

    @classmethod
    def parse(cls, raw: str) -> NumericId:
        text = raw.strip()
        if not _INT_RE.fullmatch(text):
            raise InvalidIdentifier(raw)
        value = int(text)
        if not _INT64_MIN <= value <= _INT64_MAX:
            raise InvalidIdentifier(raw)
        return cls(value)

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True, slots=True)
class TokenId:
    value: str

    @classmethod
    def parse(cls, raw: str) -> TokenId:
        text = raw.strip()
        if not _TOKEN_RE.fullmatch(text):
            raise InvalidIdentifier(raw)
        return cls(text)

    def __str__(self) -> str:
        return self.value


Identifier = NumericId | TokenId


def parse_identifier(raw: str, mode: IdMode = IdMode.NUMERIC) -> Identifier:
    """Parse a user-typed task id according to the store's identifier mode."""
    if mode is IdMode.TOKEN:
        return TokenId.parse(raw)
    return NumericId.parse(raw)


@dataclass(frozen=True, slots=True)
class Deadline:
    """
    Optional calendar date a task is due by.

    day=None is the empty deadline: it renders as nothing and is never due.
    """

    day: date | None = None

    @classmethod
    def parse(cls, raw: str) -> Deadline:
        text = raw.strip()
        if not _DATE_RE.fullmatch(text):
            raise InvalidDate(raw)
        try:
            parsed = datetime.strptime(text, DATE_FORMAT).date()
        except ValueError as e:
            raise InvalidDate(raw) from e
        return cls(parsed)

    def is_empty(self) -> bool:
        return self.day is None

    def is_due_on_or_before(self, reference: date) -> bool:
        if self.day is None:
            return False
        return self.day <= reference

    def format(self) -> str:
        if self.day is None:
            return ""
        return f" ({self.day.strftime(DATE_FORMAT)})"


EMPTY_DEADLINE = Deadline()


@dataclass(slots=True)
class Task:
    id: Identifier
    description: str
    done: bool = False
    deadline: Deadline = EMPTY_DEADLINE

    def set_done(self, done: bool) -> None:
        self.done = bool(done)

    def set_deadline(self, deadline: Deadline) -> None:
        self.deadline = deadline

    def is_due_on_or_before(self, reference: date) -> bool:
        return self.deadline.is_due_on_or_before(reference)

    def render(self) -> str:
        mark = "X" if self.done else " "
        return f"    [{mark}] {self.id}:{self.deadline.format()} {self.description}"


@dataclass(slots=True)
class ProjectWithTasks:
    """A project name with the tasks selected for one listing."""

    name: str
    tasks: list[Task] = field(default_factory=list)


@dataclass(slots=True)
class DeadlineGroup:
    """Tasks sharing one deadline (empty deadline = tasks without a date)."""

    deadline: Deadline
    tasks: list[Task] = field(default_factory=list)
