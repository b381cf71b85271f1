# src/rapgod/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum
from typing import TypeAlias

from .errors import TaskError


class TaskKind(StrEnum):
    """
    One-character type tag written into persistence lines.

    Notes:
    - the parser treats any unknown tag as TODO, so TODO must stay the fallback.
    """

    TODO = "T"
    DEADLINE = "D"
    EVENT = "E"

    @classmethod
    def from_tag(cls, raw: str) -> TaskKind:
        try:
            return cls(raw)
        except ValueError:
            return cls.TODO


def _require_description(description: str) -> None:
    if not description or not description.strip():
        raise TaskError("The description of a task cannot be empty.")


def _require_point_in_time(value: datetime, field: str) -> None:
    # Storage lines keep naive minutes only; anything finer would not survive a reload.
    if value.tzinfo is not None:
        raise TaskError(f"{field} must be a local (naive) date/time.")
    if value.second or value.microsecond:
        raise TaskError(f"{field} must not carry seconds: {value.isoformat()}")


@dataclass(slots=True)
class ToDo:
    description: str
    is_done: bool = False

    kind = TaskKind.TODO

    def __post_init__(self) -> None:
        _require_description(self.description)

    def set_done(self, done: bool) -> None:
        self.is_done = done

    def __str__(self) -> str:
        from .task_codec import display_line

        return display_line(self)


@dataclass(slots=True)
class Deadline:
    description: str
    by: datetime
    is_done: bool = False

    kind = TaskKind.DEADLINE

    def __post_init__(self) -> None:
        _require_description(self.description)
        _require_point_in_time(self.by, "by")

    def set_done(self, done: bool) -> None:
        self.is_done = done

    def __str__(self) -> str:
        from .task_codec import display_line

        return display_line(self)


@dataclass(slots=True)
class Event:
    """An event spanning start..end. No ordering between the two is enforced."""

    description: str
    start: datetime
    end: datetime
    is_done: bool = False

    kind = TaskKind.EVENT

    def __post_init__(self) -> None:
        _require_description(self.description)
        _require_point_in_time(self.start, "from")
        _require_point_in_time(self.end, "to")

    def set_done(self, done: bool) -> None:
        self.is_done = done

    def __str__(self) -> str:
        from .task_codec import display_line

        return display_line(self)


Task: TypeAlias = ToDo | Deadline | Event


def set_done(task: Task, done: bool) -> None:
    task.set_done(done)
