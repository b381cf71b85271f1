# src/rapgod/tasks/task_codec.py

"""
Text codec for tasks.

Two renderings:
- display line: "[X] submit report (by: Dec 02 2024)"
- storage line: "[D][X] submit report (by: Dec 02 2024)"

parse_line() reads storage lines back. It is offset-based, not token-based:
the type tag and the done mark live at fixed positions described by a LineLayout.
It only promises to read lines produced by this module (or by the older
numbered-list writer, see LEGACY_LAYOUT); it is not a validator for arbitrary text.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .dates import format_date_time, parse_date_time
from .errors import InvalidFormat, TaskError
from .task_models import Deadline, Event, Task, TaskKind, ToDo

logger = logging.getLogger(__name__)

DONE_MARK = "X"
NOT_DONE_MARK = " "

BY_MARKER = " (by:"
FROM_MARKER = " (from:"
TO_MARKER = " to:"
CLOSING = ")"


@dataclass(frozen=True, slots=True)
class LineLayout:
    name: str
    tag_offset: int
    mark_offset: int
    body_offset: int


# "[D][X] body"
CURRENT_LAYOUT = LineLayout("current", tag_offset=1, mark_offset=4, body_offset=7)

# "1. [D] [X] body" (files written before the tag moved to the front of the line)
LEGACY_LAYOUT = LineLayout("legacy", tag_offset=4, mark_offset=8, body_offset=11)


def _mark(task: Task) -> str:
    return DONE_MARK if task.is_done else NOT_DONE_MARK


def describe(task: Task) -> str:
    """Variant-specific part of the line (everything after the done mark)."""
    match task:
        case Deadline(description=description, by=by):
            return f"{description}{BY_MARKER} {format_date_time(by)}{CLOSING}"
        case Event(description=description, start=start, end=end):
            return (
                f"{description}{FROM_MARKER} {format_date_time(start)}"
                f"{TO_MARKER} {format_date_time(end)}{CLOSING}"
            )
        case ToDo(description=description):
            return description
    raise TypeError(f"Not a task: {task!r}")


def display_line(task: Task) -> str:
    return f"[{_mark(task)}] {describe(task)}"


def to_storage_line(task: Task) -> str:
    if "\n" in task.description or "\r" in task.description:
        raise InvalidFormat("Task descriptions cannot span several lines.")
    # The parser splits at the first marker, so the description must not contain it.
    lower = task.description.lower()
    if isinstance(task, Deadline) and BY_MARKER in lower:
        raise InvalidFormat(f"A deadline description cannot contain '{BY_MARKER.strip()}'.")
    if isinstance(task, Event) and FROM_MARKER in lower:
        raise InvalidFormat(f"An event description cannot contain '{FROM_MARKER.strip()}'.")
    return f"[{task.kind}]{display_line(task)}"


def _layout_for(line: str) -> LineLayout:
    return CURRENT_LAYOUT if line.startswith("[") else LEGACY_LAYOUT


def _parse_deadline(body: str) -> Deadline:
    pos = body.lower().find(BY_MARKER)
    if pos < 0 or not body.endswith(CLOSING):
        raise InvalidFormat(f"Deadline is missing '{BY_MARKER.strip()} ...)': {body!r}")
    due = body[pos + len(BY_MARKER) + 1 : -len(CLOSING)]
    return Deadline(body[:pos], parse_date_time(due))


def _parse_event(body: str) -> Event:
    lower = body.lower()
    start_pos = lower.find(FROM_MARKER)
    end_pos = lower.find(TO_MARKER, start_pos + len(FROM_MARKER)) if start_pos >= 0 else -1
    if start_pos < 0 or end_pos < 0 or not body.endswith(CLOSING):
        raise InvalidFormat(
            f"Event is missing '{FROM_MARKER.strip()} ... {TO_MARKER.strip()} ...)': {body!r}"
        )
    start = body[start_pos + len(FROM_MARKER) + 1 : end_pos]
    end = body[end_pos + len(TO_MARKER) + 1 : -len(CLOSING)]
    return Event(body[:start_pos], parse_date_time(start), parse_date_time(end))


def parse_line(line: str | None) -> Task:
    """
    Rebuild a task from a storage line.

    Raises:
        InvalidFormat: for None/empty input and for every malformed line,
            including lines whose dates cannot be parsed.
    """
    if not line:
        raise InvalidFormat("String representation cannot be null or empty")

    line = line.rstrip("\r\n")
    layout = _layout_for(line)
    if len(line) <= layout.body_offset:
        raise InvalidFormat(f"Line too short for the {layout.name} layout: {line!r}")

    is_done = line[layout.mark_offset] == DONE_MARK
    kind = TaskKind.from_tag(line[layout.tag_offset])
    body = line[layout.body_offset :]

    try:
        if kind is TaskKind.DEADLINE:
            task: Task = _parse_deadline(body)
        elif kind is TaskKind.EVENT:
            task = _parse_event(body)
        else:
            task = ToDo(body)
    except InvalidFormat:
        raise
    except TaskError as exc:
        raise InvalidFormat(f"Malformed task line {line!r}: {exc}") from exc

    task.set_done(is_done)
    if layout is LEGACY_LAYOUT:
        logger.debug("Read legacy-layout line as %s", kind.name)
    return task
