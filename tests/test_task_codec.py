# tests/test_task_codec.py

from __future__ import annotations

from datetime import datetime

import pytest

from rapgod.tasks.errors import InvalidFormat
from rapgod.tasks.task_codec import display_line, parse_line, to_storage_line
from rapgod.tasks.task_models import Deadline, Event, Task, TaskKind, ToDo, set_done

DEC_2 = datetime(2024, 12, 2)
DEC_2_6PM = datetime(2024, 12, 2, 18, 0)
DEC_2_7PM = datetime(2024, 12, 2, 19, 0)


def test_display_lines_per_variant() -> None:
    assert display_line(ToDo("read book")) == "[ ] read book"
    assert display_line(Deadline("submit report", DEC_2)) == "[ ] submit report (by: Dec 02 2024)"
    assert (
        display_line(Event("team sync", DEC_2_6PM, DEC_2_7PM))
        == "[ ] team sync (from: Dec 02 2024 6:00pm to: Dec 02 2024 7:00pm)"
    )


def test_str_is_display_line() -> None:
    task = Deadline("submit report", DEC_2_6PM, is_done=True)
    assert str(task) == "[X] submit report (by: Dec 02 2024 6:00pm)"


def test_storage_line_prefixes_type_tag() -> None:
    assert to_storage_line(ToDo("read book", is_done=True)) == "[T][X] read book"
    assert to_storage_line(Deadline("submit report", DEC_2)) == "[D][ ] submit report (by: Dec 02 2024)"


def test_storage_line_rejects_multiline_description() -> None:
    with pytest.raises(InvalidFormat):
        to_storage_line(ToDo("line one\nline two"))


def test_set_done_round_trip_restores_display_line() -> None:
    task = Event("team sync", DEC_2_6PM, DEC_2_7PM)
    before = display_line(task)

    set_done(task, True)
    done_line = display_line(task)
    assert done_line[1] == "X"
    assert done_line[2:] == before[2:]

    set_done(task, False)
    assert display_line(task) == before


@pytest.mark.parametrize(
    "task",
    [
        ToDo("read book"),
        ToDo("read book", is_done=True),
        ToDo("buy milk (by: tomorrow"),
        Deadline("submit report", DEC_2),
        Deadline("submit report", DEC_2_6PM, is_done=True),
        Event("team sync", DEC_2_6PM, DEC_2_7PM),
        Event("trip to: Paris", DEC_2, datetime(2024, 12, 9, 8, 30), is_done=True),
        Event("backwards", DEC_2_7PM, DEC_2_6PM),
        Event("ask (by: prof)", DEC_2_6PM, DEC_2_7PM),
        Deadline("trip (from: home", DEC_2),
        Deadline("ancient scroll", datetime(999, 12, 2, 18, 0)),
        Event("first century", datetime(42, 1, 1), datetime(42, 1, 2, 9, 5)),
    ],
)
def test_storage_round_trip(task: Task) -> None:
    assert parse_line(to_storage_line(task)) == task


def test_parse_deadline_example() -> None:
    task = parse_line("[D][ ] submit report (by: Dec 02 2024)")

    assert isinstance(task, Deadline)
    assert task.description == "submit report"
    assert task.by == DEC_2
    assert task.is_done is False


def test_parse_event_example() -> None:
    task = parse_line("[E][X] team sync (from: Dec 02 2024 6:00pm to: Dec 02 2024 7:00pm)")

    assert isinstance(task, Event)
    assert task.description == "team sync"
    assert task.start == DEC_2_6PM
    assert task.end == DEC_2_7PM
    assert task.is_done is True


def test_parse_markers_are_case_insensitive() -> None:
    task = parse_line("[D][ ] pay rent (BY: 01/01/2025 0900)")
    assert isinstance(task, Deadline)
    assert task.by == datetime(2025, 1, 1, 9, 0)


def test_unknown_tag_falls_back_to_todo() -> None:
    task = parse_line("[Q][X] something odd")
    assert task == ToDo("something odd", is_done=True)
    assert TaskKind.from_tag("Q") is TaskKind.TODO


def test_any_mark_other_than_x_means_not_done() -> None:
    assert parse_line("[T][-] read book").is_done is False
    assert parse_line("[T][x] read book").is_done is False


def test_parse_legacy_layout_offsets() -> None:
    todo = parse_line("1. [T] [X] read book")
    assert todo == ToDo("read book", is_done=True)

    deadline = parse_line("2. [D] [ ] submit report (by: 02/12/2024 1800)")
    assert deadline == Deadline("submit report", DEC_2_6PM)

    event = parse_line("3. [E] [X] team sync (from: Dec 02 2024 6:00pm to: Dec 02 2024 7:00pm)")
    assert event == Event("team sync", DEC_2_6PM, DEC_2_7PM, is_done=True)


def test_parse_strips_line_endings() -> None:
    assert parse_line("[T][ ] read book\r\n") == ToDo("read book")


@pytest.mark.parametrize("line", ["", None])
def test_parse_rejects_empty_input(line) -> None:
    with pytest.raises(InvalidFormat):
        parse_line(line)


@pytest.mark.parametrize(
    "line",
    [
        "[T][X]",
        "[T][ ] ",
        "short",
        "[D][ ] submit report",
        "[D][ ] submit report (by: Dec 02 2024",
        "[D][ ] submit report (by: someday)",
        "[D][ ]  (by: Dec 02 2024)",
        "[E][ ] team sync (from: Dec 02 2024)",
        "[E][ ] team sync to: Dec 02 2024)",
        "[E][ ] team sync (from: Dec 02 2024 to: whenever)",
    ],
)
def test_parse_rejects_malformed_lines(line: str) -> None:
    with pytest.raises(InvalidFormat):
        parse_line(line)


@pytest.mark.parametrize(
    "task",
    [
        Deadline("read chapter 3 (by: prof)", DEC_2),
        Deadline("read chapter 3 (BY: prof)", DEC_2),
        Event("x (from: a", DEC_2_6PM, DEC_2_7PM),
        Event("party (FROM: work)", DEC_2_6PM, DEC_2_7PM),
    ],
)
def test_storage_line_rejects_descriptions_with_field_markers(task: Task) -> None:
    with pytest.raises(InvalidFormat):
        to_storage_line(task)
