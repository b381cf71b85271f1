# src/rapgod/tasks/errors.py

"""
Error kinds raised by the task subsystem.

All of them derive from ValueError, so callers that only care about
"bad input" can catch a single type.
"""

from __future__ import annotations


class TaskError(ValueError):
    """Base class for task model, codec and store errors."""


class InvalidFormat(TaskError):
    """A persistence line is empty or does not follow the fixed-offset layout."""


class InvalidDateFormat(TaskError):
    """No supported date/time pattern matched the input text."""


class TaskIndexError(TaskError):
    """A 1-based task number does not point into the task list."""

    def __init__(self, index: int, size: int) -> None:
        self.index = index
        self.size = size
        if size == 0:
            msg = f"Task #{index} does not exist: the list is empty."
        else:
            msg = f"Task #{index} does not exist. Pick a number from 1 to {size}."
        super().__init__(msg)
