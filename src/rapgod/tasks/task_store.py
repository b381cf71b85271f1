# src/rapgod/tasks/task_store.py

from __future__ import annotations

import contextlib
import logging
import os
from pathlib import Path

from .errors import InvalidFormat, TaskIndexError
from .task_codec import parse_line, to_storage_line
from .task_models import Task

logger = logging.getLogger(__name__)


class TaskStore:
    """
    Line-file task store.

    Holds the ordered task list in memory and mirrors it to a UTF-8 text file,
    one storage line per task:
    - the file is read once, on construction
    - every mutation rewrites the whole file (tmp file + os.replace)

    Task numbers in the public API are 1-based, matching what `list` shows.
    """

    def __init__(self, path: str | Path = "tasks.txt") -> None:
        self._path = Path(path)
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._tasks: list[Task] = []
        self.skipped_lines: list[int] = []
        self._load()
        logger.info(
            "TaskStore ready path=%s total=%s skipped=%s",
            self._path,
            len(self._tasks),
            len(self.skipped_lines),
        )

    @property
    def path(self) -> Path:
        return self._path

    # ---- low-level helpers ----

    def _load(self) -> None:
        if not self._path.exists():
            return

        text = self._path.read_text("utf-8")
        for lineno, raw in enumerate(text.splitlines(), start=1):
            if not raw.strip():
                continue
            try:
                self._tasks.append(parse_line(raw))
            except InvalidFormat as exc:
                # Corrupt lines are dropped from memory and disappear on the next save.
                self.skipped_lines.append(lineno)
                logger.warning("Skipping unreadable task line %s in %s: %s", lineno, self._path, exc)

    def _check_index(self, index: int) -> int:
        if index < 1 or index > len(self._tasks):
            raise TaskIndexError(index, len(self._tasks))
        return index - 1

    def save(self) -> None:
        payload = "".join(to_storage_line(t) + "\n" for t in self._tasks)
        tmp = self._path.with_suffix(self._path.suffix + ".tmp")
        try:
            tmp.write_text(payload, "utf-8")
            os.replace(tmp, self._path)
        except OSError:
            if tmp.is_file():
                with contextlib.suppress(OSError):
                    tmp.unlink()
            raise
        with contextlib.suppress(OSError):
            # The list may hold personal notes; keep the file private.
            os.chmod(self._path, 0o600)
        logger.debug("Saved %d tasks to %s", len(self._tasks), self._path)

    # ---- public API ----

    def tasks(self) -> list[Task]:
        return list(self._tasks)

    def count_tasks(self) -> int:
        return len(self._tasks)

    def get_task(self, index: int) -> Task:
        return self._tasks[self._check_index(index)]

    def add_task(self, task: Task) -> Task:
        to_storage_line(task)  # reject unstorable tasks before touching the list
        self._tasks.append(task)
        try:
            self.save()
        except OSError:
            self._tasks.pop()
            raise
        logger.debug("Task added #%d kind=%s", len(self._tasks), task.kind.name)
        return task

    def delete_task(self, index: int) -> Task:
        pos = self._check_index(index)
        task = self._tasks.pop(pos)
        try:
            self.save()
        except OSError:
            self._tasks.insert(pos, task)
            raise
        logger.debug("Task deleted #%d kind=%s", index, task.kind.name)
        return task

    def set_task_done(self, index: int, done: bool) -> Task:
        task = self._tasks[self._check_index(index)]
        was_done = task.is_done
        task.set_done(done)
        try:
            self.save()
        except OSError:
            task.set_done(was_done)
            raise
        logger.debug("Task #%d done=%s", index, done)
        return task
