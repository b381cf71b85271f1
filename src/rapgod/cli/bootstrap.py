# src/rapgod/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once (unless injected),
- ensures local (gitignored) directories exist,
- wires the task store into AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.tasks_path.parent.mkdir(parents=True, exist_ok=True)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    store = TaskStore(settings.tasks_path)
    if store.skipped_lines:
        logger.warning(
            "%d unreadable line(s) in %s will be dropped on the next save: %s",
            len(store.skipped_lines),
            store.path,
            store.skipped_lines,
        )

    return AppState(settings=settings, task_store=store)
