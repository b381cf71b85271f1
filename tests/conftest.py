# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from rapgod.core.state import AppState
from rapgod.tasks.task_store import TaskStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and bootstrap.

    A SimpleNamespace instead of the real config keeps tests away from the
    process environment and any local .env file.
    """
    data_dir = tmp_path / "data"
    return SimpleNamespace(
        app_name="RapGod",
        log_level="WARNING",
        data_dir=data_dir,
        tasks_path=data_dir / "tasks.txt",
        log_dir=data_dir,
    )


@pytest.fixture()
def state(settings: SimpleNamespace) -> AppState:
    """AppState backed by a real TaskStore in tmp_path."""
    return AppState(settings=settings, task_store=TaskStore(settings.tasks_path))
