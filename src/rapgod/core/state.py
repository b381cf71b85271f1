# src/rapgod/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..tasks.task_store import TaskStore


@dataclass
class AppState:
    # Settings object (config.Settings, or a SimpleNamespace in tests).
    settings: object

    task_store: TaskStore

    # Set by the `bye` command; front ends stop reading input once it is True.
    finished: bool = False
