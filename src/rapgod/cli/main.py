# src/rapgod/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, then runs the console REPL until the
user says bye (or sends EOF / Ctrl+C).
"""

from __future__ import annotations

import logging

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "WARNING")).upper()
    level = getattr(logging, level_name, logging.WARNING)

    # Replies go to stdout, logs to stderr; the full log always lands in the file.
    setup_logging(log_dir=settings.log_dir, console_level=level)

    logger.info("Starting %s...", settings.app_name)

    state = create_initial_state(settings=settings)

    try:
        run_console_loop(state)
    finally:
        logger.info("Bye. %d task(s) in %s", state.task_store.count_tasks(), state.task_store.path)


if __name__ == "__main__":
    main()
