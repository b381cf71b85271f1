# src/rapgod/connectors/console_connector.py

from __future__ import annotations

import logging
from datetime import datetime

from ..core.chat import get_initial_message, get_response
from ..core.state import AppState

logger = logging.getLogger(__name__)


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def _print_reply(app_name: str, text: str) -> None:
    print(f"[{_ts_local()}] <<< {app_name}: {text}", flush=True)


def run_console_loop(state: AppState) -> None:
    logger.info("Console connector started.")

    app_name = str(getattr(getattr(state, "settings", None), "app_name", "RapGod"))
    _print_reply(app_name, get_initial_message(app_name))

    while not state.finished:
        try:
            user_input = input(">>> You: ").strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if not user_input:
            continue

        try:
            reply = get_response(state, user_input)
        except Exception:
            logger.exception("Command handler crashed.")
            reply = "Internal error while handling a command."

        _print_reply(app_name, reply)

    logger.info("Console connector finished.")
