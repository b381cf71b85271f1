# src/rapgod/core/chat.py

"""
Chat entry points shared by connectors.

Connectors hand over one line of user text and display whatever comes back;
all task semantics live behind the command registry.
"""

from __future__ import annotations

import logging

from ..cli.commands import registry
from .state import AppState

logger = logging.getLogger(__name__)


def get_initial_message(app_name: str = "RapGod") -> str:
    return (
        f"Yo! I'm {app_name}, spittin' your tasks in rhyme and time.\n"
        "What do you need me to keep track of? Type help for the command list."
    )


def get_response(state: AppState, text: str) -> str:
    reply = registry.handle(state, text)
    logger.debug("Handled input (%d chars), finished=%s", len(text), state.finished)
    return reply
