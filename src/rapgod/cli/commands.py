# src/rapgod/cli/commands.py

from __future__ import annotations

import logging
import re
from collections.abc import Callable

from ..core.state import AppState
from ..tasks.dates import parse_date_time
from ..tasks.errors import TaskError
from ..tasks.task_models import Deadline, Event, Task, ToDo

CommandHandler = Callable[[AppState, str], str]

logger = logging.getLogger(__name__)

FAREWELL = "Peace out! Catch you on the flip side!"

_DEADLINE_RE = re.compile(r"^(?P<desc>.+?)\s+/by\s+(?P<by>.+)$", re.IGNORECASE)
_EVENT_RE = re.compile(
    r"^(?P<desc>.+?)\s+/from\s+(?P<start>.+?)\s+/to\s+(?P<end>.+)$", re.IGNORECASE
)


class CommandRegistry:
    """Word-command registry (list, todo, deadline, ...) used by connectors."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, state: AppState, line: str) -> str:
        """
        Handle a line like "deadline return book /by Dec 02 2024".
        The first word picks the handler, the rest is passed through untouched.
        TaskError subclasses are user mistakes and become the reply.
        """
        line = line.strip()
        if not line:
            return "Yo, say something! Use help to list available commands."

        name, _, args = line.partition(" ")
        name = name.lower()

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: {name}. Use help to list available commands."

        try:
            return handler(state, args.strip())
        except TaskError as e:
            logger.info("Command %s rejected: %s", name, e)
            return str(e)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  {name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def _numbered(index: int, task: Task) -> str:
    return f"{index}.[{task.kind}]{task}"


def _parse_number(args: str, usage: str) -> int:
    try:
        return int(args.split()[0])
    except (IndexError, ValueError):
        raise TaskError(f"Usage: {usage}") from None


def _added(state: AppState, task: Task) -> str:
    state.task_store.add_task(task)
    n = state.task_store.count_tasks()
    return (
        "Got it. I've added this task:\n"
        f"  [{task.kind}]{task}\n"
        f"Now you have {n} task{'s' if n != 1 else ''} in the list."
    )


def cmd_help(state: AppState, args: str) -> str:
    return registry.build_help()


def cmd_list(state: AppState, args: str) -> str:
    tasks = state.task_store.tasks()
    if not tasks:
        return "Your list is empty. Drop a todo, deadline or event on me!"
    lines = ["Here are the tasks in your list:"]
    lines.extend(_numbered(i, t) for i, t in enumerate(tasks, start=1))
    return "\n".join(lines)


def cmd_todo(state: AppState, args: str) -> str:
    if not args:
        raise TaskError("Usage: todo <description>")
    return _added(state, ToDo(args))


def cmd_deadline(state: AppState, args: str) -> str:
    m = _DEADLINE_RE.match(args)
    if not m:
        raise TaskError("Usage: deadline <description> /by <date>")
    return _added(state, Deadline(m["desc"], parse_date_time(m["by"])))


def cmd_event(state: AppState, args: str) -> str:
    m = _EVENT_RE.match(args)
    if not m:
        raise TaskError("Usage: event <description> /from <date> /to <date>")
    return _added(
        state,
        Event(m["desc"], parse_date_time(m["start"]), parse_date_time(m["end"])),
    )


def cmd_mark(state: AppState, args: str) -> str:
    task = state.task_store.set_task_done(_parse_number(args, "mark <task number>"), True)
    return f"Nice! I've marked this task as done:\n  [{task.kind}]{task}"


def cmd_unmark(state: AppState, args: str) -> str:
    task = state.task_store.set_task_done(_parse_number(args, "unmark <task number>"), False)
    return f"OK, I've marked this task as not done yet:\n  [{task.kind}]{task}"


def cmd_delete(state: AppState, args: str) -> str:
    task = state.task_store.delete_task(_parse_number(args, "delete <task number>"))
    n = state.task_store.count_tasks()
    return (
        "Noted. I've removed this task:\n"
        f"  [{task.kind}]{task}\n"
        f"Now you have {n} task{'s' if n != 1 else ''} in the list."
    )


def cmd_bye(state: AppState, args: str) -> str:
    state.finished = True
    return FAREWELL


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("list", cmd_list, help_text="Show all tasks.", aliases=["ls"])
registry.register("todo", cmd_todo, help_text="Add a todo: todo <description>.")
registry.register(
    "deadline",
    cmd_deadline,
    help_text="Add a deadline: deadline <description> /by <dd/MM/yyyy HHmm | MMM dd yyyy>.",
)
registry.register(
    "event",
    cmd_event,
    help_text="Add an event: event <description> /from <date> /to <date>.",
)
registry.register("mark", cmd_mark, help_text="Mark a task as done: mark <number>.")
registry.register("unmark", cmd_unmark, help_text="Mark a task as not done: unmark <number>.")
registry.register("delete", cmd_delete, help_text="Remove a task: delete <number>.")
registry.register("bye", cmd_bye, help_text="Say goodbye and quit.", aliases=["exit", "quit"])
