# src/astro_schedule/cli/commands.py

from __future__ import annotations

import logging
import shlex
from collections.abc import Callable, Iterable

from ..core.state import AppState
from ..schedule.errors import InvalidTaskError, ScheduleError
from ..schedule.task_factory import parse_task
from ..schedule.task_models import Priority, Task

CommandHandler = Callable[[AppState, list[str]], str]

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by connectors (/help, /add, ...)."""

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

    def handle(self, state: AppState, line: str) -> str | None:
        """
        Handle a string like '/command arg "quoted arg"'.
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        try:
            parts = shlex.split(line[1:])
        except ValueError as e:
            return f"Error: could not parse arguments ({e})."

        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            return handler(state, args)
        except ScheduleError as e:
            logger.debug("Command /%s failed: %s", name, e)
            return f"Error: {e}"

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        lines.append("  /exit - Quit the organizer.")
        return "\n".join(lines)


registry = CommandRegistry()


def _render(tasks: Iterable[Task], *, header: str, empty: str) -> str:
    lines = [str(t) for t in tasks]
    if not lines:
        return empty
    return "\n".join([header, *lines])


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_add(state: AppState, args: list[str]) -> str:
    """/add "<description>" <start HH:mm> <end HH:mm> <LOW|MEDIUM|HIGH>"""
    if len(args) != 4:
        return 'Usage: /add "<description>" <start HH:mm> <end HH:mm> <LOW|MEDIUM|HIGH>'

    result = parse_task(*args)
    if not result.ok:
        return f"Error: {result.error}"

    state.task_store.add(result.unwrap())
    return "Task added successfully."


def cmd_remove(state: AppState, args: list[str]) -> str:
    if len(args) != 1:
        return 'Usage: /remove "<description>"'
    state.task_store.remove(args[0])
    return "Task removed successfully."


def cmd_get(state: AppState, args: list[str]) -> str:
    if len(args) != 1:
        return 'Usage: /get "<description>"'
    return str(state.task_store.get(args[0]))


def cmd_edit(state: AppState, args: list[str]) -> str:
    """
    /edit "<old description>" "<new description>" <start> <end> <priority>

    Rolls back (and reports the conflict) when the new time slot is taken.
    """
    if len(args) != 5:
        return (
            'Usage: /edit "<old description>" "<new description>" '
            "<start HH:mm> <end HH:mm> <LOW|MEDIUM|HIGH>"
        )

    old_description, *fields = args
    result = parse_task(*fields)
    if not result.ok:
        return f"Error: {result.error}"

    state.task_store.edit(old_description, result.unwrap())
    return "Task edited successfully."


def cmd_done(state: AppState, args: list[str]) -> str:
    if len(args) != 1:
        return 'Usage: /done "<description>"'
    state.task_store.mark_completed(args[0])
    return "Task marked as completed."


def cmd_list(state: AppState, args: list[str]) -> str:
    return _render(
        state.task_store.list(),
        header="Scheduled tasks:",
        empty="No tasks scheduled for the day.",
    )


def cmd_priority(state: AppState, args: list[str]) -> str:
    """
    /priority HIGH  -> tasks with that priority, in time order
    """
    if len(args) != 1:
        return "Usage: /priority <LOW|MEDIUM|HIGH>"

    try:
        priority = Priority.parse(args[0])
    except InvalidTaskError as e:
        return f"Error: {e}"

    return _render(
        state.task_store.list_by_priority(priority),
        header=f"{priority.value} priority tasks:",
        empty=f"No {priority.value} priority tasks scheduled.",
    )


def cmd_status(state: AppState, args: list[str]) -> str:
    tasks = state.task_store.list()
    done = sum(1 for t in tasks if t.completed)
    by_prio = ", ".join(
        f"{p.value}={sum(1 for t in tasks if t.priority == p)}" for p in Priority
    )
    level = str(getattr(state.settings, "log_level", "INFO"))
    return (
        "Status:\n"
        f"  Tasks: {len(tasks)} ({done} completed)\n"
        f"  By priority: {by_prio}\n"
        f"  Log level: {level}"
    )


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register(
    "add",
    cmd_add,
    help_text='Add a task: /add "EVA Prep" 09:00 10:00 HIGH.',
)
registry.register(
    "remove", cmd_remove, help_text='Remove a task: /remove "EVA Prep".', aliases=["rm"]
)
registry.register("get", cmd_get, help_text='Show one task: /get "EVA Prep".')
registry.register(
    "edit",
    cmd_edit,
    help_text='Replace a task: /edit "Meal" "Meal" 12:30 13:30 LOW.',
)
registry.register(
    "done", cmd_done, help_text='Mark a task completed: /done "EVA Prep".', aliases=["complete"]
)
registry.register("list", cmd_list, help_text="Show all tasks by start time.", aliases=["view", "ls"])
registry.register(
    "priority", cmd_priority, help_text="Show tasks of one priority: /priority HIGH."
)
registry.register("status", cmd_status, help_text="Show task counts and log level.")
