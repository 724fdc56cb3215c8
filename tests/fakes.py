# tests/fakes.py

from __future__ import annotations

from collections.abc import Iterable
from datetime import time

from astro_schedule.schedule.task_models import Priority, Task


class RecordingListener:
    """Captures every change message for assertions."""

    def __init__(self) -> None:
        self.messages: list[str] = []

    def __call__(self, message: str) -> None:
        self.messages.append(message)


class ScriptedInput:
    """
    input() replacement for console tests.

    Returns the scripted lines in order, then raises EOFError.
    """

    def __init__(self, lines: Iterable[str]) -> None:
        self._lines = list(lines)
        self.prompts: list[str] = []

    def __call__(self, prompt: str = "") -> str:
        self.prompts.append(prompt)
        if not self._lines:
            raise EOFError
        return self._lines.pop(0)


def make_task(
    description: str,
    start: str,
    end: str,
    priority: Priority = Priority.LOW,
    *,
    completed: bool = False,
) -> Task:
    sh, sm = (int(x) for x in start.split(":"))
    eh, em = (int(x) for x in end.split(":"))
    return Task(
        description=description,
        start=time(sh, sm),
        end=time(eh, em),
        priority=priority,
        completed=completed,
    )
