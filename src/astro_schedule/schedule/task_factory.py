# src/astro_schedule/schedule/task_factory.py

"""
Validating construction of Task objects from raw user text.

parse_task() never raises for bad input: it returns a TaskParseResult that holds
either the Task or the InvalidTaskError describing what was wrong.
create_task() is the raising shortcut for callers that prefer exceptions.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import time

from .errors import InvalidTaskError
from .task_models import Priority, Task

_TIME_RE = re.compile(r"^([01]\d|2[0-3]):([0-5]\d)$")


@dataclass(slots=True, frozen=True)
class TaskParseResult:
    task: Task | None = None
    error: InvalidTaskError | None = None

    @property
    def ok(self) -> bool:
        return self.task is not None

    def unwrap(self) -> Task:
        if self.task is None:
            raise self.error or InvalidTaskError("Invalid task.")
        return self.task


def parse_time(text: str | None) -> time:
    """Parse strict 24-hour HH:mm (two-digit hour and minute)."""
    m = _TIME_RE.match((text or "").strip())
    if not m:
        raise InvalidTaskError("Invalid time format. Use HH:mm.")
    return time(hour=int(m.group(1)), minute=int(m.group(2)))


def parse_task(
    description: str | None,
    start_text: str | None,
    end_text: str | None,
    priority_text: str | None,
) -> TaskParseResult:
    desc = (description or "").strip()
    if not desc:
        return TaskParseResult(error=InvalidTaskError("Task description is required."))

    try:
        start = parse_time(start_text)
        end = parse_time(end_text)
        priority = Priority.parse(priority_text)
    except InvalidTaskError as e:
        return TaskParseResult(error=e)

    # An inverted or empty interval would never conflict with anything.
    if start >= end:
        return TaskParseResult(error=InvalidTaskError("End time must be after start time."))

    return TaskParseResult(task=Task(description=desc, start=start, end=end, priority=priority))


def create_task(
    description: str | None,
    start_text: str | None,
    end_text: str | None,
    priority_text: str | None,
) -> Task:
    return parse_task(description, start_text, end_text, priority_text).unwrap()
