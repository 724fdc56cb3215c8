# src/astro_schedule/schedule/errors.py

from __future__ import annotations


class ScheduleError(Exception):
    """Base class for recoverable schedule errors (rendered to the user, never fatal)."""


class InvalidTaskError(ScheduleError):
    """Raw task input is malformed: bad time text, unknown priority, empty description, inverted interval."""


class TaskConflictError(ScheduleError):
    def __init__(self, conflicting_description: str) -> None:
        self.conflicting_description = conflicting_description
        super().__init__(f"Task conflicts with existing task: {conflicting_description}")


class TaskNotFoundError(ScheduleError):
    def __init__(self, description: str) -> None:
        self.description = description
        super().__init__(f"Task not found: {description}")
