# src/astro_schedule/schedule/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import time
from enum import StrEnum

from .errors import InvalidTaskError

TIME_FORMAT = "%H:%M"


class Priority(StrEnum):
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"

    @classmethod
    def parse(cls, raw: str | None) -> Priority:
        """Case-insensitive lookup; unknown labels raise InvalidTaskError."""
        key = (raw or "").strip().upper()
        try:
            return cls(key)
        except ValueError:
            raise InvalidTaskError("Invalid priority level. Use LOW, MEDIUM, or HIGH.") from None


@dataclass(slots=True)
class Task:
    """
    One scheduled block of the day.

    `description` is the identity key inside a TaskStore.
    Intervals are half-open: [start, end).
    """

    description: str
    start: time
    end: time
    priority: Priority
    completed: bool = False

    def conflicts(self, other: Task) -> bool:
        return self.start < other.end and other.start < self.end

    def __str__(self) -> str:
        text = (
            f"{self.start.strftime(TIME_FORMAT)} - {self.end.strftime(TIME_FORMAT)}: "
            f"{self.description} [{self.priority.value}]"
        )
        if self.completed:
            text += " (Completed)"
        return text
