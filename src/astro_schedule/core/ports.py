# src/astro_schedule/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the schedule core and the front-end.

Commands and connectors depend on these Protocols instead of concrete
implementations, so the store and listeners stay swappable and easy to fake in tests.
"""

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ..schedule.task_models import Priority, Task


class ScheduleListener(Protocol):
    """Receives one human-readable change message per call ("Task added: ...")."""

    def __call__(self, message: str) -> None: ...


@runtime_checkable
class ScheduleRepo(Protocol):
    """Schedule operations the console commands rely on (see TaskStore)."""

    def __len__(self) -> int: ...
    def __contains__(self, description: object) -> bool: ...

    def add(self, task: Task) -> None: ...
    def remove(self, description: str) -> None: ...
    def get(self, description: str) -> Task: ...
    def edit(self, old_description: str, new_task: Task) -> None: ...
    def mark_completed(self, description: str) -> None: ...
    def list(self) -> list[Task]: ...
    def list_by_priority(self, priority: Priority) -> list[Task]: ...
