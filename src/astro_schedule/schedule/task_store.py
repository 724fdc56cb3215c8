# src/astro_schedule/schedule/task_store.py

from __future__ import annotations

import bisect
import logging
import threading
from dataclasses import replace

from .errors import TaskConflictError, TaskNotFoundError
from .notifier import ChangeNotifier
from .task_models import Priority, Task

logger = logging.getLogger(__name__)


class TaskStore:
    """
    In-memory schedule for one day.

    Invariants:
    - no two tasks overlap (half-open [start, end) intervals; abutting is fine)
    - descriptions are unique
    - tasks are kept sorted by start time

    Thread-safety:
    - every operation runs under one non-reentrant lock
    - change messages are collected under the lock and published right after it
      is released, so listeners may call back into the store
    - each operation publishes its own messages in order, but messages of two
      operations running on different threads may interleave or arrive in a
      different order than the mutations took effect
    - stored tasks are private copies: add/edit copy the given Task and reads
      return copies
    """

    def __init__(self, notifier: ChangeNotifier | None = None) -> None:
        self.notifier = notifier if notifier is not None else ChangeNotifier()
        self._tasks: list[Task] = []
        self._lock = threading.Lock()
        logger.info("TaskStore ready")

    def __len__(self) -> int:
        with self._lock:
            return len(self._tasks)

    def __contains__(self, description: object) -> bool:
        with self._lock:
            return isinstance(description, str) and self._find(description) is not None

    # ---- low-level helpers (caller holds the lock) ----

    def _find(self, description: str) -> int | None:
        for i, t in enumerate(self._tasks):
            if t.description == description:
                return i
        return None

    def _find_or_raise(self, description: str) -> int:
        idx = self._find(description)
        if idx is None:
            logger.warning("Task not found: %s", description)
            raise TaskNotFoundError(description)
        return idx

    def _conflicting(self, task: Task) -> Task | None:
        for existing in self._tasks:
            if existing.description == task.description or task.conflicts(existing):
                return existing
        return None

    def _insert(self, task: Task, events: list[str]) -> None:
        existing = self._conflicting(task)
        if existing is not None:
            logger.warning(
                "Task conflicts with existing task: %s (new=%s)", existing.description, task
            )
            raise TaskConflictError(existing.description)
        # Store a private copy; callers keep no handle on stored state.
        bisect.insort(self._tasks, replace(task), key=lambda t: t.start)
        events.append(f"Task added: {task.description}")
        logger.info("Task added: %s", task)

    def _delete(self, idx: int, events: list[str]) -> Task:
        task = self._tasks.pop(idx)
        events.append(f"Task removed: {task.description}")
        logger.info("Task removed: %s", task.description)
        return task

    def _publish(self, events: list[str]) -> None:
        for message in events:
            self.notifier.publish(message)

    # ---- public API ----

    def add(self, task: Task) -> None:
        events: list[str] = []
        with self._lock:
            self._insert(task, events)
        self._publish(events)

    def remove(self, description: str) -> None:
        events: list[str] = []
        with self._lock:
            self._delete(self._find_or_raise(description), events)
        self._publish(events)

    def get(self, description: str) -> Task:
        with self._lock:
            return replace(self._tasks[self._find_or_raise(description)])

    def edit(self, old_description: str, new_task: Task) -> None:
        """
        Replace a task: remove the old one, then add the new one.

        If the new task conflicts, the original task (completed flag included)
        is put back and the TaskConflictError is re-raised. Listeners then see
        both the removal and the re-add of the original.
        """
        events: list[str] = []
        try:
            with self._lock:
                original = self._delete(self._find_or_raise(old_description), events)
                try:
                    self._insert(new_task, events)
                except TaskConflictError:
                    self._insert(original, events)
                    logger.info("Edit of %r rolled back", old_description)
                    raise
        finally:
            self._publish(events)

    def mark_completed(self, description: str) -> None:
        with self._lock:
            task = self._tasks[self._find_or_raise(description)]
            task.completed = True
        self.notifier.publish(f"Task marked as completed: {description}")
        logger.info("Task marked as completed: %s", description)

    def list(self) -> list[Task]:
        with self._lock:
            return [replace(t) for t in self._tasks]

    def list_by_priority(self, priority: Priority) -> list[Task]:
        with self._lock:
            return [replace(t) for t in self._tasks if t.priority == priority]
