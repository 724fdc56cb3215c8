# src/astro_schedule/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- builds the single ChangeNotifier and TaskStore for the process,
- hands them to connectors through AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState
from ..schedule.notifier import ChangeNotifier
from ..schedule.task_store import TaskStore

logger = logging.getLogger(__name__)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    notifier = ChangeNotifier()
    state = AppState(
        settings=settings,
        task_store=TaskStore(notifier),
        notifier=notifier,
    )
    logger.debug("AppState created app=%s", getattr(settings, "app_name", "astro-schedule"))
    return state
