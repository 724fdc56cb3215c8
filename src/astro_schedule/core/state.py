# src/astro_schedule/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..schedule.notifier import ChangeNotifier
from .ports import ScheduleRepo


@dataclass
class AppState:
    # Settings object (config.Settings or a test SimpleNamespace).
    settings: object

    task_store: ScheduleRepo
    notifier: ChangeNotifier
