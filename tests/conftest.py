# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from astro_schedule.core.state import AppState
from astro_schedule.schedule.notifier import ChangeNotifier
from astro_schedule.schedule.task_store import TaskStore

from .fakes import RecordingListener


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the CLI modules.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the process environment.
    """
    return SimpleNamespace(
        app_name="astro-test",
        log_level="INFO",
        log_to_file=False,
        console_enabled=True,
        config_path=tmp_path / "config.properties",
        data_dir=tmp_path,
    )


@pytest.fixture()
def notifier() -> ChangeNotifier:
    return ChangeNotifier()


@pytest.fixture()
def listener(notifier: ChangeNotifier) -> RecordingListener:
    rec = RecordingListener()
    notifier.subscribe(rec)
    return rec


@pytest.fixture()
def store(notifier: ChangeNotifier) -> TaskStore:
    return TaskStore(notifier)


@pytest.fixture()
def state(settings: SimpleNamespace, store: TaskStore, notifier: ChangeNotifier) -> AppState:
    return AppState(settings=settings, task_store=store, notifier=notifier)
