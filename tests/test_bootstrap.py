# tests/test_bootstrap.py

from __future__ import annotations

from astro_schedule.cli.bootstrap import create_initial_state
from astro_schedule.core.ports import ScheduleRepo

from .fakes import RecordingListener, make_task


def test_create_initial_state_shares_one_notifier(settings) -> None:
    state = create_initial_state(settings=settings)
    rec = RecordingListener()
    state.notifier.subscribe(rec)

    state.task_store.add(make_task("Meal", "12:00", "13:00"))

    assert state.settings is settings
    assert state.task_store.notifier is state.notifier
    assert rec.messages == ["Task added: Meal"]


def test_each_state_gets_its_own_store(settings) -> None:
    a = create_initial_state(settings=settings)
    b = create_initial_state(settings=settings)
    a.task_store.add(make_task("Meal", "12:00", "13:00"))
    assert len(b.task_store) == 0


def test_store_satisfies_schedule_repo_port(settings) -> None:
    state = create_initial_state(settings=settings)
    assert isinstance(state.task_store, ScheduleRepo)
