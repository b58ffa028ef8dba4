# tests/conftest.py

from __future__ import annotations

import random
from pathlib import Path
from types import SimpleNamespace

import pytest

from task_ticker.core.state import AppState
from task_ticker.tasks.task_containers import Discipline
from task_ticker.tasks.task_manager import TaskManager
from task_ticker.tasks.task_models import TaskFactory

from .fakes import FakeClock


@pytest.fixture()
def factory() -> TaskFactory:
    """Seeded factory: durations are reproducible within a test run."""
    return TaskFactory(rng=random.Random(1234))


@pytest.fixture()
def fifo() -> TaskManager:
    return TaskManager(Discipline.FIFO)


@pytest.fixture()
def lifo() -> TaskManager:
    return TaskManager(Discipline.LIFO)


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment.
    """
    return SimpleNamespace(
        app_name="task-ticker-test",
        log_level="DEBUG",
        data_dir=tmp_path,
        discipline=Discipline.FIFO,
        tick_interval=0.01,
        stop_when_empty=True,
        max_random_duration=47,
        seed=7,
        console_enabled=False,
    )


@pytest.fixture()
def state(settings: SimpleNamespace, factory: TaskFactory, clock: FakeClock) -> AppState:
    """AppState with a FIFO manager, seeded factory and a frozen fake clock."""
    return AppState(
        settings=settings,
        manager=TaskManager(settings.discipline),
        factory=factory,
        clock=clock,
    )
