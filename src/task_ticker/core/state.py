# src/task_ticker/core/state.py

from __future__ import annotations

import random
from dataclasses import dataclass, field

from ..config import Settings
from ..tasks.task_manager import TaskManager
from ..tasks.task_models import Task, TaskFactory
from ..tasks.task_scheduler import elapsed_clock
from .ports import Clock


@dataclass
class AppState:
    """Everything a connector needs: settings, the manager, a factory and a clock."""

    settings: Settings
    manager: TaskManager
    factory: TaskFactory
    clock: Clock = field(default_factory=elapsed_clock)
    # Simulated seconds added on top of the clock by /tick.
    skew: float = 0.0

    def now(self) -> float:
        return self.clock() + self.skew

    def tick(self) -> list[Task]:
        return self.manager.update(self.now())


def create_initial_state(settings: Settings, *, clock: Clock | None = None) -> AppState:
    """
    Wire a manager and factory from settings.

    The manager starts at 0.0, matching a clock that reads 0.0 when created.
    """
    rng = random.Random(settings.seed) if settings.seed is not None else None
    factory = TaskFactory(rng=rng, max_random_duration=settings.max_random_duration)
    return AppState(
        settings=settings,
        manager=TaskManager(settings.discipline),
        factory=factory,
        clock=clock or elapsed_clock(),
    )
