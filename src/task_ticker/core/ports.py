# src/task_ticker/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used around the core.

The task manager only needs a `now` value; how it is sampled and who is told
about completions is up to the driver, so both sides are Protocols.
"""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..tasks.task_manager import TaskManager
    from ..tasks.task_models import Task


class Clock(Protocol):
    """Returns the current time in seconds. Must be non-decreasing."""
    def __call__(self) -> float: ...


class TickListener(Protocol):
    """Called after every driver tick with the tasks completed during it."""
    def __call__(self, manager: TaskManager, completed: list[Task]) -> None: ...
