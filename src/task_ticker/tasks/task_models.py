# src/task_ticker/tasks/task_models.py

from __future__ import annotations

import math
import random
from dataclasses import dataclass

from ..core.errors import InvalidDurationError

MAX_RANDOM_DURATION = 47
DEFAULT_NAME_PREFIX = "Task #"


def _check_duration(value: float) -> float:
    try:
        out = float(value)
    except (TypeError, ValueError) as e:
        raise InvalidDurationError(value) from e
    if math.isnan(out) or math.isinf(out) or out < 0:
        raise InvalidDurationError(value)
    return out


@dataclass(slots=True, init=False)
class Task:
    """
    A named unit of work with a remaining-time estimate (seconds).

    The name is fixed once created; remaining_time only shrinks while the task
    sits at the front of a manager's container.
    """

    _name: str
    _remaining_time: float

    def __init__(self, name: str, remaining_time: float) -> None:
        self._name = str(name)
        self._remaining_time = _check_duration(remaining_time)

    @property
    def name(self) -> str:
        return self._name

    @property
    def remaining_time(self) -> float:
        return self._remaining_time

    def set_remaining_time(self, value: float) -> None:
        self._remaining_time = _check_duration(value)

    def copy(self) -> Task:
        return Task(self._name, self._remaining_time)

    def __repr__(self) -> str:
        return f"Task(name={self._name!r}, remaining_time={self._remaining_time!r})"


class TaskFactory:
    """
    Creates tasks with random durations and sequential default names.

    Owns the naming counter: names generated by one factory are never repeated.
    Pass a seeded random.Random to get reproducible durations.
    """

    def __init__(
        self,
        *,
        rng: random.Random | None = None,
        max_random_duration: int = MAX_RANDOM_DURATION,
        start: int = 0,
    ) -> None:
        if max_random_duration < 1:
            raise ValueError("max_random_duration must be >= 1")
        self._rng = rng or random.Random()
        self._max_random_duration = int(max_random_duration)
        self._next_number = int(start)

    @property
    def max_random_duration(self) -> int:
        return self._max_random_duration

    @property
    def generated(self) -> int:
        """Number of default names issued so far."""
        return self._next_number

    def random_duration(self) -> float:
        return float(self._rng.randrange(self._max_random_duration))

    def create(self, name: str, duration: float | None = None) -> Task:
        if duration is None:
            duration = self.random_duration()
        return Task(name, duration)

    def generate(self) -> Task:
        number = self._next_number
        self._next_number += 1
        return self.create(f"{DEFAULT_NAME_PREFIX}{number}")


default_factory = TaskFactory()


def generate_task() -> Task:
    """
    Process-wide "Task #N" generator.

    Every caller in the process shares one counter, so names never repeat across
    managers. Use a TaskFactory of your own for an independent sequence.
    """
    return default_factory.generate()
