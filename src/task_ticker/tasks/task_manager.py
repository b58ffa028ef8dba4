# src/task_ticker/tasks/task_manager.py

from __future__ import annotations

"""
Task manager.

Owns one container (discipline fixed at construction) and advances simulated
time over it:
- update(now) turns "time since the last tick" into progress on the front task,
- one update may complete several tasks if the elapsed time spans them,
- a task whose remaining time equals the leftover delta completes (not left at 0).

Clock regressions (now < last_tick_time) are treated as zero elapsed time and
do not rewind last_tick_time.
"""

import logging

from .task_containers import Discipline, TaskContainer, create_container
from .task_models import Task

logger = logging.getLogger(__name__)


class TaskManager:
    def __init__(
        self,
        discipline: Discipline | str = Discipline.FIFO,
        *,
        start_time: float = 0.0,
    ) -> None:
        self._container: TaskContainer = create_container(discipline)
        self._last_tick_time = float(start_time)

    @property
    def discipline(self) -> Discipline:
        return self._container.discipline

    @property
    def last_tick_time(self) -> float:
        return self._last_tick_time

    def size(self) -> int:
        return self._container.size()

    def __len__(self) -> int:
        return self._container.size()

    def add_task(self, task: Task) -> None:
        self._container.push(task)
        logger.debug("Added %r (%s, size=%d)", task.name, self.discipline.value, self.size())

    def delete_last_task(self) -> Task:
        """Pop the next-to-complete task. Raises EmptyContainerError when empty."""
        task = self._container.pop()
        logger.debug("Deleted %r (size=%d)", task.name, self.size())
        return task

    def update(self, now: float) -> list[Task]:
        """
        Advance to `now` (seconds) and return the tasks completed, in completion order.
        """
        now = float(now)
        delta = now - self._last_tick_time
        if delta < 0:
            logger.warning(
                "Clock went backwards (now=%.3f < last_tick_time=%.3f); ignoring tick",
                now,
                self._last_tick_time,
            )
            return []

        self._last_tick_time = now
        completed: list[Task] = []

        while delta > 0 and self._container.size() != 0:
            head = self._container.peek()
            if delta < head.remaining_time:
                head.set_remaining_time(head.remaining_time - delta)
                break

            delta -= head.remaining_time
            task = self._container.pop()
            completed.append(task)
            logger.info("%s completed", task.name)

        return completed

    def advance(self, elapsed: float) -> list[Task]:
        """Shortcut for update(last_tick_time + elapsed)."""
        return self.update(self._last_tick_time + float(elapsed))

    def list_tasks(self) -> tuple[Task, ...]:
        """Copies of the stored tasks in completion order."""
        return tuple(t.copy() for t in self._container.tasks())

    def __repr__(self) -> str:
        return (
            f"TaskManager(discipline={self.discipline.value!r}, size={self.size()}, "
            f"last_tick_time={self._last_tick_time!r})"
        )
