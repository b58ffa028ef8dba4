# src/task_ticker/tasks/task_scheduler.py

from __future__ import annotations

"""
Tick driver.

A small polling loop that, every interval_seconds:
- samples the clock,
- feeds it into TaskManager.update(),
- hands the completed tasks to an optional listener (printing, metrics, ...).

The loop sleeps between ticks instead of spinning on the clock.
"""

import asyncio
import logging
import time

from ..core.ports import Clock, TickListener
from .task_manager import TaskManager

logger = logging.getLogger(__name__)

MIN_INTERVAL_SECONDS = 0.01


def elapsed_clock() -> Clock:
    """Monotonic clock that reads 0.0 at the moment it is created."""
    origin = time.monotonic()

    def _now() -> float:
        return time.monotonic() - origin

    return _now


async def run_task_driver(
        manager: TaskManager,
        *,
        clock: Clock | None = None,
        interval_seconds: float = 1.0,
        on_tick: TickListener | None = None,
        stop_when_empty: bool = False,
        max_ticks: int | None = None,
) -> int:
    """
    Drive `manager` from a wall clock until cancelled.

    Stops early after `max_ticks` ticks, or once the manager is empty after a
    tick when `stop_when_empty` is set. Returns the number of ticks run.

    A failing listener is logged and does not stop the loop. To stop the driver,
    cancel the coroutine/task.
    """
    clock = clock or elapsed_clock()
    sleep_s = max(MIN_INTERVAL_SECONDS, float(interval_seconds))
    ticks = 0

    logger.info(
        "Tick driver started (discipline=%s interval=%.2fs tasks=%d)",
        manager.discipline.value,
        sleep_s,
        manager.size(),
    )

    while True:
        await asyncio.sleep(sleep_s)

        now = clock()
        completed = manager.update(now)
        ticks += 1
        logger.debug("tick=%d now=%.3f completed=%d left=%d", ticks, now, len(completed), manager.size())

        if on_tick is not None:
            try:
                on_tick(manager, completed)
            except Exception:
                logger.exception("Tick listener failed tick=%d", ticks)

        if stop_when_empty and manager.size() == 0:
            logger.info("All tasks completed after %d ticks", ticks)
            break
        if max_ticks is not None and ticks >= max_ticks:
            break

    return ticks
