# src/task_ticker/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, seeds the demo tasks, then either:
- runs the console REPL (TICKER_CONSOLE_ENABLED=true), or
- runs the tick driver, printing completions and the task list after every tick.
"""

from __future__ import annotations

import asyncio
import logging

from ..config import Settings, get_settings
from ..connectors.console_connector import run_console_loop
from ..core.state import AppState, create_initial_state
from ..logging_setup import setup_logging
from ..tasks.task_manager import TaskManager
from ..tasks.task_models import Task
from ..tasks.task_scheduler import run_task_driver
from .render import render_completion, render_tasks

logger = logging.getLogger(__name__)


def seed_demo_tasks(state: AppState) -> None:
    state.manager.add_task(Task("a", 10))
    state.manager.add_task(Task("b", 3))
    state.manager.add_task(state.factory.generate())
    state.manager.add_task(state.factory.generate())


def print_tick(manager: TaskManager, completed: list[Task]) -> None:
    for task in completed:
        print(render_completion(task))
    print(render_tasks(manager.list_tasks()))
    print()


async def run_driver(state: AppState, settings: Settings) -> int:
    return await run_task_driver(
        state.manager,
        clock=state.now,
        interval_seconds=settings.tick_interval,
        on_tick=print_tick,
        stop_when_empty=settings.stop_when_empty,
    )


def main() -> None:
    settings = get_settings()

    level_name = str(settings.log_level).upper()
    console_level = getattr(logging, level_name, logging.INFO)
    setup_logging(app_name=settings.app_name, log_dir=settings.data_dir, console_level=console_level)

    logger.info("Starting %s...", settings.app_name)

    state = create_initial_state(settings)
    seed_demo_tasks(state)
    print(render_tasks(state.manager.list_tasks()))
    print()

    try:
        if settings.console_enabled:
            run_console_loop(state)
        else:
            ticks = asyncio.run(run_driver(state, settings))
            logger.info("Driver stopped after %d ticks.", ticks)
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down...")
    finally:
        print(render_tasks(state.manager.list_tasks()))
        logger.info("Bye.")


if __name__ == "__main__":
    main()
