# src/task_ticker/cli/render.py

from __future__ import annotations

from collections.abc import Sequence

from ..tasks.task_models import Task

EMPTY_LISTING = "There isnt any task"


def format_seconds(value: float) -> str:
    return f"{value:g}"


def render_task(task: Task) -> str:
    return f"{task.name}: {format_seconds(task.remaining_time)}s left"


def render_tasks(tasks: Sequence[Task]) -> str:
    if not tasks:
        return EMPTY_LISTING
    lines = [f"There are {len(tasks)} tasks to do"]
    lines.extend(render_task(t) for t in tasks)
    return "\n".join(lines)


def render_completion(task: Task) -> str:
    return f"{task.name} completed"
