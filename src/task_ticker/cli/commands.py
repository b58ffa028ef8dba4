# src/task_ticker/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from ..core.errors import EmptyContainerError, InvalidDurationError
from ..core.state import AppState
from ..tasks.task_models import Task
from .render import render_completion, render_tasks

CommandHandler = Callable[[AppState, list[str]], str]

logger = logging.getLogger(__name__)

MAX_GENERATE = 100


class CommandRegistry:
    """Simple slash-command registry used by the console (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, state: AppState, line: str) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        return handler(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def _completions(completed: Sequence[Task]) -> list[str]:
    return [render_completion(t) for t in completed]


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_list(state: AppState, args: list[str]) -> str:
    return render_tasks(state.manager.list_tasks())


def cmd_status(state: AppState, args: list[str]) -> str:
    manager = state.manager
    return (
        "Status:\n"
        f"  Discipline: {manager.discipline.value}\n"
        f"  Tasks: {manager.size()}\n"
        f"  Last tick: {manager.last_tick_time:.3f}s\n"
        f"  Generated names: {state.factory.generated}"
    )


def cmd_add(state: AppState, args: list[str]) -> str:
    """
    /add NAME           -> add a task with a random duration
    /add NAME SECONDS   -> add a task with an explicit duration
    """
    if not args:
        return "Usage: /add NAME [SECONDS]"

    name = args[0]
    duration: float | None = None
    if len(args) > 1:
        try:
            duration = float(args[1])
        except ValueError:
            return f"Not a number: {args[1]!r}"

    try:
        task = state.factory.create(name, duration)
    except InvalidDurationError as e:
        return f"Invalid duration: {e}"

    state.manager.add_task(task)
    return f"Added {task.name} ({task.remaining_time:g}s)."


def cmd_gen(state: AppState, args: list[str]) -> str:
    """
    /gen        -> add one generated task ("Task #N", random duration)
    /gen COUNT  -> add COUNT generated tasks
    """
    count = 1
    if args:
        try:
            count = int(args[0])
        except ValueError:
            return f"Not an integer: {args[0]!r}"
    if count < 1 or count > MAX_GENERATE:
        return f"COUNT must be between 1 and {MAX_GENERATE}."

    added = []
    for _ in range(count):
        task = state.factory.generate()
        state.manager.add_task(task)
        added.append(f"{task.name} ({task.remaining_time:g}s)")
    return "Added " + ", ".join(added) + "."


def cmd_drop(state: AppState, args: list[str]) -> str:
    try:
        task = state.manager.delete_last_task()
    except EmptyContainerError:
        return "Nothing to drop: there isnt any task."
    return f"Dropped {task.name}."


def cmd_tick(state: AppState, args: list[str]) -> str:
    """
    /tick SECONDS -> jump the clock forward and apply the elapsed time
    """
    if not args:
        return "Usage: /tick SECONDS"
    try:
        seconds = float(args[0])
    except ValueError:
        return f"Not a number: {args[0]!r}"
    if seconds < 0:
        return "SECONDS must be >= 0."

    state.skew += seconds
    completed = state.tick()
    lines = _completions(completed) or ["No task completed."]
    return "\n".join(lines)


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("list", cmd_list, help_text="List tasks in completion order.", aliases=["ls"])
registry.register("status", cmd_status, help_text="Show discipline, size and last tick time.")
registry.register("add", cmd_add, help_text="Add a task: /add NAME [SECONDS].")
registry.register("gen", cmd_gen, help_text="Add generated tasks: /gen [COUNT].")
registry.register("drop", cmd_drop, help_text="Remove the next task to complete.")
registry.register("tick", cmd_tick, help_text="Advance simulated time: /tick SECONDS.")
