# src/task_ticker/core/errors.py

from __future__ import annotations

"""
Errors raised by the task core.

All of them are synchronous and local: the core never catches its own errors,
outer layers (console commands, tick listeners) decide how to report them.
"""


class TaskTickerError(Exception):
    """Base class for task-ticker errors."""


class EmptyContainerError(TaskTickerError, LookupError):
    """peek()/pop() on a container that holds no tasks."""

    def __init__(self, operation: str, kind: str) -> None:
        self.operation = operation
        self.kind = kind
        prep = "at" if operation == "peek" else "from"
        super().__init__(f"{operation} {prep} empty {kind}")


class InvalidDurationError(TaskTickerError, ValueError):
    """Negative, NaN or infinite task duration."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"duration must be a finite number >= 0, got {value!r}")
