# src/task_ticker/tasks/task_containers.py

from __future__ import annotations

"""
Ordered task containers.

Two disciplines behind one contract:
- TaskQueue (FIFO): push at the tail, pop from the head
- TaskStack (LIFO): push and pop at the top

Containers store copies of pushed tasks. peek() hands out the stored task itself,
so the manager can shrink its remaining time in place.
"""

from abc import ABC, abstractmethod
from collections import deque
from collections.abc import Iterator
from enum import StrEnum
from typing import Protocol

from ..core.errors import EmptyContainerError
from .task_models import Task


class Discipline(StrEnum):
    FIFO = "fifo"
    LIFO = "lifo"

    @classmethod
    def parse(cls, raw: str | Discipline) -> Discipline:
        if isinstance(raw, Discipline):
            return raw
        key = str(raw or "").strip().lower()
        aliases = {"queue": cls.FIFO, "stack": cls.LIFO}
        if key in aliases:
            return aliases[key]
        try:
            return cls(key)
        except ValueError:
            raise ValueError(f"Unknown discipline: {raw!r} (expected fifo/lifo/queue/stack)") from None


class TaskContainer(Protocol):
    discipline: Discipline

    def size(self) -> int: ...
    def peek(self) -> Task: ...
    def pop(self) -> Task: ...
    def push(self, task: Task) -> None: ...
    def tasks(self) -> tuple[Task, ...]: ...
    def clear(self) -> None: ...
    def __len__(self) -> int: ...
    def __iter__(self) -> Iterator[Task]: ...


class _DequeContainer(ABC):
    """Shared storage: the left end of the deque is always the next task to complete."""

    discipline: Discipline
    kind = "container"

    __slots__ = ("_items",)

    def __init__(self) -> None:
        self._items: deque[Task] = deque()

    def size(self) -> int:
        return len(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def peek(self) -> Task:
        if not self._items:
            raise EmptyContainerError("peek", self.kind)
        return self._items[0]

    def pop(self) -> Task:
        if not self._items:
            raise EmptyContainerError("pop", self.kind)
        return self._items.popleft()

    @abstractmethod
    def push(self, task: Task) -> None: ...

    def tasks(self) -> tuple[Task, ...]:
        return tuple(self._items)

    def __iter__(self) -> Iterator[Task]:
        return iter(tuple(self._items))

    def clear(self) -> None:
        self._items.clear()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={len(self._items)})"


class TaskQueue(_DequeContainer):
    discipline = Discipline.FIFO
    kind = "queue"

    __slots__ = ()

    def push(self, task: Task) -> None:
        self._items.append(task.copy())


class TaskStack(_DequeContainer):
    discipline = Discipline.LIFO
    kind = "stack"

    __slots__ = ()

    def push(self, task: Task) -> None:
        self._items.appendleft(task.copy())


def create_container(discipline: Discipline | str) -> TaskContainer:
    d = Discipline.parse(discipline)
    if d is Discipline.FIFO:
        return TaskQueue()
    return TaskStack()
