# tests/test_task_containers.py

from __future__ import annotations

import pytest

from task_ticker.core.errors import EmptyContainerError
from task_ticker.tasks.task_containers import (
    _DequeContainer,
    Discipline,
    TaskQueue,
    TaskStack,
    create_container,
)
from task_ticker.tasks.task_models import Task


def _names(tasks) -> list[str]:
    return [t.name for t in tasks]


def test_queue_pops_in_insertion_order() -> None:
    q = TaskQueue()
    for name in ("t1", "t2", "t3", "t4"):
        q.push(Task(name, 1))

    assert q.size() == 4
    assert _names(q.tasks()) == ["t1", "t2", "t3", "t4"]
    assert _names(q.pop() for _ in range(4)) == ["t1", "t2", "t3", "t4"]
    assert q.size() == 0


def test_stack_pops_in_reverse_insertion_order() -> None:
    s = TaskStack()
    for name in ("t1", "t2", "t3", "t4"):
        s.push(Task(name, 1))

    assert _names(s) == ["t4", "t3", "t2", "t1"]
    assert _names(s.pop() for _ in range(4)) == ["t4", "t3", "t2", "t1"]
    assert len(s) == 0


@pytest.mark.parametrize("cls", [TaskQueue, TaskStack])
def test_size_tracks_pushes_minus_pops(cls) -> None:
    c = cls()
    pushes = pops = 0
    for step in range(30):
        if step % 3 == 2:
            c.pop()
            pops += 1
        else:
            c.push(Task(f"t{step}", step))
            pushes += 1
        assert c.size() == pushes - pops

    while c.size():
        c.pop()
    assert c.size() == 0


@pytest.mark.parametrize(
    "cls, kind",
    [(TaskQueue, "queue"), (TaskStack, "stack")],
)
def test_empty_container_contract(cls, kind) -> None:
    c = cls()
    with pytest.raises(EmptyContainerError, match=f"peek at empty {kind}"):
        c.peek()
    with pytest.raises(EmptyContainerError, match=f"pop from empty {kind}"):
        c.pop()
    assert c.size() == 0
    assert c.tasks() == ()

    # still usable after the failures
    c.push(Task("a", 1))
    assert c.peek().name == "a"


def test_peek_returns_live_reference_and_push_copies() -> None:
    original = Task("a", 5)
    q = TaskQueue()
    q.push(original)

    head = q.peek()
    head.set_remaining_time(2)
    assert q.peek().remaining_time == 2.0
    assert original.remaining_time == 5.0


def test_queue_interleaved_push_keeps_existing_order() -> None:
    q = TaskQueue()
    q.push(Task("t1", 1))
    q.push(Task("t2", 1))
    assert q.pop().name == "t1"
    q.push(Task("t3", 1))
    assert _names(q.tasks()) == ["t2", "t3"]


def test_clear_releases_everything() -> None:
    s = TaskStack()
    s.push(Task("a", 1))
    s.push(Task("b", 1))
    s.clear()
    assert s.size() == 0
    with pytest.raises(EmptyContainerError):
        s.pop()


def test_create_container_and_discipline_parsing() -> None:
    assert isinstance(create_container("fifo"), TaskQueue)
    assert isinstance(create_container("queue"), TaskQueue)
    assert isinstance(create_container(Discipline.LIFO), TaskStack)
    assert isinstance(create_container(" Stack "), TaskStack)
    assert create_container("lifo").discipline is Discipline.LIFO

    with pytest.raises(ValueError):
        Discipline.parse("priority")


def test_shared_base_cannot_be_instantiated() -> None:
    with pytest.raises(TypeError):
        _DequeContainer()  # type: ignore[abstract]
