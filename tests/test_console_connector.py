# tests/test_console_connector.py

from __future__ import annotations

import pytest

from task_ticker.connectors.console_connector import run_console_loop
from task_ticker.core.state import AppState
from task_ticker.tasks.task_models import Task


def _scripted(lines: list[str], on_read=None):
    it = iter(lines)

    def read_line(prompt: str) -> str:
        if on_read is not None:
            on_read()
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    return read_line


def test_console_runs_commands_until_exit(state: AppState, capsys: pytest.CaptureFixture[str]) -> None:
    run_console_loop(state, read_line=_scripted(["/add a 3", "/list", "hello", "/exit", "/add b 1"]))

    out = capsys.readouterr().out
    assert "Added a (3s)." in out
    assert "a: 3s left" in out
    assert "Commands start with '/'" in out
    assert state.manager.size() == 1


def test_console_applies_clock_before_each_line(state: AppState, clock, capsys) -> None:
    state.manager.add_task(Task("a", 2))
    state.manager.add_task(Task("b", 2))

    run_console_loop(state, read_line=_scripted(["", "/list"], on_read=lambda: clock.advance(3)))

    out = capsys.readouterr().out
    # reads at t=3 and t=6: a completes on the first line, b on the second
    assert out.index("a completed") < out.index("b completed") < out.index("There isnt any task")
    assert state.manager.size() == 0
    assert state.manager.last_tick_time == 6.0
