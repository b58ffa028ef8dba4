# src/task_ticker/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime

from ..cli.commands import registry as command_registry
from ..cli.render import render_completion
from ..core.state import AppState

logger = logging.getLogger(__name__)


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def _print_ts(text: str) -> None:
    print(f"[{_ts_local()}] {text}")


def run_console_loop(state: AppState, *, read_line: Callable[[str], str] = input) -> None:
    """
    Interactive loop. Every entered line first applies the wall-clock time that
    passed since the previous line, then runs the command.
    """
    logger.info("Console connector started (discipline=%s).", state.manager.discipline.value)
    _print_ts("[CONSOLE] Use /help for commands. Use /exit to quit.\n")

    while True:
        try:
            user_input = read_line(">>> ").strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        for task in state.tick():
            _print_ts(render_completion(task))

        if not user_input:
            continue

        if user_input.lower() in ("/exit", "/quit"):
            logger.info("Console exit command received.")
            break

        try:
            cmd_response = command_registry.handle(state, user_input)
        except Exception:
            logger.exception("Command handler crashed.")
            cmd_response = "Internal error while handling a command."

        if cmd_response is None:
            cmd_response = "Commands start with '/'. Use /help to list available commands."

        _print_ts(cmd_response)

    logger.info("Console connector finished.")
