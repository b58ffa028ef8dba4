# src/task_ticker/logging_setup.py

from __future__ import annotations

import logging
import sys
from pathlib import Path

DEFAULT_APP_NAME = "task-ticker"


class _ConsoleNoiseFilter(logging.Filter):
    """
    Keep the console readable while the driver prints listings:
    - allow task_ticker logs
    - everything else (third-party, captured py.warnings) only at ERROR+
    """

    def filter(self, record: logging.LogRecord) -> bool:
        name = record.name

        if name == "task_ticker" or name.startswith("task_ticker."):
            return True

        return record.levelno >= logging.ERROR


def setup_logging(
    *,
    app_name: str = DEFAULT_APP_NAME,
    log_dir: str | Path = ".local/task-ticker",
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
) -> Path:
    """
    Configure logging with:
    - Console handler: readable + filtered for interactive use
    - File handler: full logs for debugging

    The log file is <log_dir>/<app_name>.log. Call this ONCE, very early
    (before first logger.info). Returns the log file path.
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / f"{app_name}.log"

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    # Remove any pre-existing handlers to avoid duplicates.
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(console_level)
    ch.setFormatter(fmt)
    ch.addFilter(_ConsoleNoiseFilter())
    root.addHandler(ch)

    fh = logging.FileHandler(str(log_file), encoding="utf-8")
    fh.setLevel(file_level)
    fh.setFormatter(fmt)
    root.addHandler(fh)

    # Route warnings.warn(...) into logging as 'py.warnings'
    logging.captureWarnings(True)

    return log_file
