# src/task_ticker/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Malformed values fall back to defaults instead of failing at import time.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from .tasks.task_containers import Discipline
from .tasks.task_models import MAX_RANDOM_DURATION

ENV_PREFIX = "TICKER"

load_dotenv(override=False)


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_optional_int(name: str) -> int | None:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    try:
        return int(raw)
    except ValueError:
        return None


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


def _env_discipline(name: str, default: Discipline) -> Discipline:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return Discipline.parse(raw)
    except ValueError:
        return default


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    data_dir: Path

    # ---- Scheduling ----
    discipline: Discipline
    tick_interval: float
    stop_when_empty: bool
    max_random_duration: int
    seed: int | None

    # ---- Connector flags ----
    console_enabled: bool

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "task-ticker").strip() or "task-ticker"
        log_level = _env(_k("LOG_LEVEL"), "INFO")
        data_dir = _env_path(_k("DATA_DIR"), Path(".local/task-ticker"))

        discipline = _env_discipline(_k("DISCIPLINE"), Discipline.FIFO)

        tick_interval = _env_float(_k("TICK_INTERVAL"), 1.0)
        if tick_interval <= 0:
            tick_interval = 1.0

        stop_when_empty = _env_bool(_k("STOP_WHEN_EMPTY"), False)

        max_random_duration = _env_int(_k("MAX_RANDOM_DURATION"), MAX_RANDOM_DURATION)
        if max_random_duration < 1:
            max_random_duration = MAX_RANDOM_DURATION

        seed = _env_optional_int(_k("SEED"))

        console_enabled = _env_bool(_k("CONSOLE_ENABLED"), False)

        return Settings(
            app_name=app_name,
            log_level=log_level,
            data_dir=data_dir,
            discipline=discipline,
            tick_interval=tick_interval,
            stop_when_empty=stop_when_empty,
            max_random_duration=max_random_duration,
            seed=seed,
            console_enabled=console_enabled,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
