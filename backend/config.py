"""Runtime settings read from environment variables."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import TypeVar

_LOGGER = logging.getLogger(__name__)

_T = TypeVar("_T", int, float, str)


def _env(name: str, default: _T) -> _T:
    """Read an environment variable, converting to the same type as *default*."""
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return type(default)(raw.strip())
    except (TypeError, ValueError):
        _LOGGER.warning("Ignoring invalid %s=%r, using %r", name, raw, default)
        return default


@dataclass(frozen=True)
class Settings:
    """Game rules and service limits."""

    max_mistakes: int = 3
    max_hints: int = 3
    points_per_correct: int = 10
    points_per_hint: int = 5
    default_difficulty: str = "easy"
    max_sessions: int = 1000
    log_level: str = "INFO"


def load_settings() -> Settings:
    defaults = Settings()

    log_level = _env("SUDOKU_LOG_LEVEL", defaults.log_level).upper()
    if not isinstance(logging.getLevelName(log_level), int):
        _LOGGER.warning(
            "Unknown SUDOKU_LOG_LEVEL=%s, using %s", log_level, defaults.log_level
        )
        log_level = defaults.log_level

    return Settings(
        max_mistakes=_env("SUDOKU_MAX_MISTAKES", defaults.max_mistakes),
        max_hints=_env("SUDOKU_MAX_HINTS", defaults.max_hints),
        points_per_correct=_env("SUDOKU_POINTS_PER_CORRECT", defaults.points_per_correct),
        points_per_hint=_env("SUDOKU_POINTS_PER_HINT", defaults.points_per_hint),
        default_difficulty=_env(
            "SUDOKU_DEFAULT_DIFFICULTY", defaults.default_difficulty
        ).lower(),
        max_sessions=max(1, _env("SUDOKU_MAX_SESSIONS", defaults.max_sessions)),
        log_level=log_level,
    )
