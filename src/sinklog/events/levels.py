"""Events – severity levels.

Levels are totally ordered integers; the smallest is the most verbose. A sink
with threshold ``T`` receives an event of level ``L`` iff ``L >= T``.
"""
from __future__ import annotations

from enum import IntEnum


class Level(IntEnum):
    """Canonical severity levels, most verbose first."""

    TRACE = 0
    DEBUG = 1
    INFO = 2
    WARN = 3
    ERROR = 4
    FATAL = 5


DEFAULT_LEVEL = Level.TRACE
UNKNOWN_LEVEL_NAME = "UNKNOWN"

_NAMES: tuple[str, ...] = ("TRACE", "DEBUG", "INFO", "WARN", "ERROR", "FATAL")
_COLORS: tuple[str, ...] = (
    "\x1b[94m",
    "\x1b[36m",
    "\x1b[32m",
    "\x1b[33m",
    "\x1b[31m",
    "\x1b[35m",
)
_ALIASES: dict[str, Level] = {
    "WARNING": Level.WARN,
    "CRITICAL": Level.FATAL,
}


def level_name(level: int) -> str:
    """Return the display string for *level*, or ``"UNKNOWN"`` when out of range."""
    if 0 <= level < len(_NAMES):
        return _NAMES[level]
    return UNKNOWN_LEVEL_NAME


def level_color(level: int) -> str:
    """Return the ANSI color prefix for *level* (empty when out of range)."""
    if 0 <= level < len(_COLORS):
        return _COLORS[level]
    return ""


def parse_level(value: str | int) -> Level:
    """Coerce a level name (case-insensitive) or in-range integer to :class:`Level`.

    Raises:
        ValueError: *value* names no level.
    """
    if isinstance(value, Level):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        try:
            return Level(value)
        except ValueError:
            raise ValueError(f"Level {value!r} is out of range") from None
    if isinstance(value, str):
        key = value.strip().upper()
        if key in Level.__members__:
            return Level[key]
        if key in _ALIASES:
            return _ALIASES[key]
    raise ValueError(f"Unknown level {value!r}")


__all__ = [
    "DEFAULT_LEVEL",
    "Level",
    "UNKNOWN_LEVEL_NAME",
    "level_color",
    "level_name",
    "parse_level",
]
