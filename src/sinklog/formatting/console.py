"""Formatting – human-readable console line renderer.

Renders::

    14:02:11 INFO  app.py:42: connected

With color enabled the level label is wrapped in its ANSI color and the
location is dimmed.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from sinklog.events.levels import level_color, level_name

if TYPE_CHECKING:
    from sinklog.events.event import Event

RESET = "\x1b[0m"
DIM = "\x1b[90m"


class ConsoleFormatter:
    """Renders one console line (without trailing newline) per event."""

    TIME_FORMAT = "%H:%M:%S"
    LEVEL_WIDTH = 5

    def __init__(self, color: bool = False) -> None:
        self.color = color

    def format(self, event: Event) -> str:
        time_of_day = event.timestamp.astimezone().strftime(self.TIME_FORMAT)
        label = f"{level_name(event.level):<{self.LEVEL_WIDTH}}"
        location = f"{event.file}:{event.line}:"
        if self.color:
            color = level_color(event.level)
            if color:
                label = f"{color}{label}{RESET}"
            location = f"{DIM}{location}{RESET}"
        return f"{time_of_day} {label} {location} {event.message}"


__all__ = ["ConsoleFormatter", "DIM", "RESET"]
