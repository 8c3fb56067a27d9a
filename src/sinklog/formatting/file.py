"""Formatting – plain line renderer for file handles."""
from __future__ import annotations

from typing import TYPE_CHECKING

from sinklog.events.levels import level_name

if TYPE_CHECKING:
    from sinklog.events.event import Event


class FileFormatter:
    """Renders ``YYYY-MM-DD HH:MM:SS LEVEL file:line: message`` (never colored)."""

    TIME_FORMAT = "%Y-%m-%d %H:%M:%S"
    LEVEL_WIDTH = 5

    def format(self, event: Event) -> str:
        stamp = event.timestamp.astimezone().strftime(self.TIME_FORMAT)
        label = f"{level_name(event.level):<{self.LEVEL_WIDTH}}"
        return f"{stamp} {label} {event.file}:{event.line}: {event.message}"


__all__ = ["FileFormatter"]
