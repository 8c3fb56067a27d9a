"""Events – severity levels, the event record and message rendering."""
from sinklog.events.event import Event
from sinklog.events.levels import (
    DEFAULT_LEVEL,
    UNKNOWN_LEVEL_NAME,
    Level,
    level_color,
    level_name,
    parse_level,
)
from sinklog.events.message import render_message

__all__ = [
    "DEFAULT_LEVEL",
    "Event",
    "Level",
    "UNKNOWN_LEVEL_NAME",
    "level_color",
    "level_name",
    "parse_level",
    "render_message",
]
