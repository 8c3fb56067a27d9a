"""Events – the record handed to every sink for one log call."""
from __future__ import annotations

import dataclasses
from datetime import datetime
from typing import Any

from sinklog.events.levels import level_name
from sinklog.events.message import render_message


@dataclasses.dataclass(frozen=True, slots=True)
class Event:
    """One log call, as seen by sinks.

    Built once per dispatched call and shared read-only by every sink invoked
    for it; sinks must not keep a reference past their ``write`` call. The
    message is rendered on access, so sinks may render it differently.
    """

    level: int
    timestamp: datetime
    file: str
    line: int
    fmt: Any
    args: tuple[Any, ...] = ()

    @property
    def level_name(self) -> str:
        return level_name(self.level)

    @property
    def message(self) -> str:
        return render_message(self.fmt, self.args)

    @property
    def location(self) -> str:
        return f"{self.file}:{self.line}"


__all__ = ["Event"]
