"""Config settings – DispatcherSettings.

Environment variables (all optional)::

    SINKLOG_LEVEL=INFO          # global minimum
    SINKLOG_CONSOLE_LEVEL=WARN  # console threshold, empty = follow global
    SINKLOG_QUIET=false         # suppress the console line
    SINKLOG_COLOR=auto          # auto | always | never
    SINKLOG_CAPACITY=32         # sink registry capacity
"""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from sinklog.config.settings.base import Settings
from sinklog.config.validation import InvalidSettingValueError
from sinklog.dispatch.registry import MAX_SINKS
from sinklog.events.levels import parse_level

_COLOR_MODES: dict[str, bool | None] = {"auto": None, "always": True, "never": False}


@dataclasses.dataclass
class DispatcherSettings(Settings):
    """Settings for a :class:`~sinklog.dispatch.Dispatcher`."""

    _prefix: ClassVar[str] = "SINKLOG"

    level: str = "TRACE"
    console_level: str = ""
    quiet: bool = False
    color: str = "auto"
    capacity: int = MAX_SINKS

    def _validate(self) -> None:
        for name in ("level", "console_level"):
            value = getattr(self, name)
            if name == "console_level" and not value:
                continue
            try:
                parse_level(value)
            except ValueError as exc:
                raise InvalidSettingValueError(name, value, str(exc)) from exc
        if self.color.strip().lower() not in _COLOR_MODES:
            raise InvalidSettingValueError("color", self.color, "expected auto, always or never")
        if self.capacity < 1:
            raise InvalidSettingValueError("capacity", self.capacity, "must be >= 1")

    def color_mode(self) -> bool | None:
        """``None`` for auto-detection, otherwise forced on/off."""
        return _COLOR_MODES[self.color.strip().lower()]


__all__ = ["DispatcherSettings"]
