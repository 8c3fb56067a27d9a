"""Sinks – ConsoleSink."""
from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Any, TextIO

from sinklog.formatting.console import ConsoleFormatter

if TYPE_CHECKING:
    from sinklog.events.event import Event


class ConsoleSink:
    """Writes human-readable lines to a terminal stream.

    Args:
        stream: Target stream. ``None`` resolves ``sys.stderr`` at write
            time, so stream redirection (e.g. pytest's ``capsys``) is honoured.
        color: ``True``/``False`` to force colorization, ``None`` to colorize
            only when the stream is a TTY.
    """

    def __init__(self, stream: TextIO | None = None, color: bool | None = None) -> None:
        self._stream = stream
        self.color = color

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stderr

    @stream.setter
    def stream(self, value: TextIO | None) -> None:
        self._stream = value

    def use_color(self) -> bool:
        if self.color is not None:
            return self.color
        return _isatty(self.stream)

    def write(self, event: Event) -> None:
        stream = self.stream
        stream.write(ConsoleFormatter(color=self.use_color()).format(event) + "\n")
        stream.flush()


def _isatty(stream: Any) -> bool:
    isatty = getattr(stream, "isatty", None)
    if isatty is None:
        return False
    try:
        return bool(isatty())
    except (OSError, ValueError):
        return False


__all__ = ["ConsoleSink"]
