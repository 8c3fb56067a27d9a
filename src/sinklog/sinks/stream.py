"""Sinks – StreamSink (open file handles)."""
from __future__ import annotations

from typing import TYPE_CHECKING, Any

from sinklog.formatting.file import FileFormatter

if TYPE_CHECKING:
    from sinklog.events.event import Event


class StreamSink:
    """Appends one plain line per event to a writable text handle.

    The handle is borrowed: the sink flushes after each line but never closes
    it. Keeping it open for as long as the sink is registered is the caller's
    job.
    """

    def __init__(self, handle: Any, formatter: FileFormatter | None = None) -> None:
        self.handle = handle
        self._formatter = formatter or FileFormatter()

    def write(self, event: Event) -> None:
        self.handle.write(self._formatter.format(event) + "\n")
        flush = getattr(self.handle, "flush", None)
        if flush is not None:
            flush()

    def __repr__(self) -> str:
        return f"StreamSink({getattr(self.handle, 'name', self.handle)!r})"


__all__ = ["StreamSink"]
