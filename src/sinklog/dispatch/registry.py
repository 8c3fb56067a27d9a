"""Dispatch – fixed-capacity sink registry."""
from __future__ import annotations

import logging
from collections.abc import Iterator

from sinklog.kernel.errors import SinkCapacityError
from sinklog.kernel.types import Err, Ok, Result
from sinklog.sinks.protocol import Sink, SinkEntry

logger = logging.getLogger(__name__)

MAX_SINKS = 32


class SinkRegistry:
    """Ordered, bounded table of sinks.

    Entries keep registration order, which is also the fan-out order. A
    registration beyond ``capacity`` fails without changing the table.
    Entries cannot be removed.
    """

    def __init__(self, capacity: int = MAX_SINKS) -> None:
        if capacity < 1:
            raise ValueError("capacity must be >= 1")
        self._capacity = capacity
        self._entries: list[SinkEntry] = []

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def is_full(self) -> bool:
        return len(self._entries) >= self._capacity

    def add(self, sink: Sink, threshold: int) -> Result[int, SinkCapacityError]:
        """Append *sink*; return its slot index, or ``Err`` when full."""
        if self.is_full:
            logger.warning("sinklog.sink_rejected capacity=%d sink=%r", self._capacity, sink)
            return Err(SinkCapacityError(self._capacity))
        self._entries.append(SinkEntry(sink=sink, threshold=int(threshold)))
        return Ok(len(self._entries) - 1)

    def entries(self) -> tuple[SinkEntry, ...]:
        """Snapshot of the current entries in registration order."""
        return tuple(self._entries)

    def __iter__(self) -> Iterator[SinkEntry]:
        return iter(self.entries())

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"SinkRegistry(size={len(self._entries)}, capacity={self._capacity})"


__all__ = ["MAX_SINKS", "SinkRegistry"]
