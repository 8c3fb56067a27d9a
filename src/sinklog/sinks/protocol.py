"""Sinks – Sink protocol and registry entry."""
from __future__ import annotations

import dataclasses
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from sinklog.events.event import Event


@runtime_checkable
class Sink(Protocol):
    """Destination for dispatched events.

    ``write`` receives a read-only event valid only for the duration of the
    call. It may raise; the dispatcher swallows the failure and moves on to
    the next sink.
    """

    def write(self, event: Event) -> None: ...


@dataclasses.dataclass(frozen=True)
class SinkEntry:
    """A registered sink together with its minimum level."""

    sink: Sink
    threshold: int

    def accepts(self, level: int) -> bool:
        return level >= self.threshold


__all__ = ["Sink", "SinkEntry"]
