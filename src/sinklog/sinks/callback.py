"""Sinks – CallbackSink."""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable

if TYPE_CHECKING:
    from sinklog.events.event import Event

EventCallback = Callable[["Event", Any], None]


class CallbackSink:
    """Hands each event to ``callback(event, user_data)``.

    The callback decides how to render and forward the event.
    """

    def __init__(self, callback: EventCallback, user_data: Any = None) -> None:
        self.callback = callback
        self.user_data = user_data

    def write(self, event: Event) -> None:
        self.callback(event, self.user_data)

    def __repr__(self) -> str:
        name = getattr(self.callback, "__qualname__", repr(self.callback))
        return f"CallbackSink({name})"


__all__ = ["CallbackSink", "EventCallback"]
