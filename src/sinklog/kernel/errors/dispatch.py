"""Dispatch errors – failures reported synchronously to configuring callers."""

from __future__ import annotations

from typing import Any

from sinklog.kernel.errors.base import BaseError


class DispatchError(BaseError):
    """A dispatcher configuration request could not be honoured."""

    default_code = "dispatch_error"


class SinkCapacityError(DispatchError):
    """The sink registry already holds its maximum number of sinks."""

    default_code = "sink_capacity_exceeded"

    def __init__(
        self,
        capacity: int,
        message: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(
            message or f"Sink registry is full ({capacity} sinks)",
            detail={"capacity": capacity},
            **kwargs,
        )
        self.capacity = capacity


__all__ = ["DispatchError", "SinkCapacityError"]
