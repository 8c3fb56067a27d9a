"""Kernel – framework-agnostic building blocks (errors, result, clock)."""

from sinklog.kernel.errors import BaseError, DispatchError, SinkCapacityError
from sinklog.kernel.time import Clock, FrozenClock, SystemClock
from sinklog.kernel.types import Err, Ok, Result

__all__ = [
    "BaseError",
    "Clock",
    "DispatchError",
    "Err",
    "FrozenClock",
    "Ok",
    "Result",
    "SinkCapacityError",
    "SystemClock",
]
