"""Kernel types."""
from sinklog.kernel.types.result import Err, Ok, Result

__all__ = ["Err", "Ok", "Result"]
