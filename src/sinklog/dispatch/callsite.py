"""Dispatch – call-site capture."""
from __future__ import annotations

import sys

UNKNOWN_FILE = "<unknown>"


def caller_location(stacklevel: int = 1) -> tuple[str, int]:
    """Return ``(filename, lineno)`` of a frame above the calling function.

    ``stacklevel=1`` is the caller of the function that calls
    ``caller_location``; each extra level walks one more frame out, the same
    convention as :func:`warnings.warn` and :meth:`logging.Logger.log`.
    """
    try:
        frame = sys._getframe(stacklevel + 1)  # noqa: SLF001
    except ValueError:
        return UNKNOWN_FILE, 0
    return frame.f_code.co_filename, frame.f_lineno


__all__ = ["UNKNOWN_FILE", "caller_location"]
