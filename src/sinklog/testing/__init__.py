"""Testing support – fakes and pytest fixtures.

Fixtures live in :mod:`sinklog.testing.fixtures`; import them into a
``conftest.py``::

    from sinklog.testing.fixtures import dispatcher  # noqa: F401
"""

from sinklog.testing.fakes import (
    DEFAULT_INSTANT,
    CapturedEvent,
    CountingClock,
    FailingSink,
    RecordingLock,
    RecordingSink,
)

__all__ = [
    "CapturedEvent",
    "CountingClock",
    "DEFAULT_INSTANT",
    "FailingSink",
    "RecordingLock",
    "RecordingSink",
]
