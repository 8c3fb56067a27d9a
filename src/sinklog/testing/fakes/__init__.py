"""Testing fakes – in-memory doubles for clocks, sinks and locks."""
from sinklog.testing.fakes.clock import DEFAULT_INSTANT, CountingClock
from sinklog.testing.fakes.lock import RecordingLock
from sinklog.testing.fakes.sinks import CapturedEvent, FailingSink, RecordingSink

__all__ = [
    "CapturedEvent",
    "CountingClock",
    "DEFAULT_INSTANT",
    "FailingSink",
    "RecordingLock",
    "RecordingSink",
]
