"""Testing fakes – RecordingLock."""
from __future__ import annotations


class RecordingLock:
    """Lock strategy that records ``acquire``/``release`` calls in order."""

    def __init__(self) -> None:
        self.calls: list[str] = []

    def acquire(self) -> bool:
        self.calls.append("acquire")
        return True

    def release(self) -> None:
        self.calls.append("release")

    @property
    def held(self) -> bool:
        return self.calls.count("acquire") > self.calls.count("release")


__all__ = ["RecordingLock"]
