"""Testing fixtures – dispatcher, counting_clock, console_stream, default_dispatcher."""
from __future__ import annotations

import io
from collections.abc import Iterator

import pytest

from sinklog.api import set_dispatcher
from sinklog.dispatch import Dispatcher
from sinklog.sinks import ConsoleSink
from sinklog.testing.fakes import CountingClock


@pytest.fixture
def counting_clock() -> CountingClock:
    """Frozen clock pinned to 2026-01-01 12:00 UTC that counts its reads."""
    return CountingClock()


@pytest.fixture
def console_stream() -> io.StringIO:
    """In-memory stream used as the dispatcher console."""
    return io.StringIO()


@pytest.fixture
def dispatcher(counting_clock: CountingClock, console_stream: io.StringIO) -> Dispatcher:
    """Fresh dispatcher: TRACE minimum, uncolored console on ``console_stream``."""
    return Dispatcher(
        console=ConsoleSink(stream=console_stream, color=False),
        clock=counting_clock,
    )


@pytest.fixture
def default_dispatcher(dispatcher: Dispatcher) -> Iterator[Dispatcher]:
    """Install ``dispatcher`` as the process-wide default for one test."""
    previous = set_dispatcher(dispatcher)
    try:
        yield dispatcher
    finally:
        set_dispatcher(previous)


__all__ = ["console_stream", "counting_clock", "default_dispatcher", "dispatcher"]
