"""Shared fixtures: a fresh dispatcher per test, wired to in-memory streams."""

from __future__ import annotations

from sinklog.testing.fixtures import (  # noqa: F401
    console_stream,
    counting_clock,
    default_dispatcher,
    dispatcher,
)
