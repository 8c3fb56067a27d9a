"""Testing fixtures – pytest fixtures for dispatcher tests.

Import them into a ``conftest.py``::

    from sinklog.testing.fixtures import console_stream, counting_clock, dispatcher  # noqa: F401
"""
from sinklog.testing.fixtures.core import (
    console_stream,
    counting_clock,
    default_dispatcher,
    dispatcher,
)

__all__ = ["console_stream", "counting_clock", "default_dispatcher", "dispatcher"]
