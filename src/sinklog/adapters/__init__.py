"""Adapters – bridges to :mod:`logging` and structlog.

Import the concrete module you need::

    from sinklog.adapters.stdlib import DispatcherHandler
    from sinklog.adapters.structlog import StructlogSink
"""
