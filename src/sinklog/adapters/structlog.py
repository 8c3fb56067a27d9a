"""structlog adapter – StructlogSink.

Forwards dispatched events to a structlog logger, so events raised through
sinklog end up in the same processor chain (JSON rendering, context vars...)
as the rest of the application's structured logs::

    import structlog
    import sinklog
    from sinklog.adapters.structlog import StructlogSink

    sinklog.add_sink(StructlogSink(structlog.get_logger("legacy")), "INFO")
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import structlog

from sinklog.adapters.stdlib import stdlib_level

if TYPE_CHECKING:
    from sinklog.events.event import Event


class StructlogSink:
    """Renders each event and hands it to ``logger.log(level, message, **fields)``.

    The event itself is not retained; only its rendered message and plain
    fields cross into structlog.

    Parameters
    ----------
    logger:
        A structlog bound logger. Defaults to ``structlog.get_logger("sinklog")``.
    """

    def __init__(self, logger: Any = None) -> None:
        self._logger = logger if logger is not None else structlog.get_logger("sinklog")

    def write(self, event: Event) -> None:
        self._logger.log(
            min(max(stdlib_level(event.level), logging.DEBUG), logging.CRITICAL),
            event.message,
            source=event.location,
            sinklog_level=event.level_name,
            sinklog_timestamp=event.timestamp.isoformat(),
        )


__all__ = ["StructlogSink"]
