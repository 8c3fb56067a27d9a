"""stdlib adapter – route :mod:`logging` records through a dispatcher.

Usage::

    import logging
    from sinklog.adapters.stdlib import DispatcherHandler

    logging.getLogger().addHandler(DispatcherHandler())
"""
from __future__ import annotations

import logging

from sinklog.api import get_dispatcher
from sinklog.dispatch.engine import Dispatcher
from sinklog.events.levels import Level

_TO_STDLIB: dict[int, int] = {
    Level.TRACE: 5,
    Level.DEBUG: logging.DEBUG,
    Level.INFO: logging.INFO,
    Level.WARN: logging.WARNING,
    Level.ERROR: logging.ERROR,
    Level.FATAL: logging.CRITICAL,
}

_TRACE_FORMATTER = logging.Formatter()


def from_stdlib(levelno: int) -> Level:
    """Map a :mod:`logging` level number onto the nearest lower :class:`Level`."""
    if levelno >= logging.CRITICAL:
        return Level.FATAL
    if levelno >= logging.ERROR:
        return Level.ERROR
    if levelno >= logging.WARNING:
        return Level.WARN
    if levelno >= logging.INFO:
        return Level.INFO
    if levelno >= logging.DEBUG:
        return Level.DEBUG
    return Level.TRACE


def stdlib_level(level: int) -> int:
    """Map a :class:`Level` onto a :mod:`logging` level number."""
    if level < Level.TRACE:
        return logging.NOTSET
    if level > Level.FATAL:
        return logging.CRITICAL
    return _TO_STDLIB[level]


class DispatcherHandler(logging.Handler):
    """:class:`logging.Handler` that re-emits records through a dispatcher.

    The record's ``pathname``/``lineno`` become the event location and its
    ``msg``/``args`` stay unrendered until a sink asks for the message.
    Records carrying ``exc_info`` or ``stack_info`` are rendered eagerly
    instead, with the traceback and stack appended after the message the
    same way :class:`logging.Formatter` lays them out.

    Parameters
    ----------
    dispatcher:
        Target dispatcher. ``None`` resolves the process-wide default at emit
        time.
    level:
        Handler level filter (same as any :class:`logging.Handler`).
    """

    def __init__(self, dispatcher: Dispatcher | None = None, level: int = logging.NOTSET) -> None:
        super().__init__(level)
        self._dispatcher = dispatcher

    @property
    def dispatcher(self) -> Dispatcher:
        if self._dispatcher is not None:
            return self._dispatcher
        return get_dispatcher()

    def emit(self, record: logging.LogRecord) -> None:
        try:
            dispatcher = self.dispatcher
            level = from_stdlib(record.levelno)
            if not dispatcher.is_enabled_for(level):
                return
            if record.exc_info or record.stack_info:
                dispatcher.emit(level, record.pathname, record.lineno, self._render_with_trace(record))
                return
            args = record.args
            if isinstance(args, tuple):
                values = args
            elif args:
                values = (args,)
            else:
                values = ()
            dispatcher.emit(level, record.pathname, record.lineno, record.msg, *values)
        except Exception:  # noqa: BLE001
            self.handleError(record)

    def _render_with_trace(self, record: logging.LogRecord) -> str:
        formatter = self.formatter or _TRACE_FORMATTER
        text = record.getMessage()
        if record.exc_info and not record.exc_text:
            record.exc_text = formatter.formatException(record.exc_info)
        if record.exc_text:
            text = f"{text}\n{record.exc_text}"
        if record.stack_info:
            text = f"{text}\n{formatter.formatStack(record.stack_info)}"
        return text


__all__ = ["DispatcherHandler", "from_stdlib", "stdlib_level"]
