"""Process-wide default dispatcher and call-site functions.

The default :class:`~sinklog.dispatch.Dispatcher` exists as soon as the
package is imported, so no initialisation call is needed::

    import sinklog

    sinklog.set_level("INFO")
    with open("app.log", "a") as fh:
        sinklog.add_file_sink(fh, "WARN")
        sinklog.info("started pid=%d", os.getpid())

Every call-site function records the caller's file and line.
"""
from __future__ import annotations

from typing import Any, TextIO

from sinklog.config.settings import DispatcherSettings, EnvSettingsLoader
from sinklog.dispatch.engine import Dispatcher
from sinklog.dispatch.locking import LockStrategy
from sinklog.events.levels import DEFAULT_LEVEL, Level, level_name
from sinklog.kernel.errors import SinkCapacityError
from sinklog.kernel.types import Result
from sinklog.sinks.callback import EventCallback
from sinklog.sinks.protocol import Sink


_dispatcher = Dispatcher()


def get_dispatcher() -> Dispatcher:
    """Return the process-wide default dispatcher."""
    return _dispatcher


def set_dispatcher(dispatcher: Dispatcher) -> Dispatcher:
    """Replace the default dispatcher; returns the previous one."""
    global _dispatcher
    previous, _dispatcher = _dispatcher, dispatcher
    return previous


def configure(settings: DispatcherSettings | None = None) -> DispatcherSettings:
    """Apply *settings* (default: read ``SINKLOG_*`` from the environment)."""
    if settings is None:
        settings = EnvSettingsLoader().load(DispatcherSettings)
    _dispatcher.apply_settings(settings)
    return settings


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------


def set_level(level: int | str) -> None:
    _dispatcher.set_level(level)


def set_quiet(quiet: bool) -> None:
    _dispatcher.set_quiet(quiet)


def set_console_enabled(enabled: bool) -> None:
    _dispatcher.set_console_enabled(enabled)


def set_console_threshold(level: int | str | None) -> None:
    _dispatcher.set_console_threshold(level)


def set_console_stream(stream: TextIO | None) -> None:
    _dispatcher.set_console_stream(stream)


def set_color(color: bool | None) -> None:
    _dispatcher.set_color(color)


def set_lock(lock: LockStrategy | None) -> None:
    _dispatcher.set_lock(lock)


def add_sink(sink: Sink, threshold: int | str = DEFAULT_LEVEL) -> Result[int, SinkCapacityError]:
    return _dispatcher.add_sink(sink, threshold)


def add_file_sink(handle: Any, threshold: int | str = DEFAULT_LEVEL) -> Result[int, SinkCapacityError]:
    return _dispatcher.add_file_sink(handle, threshold)


def add_callback_sink(
    callback: EventCallback,
    user_data: Any = None,
    threshold: int | str = DEFAULT_LEVEL,
) -> Result[int, SinkCapacityError]:
    return _dispatcher.add_callback_sink(callback, user_data, threshold)


# ---------------------------------------------------------------------------
# Call sites
# ---------------------------------------------------------------------------


def log(level: int, fmt: Any, *args: Any) -> None:
    _dispatcher.log(level, fmt, *args, stacklevel=2)


def trace(fmt: Any, *args: Any) -> None:
    _dispatcher.log(Level.TRACE, fmt, *args, stacklevel=2)


def debug(fmt: Any, *args: Any) -> None:
    _dispatcher.log(Level.DEBUG, fmt, *args, stacklevel=2)


def info(fmt: Any, *args: Any) -> None:
    _dispatcher.log(Level.INFO, fmt, *args, stacklevel=2)


def warn(fmt: Any, *args: Any) -> None:
    _dispatcher.log(Level.WARN, fmt, *args, stacklevel=2)


def error(fmt: Any, *args: Any) -> None:
    _dispatcher.log(Level.ERROR, fmt, *args, stacklevel=2)


def fatal(fmt: Any, *args: Any) -> None:
    _dispatcher.log(Level.FATAL, fmt, *args, stacklevel=2)


warning = warn
critical = fatal

__all__ = [
    "add_callback_sink",
    "add_file_sink",
    "add_sink",
    "configure",
    "critical",
    "debug",
    "error",
    "fatal",
    "get_dispatcher",
    "info",
    "level_name",
    "log",
    "set_color",
    "set_console_enabled",
    "set_console_stream",
    "set_console_threshold",
    "set_dispatcher",
    "set_level",
    "set_lock",
    "set_quiet",
    "trace",
    "warn",
    "warning",
]
