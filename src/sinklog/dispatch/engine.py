"""Dispatch – the Dispatcher.

One :meth:`Dispatcher.emit` call runs, in order:

1. gate check against the global minimum (no lock, no clock read);
2. lock acquisition;
3. one clock read and one :class:`~sinklog.events.Event`;
4. the console line, unless quiet or below the console threshold;
5. every registered sink whose threshold the event meets, in registration
   order;
6. lock release.

Sink failures never reach the caller. They are counted in
:attr:`Dispatcher.write_failures` and the remaining sinks still run.
"""
from __future__ import annotations

import contextlib
import logging
from collections.abc import Iterator
from typing import TYPE_CHECKING, Any, TextIO

from sinklog.dispatch.callsite import caller_location
from sinklog.dispatch.locking import LockStrategy, NoLock
from sinklog.dispatch.registry import MAX_SINKS, SinkRegistry
from sinklog.events.event import Event
from sinklog.events.levels import DEFAULT_LEVEL, Level, parse_level
from sinklog.kernel.errors import SinkCapacityError
from sinklog.kernel.time import Clock, SystemClock
from sinklog.kernel.types import Result
from sinklog.sinks.callback import CallbackSink, EventCallback
from sinklog.sinks.console import ConsoleSink
from sinklog.sinks.protocol import Sink
from sinklog.sinks.stream import StreamSink

if TYPE_CHECKING:
    from sinklog.config.settings import DispatcherSettings

logger = logging.getLogger(__name__)


def _threshold(value: int | str) -> int:
    # Integers pass through unchecked so an out-of-range minimum can silence
    # everything; names go through parse_level.
    if isinstance(value, int) and not isinstance(value, bool):
        return int(value)
    return int(parse_level(value))


class Dispatcher:
    """Filters, timestamps and fans out log calls to registered sinks.

    Parameters
    ----------
    level:
        Global minimum level. Calls below it return before any work.
        Defaults to :data:`~sinklog.events.DEFAULT_LEVEL` (``TRACE``).
    quiet:
        Suppress the console line. Registered sinks are unaffected.
    console_level:
        Console threshold. ``None`` follows the global minimum.
    console:
        Console sink; defaults to a :class:`ConsoleSink` on ``stderr`` with
        automatic color detection.
    capacity:
        Maximum number of registered sinks.
    lock:
        Lock strategy guarding dispatch and registration; ``None`` installs
        :class:`NoLock`.
    clock:
        Timestamp source, read once per dispatched call.
    """

    def __init__(
        self,
        *,
        level: int | str = DEFAULT_LEVEL,
        quiet: bool = False,
        console_level: int | str | None = None,
        console: ConsoleSink | None = None,
        capacity: int = MAX_SINKS,
        lock: LockStrategy | None = None,
        clock: Clock | None = None,
    ) -> None:
        self._level = _threshold(level)
        self._quiet = bool(quiet)
        self._console_level = None if console_level is None else _threshold(console_level)
        self._console = console or ConsoleSink()
        self._registry = SinkRegistry(capacity)
        self._lock: LockStrategy = lock or NoLock()
        self._clock: Clock = clock or SystemClock()
        self._write_failures = 0

    @classmethod
    def from_settings(cls, settings: DispatcherSettings, **kwargs: Any) -> "Dispatcher":
        """Build a dispatcher from :class:`~sinklog.config.DispatcherSettings`.

        Keyword arguments (``lock``, ``clock``, ``console``...) override or
        complement the settings.
        """
        options: dict[str, Any] = {
            "level": settings.level,
            "quiet": settings.quiet,
            "console_level": settings.console_level or None,
            "capacity": settings.capacity,
        }
        options.update(kwargs)
        if "console" not in kwargs:
            options["console"] = ConsoleSink(color=settings.color_mode())
        return cls(**options)

    def apply_settings(self, settings: DispatcherSettings) -> None:
        """Apply level, console and color settings. Capacity is fixed at construction."""
        self.set_level(settings.level)
        self.set_console_threshold(settings.console_level or None)
        self.set_quiet(settings.quiet)
        self._console.color = settings.color_mode()
        logger.debug(
            "sinklog.settings_applied level=%s quiet=%s color=%s",
            settings.level,
            settings.quiet,
            settings.color,
        )

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def level(self) -> int:
        return self._level

    @property
    def quiet(self) -> bool:
        return self._quiet

    @property
    def console_threshold(self) -> int:
        """Effective console threshold (the global minimum unless overridden)."""
        return self._level if self._console_level is None else self._console_level

    @property
    def console(self) -> ConsoleSink:
        return self._console

    @property
    def registry(self) -> SinkRegistry:
        return self._registry

    @property
    def lock(self) -> LockStrategy:
        return self._lock

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def write_failures(self) -> int:
        """Number of sink writes that raised and were swallowed."""
        return self._write_failures

    def is_enabled_for(self, level: int) -> bool:
        return level >= self._level

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    def set_level(self, level: int | str) -> None:
        """Set the global minimum level; applies from the next call on."""
        self._level = _threshold(level)

    set_global_minimum = set_level

    def set_quiet(self, quiet: bool) -> None:
        self._quiet = bool(quiet)

    def set_console_enabled(self, enabled: bool) -> None:
        self._quiet = not enabled

    def set_console_threshold(self, level: int | str | None) -> None:
        """Set the console threshold; ``None`` follows the global minimum."""
        self._console_level = None if level is None else _threshold(level)

    def set_console_stream(self, stream: TextIO | None) -> None:
        self._console.stream = stream

    def set_color(self, color: bool | None) -> None:
        self._console.color = color

    def set_lock(self, lock: LockStrategy | None) -> None:
        """Install *lock* around dispatch and registration (``None``: no locking)."""
        self._lock = lock or NoLock()
        logger.debug("sinklog.lock_installed strategy=%s", type(self._lock).__name__)

    def set_clock(self, clock: Clock) -> None:
        self._clock = clock

    def add_sink(self, sink: Sink, threshold: int | str = DEFAULT_LEVEL) -> Result[int, SinkCapacityError]:
        """Register *sink*; ``Ok(slot)`` on success, ``Err(SinkCapacityError)`` when full."""
        with self._guard():
            return self._registry.add(sink, _threshold(threshold))

    def add_file_sink(self, handle: Any, threshold: int | str = DEFAULT_LEVEL) -> Result[int, SinkCapacityError]:
        """Register a writable text handle. The handle is never closed here."""
        return self.add_sink(StreamSink(handle), threshold)

    def add_callback_sink(
        self,
        callback: EventCallback,
        user_data: Any = None,
        threshold: int | str = DEFAULT_LEVEL,
    ) -> Result[int, SinkCapacityError]:
        """Register ``callback(event, user_data)``."""
        return self.add_sink(CallbackSink(callback, user_data), threshold)

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def emit(self, level: int, source_file: str, source_line: int, fmt: Any, *args: Any) -> None:
        """Dispatch one log call captured at ``source_file:source_line``."""
        if level < self._level:
            return
        with self._guard():
            event = Event(
                level=level,
                timestamp=self._clock.now(),
                file=source_file,
                line=source_line,
                fmt=fmt,
                args=args,
            )
            if not self._quiet and level >= self.console_threshold:
                self._deliver(self._console, event)
            for entry in self._registry:
                if entry.accepts(level):
                    self._deliver(entry.sink, event)

    def log(self, level: int, fmt: Any, *args: Any, stacklevel: int = 1) -> None:
        """Dispatch a call, taking file and line from the caller's frame."""
        if level < self._level:
            return
        source_file, source_line = caller_location(stacklevel)
        self.emit(level, source_file, source_line, fmt, *args)

    def trace(self, fmt: Any, *args: Any) -> None:
        self.log(Level.TRACE, fmt, *args, stacklevel=2)

    def debug(self, fmt: Any, *args: Any) -> None:
        self.log(Level.DEBUG, fmt, *args, stacklevel=2)

    def info(self, fmt: Any, *args: Any) -> None:
        self.log(Level.INFO, fmt, *args, stacklevel=2)

    def warn(self, fmt: Any, *args: Any) -> None:
        self.log(Level.WARN, fmt, *args, stacklevel=2)

    def error(self, fmt: Any, *args: Any) -> None:
        self.log(Level.ERROR, fmt, *args, stacklevel=2)

    def fatal(self, fmt: Any, *args: Any) -> None:
        """Dispatch at FATAL. Labeling only: the process keeps running."""
        self.log(Level.FATAL, fmt, *args, stacklevel=2)

    warning = warn
    critical = fatal

    @contextlib.contextmanager
    def _guard(self) -> Iterator[None]:
        lock = self._lock
        lock.acquire()
        try:
            yield
        finally:
            lock.release()

    def _deliver(self, sink: Sink, event: Event) -> None:
        try:
            sink.write(event)
        except Exception:  # noqa: BLE001
            self._write_failures += 1

    def __repr__(self) -> str:
        return (
            f"Dispatcher(level={self._level}, quiet={self._quiet}, "
            f"sinks={len(self._registry)}/{self._registry.capacity})"
        )


__all__ = ["Dispatcher"]
