"""
sinklog – minimal leveled log dispatcher.

One call site, one severity gate, one timestamp, many sinks::

    import sys
    import sinklog

    sinklog.set_level("DEBUG")
    sinklog.add_file_sink(sys.stdout, "WARN")
    sinklog.add_callback_sink(lambda event, udata: udata.append(event.message), [])
    sinklog.warn("disk %d%% full", 91)

Import path convention::

    from sinklog.dispatch import Dispatcher, ThreadLock
    from sinklog.events import Event, Level, level_name
    from sinklog.sinks import CallbackSink, StreamSink
"""

from sinklog.api import (
    add_callback_sink,
    add_file_sink,
    add_sink,
    configure,
    critical,
    debug,
    error,
    fatal,
    get_dispatcher,
    info,
    log,
    set_color,
    set_console_enabled,
    set_console_stream,
    set_console_threshold,
    set_dispatcher,
    set_level,
    set_lock,
    set_quiet,
    trace,
    warn,
    warning,
)
from sinklog.dispatch import Dispatcher, HookLock, NoLock, ThreadLock
from sinklog.events import Event, Level, level_name
from sinklog.kernel.errors import SinkCapacityError

__version__ = "0.1.0"
__all__ = [
    "Dispatcher",
    "Event",
    "HookLock",
    "Level",
    "NoLock",
    "SinkCapacityError",
    "ThreadLock",
    "__version__",
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
