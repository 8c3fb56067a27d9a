"""Dispatch – registry, lock strategies, call-site capture and the engine."""
from sinklog.dispatch.callsite import UNKNOWN_FILE, caller_location
from sinklog.dispatch.engine import Dispatcher
from sinklog.dispatch.locking import HookLock, LockHook, LockStrategy, NoLock, ThreadLock
from sinklog.dispatch.registry import MAX_SINKS, SinkRegistry

__all__ = [
    "Dispatcher",
    "HookLock",
    "LockHook",
    "LockStrategy",
    "MAX_SINKS",
    "NoLock",
    "SinkRegistry",
    "ThreadLock",
    "UNKNOWN_FILE",
    "caller_location",
]
