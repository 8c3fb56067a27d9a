"""Dispatch – pluggable lock strategies guarding a whole dispatch.

Any object with ``acquire()`` / ``release()`` qualifies, so
:class:`threading.Lock` and :class:`threading.RLock` can be installed as-is.
"""
from __future__ import annotations

import threading
from typing import Any, Callable, Protocol

LockHook = Callable[[bool, Any], None]


class LockStrategy(Protocol):
    """Port: mutual exclusion around dispatch and sink registration."""

    def acquire(self) -> Any: ...
    def release(self) -> None: ...


class NoLock:
    """Default strategy: no mutual exclusion at all."""

    def acquire(self) -> bool:
        return True

    def release(self) -> None:
        return None


class ThreadLock:
    """Process-wide re-entrant lock.

    Re-entrant so that a sink logging through the same dispatcher from inside
    its ``write`` does not deadlock the thread.
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()

    def acquire(self) -> bool:
        return self._lock.acquire()

    def release(self) -> None:
        self._lock.release()


class HookLock:
    """Adapts a single ``hook(is_acquire, user_data)`` callable.

    The hook is called with ``True`` before a dispatch and ``False`` after it,
    always paired.
    """

    def __init__(self, hook: LockHook, user_data: Any = None) -> None:
        self._hook = hook
        self._user_data = user_data

    def acquire(self) -> bool:
        self._hook(True, self._user_data)
        return True

    def release(self) -> None:
        self._hook(False, self._user_data)


__all__ = ["HookLock", "LockHook", "LockStrategy", "NoLock", "ThreadLock"]
