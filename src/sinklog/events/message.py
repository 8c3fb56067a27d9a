"""Events – deferred printf-style message rendering."""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any


def render_message(fmt: Any, args: tuple[Any, ...]) -> str:
    """Render *fmt* with *args* the way :mod:`logging` renders ``msg % args``.

    * No arguments: the template is returned verbatim, so stray ``%``
      sequences are harmless.
    * A single non-empty mapping: ``%(key)s`` substitution.
    * Otherwise positional ``fmt % args``.

    A template/argument mismatch is not validated; it degrades to the raw
    template followed by the arguments' ``repr`` instead of raising.
    """
    template = fmt if isinstance(fmt, str) else str(fmt)
    if not args:
        return template
    values: Any = args
    if len(args) == 1 and isinstance(args[0], Mapping) and args[0]:
        values = args[0]
    try:
        return template % values
    except (TypeError, ValueError, KeyError):
        return f"{template} {args!r}"


__all__ = ["render_message"]
