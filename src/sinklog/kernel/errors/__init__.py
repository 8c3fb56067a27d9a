"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── DispatchError            (dispatch.py)
    │   └── SinkCapacityError
    └── ConfigError              (sinklog.config.validation)
        └── InvalidSettingValueError
"""

from sinklog.kernel.errors.base import BaseError
from sinklog.kernel.errors.dispatch import DispatchError, SinkCapacityError

__all__ = [
    "BaseError",
    "DispatchError",
    "SinkCapacityError",
]
