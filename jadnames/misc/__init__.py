from __future__ import annotations

from .loggers import Loggers
from .picklable_lock import PicklableLock, PicklableRLock


__all__ = (
    "Loggers",
    "PicklableLock",
    "PicklableRLock",
)
