from __future__ import annotations

from enum import Enum


class LockMode(Enum):
    """Select locking behavior for singleton creation.

    Use these values for the factory-level ``lock_mode``. ``THREAD`` guarantees
    that concurrent misses for the same bean name invoke the instantiator only
    once. ``NONE`` skips locking entirely and suits single-threaded setups.
    """

    THREAD = "thread"
    """Serialize creation per bean name with locks owned by the singleton cache."""

    NONE = "none"
    """Disable locking around cache reads/writes."""
