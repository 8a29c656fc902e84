from __future__ import annotations

import threading
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, TypeAlias

BeanName: TypeAlias = str
"""A non-empty bean identifier compared by exact string equality."""


@dataclass(slots=True)
class _CreationLock:
    lock: threading.RLock = field(default_factory=threading.RLock)
    users: int = 0
    """Callers holding or waiting for ``lock``."""


class SingletonCache:
    """Store created bean instances keyed by bean name.

    Entries are never evicted or replaced: the first instance written for a
    name is kept for the lifetime of the cache and later writes for the same
    name are ignored.

    The cache also owns the per-name creation locks, so every factory sharing
    a cache serializes creation of the same name. A lock lives only while some
    caller holds or waits for it.
    """

    def __init__(self) -> None:
        self._instances_by_name: dict[BeanName, Any] = {}
        self._creation_locks: dict[BeanName, _CreationLock] = {}
        self._creation_locks_lock = threading.Lock()

    def find(self, name: BeanName, default: Any = None) -> Any:
        """Get a cached instance by name, if it exists.

        Args:
            name: Bean name to look up.
            default: Value returned when no instance is cached. Pass a
                sentinel to tell a missing entry from a cached ``None``.

        """
        return self._instances_by_name.get(name, default)

    def add(self, name: BeanName, instance: Any) -> Any:
        """Store an instance unless the name already has one.

        Args:
            name: Bean name to store the instance under.
            instance: Bean instance to cache.

        Returns:
            The instance held by the cache after the call, which is the
            previously stored one when the name was already present.

        """
        return self._instances_by_name.setdefault(name, instance)

    @contextmanager
    def creation_lock(self, name: BeanName) -> Iterator[None]:
        """Hold the re-entrant creation lock for ``name``.

        Callers entering for the same name are serialized; different names do
        not block each other. The lock entry is dropped once its last user
        leaves, so failed or finished creations leave nothing behind.

        Args:
            name: Bean name being created.

        """
        with self._creation_locks_lock:
            entry = self._creation_locks.get(name)
            if entry is None:
                entry = self._creation_locks[name] = _CreationLock()
            entry.users += 1
        try:
            with entry.lock:
                yield
        finally:
            with self._creation_locks_lock:
                entry.users -= 1
                if not entry.users:
                    del self._creation_locks[name]

    def names_in_creation(self) -> tuple[BeanName, ...]:
        """Get names whose creation lock is currently held or awaited."""
        with self._creation_locks_lock:
            return tuple(self._creation_locks)

    def names(self) -> tuple[BeanName, ...]:
        """Get cached bean names in insertion order."""
        return tuple(self._instances_by_name)

    def __contains__(self, name: object) -> bool:
        return name in self._instances_by_name

    def __len__(self) -> int:
        return len(self._instances_by_name)
