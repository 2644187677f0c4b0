"""Per-thread pools of reusable objects."""

from __future__ import annotations

import threading
from typing import Callable, Generic, Optional, TypeVar

T = TypeVar("T")


class ThreadLocalPool(Generic[T]):
    """A pool of reusable objects kept separately for every thread.

    Each thread sees only the objects it released itself, so no locking is
    needed. When a thread's pool is empty, ``acquire`` builds a new object
    with ``factory``.
    """

    def __init__(self, factory: Callable[[], T]) -> None:
        self._factory = factory
        self._local = threading.local()

    @property
    def _available(self) -> list[T]:
        available = getattr(self._local, "available", None)
        if available is None:
            available = []
            self._local.available = available
        return available

    def acquire(self) -> T:
        """Take the most recently released object, or build a new one."""
        available = self._available
        if available:
            return available.pop()
        return self._factory()

    def release(self, obj: Optional[T]) -> None:
        """Return ``obj`` to this thread's pool; None is ignored."""
        if obj is not None:
            self._available.append(obj)

    def clear(self) -> None:
        """Drop every object pooled by the calling thread."""
        self._available.clear()

    def size(self) -> int:
        """Number of objects pooled by the calling thread."""
        return len(self._available)