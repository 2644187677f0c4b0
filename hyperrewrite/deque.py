"""A bounded, thread-safe double-ended queue with blocking and non-blocking operations."""

from __future__ import annotations

import collections
import threading
from typing import Deque as _StdDeque
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


def _round_up_to_power_of_two(value: int) -> int:
    size = 1
    while size < value:
        size <<= 1
    return size


class Deque(Generic[T]):
    """Bounded deque shared safely between threads.

    The requested capacity is raised to at least 4 and rounded up to a power
    of two. One slot is always left free, so at most ``capacity - 1`` items
    are held at once. The ``try_*`` operations never block: pushes return
    False when the deque is full and pops return None when it is empty. The
    plain ``push_*`` and ``pop_*`` operations wait until they can succeed.
    """

    DEFAULT_CAPACITY = 1024

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        self._capacity = _round_up_to_power_of_two(max(capacity, 4))
        self._items: _StdDeque[T] = collections.deque()
        self._changed = threading.Condition()

    @property
    def capacity(self) -> int:
        """Number of slots, a power of two; one of them always stays free."""
        return self._capacity

    def _is_full(self) -> bool:
        return len(self._items) >= self._capacity - 1

    def try_push_front(self, value: T) -> bool:
        with self._changed:
            if self._is_full():
                return False
            self._items.appendleft(value)
            self._changed.notify_all()
            return True

    def try_push_back(self, value: T) -> bool:
        with self._changed:
            if self._is_full():
                return False
            self._items.append(value)
            self._changed.notify_all()
            return True

    def try_pop_front(self) -> Optional[T]:
        with self._changed:
            if not self._items:
                return None
            value = self._items.popleft()
            self._changed.notify_all()
            return value

    def try_pop_back(self) -> Optional[T]:
        with self._changed:
            if not self._items:
                return None
            value = self._items.pop()
            self._changed.notify_all()
            return value

    def push_front(self, value: T) -> None:
        """Push at the front, waiting while the deque is full."""
        with self._changed:
            self._changed.wait_for(lambda: not self._is_full())
            self._items.appendleft(value)
            self._changed.notify_all()

    def push_back(self, value: T) -> None:
        """Push at the back, waiting while the deque is full."""
        with self._changed:
            self._changed.wait_for(lambda: not self._is_full())
            self._items.append(value)
            self._changed.notify_all()

    def pop_front(self) -> T:
        """Pop from the front, waiting while the deque is empty."""
        with self._changed:
            self._changed.wait_for(lambda: bool(self._items))
            value = self._items.popleft()
            self._changed.notify_all()
            return value

    def pop_back(self) -> T:
        """Pop from the back, waiting while the deque is empty."""
        with self._changed:
            self._changed.wait_for(lambda: bool(self._items))
            value = self._items.pop()
            self._changed.notify_all()
            return value

    def empty(self) -> bool:
        with self._changed:
            return not self._items

    def full(self) -> bool:
        with self._changed:
            return self._is_full()

    def __len__(self) -> int:
        with self._changed:
            return len(self._items)

    def __repr__(self) -> str:
        with self._changed:
            return f"Deque(capacity={self._capacity}, items={list(self._items)!r})"