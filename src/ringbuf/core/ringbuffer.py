from __future__ import annotations

import logging
from typing import Callable, Generic, Optional, TypeVar

from ..errors import validate_capacity

T = TypeVar("T")

logger = logging.getLogger(__name__)


class RingBuffer(Generic[T]):
    """
    Fixed-size ring buffer holding at most ``capacity`` items.
    Overwrites the oldest unread item when full.

    Storage is allocated once; ``push`` and ``pop`` only move the write
    cursor and the item count. Not thread-safe, see
    :class:`~ringbuf.core.locked.LockedRingBuffer`.
    """

    __slots__ = (
        "_capacity",
        "_data",
        "_size",
        "_end",
        "_default",
        "_default_factory",
        "_clear_on_pop",
    )

    def __init__(
        self,
        capacity: int,
        default: Optional[T] = None,
        *,
        default_factory: Callable[[], T] | None = None,
        clear_on_pop: bool = False,
    ) -> None:
        if default is not None and default_factory is not None:
            raise ValueError("cannot specify both default and default_factory")
        self._capacity = validate_capacity(capacity)
        self._default = default
        self._default_factory = default_factory
        self._clear_on_pop = bool(clear_on_pop)
        self._data: list[T | None] = [self._make_default() for _ in range(self._capacity)]
        self._size = 0
        # next slot written by push
        self._end = 0
        logger.debug(
            "RingBuffer created: capacity=%d clear_on_pop=%s",
            self._capacity,
            self._clear_on_pop,
        )

    def size(self) -> int:
        return self._size

    def capacity(self) -> int:
        return self._capacity

    def push(self, item: T) -> None:
        """Add ``item`` after the newest entry, dropping the oldest when full."""
        self._data[self._end] = item
        self._end = (self._end + 1) % self._capacity
        if self._size < self._capacity:
            self._size += 1

    def pop(self) -> Optional[T]:
        """Remove and return the oldest entry, or ``None`` when empty.

        If ``None`` is itself stored as an item, check :meth:`is_empty`
        first to tell the two apart.
        """
        if self._size == 0:
            return None
        idx = (self._end - self._size + self._capacity) % self._capacity
        item = self._data[idx]
        if self._clear_on_pop:
            self._data[idx] = self._make_default()
        self._size -= 1
        return item

    def is_empty(self) -> bool:
        return self._size == 0

    def is_full(self) -> bool:
        return self._size == self._capacity

    def _make_default(self) -> T | None:
        if self._default_factory is not None:
            return self._default_factory()
        return self._default

    def __len__(self) -> int:  # pragma: no cover - trivial
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}(capacity={self._capacity}, size={self._size})"
