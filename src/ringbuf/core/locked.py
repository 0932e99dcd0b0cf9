"""Lock-guarded wrapper for sharing a ring buffer between threads."""

from __future__ import annotations

import threading
from typing import Any, Optional, Protocol


class BoundedBuffer(Protocol):
    """Operations shared by :class:`RingBuffer` and :class:`ArrayRingBuffer`."""

    def size(self) -> int:  # pragma: no cover - protocol
        ...

    def capacity(self) -> int:  # pragma: no cover - protocol
        ...

    def push(self, item: Any) -> None:  # pragma: no cover - protocol
        ...

    def pop(self) -> Optional[Any]:  # pragma: no cover - protocol
        ...

    def is_empty(self) -> bool:  # pragma: no cover - protocol
        ...

    def is_full(self) -> bool:  # pragma: no cover - protocol
        ...


class LockedRingBuffer:
    """
    Serialise every call on ``inner`` behind a single lock.

    Full buffers still overwrite; nothing here blocks waiting for space or
    for data. Separate calls are not atomic together: another thread may
    pop between ``is_empty()`` and ``pop()``. Use :meth:`try_pop` when
    ``None`` can be stored as an item.
    """

    __slots__ = ("_inner", "_lock")

    def __init__(self, inner: BoundedBuffer) -> None:
        self._inner = inner
        self._lock = threading.Lock()

    @property
    def inner(self) -> BoundedBuffer:
        return self._inner

    def size(self) -> int:
        with self._lock:
            return self._inner.size()

    def capacity(self) -> int:
        with self._lock:
            return self._inner.capacity()

    def push(self, item: Any) -> None:
        with self._lock:
            self._inner.push(item)

    def pop(self) -> Optional[Any]:
        with self._lock:
            return self._inner.pop()

    def try_pop(self) -> tuple[bool, Any]:
        """Return ``(True, item)`` for the oldest item, or ``(False, None)`` when empty."""
        with self._lock:
            if self._inner.is_empty():
                return False, None
            return True, self._inner.pop()

    def is_empty(self) -> bool:
        with self._lock:
            return self._inner.is_empty()

    def is_full(self) -> bool:
        with self._lock:
            return self._inner.is_full()

    def __len__(self) -> int:
        return self.size()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._inner!r})"
