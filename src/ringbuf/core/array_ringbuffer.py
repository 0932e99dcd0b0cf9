"""NumPy-backed ring buffer for fixed-dtype numeric samples."""

from __future__ import annotations

import logging
from typing import Any, Optional, Sequence

import numpy as np
from numpy.typing import DTypeLike

from ..errors import validate_capacity

logger = logging.getLogger(__name__)


class ArrayRingBuffer:
    """
    Ring buffer storing items in one preallocated :class:`numpy.ndarray`.

    Every slot starts as the zero value of ``dtype``. With ``item_shape``
    each item is a fixed-shape row (e.g. one multi-channel sample). Rows and
    structured-dtype records are copied out on ``pop`` so later overwrites
    cannot alias them.
    """

    __slots__ = ("_capacity", "_data", "_size", "_end", "_clear_on_pop")

    def __init__(
        self,
        capacity: int,
        dtype: DTypeLike = np.float64,
        *,
        item_shape: Sequence[int] = (),
        clear_on_pop: bool = False,
    ) -> None:
        self._capacity = validate_capacity(capacity)
        shape = (self._capacity, *(int(dim) for dim in item_shape))
        self._data = np.zeros(shape, dtype=np.dtype(dtype))
        self._size = 0
        self._end = 0
        self._clear_on_pop = bool(clear_on_pop)
        logger.debug(
            "ArrayRingBuffer created: capacity=%d dtype=%s item_shape=%s",
            self._capacity,
            self._data.dtype,
            tuple(shape[1:]),
        )

    @property
    def dtype(self) -> np.dtype:
        return self._data.dtype

    @property
    def item_shape(self) -> tuple[int, ...]:
        return tuple(self._data.shape[1:])

    def size(self) -> int:
        return self._size

    def capacity(self) -> int:
        return self._capacity

    def push(self, item: Any) -> None:
        """Write ``item`` into the next slot, overwriting the oldest when full.

        NumPy casting rules apply; a value that cannot be stored raises
        before any bookkeeping changes.
        """
        self._data[self._end] = item
        self._end = (self._end + 1) % self._capacity
        if self._size < self._capacity:
            self._size += 1

    def pop(self) -> Optional[Any]:
        """Remove and return the oldest item, or ``None`` when empty."""
        if self._size == 0:
            return None
        idx = (self._end - self._size + self._capacity) % self._capacity
        if self._data.ndim == 1 and self._data.dtype.fields is None:
            item = self._data[idx]
        else:
            # np.void records and rows index as views into storage
            item = self._data[idx : idx + 1].copy()[0]
        if self._clear_on_pop:
            self._data[idx] = 0
        self._size -= 1
        return item

    def is_empty(self) -> bool:
        return self._size == 0

    def is_full(self) -> bool:
        return self._size == self._capacity

    def __len__(self) -> int:  # pragma: no cover - trivial
        return self._size

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(capacity={self._capacity}, size={self._size}, "
            f"dtype={self._data.dtype})"
        )
