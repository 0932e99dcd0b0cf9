from __future__ import annotations

import numpy as np
import pytest

from ringbuf import ArrayRingBuffer, CapacityError


def test_array_buffer_reports_dtype_and_shape() -> None:
    buf = ArrayRingBuffer(5, dtype="int32", item_shape=(2,))
    assert buf.dtype == np.dtype(np.int32)
    assert buf.item_shape == (2,)
    assert buf.capacity() == 5
    assert buf.pop() is None


def test_shaped_items_are_copied_on_pop() -> None:
    buf = ArrayRingBuffer(2, dtype=np.float64, item_shape=(3,))
    buf.push([1.0, 2.0, 3.0])
    row = buf.pop()
    buf.push([9.0, 9.0, 9.0])
    buf.push([8.0, 8.0, 8.0])
    np.testing.assert_array_equal(row, [1.0, 2.0, 3.0])


def test_structured_record_not_aliased_after_overwrite() -> None:
    buf = ArrayRingBuffer(1, dtype="i4,f8")
    buf.push((7, 1.5))
    item = buf.pop()
    buf.push((9, 9.0))
    assert tuple(item) == (7, 1.5)


def test_structured_record_survives_clear_on_pop() -> None:
    buf = ArrayRingBuffer(3, dtype=[("x", "i4"), ("y", "f8")], clear_on_pop=True)
    buf.push((7, 1.5))
    item = buf.pop()
    assert item["x"] == 7
    assert item["y"] == 1.5


def test_shaped_row_survives_clear_on_pop() -> None:
    buf = ArrayRingBuffer(2, dtype=np.int16, item_shape=(2,), clear_on_pop=True)
    buf.push([4, 5])
    np.testing.assert_array_equal(buf.pop(), [4, 5])


def test_uncastable_push_leaves_state_unchanged() -> None:
    buf = ArrayRingBuffer(3, dtype=np.float64)
    buf.push(1.5)
    with pytest.raises(ValueError):
        buf.push("not-a-number")
    assert buf.size() == 1
    assert buf.pop() == 1.5
    assert buf.pop() is None


def test_array_buffer_rejects_bad_capacity() -> None:
    with pytest.raises(CapacityError):
        ArrayRingBuffer(0)


def test_array_buffer_accepts_numpy_integer_capacity() -> None:
    buf = ArrayRingBuffer(np.int64(3))
    assert buf.capacity() == 3
    assert type(buf.capacity()) is int
