"""Exceptions raised by :mod:`ringbuf`."""

from __future__ import annotations

import operator


class CapacityError(ValueError):
    """Raised when a buffer is configured with a capacity below 1."""


def validate_capacity(capacity: object) -> int:
    """Return ``capacity`` as a plain int or raise :class:`CapacityError`.

    Integer-like values (``numpy.int64`` etc.) are accepted; floats, strings
    and bools are not.
    """
    if isinstance(capacity, bool):
        raise CapacityError("capacity must be an int, got bool")
    try:
        value = operator.index(capacity)  # type: ignore[arg-type]
    except TypeError:
        raise CapacityError(
            f"capacity must be an int, got {type(capacity).__name__}"
        ) from None
    if value <= 0:
        raise CapacityError(f"capacity must be positive, got {value}")
    return value


__all__ = ["CapacityError", "validate_capacity"]
