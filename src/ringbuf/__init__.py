"""Fixed-capacity circular buffers that overwrite their oldest entry when full."""

from .core import ArrayRingBuffer, LockedRingBuffer, RingBuffer
from .errors import CapacityError

__all__ = [
    "RingBuffer",
    "ArrayRingBuffer",
    "LockedRingBuffer",
    "CapacityError",
]
