"""Core data structures: the ring buffers and their thread-safe wrapper."""

from .array_ringbuffer import ArrayRingBuffer
from .locked import BoundedBuffer, LockedRingBuffer
from .ringbuffer import RingBuffer

__all__ = [
    "RingBuffer",
    "ArrayRingBuffer",
    "LockedRingBuffer",
    "BoundedBuffer",
]
