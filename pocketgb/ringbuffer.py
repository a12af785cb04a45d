"""Fixed-size circular buffer used to keep the most recent audio samples."""

from __future__ import annotations

from typing import Generic, List, Optional, TypeVar

T = TypeVar("T")


class RingBuffer(Generic[T]):
    """Circular buffer whose size is a power of two.

    Writes overwrite the oldest value; snapshots read from the oldest value
    onwards.
    """

    def __init__(self, size: int, default: T) -> None:
        if size <= 0 or size & (size - 1):
            raise ValueError(f"size must be a positive power of 2, got {size}")
        self._mask = size - 1
        self._data: List[T] = [default] * size
        self._head = 0

    def write(self, sample: T) -> None:
        """Store a sample, overwriting the oldest one."""
        self._data[self._head] = sample
        self._head = (self._head + 1) & self._mask

    def snapshot(self, count: Optional[int] = None) -> List[T]:
        """Return ``count`` values starting from the oldest one.

        With no count the whole buffer is returned. Counts larger than the
        buffer wrap around and repeat values.
        """
        if count is None:
            count = len(self._data)
        if count < 0:
            raise ValueError(f"count must not be negative, got {count}")
        return [self._data[(self._head + i) & self._mask] for i in range(count)]

    def __len__(self) -> int:
        return len(self._data)