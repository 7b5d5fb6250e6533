"""Fixed-capacity circular sample buffer.

Capacity is validated once at construction so the write path can wrap the
cursor with a bitmask and no branches.
"""

from __future__ import annotations

from typing import Optional

import numpy as np

from ..config import DEFAULT_BUFFER_CAPACITY
from ..errors import BufferMisconfigurationError
from .utils import allocate, is_power_of_two


class CircularBuffer:
    """Circular buffer holding the most recent ``capacity`` samples.

    Args:
        capacity: Number of slots; must be a power of two.
        min_capacity: Smallest acceptable capacity (usually the filter
            length). Defaults to 1.

    Raises:
        BufferMisconfigurationError: If capacity is not a power of two or is
            below ``min_capacity``.
    """

    def __init__(
        self,
        capacity: int = DEFAULT_BUFFER_CAPACITY,
        min_capacity: Optional[int] = None,
    ) -> None:
        if isinstance(capacity, bool) or not isinstance(capacity, (int, np.integer)):
            raise BufferMisconfigurationError(
                f"capacity must be an integer, got {capacity!r}"
            )
        capacity = int(capacity)
        if not is_power_of_two(capacity):
            raise BufferMisconfigurationError(
                f"capacity must be a power of two, got {capacity}"
            )
        if min_capacity is not None and capacity < min_capacity:
            raise BufferMisconfigurationError(
                f"capacity {capacity} is smaller than the filter length {min_capacity}"
            )

        self._capacity = capacity
        self._mask = capacity - 1
        self._data = allocate(capacity)
        self._cursor = 0

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def mask(self) -> int:
        """Bitmask used to wrap indices (``capacity - 1``)."""
        return self._mask

    @property
    def cursor(self) -> int:
        """Slot the next sample will be written to."""
        return self._cursor

    @property
    def data(self) -> np.ndarray:
        """Raw storage in slot order (not time order)."""
        return self._data

    def write(self, sample: float) -> int:
        """Store a sample at the cursor, advance it, and return the written slot."""
        slot = self._cursor
        self._data[slot] = sample
        self._cursor = (slot + 1) & self._mask
        return slot

    def recent(self, n: Optional[int] = None) -> np.ndarray:
        """Return the last ``n`` samples in time order (oldest first).

        Args:
            n: Number of samples (default: capacity).

        Raises:
            ValueError: If n is outside [0, capacity].
        """
        if n is None:
            n = self._capacity
        if not 0 <= n <= self._capacity:
            raise ValueError(f"n must be in [0, {self._capacity}], got {n}")
        idx = (self._cursor - n + np.arange(n)) & self._mask
        return self._data[idx]

    def clear(self) -> None:
        """Zero the storage and rewind the cursor."""
        self._data.fill(0.0)
        self._cursor = 0

    def __len__(self) -> int:
        return self._capacity

    def __repr__(self) -> str:
        return f"CircularBuffer(capacity={self._capacity}, cursor={self._cursor})"
