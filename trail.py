"""Trail: fixed-capacity ring buffer of recent tip positions.

Points are written at a cursor that wraps modulo the capacity. Once the
buffer is full every append overwrites the oldest point.
"""

from __future__ import annotations

import numpy as np

# Number of tip positions retained by default
DEFAULT_CAPACITY = 1024


class Trail:
    """Ring buffer of 2D points backed by a preallocated (capacity, 2) array."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY, dtype=np.float64):
        if isinstance(capacity, bool) or not isinstance(capacity, (int, np.integer)):
            raise ValueError(f"Trail capacity must be an integer, got {capacity!r}")
        if capacity <= 0:
            raise ValueError(f"Trail capacity must be positive, got {capacity}")
        self._points = np.zeros((int(capacity), 2), dtype=dtype)
        self._cursor = 0
        self._count = 0

    @property
    def capacity(self) -> int:
        return self._points.shape[0]

    @property
    def cursor(self) -> int:
        """Index the next point will be written to."""
        return self._cursor

    @property
    def count(self) -> int:
        return self._count

    @property
    def is_full(self) -> bool:
        return self._count == self.capacity

    def __len__(self):
        return self._count

    def append(self, point) -> None:
        """Write (x, y) at the cursor, overwriting the oldest point if full."""
        self._points[self._cursor] = point
        self._cursor = (self._cursor + 1) % self.capacity
        self._count = min(self._count + 1, self.capacity)

    def snapshot(self) -> np.ndarray:
        """Copy of the retained points in raw ring order.

        Consumers draw these as a point cloud, so the order is not
        chronological once the buffer has wrapped.
        """
        return self._points[:self._count].copy()

    def ordered(self) -> np.ndarray:
        """Copy of the retained points, oldest first."""
        if not self.is_full:
            return self._points[:self._count].copy()
        return np.roll(self._points, -self._cursor, axis=0)
