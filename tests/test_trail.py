"""Tests for trail.py: ring buffer capacity and overwrite behavior."""

import numpy as np
import pytest

from trail import DEFAULT_CAPACITY, Trail


def _fill(trail, n):
    """Append n distinct points (i, -i)."""
    for i in range(n):
        trail.append((float(i), float(-i)))


def _as_set(points):
    return {tuple(p) for p in points.tolist()}


class TestTrailConstruction:

    def test_starts_empty(self):
        trail = Trail(8)
        assert len(trail) == 0
        assert trail.cursor == 0
        assert trail.snapshot().shape == (0, 2)
        assert not trail.is_full

    def test_default_capacity(self):
        assert Trail().capacity == DEFAULT_CAPACITY == 1024

    @pytest.mark.parametrize("capacity", [0, -3, 2.5, True])
    def test_invalid_capacity(self, capacity):
        with pytest.raises(ValueError):
            Trail(capacity)

    def test_dtype(self):
        trail = Trail(4, dtype=np.float32)
        trail.append((1.0, 2.0))
        assert trail.snapshot().dtype == np.float32


class TestTrailAppend:

    @pytest.mark.parametrize("n", [1, 5, 9])
    def test_partial_fill_count(self, n):
        trail = Trail(10)
        _fill(trail, n)
        assert len(trail) == n
        assert len(trail.snapshot()) == n
        assert trail.cursor == n

    @pytest.mark.parametrize("n", [10, 11, 25, 1000])
    def test_full_count_capped(self, n):
        trail = Trail(10)
        _fill(trail, n)
        assert len(trail.snapshot()) == 10
        assert trail.is_full
        assert trail.cursor == n % 10

    @pytest.mark.parametrize("n", [10, 13, 37])
    def test_keeps_exactly_the_most_recent(self, n):
        """The C-th-from-last point is present, the (C+1)-th is gone."""
        capacity = 10
        trail = Trail(capacity)
        _fill(trail, n)
        points = _as_set(trail.snapshot())

        oldest_kept = n - capacity
        assert (float(oldest_kept), float(-oldest_kept)) in points
        if oldest_kept > 0:
            evicted = oldest_kept - 1
            assert (float(evicted), float(-evicted)) not in points
        assert points == {(float(i), float(-i)) for i in range(oldest_kept, n)}

    def test_overwrites_at_cursor(self):
        trail = Trail(3)
        _fill(trail, 4)
        raw = trail.snapshot()
        # Fourth point replaced the first slot
        np.testing.assert_array_equal(raw[0], [3.0, -3.0])
        np.testing.assert_array_equal(raw[1], [1.0, -1.0])

    def test_snapshot_is_a_copy(self):
        trail = Trail(4)
        _fill(trail, 2)
        snap = trail.snapshot()
        snap[:] = 99.0
        np.testing.assert_array_equal(trail.snapshot()[0], [0.0, 0.0])


class TestTrailOrdered:

    def test_before_wrap(self):
        trail = Trail(5)
        _fill(trail, 3)
        np.testing.assert_array_equal(trail.ordered()[:, 0], [0.0, 1.0, 2.0])

    def test_after_wrap_oldest_first(self):
        trail = Trail(4)
        _fill(trail, 7)
        np.testing.assert_array_equal(trail.ordered()[:, 0], [3.0, 4.0, 5.0, 6.0])

    def test_ordered_same_points_as_snapshot(self):
        trail = Trail(6)
        _fill(trail, 20)
        assert _as_set(trail.ordered()) == _as_set(trail.snapshot())
