"""Projection from physics coordinates (meters) to widget pixels.

The pivot sits at the widget center and the two links together span
80% of the smaller half-dimension, each scaled by its share of the
total length.
"""

from __future__ import annotations

import numpy as np

from simulation import PendulumSystem, positions

# Fraction of min(width/2, height/2) covered by the fully extended pendulum
REACH_FRACTION = 0.8


def pixel_scale(system: PendulumSystem, width: float, height: float) -> float:
    """Pixels per meter for the given widget size."""
    size = REACH_FRACTION * min(width / 2, height / 2)
    total_length = float(system.link_a.length + system.link_b.length)
    return size / total_length


def project(system: PendulumSystem, width: float, height: float):
    """Return pixel coordinates ((px, py), (jx, jy), (tx, ty)).

    Pivot, joint between the links, and free tip of link B.
    """
    scale = pixel_scale(system, width, height)
    cx, cy = width / 2, height / 2
    x1, y1, x2, y2 = positions(system.link_a, system.link_b)
    joint = (cx + float(x1) * scale, cy + float(y1) * scale)
    tip = (cx + float(x2) * scale, cy + float(y2) * scale)
    return (cx, cy), joint, tip


def trail_to_pixels(points: np.ndarray, system: PendulumSystem,
                    width: float, height: float) -> np.ndarray:
    """Map an (N, 2) array of trail points to float64 pixel coordinates."""
    scale = pixel_scale(system, width, height)
    pixels = np.asarray(points, dtype=np.float64) * scale
    pixels[:, 0] += width / 2
    pixels[:, 1] += height / 2
    return pixels
