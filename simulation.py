"""Double pendulum physics engine.

Implements the Lagrangian equations of motion for a two-link hinged
pendulum and advances it with a fixed-step classical RK4 integrator.

State vector: [theta_a, theta_b, omega_a, omega_b]. Angles are measured
from the downward vertical and are never wrapped modulo 2*pi.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple

import numpy as np


@dataclass
class Link:
    """One rigid arm of the pendulum. Physical quantities only."""

    length: float
    mass: float
    angle: float = 0.0
    angular_velocity: float = 0.0


class CouplingTerms(NamedTuple):
    """Intermediate terms of the 2x2 linear solve for the accelerations."""

    coef_a: np.ndarray
    coef_b: np.ndarray
    force_a: np.ndarray
    force_b: np.ndarray


def _as_state(state) -> np.ndarray:
    """Coerce to a floating array, keeping an existing float precision."""
    state = np.asarray(state)
    if not np.issubdtype(state.dtype, np.floating):
        state = state.astype(np.float64)
    return state


class PendulumSystem:
    """Link A hinged to a fixed pivot, link B hinged to the end of A.

    All link quantities and g are converted to ``dtype`` on construction
    so the whole integration runs in one numeric precision.
    """

    def __init__(self, link_a: Link, link_b: Link, g: float = 9.78,
                 dtype=np.float64):
        self.dtype = np.dtype(dtype)
        scalar = self.dtype.type
        for link in (link_a, link_b):
            link.length = scalar(link.length)
            link.mass = scalar(link.mass)
            link.angle = scalar(link.angle)
            link.angular_velocity = scalar(link.angular_velocity)
        self.link_a = link_a
        self.link_b = link_b
        self.g = scalar(g)

    def __repr__(self):
        return (
            f"PendulumSystem(link_a={self.link_a!r}, link_b={self.link_b!r}, "
            f"g={self.g!r}, dtype={self.dtype.name})"
        )

    def state_vector(self) -> np.ndarray:
        """Return [theta_a, theta_b, omega_a, omega_b] built from the links."""
        return np.array(
            [
                self.link_a.angle,
                self.link_b.angle,
                self.link_a.angular_velocity,
                self.link_b.angular_velocity,
            ],
            dtype=self.dtype,
        )

    def set_state(self, state: np.ndarray) -> None:
        """Write a state vector back into the link fields."""
        self.link_a.angle = state[0]
        self.link_b.angle = state[1]
        self.link_a.angular_velocity = state[2]
        self.link_b.angular_velocity = state[3]

    def energy(self):
        return total_energy(self)


def coupling_terms(state, link_a: Link, link_b: Link, g) -> CouplingTerms:
    """Compute the coupling coefficients and generalized forces.

    Every angle and angular velocity is read from ``state``; the links only
    contribute their (constant) lengths and masses.
    """
    state = _as_state(state)
    scalar = state.dtype.type
    theta_a = state[..., 0]
    theta_b = state[..., 1]
    omega_a = state[..., 2]
    omega_b = state[..., 3]

    l_a, l_b = scalar(link_a.length), scalar(link_b.length)
    m_a, m_b = scalar(link_a.mass), scalar(link_b.mass)
    g = scalar(g)

    ratio_ab = l_b / l_a
    ratio_ba = l_a / l_b
    mass_frac = m_b / (m_a + m_b)

    delta = theta_a - theta_b
    sin_delta = np.sin(delta)
    cos_delta = np.cos(delta)

    coef_a = ratio_ab * mass_frac * cos_delta
    coef_b = ratio_ba * cos_delta

    force_a = (
        -ratio_ab * mass_frac * omega_b**2 * sin_delta
        - (g / l_a) * np.sin(theta_a)
    )
    force_b = (
        ratio_ba * omega_a**2 * sin_delta
        - (g / l_b) * np.sin(theta_b)
    )

    return CouplingTerms(coef_a, coef_b, force_a, force_b)


def derivatives(state, link_a: Link, link_b: Link, g) -> np.ndarray:
    """Compute the four first-order ODEs for the double pendulum.

    Args:
        state: array whose last axis is [theta_a, theta_b, omega_a, omega_b].
            A (N, 4) batch is evaluated row by row in one call.
        link_a: Link hinged to the pivot (length and mass are used).
        link_b: Link hinged to the end of link_a.
        g: Gravitational acceleration.

    Returns:
        Array of the same shape and dtype as ``state``:
        [d_theta_a, d_theta_b, d_omega_a, d_omega_b].
    """
    state = _as_state(state)
    coef_a, coef_b, force_a, force_b = coupling_terms(state, link_a, link_b, g)

    denom = 1 - coef_a * coef_b
    accel_a = (force_a - coef_a * force_b) / denom
    accel_b = (force_b - coef_b * force_a) / denom

    result = np.empty_like(state)
    result[..., 0] = state[..., 2]
    result[..., 1] = state[..., 3]
    result[..., 2] = accel_a
    result[..., 3] = accel_b
    return result


def rk4_step(state, link_a: Link, link_b: Link, g, dt) -> np.ndarray:
    """Advance a state vector by one classical RK4 step.

    The weighted sum is always evaluated left to right as
    ((k1 + 2*k2) + 2*k3) + k4 so repeated runs are bit-identical.
    """
    state = _as_state(state)
    dt = state.dtype.type(dt)
    half_dt = dt / 2

    k1 = derivatives(state, link_a, link_b, g)
    k2 = derivatives(state + half_dt * k1, link_a, link_b, g)
    k3 = derivatives(state + half_dt * k2, link_a, link_b, g)
    k4 = derivatives(state + dt * k3, link_a, link_b, g)

    return state + (dt / 6) * (k1 + 2 * k2 + 2 * k3 + k4)


def advance(system: PendulumSystem, dt) -> np.ndarray:
    """Step the system in place by ``dt`` and return the new state vector."""
    state = rk4_step(
        system.state_vector(), system.link_a, system.link_b, system.g, dt,
    )
    system.set_state(state)
    return state


def positions(link_a: Link, link_b: Link):
    """Convert link angles to Cartesian joint coordinates.

    Returns (x1, y1, x2, y2) relative to the pivot, with y pointing down
    so that each joint is ``previous + length * (sin(theta), cos(theta))``.
    """
    x1 = link_a.length * np.sin(link_a.angle)
    y1 = link_a.length * np.cos(link_a.angle)

    x2 = x1 + link_b.length * np.sin(link_b.angle)
    y2 = y1 + link_b.length * np.cos(link_b.angle)

    return x1, y1, x2, y2


def tip_position(system: PendulumSystem):
    """Return the (x, y) position of the free end of link B."""
    _, _, x2, y2 = positions(system.link_a, system.link_b)
    return x2, y2


def potential_energy(link_a: Link, link_b: Link, g):
    """Gravitational potential energy with the pivot at height zero."""
    y1 = -link_a.length * np.cos(link_a.angle)
    y2 = y1 - link_b.length * np.cos(link_b.angle)

    return link_a.mass * g * y1 + link_b.mass * g * y2


def kinetic_energy(link_a: Link, link_b: Link):
    """Kinetic energy of both bobs."""
    va2 = (link_a.length * link_a.angular_velocity) ** 2
    vb2 = (link_b.length * link_b.angular_velocity) ** 2

    k_a = 0.5 * link_a.mass * va2
    k_b = 0.5 * link_b.mass * (
        va2 + vb2
        + 2 * link_a.length * link_b.length
        * link_a.angular_velocity * link_b.angular_velocity
        * np.cos(link_a.angle - link_b.angle)
    )
    return k_a + k_b


def total_energy(system: PendulumSystem):
    """Compute total mechanical energy (T + V) of the system."""
    return (
        potential_energy(system.link_a, system.link_b, system.g)
        + kinetic_energy(system.link_a, system.link_b)
    )
