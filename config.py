"""Simulation configuration: initial conditions, gravity presets, precision.

A SimulationConfig is validated once when a system is built from it. The
physics core never re-checks these preconditions while stepping.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, replace

import numpy as np

from simulation import Link, PendulumSystem
from trail import DEFAULT_CAPACITY, Trail

logger = logging.getLogger(__name__)

# Surface gravity (m/s^2), https://nssdc.gsfc.nasa.gov/planetary/
GRAVITY_PRESETS = {
    "sun": 274.0,
    "mercury": 3.70,
    "venus": 8.87,
    "earth": 9.78,
    "moon": 1.625,
    "mars": 3.73,
    "jupiter": 23.12,
    "saturn": 8.96,
    "uranus": 8.69,
    "neptune": 11.00,
    "pluto": 0.62,
}

PRECISIONS = {
    "float32": np.float32,
    "float64": np.float64,
    "longdouble": np.longdouble,
}


class ConfigError(ValueError):
    """Raised when a configuration cannot describe a physical system."""


def resolve_dtype(name: str):
    """Look up the NumPy dtype for a precision name."""
    try:
        return PRECISIONS[name]
    except KeyError:
        available = ", ".join(PRECISIONS)
        raise ConfigError(
            f"Unknown precision '{name}'. Available: {available}"
        ) from None


@dataclass(frozen=True)
class SimulationConfig:
    """Initial conditions and run parameters of one double pendulum."""

    length_a: float = 1.0
    mass_a: float = 1.0
    theta_a0: float = 1.8
    omega_a0: float = 0.0
    length_b: float = 1.0
    mass_b: float = 1.0
    theta_b0: float = 1.0
    omega_b0: float = 0.0
    g: float = 9.78
    dt: float = 0.01
    trail_capacity: int = DEFAULT_CAPACITY
    precision: str = "float64"
    # Offset added to theta_a0 for the side-by-side twin (0 disables it)
    twin_offset: float = 0.0

    def validate(self) -> None:
        """Raise ConfigError if any precondition of the physics core fails."""
        for name in ("length_a", "mass_a", "length_b", "mass_b", "dt"):
            value = getattr(self, name)
            if not math.isfinite(value) or value <= 0:
                raise ConfigError(f"{name} must be positive and finite, got {value}")

        for name in ("theta_a0", "omega_a0", "theta_b0", "omega_b0", "g",
                     "twin_offset"):
            value = getattr(self, name)
            if not math.isfinite(value):
                raise ConfigError(f"{name} must be finite, got {value}")

        capacity = self.trail_capacity
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity <= 0:
            raise ConfigError(
                f"trail_capacity must be a positive integer, got {capacity!r}"
            )

        resolve_dtype(self.precision)

    @property
    def dtype(self):
        return resolve_dtype(self.precision)

    @property
    def has_twin(self) -> bool:
        return self.twin_offset != 0.0

    def build_system(self) -> PendulumSystem:
        """Validate and create the PendulumSystem described by this config."""
        self.validate()
        link_a = Link(self.length_a, self.mass_a, self.theta_a0, self.omega_a0)
        link_b = Link(self.length_b, self.mass_b, self.theta_b0, self.omega_b0)
        system = PendulumSystem(link_a, link_b, g=self.g, dtype=self.dtype)
        logger.info(
            "Built pendulum: theta=(%.4f, %.4f) g=%.3f dt=%g precision=%s",
            self.theta_a0, self.theta_b0, self.g, self.dt, self.precision,
        )
        return system

    def build_trail(self) -> Trail:
        self.validate()
        return Trail(self.trail_capacity, dtype=self.dtype)

    def with_gravity(self, name: str) -> SimulationConfig:
        """Return a copy using the named gravity preset."""
        key = name.lower()
        if key not in GRAVITY_PRESETS:
            available = ", ".join(GRAVITY_PRESETS)
            raise ConfigError(f"Unknown gravity preset '{name}'. Available: {available}")
        return replace(self, g=GRAVITY_PRESETS[key])

    def twin(self) -> SimulationConfig:
        """Configuration of the perturbed twin pendulum."""
        return replace(
            self, theta_a0=self.theta_a0 + self.twin_offset, twin_offset=0.0,
        )
