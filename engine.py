"""Simulation tick driver: one pendulum system plus its tip trail.

Each tick advances the system by one RK4 step, projects the new tip
position and appends it to the trail.
"""

from __future__ import annotations

import logging

import numpy as np

from config import SimulationConfig
from simulation import PendulumSystem, advance, tip_position, total_energy
from trail import Trail

logger = logging.getLogger(__name__)


class NonFiniteStateError(RuntimeError):
    """The state vector contains NaN or Inf; the configuration is unusable."""


class Simulation:
    """Owns a PendulumSystem and its Trail and steps them with a fixed dt."""

    def __init__(self, system: PendulumSystem, trail: Trail, dt: float,
                 check_finite: bool = True):
        self.system = system
        self.trail = trail
        self.dt = system.dtype.type(dt)
        self.check_finite = check_finite
        self.ticks = 0
        self.initial_energy = total_energy(system)

    @classmethod
    def from_config(cls, config: SimulationConfig) -> Simulation:
        return cls(config.build_system(), config.build_trail(), config.dt)

    @property
    def time(self):
        """Elapsed simulated time in seconds."""
        return self.ticks * self.dt

    def tick(self) -> np.ndarray:
        """Advance one step, record the tip and return the new state vector."""
        state = advance(self.system, self.dt)
        if self.check_finite and not np.all(np.isfinite(state)):
            logger.error(
                "Non-finite state after tick %d: %s", self.ticks + 1, state,
            )
            raise NonFiniteStateError(
                f"State became non-finite at tick {self.ticks + 1}: {state}"
            )
        self.trail.append(tip_position(self.system))
        self.ticks += 1
        return state

    def run(self, n_steps: int) -> np.ndarray:
        """Tick ``n_steps`` times and return the final state vector."""
        state = self.system.state_vector()
        for _ in range(n_steps):
            state = self.tick()
        return state

    def energy(self):
        return total_energy(self.system)

    def energy_drift(self):
        """Current total energy minus the energy at construction."""
        return self.energy() - self.initial_energy
