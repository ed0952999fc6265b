"""Tests for reference.py: RK4 cross-validation against DOP853."""

import numpy as np
import pytest

from config import SimulationConfig
from engine import Simulation
from reference import energy_drift, reference_trajectory


class TestReferenceTrajectory:

    def test_shapes(self):
        system = SimulationConfig().build_system()
        t, states = reference_trajectory(system, t_end=1.0, dt=0.01)
        assert t.shape == (101,)
        assert states.shape == (101, 4)
        assert t[0] == 0.0
        assert t[-1] == pytest.approx(1.0)

    def test_starts_at_initial_state(self):
        system = SimulationConfig(omega_a0=0.2).build_system()
        _, states = reference_trajectory(system, t_end=0.5, dt=0.01)
        np.testing.assert_allclose(states[0], [1.8, 1.0, 0.2, 0.0], atol=1e-12)

    def test_does_not_mutate_system(self):
        system = SimulationConfig().build_system()
        before = system.state_vector()
        reference_trajectory(system, t_end=0.5, dt=0.01)
        np.testing.assert_array_equal(system.state_vector(), before)

    def test_rk4_matches_reference(self):
        """Fixed-step RK4 follows the adaptive solution over one second."""
        config = SimulationConfig()
        sim = Simulation.from_config(config)
        _, states = reference_trajectory(sim.system, t_end=1.0, dt=config.dt)

        rk4_states = [sim.system.state_vector()]
        for _ in range(100):
            rk4_states.append(sim.tick())

        np.testing.assert_allclose(np.array(rk4_states), states, atol=1e-4)

    def test_float32_system_integrated_in_float64(self):
        system = SimulationConfig(precision="float32").build_system()
        _, states = reference_trajectory(system, t_end=0.1, dt=0.01)
        assert states.dtype == np.float64


class TestEnergyDrift:

    def test_relative_drift_small(self):
        sim = Simulation.from_config(SimulationConfig(theta_a0=0.5, theta_b0=0.3))
        drift = energy_drift(sim, 2000)
        assert abs(drift) < 1e-4
        assert sim.ticks == 2000

    def test_rest_has_no_drift(self):
        sim = Simulation.from_config(SimulationConfig(theta_a0=0.0, theta_b0=0.0))
        assert energy_drift(sim, 100) == 0.0
