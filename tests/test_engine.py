"""Tests for engine.py: the per-tick control flow and failure handling."""

import numpy as np
import pytest

from config import SimulationConfig
from engine import NonFiniteStateError, Simulation
from simulation import Link, PendulumSystem, tip_position
from trail import Trail


def _degenerate_simulation(check_finite=True):
    """Zero-length first link: the core produces NaN instead of raising."""
    system = PendulumSystem(Link(0.0, 1.0, 1.0, 0.0), Link(1.0, 1.0, 0.5, 0.0))
    return Simulation(system, Trail(8), 0.01, check_finite=check_finite)


class TestTick:

    def test_tick_appends_tip(self):
        sim = Simulation.from_config(SimulationConfig(trail_capacity=16))
        sim.tick()
        assert sim.ticks == 1
        assert len(sim.trail) == 1
        np.testing.assert_array_equal(
            sim.trail.snapshot()[0], np.array(tip_position(sim.system)),
        )

    def test_tick_returns_system_state(self):
        sim = Simulation.from_config(SimulationConfig())
        state = sim.tick()
        np.testing.assert_array_equal(state, sim.system.state_vector())

    def test_run(self):
        sim = Simulation.from_config(SimulationConfig(trail_capacity=32))
        state = sim.run(50)
        assert sim.ticks == 50
        assert len(sim.trail) == 32
        np.testing.assert_array_equal(state, sim.system.state_vector())

    def test_run_zero_steps(self):
        sim = Simulation.from_config(SimulationConfig())
        state = sim.run(0)
        np.testing.assert_array_equal(state, [1.8, 1.0, 0.0, 0.0])
        assert sim.ticks == 0

    def test_time(self):
        sim = Simulation.from_config(SimulationConfig(dt=0.02))
        sim.run(10)
        assert sim.time == pytest.approx(0.2)

    def test_rest_stays_at_rest(self):
        sim = Simulation.from_config(SimulationConfig(theta_a0=0.0, theta_b0=0.0))
        sim.run(200)
        np.testing.assert_array_equal(sim.system.state_vector(), np.zeros(4))
        assert np.all(sim.trail.snapshot() == [0.0, 2.0])

    def test_matches_manual_stepping(self):
        """Two simulations from one config stay bit-identical."""
        config = SimulationConfig()
        first = Simulation.from_config(config)
        second = Simulation.from_config(config)
        first.run(300)
        for _ in range(300):
            second.tick()
        np.testing.assert_array_equal(
            first.system.state_vector(), second.system.state_vector(),
        )
        np.testing.assert_array_equal(first.trail.snapshot(), second.trail.snapshot())


class TestEnergyTracking:

    def test_initial_energy(self):
        sim = Simulation.from_config(SimulationConfig())
        assert sim.initial_energy == sim.energy()
        assert sim.energy_drift() == 0.0

    def test_drift_small(self):
        sim = Simulation.from_config(SimulationConfig(theta_a0=0.5, theta_b0=0.3))
        sim.run(1000)
        assert abs(sim.energy_drift()) < 1e-3 * abs(sim.initial_energy)


class TestNonFinite:

    def test_raises_on_nan(self):
        sim = _degenerate_simulation()
        with np.errstate(all="ignore"):
            with pytest.raises(NonFiniteStateError, match="tick 1"):
                sim.tick()
        assert sim.ticks == 0
        assert len(sim.trail) == 0

    def test_check_disabled(self):
        sim = _degenerate_simulation(check_finite=False)
        with np.errstate(all="ignore"):
            state = sim.tick()
        assert not np.all(np.isfinite(state))
        assert sim.ticks == 1

    def test_is_runtime_error(self):
        assert issubclass(NonFiniteStateError, RuntimeError)


class TestPrecision:

    def test_float32_simulation(self):
        sim = Simulation.from_config(SimulationConfig(precision="float32"))
        state = sim.run(20)
        assert state.dtype == np.float32
        assert sim.trail.snapshot().dtype == np.float32
        assert sim.dt.dtype == np.float32
