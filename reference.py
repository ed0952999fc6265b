"""High-accuracy reference solution for validating the RK4 integrator.

Integrates the same equations of motion with SciPy's solve_ivp (DOP853)
at tight tolerances. Used by the test-suite as ground truth and for
energy-drift diagnostics.
"""

from __future__ import annotations

import logging

import numpy as np
from scipy.integrate import solve_ivp

from simulation import Link, PendulumSystem, derivatives

logger = logging.getLogger(__name__)

_RTOL = 1e-12
_ATOL = 1e-12


def reference_trajectory(system: PendulumSystem, t_end: float, dt: float,
                         rtol: float = _RTOL, atol: float = _ATOL):
    """Solve the system from its current state with DOP853.

    The system is not mutated. Integration always runs in float64.

    Returns:
        t_array: 1D array of sample times, ``dt * arange(n_steps + 1)``
        state_array: 2D array of shape (len(t_array), 4)
    """
    link_a = Link(float(system.link_a.length), float(system.link_a.mass))
    link_b = Link(float(system.link_b.length), float(system.link_b.mass))
    g = float(system.g)
    y0 = system.state_vector().astype(np.float64)

    n_steps = int(round(t_end / dt))
    t_eval = dt * np.arange(n_steps + 1)

    sol = solve_ivp(
        fun=lambda t, y: derivatives(y, link_a, link_b, g),
        t_span=(0.0, t_eval[-1]),
        y0=y0,
        method="DOP853",
        t_eval=t_eval,
        rtol=rtol,
        atol=atol,
    )
    if not sol.success:
        logger.warning("solve_ivp failed: %s", sol.message)
        raise RuntimeError(f"Reference integration failed: {sol.message}")

    return sol.t, sol.y.T  # shape: (n_steps + 1, 4)


def energy_drift(simulation, n_steps: int) -> float:
    """Run ``n_steps`` ticks and return the relative change in total energy."""
    initial = simulation.energy()
    simulation.run(n_steps)
    final = simulation.energy()
    return float((final - initial) / abs(initial))
