"""Pendulum view: orchestrates simulations, canvas, and controls.

A QTimer steps the primary simulation (and the optional twin) on the GUI
thread.
"""

import logging

from PyQt6.QtCore import Qt, QTimer
from PyQt6.QtWidgets import QWidget, QHBoxLayout, QSplitter, QLabel

from config import ConfigError
from engine import NonFiniteStateError, Simulation
from pendulum.canvas import PendulumCanvas
from pendulum.controls import PendulumControls
from pendulum.style import DEFAULT_STYLE, TWIN_STYLE

logger = logging.getLogger(__name__)


class PendulumView(QWidget):
    """Complete pendulum mode: canvas + controls + tick loop wiring."""

    # Timer interval; with dt = 0.01 s one tick per frame runs in real time
    FRAME_MS = 10

    def __init__(self, config=None, parent=None):
        super().__init__(parent)

        self.canvas = PendulumCanvas()
        self.controls = PendulumControls(config)

        splitter = QSplitter(Qt.Orientation.Horizontal)
        splitter.addWidget(self.canvas)
        splitter.addWidget(self.controls)
        splitter.setStretchFactor(0, 3)
        splitter.setStretchFactor(1, 1)

        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(splitter)

        # Status bar labels (AppWindow will place these in a real status bar)
        self.time_label = QLabel()
        self.energy_label = QLabel()
        self.drift_label = QLabel()

        self.simulations = []
        self.playing = False

        self.timer = QTimer()
        self.timer.setInterval(self.FRAME_MS)
        self.timer.timeout.connect(self._on_timer)

        self.controls._on_param_changed = self._reset
        self.controls.play_btn.clicked.connect(self._toggle_play)
        self.controls.reset_btn.clicked.connect(self._reset)

        self._reset()

    # -- Simulation --

    def _reset(self):
        """Rebuild the simulations from the current control values."""
        config = self.controls.get_config()
        try:
            simulations = [Simulation.from_config(config)]
            if config.has_twin:
                simulations.append(Simulation.from_config(config.twin()))
        except ConfigError as exc:
            logger.error("Invalid configuration: %s", exc)
            self._stop(f"  Invalid configuration: {exc}  ")
            return

        self.simulations = simulations
        styles = [DEFAULT_STYLE, TWIN_STYLE]
        self.canvas.set_scenes(zip(self.simulations, styles))
        logger.info(
            "Reset: %d pendulum(s), E0 = %.6f J",
            len(self.simulations), float(self.simulations[0].initial_energy),
        )
        self._update_status()
        if not self.playing:
            self._start()

    def _on_timer(self):
        steps = self.controls.get_steps_per_frame()
        try:
            for simulation in self.simulations:
                for _ in range(steps):
                    simulation.tick()
        except NonFiniteStateError as exc:
            self._stop(f"  Simulation diverged: {exc}  ")
            return
        self.canvas.update()
        self._update_status()

    def _update_status(self):
        primary = self.simulations[0]
        energy = float(primary.energy())
        drift = float(primary.energy_drift())
        self.time_label.setText(f"  t = {float(primary.time):.3f} s  ")
        self.energy_label.setText(f"  E = {energy:.4f} J  ")
        self.drift_label.setText(f"  ΔE = {drift:+.6f} J  ")

    # -- Playback --

    def _start(self):
        self.playing = True
        self.timer.start()
        self.controls.play_btn.setText("Pause")
        logger.debug("Playback started")

    def _stop(self, message=None):
        self.playing = False
        self.timer.stop()
        self.controls.play_btn.setText("Play")
        if message:
            self.drift_label.setText(message)
        logger.debug("Playback stopped")

    def _toggle_play(self):
        if self.playing:
            self._stop()
        elif self.simulations:
            self._start()

    def deactivate(self):
        """Called when the window closes."""
        self._stop()
