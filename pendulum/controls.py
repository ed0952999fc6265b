"""Pendulum control panel: initial conditions, parameters, and playback.

Uses PhysicsParamsWidget from ui_common for link lengths and masses.
Values are read back as a SimulationConfig.
"""

import math
from dataclasses import replace

from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QGridLayout, QHBoxLayout,
    QLabel, QPushButton, QComboBox, QGroupBox,
    QCheckBox, QSpinBox,
)

from config import GRAVITY_PRESETS, PRECISIONS, SimulationConfig
from ui_common import (
    make_slider, slider_value, set_slider_value, add_slider_row,
    PhysicsParamsWidget,
)

# Theta_a offset of the twin pendulum when enabled from the panel
DEFAULT_TWIN_OFFSET = 0.01


class PendulumControls(QWidget):
    """Sliders for initial conditions, system parameters, and playback."""

    def __init__(self, config=None, parent=None):
        super().__init__(parent)
        self._base_config = config or SimulationConfig()
        self._building = True
        self._init_ui()
        self.set_config(self._base_config)
        self._building = False

    # -- UI construction --

    def _init_ui(self):
        main_layout = QVBoxLayout(self)
        main_layout.setContentsMargins(8, 8, 8, 8)

        # --- Initial Conditions ---
        ic_group = QGroupBox("Initial Conditions")
        ic_layout = QGridLayout()
        ic_group.setLayout(ic_layout)

        self.theta_a_slider = make_slider(-math.pi, math.pi, 0.0)
        self.theta_b_slider = make_slider(-math.pi, math.pi, 0.0)
        self.omega_a_slider = make_slider(-10, 10, 0)
        self.omega_b_slider = make_slider(-10, 10, 0)

        add_slider_row(ic_layout, 0, "θA₀", self.theta_a_slider, " rad")
        add_slider_row(ic_layout, 1, "θB₀", self.theta_b_slider, " rad")
        add_slider_row(ic_layout, 2, "ωA₀", self.omega_a_slider, " /s")
        add_slider_row(ic_layout, 3, "ωB₀", self.omega_b_slider, " /s")

        main_layout.addWidget(ic_group)

        # --- System Parameters ---
        sys_group = QGroupBox("System Parameters")
        sys_layout = QVBoxLayout()
        sys_group.setLayout(sys_layout)

        self.physics_params = PhysicsParamsWidget()
        sys_layout.addWidget(self.physics_params)

        gravity_row = QHBoxLayout()
        gravity_row.addWidget(QLabel("Gravity"))
        self.gravity_combo = QComboBox()
        for name, g in GRAVITY_PRESETS.items():
            self.gravity_combo.addItem(f"{name.capitalize()} ({g:g} m/s²)", name)
        gravity_row.addWidget(self.gravity_combo)
        sys_layout.addLayout(gravity_row)

        main_layout.addWidget(sys_group)

        # --- Integration ---
        sim_group = QGroupBox("Integration")
        sim_layout = QGridLayout()
        sim_group.setLayout(sim_layout)

        sim_layout.addWidget(QLabel("Precision"), 0, 0)
        self.precision_combo = QComboBox()
        for name in PRECISIONS:
            self.precision_combo.addItem(name)
        sim_layout.addWidget(self.precision_combo, 0, 1)

        sim_layout.addWidget(QLabel("Steps / frame"), 1, 0)
        self.steps_spin = QSpinBox()
        self.steps_spin.setRange(1, 20)
        self.steps_spin.setValue(1)
        sim_layout.addWidget(self.steps_spin, 1, 1)

        self.twin_checkbox = QCheckBox("Show perturbed twin")
        sim_layout.addWidget(self.twin_checkbox, 2, 0, 1, 2)

        main_layout.addWidget(sim_group)

        # --- Playback ---
        pb_group = QGroupBox("Playback")
        pb_layout = QHBoxLayout()
        pb_group.setLayout(pb_layout)

        self.play_btn = QPushButton("Pause")
        self.reset_btn = QPushButton("Reset")
        pb_layout.addWidget(self.play_btn)
        pb_layout.addWidget(self.reset_btn)

        main_layout.addWidget(pb_group)
        main_layout.addStretch()

        for slider in [
            self.theta_a_slider, self.theta_b_slider,
            self.omega_a_slider, self.omega_b_slider,
            *self.physics_params.sliders(),
        ]:
            slider.valueChanged.connect(
                lambda _val: self._on_param_changed() if not self._building else None
            )
        for combo in (self.gravity_combo, self.precision_combo):
            combo.currentIndexChanged.connect(
                lambda _idx: self._on_param_changed() if not self._building else None
            )
        self.twin_checkbox.toggled.connect(
            lambda _checked: self._on_param_changed() if not self._building else None
        )

    # -- Public accessors --

    def set_config(self, config):
        """Set every control from a SimulationConfig."""
        set_slider_value(self.theta_a_slider, config.theta_a0)
        set_slider_value(self.theta_b_slider, config.theta_b0)
        set_slider_value(self.omega_a_slider, config.omega_a0)
        set_slider_value(self.omega_b_slider, config.omega_b0)
        self.physics_params.set_values(config)

        gravity_index = 0
        for index, g in enumerate(GRAVITY_PRESETS.values()):
            if math.isclose(g, config.g):
                gravity_index = index
        self.gravity_combo.setCurrentIndex(gravity_index)
        self.precision_combo.setCurrentText(config.precision)
        self.twin_checkbox.setChecked(config.has_twin)

    def get_config(self):
        """Build a SimulationConfig from the current control values.

        Values the panel does not expose (dt, trail capacity) come from the
        configuration the panel was created with.
        """
        base = self._base_config
        twin_offset = 0.0
        if self.twin_checkbox.isChecked():
            twin_offset = base.twin_offset or DEFAULT_TWIN_OFFSET
        config = replace(
            base,
            theta_a0=slider_value(self.theta_a_slider),
            theta_b0=slider_value(self.theta_b_slider),
            omega_a0=slider_value(self.omega_a_slider),
            omega_b0=slider_value(self.omega_b_slider),
            precision=self.precision_combo.currentText(),
            twin_offset=twin_offset,
            **self.physics_params.get_values(),
        )
        return config.with_gravity(self.gravity_combo.currentData())

    def get_steps_per_frame(self):
        return self.steps_spin.value()

    # -- Callbacks (wired by PendulumView) --

    def _on_param_changed(self):
        """Called when any parameter control changes. Override in parent."""
        pass
