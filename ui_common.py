"""Shared UI widgets: float slider helpers and the physics parameter group."""

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QWidget, QGridLayout, QSlider, QLabel


# ---------------------------------------------------------------------------
# Slider helpers
# ---------------------------------------------------------------------------

def make_slider(minimum, maximum, value, resolution=100):
    """Create an integer QSlider that maps to float values.

    The slider range is [minimum*resolution, maximum*resolution].
    """
    slider = QSlider(Qt.Orientation.Horizontal)
    slider.setMinimum(round(minimum * resolution))
    slider.setMaximum(round(maximum * resolution))
    slider.setValue(round(value * resolution))
    slider.resolution = resolution
    return slider


def slider_value(slider):
    """Read the float value from a slider created by make_slider."""
    return slider.value() / slider.resolution


def set_slider_value(slider, value):
    slider.setValue(round(value * slider.resolution))


def add_slider_row(layout, row, label_text, slider, unit=""):
    """Add label | slider | live value label to a grid layout."""
    label = QLabel(label_text)
    value_label = QLabel()
    value_label.setMinimumWidth(55)
    value_label.setAlignment(
        Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignVCenter
    )
    layout.addWidget(label, row, 0)
    layout.addWidget(slider, row, 1)
    layout.addWidget(value_label, row, 2)

    def _update(_val, vl=value_label, sl=slider, u=unit):
        vl.setText(f"{slider_value(sl):.2f}{u}")

    slider.valueChanged.connect(_update)
    _update(slider.value())
    return value_label


# ---------------------------------------------------------------------------
# PhysicsParamsWidget
# ---------------------------------------------------------------------------

class PhysicsParamsWidget(QWidget):
    """Grouped sliders for link lengths and masses.

    Emits no signals itself; read the values with get_values(). The parent
    can connect each slider's valueChanged to detect changes.
    """

    def __init__(self, parent=None):
        super().__init__(parent)
        layout = QGridLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self.length_a_slider = make_slider(0.1, 3.0, 1.0)
        self.length_b_slider = make_slider(0.1, 3.0, 1.0)
        self.mass_a_slider = make_slider(0.1, 5.0, 1.0)
        self.mass_b_slider = make_slider(0.1, 5.0, 1.0)

        add_slider_row(layout, 0, "Length A", self.length_a_slider, " m")
        add_slider_row(layout, 1, "Length B", self.length_b_slider, " m")
        add_slider_row(layout, 2, "Mass A", self.mass_a_slider, " kg")
        add_slider_row(layout, 3, "Mass B", self.mass_b_slider, " kg")

    def sliders(self):
        return [
            self.length_a_slider,
            self.length_b_slider,
            self.mass_a_slider,
            self.mass_b_slider,
        ]

    def get_values(self):
        """Return the current lengths and masses as SimulationConfig kwargs."""
        return {
            "length_a": slider_value(self.length_a_slider),
            "length_b": slider_value(self.length_b_slider),
            "mass_a": slider_value(self.mass_a_slider),
            "mass_b": slider_value(self.mass_b_slider),
        }

    def set_values(self, config):
        """Set slider positions from a SimulationConfig."""
        set_slider_value(self.length_a_slider, config.length_a)
        set_slider_value(self.length_b_slider, config.length_b)
        set_slider_value(self.mass_a_slider, config.mass_a)
        set_slider_value(self.mass_b_slider, config.mass_b)
