"""App window: hosts the PendulumView and its status bar labels."""

import logging

from PyQt6.QtWidgets import QMainWindow, QStatusBar

from pendulum.view import PendulumView

logger = logging.getLogger(__name__)


class AppWindow(QMainWindow):
    """Top-level window for the double pendulum animation."""

    def __init__(self, config=None):
        super().__init__()
        self.setWindowTitle("Double Pendulum")
        self.resize(1000, 800)

        self.pendulum_view = PendulumView(config)
        self.setCentralWidget(self.pendulum_view)

        self._status_bar = QStatusBar()
        self.setStatusBar(self._status_bar)
        self._status_bar.addWidget(self.pendulum_view.time_label)
        self._status_bar.addWidget(self.pendulum_view.energy_label)
        self._status_bar.addWidget(self.pendulum_view.drift_label)

    def closeEvent(self, event):
        self.pendulum_view.deactivate()
        logger.info("Window closed")
        super().closeEvent(event)
