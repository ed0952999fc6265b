"""Pendulum canvas: QPainter rendering of one or more double pendulums.

Each scene pairs a Simulation with a PendulumStyle. Links are drawn as
lines from the pivot, the trail as an unordered point cloud.
"""

from PyQt6.QtCore import Qt, QPointF
from PyQt6.QtGui import QPainter, QPen, QBrush, QColor, QPolygonF
from PyQt6.QtWidgets import QWidget

from pendulum.projection import project, trail_to_pixels
from pendulum.style import BACKGROUND, DEFAULT_STYLE


class PendulumCanvas(QWidget):
    """Custom widget that draws double pendulum scenes using QPainter."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.scenes = []
        self.show_bobs = True
        self.setMinimumSize(400, 400)

    def set_scenes(self, scenes):
        """Replace the drawn scenes with a list of (simulation, style) pairs.

        The first scene is drawn last so it stays on top.
        """
        self.scenes = list(scenes)
        self.update()

    def set_simulation(self, simulation, style=DEFAULT_STYLE):
        self.set_scenes([(simulation, style)])

    def _draw_trail(self, painter, simulation, style):
        points = simulation.trail.snapshot()
        if len(points) == 0:
            return
        pixels = trail_to_pixels(points, simulation.system, self.width(), self.height())
        pen = QPen(style.trail_color())
        pen.setWidthF(1.5)
        painter.setPen(pen)
        painter.drawPoints(QPolygonF([QPointF(x, y) for x, y in pixels]))

    def _draw_links(self, painter, simulation, style):
        pivot, joint, tip = project(simulation.system, self.width(), self.height())

        pen_a = QPen(style.link_a.color())
        pen_a.setWidthF(style.link_a.width)
        painter.setPen(pen_a)
        painter.drawLine(QPointF(*pivot), QPointF(*joint))

        pen_b = QPen(style.link_b.color())
        pen_b.setWidthF(style.link_b.width)
        painter.setPen(pen_b)
        painter.drawLine(QPointF(*joint), QPointF(*tip))

        if self.show_bobs:
            painter.setPen(Qt.PenStyle.NoPen)
            painter.setBrush(QBrush(style.link_a.color()))
            painter.drawEllipse(QPointF(*joint), 5, 5)
            painter.setBrush(QBrush(style.link_b.color()))
            painter.drawEllipse(QPointF(*tip), 5, 5)
            painter.setBrush(Qt.BrushStyle.NoBrush)

    def paintEvent(self, event):
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)

        painter.fillRect(self.rect(), QColor(*BACKGROUND))

        for simulation, style in reversed(self.scenes):
            self._draw_trail(painter, simulation, style)
            self._draw_links(painter, simulation, style)

        if self.scenes:
            pivot, _, _ = project(self.scenes[0][0].system, self.width(), self.height())
            painter.setPen(Qt.PenStyle.NoPen)
            painter.setBrush(QBrush(QColor(180, 180, 180)))
            painter.drawEllipse(QPointF(*pivot), 4, 4)

        painter.end()
