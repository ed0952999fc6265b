"""Rendering metadata for a pendulum scene.

Colors live here rather than on the physics Link so the core stays free
of presentation attributes; the canvas pairs a style with a system.
"""

from dataclasses import dataclass, field

from PyQt6.QtGui import QColor

BACKGROUND = (17, 17, 27, 255)


@dataclass(frozen=True)
class LinkStyle:
    """Color and line width of one link."""

    rgba: tuple = (200, 200, 200, 255)
    width: float = 2.5

    def color(self) -> QColor:
        return QColor(*self.rgba)


@dataclass(frozen=True)
class PendulumStyle:
    """Colors for both links and the trail of one pendulum."""

    link_a: LinkStyle = field(default_factory=lambda: LinkStyle((243, 139, 168, 255)))
    link_b: LinkStyle = field(default_factory=lambda: LinkStyle((166, 227, 161, 255)))
    trail_rgba: tuple = (203, 166, 247, 255)

    def trail_color(self) -> QColor:
        return QColor(*self.trail_rgba)

    def faded(self, alpha: int) -> "PendulumStyle":
        """Same palette with every alpha replaced, for the twin pendulum."""
        return PendulumStyle(
            link_a=LinkStyle(self.link_a.rgba[:3] + (alpha,), self.link_a.width),
            link_b=LinkStyle(self.link_b.rgba[:3] + (alpha,), self.link_b.width),
            trail_rgba=self.trail_rgba[:3] + (alpha,),
        )


DEFAULT_STYLE = PendulumStyle()
TWIN_STYLE = DEFAULT_STYLE.faded(110)
