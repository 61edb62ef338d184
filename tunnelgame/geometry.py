"""Window dimensions and the axis-aligned rectangles used as hitboxes."""

from __future__ import annotations

from dataclasses import dataclass

WIDTH = 1000.0
HEIGHT = 1600.0
CENTER_X = WIDTH / 2.0 - 10.0
CENTER_Y = HEIGHT / 2.0 - 10.0


@dataclass
class Rect:
    """A mutable axis-aligned rectangle given by its top-left corner and size."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def position(self) -> tuple[float, float]:
        return (self.x, self.y)

    @property
    def size(self) -> tuple[float, float]:
        return (self.width, self.height)

    def _span_x(self) -> tuple[float, float]:
        return min(self.x, self.right), max(self.x, self.right)

    def _span_y(self) -> tuple[float, float]:
        return min(self.y, self.bottom), max(self.y, self.bottom)

    def intersects(self, other: Rect) -> bool:
        """Return True if the two rectangles overlap; touching edges do not count."""
        self_left, self_right = self._span_x()
        other_left, other_right = other._span_x()
        self_top, self_bottom = self._span_y()
        other_top, other_bottom = other._span_y()
        left = max(self_left, other_left)
        right = min(self_right, other_right)
        top = max(self_top, other_top)
        bottom = min(self_bottom, other_bottom)
        return left < right and top < bottom

    def move(self, dx: float, dy: float) -> None:
        """Shift the rectangle by the given offset."""
        self.x += dx
        self.y += dy

    def set_position(self, x: float, y: float) -> None:
        """Place the top-left corner at the given point."""
        self.x = x
        self.y = y