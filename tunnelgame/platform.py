"""Static level geometry the player can stand on and bump into."""

from __future__ import annotations

from typing import ClassVar

from tunnelgame.geometry import Rect


class Platform:
    """A solid rectangle of the level."""

    COLOR: ClassVar[tuple[int, int, int]] = (0, 255, 0)
    TEXTURE: ClassVar[str] = "assets/textures/platform.png"

    def __init__(self, x: float, y: float, width: float, height: float) -> None:
        self.shape = Rect(x, y, width, height)

    def __repr__(self) -> str:
        s = self.shape
        return f"Platform({s.x}, {s.y}, {s.width}, {s.height})"

    def move(self, dx: float, dy: float) -> None:
        """Shift the platform, used when the camera scrolls the world."""
        self.shape.move(dx, dy)