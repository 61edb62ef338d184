"""Enemies: patrolling bugs and stationary guards."""

from __future__ import annotations

from enum import Enum
from typing import ClassVar

from tunnelgame.geometry import Rect


class EnemyKind(str, Enum):
    """The kinds of enemy a level can place."""

    BUG = "bug"
    ENEMY = "enemy"


class Enemy:
    """An enemy with a 20x20 hitbox, health and patrol state."""

    SIZE: ClassVar[float] = 20.0
    START_HEALTH: ClassVar[int] = 20
    ATTACK_COOLDOWN: ClassVar[int] = 120
    COLOR: ClassVar[tuple[int, int, int]] = (255, 0, 0)
    TEXTURES: ClassVar[dict[EnemyKind, str]] = {
        EnemyKind.BUG: "assets/textures/bug-enemy.png",
        EnemyKind.ENEMY: "assets/textures/enemy.png",
    }

    def __init__(self, kind: EnemyKind | str, x: float, y: float) -> None:
        self.kind = EnemyKind(kind)
        self.shape = Rect(x, y, self.SIZE, self.SIZE)
        self.attack_cooldown = self.ATTACK_COOLDOWN
        self.health = self.START_HEALTH
        self.start_x = x
        self.patrol_speed = 1.0
        self.patrol_range = 100.0
        self.patrol_direction = 1
        self.last_hit_attack = -1

    def __repr__(self) -> str:
        return f"Enemy({self.kind.value!r}, {self.shape.x}, {self.shape.y})"

    def move(self, dx: float, dy: float) -> None:
        """Shift the enemy and its patrol origin together."""
        self.shape.move(dx, dy)
        self.start_x += dx