"""The hand-built demonstration level: tunnels, shafts and a boss room."""

from __future__ import annotations

from tunnelgame.enemy import Enemy, EnemyKind
from tunnelgame.platform import Platform

_PLATFORMS: tuple[tuple[float, float, float, float], ...] = (
    # Start area
    (-300.0, 810.0, 950.0, 20.0),
    (-300.0, 620.0, 420.0, 20.0),
    (280.0, 620.0, 370.0, 20.0),
    # Vertical shaft into lower tunnels
    (120.0, 620.0, 20.0, 520.0),
    (260.0, 620.0, 20.0, 520.0),
    (140.0, 930.0, 120.0, 20.0),
    (0.0, 1080.0, 700.0, 20.0),
    (-120.0, 1260.0, 320.0, 20.0),
    (360.0, 1260.0, 260.0, 20.0),
    # Middle tunnels
    (700.0, 1080.0, 550.0, 20.0),
    (700.0, 900.0, 300.0, 20.0),
    (1080.0, 900.0, 170.0, 20.0),
    (980.0, 720.0, 270.0, 20.0),
    (980.0, 720.0, 20.0, 380.0),
    (1230.0, 720.0, 20.0, 380.0),
    # Boss room tunnel
    (1250.0, 1080.0, 350.0, 20.0),
    (1450.0, 900.0, 150.0, 20.0),
    # Boss room rectangle
    (1600.0, 720.0, 620.0, 20.0),
    (1600.0, 1180.0, 620.0, 20.0),
    (1600.0, 720.0, 20.0, 480.0),
    (2200.0, 720.0, 20.0, 480.0),
    # Extra tunnel branches around the boss room
    (1680.0, 960.0, 180.0, 20.0),
    (1960.0, 860.0, 180.0, 20.0),
)

_ENEMIES: tuple[tuple[EnemyKind, float, float], ...] = (
    # Bugs patrolling the tunnels
    (EnemyKind.BUG, 60.0, 790.0),
    (EnemyKind.BUG, 250.0, 790.0),
    (EnemyKind.BUG, 40.0, 1060.0),
    (EnemyKind.BUG, 210.0, 1060.0),
    (EnemyKind.BUG, 430.0, 1240.0),
    (EnemyKind.BUG, 790.0, 1060.0),
    (EnemyKind.BUG, 1040.0, 700.0),
    (EnemyKind.BUG, 1680.0, 1160.0),
    (EnemyKind.BUG, 1860.0, 1160.0),
    (EnemyKind.BUG, 2020.0, 1160.0),
    (EnemyKind.BUG, 1710.0, 940.0),
    (EnemyKind.BUG, 1990.0, 840.0),
    # Guards in the narrower passages
    (EnemyKind.ENEMY, 520.0, 790.0),
    (EnemyKind.ENEMY, 520.0, 1240.0),
    (EnemyKind.ENEMY, 900.0, 1060.0),
    (EnemyKind.ENEMY, 1140.0, 880.0),
    (EnemyKind.ENEMY, 1180.0, 700.0),
    (EnemyKind.ENEMY, 1500.0, 1060.0),
    (EnemyKind.ENEMY, 1760.0, 1160.0),
    (EnemyKind.ENEMY, 2080.0, 1160.0),
)


def build_demo_level() -> tuple[list[Platform], list[Enemy]]:
    """Return fresh lists of the demo level's platforms and enemies."""
    platforms = [Platform(*spec) for spec in _PLATFORMS]
    enemies = [Enemy(kind, x, y) for kind, x, y in _ENEMIES]
    return platforms, enemies