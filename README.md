# tunnelgame

A small 2D side-scrolling platformer. You start at the top of a network of
tunnels and make your way down and across toward a large room at the far
end. Patrolling bugs and stationary guards stand in the way. The window is
1000×1600. The camera keeps the player at a fixed point near the middle of
the screen, with the top-left corner at (490, 790), and scrolls the world
around them.

## Installation

```
pip install .
```

This also installs `pygame`, which draws the game and reads the keyboard and
mouse.

## Playing

```
tunnelgame
```

The command accepts no options other than `--help`.

Controls:

| Key / button          | Action                                    |
|-----------------------|-------------------------------------------|
| `A` / `D`             | Move left / right                         |
| `Space`               | Jump (only while standing on a platform)  |
| `F` or left mouse     | Attack in the direction you last faced    |
| `W` + attack          | Attack upwards                            |
| `S` + attack (in air) | Attack downwards                          |

The game runs at 60 frames per second. An attack lasts 10 frames. A new
attack starts only when the attack input is pressed again after being
released. You start with 100 health. When a guard touches you, you lose 20
health and are knocked back 40 pixels with a small upward push. After that
the guard needs 120 frames before it can hit again. Bugs patrol back and
forth over 100 pixels and do no damage. Each enemy has 20 health and loses
10 per attack. A single attack hits a given enemy only once, so it takes two
separate attacks to defeat one. When your health reaches zero you can no
longer move, jump or attack, but gravity still applies. Close the window to
quit.

Textures are loaded from `assets/textures/` relative to the working
directory when the files exist: `player.png`, `platform.png`,
`bug-enemy.png` and `enemy.png`. If a texture is missing, a plain coloured
rectangle is drawn in its place: blue for the player, green for platforms,
red for enemies. The attack hitbox is always drawn as a yellow rectangle.

## What it does not do

There is no health display, game-over screen or win condition, no boss in
the room at the end of the tunnels, and no saving. The demo level from
`tunnelgame.level.build_demo_level` is the only level.

## Using the pieces

The simulation does not depend on a window, so you can drive it from code:

```python
from tunnelgame.level import build_demo_level
from tunnelgame.logic import update_player, update_platforms, update_enemies, update_camera
from tunnelgame.player import Player, InputState

platforms, enemies = build_demo_level()
player = Player()
inputs = InputState(right=True)

for _ in range(60):
    update_player(player, inputs)
    update_platforms(platforms, player)
    update_enemies(enemies, player)   # removes defeated enemies from the list
    update_camera(platforms, enemies, player)
```

Modules:

- `tunnelgame.geometry`: the window size constants and `Rect`, a mutable
  rectangle with `intersects`, `move` and `set_position`.
- `tunnelgame.platform`: `Platform`, a solid rectangle of the level.
- `tunnelgame.enemy`: `Enemy` and `EnemyKind` (`BUG` or `ENEMY`).
- `tunnelgame.player`: `Player` and `InputState`, the controls held down
  during one frame.
- `tunnelgame.level`: `build_demo_level()` returns fresh lists of platforms
  and enemies.
- `tunnelgame.logic`: the per-frame rules: `collision`, `update_player`,
  `update_platforms`, `update_enemies` and `update_camera`.
- `tunnelgame.game`: `read_input`, `draw_world` and `main`, the window loop
  that the `tunnelgame` command runs.

## Tests

```
pip install .[test]
pytest
```