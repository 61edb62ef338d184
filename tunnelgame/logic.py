"""Per-frame game rules: player update, collisions, enemies and camera."""

from __future__ import annotations

from collections.abc import Iterable

from tunnelgame.enemy import Enemy, EnemyKind
from tunnelgame.geometry import CENTER_X, CENTER_Y, Rect
from tunnelgame.platform import Platform
from tunnelgame.player import InputState, Player

ATTACK_DAMAGE = 10
CONTACT_DAMAGE = 20


def collision(a: Rect, b: Rect) -> bool:
    """Return True if two hitboxes overlap."""
    return a.intersects(b)


def update_player(player: Player, inputs: InputState) -> None:
    """Apply one frame of input and gravity to the player."""
    player.save_last_position()
    if player.health > 0:
        player.movement(inputs)
        player.jump(inputs)
        player.attack(inputs)
    player.gravity()


def update_camera(
    platforms: Iterable[Platform], enemies: Iterable[Enemy], player: Player
) -> None:
    """Scroll the world so that the player sits at the screen centre."""
    offset_x = CENTER_X - player.shape.x
    offset_y = CENTER_Y - player.shape.y
    player.shape.move(offset_x, offset_y)
    for platform in platforms:
        platform.move(offset_x, offset_y)
    for enemy in enemies:
        enemy.move(offset_x, offset_y)


def update_platforms(platforms: Iterable[Platform], player: Player) -> None:
    """Resolve the player's collisions with the platforms."""
    player.collides(False)
    body = player.shape
    for platform in platforms:
        wall = platform.shape
        if not collision(wall, body):
            continue
        last_x, last_y = player.last_position
        last = Rect(last_x, last_y, body.width, body.height)
        center_x = body.x + body.width / 2.0
        center_over = wall.x <= center_x <= wall.right
        horizontal_overlap = body.right > wall.x and body.x < wall.right
        vertical_overlap = body.bottom > wall.y and body.y < wall.bottom

        if last.bottom <= wall.y and horizontal_overlap and center_over:
            body.set_position(body.x, wall.y - body.height)
            player.falling_speed = 0.0
            player.collides(True)
        elif last.y >= wall.bottom and horizontal_overlap:
            body.set_position(body.x, wall.bottom)
            player.falling_speed = 0.0
        elif last.right <= wall.x and vertical_overlap:
            body.set_position(wall.x - body.width, body.y)
        elif last.x >= wall.right and vertical_overlap:
            body.set_position(wall.right, body.y)


def _patrol(enemy: Enemy) -> None:
    enemy.shape.move(enemy.patrol_speed * enemy.patrol_direction, 0.0)
    if enemy.shape.x <= enemy.start_x:
        enemy.shape.set_position(enemy.start_x, enemy.shape.y)
        enemy.patrol_direction = 1
    elif enemy.shape.x >= enemy.start_x + enemy.patrol_range:
        enemy.shape.set_position(enemy.start_x + enemy.patrol_range, enemy.shape.y)
        enemy.patrol_direction = -1


def _guard(enemy: Enemy, player: Player) -> None:
    if collision(enemy.shape, player.shape) and enemy.attack_cooldown == Enemy.ATTACK_COOLDOWN:
        player.health -= CONTACT_DAMAGE
        if player.shape.x < enemy.shape.x:
            player.shape.move(-player.DAMAGE_KNOCKBACK, 0.0)
        else:
            player.shape.move(player.DAMAGE_KNOCKBACK, 0.0)
        enemy.attack_cooldown = 0
        player.touching_ground = False
        player.falling_speed = player.DAMAGE_JUMP_FORCE
    elif enemy.attack_cooldown < Enemy.ATTACK_COOLDOWN:
        enemy.attack_cooldown += 1


def update_enemies(enemies: list[Enemy], player: Player) -> None:
    """Apply hits, drop dead enemies, and run patrols and guard attacks."""
    survivors: list[Enemy] = []
    for enemy in enemies:
        if (
            player.attacking
            and collision(enemy.shape, player.attack_shape)
            and enemy.last_hit_attack != player.attack_id
        ):
            enemy.health -= ATTACK_DAMAGE
            enemy.last_hit_attack = player.attack_id

        if enemy.health <= 0:
            continue
        survivors.append(enemy)

        if enemy.kind is EnemyKind.BUG:
            _patrol(enemy)
        else:
            _guard(enemy, player)
    enemies[:] = survivors