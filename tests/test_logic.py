import pytest

from tunnelgame.enemy import Enemy, EnemyKind
from tunnelgame.geometry import CENTER_X, CENTER_Y, Rect
from tunnelgame.logic import (
    collision,
    update_camera,
    update_enemies,
    update_platforms,
    update_player,
)
from tunnelgame.platform import Platform
from tunnelgame.player import InputState, Player


def test_collision_overlap_and_touching():
    assert collision(Rect(0, 0, 10, 10), Rect(5, 5, 10, 10)) is True
    assert collision(Rect(0, 0, 10, 10), Rect(10, 0, 10, 10)) is False


def test_update_player_moves_and_saves_position():
    player = Player(0.0, 0.0)
    player.touching_ground = True
    update_player(player, InputState(right=True))
    assert player.last_position == (0.0, 0.0)
    assert player.shape.x == pytest.approx(Player.MOVEMENT_SPEED)
    assert player.falling_speed == 0.0


def test_dead_player_only_falls():
    player = Player(0.0, 0.0)
    player.health = 0
    update_player(player, InputState(left=True, attack=True))
    assert player.shape.x == 0.0
    assert player.attacking is False
    assert player.falling_speed == pytest.approx(Player.GRAVITY_FORCE)


def test_camera_centres_player_and_shifts_world():
    player = Player(100.0, 200.0)
    platform = Platform(100.0, 220.0, 50.0, 20.0)
    enemy = Enemy(EnemyKind.BUG, 150.0, 200.0)
    update_camera([platform], [enemy], player)
    assert player.shape.position == (CENTER_X, CENTER_Y)
    assert platform.shape.x - player.shape.x == pytest.approx(0.0)
    assert platform.shape.y - player.shape.y == pytest.approx(20.0)
    assert enemy.start_x == enemy.shape.x
    assert enemy.shape.x - player.shape.x == pytest.approx(50.0)


def test_landing_on_platform():
    platform = Platform(0.0, 100.0, 200.0, 20.0)
    player = Player(50.0, 95.0)
    player.last_position = (50.0, 80.0)
    player.falling_speed = 5.0
    update_platforms([platform], player)
    assert player.shape.y == 100.0 - Player.SIZE
    assert player.touching_ground is True
    assert player.falling_speed == 0.0


def test_bumping_head():
    platform = Platform(0.0, 100.0, 200.0, 20.0)
    player = Player(50.0, 115.0)
    player.last_position = (50.0, 125.0)
    player.falling_speed = -5.0
    update_platforms([platform], player)
    assert player.shape.y == platform.shape.bottom
    assert player.touching_ground is False
    assert player.falling_speed == 0.0


def test_wall_from_left_and_right():
    wall = Platform(100.0, 0.0, 20.0, 200.0)
    from_left = Player(85.0, 50.0)
    from_left.last_position = (75.0, 50.0)
    update_platforms([wall], from_left)
    assert from_left.shape.x == 100.0 - Player.SIZE

    from_right = Player(115.0, 50.0)
    from_right.last_position = (125.0, 50.0)
    update_platforms([wall], from_right)
    assert from_right.shape.x == wall.shape.right


def test_no_contact_clears_ground():
    player = Player(0.0, 0.0)
    player.touching_ground = True
    update_platforms([Platform(500.0, 500.0, 10.0, 10.0)], player)
    assert player.touching_ground is False
    assert player.shape.position == (0.0, 0.0)


def test_attack_hits_once_per_attack_and_kills():
    enemy = Enemy(EnemyKind.BUG, 0.0, 0.0)
    player = Player(500.0, 500.0)
    player.attacking = True
    player.attack_id = 1
    player.attack_shape = Rect(0.0, 0.0, 20.0, 20.0)
    enemies = [enemy]
    update_enemies(enemies, player)
    assert enemy.health == Enemy.START_HEALTH - 10
    update_enemies(enemies, player)
    assert enemy.health == Enemy.START_HEALTH - 10
    player.attack_id = 2
    player.attack_shape = Rect(enemy.shape.x, enemy.shape.y, 20.0, 20.0)
    update_enemies(enemies, player)
    assert enemies == []


def test_bug_patrols_between_bounds():
    bug = Enemy(EnemyKind.BUG, 0.0, 0.0)
    player = Player(1000.0, 1000.0)
    enemies = [bug]
    update_enemies(enemies, player)
    assert bug.shape.x == bug.patrol_speed
    for _ in range(300):
        update_enemies(enemies, player)
        assert bug.start_x <= bug.shape.x <= bug.start_x + bug.patrol_range
    update_enemies(enemies, player)
    assert len(enemies) == 1


def test_bug_turns_at_range():
    bug = Enemy(EnemyKind.BUG, 0.0, 0.0)
    player = Player(1000.0, 1000.0)
    enemies = [bug]
    steps = int(bug.patrol_range / bug.patrol_speed)
    for _ in range(steps):
        update_enemies(enemies, player)
    assert bug.shape.x == bug.start_x + bug.patrol_range
    assert bug.patrol_direction == -1


def test_guard_damages_and_knocks_back():
    guard = Enemy(EnemyKind.ENEMY, 10.0, 0.0)
    player = Player(0.0, 0.0)
    player.touching_ground = True
    enemies = [guard]
    update_enemies(enemies, player)
    assert player.health == Player.START_HEALTH - 20
    assert player.shape.x == -Player.DAMAGE_KNOCKBACK
    assert player.falling_speed == Player.DAMAGE_JUMP_FORCE
    assert player.touching_ground is False
    assert guard.attack_cooldown == 0
    update_enemies(enemies, player)
    assert guard.attack_cooldown == 1
    assert player.health == Player.START_HEALTH - 20


def test_guard_knocks_right_when_player_right():
    guard = Enemy(EnemyKind.ENEMY, 0.0, 0.0)
    player = Player(10.0, 0.0)
    update_enemies([guard], player)
    assert player.shape.x == 10.0 + Player.DAMAGE_KNOCKBACK