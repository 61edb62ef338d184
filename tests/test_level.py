from tunnelgame.enemy import Enemy, EnemyKind
from tunnelgame.level import build_demo_level


def test_level_sizes():
    platforms, enemies = build_demo_level()
    assert len(platforms) == 23
    assert len(enemies) == 20


def test_enemy_kinds_partition():
    _, enemies = build_demo_level()
    bugs = [e for e in enemies if e.kind is EnemyKind.BUG]
    guards = [e for e in enemies if e.kind is EnemyKind.ENEMY]
    assert len(bugs) == 12
    assert len(bugs) + len(guards) == len(enemies)


def test_first_platform_matches_start_area():
    platforms, _ = build_demo_level()
    shape = platforms[0].shape
    assert (shape.x, shape.y, shape.width, shape.height) == (-300.0, 810.0, 950.0, 20.0)


def test_first_and_last_enemy():
    _, enemies = build_demo_level()
    assert enemies[0].kind is EnemyKind.BUG
    assert enemies[0].shape.position == (60.0, 790.0)
    assert enemies[-1].kind is EnemyKind.ENEMY
    assert enemies[-1].shape.position == (2080.0, 1160.0)


def test_enemies_start_fresh():
    _, enemies = build_demo_level()
    for enemy in enemies:
        assert enemy.health == Enemy.START_HEALTH
        assert enemy.start_x == enemy.shape.x
        assert enemy.attack_cooldown == Enemy.ATTACK_COOLDOWN


def test_each_call_builds_independent_objects():
    platforms_a, enemies_a = build_demo_level()
    platforms_b, enemies_b = build_demo_level()
    platforms_a[0].move(5.0, 5.0)
    enemies_a.clear()
    assert platforms_b[0].shape.x == -300.0
    assert len(enemies_b) == len(build_demo_level()[1])


def test_all_platforms_have_positive_size():
    platforms, _ = build_demo_level()
    assert all(p.shape.width > 0 and p.shape.height > 0 for p in platforms)