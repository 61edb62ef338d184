from tunnelgame.geometry import Rect
from tunnelgame.platform import Platform


def test_platform_shape_from_arguments():
    p = Platform(-300.0, 810.0, 950.0, 20.0)
    assert p.shape == Rect(-300.0, 810.0, 950.0, 20.0)


def test_platform_move_shifts_shape():
    p = Platform(10.0, 20.0, 30.0, 40.0)
    p.move(5.0, -5.0)
    assert p.shape.position == (15.0, 15.0)
    assert p.shape.size == (30.0, 40.0)


def test_platform_move_round_trip():
    p = Platform(1.0, 2.0, 3.0, 4.0)
    p.move(100.0, 200.0)
    p.move(-100.0, -200.0)
    assert p.shape == Rect(1.0, 2.0, 3.0, 4.0)


def test_platforms_have_independent_shapes():
    a = Platform(0.0, 0.0, 10.0, 10.0)
    b = Platform(0.0, 0.0, 10.0, 10.0)
    a.move(50.0, 0.0)
    assert b.shape.x == 0.0
    assert a.shape.x == 50.0