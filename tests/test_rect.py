import pytest

from rxpaint.algebra import Point2, Vector2
from rxpaint.rect import Rect


def test_with_origin():
    assert Rect(1, 1, 4, 4).with_origin(0, 0) == Rect(0, 0, 3, 3)


def test_with_size():
    assert Rect(1, 1, 4, 4).with_size(9, 9) == Rect(1, 1, 10, 10)


@pytest.mark.parametrize(
    "rect, amount, expected",
    [
        (Rect(0, 0, 3, 3), 1, Rect(-1, -1, 4, 4)),
        (Rect(3, 3, 0, 0), 1, Rect(4, 4, -1, -1)),
        (Rect(-1, 1, 1, -1), 4, Rect(-5, 5, 5, -5)),
    ],
)
def test_expand(rect, amount, expected):
    assert rect.expand(amount, amount, amount, amount) == expected


def test_width_and_height():
    assert Rect(0, 0, 3, 3).width() == 3
    assert Rect.origin(-6, -6).height() == 6


def test_min_and_max():
    assert Rect(0, 0, 1, -1).min() == Point2(0, -1)
    assert Rect.origin(-1, 1).max() == Point2(0, 1)


def test_center():
    assert Rect.origin(8, 8).center() == Point2(4, 4)
    assert Rect(0, 0, -8, -8).center() == Point2(-4, -4)


def test_contains():
    r = Rect.origin(6, 6)
    assert r.contains(Point2(0, 0))
    assert r.contains(Point2(3, 3))
    assert not r.contains(Point2(6, 6))
    assert Rect(0, 0, -6, -6).contains(Point2(-3, -3))


def test_abs():
    assert Rect(3, 3, 1, 1).abs() == Rect(1, 1, 3, 3)
    assert Rect(-1, -1, 1, 1).abs() == Rect(-1, -1, 1, 1)


def test_intersection():
    other = Rect(0, 0, 3, 3)
    assert Rect(1, 1, 6, 6).intersection(other) == Rect(1, 1, 3, 3)
    assert Rect(1, 1, 2, 2).intersection(other) == Rect(1, 1, 2, 2)
    assert Rect(-1, -1, 3, 3).intersection(other) == Rect(0, 0, 3, 3)
    assert Rect(-1, -1, 4, 4).intersection(other) == other
    assert Rect(4, 4, 5, 5).intersection(other).is_empty()


def test_intersects():
    other = Rect(0, 0, 3, 3)
    assert Rect(1, 1, 6, 6).intersects(other)
    assert not Rect(4, 4, 5, 5).intersects(other)


def test_sized_has_given_size():
    r = Rect.sized(5, 7, 2, 9)
    assert (r.x1, r.y1) == (5, 7)
    assert r.width() == 2
    assert r.height() == 9


def test_flips_are_involutions():
    r = Rect(1, 2, 3, 4)
    assert r.flip_x().flip_x() == r
    assert r.flip_y().flip_y() == r
    assert r.flip_y() == Rect(1, 4, 3, 2)
    assert r.flip_x() == Rect(3, 2, 1, 4)


def test_area_of_origin_rect():
    assert Rect.origin(3, 4).area() == 12
    assert Rect(3, 4, 0, 0).area() == Rect.origin(3, 4).area()


def test_zero_and_empty():
    assert Rect.zero().is_zero()
    assert Rect.zero().is_empty()
    assert not Rect(1, 1, 1, 1).is_zero()
    assert Rect(1, 1, 1, 1).is_empty()
    assert not Rect.origin(1, 1).is_empty()


def test_vector_add_sub_round_trip():
    r = Rect(1, 2, 3, 4)
    v = Vector2(10, 20)
    moved = r + v
    assert moved.width() == r.width()
    assert moved.height() == r.height()
    assert moved - v == r


def test_scalar_multiply_and_map():
    r = Rect(1, 2, 3, 4)
    assert r * 1 == r
    assert r.map(float) == Rect(1.0, 2.0, 3.0, 4.0)
    assert (r * 2).map(lambda n: n // 2) == r


def test_scale_keeps_first_corner():
    r = Rect(1, 2, 3, 4).scale(1, 1)
    assert r == Rect(1, 2, 3, 4)
    scaled = Rect(1, 2, 3, 4).scale(0, 0)
    assert (scaled.x1, scaled.y1) == (1, 2)
    assert (scaled.x2, scaled.y2) == (0, 0)


def test_radius_uses_larger_side():
    assert Rect.origin(8, 2).radius() == Rect.origin(2, 8).radius()
    assert Rect.origin(8, 8).radius() == Rect.origin(8, 8).center().x


def test_float_center():
    assert Rect.origin(3.0, 3.0).center() == Point2(1.5, 1.5)