import pytest

from rxpaint.algebra import Point2
from rxpaint.color import Rgba8
from rxpaint.palette import Palette

A = Rgba8.RED
B = Rgba8.GREEN
C = Rgba8.BLUE


def _palette():
    p = Palette(10.0, 2)
    for c in (A, B, C):
        p.add(c)
    return p


def test_add_deduplicates():
    p = Palette(10.0, 16)
    p.add(A)
    p.add(B)
    p.add(A)
    assert p.colors == [A, B]
    assert p.size() == 2


def test_clear():
    p = _palette()
    p.clear()
    assert p.size() == 0
    assert p.colors == []


def test_full_palette_raises():
    p = Palette(10.0, 16)
    for i in range(256):
        p.add(Rgba8(i, 0, 0, 0xFF))
    assert p.size() == 256
    with pytest.raises(OverflowError):
        p.add(Rgba8(0, 1, 0, 0xFF))


def test_gradient_endpoints_and_count():
    p = Palette(10.0, 16)
    p.gradient(Rgba8.BLACK, Rgba8.WHITE, 5)
    assert p.size() == 5
    assert p.colors[0] == Rgba8.BLACK
    assert p.colors[-1] == Rgba8.WHITE
    reds = [c.r for c in p.colors]
    assert reds == sorted(reds)


def test_gradient_midpoint_rounds_up():
    p = Palette(10.0, 16)
    p.gradient(Rgba8.BLACK, Rgba8.WHITE, 3)
    assert p.colors[1] == Rgba8(128, 128, 128, 0xFF)


def test_gradient_rejects_zero():
    with pytest.raises(ValueError):
        Palette(10.0, 16).gradient(Rgba8.BLACK, Rgba8.WHITE, 0)


def test_hover_cells_are_reversed():
    p = _palette()
    p.handle_cursor_moved(Point2(5, 5))
    assert p.hover == C
    p.handle_cursor_moved(Point2(5, 15))
    assert p.hover == B
    p.handle_cursor_moved(Point2(15, 5))
    assert p.hover == A


def test_hover_empty_cell_and_outside():
    p = _palette()
    p.handle_cursor_moved(Point2(15, 15))
    assert p.hover is None
    p.handle_cursor_moved(Point2(5, 5))
    p.handle_cursor_moved(Point2(25, 5))
    assert p.hover is None
    p.handle_cursor_moved(Point2(-1, 5))
    assert p.hover is None


def test_hover_respects_offset():
    p = _palette()
    p.x, p.y = 100.0, 50.0
    p.handle_cursor_moved(Point2(5, 5))
    assert p.hover is None
    p.handle_cursor_moved(Point2(105, 55))
    assert p.hover == C


def test_hover_empty_palette():
    p = Palette(10.0, 2)
    p.handle_cursor_moved(Point2(0, 0))
    assert p.hover is None