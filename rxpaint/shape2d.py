"""Two-dimensional shapes and their triangulation into vertices."""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from typing import ClassVar, Iterable, Union

from rxpaint.algebra import Matrix4, Point2, Vector2, Vector3, Vector4
from rxpaint.color import Rgba, Rgba8
from rxpaint.rect import Rect

PointLike = Union[Point2, Vector2, Iterable[float]]


def _point(p: PointLike) -> Point2:
    if isinstance(p, Point2):
        return p
    return Point2(*p)


def _rgba(color: Rgba | Rgba8) -> Rgba:
    if isinstance(color, Rgba):
        return color
    if isinstance(color, Rgba8):
        return Rgba.from_rgba8(color)
    raise TypeError(f"not a color: {color!r}")


@dataclass(frozen=True)
class Vertex:
    """A shape vertex as sent to the shape shader."""

    position: Vector3
    angle: float
    center: Vector2
    color: Rgba8


def _vertex(x: float, y: float, z: float, angle: float, center: Point2, color: Rgba8) -> Vertex:
    return Vertex(Vector3(x, y, z), angle, Vector2(center.x, center.y), color)


@dataclass(frozen=True)
class Stroke:
    """Outline of a shape."""

    width: float = 1.0
    color: Rgba = field(default_factory=Rgba)

    NONE: ClassVar[Stroke]


Stroke.NONE = Stroke(0.0, Rgba.TRANSPARENT)


@dataclass(frozen=True)
class Fill:
    """Interior of a shape: empty when ``color`` is None, solid otherwise."""

    color: Rgba | None = None

    EMPTY: ClassVar[Fill]

    @classmethod
    def solid(cls, color: Rgba | Rgba8) -> Fill:
        return cls(_rgba(color))

    def is_empty(self) -> bool:
        return self.color is None


Fill.EMPTY = Fill()


@dataclass(frozen=True)
class Rotation:
    """A rotation by ``angle`` around ``center``."""

    angle: float = 0.0
    center: Point2 = field(default_factory=lambda: Point2(0.0, 0.0))

    ZERO: ClassVar[Rotation]


Rotation.ZERO = Rotation()


@dataclass(frozen=True)
class Line:
    """A line segment between two points."""

    p1: Point2
    p2: Point2

    def __post_init__(self) -> None:
        object.__setattr__(self, "p1", _point(self.p1))
        object.__setattr__(self, "p2", _point(self.p2))

    def transform(self, m: Matrix4) -> Line:
        """Return the line with both endpoints transformed by ``m``."""
        v1 = m * Vector4(self.p1.x, self.p1.y, 0.0, 1.0)
        v2 = m * Vector4(self.p2.x, self.p2.y, 0.0, 1.0)
        return Line(Point2(v1.x, v1.y), Point2(v2.x, v2.y))

    def __mul__(self, n: float) -> Line:
        return Line(self.p1 * n, self.p2 * n)

    def __add__(self, vec: Vector2) -> Line:
        if not isinstance(vec, Vector2):
            return NotImplemented
        return Line(self.p1 + vec, self.p2 + vec)


@dataclass(frozen=True)
class Circle:
    """A circle approximated by a regular polygon with ``sides`` sides."""

    position: Point2
    radius: float
    sides: int


@dataclass(frozen=True)
class Shape:
    """A line, rectangle or circle with its depth, rotation, stroke and fill."""

    geometry: Line | Rect | Circle
    zdepth: float = 0.0
    rotation: Rotation = field(default_factory=Rotation)
    stroke: Stroke = field(default_factory=Stroke)
    fill: Fill = field(default_factory=Fill)

    @classmethod
    def circle(cls, position: PointLike, radius: float, sides: int) -> Shape:
        return cls(Circle(_point(position), radius, sides))

    @classmethod
    def line(cls, p1: PointLike, p2: PointLike) -> Shape:
        return cls(Line(_point(p1), _point(p2)))

    @classmethod
    def rect(cls, p1: PointLike, p2: PointLike) -> Shape:
        a, b = _point(p1), _point(p2)
        return cls(Rect(a.x, a.y, b.x, b.y))

    def with_zdepth(self, z: float) -> Shape:
        return replace(self, zdepth=float(z))

    def with_rotation(self, angle: float, center: PointLike) -> Shape:
        """Set the rotation; circles are not rotated and are returned unchanged."""
        if isinstance(self.geometry, Circle):
            return self
        return replace(self, rotation=Rotation(angle, _point(center)))

    def with_fill(self, fill: Fill) -> Shape:
        """Set the fill; lines have no fill and are returned unchanged."""
        if isinstance(self.geometry, Line):
            return self
        return replace(self, fill=fill)

    def with_stroke(self, width: float, color: Rgba | Rgba8) -> Shape:
        return replace(self, stroke=Stroke(width, _rgba(color)))

    def triangulate(self) -> list[Vertex]:
        """Return the triangle vertices that draw this shape."""
        geometry = self.geometry
        if isinstance(geometry, Line):
            return self._triangulate_line(geometry)
        if isinstance(geometry, Rect):
            return self._triangulate_rect(geometry)
        return self._triangulate_circle(geometry)

    def _triangulate_line(self, line: Line) -> list[Vertex]:
        z = self.zdepth
        angle, center = self.rotation.angle, self.rotation.center
        v = (line.p2 - line.p1).normalize()
        wx = self.stroke.width / 2.0 * v.y
        wy = self.stroke.width / 2.0 * v.x
        c = Rgba8.from_rgba(self.stroke.color)
        p1, p2 = line.p1, line.p2
        corners = [
            (p1.x - wx, p1.y + wy),
            (p1.x + wx, p1.y - wy),
            (p2.x - wx, p2.y + wy),
            (p2.x - wx, p2.y + wy),
            (p1.x + wx, p1.y - wy),
            (p2.x + wx, p2.y - wy),
        ]
        return [_vertex(x, y, z, angle, center, c) for x, y in corners]

    def _triangulate_rect(self, outer: Rect) -> list[Vertex]:
        z = self.zdepth
        angle, center = self.rotation.angle, self.rotation.center
        w = self.stroke.width
        inner = Rect(outer.x1 + w, outer.y1 + w, outer.x2 - w, outer.y2 - w)
        corners: list[tuple[float, float]] = []
        verts: list[Vertex] = []

        if self.stroke != Stroke.NONE:
            c = Rgba8.from_rgba(self.stroke.color)
            corners = [
                # Bottom
                (outer.x1, outer.y1), (outer.x2, outer.y1), (inner.x1, inner.y1),
                (inner.x1, inner.y1), (outer.x2, outer.y1), (inner.x2, inner.y1),
                # Left
                (outer.x1, outer.y1), (inner.x1, inner.y1), (outer.x1, outer.y2),
                (outer.x1, outer.y2), (inner.x1, inner.y1), (inner.x1, inner.y2),
                # Right
                (inner.x2, inner.y1), (outer.x2, outer.y1), (outer.x2, outer.y2),
                (inner.x2, inner.y1), (inner.x2, inner.y2), (outer.x2, outer.y2),
                # Top
                (outer.x1, outer.y2), (outer.x2, outer.y2), (inner.x1, inner.y2),
                (inner.x1, inner.y2), (outer.x2, outer.y2), (inner.x2, inner.y2),
            ]
            verts.extend(_vertex(x, y, z, angle, center, c) for x, y in corners)

        if self.fill.color is not None:
            c = Rgba8.from_rgba(self.fill.color)
            corners = [
                (inner.x1, inner.y1), (inner.x2, inner.y1), (inner.x2, inner.y2),
                (inner.x1, inner.y1), (inner.x1, inner.y2), (inner.x2, inner.y2),
            ]
            verts.extend(_vertex(x, y, z, angle, center, c) for x, y in corners)
        return verts

    def _triangulate_circle(self, circle: Circle) -> list[Vertex]:
        z = self.zdepth
        origin = Point2(0.0, 0.0)
        inner = _circle_points(circle.position, circle.radius - self.stroke.width, circle.sides)
        verts: list[Vertex] = []

        if self.stroke != Stroke.NONE:
            outer = _circle_points(circle.position, circle.radius, circle.sides)
            c = Rgba8.from_rgba(self.stroke.color)
            for (i0, i1), (o0, o1) in zip(zip(inner, inner[1:]), zip(outer, outer[1:])):
                verts.extend(
                    _vertex(p.x, p.y, z, 0.0, origin, c) for p in (i0, o0, o1, i0, o1, i1)
                )

        if self.fill.color is not None:
            c = Rgba8.from_rgba(self.fill.color)
            center = _vertex(circle.position.x, circle.position.y, z, 0.0, origin, c)
            inner_verts = [_vertex(p.x, p.y, z, 0.0, origin, c) for p in inner]
            for a, b in zip(inner_verts, inner_verts[1:]):
                verts.extend((center, a, b))
            verts.extend((center, inner_verts[-1], inner_verts[0]))
        return verts


def _circle_points(position: Point2, radius: float, sides: int) -> list[Point2]:
    step = 2.0 * math.pi / sides
    return [
        Point2(position.x + radius * math.cos(i * step), position.y + radius * math.sin(i * step))
        for i in range(sides + 1)
    ]


class Batch:
    """A collection of shapes drawn together."""

    def __init__(self) -> None:
        self.items: list[Shape] = []

    def add(self, shape: Shape) -> None:
        self.items.append(shape)

    def vertices(self) -> list[Vertex]:
        """Return the vertices of every shape, in insertion order."""
        return [v for shape in self.items for v in shape.triangulate()]

    def is_empty(self) -> bool:
        return not self.items

    def clear(self) -> None:
        self.items.clear()