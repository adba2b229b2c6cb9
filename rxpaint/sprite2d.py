"""Textured sprites and batches of them."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from rxpaint.algebra import Vector2, Vector3
from rxpaint.color import Rgba, Rgba8
from rxpaint.rect import Rect


def _rgba(color: Rgba | Rgba8) -> Rgba:
    if isinstance(color, Rgba):
        return color
    if isinstance(color, Rgba8):
        return Rgba.from_rgba8(color)
    raise TypeError(f"not a color: {color!r}")


@dataclass(frozen=True)
class Repeat:
    """How many times a texture repeats along each axis."""

    x: float = 1.0
    y: float = 1.0


@dataclass(frozen=True)
class Vertex:
    """A sprite vertex as sent to the sprite shader."""

    position: Vector3
    uv: Vector2
    color: Rgba8
    opacity: float


@dataclass(frozen=True)
class Sprite:
    """A region ``src`` of a texture drawn into ``dst``."""

    src: Rect = field(default_factory=Rect)
    dst: Rect = field(default_factory=Rect)
    zdepth: float = 0.0
    color: Rgba = field(default_factory=Rgba)
    alpha: float = 0.0
    repeat: Repeat = field(default_factory=Repeat)

    def with_color(self, color: Rgba | Rgba8) -> Sprite:
        return replace(self, color=_rgba(color))

    def with_alpha(self, alpha: float) -> Sprite:
        return replace(self, alpha=alpha)

    def with_zdepth(self, zdepth: float) -> Sprite:
        return replace(self, zdepth=float(zdepth))

    def with_repeat(self, x: float, y: float) -> Sprite:
        return replace(self, repeat=Repeat(x, y))


class Batch:
    """Sprites drawn from one ``w`` by ``h`` texture."""

    def __init__(self, w: int, h: int) -> None:
        self.w = w
        self.h = h
        self.size = 0
        self.items: list[Sprite] = []

    @classmethod
    def singleton(
        cls,
        w: int,
        h: int,
        src: Rect,
        dst: Rect,
        zdepth: float,
        rgba: Rgba | Rgba8,
        alpha: float,
        repeat: Repeat,
    ) -> Batch:
        """Create a batch holding a single sprite."""
        batch = cls(w, h)
        batch.push(
            Sprite(src, dst)
            .with_zdepth(zdepth)
            .with_color(rgba)
            .with_alpha(alpha)
            .with_repeat(repeat.x, repeat.y)
        )
        return batch

    def push(self, sprite: Sprite) -> None:
        self.items.append(sprite)

    def add(
        self,
        src: Rect,
        dst: Rect,
        depth: float,
        rgba: Rgba | Rgba8,
        alpha: float,
        repeat: Repeat,
    ) -> None:
        """Add a sprite; repeating is only allowed over the whole texture."""
        if repeat != Repeat() and src != Rect.origin(float(self.w), float(self.h)):
            raise ValueError(
                "using texture repeat is only valid when using the entire "
                f"{self.w}x{self.h} texture"
            )
        self.items.append(
            Sprite(src, dst)
            .with_zdepth(depth)
            .with_color(rgba)
            .with_alpha(alpha)
            .with_repeat(repeat.x, repeat.y)
        )
        self.size += 1

    def vertices(self) -> list[Vertex]:
        """Return six vertices (two triangles) per sprite."""
        buf: list[Vertex] = []
        for sprite in self.items:
            src, dst, re = sprite.src, sprite.dst, sprite.repeat
            z, alpha = sprite.zdepth, sprite.alpha
            rx1 = src.x1 / self.w
            ry1 = src.y1 / self.h
            rx2 = src.x2 / self.w
            ry2 = src.y2 / self.h
            c = Rgba8.from_rgba(sprite.color)
            corners = [
                (dst.x1, dst.y1, rx1, ry2),
                (dst.x2, dst.y1, rx2, ry2),
                (dst.x2, dst.y2, rx2, ry1),
                (dst.x1, dst.y1, rx1, ry2),
                (dst.x1, dst.y2, rx1, ry1),
                (dst.x2, dst.y2, rx2, ry1),
            ]
            buf.extend(
                Vertex(Vector3(x, y, z), Vector2(u * re.x, v * re.y), c, alpha)
                for x, y, u, v in corners
            )
        return buf

    def clear(self) -> None:
        self.items.clear()
        self.size = 0

    def offset(self, x: float, y: float) -> None:
        """Move every sprite's destination by ``(x, y)``."""
        delta = Vector2(x, y)
        self.items = [replace(s, dst=s.dst + delta) for s in self.items]

    def is_empty(self) -> bool:
        return not self.items