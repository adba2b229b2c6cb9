"""The color palette shown beside the canvas."""

from __future__ import annotations

import math
from typing import Any

from rxpaint.color import Rgba8

MAX_COLORS = 256


def _blend_component(start: int, end: int, coef: float) -> int:
    value = start * (1.0 - coef) + end * coef
    if math.isnan(value):
        return 0
    return max(0, min(0xFF, math.floor(value + 0.5)))


class Palette:
    """A list of up to 256 colors laid out in columns of ``height`` cells."""

    def __init__(self, cellsize: float, height: int) -> None:
        self.colors: list[Rgba8] = []
        self.hover: Rgba8 | None = None
        self.cellsize = cellsize
        self.height = height
        self.x = 0.0
        self.y = 0.0

    def _push(self, color: Rgba8) -> None:
        if len(self.colors) >= MAX_COLORS:
            raise OverflowError(f"palette is full ({MAX_COLORS} colors)")
        self.colors.append(color)

    def add(self, color: Rgba8) -> None:
        """Add a color unless it is already present."""
        if color not in self.colors:
            self._push(color)

    def gradient(self, colorstart: Rgba8, colorend: Rgba8, number: int) -> None:
        """Add ``number`` colors blending from ``colorstart`` to ``colorend``."""
        if number < 1:
            raise ValueError("a gradient needs at least one color")
        step = 1.0 / (number - 1) if number > 1 else math.inf
        for i in range(number):
            coef = i * step if i else (0.0 if number > 1 else math.nan)
            self._push(
                Rgba8(
                    _blend_component(colorstart.r, colorend.r, coef),
                    _blend_component(colorstart.g, colorend.g, coef),
                    _blend_component(colorstart.b, colorend.b, coef),
                    _blend_component(colorstart.a, colorend.a, coef),
                )
            )

    def clear(self) -> None:
        self.colors.clear()

    def size(self) -> int:
        return len(self.colors)

    def handle_cursor_moved(self, p: Any) -> None:
        """Update the hovered color for a cursor at ``p`` (anything with ``x`` and ``y``)."""
        x = int(p.x) - int(self.x)
        y = int(p.y) - int(self.y)
        cellsize = int(self.cellsize)
        size = self.size()
        columns = math.ceil(size / self.height)

        width = cellsize * columns if size > self.height else cellsize
        height = min(size, self.height) * cellsize

        if x >= width or y >= height or x < 0 or y < 0:
            self.hover = None
            return

        x //= cellsize
        y //= cellsize
        index = y + x * (height // cellsize)

        # The palette is displayed reversed, so index from the back.
        self.hover = self.colors[size - index - 1] if index < size else None