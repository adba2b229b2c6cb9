"""Pixel buffer helpers."""

from __future__ import annotations

from typing import Sequence, TypeVar

T = TypeVar("T")


def scale(image: Sequence[T], width: int, height: int, factor: int) -> list[T]:
    """Scale a row-major image by ``factor`` using nearest-neighbour sampling."""
    if len(image) != width * height:
        raise ValueError(
            f"image has {len(image)} pixels, expected {width}x{height}"
        )
    rows = [image[y * width : (y + 1) * width] for y in range(height)]
    out: list[T] = []
    for row in rows:
        scaled_row = [pixel for pixel in row for _ in range(factor)]
        for _ in range(factor):
            out.extend(scaled_row)
    return out