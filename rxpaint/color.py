"""Color types: 8-bit RGBA, 8-bit RGB and normalized floating-point RGBA."""

from __future__ import annotations

import math
import string
from dataclasses import dataclass
from typing import ClassVar, Iterator

_HEX_DIGITS = frozenset(string.hexdigits)


def _round_half_away(value: float) -> int:
    """Round to the nearest integer, with halves going away from zero."""
    if value >= 0:
        return math.floor(value + 0.5)
    return -math.floor(-value + 0.5)


def _saturate_u8(value: float) -> int:
    """Convert a float to an 8-bit channel the way a saturating cast does."""
    if math.isnan(value):
        return 0
    return max(0, min(0xFF, _round_half_away(value)))


def _parse_hex_byte(text: str) -> int:
    if len(text) != 2 or not set(text) <= _HEX_DIGITS:
        raise ValueError(f"invalid hex byte {text!r}")
    return int(text, 16)


@dataclass(frozen=True, order=True)
class Rgba8:
    """RGBA color with 8-bit channels."""

    r: int = 0
    g: int = 0
    b: int = 0
    a: int = 0

    TRANSPARENT: ClassVar[Rgba8]
    WHITE: ClassVar[Rgba8]
    BLACK: ClassVar[Rgba8]
    RED: ClassVar[Rgba8]
    GREEN: ClassVar[Rgba8]
    BLUE: ClassVar[Rgba8]

    def __post_init__(self) -> None:
        for name in ("r", "g", "b", "a"):
            value = getattr(self, name)
            if not 0 <= value <= 0xFF:
                raise ValueError(f"channel {name} out of range: {value}")

    def __iter__(self) -> Iterator[int]:
        yield from (self.r, self.g, self.b, self.a)

    def invert(self) -> Rgba8:
        """Return the inverted color, keeping alpha."""
        return Rgba8(0xFF - self.r, 0xFF - self.g, 0xFF - self.b, self.a)

    def alpha(self, a: int) -> Rgba8:
        """Return the color with a changed alpha."""
        return Rgba8(self.r, self.g, self.b, a)

    @classmethod
    def from_str(cls, hex_code: str) -> Rgba8:
        """Parse a color code of the form ``#ffffff``; alpha is always 0xff."""
        if len(hex_code) < 7:
            raise ValueError(f"{hex_code!r} is not a valid color value")
        return cls(
            _parse_hex_byte(hex_code[1:3]),
            _parse_hex_byte(hex_code[3:5]),
            _parse_hex_byte(hex_code[5:7]),
            0xFF,
        )

    @classmethod
    def from_rgba(cls, rgba: Rgba) -> Rgba8:
        """Convert a normalized color to 8-bit channels."""
        return cls(
            _saturate_u8(rgba.r * 255.0),
            _saturate_u8(rgba.g * 255.0),
            _saturate_u8(rgba.b * 255.0),
            _saturate_u8(rgba.a * 255.0),
        )

    @classmethod
    def from_u32(cls, value: int) -> Rgba8:
        """Interpret a 32-bit integer as packed little-endian RGBA bytes."""
        r, g, b, a = (value & 0xFFFFFFFF).to_bytes(4, "little")
        return cls(r, g, b, a)

    @classmethod
    def align(cls, data: bytes | bytearray | memoryview) -> list[Rgba8]:
        """Split a byte buffer into colors; its length must be a multiple of 4."""
        raw = bytes(data)
        if len(raw) % 4:
            raise ValueError("input is not a valid Rgba8 buffer")
        return [cls(*raw[i : i + 4]) for i in range(0, len(raw), 4)]

    def to_bytes(self) -> bytes:
        """Return the color as four RGBA bytes."""
        return bytes((self.r, self.g, self.b, self.a))

    def __str__(self) -> str:
        text = f"#{self.r:02x}{self.g:02x}{self.b:02x}"
        if self.a != 0xFF:
            text += f"{self.a:02x}"
        return text


Rgba8.TRANSPARENT = Rgba8(0, 0, 0, 0)
Rgba8.WHITE = Rgba8(0xFF, 0xFF, 0xFF, 0xFF)
Rgba8.BLACK = Rgba8(0, 0, 0, 0xFF)
Rgba8.RED = Rgba8(0xFF, 0, 0, 0xFF)
Rgba8.GREEN = Rgba8(0, 0xFF, 0, 0xFF)
Rgba8.BLUE = Rgba8(0, 0, 0xFF, 0xFF)


@dataclass(frozen=True)
class Rgb8:
    """An RGB 8-bit color, used where alpha doesn't matter."""

    r: int
    g: int
    b: int

    @classmethod
    def from_rgba8(cls, rgba: Rgba8) -> Rgb8:
        """Drop the alpha channel of an 8-bit RGBA color."""
        return cls(rgba.r, rgba.g, rgba.b)

    def __str__(self) -> str:
        return f"#{self.r:02X}{self.g:02X}{self.b:02X}"


@dataclass(frozen=True)
class Rgba:
    """A normalized RGBA color."""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0
    a: float = 0.0

    RED: ClassVar[Rgba]
    GREEN: ClassVar[Rgba]
    BLUE: ClassVar[Rgba]
    WHITE: ClassVar[Rgba]
    BLACK: ClassVar[Rgba]
    TRANSPARENT: ClassVar[Rgba]

    def invert(self) -> Rgba:
        """Return the inverted color, keeping alpha."""
        return Rgba(1.0 - self.r, 1.0 - self.g, 1.0 - self.b, self.a)

    @classmethod
    def from_rgba8(cls, rgba8: Rgba8) -> Rgba:
        """Convert an 8-bit color to normalized channels."""
        return cls(rgba8.r / 255.0, rgba8.g / 255.0, rgba8.b / 255.0, rgba8.a / 255.0)


Rgba.RED = Rgba(1.0, 0.0, 0.0, 1.0)
Rgba.GREEN = Rgba(0.0, 1.0, 0.0, 1.0)
Rgba.BLUE = Rgba(0.0, 0.0, 1.0, 1.0)
Rgba.WHITE = Rgba(1.0, 1.0, 1.0, 1.0)
Rgba.BLACK = Rgba(0.0, 0.0, 0.0, 1.0)
Rgba.TRANSPARENT = Rgba(0.0, 0.0, 0.0, 0.0)