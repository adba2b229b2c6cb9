"""Reading and writing 8-bit RGBA PNG images."""

from __future__ import annotations

import enum
import io
import os
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Sequence

from PIL import Image

from rxpaint import pixels as _pixels
from rxpaint.color import Rgba8


class _Encoding(enum.Enum):
    PNG = "png"


@dataclass(frozen=True)
class ImagePath:
    """A path to an image file whose extension names a supported encoding."""

    _parent: str
    _name: str
    _encoding: _Encoding

    @classmethod
    def from_path(cls, p: str | os.PathLike[str]) -> ImagePath:
        """Split a path into parent, stem and encoding; raise ValueError if it has none."""
        text = os.fspath(p)
        error = ValueError(f"`{text}` is not a valid path")

        trimmed = text.rstrip("/")
        if not trimmed:
            raise error
        parent, sep, name = trimmed.rpartition("/")
        if sep and not parent:
            parent = "/"
        if name in ("", ".", ".."):
            raise error

        stem, dot, ext = name.rpartition(".")
        if not dot or not stem:
            raise error
        try:
            encoding = _Encoding(ext)
        except ValueError:
            raise error from None
        return cls(parent, stem, encoding)

    def file_stem(self) -> str:
        return self._name

    def extension(self) -> str:
        return self._encoding.value

    def parent(self) -> Path:
        return Path(self._parent)

    def __str__(self) -> str:
        if not self._parent:
            joined = self._name
        elif self._parent.endswith("/"):
            joined = self._parent + self._name
        else:
            joined = f"{self._parent}/{self._name}"
        return f"{joined}.{self._encoding.value}"


def load(path: str | os.PathLike[str]) -> tuple[bytes, int, int]:
    """Load a PNG file, returning its raw RGBA bytes, width and height."""
    shown = os.fspath(path)
    try:
        f = open(path, "rb")
    except OSError as e:
        raise type(e)(f"error opening {shown}: {e}") from e
    with f:
        try:
            return read(f)
        except ValueError as e:
            raise ValueError(f"error loading {shown}: {e}") from e


def read(reader: BinaryIO) -> tuple[bytes, int, int]:
    """Decode a PNG stream, returning its raw RGBA bytes, width and height."""
    data = reader.read()
    try:
        img = Image.open(io.BytesIO(data), formats=["PNG"])
        img.load()
    except (OSError, SyntaxError, ValueError) as e:
        raise ValueError("decoding failed") from e

    with img:
        if img.mode != "RGBA":
            raise ValueError("only 8-bit RGBA images are supported")
        width, height = img.size
        return img.tobytes(), width, height


def save_as(
    path: str | os.PathLike[str], w: int, h: int, scale: int, pixels: Sequence[Rgba8]
) -> None:
    """Encode the pixels as PNG and write them to ``path``, scaled by ``scale``."""
    with open(path, "wb") as f:
        write(f, w, h, scale, pixels)


def write(out: BinaryIO, w: int, h: int, scale: int, pixels: Sequence[Rgba8]) -> None:
    """Encode a ``w`` by ``h`` image as PNG into ``out``, scaled by ``scale``."""
    if len(pixels) != w * h:
        raise ValueError(f"image has {len(pixels)} pixels, expected {w}x{h}")
    scaled = pixels if scale == 1 else _pixels.scale(pixels, w, h, scale)
    raw = b"".join(p.to_bytes() for p in scaled)
    img = Image.frombytes("RGBA", (w * scale, h * scale), raw)
    img.save(out, format="PNG")


def load_image(path: str | os.PathLike[str]) -> tuple[int, int, list[Rgba8]]:
    """Load a PNG file, returning its width, height and pixels."""
    buffer, width, height = load(path)
    return width, height, Rgba8.align(buffer)