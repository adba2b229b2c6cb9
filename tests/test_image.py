import io

import pytest
from PIL import Image

from rxpaint.color import Rgba8
from rxpaint.image import ImagePath, load, load_image, read, save_as, write
from rxpaint.pixels import scale as scale_pixels

PIXELS = [
    Rgba8(255, 0, 0, 255),
    Rgba8(0, 255, 0, 128),
    Rgba8(0, 0, 255, 0),
    Rgba8(1, 2, 3, 4),
]


@pytest.mark.parametrize(
    "path",
    ["/", "", "..", "acme", "/acme/..", "acme/rx", ".png", "acme.yaml"],
)
def test_invalid_image_paths(path):
    with pytest.raises(ValueError):
        ImagePath.from_path(path)


@pytest.mark.parametrize(
    "path",
    [
        "../../acme.png",
        "/acme.png",
        "acme.png",
        "rx/acme.png",
        "acme.beb.png",
        ".acme.png",
    ],
)
def test_valid_image_paths_round_trip(path):
    assert str(ImagePath.from_path(path)) == path


def test_image_path_parts():
    p = ImagePath.from_path("rx/acme.beb.png")
    assert p.file_stem() == "acme.beb"
    assert p.extension() == "png"
    assert str(p.parent()) == "rx"


def test_write_produces_png_signature():
    buf = io.BytesIO()
    write(buf, 2, 2, 1, PIXELS)
    assert buf.getvalue()[:8] == b"\x89PNG\r\n\x1a\n"


def test_write_read_round_trip():
    buf = io.BytesIO()
    write(buf, 2, 2, 1, PIXELS)
    buf.seek(0)
    data, w, h = read(buf)
    assert (w, h) == (2, 2)
    assert Rgba8.align(data) == PIXELS


def test_write_scaled():
    buf = io.BytesIO()
    write(buf, 2, 2, 2, PIXELS)
    buf.seek(0)
    data, w, h = read(buf)
    assert (w, h) == (4, 4)
    assert Rgba8.align(data) == scale_pixels(PIXELS, 2, 2, 2)


def test_write_wrong_pixel_count():
    with pytest.raises(ValueError):
        write(io.BytesIO(), 3, 3, 1, PIXELS)


def test_read_rejects_non_rgba():
    buf = io.BytesIO()
    Image.new("RGB", (2, 2)).save(buf, format="PNG")
    buf.seek(0)
    with pytest.raises(ValueError, match="only 8-bit RGBA images are supported"):
        read(buf)


def test_read_rejects_garbage():
    with pytest.raises(ValueError, match="decoding failed"):
        read(io.BytesIO(b"not an image at all"))


def test_save_as_and_load_image(tmp_path):
    path = tmp_path / "out.png"
    save_as(path, 2, 2, 1, PIXELS)
    w, h, pixels = load_image(path)
    assert (w, h) == (2, 2)
    assert pixels == PIXELS


def test_load_missing_file(tmp_path):
    missing = tmp_path / "missing.png"
    with pytest.raises(OSError, match="error opening"):
        load(missing)


def test_load_invalid_file(tmp_path):
    path = tmp_path / "bad.png"
    path.write_bytes(b"garbage")
    with pytest.raises(ValueError, match="error loading"):
        load(path)