# rxpaint

Building blocks of a minimalist pixel editor, as a Python library.

## Modules

- `rxpaint.color`: `Rgba8` (8-bit channels), `Rgb8` and `Rgba` (normalized floats).
  `Rgba8.from_str` parses `#rrggbb`; `str()` gives the hex code, with the alpha byte
  appended only when it is not `ff`. `Rgba8.align` splits a byte buffer into colors.
- `rxpaint.algebra`: `Vector2`, `Vector3`, `Vector4`, `Point2`, a column-major `Matrix4`
  (identity, translation, scale, orthographic projection via `Matrix4.ortho` and `Ortho`)
  and the `Origin` enum.
- `rxpaint.rect`: `Rect`, with width, height, area, min/max corners, center, containment,
  intersection, expansion and flipping.
- `rxpaint.pixels`: `scale`, nearest-neighbour scaling of a row-major pixel list.
- `rxpaint.shape2d`: lines, rectangles and circles (`Shape`) with stroke, fill, depth and
  rotation, triangulated into `Vertex` lists; `Batch` collects shapes.
- `rxpaint.sprite2d`: textured `Sprite`s and a `Batch` that turns them into six vertices
  each; texture repeat (`Repeat`) is only allowed over the whole texture.
- `rxpaint.image`: `read`, `load`, `write`, `save_as` and `load_image` for 8-bit RGBA PNG
  images (using Pillow); `ImagePath.from_path` checks that a path names a `.png` file.
- `rxpaint.history`: `History`, a bounded command history, newest first, with prefix
  search (`prev`, `next`) and `load`/`save` to a file.
- `rxpaint.parser`: small parser combinators (`Parser`, `ParseError`) and parsers for
  identifiers, words, tokens, whitespace, comments, scales (`@2x`), paths (a leading `~`
  is the home directory on POSIX), quoted strings, settings, colors, keys and input
  states.
- `rxpaint.palette`: `Palette`, up to 256 colors, with gradients and tracking of the
  color under the cursor.
- `rxpaint.platform`: `Key`, `ModifiersState`, `KeyboardInput`, `InputState`,
  `MouseButton`, `WindowEvent`, logical and physical sizes and positions, and
  `pixel_ratio`.
- `rxpaint.logger`: `init(level)` installs a root-logger handler that writes
  timestamped lines, errors to stderr and the rest to stdout. Calling it twice raises
  `SetLoggerError`.

## Installation

```
pip install rxpaint
```

## Examples

```python
from rxpaint.color import Rgba8
from rxpaint.rect import Rect

red = Rgba8.from_str("#ff0000")
print(red.invert())                          # #00ffff

r = Rect(1, 1, 6, 6)
print(r.intersection(Rect(0, 0, 3, 3)))      # Rect(x1=1, y1=1, x2=3, y2=3)
```

Parsing colors:

```python
from rxpaint.parser import color, whitespace

(a, b), rest = color().skip(whitespace()).then(color()).parse("#ffaa44/0.5 #141414")
```

`a` is `#ffaa44` with alpha 127, `b` is `#141414` with alpha 255, and `rest` is `""`.

Command history:

```python
from rxpaint.history import History

h = History("history.txt", 16)
h.add("first")
h.add("second")
h.prev("")   # "second"
h.prev("")   # "first"
h.save()     # writes "first\nsecond\n"
```

PNG images:

```python
from rxpaint.color import Rgba8
from rxpaint.image import load_image, save_as

save_as("out.png", 2, 1, 4, [Rgba8(255, 0, 0, 255), Rgba8(0, 0, 255, 255)])
width, height, pixels = load_image("out.png")   # 8, 4, [...]
```

Only 8-bit RGBA PNG images can be read; others raise `ValueError`.

## What this package does not do

It is a library with no command to run. It opens no window, reads no real input
devices and renders nothing: the shape and sprite batches produce vertex lists, and
`rxpaint.platform` only describes events and sizes. There is no editing session,
no command interpreter and no drawing tools.

## Running the tests

```
pip install -e ".[test]"
pytest
```