"""Windowing platform types: events, keys, modifiers, sizes and positions."""

from __future__ import annotations

import enum
import functools
import math
import sys
from dataclasses import dataclass
from typing import ClassVar, Iterable, Union


class GraphicsContext(enum.Enum):
    NONE = "none"
    GL = "gl"


_HINT_KINDS = ("resizable", "visible")


@dataclass(frozen=True)
class WindowHint:
    """A window creation hint: ``kind`` is ``"resizable"`` or ``"visible"``."""

    kind: str
    value: bool

    def __post_init__(self) -> None:
        if self.kind not in _HINT_KINDS:
            raise ValueError(f"unknown window hint: {self.kind}")


class WindowEventKind(enum.Enum):
    RESIZED = enum.auto()
    MOVED = enum.auto()
    MINIMIZED = enum.auto()
    RESTORED = enum.auto()
    CLOSE_REQUESTED = enum.auto()
    DESTROYED = enum.auto()
    RECEIVED_CHARACTER = enum.auto()
    FOCUSED = enum.auto()
    KEYBOARD_INPUT = enum.auto()
    CURSOR_MOVED = enum.auto()
    CURSOR_ENTERED = enum.auto()
    CURSOR_LEFT = enum.auto()
    MOUSE_INPUT = enum.auto()
    MOUSE_WHEEL = enum.auto()
    REDRAW_REQUESTED = enum.auto()
    READY = enum.auto()
    SCALE_FACTOR_CHANGED = enum.auto()
    NOOP = enum.auto()


_INPUT_KINDS = frozenset(
    {
        WindowEventKind.RESIZED,
        WindowEventKind.MOVED,
        WindowEventKind.MINIMIZED,
        WindowEventKind.RESTORED,
        WindowEventKind.CLOSE_REQUESTED,
        WindowEventKind.DESTROYED,
        WindowEventKind.RECEIVED_CHARACTER,
        WindowEventKind.FOCUSED,
        WindowEventKind.KEYBOARD_INPUT,
        WindowEventKind.CURSOR_MOVED,
        WindowEventKind.CURSOR_ENTERED,
        WindowEventKind.CURSOR_LEFT,
        WindowEventKind.MOUSE_INPUT,
        WindowEventKind.SCALE_FACTOR_CHANGED,
    }
)


class InputState(enum.Enum):
    PRESSED = "pressed"
    RELEASED = "released"
    REPEATED = "repeated"


@dataclass(frozen=True)
class MouseButton:
    """A mouse button: ``left``, ``right``, ``middle`` or ``other`` with a number."""

    name: str
    number: int | None = None

    LEFT: ClassVar[MouseButton]
    RIGHT: ClassVar[MouseButton]
    MIDDLE: ClassVar[MouseButton]


MouseButton.LEFT = MouseButton("left")
MouseButton.RIGHT = MouseButton("right")
MouseButton.MIDDLE = MouseButton("middle")


@functools.total_ordering
class Key(enum.Enum):
    """Symbolic name for a keyboard key; the value is its display form."""

    NUM1 = "1"
    NUM2 = "2"
    NUM3 = "3"
    NUM4 = "4"
    NUM5 = "5"
    NUM6 = "6"
    NUM7 = "7"
    NUM8 = "8"
    NUM9 = "9"
    NUM0 = "0"

    A = "a"
    B = "b"
    C = "c"
    D = "d"
    E = "e"
    F = "f"
    G = "g"
    H = "h"
    I = "i"  # noqa: E741
    J = "j"
    K = "k"
    L = "l"
    M = "m"
    N = "n"
    O = "o"  # noqa: E741
    P = "p"
    Q = "q"
    R = "r"
    S = "s"
    T = "t"
    U = "u"
    V = "v"
    W = "w"
    X = "x"
    Y = "y"
    Z = "z"

    LEFT = "<left>"
    UP = "<up>"
    RIGHT = "<right>"
    DOWN = "<down>"

    BACKSPACE = "<backspace>"
    RETURN = "<return>"
    SPACE = "<space>"
    TAB = "<tab>"
    ESCAPE = "<esc>"
    INSERT = "<insert>"
    HOME = "<home>"
    DELETE = "<delete>"
    END = "<end>"
    PAGE_DOWN = "<pgdown>"
    PAGE_UP = "<pgup>"

    APOSTROPHE = "'"
    GRAVE = "`"
    CARET = "^"
    COMMA = ","
    PERIOD = "."
    COLON = ":"
    SEMICOLON = ";"
    LBRACKET = "["
    RBRACKET = "]"
    SLASH = "/"
    BACKSLASH = "\\"

    ALT = "<alt>"
    CONTROL = "<ctrl>"
    SHIFT = "<shift>"

    EQUAL = "="
    MINUS = "-"

    UNKNOWN = "???"

    @classmethod
    def from_char(cls, c: str) -> Key:
        """Map a typed character to its key, or ``UNKNOWN``."""
        return _CHAR_KEYS.get(c, cls.UNKNOWN)

    def is_modifier(self) -> bool:
        return self in (Key.ALT, Key.CONTROL, Key.SHIFT)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Key):
            return NotImplemented
        members = list(Key)
        return members.index(self) < members.index(other)

    def __str__(self) -> str:
        return self.value


_CHAR_KEYS = {
    key.value: key
    for key in Key
    if len(key.value) == 1 and key is not Key.CARET
}
_CHAR_KEYS[" "] = Key.SPACE


@dataclass(frozen=True)
class ModifiersState:
    """The current state of the keyboard modifiers."""

    shift: bool = False
    ctrl: bool = False
    alt: bool = False
    meta: bool = False

    def __str__(self) -> str:
        parts = (
            ("<ctrl>", self.ctrl),
            ("<alt>", self.alt),
            ("<meta>", self.meta),
            ("<shift>", self.shift),
        )
        return "".join(name for name, on in parts if on)


@dataclass(frozen=True)
class KeyboardInput:
    """A keyboard input event."""

    state: InputState
    key: Key | None
    modifiers: ModifiersState = ModifiersState()


@dataclass(frozen=True)
class LogicalDelta:
    """A delta in logical pixels."""

    x: float
    y: float


PositionLike = Union["LogicalPosition", "PhysicalPosition", Iterable[float]]


def _xy(value: object) -> tuple[float, float]:
    if isinstance(value, (LogicalPosition, PhysicalPosition)):
        return value.x, value.y
    if isinstance(value, (LogicalSize, PhysicalSize)):
        return value.width, value.height
    x, y = value  # type: ignore[misc]
    return float(x), float(y)


@dataclass(frozen=True)
class LogicalPosition:
    """A position in logical pixels."""

    x: float
    y: float

    @classmethod
    def from_physical(cls, physical: PositionLike, scale_factor: float) -> LogicalPosition:
        return PhysicalPosition(*_xy(physical)).to_logical(pixel_ratio(scale_factor))

    def to_physical(self, scale_factor: float) -> PhysicalPosition:
        ratio = pixel_ratio(scale_factor)
        return PhysicalPosition(self.x * ratio, self.y * ratio)


@dataclass(frozen=True)
class PhysicalPosition:
    """A position in physical pixels."""

    x: float
    y: float

    @classmethod
    def from_logical(cls, logical: PositionLike, scale_factor: float) -> PhysicalPosition:
        return LogicalPosition(*_xy(logical)).to_physical(pixel_ratio(scale_factor))

    def to_logical(self, scale_factor: float) -> LogicalPosition:
        ratio = pixel_ratio(scale_factor)
        return LogicalPosition(self.x / ratio, self.y / ratio)


def _round_u32(value: float) -> int:
    """Round half away from zero, saturating to the unsigned 32-bit range."""
    if math.isnan(value):
        return 0
    if math.isinf(value):
        return 0 if value < 0 else 0xFFFFFFFF
    rounded = math.floor(abs(value) + 0.5)
    rounded = rounded if value >= 0 else -rounded
    return max(0, min(0xFFFFFFFF, rounded))


@dataclass(frozen=True)
class LogicalSize:
    """A size in logical pixels."""

    width: float
    height: float

    @classmethod
    def from_physical(cls, physical: object, scale_factor: float) -> LogicalSize:
        return PhysicalSize(*_xy(physical)).to_logical(pixel_ratio(scale_factor))

    def to_physical(self, scale_factor: float) -> PhysicalSize:
        ratio = pixel_ratio(scale_factor)
        return PhysicalSize(self.width * ratio, self.height * ratio)

    def is_zero(self) -> bool:
        return self.width < 1.0 or self.height < 1.0

    def to_tuple(self) -> tuple[int, int]:
        """Return the size as integers, rounding rather than truncating."""
        return _round_u32(self.width), _round_u32(self.height)


@dataclass(frozen=True)
class PhysicalSize:
    """A size in physical pixels."""

    width: float
    height: float

    @classmethod
    def from_logical(cls, logical: object, scale_factor: float) -> PhysicalSize:
        return LogicalSize(*_xy(logical)).to_physical(pixel_ratio(scale_factor))

    def to_logical(self, scale_factor: float) -> LogicalSize:
        ratio = pixel_ratio(scale_factor)
        return LogicalSize(self.width / ratio, self.height / ratio)

    def to_tuple(self) -> tuple[int, int]:
        """Return the size as integers, rounding rather than truncating."""
        return _round_u32(self.width), _round_u32(self.height)


@dataclass(frozen=True)
class WindowEvent:
    """An event from a window; only the fields relevant to ``kind`` are set."""

    kind: WindowEventKind
    size: LogicalSize | None = None
    position: LogicalPosition | None = None
    character: str | None = None
    modifiers: ModifiersState | None = None
    focused: bool | None = None
    input: KeyboardInput | None = None
    state: InputState | None = None
    button: MouseButton | None = None
    delta: LogicalDelta | None = None
    scale_factor: float | None = None

    def is_input(self) -> bool:
        """Whether the event was triggered by user input."""
        return self.kind in _INPUT_KINDS


def pixel_ratio(scale_factor: float) -> float:
    """The ratio between screen coordinates and pixels for a content scale.

    On macOS screen coordinates are scaled by the content scale; elsewhere
    they map one to one with pixels.
    """
    if sys.platform == "darwin":
        return scale_factor
    return 1.0