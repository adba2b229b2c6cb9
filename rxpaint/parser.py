"""Parser combinators for the command language and its argument types."""

from __future__ import annotations

import os
import re
from typing import Any, Callable, Generic, TypeVar

from rxpaint.color import Rgba8
from rxpaint.platform import InputState, Key

T = TypeVar("T")
U = TypeVar("U")

# Whether a leading `~` in a path stands for the home directory.
_EXPAND_HOME = os.name == "posix"

_RATIONAL = re.compile(r"[0-9]+(?:\.[0-9]+)?")


class ParseError(ValueError):
    """Raised when input does not match what a parser expects."""

    def __init__(self, message: str, remaining: str = "", expected: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.remaining = remaining
        self.expected = expected


def _mismatch(expected: str, text: str) -> ParseError:
    found = repr(text[0]) if text else "end of input"
    return ParseError(f"expected {expected}, got {found}", text, expected)


class Parser(Generic[T]):
    """A parser turning the start of a string into a value and the remaining input."""

    def __init__(self, run: Callable[[str], tuple[T, str]], name: str = "<parser>") -> None:
        self._run = run
        self.name = name

    def parse(self, text: str) -> tuple[T, str]:
        """Parse the start of ``text``, returning the value and the rest."""
        return self._run(text)

    def then(self, other: Parser[U]) -> Parser[tuple[T, U]]:
        """Run this parser, then ``other``, and pair their values."""

        def run(text: str) -> tuple[tuple[T, U], str]:
            a, rest = self._run(text)
            b, rest = other.parse(rest)
            return (a, b), rest

        return Parser(run, self.name)

    def skip(self, other: Parser[Any]) -> Parser[T]:
        """Run this parser, then ``other``, keeping only this parser's value."""

        def run(text: str) -> tuple[T, str]:
            a, rest = self._run(text)
            _, rest = other.parse(rest)
            return a, rest

        return Parser(run, self.name)

    def map(self, f: Callable[[T], U]) -> Parser[U]:
        """Transform the parsed value with ``f``."""

        def run(text: str) -> tuple[U, str]:
            value, rest = self._run(text)
            return f(value), rest

        return Parser(run, self.name)

    def try_map(self, f: Callable[[T], U]) -> Parser[U]:
        """Transform the parsed value with ``f``; a ValueError from ``f`` fails the parse."""

        def run(text: str) -> tuple[U, str]:
            value, rest = self._run(text)
            try:
                return f(value), rest
            except ValueError as e:
                raise ParseError(str(e), text) from None

        return Parser(run, self.name)

    def label(self, name: str) -> Parser[T]:
        """Name what this parser expects, for error messages on mismatch."""

        def run(text: str) -> tuple[T, str]:
            try:
                return self._run(text)
            except ParseError as e:
                if e.expected is None:
                    raise
                raise _mismatch(name, text) from None

        return Parser(run, name)

    def or_else(self, other: Parser[T]) -> Parser[T]:
        """Try this parser, and ``other`` if it fails."""

        def run(text: str) -> tuple[T, str]:
            try:
                return self._run(text)
            except ParseError:
                return other.parse(text)

        return Parser(run, self.name)


def _satisfy(pred: Callable[[str], bool], expected: str) -> Parser[str]:
    def run(text: str) -> tuple[str, str]:
        if text and pred(text[0]):
            return text[0], text[1:]
        raise _mismatch(expected, text)

    return Parser(run, expected)


def _repeat(p: Parser[Any], minimum: int, collect: Callable[[list[Any]], Any]) -> Parser[Any]:
    def run(text: str) -> tuple[Any, str]:
        items: list[Any] = []
        rest = text
        while True:
            try:
                item, nxt = p.parse(rest)
            except ParseError:
                if len(items) < minimum:
                    raise
                break
            items.append(item)
            if nxt == rest:
                break
            rest = nxt
        return collect(items), rest

    return Parser(run, p.name)


def _string(s: str) -> Parser[str]:
    expected = repr(s)

    def run(text: str) -> tuple[str, str]:
        if text.startswith(s):
            return s, text[len(s):]
        raise _mismatch(expected, text)

    return Parser(run, expected)


def _optional(p: Parser[T]) -> Parser[T | None]:
    def run(text: str) -> tuple[T | None, str]:
        try:
            return p.parse(text)
        except ParseError:
            return None, text

    return Parser(run, p.name)


def _end() -> Parser[None]:
    def run(text: str) -> tuple[None, str]:
        if text:
            raise _mismatch("end of input", text)
        return None, text

    return Parser(run, "end of input")


def _until(p: Parser[Any]) -> Parser[str]:
    """Consume characters until ``p`` would match; ``p`` itself is not consumed."""

    def run(text: str) -> tuple[str, str]:
        i = 0
        while True:
            try:
                p.parse(text[i:])
            except ParseError:
                if i >= len(text):
                    raise
                i += 1
            else:
                return text[:i], text[i:]

    return Parser(run, p.name)


def _between(left: str, right: str, p: Parser[T]) -> Parser[T]:
    return _string(left).then(p).skip(_string(right)).map(lambda pair_: pair_[1])


def _character() -> Parser[str]:
    return _satisfy(lambda c: True, "<character>")


def _letter() -> Parser[str]:
    return _satisfy(str.isalpha, "<letter>")


def _natural() -> Parser[int]:
    digits = _repeat(_satisfy(lambda c: c in "0123456789", "<digit>"), 1, "".join)
    return digits.map(int).label("<natural>")


def _rational() -> Parser[float]:
    def run(text: str) -> tuple[float, str]:
        m = _RATIONAL.match(text)
        if m is None:
            raise _mismatch("<rational>", text)
        return float(m.group()), text[m.end():]

    return Parser(run, "<rational>")


def identifier() -> Parser[str]:
    """One or more ASCII letters, slashes or dashes."""
    chars = _satisfy(
        lambda c: (c.isascii() and c.isalpha()) or c in "/-", "<identifier>"
    )
    return _repeat(chars, 1, "".join).label("<identifier>")


def word() -> Parser[str]:
    """One or more letters."""
    return _repeat(_letter(), 1, "".join)


def token() -> Parser[str]:
    """One or more non-whitespace characters."""
    return _repeat(_satisfy(lambda c: not c.isspace(), "!<whitespace>"), 1, "".join)


def whitespace() -> Parser[str]:
    """One or more whitespace characters."""
    return _repeat(_satisfy(str.isspace, "<whitespace>"), 1, "".join)


def comment() -> Parser[str]:
    """A ``--`` comment; the value is the text after it."""
    return (
        _string("--")
        .skip(_optional(whitespace()))
        .then(_until(_end()))
        .map(lambda pair_: pair_[1])
    )


def scale() -> Parser[int]:
    """A scale such as ``@2x``."""
    return (
        _string("@")
        .then(_natural())
        .skip(_string("x"))
        .label("@<scale>")
        .map(lambda pair_: pair_[1])
    )


def _expand_path(text: str) -> str:
    if _EXPAND_HOME and text.startswith("~"):
        home = os.path.expanduser("~")
        if home != "~":
            return home + text[1:]
    return text


def path() -> Parser[str]:
    """A path token; a leading ``~`` stands for the home directory."""
    return token().map(_expand_path).label("<path>")


def paths() -> Parser[list[str]]:
    """Zero or more whitespace-separated paths."""
    return _repeat(path().skip(_optional(whitespace())), 0, list).label("<path>..")


def quoted() -> Parser[str]:
    """A double-quoted string; the value excludes the quotes."""
    return _between('"', '"', _until(_string('"')))


def setting() -> Parser[str]:
    """The name of a setting."""
    return identifier().label("<setting>")


def _to_color(text: str) -> Rgba8:
    if not text:
        raise ValueError("expected color")
    if len(text) < 7:
        raise ValueError(f"{text!r} is not a valid color value")
    code, alpha = text[:7], text[7:]
    try:
        color = Rgba8.from_str(code)
    except ValueError:
        raise ValueError(f"malformed color value `{code}`") from None
    try:
        (_, a), _ = _string("/").then(_rational()).parse(alpha)
    except ParseError:
        return color
    return color.alpha(max(0, min(0xFF, int(a * 0xFF))))


def color() -> Parser[Rgba8]:
    """A color such as ``#ff0000``, optionally followed by ``/<alpha>`` in [0, 1]."""
    return token().try_map(_to_color).label("<color>")


_CONTROL_KEYS = {
    "up": Key.UP,
    "down": Key.DOWN,
    "left": Key.LEFT,
    "right": Key.RIGHT,
    "ctrl": Key.CONTROL,
    "alt": Key.ALT,
    "shift": Key.SHIFT,
    "space": Key.SPACE,
    "return": Key.RETURN,
    "backspace": Key.BACKSPACE,
    "tab": Key.TAB,
    "end": Key.END,
    "esc": Key.ESCAPE,
}


def _control_key(name: str) -> Key:
    try:
        return _CONTROL_KEYS[name]
    except KeyError:
        raise ValueError(f"unknown key <{name}>") from None


def _char_key(c: str) -> Key:
    k = Key.from_char(c)
    if k is Key.UNKNOWN:
        raise ValueError(f"unknown key {c!r}")
    return k


def key() -> Parser[Key]:
    """A key: a single character or a named key such as ``<ctrl>``."""
    control = _between("<", ">", _repeat(_letter(), 0, "".join)).try_map(_control_key)
    alphanum = _character().try_map(_char_key)
    return control.or_else(alphanum).label("<key>")


_INPUT_STATES = {state.value: state for state in InputState}


def _input_state(w: str) -> InputState:
    try:
        return _INPUT_STATES[w]
    except KeyError:
        raise ValueError(f"unknown input state: {w}") from None


def input_state() -> Parser[InputState]:
    """One of ``pressed``, ``released`` or ``repeated``."""
    return word().try_map(_input_state)


def pair(x: Parser[T], y: Parser[T]) -> Parser[tuple[T, T]]:
    """Two values separated by whitespace."""
    return x.skip(whitespace()).then(y)