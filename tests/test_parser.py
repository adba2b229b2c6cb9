import pytest

import rxpaint.parser as parser_module
from rxpaint.color import Rgba8
from rxpaint.parser import (
    ParseError,
    color,
    comment,
    identifier,
    input_state,
    key,
    pair,
    path,
    paths,
    quoted,
    scale,
    setting,
    token,
    whitespace,
    word,
)
from rxpaint.platform import InputState, Key


def test_paths():
    out, rest = paths().parse("path/one.png path/two.png path/three.png")
    assert rest == ""
    assert out == ["path/one.png", "path/two.png", "path/three.png"]


def test_paths_empty():
    assert paths().parse("") == ([], "")


def test_color():
    p = color().skip(whitespace()).then(color())
    (a, b), rest = p.parse("#ffaa44/0.5 #141414")
    assert rest == ""
    assert a == Rgba8(0xFF, 0xAA, 0x44, 127)
    assert b == Rgba8(0x14, 0x14, 0x14, 255)


def test_color_without_alpha():
    assert color().parse("#ff0000 rest") == (Rgba8.RED, " rest")


def test_color_too_short():
    with pytest.raises(ParseError, match="not a valid color value"):
        color().parse("#fff")


def test_color_malformed():
    with pytest.raises(ParseError, match="malformed color value"):
        color().parse("#gggggg")


def test_color_empty_input_uses_label():
    with pytest.raises(ParseError, match="<color>"):
        color().parse("")


def test_identifier():
    assert identifier().parse("brush/set-mode erase") == ("brush/set-mode", " erase")


def test_identifier_rejects_digits():
    with pytest.raises(ParseError, match="<identifier>"):
        identifier().parse("123")


def test_setting_label():
    with pytest.raises(ParseError, match="<setting>"):
        setting().parse("")


def test_word_and_token():
    assert word().parse("abc1") == ("abc", "1")
    assert token().parse("a/b.png next") == ("a/b.png", " next")


def test_whitespace_requires_one():
    assert whitespace().parse("  x") == ("  ", "x")
    with pytest.raises(ParseError):
        whitespace().parse("x")


def test_comment():
    assert comment().parse("-- hello world") == ("hello world", "")


def test_scale():
    assert scale().parse("@2x") == (2, "")
    with pytest.raises(ParseError):
        scale().parse("@2")


def test_quoted():
    assert quoted().parse('"hi there" x') == ("hi there", " x")
    with pytest.raises(ParseError):
        quoted().parse('"unterminated')


def test_key_named_and_char():
    assert key().parse("<ctrl>") == (Key.CONTROL, "")
    assert key().parse("a") == (Key.A, "")
    assert key().parse("<esc>x") == (Key.ESCAPE, "x")


def test_key_unknown():
    with pytest.raises(ParseError):
        key().parse("<foo>")


def test_input_state():
    assert input_state().parse("pressed") == (InputState.PRESSED, "")
    assert input_state().parse("repeated") == (InputState.REPEATED, "")
    with pytest.raises(ParseError, match="unknown input state"):
        input_state().parse("bogus")


def test_pair():
    assert pair(word(), word()).parse("a b") == (("a", "b"), "")


def test_path_plain():
    assert path().parse("rx/acme.png") == ("rx/acme.png", "")


def test_path_home(monkeypatch):
    monkeypatch.setattr(parser_module, "_EXPAND_HOME", True)
    monkeypatch.setenv("HOME", "/home/someone")
    monkeypatch.setenv("USERPROFILE", "/home/someone")
    out, _ = path().parse("~/pics")
    assert out.endswith("/pics")
    assert out.startswith("/home/someone")


def test_combinators():
    p = word().map(str.upper).or_else(token())
    assert p.parse("abc") == ("ABC", "")
    assert p.parse("123") == ("123", "")
    bad = word().try_map(int)
    with pytest.raises(ParseError):
        bad.parse("abc")