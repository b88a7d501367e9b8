"""Tests for the pluggable host primitives."""
import pytest
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "src"))
from unistring.primitives import DEFAULT_PRIMITIVES, Primitives, regex_next_grapheme, resolve


def test_regex_next_grapheme():
    assert regex_next_grapheme("ab") == ("a", "b")
    assert regex_next_grapheme("e\u0301b") == ("e\u0301", "b")
    assert regex_next_grapheme("") is None
    assert regex_next_grapheme("\r\nx") == ("\r\n", "x")


def test_defaults():
    assert resolve(None) is DEFAULT_PRIMITIVES
    assert DEFAULT_PRIMITIVES.to_upper("a") == "A"
    assert DEFAULT_PRIMITIVES.to_lower("A") == "a"
    assert DEFAULT_PRIMITIVES.less_than(b"a", b"b")
    assert not DEFAULT_PRIMITIVES.less_than(b"b", b"a")


def test_replace_swaps_one_primitive():
    custom = DEFAULT_PRIMITIVES.replace(to_upper=str.swapcase)
    assert custom.to_upper("aB") == "Ab"
    assert custom.to_lower is DEFAULT_PRIMITIVES.to_lower
    assert resolve(custom) is custom


def test_replace_rejects_unknown():
    with pytest.raises(TypeError):
        DEFAULT_PRIMITIVES.replace(to_title=str.title)


def test_primitives_are_frozen():
    with pytest.raises(AttributeError):
        Primitives().to_upper = str.lower
