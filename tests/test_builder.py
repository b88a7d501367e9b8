"""Tests for TextBuilder."""
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "src"))
from unistring.builder import TextBuilder


def test_append_and_to_text():
    b = TextBuilder()
    b.append("ab").append("c").append_all(["d", "e"])
    assert b.to_text() == "abcde"
    assert str(b) == "abcde"
    assert len(b) == 4


def test_prepend():
    assert TextBuilder(["b"]).prepend("a").to_text() == "ab"


def test_reverse_reverses_pieces_only():
    b = TextBuilder(["ab", "cd", "e"]).reverse()
    assert b.to_text() == "ecdab"


def test_is_empty_and_byte_size():
    assert TextBuilder().is_empty()
    assert TextBuilder(["", ""]).is_empty()
    b = TextBuilder(["a", "\u00e9"])
    assert not b.is_empty()
    assert b.byte_size() == 3
