"""Case mapping, byte-order comparison and grapheme reversal."""
from enum import Enum

from unistring.builder import TextBuilder
from unistring.graphemes import pop_grapheme, to_graphemes
from unistring.primitives import Primitives, resolve


class Order(Enum):
    """Result of compare()."""

    LT = -1
    EQ = 0
    GT = 1


def uppercase(text: str, primitives: Primitives | None = None) -> str:
    """Upper-case each grapheme through the case primitive."""
    to_upper = resolve(primitives).to_upper
    return TextBuilder(to_upper(g) for g in to_graphemes(text, primitives)).to_text()


def lowercase(text: str, primitives: Primitives | None = None) -> str:
    """Lower-case each grapheme through the case primitive."""
    to_lower = resolve(primitives).to_lower
    return TextBuilder(to_lower(g) for g in to_graphemes(text, primitives)).to_text()


def capitalise(text: str, primitives: Primitives | None = None) -> str:
    """Upper-case the first grapheme and lower-case the rest. Empty text stays empty."""
    if not text:
        return ""
    head, rest = pop_grapheme(text, primitives)
    return uppercase(head, primitives) + lowercase(rest, primitives)


def compare(a: str, b: str, primitives: Primitives | None = None) -> Order:
    """Order two texts by their UTF-8 bytes.

    This is byte order, not collation. EQ only for identical texts.
    """
    if a == b:
        return Order.EQ
    less_than = resolve(primitives).less_than
    if less_than(a.encode("utf-8"), b.encode("utf-8")):
        return Order.LT
    return Order.GT


def reverse(text: str, primitives: Primitives | None = None) -> str:
    """Reverse grapheme order. Multi-codepoint clusters keep their internal order."""
    return TextBuilder(to_graphemes(text, primitives)).reverse().to_text()
