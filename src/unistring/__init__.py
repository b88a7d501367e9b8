"""Grapheme-aware string operations over immutable text.

Note: `unistring.slice` is the grapheme slice and shadows the built-in `slice`
for `from unistring import *`.
"""
from unistring.builder import TextBuilder
from unistring.case import Order, capitalise, compare, lowercase, reverse, uppercase
from unistring.codepoints import (
    Codepoint,
    byte_size,
    codepoint_of,
    codepoint_to_int,
    codepoints_to_text,
    from_utf8,
    text_to_codepoints,
    to_utf8,
)
from unistring.compose import (
    append,
    concat,
    contains,
    crop,
    ends_with,
    is_empty,
    join,
    pad_left,
    pad_right,
    repeat,
    replace,
    split,
    split_once,
    starts_with,
    trim,
    trim_left,
    trim_right,
)
from unistring.errors import (
    EmptyInput,
    InvalidCodepoint,
    InvalidPadding,
    InvalidUtf8,
    NotFound,
    SegmentationError,
    StringError,
)
from unistring.graphemes import first, grapheme_count, last, pop_grapheme, to_graphemes
from unistring.primitives import DEFAULT_PRIMITIVES, Primitives
from unistring.slicing import drop_left, drop_right, resolve_range, slice

__all__ = [
    "TextBuilder", "Order", "Primitives", "DEFAULT_PRIMITIVES", "Codepoint",
    "StringError", "EmptyInput", "NotFound", "InvalidCodepoint", "InvalidPadding", "InvalidUtf8",
    "SegmentationError",
    "codepoint_of", "codepoint_to_int", "text_to_codepoints", "codepoints_to_text",
    "from_utf8", "to_utf8", "byte_size",
    "pop_grapheme", "to_graphemes", "grapheme_count", "first", "last",
    "resolve_range", "slice", "drop_left", "drop_right",
    "split", "split_once", "crop", "join", "concat", "append", "repeat", "replace",
    "pad_left", "pad_right", "contains", "starts_with", "ends_with", "is_empty",
    "trim", "trim_left", "trim_right",
    "uppercase", "lowercase", "capitalise", "compare", "reverse",
]
