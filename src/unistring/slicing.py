"""Grapheme index/slice engine. Out-of-range input clamps; nothing here raises."""
from unistring.graphemes import to_graphemes
from unistring.primitives import Primitives


def resolve_range(count: int, index: int, length: int) -> tuple[int, int]:
    """Map (index, length) onto a clamped [start, stop) over `count` graphemes.

    Negative length or an index still negative after counting from the end
    gives an empty range. Everything else is clipped to [0, count].
    """
    if length < 0:
        return 0, 0
    if index < 0:
        index = count + index
        if index < 0:
            return 0, 0
    start = min(index, count)
    stop = min(index + length, count)
    return start, stop


def slice_graphemes(clusters: list[str], index: int, length: int) -> list[str]:
    start, stop = resolve_range(len(clusters), index, length)
    return clusters[start:stop]


def slice(text: str, index: int, length: int, primitives: Primitives | None = None) -> str:
    """Take `length` graphemes starting at grapheme `index` (negative counts from the end)."""
    clusters = to_graphemes(text, primitives)
    return "".join(slice_graphemes(clusters, index, length))


def drop_left(text: str, n: int, primitives: Primitives | None = None) -> str:
    """Drop the first n graphemes. n < 0 leaves text unchanged."""
    if n <= 0:
        return text
    clusters = to_graphemes(text, primitives)
    return "".join(slice_graphemes(clusters, n, len(clusters) - n))


def drop_right(text: str, n: int, primitives: Primitives | None = None) -> str:
    """Drop the last n graphemes. n < 0 leaves text unchanged."""
    if n <= 0:
        return text
    clusters = to_graphemes(text, primitives)
    return "".join(slice_graphemes(clusters, 0, len(clusters) - n))
