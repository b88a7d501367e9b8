"""Grapheme segmentation. Every index-based operation counts in these clusters."""
from unistring.errors import EmptyInput, SegmentationError
from unistring.primitives import GRAPHEME_PATTERN, Primitives, regex_next_grapheme, resolve


def _next(prims: Primitives, text: str) -> tuple[str, str] | None:
    """Run the segmentation primitive and check it split text losslessly."""
    popped = prims.next_grapheme(text)
    if popped is None:
        if text:
            raise SegmentationError(f"primitive gave up with {len(text)} character(s) left")
        return None
    cluster, rest = popped
    if not cluster:
        raise SegmentationError("primitive returned an empty cluster")
    if cluster + rest != text:
        raise SegmentationError("cluster and remainder do not rebuild the input")
    return cluster, rest


def pop_grapheme(text: str, primitives: Primitives | None = None) -> tuple[str, str]:
    """Return (first grapheme, remainder). Raises EmptyInput on empty text."""
    if not text:
        raise EmptyInput("pop_grapheme")
    return _next(resolve(primitives), text)


def to_graphemes(text: str, primitives: Primitives | None = None) -> list[str]:
    """Split text into grapheme clusters, in order. Joining them gives text back."""
    if not text:
        return []
    prims = resolve(primitives)
    if prims.next_grapheme is regex_next_grapheme:
        # Same clusters as repeated popping, in one pass.
        return GRAPHEME_PATTERN.findall(text)
    clusters = []
    rest = text
    while rest:
        cluster, rest = _next(prims, rest)
        clusters.append(cluster)
    return clusters


def grapheme_count(text: str, primitives: Primitives | None = None) -> int:
    """Number of grapheme clusters in text.

    Linear time: text is not pre-segmented, so every call walks the whole string.
    Cache the result if you need it more than once.
    """
    return len(to_graphemes(text, primitives))


def first(text: str, primitives: Primitives | None = None) -> str:
    """First grapheme. Raises EmptyInput on empty text."""
    if not text:
        raise EmptyInput("first")
    return pop_grapheme(text, primitives)[0]


def last(text: str, primitives: Primitives | None = None) -> str:
    """Last grapheme. Raises EmptyInput on empty text."""
    clusters = to_graphemes(text, primitives)
    if not clusters:
        raise EmptyInput("last")
    return clusters[-1]
