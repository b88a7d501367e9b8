"""Host primitives the string core delegates to: segmentation, case mapping, byte ordering.

Swap any of them by building a Primitives value and passing it as `primitives=`
to the operations that use it.
"""
import logging
import dataclasses
from dataclasses import dataclass
from typing import Callable

import regex

logger = logging.getLogger(__name__)

# Extended grapheme cluster (UAX #29), anchored at the start of the text.
GRAPHEME_PATTERN = regex.compile(r"\X")


def regex_next_grapheme(text: str) -> tuple[str, str] | None:
    """Split off the first extended grapheme cluster. None when text is empty."""
    if not text:
        return None
    cluster = GRAPHEME_PATTERN.match(text).group(0)
    return cluster, text[len(cluster):]


def str_upper(text: str) -> str:
    return text.upper()


def str_lower(text: str) -> str:
    return text.lower()


def bytes_less_than(a: bytes, b: bytes) -> bool:
    """Lexicographic comparison of encoded bytes."""
    return a < b


@dataclass(frozen=True)
class Primitives:
    """Bundle of pluggable host collaborators."""

    next_grapheme: Callable[[str], tuple[str, str] | None] = regex_next_grapheme
    to_upper: Callable[[str], str] = str_upper
    to_lower: Callable[[str], str] = str_lower
    less_than: Callable[[bytes, bytes], bool] = bytes_less_than

    def replace(self, **changes) -> "Primitives":
        """Return a copy with some primitives swapped out."""
        logger.debug("Primitives override: %s", ", ".join(sorted(changes)))
        return dataclasses.replace(self, **changes)


DEFAULT_PRIMITIVES = Primitives()


def resolve(primitives: Primitives | None) -> Primitives:
    """Return primitives, or the defaults when None."""
    return DEFAULT_PRIMITIVES if primitives is None else primitives
