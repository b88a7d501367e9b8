"""Split, join, replace, pad and friends. Output assembled from many pieces goes through TextBuilder."""
import logging
from typing import Iterable

from unistring.builder import TextBuilder
from unistring.errors import InvalidPadding, NotFound
from unistring.graphemes import grapheme_count, to_graphemes
from unistring.primitives import Primitives

logger = logging.getLogger(__name__)


def split(text: str, on: str, primitives: Primitives | None = None) -> list[str]:
    """Split on every non-overlapping occurrence of `on`, keeping empty fields.

    `on` is matched as a plain substring, not grapheme by grapheme.
    An empty `on` splits text into its graphemes.
    """
    if on == "":
        return to_graphemes(text, primitives)
    return text.split(on)


def split_once(text: str, on: str) -> tuple[str, str]:
    """Split at the first occurrence of `on`. Raises NotFound when it is absent.

    An empty `on` never matches.
    """
    if on == "":
        raise NotFound(on)
    before, sep, after = text.partition(on)
    if not sep:
        raise NotFound(on)
    return before, after


def crop(text: str, before: str) -> str:
    """Suffix of text starting at the first occurrence of `before`.

    Returns text unchanged when `before` is absent or empty; unlike split_once
    this never raises.
    """
    if before == "":
        return text
    pos = text.find(before)
    if pos < 0:
        return text
    return text[pos:]


def concat(texts: Iterable[str]) -> str:
    return TextBuilder(texts).to_text()


def join(texts: Iterable[str], with_: str) -> str:
    """Concatenate texts with `with_` between each pair."""
    builder = TextBuilder()
    for i, text in enumerate(texts):
        if i:
            builder.append(with_)
        builder.append(text)
    return builder.to_text()


def append(first: str, second: str) -> str:
    return first + second


def repeat(text: str, times: int) -> str:
    """`times` copies of text. times <= 0 gives empty text."""
    if times <= 0:
        return ""
    return TextBuilder([text] * times).to_text()


def replace(text: str, each: str, with_: str) -> str:
    """Replace every non-overlapping occurrence of `each`. An empty pattern matches nowhere."""
    if each == "":
        return text
    return join(text.split(each), with_)


def _padding(text: str, to: int, with_: str, primitives: Primitives | None) -> str:
    deficit = to - grapheme_count(text, primitives)
    if deficit <= 0:
        return ""
    pad_clusters = to_graphemes(with_, primitives)
    if not pad_clusters:
        raise InvalidPadding(deficit)
    whole, partial = divmod(deficit, len(pad_clusters))
    logger.debug("Padding %d grapheme(s): %d whole + %d partial", deficit, whole, partial)
    builder = TextBuilder([with_] * whole)
    builder.append_all(pad_clusters[:partial])
    return builder.to_text()


def pad_left(text: str, to: int, with_: str, primitives: Primitives | None = None) -> str:
    """Pad the front of text with `with_` until it is `to` graphemes long."""
    return _padding(text, to, with_, primitives) + text


def pad_right(text: str, to: int, with_: str, primitives: Primitives | None = None) -> str:
    """Pad the end of text with `with_` until it is `to` graphemes long."""
    return text + _padding(text, to, with_, primitives)


def contains(text: str, substring: str) -> bool:
    return substring in text


def starts_with(text: str, prefix: str) -> bool:
    return text.startswith(prefix)


def ends_with(text: str, suffix: str) -> bool:
    return text.endswith(suffix)


def is_empty(text: str) -> bool:
    return text == ""


def trim(text: str) -> str:
    """Strip Unicode whitespace from both ends."""
    return text.strip()


def trim_left(text: str) -> str:
    return text.lstrip()


def trim_right(text: str) -> str:
    return text.rstrip()
