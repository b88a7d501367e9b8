"""Growable text builder. Appends are amortized O(1); the join happens once in to_text()."""
from typing import Iterable


class TextBuilder:
    """Accumulates text pieces without repeated whole-string concatenation."""

    def __init__(self, pieces: Iterable[str] | None = None):
        self._pieces: list[str] = list(pieces) if pieces is not None else []

    def append(self, text: str) -> "TextBuilder":
        """Add text at the end."""
        self._pieces.append(text)
        return self

    def append_all(self, texts: Iterable[str]) -> "TextBuilder":
        """Add every text at the end, in order."""
        self._pieces.extend(texts)
        return self

    def prepend(self, text: str) -> "TextBuilder":
        """Add text at the front. Linear in the number of pieces."""
        self._pieces.insert(0, text)
        return self

    def reverse(self) -> "TextBuilder":
        """Reverse the order of pieces in place. Pieces themselves are untouched."""
        self._pieces.reverse()
        return self

    def is_empty(self) -> bool:
        return not any(self._pieces)

    def byte_size(self) -> int:
        return sum(len(p.encode("utf-8")) for p in self._pieces)

    def to_text(self) -> str:
        return "".join(self._pieces)

    def __len__(self) -> int:
        return len(self._pieces)

    def __str__(self) -> str:
        return self.to_text()
