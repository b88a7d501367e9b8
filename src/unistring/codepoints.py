"""Codepoint model: scalar-value validation and text <-> codepoint conversion."""
from dataclasses import dataclass

from unistring.errors import InvalidCodepoint, InvalidUtf8

MAX_CODEPOINT = 0x10FFFF
SURROGATE_START = 0xD800
SURROGATE_END = 0xDFFF
# Noncharacters rejected by codepoint_of alongside surrogates.
RESERVED = (0xFFFE, 0xFFFF)


def is_scalar_value(value: int) -> bool:
    """Check if value is an int in [0, 0x10FFFF] outside the surrogate range."""
    if isinstance(value, bool) or not isinstance(value, int):
        return False
    if value < 0 or value > MAX_CODEPOINT:
        return False
    return not SURROGATE_START <= value <= SURROGATE_END


def is_valid_codepoint(value: int) -> bool:
    """Check if value is a scalar value accepted by codepoint_of."""
    return is_scalar_value(value) and value not in RESERVED


@dataclass(frozen=True, order=True)
class Codepoint:
    """A Unicode scalar value. Build with codepoint_of().

    Direct construction still rejects surrogates and out-of-range values, so
    every Codepoint encodes to UTF-8.
    """

    value: int

    def __post_init__(self):
        if not is_scalar_value(self.value):
            raise InvalidCodepoint(self.value)

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return chr(self.value)

    def __repr__(self) -> str:
        return f"Codepoint(U+{self.value:04X})"


def codepoint_of(value: int) -> Codepoint:
    """Validate value and wrap it. Raises InvalidCodepoint outside the scalar set."""
    if not is_valid_codepoint(value):
        raise InvalidCodepoint(value)
    return Codepoint(value)


def codepoint_to_int(cp: Codepoint) -> int:
    return cp.value


def text_to_codepoints(text: str) -> list[Codepoint]:
    """Decode text left to right.

    Decoded characters are scalar values already, so no validation runs here.
    U+FFFE/U+FFFF can appear in text and round-trip even though codepoint_of
    refuses them.
    """
    return [Codepoint(ord(ch)) for ch in text]


def codepoints_to_text(codepoints) -> str:
    """Encode each codepoint and concatenate."""
    return "".join(chr(cp.value) for cp in codepoints)


def from_utf8(data: bytes) -> str:
    """Strictly decode raw bytes into text. Raises InvalidUtf8 on malformed input."""
    try:
        return bytes(data).decode("utf-8", errors="strict")
    except UnicodeDecodeError as e:
        raise InvalidUtf8(f"{e.reason} at byte {e.start}") from e


def to_utf8(text: str) -> bytes:
    return text.encode("utf-8")


def byte_size(text: str) -> int:
    """Number of bytes in the UTF-8 encoding of text."""
    return len(text.encode("utf-8"))
