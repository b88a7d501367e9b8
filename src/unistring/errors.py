"""Errors raised by unistring. Everything not listed here clamps instead of failing."""


class StringError(ValueError):
    """Base class for all unistring failures."""


class EmptyInput(StringError):
    """Operation needs at least one grapheme but got empty text."""

    def __init__(self, operation: str):
        super().__init__(f"{operation}: empty input")
        self.operation = operation


class NotFound(StringError):
    """Separator is absent from the text."""

    def __init__(self, needle: str):
        super().__init__(f"substring not found: {needle!r}")
        self.needle = needle


class InvalidCodepoint(StringError):
    """Integer is not a Unicode scalar value (or is a reserved noncharacter)."""

    def __init__(self, value: int):
        super().__init__(f"invalid codepoint: {value!r}")
        self.value = value


class InvalidPadding(StringError):
    """Asked to pad with empty text while a positive deficit remains."""

    def __init__(self, deficit: int):
        super().__init__(f"cannot pad {deficit} grapheme(s) with empty text")
        self.deficit = deficit


class InvalidUtf8(StringError):
    """Raw bytes are not well-formed UTF-8."""

    def __init__(self, reason: str):
        super().__init__(f"invalid UTF-8: {reason}")
        self.reason = reason


class SegmentationError(StringError):
    """A segmentation primitive broke its contract (no progress or dropped text)."""

    def __init__(self, reason: str):
        super().__init__(f"grapheme segmentation failed: {reason}")
        self.reason = reason
