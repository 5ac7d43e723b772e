"""
Exception hierarchy for hexutf8.

All exceptions inherit from HexUtf8Error, providing a clean hierarchy
for error handling:

1. Input text errors (bad digit, bad length) derive from HexParseError
2. Code point legality errors are distinct from text errors
3. Every exception carries the context needed to report the failure
4. Every exception exposes an ErrorKind for uniform handling
"""

from __future__ import annotations

from enum import Enum, auto


class ErrorKind(Enum):
    """Failure classes of the hex to UTF-8 pipeline."""

    INVALID_DIGIT = auto()
    """A character outside the hex alphabet."""

    INVALID_LENGTH = auto()
    """Zero, odd, or longer than the target holder allows."""

    INVALID_CODE_POINT = auto()
    """Surrogate or outside 0-0x10FFFF."""


class HexUtf8Error(Exception):
    """
    Base exception for all hexutf8 errors.

    All library-specific exceptions inherit from this class, allowing
    callers to catch all hexutf8 errors with a single except clause.
    """

    kind: ErrorKind


class HexParseError(HexUtf8Error):
    """
    Hex string parsing error.

    Raised when the input text cannot be parsed into an integer, such as:
    - Empty or odd-length input
    - Input longer than the target integer width allows
    - A character that is not a hex digit
    """

    pass


class InvalidDigitError(HexParseError):
    """
    Non-hex character in the input.

    Only 0-9, a-f and A-F are accepted; the offending character and its
    offset in the input are kept for reporting.
    """

    kind = ErrorKind.INVALID_DIGIT

    def __init__(
        self,
        message: str = "Invalid hex digit",
        *,
        character: str | None = None,
        offset: int | None = None,
    ) -> None:
        super().__init__(message)
        self.character = character
        self.offset = offset

    def __str__(self) -> str:
        parts = [super().__str__()]
        if self.character is not None:
            parts.append(f"character={self.character!r}")
        if self.offset is not None:
            parts.append(f"offset={self.offset}")
        return " ".join(parts) if len(parts) > 1 else parts[0]


class InvalidLengthError(HexParseError):
    """
    Hex string has an unusable length.

    Raised when the input is empty, has an odd number of digits, or has
    more digits than the target integer width can hold.
    """

    kind = ErrorKind.INVALID_LENGTH

    def __init__(
        self,
        message: str = "Invalid hex string length",
        *,
        length: int | None = None,
        max_length: int | None = None,
    ) -> None:
        super().__init__(message)
        self.length = length
        self.max_length = max_length

    def __str__(self) -> str:
        base = super().__str__()
        if self.length is not None and self.max_length is not None:
            return f"{base} (got {self.length}, expected even length 2-{self.max_length})"
        return base


class InvalidCodePointError(HexUtf8Error):
    """
    Code point cannot be encoded as UTF-8.

    Raised for values in the UTF-16 surrogate block (U+D800-U+DFFF) and
    for values outside 0-0x10FFFF.
    """

    kind = ErrorKind.INVALID_CODE_POINT

    def __init__(
        self,
        message: str = "Invalid code point",
        *,
        code_point: int | None = None,
    ) -> None:
        super().__init__(message)
        self.code_point = code_point

    def __str__(self) -> str:
        base = super().__str__()
        if self.code_point is not None:
            if self.code_point < 0:
                return f"{base} ({self.code_point})"
            return f"{base} (0x{self.code_point:04X})"
        return base
