"""
UTF-8 encoding planes, integer widths and bit-packing constants.

Based on RFC 3629 section 3 and the Unicode Standard, chapter 3.9.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Final


class Plane(IntEnum):
    """
    UTF-8 encoding-length category of a code point.

    This is not the Unicode "plane" concept; each member names the number
    of bytes the code point needs once encoded:
    - ASCII: 1 byte (U+0000-U+007F)
    - LATIN: 2 bytes (U+0080-U+07FF)
    - MULTILINGUAL: 3 bytes (U+0800-U+FFFF, surrogates excluded)
    - EXTENDED: 4 bytes (U+10000-U+10FFFF)
    """

    ASCII = 1
    """Single byte, bit 7 clear."""

    LATIN = 2
    """Two bytes, lead prefix 110."""

    MULTILINGUAL = 3
    """Three bytes, lead prefix 1110."""

    EXTENDED = 4
    """Four bytes, lead prefix 11110."""

    INVALID = 0
    """Surrogate or out of range, not encodable."""

    @property
    def byte_count(self) -> int:
        """Number of bytes in the encoded sequence (0 for INVALID)."""
        return int(self.value)

    @property
    def is_valid(self) -> bool:
        return self is not Plane.INVALID


class IntegerWidth(IntEnum):
    """
    Fixed-width unsigned integer holders a hex string can be parsed into.

    Each hex digit carries 4 bits, so a holder of N bits accepts at most
    N // 4 digits.
    """

    UINT8 = 8
    UINT16 = 16
    UINT32 = 32
    UINT64 = 64

    @property
    def max_digits(self) -> int:
        """Maximum number of hex digits that fit the holder."""
        return self.value // 4

    @property
    def max_value(self) -> int:
        return (1 << self.value) - 1


class Utf8Constants:
    """
    Unicode range and UTF-8 packing constants.

    Contains the code point boundaries of each plane, the surrogate block
    and the lead/continuation prefixes OR-ed into the encoded bytes.
    """

    # ===== Code Point Ranges =====

    MAX_CODE_POINT: Final[int] = 0x10FFFF
    """Highest code point defined by Unicode."""

    ASCII_MAX: Final[int] = 0x7F
    """Last code point encoded in 1 byte."""

    LATIN_MAX: Final[int] = 0x7FF
    """Last code point encoded in 2 bytes."""

    MULTILINGUAL_MAX: Final[int] = 0xFFFF
    """Last code point encoded in 3 bytes."""

    SURROGATE_MIN: Final[int] = 0xD800
    """First UTF-16 surrogate, illegal in UTF-8."""

    SURROGATE_MAX: Final[int] = 0xDFFF
    """Last UTF-16 surrogate, illegal in UTF-8."""

    # ===== Byte Prefixes =====

    CONTINUATION_PREFIX: Final[int] = 0x80
    """10xxxxxx"""

    LATIN_PREFIX: Final[int] = 0xC0
    """110xxxxx"""

    MULTILINGUAL_PREFIX: Final[int] = 0xE0
    """1110xxxx"""

    EXTENDED_PREFIX: Final[int] = 0xF0
    """11110xxx"""

    # ===== Payload Masks =====

    CONTINUATION_MASK: Final[int] = 0x3F
    """6 payload bits per continuation byte."""

    LATIN_MASK: Final[int] = 0x1F
    MULTILINGUAL_MASK: Final[int] = 0x0F
    EXTENDED_MASK: Final[int] = 0x07

    # ===== Parsing =====

    DEFAULT_WIDTH: Final[IntegerWidth] = IntegerWidth.UINT32
    """Holder used by the encoder, 8 hex digits at most."""

    MIN_HEX_DIGITS: Final[int] = 4
    """Minimum digit count when formatting a code point (U+0041, not U+41)."""


LEAD_PREFIXES: Final[dict[Plane, int]] = {
    Plane.ASCII: 0x00,
    Plane.LATIN: Utf8Constants.LATIN_PREFIX,
    Plane.MULTILINGUAL: Utf8Constants.MULTILINGUAL_PREFIX,
    Plane.EXTENDED: Utf8Constants.EXTENDED_PREFIX,
}
"""Lead-byte prefix for each encodable plane."""

LEAD_MASKS: Final[dict[Plane, int]] = {
    Plane.ASCII: 0x7F,
    Plane.LATIN: Utf8Constants.LATIN_MASK,
    Plane.MULTILINGUAL: Utf8Constants.MULTILINGUAL_MASK,
    Plane.EXTENDED: Utf8Constants.EXTENDED_MASK,
}
"""Payload bits kept in the lead byte for each encodable plane."""
