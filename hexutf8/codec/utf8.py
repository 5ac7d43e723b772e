"""
UTF-8 encoding of code points given as hex strings.

UTF-8 encodes a code point in one to four bytes. Writing the code point
as 000uvvvv wwwwxxxx yyyyzzzz, where each letter is a 4-bit nibble, the
bits are distributed like this:

    First       Last        Byte 1    Byte 2    Byte 3    Byte 4
    U+0000      U+007F      0yyyzzzz
    U+0080      U+07FF      110xxxyy  10yyzzzz
    U+0800      U+FFFF      1110wwww  10xxxxyy  10yyzzzz
    U+010000    U+10FFFF    11110uvv  10vvwwww  10xxxxyy  10yyzzzz

Bytes are computed from the parsed integer, so the number of digits the
caller supplies does not matter: "41", "0041" and "00000041" all encode
to b"A".

Example:
    >>> encode("20AC")
    b'\\xe2\\x82\\xac'
    >>> encode("D800") is None
    True
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from hexutf8.codec.classifier import classify
from hexutf8.codec.constants import (
    LEAD_MASKS,
    LEAD_PREFIXES,
    IntegerWidth,
    Plane,
    Utf8Constants,
)
from hexutf8.codec.hex_digits import parse_hex, resolve_width
from hexutf8.exceptions import HexUtf8Error, InvalidCodePointError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from hexutf8.models.records import EncodedCharacter

# Module logger
logger = logging.getLogger(__name__)


def encode_code_point(code_point: int) -> bytes:
    """
    Encode an integer code point as UTF-8.

    The lead byte carries the plane prefix and the highest payload bits;
    each continuation byte carries 10 followed by 6 payload bits, lowest
    bits last.

    Args:
        code_point: Integer code point.

    Returns:
        1 to 4 encoded bytes.

    Raises:
        InvalidCodePointError: If code_point is a surrogate or outside
            0-0x10FFFF.

    Example:
        >>> encode_code_point(0x10FFFF)
        b'\\xf4\\x8f\\xbf\\xbf'
    """
    plane = classify(code_point)
    if plane is Plane.INVALID:
        raise InvalidCodePointError("Code point cannot be encoded as UTF-8", code_point=code_point)

    continuation_count = plane.byte_count - 1
    lead = LEAD_PREFIXES[plane] | ((code_point >> (6 * continuation_count)) & LEAD_MASKS[plane])

    out = bytearray([lead])
    for shift in range(6 * (continuation_count - 1), -1, -6):
        out.append(
            Utf8Constants.CONTINUATION_PREFIX
            | ((code_point >> shift) & Utf8Constants.CONTINUATION_MASK)
        )
    return bytes(out)


class Utf8Encoder:
    """
    Hex string to UTF-8 encoder.

    The encoder is stateless and can be reused, including from several
    threads at once. The only setting is the width of the integer holder
    the hex string is parsed into, which bounds the accepted digit count.

    Example:
        >>> encoder = Utf8Encoder()
        >>> encoder.encode("00E9")
        b'\\xc3\\xa9'
        >>> encoder.encode_character("01F600").hex
        'F0 9F 98 80'
    """

    __slots__ = ("_width",)

    def __init__(self, width: IntegerWidth | int = Utf8Constants.DEFAULT_WIDTH) -> None:
        """
        Initialize the encoder.

        Args:
            width: Bit width of the parse holder (8, 16, 32 or 64).

        Raises:
            ValueError: If width is not a supported holder width.
        """
        self._width = resolve_width(width)
        if self._width != Utf8Constants.DEFAULT_WIDTH:
            logger.debug("Encoder using %d-bit holder", self._width.value)

    @property
    def width(self) -> IntegerWidth:
        """Bit width of the parse holder."""
        return self._width

    def encode_or_raise(self, hex_digits: str) -> bytes:
        """
        Encode a hex code point as UTF-8, raising on failure.

        Args:
            hex_digits: Even-length hex digits without prefix.

        Returns:
            1 to 4 encoded bytes.

        Raises:
            TypeError: If hex_digits is not a str.
            InvalidLengthError: If the length is zero, odd or too long.
            InvalidDigitError: If a character is not a hex digit.
            InvalidCodePointError: If the value is not encodable.
        """
        return encode_code_point(parse_hex(hex_digits, self._width))

    def encode(self, hex_digits: str) -> bytes | None:
        """
        Encode a hex code point as UTF-8.

        Every failure (bad length, bad digit, surrogate or out of range
        value) collapses to None; there is no partial output.

        Args:
            hex_digits: Even-length hex digits without prefix.

        Returns:
            1 to 4 encoded bytes, or None if the input cannot be encoded.

        Raises:
            TypeError: If hex_digits is not a str.
        """
        try:
            return self.encode_or_raise(hex_digits)
        except HexUtf8Error as e:
            logger.debug("Rejected %r: %s", hex_digits, e)
            return None

    def encode_character(self, hex_digits: str) -> EncodedCharacter:
        """
        Encode a hex code point and return it with its metadata.

        Raises:
            HexUtf8Error: If the input cannot be encoded.
        """
        from hexutf8.models.records import CodePoint, EncodedCharacter

        value = parse_hex(hex_digits, self._width)
        data = encode_code_point(value)
        return EncodedCharacter(code_point=CodePoint(value=value), data=data)

    def encode_many(self, items: Iterable[str]) -> list[bytes]:
        """
        Encode several independent hex code points.

        Each item is encoded on its own; the first failure propagates.

        Args:
            items: Hex strings, one code point each.

        Returns:
            Encoded byte sequences, in input order.

        Raises:
            HexUtf8Error: If any item cannot be encoded.
        """
        return [self.encode_or_raise(item) for item in items]

    def __repr__(self) -> str:
        return f"Utf8Encoder(width={self._width.value})"


DEFAULT_ENCODER = Utf8Encoder()
"""Shared encoder with a 32-bit holder (at most 8 hex digits)."""


def encode(hex_digits: str) -> bytes | None:
    """
    Encode a hex code point as UTF-8 using the default encoder.

    Args:
        hex_digits: Even-length hex digits without prefix, at most 8.

    Returns:
        1 to 4 encoded bytes, or None if the input cannot be encoded.

    Example:
        >>> encode("0080")
        b'\\xc2\\x80'
    """
    return DEFAULT_ENCODER.encode(hex_digits)


def encode_or_raise(hex_digits: str) -> bytes:
    """
    Encode a hex code point as UTF-8 using the default encoder.

    Raises:
        HexUtf8Error: The specific subclass for the failure.
    """
    return DEFAULT_ENCODER.encode_or_raise(hex_digits)
