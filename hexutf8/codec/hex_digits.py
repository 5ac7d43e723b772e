"""
Hex digit decoding and hex string parsing.

Code points are supplied as ASCII hex strings, most significant digit
first, with two digits per byte. For example:
- "41" is U+0041 (1 byte of hex text)
- "20AC" is U+20AC (2 bytes of hex text)
- "01F600" is U+1F600 (3 bytes of hex text)
"""

from __future__ import annotations

from typing import Final

from hexutf8.codec.constants import IntegerWidth, Utf8Constants
from hexutf8.exceptions import HexParseError, InvalidDigitError, InvalidLengthError

# Pre-computed lookup table for fast decoding
_HEX_DECODE: Final[dict[str, int]] = {
    "0": 0,
    "1": 1,
    "2": 2,
    "3": 3,
    "4": 4,
    "5": 5,
    "6": 6,
    "7": 7,
    "8": 8,
    "9": 9,
    "A": 10,
    "B": 11,
    "C": 12,
    "D": 13,
    "E": 14,
    "F": 15,
    "a": 10,
    "b": 11,
    "c": 12,
    "d": 13,
    "e": 14,
    "f": 15,
}


def decode_hex_digit(char: str) -> int | None:
    """
    Decode a single ASCII hex character to its 4-bit value.

    Args:
        char: One character (case-insensitive).

    Returns:
        Digit value (0-15), or None if char is not a single hex digit
        (including non-str arguments).

    Example:
        >>> decode_hex_digit("A")
        10
        >>> decode_hex_digit("g") is None
        True
    """
    if not isinstance(char, str):
        return None
    return _HEX_DECODE.get(char)


def resolve_width(width: IntegerWidth | int) -> IntegerWidth:
    """Validate width as a supported IntegerWidth."""
    try:
        return IntegerWidth(width)
    except ValueError:
        raise ValueError(
            f"Unsupported integer width {width}, expected one of "
            f"{', '.join(str(w.value) for w in IntegerWidth)}"
        ) from None


def parse_hex(
    hex_digits: str,
    width: IntegerWidth | int = Utf8Constants.DEFAULT_WIDTH,
) -> int:
    """
    Parse a big-endian hex string into an unsigned integer.

    The length is validated before any digit is examined: it must be
    non-zero, even, and at most width // 4 digits so the result always
    fits the holder.

    Args:
        hex_digits: Hex digits without prefix or separators.
        width: Bit width of the target holder (8, 16, 32 or 64).

    Returns:
        Parsed value (0 to 2**width - 1).

    Raises:
        TypeError: If hex_digits is not a str.
        ValueError: If width is not a supported holder width.
        InvalidLengthError: If the length is zero, odd or too long.
        InvalidDigitError: If any character is not a hex digit.

    Example:
        >>> parse_hex("20AC")
        8364
        >>> parse_hex("0000")
        0
    """
    if not isinstance(hex_digits, str):
        raise TypeError(f"Expected str, got {type(hex_digits).__name__}")

    holder = resolve_width(width)
    length = len(hex_digits)
    if length == 0 or length % 2 or length > holder.max_digits:
        raise InvalidLengthError(
            f"Hex string length must be even and fit {holder.value} bits",
            length=length,
            max_length=holder.max_digits,
        )

    value = 0
    for offset, char in enumerate(hex_digits):
        digit = decode_hex_digit(char)
        if digit is None:
            raise InvalidDigitError(
                "Invalid hex digit",
                character=char,
                offset=offset,
            )
        value = (value << 4) | digit
    return value


def try_parse_hex(
    hex_digits: str,
    width: IntegerWidth | int = Utf8Constants.DEFAULT_WIDTH,
) -> int | None:
    """
    Try to parse a big-endian hex string into an unsigned integer.

    Args:
        hex_digits: Hex digits without prefix or separators.
        width: Bit width of the target holder.

    Returns:
        Parsed value, or None if the length or any digit is invalid.

    Example:
        >>> try_parse_hex("00E9")
        233
        >>> try_parse_hex("GG") is None
        True
    """
    try:
        return parse_hex(hex_digits, width)
    except HexParseError:
        return None


def format_code_point(value: int, min_digits: int = Utf8Constants.MIN_HEX_DIGITS) -> str:
    """
    Format an integer as an uppercase hex string that parse_hex accepts.

    The result is zero padded to at least min_digits and to an even length.

    Args:
        value: Non-negative integer.
        min_digits: Minimum number of digits in the result.

    Returns:
        Uppercase hex string.

    Raises:
        ValueError: If value is negative.

    Example:
        >>> format_code_point(0x41)
        '0041'
        >>> format_code_point(0x1F600)
        '01F600'
    """
    if value < 0:
        raise ValueError(f"Value must be non-negative, got {value}")

    width = max(len(f"{value:X}"), min_digits)
    width += width % 2
    return f"{value:0{width}X}"
