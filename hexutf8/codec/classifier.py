"""
Code point classification into UTF-8 planes.

UTF-8 prohibits encoding U+D800-U+DFFF (the UTF-16 surrogate block), so
the 3-byte range is split around it.
"""

from __future__ import annotations

from hexutf8.codec.constants import Plane, Utf8Constants


def is_surrogate(code_point: int) -> bool:
    """Check if the code point lies in the UTF-16 surrogate block."""
    return Utf8Constants.SURROGATE_MIN <= code_point <= Utf8Constants.SURROGATE_MAX


def classify(code_point: int) -> Plane:
    """
    Determine the UTF-8 plane of a code point.

    This is a total function: surrogates, negative values and values
    above U+10FFFF classify as Plane.INVALID rather than raising.

    Args:
        code_point: Integer code point.

    Returns:
        The plane the code point is encoded in.

    Example:
        >>> classify(0x41)
        <Plane.ASCII: 1>
        >>> classify(0xD800)
        <Plane.INVALID: 0>
    """
    if code_point < 0:
        return Plane.INVALID
    if code_point <= Utf8Constants.ASCII_MAX:
        return Plane.ASCII
    if code_point <= Utf8Constants.LATIN_MAX:
        return Plane.LATIN
    if code_point <= Utf8Constants.MULTILINGUAL_MAX:
        if is_surrogate(code_point):
            return Plane.INVALID
        return Plane.MULTILINGUAL
    if code_point <= Utf8Constants.MAX_CODE_POINT:
        return Plane.EXTENDED
    return Plane.INVALID


def sequence_length(code_point: int) -> int:
    """Number of bytes in the UTF-8 encoding of code_point (0 if invalid)."""
    return classify(code_point).byte_count
