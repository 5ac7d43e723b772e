"""
Codec layer for hex code point to UTF-8 conversion.

This module contains the conversion pipeline, each stage depending only
on the ones before it:
- Hex digit decoding and hex string parsing
- Code point classification into UTF-8 planes
- UTF-8 byte packing
"""

from hexutf8.codec.classifier import classify, is_surrogate, sequence_length
from hexutf8.codec.constants import IntegerWidth, Plane, Utf8Constants
from hexutf8.codec.hex_digits import (
    decode_hex_digit,
    format_code_point,
    parse_hex,
    try_parse_hex,
)
from hexutf8.codec.utf8 import (
    DEFAULT_ENCODER,
    Utf8Encoder,
    encode,
    encode_code_point,
    encode_or_raise,
)

__all__ = [
    # Constants
    "Plane",
    "IntegerWidth",
    "Utf8Constants",
    # Hex Digits
    "decode_hex_digit",
    "parse_hex",
    "try_parse_hex",
    "format_code_point",
    # Classification
    "classify",
    "is_surrogate",
    "sequence_length",
    # Encoding
    "Utf8Encoder",
    "DEFAULT_ENCODER",
    "encode",
    "encode_or_raise",
    "encode_code_point",
]
