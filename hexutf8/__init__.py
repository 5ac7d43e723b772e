"""
hexutf8 - Python library for encoding hex code points as UTF-8.

This library converts a Unicode code point written as hex digits (such as
"20AC") into its UTF-8 byte sequence, validating both the hex text and the
legality of the code point.

Example:
    >>> from hexutf8 import encode
    >>> encode("20AC")
    b'\\xe2\\x82\\xac'
    >>> encode("D800") is None
    True
"""

from hexutf8.codec import (
    DEFAULT_ENCODER,
    IntegerWidth,
    Plane,
    Utf8Encoder,
    classify,
    encode,
    encode_code_point,
    encode_or_raise,
    parse_hex,
)
from hexutf8.exceptions import (
    ErrorKind,
    HexParseError,
    HexUtf8Error,
    InvalidCodePointError,
    InvalidDigitError,
    InvalidLengthError,
)
from hexutf8.models import CodePoint, EncodedCharacter

__version__ = "0.1.0"
__all__ = [
    # Encoding
    "encode",
    "encode_or_raise",
    "encode_code_point",
    "Utf8Encoder",
    "DEFAULT_ENCODER",
    # Parsing and Classification
    "parse_hex",
    "classify",
    "Plane",
    "IntegerWidth",
    # Models
    "CodePoint",
    "EncodedCharacter",
    # Exceptions
    "HexUtf8Error",
    "HexParseError",
    "InvalidDigitError",
    "InvalidLengthError",
    "InvalidCodePointError",
    "ErrorKind",
    # Version
    "__version__",
]
