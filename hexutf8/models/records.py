"""
Pydantic models for code points and their UTF-8 encodings.

Design principles:
- All models are frozen (immutable) by default
- Value objects validate the Unicode range on construction
- The plane is always derived from the value, never stored
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from hexutf8.codec.classifier import classify, is_surrogate
from hexutf8.codec.constants import Plane, Utf8Constants
from hexutf8.codec.hex_digits import format_code_point, parse_hex


class CodePoint(BaseModel):
    """
    Unicode code point.

    Any value in 0-0x10FFFF is a code point, including surrogates; whether
    it can be encoded as UTF-8 is reported by is_encodable.

    Example:
        >>> cp = CodePoint(value=0x20AC)
        >>> str(cp)
        'U+20AC'
        >>> cp.plane
        <Plane.MULTILINGUAL: 3>
        >>> CodePoint.parse("D800").is_encodable
        False
    """

    model_config = ConfigDict(frozen=True)

    value: int = Field(ge=0, le=Utf8Constants.MAX_CODE_POINT, description="Code point value")

    @property
    def plane(self) -> Plane:
        """UTF-8 plane of this code point."""
        return classify(self.value)

    @property
    def is_surrogate(self) -> bool:
        """Check if this is a UTF-16 surrogate (U+D800-U+DFFF)."""
        return is_surrogate(self.value)

    @property
    def is_encodable(self) -> bool:
        """Check if this code point has a UTF-8 encoding."""
        return self.plane.is_valid

    @property
    def hex(self) -> str:
        """Uppercase hex digits, at least 4 and always an even count."""
        return format_code_point(self.value)

    def __str__(self) -> str:
        return f"U+{self.value:04X}"

    def __repr__(self) -> str:
        return f"CodePoint({self})"

    def __hash__(self) -> int:
        return hash(self.value)

    @classmethod
    def parse(cls, hex_digits: str) -> CodePoint:
        """
        Parse a code point from a hex string.

        Args:
            hex_digits: Even-length hex digits, at most 8.

        Returns:
            CodePoint instance.

        Raises:
            HexParseError: If the text is not a valid hex string.
            ValueError: If the value exceeds U+10FFFF.
        """
        return cls(value=parse_hex(hex_digits))

    @classmethod
    def from_char(cls, char: str) -> CodePoint:
        """Create a code point from a single-character string."""
        if len(char) != 1:
            raise ValueError(f"Expected a single character, got {len(char)}")
        return cls(value=ord(char))


class EncodedCharacter(BaseModel):
    """
    A code point together with its UTF-8 byte sequence.

    Example:
        >>> ch = EncodedCharacter(code_point=CodePoint(value=0x10000), data=b"\\xf0\\x90\\x80\\x80")
        >>> ch.hex
        'F0 90 80 80'
        >>> ch.length
        4
    """

    model_config = ConfigDict(frozen=True)

    code_point: CodePoint
    data: bytes = Field(min_length=1, max_length=4, description="UTF-8 encoded bytes")

    @field_validator("code_point")
    @classmethod
    def validate_encodable(cls, v: CodePoint) -> CodePoint:
        """Reject code points without a UTF-8 encoding."""
        if not v.is_encodable:
            raise ValueError(f"{v} cannot be encoded as UTF-8")
        return v

    @model_validator(mode="after")
    def validate_data(self) -> EncodedCharacter:
        """Ensure data is exactly the UTF-8 encoding of code_point."""
        from hexutf8.codec.utf8 import encode_code_point

        expected = self.code_point.plane.byte_count
        if len(self.data) != expected:
            raise ValueError(
                f"{self.code_point} encodes to {expected} bytes, got {len(self.data)}"
            )
        if self.data != encode_code_point(self.code_point.value):
            raise ValueError(f"{self.data!r} is not the UTF-8 encoding of {self.code_point}")
        return self

    @property
    def plane(self) -> Plane:
        return self.code_point.plane

    @property
    def length(self) -> int:
        """Number of encoded bytes (1-4)."""
        return len(self.data)

    @property
    def hex(self) -> str:
        """Encoded bytes as space-separated uppercase hex pairs."""
        return " ".join(f"{b:02X}" for b in self.data)

    @property
    def text(self) -> str:
        """The encoded character as a Python string."""
        return self.data.decode("utf-8")

    def __str__(self) -> str:
        return f"{self.code_point} -> {self.hex}"

    def __hash__(self) -> int:
        return hash((self.code_point.value, self.data))
