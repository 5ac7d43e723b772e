"""
Data models for code points and their encodings.

This module contains Pydantic value objects:

- CodePoint: a validated Unicode code point
- EncodedCharacter: a code point paired with its UTF-8 bytes
"""

from hexutf8.models.records import CodePoint, EncodedCharacter

__all__ = [
    "CodePoint",
    "EncodedCharacter",
]
