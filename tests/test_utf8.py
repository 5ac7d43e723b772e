"""Tests for UTF-8 encoding."""

import logging

import pytest

from hexutf8 import encode, encode_or_raise
from hexutf8.codec.constants import IntegerWidth, Plane
from hexutf8.codec.hex_digits import format_code_point
from hexutf8.codec.utf8 import DEFAULT_ENCODER, Utf8Encoder, encode_code_point
from hexutf8.exceptions import (
    ErrorKind,
    HexUtf8Error,
    InvalidCodePointError,
    InvalidDigitError,
    InvalidLengthError,
)


class TestEncode:
    """Tests for the module-level encode function."""

    @pytest.mark.parametrize(
        ("hex_digits", "expected"),
        [
            ("0000", b"\x00"),
            ("007F", b"\x7f"),
            ("0080", b"\xc2\x80"),
            ("07FF", b"\xdf\xbf"),
            ("0800", b"\xe0\xa0\x80"),
            ("D7FF", b"\xed\x9f\xbf"),
            ("E000", b"\xee\x80\x80"),
            ("FFFF", b"\xef\xbf\xbf"),
            ("010000", b"\xf0\x90\x80\x80"),
            ("10FFFF", b"\xf4\x8f\xbf\xbf"),
        ],
    )
    def test_boundaries(self, hex_digits, expected):
        """Test encoding at every plane boundary."""
        assert encode(hex_digits) == expected

    def test_known_characters(self):
        """Test a character from each plane."""
        assert encode("0041") == b"A"
        assert encode("00E9") == "é".encode("utf-8")
        assert encode("20AC") == "€".encode("utf-8")
        assert encode("01F600") == "😀".encode("utf-8")

    def test_ascii_is_code_point_value(self):
        """Test every ASCII code point encodes to its own byte."""
        for cp in range(0x80):
            assert encode(format_code_point(cp)) == bytes([cp])

    def test_latin_two_bytes(self):
        """Test Latin code points encode to a lead/continuation pair."""
        for cp in range(0x80, 0x800):
            data = encode(format_code_point(cp))
            assert len(data) == 2
            assert data[0] & 0xE0 == 0xC0
            assert data[1] & 0xC0 == 0x80
            assert data.decode("utf-8") == chr(cp)

    def test_extended_lead_byte(self):
        """Test the 4-byte lead carries the top 3 bits of the code point."""
        assert encode("040000") == b"\xf1\x80\x80\x80"
        assert encode("100000") == b"\xf4\x80\x80\x80"
        assert encode("0FFFFF") == b"\xf3\xbf\xbf\xbf"

    def test_round_trip(self):
        """Test decoding with the standard codec recovers the code point."""
        for cp in range(0, 0x110000, 0x3F):
            if 0xD800 <= cp <= 0xDFFF:
                continue
            data = encode(format_code_point(cp))
            assert data.decode("utf-8") == chr(cp)

    def test_digit_count_does_not_matter(self):
        """Test padding with leading zeros gives identical output."""
        assert encode("41") == encode("0041") == encode("000041") == encode("00000041") == b"A"
        assert encode("00E9") == encode("0000E9")
        assert encode("1F600") is None  # odd length
        assert encode("0001F600") == encode("01F600")

    def test_lowercase_input(self):
        """Test lowercase digits encode the same as uppercase."""
        assert encode("20ac") == encode("20AC")

    @pytest.mark.parametrize(
        "hex_digits",
        ["", "1", "GG", "123456789", "0000000041", "D800", "DBFF", "DC00", "DFFF", "110000", "FFFFFFFF"],
    )
    def test_failures_return_none(self, hex_digits):
        """Test every failure collapses to None."""
        assert encode(hex_digits) is None

    def test_idempotent(self):
        """Test repeated calls give identical bytes."""
        assert encode("01F600") == encode("01F600")
        assert encode("D800") is None and encode("D800") is None

    def test_non_string_raises(self):
        """Test non-str input is a programming error."""
        with pytest.raises(TypeError):
            encode(0x41)

    def test_failure_logged_at_debug(self, caplog):
        """Test rejected input is logged at DEBUG."""
        with caplog.at_level(logging.DEBUG, logger="hexutf8.codec.utf8"):
            assert encode("D800") is None
        assert "Rejected 'D800'" in caplog.text

    def test_success_not_logged(self, caplog):
        """Test the success path emits no records."""
        with caplog.at_level(logging.DEBUG, logger="hexutf8.codec.utf8"):
            encode("0041")
        assert caplog.records == []

    def test_non_default_width_logged_at_debug(self, caplog):
        """Test constructing an encoder with a non-default width is logged."""
        with caplog.at_level(logging.DEBUG, logger="hexutf8.codec.utf8"):
            Utf8Encoder(width=IntegerWidth.UINT16)
        assert "Encoder using 16-bit holder" in caplog.text

    def test_default_width_not_logged(self, caplog):
        """Test constructing a default encoder emits no records."""
        with caplog.at_level(logging.DEBUG, logger="hexutf8.codec.utf8"):
            Utf8Encoder()
        assert caplog.records == []


class TestEncodeOrRaise:
    """Tests for encode_or_raise."""

    def test_success(self):
        """Test valid input returns bytes."""
        assert encode_or_raise("20AC") == b"\xe2\x82\xac"

    def test_invalid_length(self):
        """Test length failures raise InvalidLengthError."""
        with pytest.raises(InvalidLengthError):
            encode_or_raise("")
        with pytest.raises(InvalidLengthError):
            encode_or_raise("123456789")

    def test_invalid_digit(self):
        """Test digit failures raise InvalidDigitError."""
        with pytest.raises(InvalidDigitError):
            encode_or_raise("GG")

    def test_surrogate(self):
        """Test surrogates raise InvalidCodePointError."""
        with pytest.raises(InvalidCodePointError) as exc_info:
            encode_or_raise("DFFF")
        assert exc_info.value.code_point == 0xDFFF
        assert exc_info.value.kind is ErrorKind.INVALID_CODE_POINT

    def test_out_of_range(self):
        """Test values above U+10FFFF raise InvalidCodePointError."""
        with pytest.raises(InvalidCodePointError):
            encode_or_raise("110000")


class TestEncodeCodePoint:
    """Tests for encode_code_point."""

    def test_byte_counts_match_plane(self):
        """Test output length follows the plane."""
        assert len(encode_code_point(0x7F)) == Plane.ASCII.byte_count
        assert len(encode_code_point(0x7FF)) == Plane.LATIN.byte_count
        assert len(encode_code_point(0xFFFF)) == Plane.MULTILINGUAL.byte_count
        assert len(encode_code_point(0x10FFFF)) == Plane.EXTENDED.byte_count

    def test_negative(self):
        """Test negative values are rejected."""
        with pytest.raises(InvalidCodePointError):
            encode_code_point(-1)

    def test_matches_standard_codec(self):
        """Test output agrees with str.encode for sample code points."""
        for cp in (0x24, 0xA2, 0x939, 0x20AC, 0xD55C, 0x10348, 0x10FFFF):
            assert encode_code_point(cp) == chr(cp).encode("utf-8")


class TestUtf8Encoder:
    """Tests for Utf8Encoder class."""

    def test_default_width(self):
        """Test the default encoder uses a 32-bit holder."""
        assert DEFAULT_ENCODER.width is IntegerWidth.UINT32
        assert Utf8Encoder().width is IntegerWidth.UINT32

    def test_width_16_limits_digits(self):
        """Test a 16-bit encoder rejects 6-digit input."""
        encoder = Utf8Encoder(width=IntegerWidth.UINT16)
        assert encoder.encode("FFFF") == b"\xef\xbf\xbf"
        assert encoder.encode("010000") is None

    def test_width_64_allows_long_input(self):
        """Test a 64-bit encoder accepts 16 digits but still checks range."""
        encoder = Utf8Encoder(width=64)
        assert encoder.encode("0000000000000041") == b"A"
        assert encoder.encode("0000000000110000") is None

    def test_unsupported_width(self):
        """Test unsupported widths are rejected at construction."""
        with pytest.raises(ValueError):
            Utf8Encoder(width=12)

    def test_encode_character(self):
        """Test encode_character returns bytes with metadata."""
        ch = Utf8Encoder().encode_character("01F600")
        assert ch.data == b"\xf0\x9f\x98\x80"
        assert ch.code_point.value == 0x1F600
        assert ch.plane is Plane.EXTENDED
        assert ch.text == "😀"

    def test_encode_character_raises(self):
        """Test encode_character propagates typed errors."""
        with pytest.raises(InvalidCodePointError):
            Utf8Encoder().encode_character("D800")
        with pytest.raises(HexUtf8Error):
            Utf8Encoder().encode_character("ZZ")

    def test_encode_many(self):
        """Test independent inputs are encoded in order."""
        result = Utf8Encoder().encode_many(["48", "0069", "01F44B"])
        assert result == [b"H", b"i", "👋".encode("utf-8")]

    def test_encode_many_propagates_failure(self):
        """Test the first bad item raises."""
        with pytest.raises(InvalidDigitError):
            Utf8Encoder().encode_many(["41", "XX", "42"])

    def test_repr(self):
        """Test repr shows the width."""
        assert repr(Utf8Encoder(width=16)) == "Utf8Encoder(width=16)"

    def test_codec_does_not_bind_models_at_import(self):
        """Test the codec layer loads models only when building one."""
        import hexutf8.codec.utf8 as utf8_module

        assert "EncodedCharacter" not in vars(utf8_module)
        assert "CodePoint" not in vars(utf8_module)
        assert Utf8Encoder().encode_character("41").data == b"A"
