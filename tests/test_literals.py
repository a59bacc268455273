"""Numeric and character literal tests."""

import pytest

from maikor_asm.errors import (
    InvalidCharacterError, LiteralError, NumberFormatError, NumberHexFormatError,
    NumberTooBigError, SignedNumberFormatError, SignedNumberRangeError,
)
from maikor_asm.literals import detect_num


class TestDetectNum:
    def test_forms(self):
        assert detect_num("", "0") == 0
        assert detect_num("", "x0") == 0
        assert detect_num("", "b0") == 0
        assert detect_num("", "1") == 1
        assert detect_num("", "x1") == 1
        assert detect_num("", "b1") == 1
        assert detect_num("", "x7B") == 123
        assert detect_num("", "xff") == 255
        assert detect_num("", "b1111011") == 123
        assert detect_num("", "65535") == 65535
        assert detect_num("", "xFFFF") == 65535

    def test_characters(self):
        assert detect_num("", "'A'") == 65
        assert detect_num("", "' '") == 32
        assert detect_num("", "'\\''") == 39

    def test_signed_wraps_to_16_bits(self):
        assert detect_num("", "-1") == 65535
        assert detect_num("", "-124") == 65412
        assert detect_num("", "-32768") == 0x8000
        assert detect_num("", "32767") == 0x7FFF
        for value in range(-32768, 0):
            assert detect_num("", str(value)) == value + 65536

    def test_every_word_reads_back(self):
        for value in range(0x10000):
            assert detect_num("", str(value)) == value
            assert detect_num("", f"x{value:X}") == value

    def test_leading_zeros(self):
        assert detect_num("", "000001") == 1
        assert detect_num("", "-0000032768") == 0x8000
        assert detect_num("", "0" * 5000 + "7") == 7

    def test_not_a_number(self):
        assert detect_num("", "") is None
        assert detect_num("", "AL") is None
        assert detect_num("", "(AX)") is None
        assert detect_num("", "a") is None


class TestLiteralErrors:
    def test_too_big(self):
        with pytest.raises(NumberTooBigError):
            detect_num("65536", "65536")
        with pytest.raises(NumberTooBigError):
            detect_num("xFFFF1", "xFFFF1")
        with pytest.raises(NumberTooBigError):
            detect_num("b11111111111111111", "b11111111111111111")

    def test_bad_digits(self):
        with pytest.raises(NumberHexFormatError):
            detect_num("xG1", "xG1")
        with pytest.raises(NumberHexFormatError):
            detect_num("x", "x")
        with pytest.raises(NumberFormatError):
            detect_num("b102", "b102")

    def test_very_long_decimals(self):
        digits = "9" * 5000
        with pytest.raises(NumberTooBigError) as info:
            detect_num(digits, digits, line_num=3)
        assert info.value.line_num == 3
        with pytest.raises(NumberTooBigError):
            detect_num("100000", "100000")
        with pytest.raises(SignedNumberRangeError):
            detect_num("-" + digits, "-" + digits)
        with pytest.raises(SignedNumberRangeError):
            detect_num("-100000", "-100000")

    def test_signed(self):
        with pytest.raises(SignedNumberRangeError):
            detect_num("-32769", "-32769")
        with pytest.raises(SignedNumberFormatError):
            detect_num("-ax", "-ax")
        with pytest.raises(SignedNumberFormatError):
            detect_num("-", "-")

    def test_characters(self):
        with pytest.raises(InvalidCharacterError):
            detect_num("'AB'", "'AB'")
        with pytest.raises(InvalidCharacterError):
            detect_num("''", "''")
        with pytest.raises(InvalidCharacterError):
            detect_num("'é'", "'é'")

    def test_error_carries_line(self):
        with pytest.raises(LiteralError) as info:
            detect_num("70000", "70000", line_num=4)
        assert info.value.line_num == 4
        assert info.value.text == "70000"
        assert "on line 5" in str(info.value)
