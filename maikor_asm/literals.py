"""
Numeric and character literal recognizer.

Literal forms, tried in this order:

    'A'      ASCII character ('\\'' is the quote character itself, 39)
    x7B      hexadecimal
    b1111011 binary
    -5       signed decimal, -32768..32767, stored as the 16-bit pattern
    123      unsigned decimal, 0..65535

detect_num() returns None when the text is not shaped like any literal so
callers can go on to try a register. Text that is shaped like a literal
but is malformed or out of range raises a LiteralError.
"""

from __future__ import annotations
import re
from typing import Optional

from .errors import (
    InvalidCharacterError, NumberFormatError, NumberHexFormatError,
    NumberTooBigError, SignedNumberFormatError, SignedNumberRangeError,
)

__all__ = ['detect_num', 'WORD_MAX', 'BYTE_MAX']

WORD_MAX = 0xFFFF
BYTE_MAX = 0xFF
SIGNED_MIN = -32768

QUOTE_LITERAL = "'\\''"

_HEX_DIGITS = re.compile(r'[0-9A-Fa-f]+')
_BIN_DIGITS = re.compile(r'[01]+')
_DEC_DIGITS = re.compile(r'[0-9]+')
_SIGNED = re.compile(r'-[0-9]+')

# 65535 and -32768 have at most five significant digits
MAX_DEC_DIGITS = 5


def _digit_error(digits: str) -> str:
    if not digits:
        return "cannot parse integer from empty string"
    return "invalid digit found in string"


def _dec_value(digits: str) -> Optional[int]:
    """Decimal digits to int, or None when there are too many to fit 16 bits."""
    significant = digits.lstrip('0')
    if len(significant) > MAX_DEC_DIGITS:
        return None
    return int(significant or '0')


def _check_word(original: str, value: int, line_num: Optional[int]) -> int:
    if value > WORD_MAX:
        raise NumberTooBigError(original, line_num=line_num)
    return value


def detect_num(original: str, text: str, line_num: Optional[int] = None) -> Optional[int]:
    """Read a literal as a 16-bit unsigned value.

    Args:
        original: Operand as written, used in error messages.
        text: The candidate literal (prefix such as '$' already removed).
        line_num: Source line index for diagnostics.

    Returns:
        The value, or None if text is not a literal at all.
    """
    if text.startswith("'") and text.endswith("'"):
        if len(text) == 3 and text[1].isascii():
            return ord(text[1])
        if text == QUOTE_LITERAL:
            return ord("'")
        raise InvalidCharacterError(text, line_num=line_num)

    if text.startswith('x'):
        digits = text[1:]
        if not _HEX_DIGITS.fullmatch(digits):
            raise NumberHexFormatError(original, _digit_error(digits), line_num)
        return _check_word(original, int(digits, 16), line_num)

    if text.startswith('b'):
        digits = text[1:]
        if not _BIN_DIGITS.fullmatch(digits):
            raise NumberFormatError(original, _digit_error(digits), line_num)
        return _check_word(original, int(digits, 2), line_num)

    if text.startswith('-'):
        if not _SIGNED.fullmatch(text):
            raise SignedNumberFormatError(original, _digit_error(text[1:]), line_num)
        magnitude = _dec_value(text[1:])
        if magnitude is None or -magnitude < SIGNED_MIN:
            raise SignedNumberRangeError(original, line_num=line_num)
        return -magnitude & WORD_MAX

    if _DEC_DIGITS.fullmatch(text):
        value = _dec_value(text)
        if value is None:
            raise NumberTooBigError(original, line_num=line_num)
        return _check_word(original, value, line_num)

    return None
