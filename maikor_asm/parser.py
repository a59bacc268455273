"""
Operand recognizer for Maikor assembly.

Turns one raw operand string into an ArgToken:

    $100  $x64          address
    AL  AX  FLG         register (case-insensitive)
    (AX)                indirect register
    -AL  +AX  BX-  CL+  pre/post decrement/increment (at most one)
    -(AX)  (DX)+        indirect with pre/post inc/dec
    (AX+10) (AX+BL)     indirect with an offset: number, byte register
    (AX+CX)             or word register
    10  x1F  b101  -1   numbers, see literals.py

The register grammar is read outside-in: PPID decoration, then the
parentheses, then an optional '+offset' clause, then the register name.
Anything that is not a register falls back to a number literal.
"""

from __future__ import annotations
from typing import Optional, Tuple

from .errors import (
    AddressNumFormatError, GeneralParseError, InvalidOffsetError, InvalidRegisterError, LiteralError,
)
from .isa import registers
from .literals import detect_num
from .nodes import (
    AddressToken, ArgToken, NumberToken, Offset, PPID, RegisterMode, RegisterToken,
)

__all__ = ['parse_argument', 'parse_register', 'expects_bytes', 'BYTE_SIZED_MNEMONICS']

# Mnemonics without a size suffix whose number operands are bytes
BYTE_SIZED_MNEMONICS = {'MCPY', 'JBC', 'JBS', 'JRF', 'JRB'}

_PPID_PREFIX = {'-': PPID.PRE_DEC, '+': PPID.PRE_INC}
_PPID_SUFFIX = {'-': PPID.POST_DEC, '+': PPID.POST_INC}


def expects_bytes(mnemonic: str) -> bool:
    """True if number operands of this instruction are narrowed to bytes."""
    upper = mnemonic.upper()
    return upper.endswith('.B') or upper in BYTE_SIZED_MNEMONICS


def parse_argument(arg: str, line_num: Optional[int] = None) -> ArgToken:
    """Recognize one operand: address, register or number."""
    trimmed = arg.strip().strip(',').strip()

    if trimmed.startswith('$'):
        if len(trimmed) == 1:
            raise AddressNumFormatError(arg, "cannot parse integer from empty string", line_num)
        try:
            addr = detect_num(arg, trimmed[1:], line_num)
        except LiteralError as e:
            raise e.to_address_error() from None
        if addr is None:
            raise GeneralParseError(arg, "No address after $", line_num)
        return AddressToken(addr)

    try:
        return parse_register(trimmed, line_num)
    except (InvalidRegisterError, InvalidOffsetError):
        num = detect_num(arg, trimmed, line_num)
        if num is None:
            raise
        return NumberToken(num)


def parse_register(reg: str, line_num: Optional[int] = None) -> RegisterToken:
    """Recognize a register operand with its addressing-mode decorations."""
    remaining = ''.join(reg.split())
    ppid, remaining = detect_ppid(reg, remaining, line_num)
    is_indirect, remaining = detect_indirect(reg, remaining, line_num)

    if '+' in remaining:
        dst, offset_text = remaining.split('+', 1)
        if ppid is not None:
            raise InvalidRegisterError(reg, "Can't use PPID and offset", line_num)
        if not is_indirect:
            raise InvalidRegisterError(
                reg, "offset only on indirect registers, e.g. (AX+1)", line_num)
        reg_id = detect_register(reg, dst, line_num)
        offset = detect_offset(reg, offset_text, line_num)
        mode = RegisterMode(reg_id, indirect=True, offset=offset.kind)
        return RegisterToken(mode.encode(), offset.register, offset.num)

    reg_id = detect_register(reg, remaining, line_num)
    mode = RegisterMode(reg_id, indirect=is_indirect, ppid=ppid)
    return RegisterToken(mode.encode())


def detect_ppid(original: str, text: str,
                line_num: Optional[int] = None) -> Tuple[Optional[PPID], str]:
    """Strip a leading or trailing +/- and report which one it was.

    A register carries at most one decoration, so anything still
    decorated after the first one is stripped is rejected.
    """
    ppid = None
    if text[:1] in _PPID_PREFIX:
        ppid = _PPID_PREFIX[text[0]]
        text = text[1:]
    elif text[-1:] in _PPID_SUFFIX:
        ppid = _PPID_SUFFIX[text[-1]]
        text = text[:-1]

    if ppid is not None and (text[:1] in _PPID_PREFIX or text[-1:] in _PPID_SUFFIX):
        raise InvalidRegisterError(
            original, "at most one pre/post increment/decrement", line_num)
    return ppid, text


def detect_indirect(original: str, text: str,
                    line_num: Optional[int] = None) -> Tuple[bool, str]:
    """Strip one pair of surrounding parentheses."""
    if not text.startswith('('):
        return False, text
    if len(text) < 2 or not text.endswith(')'):
        raise InvalidRegisterError(
            original, "')' at end, as '(' was found at start", line_num)
    return True, text[1:-1]


def detect_register(original: str, text: str, line_num: Optional[int] = None) -> int:
    try:
        return registers.from_name(text)
    except ValueError as e:
        raise InvalidRegisterError(original, str(e), line_num) from None


def detect_offset(original: str, text: str, line_num: Optional[int] = None) -> Offset:
    """Read the offset clause of (REG+offset): register first, then number."""
    try:
        reg_id = registers.from_name(text)
    except ValueError:
        pass
    else:
        if registers.size(reg_id) == 1:
            return Offset(reg=reg_id)
        return Offset(ext_reg=reg_id)

    try:
        num = detect_num(original, text, line_num)
    except LiteralError:
        num = None
    if num is None:
        raise InvalidOffsetError(text, line_num=line_num)
    return Offset(num=num)
