"""
Byte emitter.

Instruction layout:

    opcode | operand bytes, in operand order | offset bytes, in operand order

  Address, Word            2 bytes, big-endian
  Register/ExtReg/Indirect 1 byte, the packed register byte
  Byte                     1 byte

An indirect register with an offset contributes its offset after every
operand has been written: the offset register byte, or the offset number
as 2 bytes big-endian.
"""

from __future__ import annotations
from typing import Sequence

from .nodes import Address, Argument, Byte, ExtReg, IndirectReg, Register, Word

__all__ = ['word_bytes', 'argument_bytes', 'offset_bytes', 'emit_instruction']


def word_bytes(value: int) -> bytes:
    return bytes([(value >> 8) & 0xFF, value & 0xFF])


def argument_bytes(arg: Argument) -> bytes:
    """Primary encoding of one operand."""
    if isinstance(arg, (Address, Word)):
        return word_bytes(arg.value)
    if isinstance(arg, (Register, ExtReg, IndirectReg, Byte)):
        return bytes([arg.value & 0xFF])
    raise TypeError(f"Not an operand: {arg!r}")


def offset_bytes(arg: Argument) -> bytes:
    """Trailing offset encoding; empty unless arg is an offset indirect."""
    if not isinstance(arg, IndirectReg):
        return b''
    if arg.offset_reg is not None:
        return bytes([arg.offset_reg])
    if arg.offset_num is not None:
        return word_bytes(arg.offset_num)
    return b''


def emit_instruction(op: int, args: Sequence[Argument]) -> bytes:
    out = bytearray([op])
    for arg in args:
        out += argument_bytes(arg)
    for arg in args:
        out += offset_bytes(arg)
    return bytes(out)
