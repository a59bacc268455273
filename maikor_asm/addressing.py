"""
Addressing-mode table and opcode resolver.

Every operand is reduced to one pattern letter:

  A  Address                     e.g. $100
  R  byte register, direct       e.g. AL, -BH
  E  word register, direct       e.g. AX, CX+
  I  register, indirect          e.g. (AX), (BX+2), -(CX)
  W  number, word                e.g. 300, or any number on a .W op
  B  number, byte                e.g. 30 on a .B op

and ("ADD.B", "RB") is looked up here to give the opcode byte.

How the table is laid out:
  The ISA numbers each family contiguously from a base opcode. A Layout
  lists the slots of a family in opcode order; each slot is the set of
  patterns that select that opcode. Sized families (X.B / X.W) interleave
  byte and word opcodes, so slot n of X.B is base + 2n and slot n of X.W
  is base + 2n + 1.

  Register slots accept either a direct register or an indirect one, so
  "ADD.B AL, (BX)" and "ADD.B AL, BL" share ADD_REG_REG_BYTE; the packed
  register byte tells the CPU which one it got.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from .errors import (
    InvalidArgumentsError, InvalidOpCodeError, InvalidOpNameError,
    MissingArgumentsError, NumberMustBeByteError,
)
from .isa import ops
from .nodes import Argument, IndirectReg, Word
from .parser import expects_bytes

__all__ = [
    'ADDRESSING_MODES', 'Layout', 'arg_list_to_letters', 'get_op_code',
    'supported_patterns', 'describe_op',
]


# ──────────────────────────────────────────────
# Family layouts
# ──────────────────────────────────────────────

@dataclass(frozen=True)
class Layout:
    """Opcode slots of one family, in opcode order."""
    slots: Tuple[Tuple[str, ...], ...]
    stride: int = 1

    def build(self, base: int, shift: int = 0) -> Dict[str, int]:
        return {
            pattern: base + index * self.stride + shift
            for index, patterns in enumerate(self.slots)
            for pattern in patterns
        }

    def head(self, count: int) -> Layout:
        return Layout(self.slots[:count], self.stride)


#                reg,reg                   reg,num       reg,addr      addr,reg      addr,num  addr,addr
MATH_B = Layout((('RR', 'RI', 'IR', 'II'), ('RB', 'IB'), ('RA', 'IA'), ('AR', 'AI'), ('AB',), ('AA',)), 2)
MATH_W = Layout((('EE', 'EI', 'IE', 'II'), ('EW', 'IW'), ('EA', 'IA'), ('AE', 'AI'), ('AW',), ('AA',)), 2)
# byte multiplies write the product to a word register
MUL_B = Layout((('ER', 'EI', 'IR', 'II'), ('EB', 'IB'), ('EA', 'IA'), ('AR', 'AI'), ('AB',), ('AA',)), 2)

CMP_B = MATH_B.head(3)
CMP_W = MATH_W.head(3)
BITWISE_B = MATH_B.head(2)
BITWISE_W = MATH_W.head(2)
SHIFT_B = Layout(BITWISE_B.slots + (('A',),), 2)
SHIFT_W = Layout(BITWISE_W.slots + (('A',),), 2)

INC_B = Layout((('R', 'I'), ('A',)), 2)
INC_W = Layout((('E', 'I'), ('A',)), 2)
NOT_B = INC_B.head(1)
NOT_W = INC_W.head(1)
SWAP_B = MATH_B.head(1)
SWAP_W = MATH_W.head(1)
PUSH_B = Layout((('R',), ('B',)), 2)
PUSH_W = Layout((('E',), ('W',)), 2)
POP_B = PUSH_B.head(1)
POP_W = PUSH_W.head(1)

JUMP = Layout((('A',), ('E', 'I')))
# JBC and JBS interleave, so each steps over the other's opcode
BIT_JUMP = Layout((('ER', 'IR'), ('AR',), ('EB', 'IB'), ('AB',)), 2)


# ──────────────────────────────────────────────
# Addressing-mode table
# ──────────────────────────────────────────────
# Format: { 'MNEMONIC': { pattern: opcode } }

ADDRESSING_MODES: Dict[str, Dict[str, int]] = {}


def _add(mnemonic: str, patterns: Dict[str, int]):
    """Register the patterns of one mnemonic."""
    ADDRESSING_MODES.setdefault(mnemonic, {}).update(patterns)


def _sized(mnemonic: str, base: int, byte_layout: Layout, word_layout: Layout):
    """Register MNEMONIC.B and MNEMONIC.W from one interleaved family."""
    _add(f"{mnemonic}.B", byte_layout.build(base))
    _add(f"{mnemonic}.W", word_layout.build(base, shift=1))


def _no_args(mnemonic: str, op: int):
    _add(mnemonic, {'': op})


# ── No operands ──
_no_args('NOP',   ops.NOP)
_no_args('HALT',  ops.HALT)
_no_args('EHALT', ops.EHALT)
_no_args('SLEEP', ops.SLEEP)
_no_args('RET',   ops.RET)
_no_args('RETI',  ops.RETI)

# ── Arithmetic ──
_sized('CPY',  ops.CPY_REG_REG_BYTE,  MATH_B, MATH_W)
_sized('ADD',  ops.ADD_REG_REG_BYTE,  MATH_B, MATH_W)
_sized('SUB',  ops.SUB_REG_REG_BYTE,  MATH_B, MATH_W)
_sized('ADDC', ops.ADDC_REG_REG_BYTE, MATH_B, MATH_W)
_sized('SUBC', ops.SUBC_REG_REG_BYTE, MATH_B, MATH_W)
_sized('MUL',  ops.MUL_REG_REG_BYTE,  MUL_B,  MATH_W)
_sized('MULS', ops.MULS_REG_REG_BYTE, MUL_B,  MATH_W)
_sized('DIV',  ops.DIV_REG_REG_BYTE,  MATH_B, MATH_W)
_sized('DIVS', ops.DIVS_REG_REG_BYTE, MATH_B, MATH_W)

# ── Compare ──
_sized('CMP',  ops.CMP_REG_REG_BYTE,  CMP_B, CMP_W)
_sized('CMPS', ops.CMPS_REG_REG_BYTE, CMP_B, CMP_W)

# ── Shift / rotate ──
_sized('ASL', ops.ASL_REG_REG_BYTE, SHIFT_B, SHIFT_W)
_sized('ASR', ops.ASR_REG_REG_BYTE, SHIFT_B, SHIFT_W)
_sized('LSR', ops.LSR_REG_REG_BYTE, SHIFT_B, SHIFT_W)
_sized('ROL', ops.ROL_REG_REG_BYTE, SHIFT_B, SHIFT_W)
_sized('ROR', ops.ROR_REG_REG_BYTE, SHIFT_B, SHIFT_W)

# ── Bitwise ──
_sized('AND', ops.AND_REG_REG_BYTE, BITWISE_B, BITWISE_W)
_sized('OR',  ops.OR_REG_REG_BYTE,  BITWISE_B, BITWISE_W)
_sized('XOR', ops.XOR_REG_REG_BYTE, BITWISE_B, BITWISE_W)
_sized('NOT', ops.NOT_REG_BYTE,     NOT_B,     NOT_W)

# ── Increment / decrement ──
_sized('INC', ops.INC_REG_BYTE, INC_B, INC_W)
_sized('DEC', ops.DEC_REG_BYTE, INC_B, INC_W)

# ── Jumps ──
_add('JMP',  JUMP.build(ops.JMP_ADDR))
_add('JE',   JUMP.build(ops.JE_ADDR))
_add('JNE',  JUMP.build(ops.JNE_ADDR))
_add('JL',   JUMP.build(ops.JL_ADDR))
_add('JG',   JUMP.build(ops.JG_ADDR))
_add('JLE',  JUMP.build(ops.JLE_ADDR))
_add('JGE',  JUMP.build(ops.JGE_ADDR))
_add('CALL', JUMP.build(ops.CALL_ADDR))
_add('JRF',  {'B': ops.JRF_BYTE})
_add('JRB',  {'B': ops.JRB_BYTE})
_add('JBC',  BIT_JUMP.build(ops.JBC_REG_REG))
_add('JBS',  BIT_JUMP.build(ops.JBS_REG_REG))

# ── Stack / swap ──
_sized('PUSH', ops.PUSH_REG_BYTE,     PUSH_B, PUSH_W)
_sized('POP',  ops.POP_REG_BYTE,      POP_B,  POP_W)
_sized('SWAP', ops.SWAP_REG_REG_BYTE, SWAP_B, SWAP_W)

# ── Memory block copy ──
# MCPY dst, src, count: the count is a byte or a byte register, the
# endpoints an address or a register holding one.
_add('MCPY', {
    'AAB': ops.MEM_CPY_ADDR_ADDR_BYTE,
    'AAR': ops.MEM_CPY_ADDR_ADDR_REG,  'AAI': ops.MEM_CPY_ADDR_ADDR_REG,
    'AEB': ops.MEM_CPY_ADDR_REG_BYTE,  'AIB': ops.MEM_CPY_ADDR_REG_BYTE,
    'AER': ops.MEM_CPY_ADDR_REG_REG,   'AIR': ops.MEM_CPY_ADDR_REG_REG,
    'AII': ops.MEM_CPY_ADDR_REG_REG,
    'EAB': ops.MEM_CPY_REG_ADDR_BYTE,  'IAB': ops.MEM_CPY_REG_ADDR_BYTE,
    'EAR': ops.MEM_CPY_REG_ADDR_REG,   'IAR': ops.MEM_CPY_REG_ADDR_REG,
    'EAI': ops.MEM_CPY_REG_ADDR_REG,   'IAI': ops.MEM_CPY_REG_ADDR_REG,
    'EIB': ops.MEM_CPY_REG_REG_BYTE,   'IEB': ops.MEM_CPY_REG_REG_BYTE,
    'IIB': ops.MEM_CPY_REG_REG_BYTE,
    'EER': ops.MEM_CPY_REG_REG_REG,    'EIR': ops.MEM_CPY_REG_REG_REG,
    'IER': ops.MEM_CPY_REG_REG_REG,    'IIR': ops.MEM_CPY_REG_REG_REG,
    'EEI': ops.MEM_CPY_REG_REG_REG,    'EII': ops.MEM_CPY_REG_REG_REG,
    'IEI': ops.MEM_CPY_REG_REG_REG,    'III': ops.MEM_CPY_REG_REG_REG,
})


# ──────────────────────────────────────────────
# Resolver
# ──────────────────────────────────────────────

def arg_list_to_letters(args: Iterable[Argument]) -> str:
    return ''.join(arg.letter for arg in args)


def supported_patterns(mnemonic: str) -> List[str]:
    """Sorted operand patterns accepted by a mnemonic."""
    try:
        return sorted(ADDRESSING_MODES[mnemonic.upper()])
    except KeyError:
        raise InvalidOpNameError(mnemonic) from None


def get_op_code(op_name: str, args: Sequence[Argument],
                line_num: Optional[int] = None) -> int:
    """Resolve a mnemonic and its classified operands to an opcode byte.

    Raises:
        InvalidOpNameError: the mnemonic is unknown.
        MissingArgumentsError: no operands were given and the op needs some.
        NumberMustBeByteError: a number above 255 was given to a byte op.
        InvalidArgumentsError: any other operand mismatch, including
            indirection through a byte register.
    """
    mnemonic = op_name.upper()
    modes = ADDRESSING_MODES.get(mnemonic)
    if modes is None:
        raise InvalidOpNameError(op_name, line_num=line_num)

    pattern = arg_list_to_letters(args)
    options = ', '.join(repr(p) for p in sorted(modes))

    for arg in args:
        if isinstance(arg, IndirectReg) and arg.mode.size != 2:
            raise InvalidArgumentsError(
                mnemonic, pattern,
                "indirection requires an extended register (AX, BX, CX, DX)", line_num)

    op = modes.get(pattern)
    if op is not None:
        return op

    if not pattern:
        raise MissingArgumentsError(mnemonic, options, line_num)
    if expects_bytes(mnemonic) and pattern.replace('W', 'B') in modes:
        word = next(arg for arg in args if isinstance(arg, Word))
        raise NumberMustBeByteError(str(word.value), line_num=line_num)
    raise InvalidArgumentsError(mnemonic, pattern, options, line_num)


def describe_op(op: int) -> str:
    """Human readable form of an opcode byte."""
    desc = ops.op_desc(op)
    if desc is None:
        raise InvalidOpCodeError(op)
    return desc
