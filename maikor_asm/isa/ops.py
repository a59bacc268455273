"""
Maikor opcode table.

One constant per instruction form. Forms belonging to one family are laid
out contiguously from the family base opcode:

  - sized families interleave byte and word variants (X_..._BYTE is always
    even-offset from the base, X_..._WORD is the next opcode)
  - jumps place the address form at the base and the register form at +1
  - JBC and JBS interleave every form

Operands follow the opcode in the order named by the constant:
REG = one packed register byte, ADDR = two bytes big-endian, NUM = one
byte (BYTE forms) or two bytes big-endian (WORD forms).
"""

from __future__ import annotations
from typing import Dict, Optional, Tuple


# ── No operands ──
NOP                      = 0x00
HALT                     = 0x01
EHALT                    = 0x02
SLEEP                    = 0x03
RET                      = 0x04
RETI                     = 0x05

# ── CPY ──
CPY_REG_REG_BYTE         = 0x06
CPY_REG_REG_WORD         = 0x07
CPY_REG_NUM_BYTE         = 0x08
CPY_REG_NUM_WORD         = 0x09
CPY_REG_ADDR_BYTE        = 0x0A
CPY_REG_ADDR_WORD        = 0x0B
CPY_ADDR_REG_BYTE        = 0x0C
CPY_ADDR_REG_WORD        = 0x0D
CPY_ADDR_NUM_BYTE        = 0x0E
CPY_ADDR_NUM_WORD        = 0x0F
CPY_ADDR_ADDR_BYTE       = 0x10
CPY_ADDR_ADDR_WORD       = 0x11

# ── ADD ──
ADD_REG_REG_BYTE         = 0x12
ADD_REG_REG_WORD         = 0x13
ADD_REG_NUM_BYTE         = 0x14
ADD_REG_NUM_WORD         = 0x15
ADD_REG_ADDR_BYTE        = 0x16
ADD_REG_ADDR_WORD        = 0x17
ADD_ADDR_REG_BYTE        = 0x18
ADD_ADDR_REG_WORD        = 0x19
ADD_ADDR_NUM_BYTE        = 0x1A
ADD_ADDR_NUM_WORD        = 0x1B
ADD_ADDR_ADDR_BYTE       = 0x1C
ADD_ADDR_ADDR_WORD       = 0x1D

# ── SUB ──
SUB_REG_REG_BYTE         = 0x1E
SUB_REG_REG_WORD         = 0x1F
SUB_REG_NUM_BYTE         = 0x20
SUB_REG_NUM_WORD         = 0x21
SUB_REG_ADDR_BYTE        = 0x22
SUB_REG_ADDR_WORD        = 0x23
SUB_ADDR_REG_BYTE        = 0x24
SUB_ADDR_REG_WORD        = 0x25
SUB_ADDR_NUM_BYTE        = 0x26
SUB_ADDR_NUM_WORD        = 0x27
SUB_ADDR_ADDR_BYTE       = 0x28
SUB_ADDR_ADDR_WORD       = 0x29

# ── ADDC ──
ADDC_REG_REG_BYTE        = 0x2A
ADDC_REG_REG_WORD        = 0x2B
ADDC_REG_NUM_BYTE        = 0x2C
ADDC_REG_NUM_WORD        = 0x2D
ADDC_REG_ADDR_BYTE       = 0x2E
ADDC_REG_ADDR_WORD       = 0x2F
ADDC_ADDR_REG_BYTE       = 0x30
ADDC_ADDR_REG_WORD       = 0x31
ADDC_ADDR_NUM_BYTE       = 0x32
ADDC_ADDR_NUM_WORD       = 0x33
ADDC_ADDR_ADDR_BYTE      = 0x34
ADDC_ADDR_ADDR_WORD      = 0x35

# ── SUBC ──
SUBC_REG_REG_BYTE        = 0x36
SUBC_REG_REG_WORD        = 0x37
SUBC_REG_NUM_BYTE        = 0x38
SUBC_REG_NUM_WORD        = 0x39
SUBC_REG_ADDR_BYTE       = 0x3A
SUBC_REG_ADDR_WORD       = 0x3B
SUBC_ADDR_REG_BYTE       = 0x3C
SUBC_ADDR_REG_WORD       = 0x3D
SUBC_ADDR_NUM_BYTE       = 0x3E
SUBC_ADDR_NUM_WORD       = 0x3F
SUBC_ADDR_ADDR_BYTE      = 0x40
SUBC_ADDR_ADDR_WORD      = 0x41

# ── MUL ──
MUL_REG_REG_BYTE         = 0x42
MUL_REG_REG_WORD         = 0x43
MUL_REG_NUM_BYTE         = 0x44
MUL_REG_NUM_WORD         = 0x45
MUL_REG_ADDR_BYTE        = 0x46
MUL_REG_ADDR_WORD        = 0x47
MUL_ADDR_REG_BYTE        = 0x48
MUL_ADDR_REG_WORD        = 0x49
MUL_ADDR_NUM_BYTE        = 0x4A
MUL_ADDR_NUM_WORD        = 0x4B
MUL_ADDR_ADDR_BYTE       = 0x4C
MUL_ADDR_ADDR_WORD       = 0x4D

# ── MULS ──
MULS_REG_REG_BYTE        = 0x4E
MULS_REG_REG_WORD        = 0x4F
MULS_REG_NUM_BYTE        = 0x50
MULS_REG_NUM_WORD        = 0x51
MULS_REG_ADDR_BYTE       = 0x52
MULS_REG_ADDR_WORD       = 0x53
MULS_ADDR_REG_BYTE       = 0x54
MULS_ADDR_REG_WORD       = 0x55
MULS_ADDR_NUM_BYTE       = 0x56
MULS_ADDR_NUM_WORD       = 0x57
MULS_ADDR_ADDR_BYTE      = 0x58
MULS_ADDR_ADDR_WORD      = 0x59

# ── DIV ──
DIV_REG_REG_BYTE         = 0x5A
DIV_REG_REG_WORD         = 0x5B
DIV_REG_NUM_BYTE         = 0x5C
DIV_REG_NUM_WORD         = 0x5D
DIV_REG_ADDR_BYTE        = 0x5E
DIV_REG_ADDR_WORD        = 0x5F
DIV_ADDR_REG_BYTE        = 0x60
DIV_ADDR_REG_WORD        = 0x61
DIV_ADDR_NUM_BYTE        = 0x62
DIV_ADDR_NUM_WORD        = 0x63
DIV_ADDR_ADDR_BYTE       = 0x64
DIV_ADDR_ADDR_WORD       = 0x65

# ── DIVS ──
DIVS_REG_REG_BYTE        = 0x66
DIVS_REG_REG_WORD        = 0x67
DIVS_REG_NUM_BYTE        = 0x68
DIVS_REG_NUM_WORD        = 0x69
DIVS_REG_ADDR_BYTE       = 0x6A
DIVS_REG_ADDR_WORD       = 0x6B
DIVS_ADDR_REG_BYTE       = 0x6C
DIVS_ADDR_REG_WORD       = 0x6D
DIVS_ADDR_NUM_BYTE       = 0x6E
DIVS_ADDR_NUM_WORD       = 0x6F
DIVS_ADDR_ADDR_BYTE      = 0x70
DIVS_ADDR_ADDR_WORD      = 0x71

# ── CMP ──
CMP_REG_REG_BYTE         = 0x72
CMP_REG_REG_WORD         = 0x73
CMP_REG_NUM_BYTE         = 0x74
CMP_REG_NUM_WORD         = 0x75
CMP_REG_ADDR_BYTE        = 0x76
CMP_REG_ADDR_WORD        = 0x77

# ── CMPS ──
CMPS_REG_REG_BYTE        = 0x78
CMPS_REG_REG_WORD        = 0x79
CMPS_REG_NUM_BYTE        = 0x7A
CMPS_REG_NUM_WORD        = 0x7B
CMPS_REG_ADDR_BYTE       = 0x7C
CMPS_REG_ADDR_WORD       = 0x7D

# ── ASL ──
ASL_REG_REG_BYTE         = 0x7E
ASL_REG_REG_WORD         = 0x7F
ASL_REG_NUM_BYTE         = 0x80
ASL_REG_NUM_WORD         = 0x81
ASL_ADDR_BYTE            = 0x82
ASL_ADDR_WORD            = 0x83

# ── ASR ──
ASR_REG_REG_BYTE         = 0x84
ASR_REG_REG_WORD         = 0x85
ASR_REG_NUM_BYTE         = 0x86
ASR_REG_NUM_WORD         = 0x87
ASR_ADDR_BYTE            = 0x88
ASR_ADDR_WORD            = 0x89

# ── LSR ──
LSR_REG_REG_BYTE         = 0x8A
LSR_REG_REG_WORD         = 0x8B
LSR_REG_NUM_BYTE         = 0x8C
LSR_REG_NUM_WORD         = 0x8D
LSR_ADDR_BYTE            = 0x8E
LSR_ADDR_WORD            = 0x8F

# ── ROL ──
ROL_REG_REG_BYTE         = 0x90
ROL_REG_REG_WORD         = 0x91
ROL_REG_NUM_BYTE         = 0x92
ROL_REG_NUM_WORD         = 0x93
ROL_ADDR_BYTE            = 0x94
ROL_ADDR_WORD            = 0x95

# ── ROR ──
ROR_REG_REG_BYTE         = 0x96
ROR_REG_REG_WORD         = 0x97
ROR_REG_NUM_BYTE         = 0x98
ROR_REG_NUM_WORD         = 0x99
ROR_ADDR_BYTE            = 0x9A
ROR_ADDR_WORD            = 0x9B

# ── AND ──
AND_REG_REG_BYTE         = 0x9C
AND_REG_REG_WORD         = 0x9D
AND_REG_NUM_BYTE         = 0x9E
AND_REG_NUM_WORD         = 0x9F

# ── OR ──
OR_REG_REG_BYTE          = 0xA0
OR_REG_REG_WORD          = 0xA1
OR_REG_NUM_BYTE          = 0xA2
OR_REG_NUM_WORD          = 0xA3

# ── XOR ──
XOR_REG_REG_BYTE         = 0xA4
XOR_REG_REG_WORD         = 0xA5
XOR_REG_NUM_BYTE         = 0xA6
XOR_REG_NUM_WORD         = 0xA7

# ── NOT ──
NOT_REG_BYTE             = 0xA8
NOT_REG_WORD             = 0xA9

# ── INC ──
INC_REG_BYTE             = 0xAA
INC_REG_WORD             = 0xAB
INC_ADDR_BYTE            = 0xAC
INC_ADDR_WORD            = 0xAD

# ── DEC ──
DEC_REG_BYTE             = 0xAE
DEC_REG_WORD             = 0xAF
DEC_ADDR_BYTE            = 0xB0
DEC_ADDR_WORD            = 0xB1

# ── Jumps (ADDR at base, REG at base+1) ──
JMP_ADDR                 = 0xB2
JMP_REG                  = 0xB3
JE_ADDR                  = 0xB4
JE_REG                   = 0xB5
JNE_ADDR                 = 0xB6
JNE_REG                  = 0xB7
JL_ADDR                  = 0xB8
JL_REG                   = 0xB9
JG_ADDR                  = 0xBA
JG_REG                   = 0xBB
JLE_ADDR                 = 0xBC
JLE_REG                  = 0xBD
JGE_ADDR                 = 0xBE
JGE_REG                  = 0xBF
CALL_ADDR                = 0xC0
CALL_REG                 = 0xC1

# ── Relative jumps ──
JRF_BYTE                 = 0xC2
JRB_BYTE                 = 0xC3

# ── Bit test jumps (JBC/JBS interleaved) ──
JBC_REG_REG              = 0xC4
JBS_REG_REG              = 0xC5
JBC_ADDR_REG             = 0xC6
JBS_ADDR_REG             = 0xC7
JBC_REG_NUM              = 0xC8
JBS_REG_NUM              = 0xC9
JBC_ADDR_NUM             = 0xCA
JBS_ADDR_NUM             = 0xCB

# ── Stack ──
PUSH_REG_BYTE            = 0xCC
PUSH_REG_WORD            = 0xCD
PUSH_NUM_BYTE            = 0xCE
PUSH_NUM_WORD            = 0xCF
POP_REG_BYTE             = 0xD0
POP_REG_WORD             = 0xD1

# ── Swap ──
SWAP_REG_REG_BYTE        = 0xD2
SWAP_REG_REG_WORD        = 0xD3

# ── Memory block copy ──
MEM_CPY_ADDR_ADDR_BYTE   = 0xD4
MEM_CPY_ADDR_ADDR_REG    = 0xD5
MEM_CPY_ADDR_REG_BYTE    = 0xD6
MEM_CPY_ADDR_REG_REG     = 0xD7
MEM_CPY_REG_ADDR_BYTE    = 0xD8
MEM_CPY_REG_ADDR_REG     = 0xD9
MEM_CPY_REG_REG_BYTE     = 0xDA
MEM_CPY_REG_REG_REG      = 0xDB

# last opcode: 0xDB (220 total)


# ──────────────────────────────────────────────
# Enumeration + descriptions
# ──────────────────────────────────────────────

_NAMES: Dict[int, str] = {
    value: name for name, value in list(globals().items())
    if name.isupper() and not name.startswith('_') and isinstance(value, int)
}

ALL: Tuple[int, ...] = tuple(sorted(_NAMES))

# Families whose trailing BYTE/WORD names an operand rather than a size
_UNSIZED = {'MCPY', 'JRF', 'JRB'}


def _describe(name: str) -> str:
    words = name.split('_')
    if name.startswith('MEM_CPY_'):
        mnemonic, words = 'MCPY', words[2:]
    else:
        mnemonic, words = words[0], words[1:]
    if words and words[-1] in ('BYTE', 'WORD') and mnemonic not in _UNSIZED:
        mnemonic += '.B' if words.pop() == 'BYTE' else '.W'
    return f"{mnemonic} {', '.join(w.lower() for w in words)}".strip()


_DESCRIPTIONS: Dict[int, str] = {value: _describe(name) for value, name in _NAMES.items()}


def op_name(op: int) -> Optional[str]:
    """Constant name for an opcode, e.g. 0x14 -> 'ADD_REG_NUM_BYTE'."""
    return _NAMES.get(op)


def op_desc(op: int) -> Optional[str]:
    """Human readable form of an opcode, e.g. 0x14 -> 'ADD.B reg, num'."""
    return _DESCRIPTIONS.get(op)
