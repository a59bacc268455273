"""
Value types passed between the assembler stages.

    Line         one tokenized source line (label, mnemonic, raw operands)
    RegisterMode register id + addressing-mode decorations, packed to a byte
    ArgToken     an operand as recognized, before byte/word narrowing
    Argument     an operand as classified, ready for pattern lookup/encoding
    ParsedLine   a Line and the bytes it produced
    Program      every ParsedLine plus the flattened byte stream

All of them are created once per assembly run and never mutated.
"""

from __future__ import annotations
import enum
from dataclasses import dataclass, field
from typing import ClassVar, List, Optional, Tuple

from .isa import op_params, registers


# ──────────────────────────────────────────────
# Source lines
# ──────────────────────────────────────────────

@dataclass(frozen=True)
class Line:
    """Tokenized assembly source line."""
    num: int                            # 0-based index in the source
    original: str
    label: Optional[str] = None         # without the trailing ':'
    mnemonic: Optional[str] = None      # as written, case preserved
    operands: Tuple[str, ...] = ()      # raw, whitespace removed

    @property
    def command(self) -> Optional[Tuple[str, List[str]]]:
        if self.mnemonic is None:
            return None
        return self.mnemonic, list(self.operands)


# ──────────────────────────────────────────────
# Packed register byte
# ──────────────────────────────────────────────

class PPID(enum.Enum):
    """Pre/post increment/decrement decoration."""
    PRE_INC = op_params.PRE_INC
    PRE_DEC = op_params.PRE_DEC
    POST_INC = op_params.POST_INC
    POST_DEC = op_params.POST_DEC

    @property
    def is_pre(self) -> bool:
        return self in (PPID.PRE_INC, PPID.PRE_DEC)

    @property
    def is_inc(self) -> bool:
        return self in (PPID.PRE_INC, PPID.POST_INC)


class OffsetKind(enum.Enum):
    REG = op_params.OFFSET_REG
    NUM = op_params.OFFSET_NUM
    EXT_REG = op_params.OFFSET_EXT_REG


@dataclass(frozen=True)
class RegisterMode:
    """A register and its addressing-mode decorations.

    encode()/decode() convert to and from the single byte the CPU reads:
    register id in the low nibble, flags from op_params in the high nibble.
    """
    register: int
    indirect: bool = False
    ppid: Optional[PPID] = None
    offset: Optional[OffsetKind] = None

    def __post_init__(self):
        if not 0 <= self.register <= op_params.REGISTER_MASK:
            raise ValueError(f"Register id out of range: {self.register}")
        if self.offset is not None and (not self.indirect or self.ppid is not None):
            raise ValueError("Offsets are only valid on indirect registers without PPID")

    def encode(self) -> int:
        value = self.register
        if self.indirect:
            value |= op_params.INDIRECT
        if self.ppid is not None:
            value |= self.ppid.value
        if self.offset is not None:
            value |= self.offset.value
        return value

    @classmethod
    def decode(cls, value: int) -> RegisterMode:
        if not 0 <= value <= 0xFF:
            raise ValueError(f"Register byte out of range: {value}")
        indirect = bool(value & op_params.INDIRECT)
        flags = value & ~op_params.INDIRECT & ~op_params.REGISTER_MASK
        ppid = None
        offset = None
        if flags & op_params.PPID:
            ppid = PPID(flags)
        elif flags:
            if not indirect:
                raise ValueError(f"Offset bits set on a direct register: {value:#04x}")
            offset = OffsetKind(flags)
        return cls(value & op_params.REGISTER_MASK, indirect, ppid, offset)

    @property
    def size(self) -> int:
        return registers.size(self.register)


@dataclass(frozen=True)
class Offset:
    """Offset clause of an indirect register, e.g. the BL in (AX+BL).

    At most one of reg / ext_reg / num is set.
    """
    reg: Optional[int] = None
    ext_reg: Optional[int] = None
    num: Optional[int] = None

    def __post_init__(self):
        if sum(v is not None for v in (self.reg, self.ext_reg, self.num)) > 1:
            raise ValueError("Offset must be a register, an extended register or a number")

    @property
    def register(self) -> Optional[int]:
        return self.reg if self.reg is not None else self.ext_reg

    @property
    def kind(self) -> Optional[OffsetKind]:
        if self.reg is not None:
            return OffsetKind.REG
        if self.ext_reg is not None:
            return OffsetKind.EXT_REG
        if self.num is not None:
            return OffsetKind.NUM
        return None


# ──────────────────────────────────────────────
# Classified operands
# ──────────────────────────────────────────────

@dataclass(frozen=True)
class Argument:
    """Base for classified operands; `letter` is its pattern character."""
    letter: ClassVar[str] = '?'


@dataclass(frozen=True)
class Address(Argument):
    letter: ClassVar[str] = 'A'
    value: int


@dataclass(frozen=True)
class Register(Argument):
    """Byte register, direct."""
    letter: ClassVar[str] = 'R'
    value: int                          # packed register byte

    @property
    def mode(self) -> RegisterMode:
        return RegisterMode.decode(self.value)


@dataclass(frozen=True)
class ExtReg(Argument):
    """Word register, direct."""
    letter: ClassVar[str] = 'E'
    value: int

    @property
    def mode(self) -> RegisterMode:
        return RegisterMode.decode(self.value)


@dataclass(frozen=True)
class IndirectReg(Argument):
    """Register used as a pointer, optionally with an offset."""
    letter: ClassVar[str] = 'I'
    value: int
    offset_reg: Optional[int] = None
    offset_num: Optional[int] = None

    def __post_init__(self):
        if self.offset_reg is not None and self.offset_num is not None:
            raise ValueError("IndirectReg takes an offset register or an offset number, not both")

    @property
    def mode(self) -> RegisterMode:
        return RegisterMode.decode(self.value)


@dataclass(frozen=True)
class Word(Argument):
    letter: ClassVar[str] = 'W'
    value: int


@dataclass(frozen=True)
class Byte(Argument):
    letter: ClassVar[str] = 'B'
    value: int


# ──────────────────────────────────────────────
# Recognized operands (before narrowing)
# ──────────────────────────────────────────────

@dataclass(frozen=True)
class ArgToken:
    def to_argument(self, byte_sized: bool) -> Argument:
        raise NotImplementedError


@dataclass(frozen=True)
class AddressToken(ArgToken):
    value: int

    def to_argument(self, byte_sized: bool) -> Argument:
        return Address(self.value)


@dataclass(frozen=True)
class NumberToken(ArgToken):
    value: int

    def to_argument(self, byte_sized: bool) -> Argument:
        if byte_sized and self.value < 256:
            return Byte(self.value)
        return Word(self.value)


@dataclass(frozen=True)
class RegisterToken(ArgToken):
    value: int                          # packed register byte
    offset_reg: Optional[int] = None
    offset_num: Optional[int] = None

    def to_argument(self, byte_sized: bool) -> Argument:
        mode = RegisterMode.decode(self.value)
        if not mode.indirect:
            if mode.size == 1:
                return Register(self.value)
            return ExtReg(self.value)
        return IndirectReg(self.value, self.offset_reg, self.offset_num)


# ──────────────────────────────────────────────
# Output
# ──────────────────────────────────────────────

@dataclass(frozen=True)
class ParsedLine:
    line: Line
    binary: bytes = b''                 # empty for label-only lines


@dataclass(frozen=True)
class Program:
    lines: List[ParsedLine] = field(default_factory=list)
    binary: bytes = b''

    @classmethod
    def from_lines(cls, lines: List[ParsedLine]) -> Program:
        return cls(lines, b''.join(parsed.binary for parsed in lines))
