"""
Assembler diagnostics.

Every failure raised while assembling is an AssemblerError carrying the
offending text, an optional detail string and the 0-based index of the
source line it came from. Messages render the line 1-based ("on line 3").

Nothing in the pipeline recovers from these: the first one raised aborts
the whole program.
"""

from __future__ import annotations
from typing import Optional

__all__ = [
    'AssemblerError', 'EmptyLineError', 'GeneralParseError',
    'LiteralError', 'NumberFormatError', 'NumberHexFormatError', 'NumberTooBigError',
    'SignedNumberFormatError', 'SignedNumberRangeError', 'InvalidCharacterError',
    'NumberMustBeByteError', 'AddressHexFormatError', 'AddressNumFormatError',
    'AddressTooBigError', 'InvalidRegisterError', 'InvalidOffsetError',
    'OpCodeError', 'InvalidOpNameError', 'MissingArgumentsError',
    'InvalidArgumentsError', 'InvalidOpCodeError',
]


class AssemblerError(Exception):
    """Base class for assembly errors."""

    template = "Unable to parse {text}{where} ({detail})"

    def __init__(self, text: str = "", detail: str = "", line_num: Optional[int] = None):
        self.text = text
        self.detail = detail
        self.line_num = line_num
        super().__init__(text, detail, line_num)

    @property
    def where(self) -> str:
        return f" on line {self.line_num + 1}" if self.line_num is not None else ""

    def __str__(self) -> str:
        fields = dict(vars(self))
        fields['where'] = self.where
        return self.template.format(**fields)


class EmptyLineError(AssemblerError):
    template = "Line was empty (internal parser error){where}"


class GeneralParseError(AssemblerError):
    pass


# ──────────────────────────────────────────────
# Literals
# ──────────────────────────────────────────────

class LiteralError(AssemblerError):
    """A numeric, character or address literal could not be read."""

    def to_address_error(self) -> AssemblerError:
        """Re-tag a number error raised while reading a `$` address.

        Only the error kind changes; text, detail and line are kept.
        """
        retagged = _ADDRESS_ERRORS.get(type(self))
        if retagged is None:
            return self
        return retagged(self.text, self.detail, self.line_num)


class NumberFormatError(LiteralError):
    template = "Invalid Number literal format {detail}: {text}{where}, must be 0 - 65535"


class NumberHexFormatError(LiteralError):
    template = "Invalid Number literal format {detail}: {text}{where}, must be x0 - xFFFF"


class NumberTooBigError(LiteralError):
    template = ("Number literal out outside of valid range {text}{where}, "
                "must be less than 65535 or xFFFF")


class SignedNumberFormatError(LiteralError):
    template = "Invalid Number literal format {detail}, {text}{where}, must be -32768 to 32767"


class SignedNumberRangeError(LiteralError):
    template = "Invalid Number literal format {text}{where}, must be -32768 to 32767"


class InvalidCharacterError(LiteralError):
    template = ("Invalid character literal {text}, must be one ASCII character "
                "in single quotes{where}")


class NumberMustBeByteError(LiteralError):
    template = "This instruction only supports byte (0-255), was {text}{where}"


class AddressHexFormatError(LiteralError):
    template = "Invalid Address format {detail}: {text}{where}, must be $x0 - $xFFFF"


class AddressNumFormatError(LiteralError):
    template = "Invalid Address format {detail}: {text}{where}, must be $0 - $65535"


class AddressTooBigError(LiteralError):
    template = ("Address out outside of valid range {text}{where}, "
                "must be less than 65535 or xFFFF")


_ADDRESS_ERRORS = {
    NumberFormatError: AddressNumFormatError,
    NumberHexFormatError: AddressHexFormatError,
    NumberTooBigError: AddressTooBigError,
}


# ──────────────────────────────────────────────
# Registers
# ──────────────────────────────────────────────

class InvalidRegisterError(AssemblerError):
    template = "Register has invalid format {text}{where}, expected {detail}"


class InvalidOffsetError(AssemblerError):
    template = "Couldn't parse number or register for offset {text}{where}"


# ──────────────────────────────────────────────
# Opcode resolution
# ──────────────────────────────────────────────

class OpCodeError(AssemblerError):
    """The mnemonic/operand combination does not name an opcode."""


class InvalidOpNameError(OpCodeError):
    template = ("No op found named '{text}', maybe you're missing the size? "
                "('.B' or '.W'){where}")


class MissingArgumentsError(OpCodeError):
    template = "{text}{where} requires arguments, supported: {detail}"


class InvalidArgumentsError(OpCodeError):
    template = "Arguments {pattern} don't match instruction {text}{where}, supported: {detail}"

    def __init__(self, text: str, pattern: str, detail: str = "",
                 line_num: Optional[int] = None):
        self.pattern = pattern
        super().__init__(text, detail, line_num)


class InvalidOpCodeError(OpCodeError):
    template = "Instruction unknown/unsupported: {op_code} ({op_code:02X}){where}"

    def __init__(self, op_code: int, line_num: Optional[int] = None):
        self.op_code = op_code
        super().__init__(f"{op_code:02X}", "", line_num)
