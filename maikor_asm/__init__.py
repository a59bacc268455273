"""
Maikor Assembler
================
A single-pass assembler for the Maikor CPU: assembly text in, the byte
stream the CPU executes out.

Architecture:
    ┌──────────┐    ┌──────────┐    ┌────────────┐    ┌────────────┐    ┌─────────┐
    │  Source  │───>│  Lexer   │───>│   Parser   │───>│ Addressing │───>│ CodeGen │
    │ (.masm)  │    │ (Line)   │    │ (Argument) │    │  (opcode)  │    │ (bytes) │
    └──────────┘    └──────────┘    └────────────┘    └────────────┘    └─────────┘

    - lexer.py:      label / mnemonic / operand split, comment stripping
    - literals.py:   decimal, x-hex, b-binary, signed and 'c' literals
    - parser.py:     register + addressing-mode recognizer, operand entry point
    - addressing.py: (mnemonic, operand pattern) -> opcode table
    - codegen.py:    opcode + operand + offset bytes
    - assembler.py:  per-line driver, Assembler class, listing / hex dump
    - isa/:          opcodes, registers and addressing-mode bits of the CPU
"""

__version__ = "0.1.0"

from .errors import AssemblerError
from .nodes import Line, ParsedLine, Program
from .assembler import Assembler, assemble, parse_line, parse_line_from_str, parse_program
from .addressing import describe_op, get_op_code, supported_patterns

__all__ = [
    'Assembler', 'AssemblerError', 'Line', 'ParsedLine', 'Program',
    'assemble', 'assemble_source', 'parse_line', 'parse_line_from_str', 'parse_program',
    'describe_op', 'get_op_code', 'supported_patterns',
]


def assemble_source(source: str, *, output: str = "binary", origin: int = 0):
    """Assemble Maikor source to raw bytes, a hex dump or a listing.

    Args:
        source: Assembly source text.
        output: 'binary' (default), 'hex' or 'listing'.
        origin: Address of the first byte; only affects hex and listing.

    Returns:
        bytes for 'binary', text otherwise.
    """
    assembler = Assembler()
    binary = assembler.assemble(source)

    if output == 'binary':
        return binary
    elif output == 'hex':
        return assembler.to_hex(origin=origin)
    elif output == 'listing':
        return assembler.get_listing(origin=origin)
    raise ValueError(f"Unknown output format: {output}")
