"""
Maikor single-pass assembler.

Turns Maikor assembly source into the byte stream the CPU executes.

Input:  Assembly text, one instruction or label per line
Output: Raw bytes, plus the bytes each source line produced

Each line is assembled on its own, with no symbol table:

  1. lexer.interpret_line    label / mnemonic / raw operands
  2. parser.parse_argument   operand text -> ArgToken
  3. ArgToken.to_argument    byte/word narrowing for the instruction
  4. addressing.get_op_code  (mnemonic, pattern) -> opcode
  5. codegen.emit_instruction

Assembly stops at the first error; nothing is returned for a program that
does not assemble completely. Labels are recorded on their line but never
resolved to addresses.
"""

from __future__ import annotations
import logging
from typing import List, Optional, Sequence, Union

from .addressing import describe_op, get_op_code
from .codegen import emit_instruction
from .lexer import interpret_line, is_blank
from .nodes import Line, ParsedLine, Program
from .parser import expects_bytes, parse_argument

__all__ = ['Assembler', 'assemble', 'parse_line', 'parse_line_from_str', 'parse_program']

log = logging.getLogger(__name__)

Source = Union[str, Sequence[str]]


def parse_line(line: Line) -> ParsedLine:
    """Assemble one tokenized line. Label-only lines produce no bytes."""
    command = line.command
    if command is None:
        return ParsedLine(line)

    mnemonic, operands = command
    mnemonic = mnemonic.upper()
    byte_sized = expects_bytes(mnemonic)
    args = [parse_argument(text, line.num).to_argument(byte_sized) for text in operands]
    op = get_op_code(mnemonic, args, line.num)
    binary = emit_instruction(op, args)
    log.debug("line %d: %s -> %s", line.num + 1, line.original.strip(), binary.hex(' '))
    return ParsedLine(line, binary)


def parse_line_from_str(text: str) -> ParsedLine:
    """Assemble a single instruction, reported as line 0."""
    return parse_line(interpret_line(0, text))


def parse_program(lines: Sequence[str]) -> Program:
    """Assemble every line, skipping blank and comment-only ones."""
    parsed: List[ParsedLine] = []
    for num, text in enumerate(lines):
        if is_blank(text):
            continue
        parsed.append(parse_line(interpret_line(num, text)))
    program = Program.from_lines(parsed)
    log.info("Assembled %d lines into %d bytes", len(parsed), len(program.binary))
    return program


def _split(source: Source) -> Sequence[str]:
    if isinstance(source, str):
        return source.splitlines()
    return source


# ──────────────────────────────────────────────
# The Assembler
# ──────────────────────────────────────────────

class Assembler:
    """Single-pass Maikor assembler.

    Usage:
        asm = Assembler()
        binary = asm.assemble(source_text)
        print(asm.get_listing())
    """

    def __init__(self):
        self.program: Optional[Program] = None   # Result of the last successful run

    @property
    def binary(self) -> bytes:
        return self.program.binary if self.program is not None else b''

    def assemble(self, source: Source) -> bytes:
        """Assemble source text (a string or a list of lines) into bytes.

        On error the previous result is discarded and the error propagates.
        """
        self.program = None
        self.program = parse_program(_split(source))
        return self.program.binary

    def get_listing(self, origin: int = 0) -> str:
        """Return a human-readable listing: address, bytes, source, opcode."""
        lines = [f"{'ADDR':>5}  {'BYTES':<20}  {'SOURCE':<32}  OP",
                 "-" * 76]
        if self.program is None:
            return '\n'.join(lines)

        addr = origin
        for parsed in self.program.lines:
            source = parsed.line.original.strip()
            if len(source) > 32:
                source = source[:32]
            if not parsed.binary:
                lines.append(f"{'':5}  {'':20}  {source}")
                continue
            hex_str = parsed.binary.hex(' ').upper()
            lines.append(f"${addr:04X}  {hex_str:<20}  {source:<32}  {describe_op(parsed.binary[0])}")
            addr += len(parsed.binary)
        return '\n'.join(lines)

    def to_hex(self, width: int = 16, origin: int = 0) -> str:
        """Hex dump of the assembled bytes, `width` bytes per row."""
        if width < 1:
            raise ValueError(f"width must be positive, got {width}")
        data = self.binary
        rows = []
        for offset in range(0, len(data), width):
            chunk = data[offset:offset + width]
            rows.append(f"{origin + offset:04X}: {chunk.hex(' ').upper()}")
        return '\n'.join(rows) + ('\n' if rows else '')


# ──────────────────────────────────────────────
# Convenience functions
# ──────────────────────────────────────────────

def assemble(source: Source) -> bytes:
    """Assemble source text, return the byte stream."""
    return Assembler().assemble(source)
