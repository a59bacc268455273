"""
Line tokenizer for Maikor assembly.

    [label:] [MNEMONIC[.SIZE] [operand[, operand...]]] [# comment]

Whitespace inside the operand field is insignificant: "ADD.B AL , 30" and
"ADD.B AL,30" tokenize identically.
"""

from __future__ import annotations
from typing import List

from .errors import EmptyLineError
from .nodes import Line

__all__ = ['strip_comment', 'interpret_line', 'is_blank']

COMMENT = '#'


def strip_comment(text: str) -> str:
    """Drop everything from the first '#' that is not inside a char literal."""
    in_char = False
    escaped = False
    for i, ch in enumerate(text):
        if escaped:
            escaped = False
        elif ch == '\\' and in_char:
            escaped = True
        elif ch == "'":
            in_char = not in_char
        elif ch == COMMENT and not in_char:
            return text[:i]
    return text


def is_blank(text: str) -> bool:
    """True for lines with nothing but whitespace and/or a comment."""
    return not strip_comment(text).strip()


def interpret_line(line_num: int, text: str) -> Line:
    """Split one source line into label, mnemonic and raw operands.

    Raises EmptyLineError for blank or comment-only lines; callers are
    expected to filter those out first (see is_blank).
    """
    content = strip_comment(text).strip()
    if not content:
        raise EmptyLineError(text, line_num=line_num)

    parts: List[str] = content.split()
    label = None
    if parts[0].endswith(':'):
        label = parts.pop(0)[:-1]

    if not parts:
        return Line(line_num, text, label=label)

    mnemonic = parts[0]
    operand_text = ''.join(parts[1:])
    operands = tuple(operand_text.split(',')) if operand_text else ()
    return Line(line_num, text, label=label, mnemonic=mnemonic, operands=operands)
