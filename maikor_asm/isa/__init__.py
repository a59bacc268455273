"""
Maikor platform definition: register file, addressing-mode bits and
opcode constants. The assembler consumes these; it never defines them.
"""

from . import op_params, ops, registers
from .ops import ALL, op_desc

__all__ = ['op_params', 'ops', 'registers', 'ALL', 'op_desc']
