"""
Maikor register file.

Eight byte registers, the flags register (also byte sized) and four word
("extended") registers. A register id fits in the low nibble of the packed
register byte; see op_params for the high nibble.
"""

from __future__ import annotations
from typing import Dict

AH = 0
AL = 1
BH = 2
BL = 3
CH = 4
CL = 5
DH = 6
DL = 7
FLAGS = 8
AX = 9
BX = 10
CX = 11
DX = 12

NAMES: Dict[str, int] = {
    'AH': AH, 'AL': AL,
    'BH': BH, 'BL': BL,
    'CH': CH, 'CL': CL,
    'DH': DH, 'DL': DL,
    'FLG': FLAGS,
    'AX': AX, 'BX': BX, 'CX': CX, 'DX': DX,
}

_ID_TO_NAME: Dict[int, str] = {reg_id: name for name, reg_id in NAMES.items()}

# Width in bytes of each register
SIZES: Dict[int, int] = {
    reg_id: (2 if reg_id >= AX else 1) for reg_id in NAMES.values()
}


def from_name(name: str) -> int:
    """Look up a register id by name (case-insensitive)."""
    try:
        return NAMES[name.upper()]
    except KeyError:
        raise ValueError(
            f"Unknown register '{name}', expected one of {', '.join(NAMES)}") from None


def size(reg_id: int) -> int:
    """Width in bytes of a register (1 = byte, 2 = word)."""
    try:
        return SIZES[reg_id]
    except KeyError:
        raise ValueError(f"Unknown register id {reg_id}") from None


def name(reg_id: int) -> str:
    return _ID_TO_NAME[reg_id]
