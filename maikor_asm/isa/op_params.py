"""
Addressing-mode bits packed into the high nibble of a register byte.

    bit 7    indirect
    bit 6    pre/post increment/decrement present
    bit 5    post (set) or pre (clear)            -- only with bit 6
    bit 4    decrement (set) or increment (clear) -- only with bit 6
    bit 5..4 offset kind when bit 6 is clear on an indirect register:
             01 byte register, 10 number, 11 word register

The low nibble is the register id.
"""

REGISTER_MASK = 0x0F

INDIRECT = 0b1000_0000
PPID = 0b0100_0000
POST = 0b0010_0000
DEC = 0b0001_0000
OFFSET_MASK = 0b0011_0000

PRE_INC = PPID
PRE_DEC = PPID | DEC
POST_INC = PPID | POST
POST_DEC = PPID | POST | DEC

IND_PRE_INC = INDIRECT | PRE_INC
IND_PRE_DEC = INDIRECT | PRE_DEC
IND_POST_INC = INDIRECT | POST_INC
IND_POST_DEC = INDIRECT | POST_DEC

OFFSET_REG = 0b0001_0000
OFFSET_NUM = 0b0010_0000
OFFSET_EXT_REG = 0b0011_0000

IND_OFFSET_REG = INDIRECT | OFFSET_REG
IND_OFFSET_NUM = INDIRECT | OFFSET_NUM
IND_OFFSET_EXT_REG = INDIRECT | OFFSET_EXT_REG
