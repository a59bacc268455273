"""
ISA definition tests: opcode numbering, descriptions, registers and the
packed register byte.
"""

import pytest

from maikor_asm.isa import op_params, ops, registers
from maikor_asm.nodes import OffsetKind, PPID, RegisterMode


class TestOpcodes:
    def test_opcodes_are_contiguous(self):
        """Every byte from NOP to the last MCPY form is an instruction."""
        assert ops.ALL == tuple(range(0xDC))
        assert len(ops.ALL) == 220

    def test_family_bases(self):
        assert ops.CPY_REG_REG_BYTE == 0x06
        assert ops.ADD_REG_REG_BYTE == 0x12
        assert ops.CMP_REG_REG_BYTE == 0x72
        assert ops.ASL_REG_REG_BYTE == 0x7E
        assert ops.AND_REG_REG_BYTE == 0x9C
        assert ops.INC_REG_BYTE == 0xAA
        assert ops.JMP_ADDR == 0xB2
        assert ops.JBC_REG_REG == 0xC4
        assert ops.PUSH_REG_BYTE == 0xCC
        assert ops.MEM_CPY_ADDR_ADDR_BYTE == 0xD4

    def test_byte_word_interleave(self):
        assert ops.ADD_REG_NUM_WORD == ops.ADD_REG_NUM_BYTE + 1
        assert ops.SUBC_ADDR_ADDR_WORD == ops.SUBC_ADDR_ADDR_BYTE + 1
        assert ops.JE_REG == ops.JE_ADDR + 1
        assert ops.JBS_ADDR_NUM == ops.JBC_ADDR_NUM + 1

    def test_descriptions(self):
        assert ops.op_desc(ops.NOP) == "NOP"
        assert ops.op_desc(ops.ADD_REG_NUM_BYTE) == "ADD.B reg, num"
        assert ops.op_desc(ops.CPY_ADDR_ADDR_WORD) == "CPY.W addr, addr"
        assert ops.op_desc(ops.JE_ADDR) == "JE addr"
        assert ops.op_desc(ops.JRF_BYTE) == "JRF byte"
        assert ops.op_desc(ops.MEM_CPY_ADDR_ADDR_REG) == "MCPY addr, addr, reg"
        assert ops.op_desc(0xFF) is None

    def test_every_opcode_has_a_name(self):
        for op in ops.ALL:
            assert ops.op_name(op) is not None
            assert ops.op_desc(op)
        assert ops.op_name(ops.INC_REG_WORD) == "INC_REG_WORD"


class TestRegisters:
    def test_lookup_is_case_insensitive(self):
        assert registers.from_name("AL") == registers.AL
        assert registers.from_name("al") == registers.AL
        assert registers.from_name("Dx") == registers.DX
        assert registers.from_name("flg") == registers.FLAGS

    def test_ids(self):
        names = ["AH", "AL", "BH", "BL", "CH", "CL", "DH", "DL", "FLG", "AX", "BX", "CX", "DX"]
        assert [registers.from_name(n) for n in names] == list(range(13))

    def test_sizes(self):
        assert registers.size(registers.AL) == 1
        assert registers.size(registers.FLAGS) == 1
        assert registers.size(registers.AX) == 2
        assert registers.size(registers.DX) == 2

    def test_unknown(self):
        with pytest.raises(ValueError):
            registers.from_name("EX")
        with pytest.raises(ValueError):
            registers.size(13)
        assert registers.name(registers.CX) == "CX"


class TestRegisterMode:
    """The packed register byte."""

    def test_plain(self):
        assert RegisterMode(registers.AL).encode() == 1
        assert RegisterMode(registers.DX).encode() == 12

    def test_flags(self):
        assert RegisterMode(registers.CH, ppid=PPID.PRE_DEC).encode() == 4 | op_params.PRE_DEC
        assert RegisterMode(registers.DX, indirect=True, ppid=PPID.POST_INC).encode() \
            == 12 | op_params.IND_POST_INC
        assert RegisterMode(registers.AX, indirect=True, offset=OffsetKind.NUM).encode() == 0xA9
        assert RegisterMode(registers.AX, indirect=True, offset=OffsetKind.REG).encode() == 0x99
        assert RegisterMode(registers.BX, indirect=True, offset=OffsetKind.EXT_REG).encode() == 0xBA

    def test_decode(self):
        mode = RegisterMode.decode(12 | op_params.IND_POST_DEC)
        assert mode.register == registers.DX
        assert mode.indirect
        assert mode.ppid is PPID.POST_DEC
        assert not mode.ppid.is_pre and not mode.ppid.is_inc
        assert mode.offset is None
        assert mode.size == 2

        mode = RegisterMode.decode(0xA9)
        assert mode.offset is OffsetKind.NUM
        assert mode.ppid is None

    def test_decode_inverts_encode(self):
        modes = [
            RegisterMode(registers.AH),
            RegisterMode(registers.BL, ppid=PPID.POST_INC),
            RegisterMode(registers.CX, indirect=True),
            RegisterMode(registers.CX, indirect=True, ppid=PPID.PRE_INC),
            RegisterMode(registers.AX, indirect=True, offset=OffsetKind.EXT_REG),
        ]
        for mode in modes:
            assert RegisterMode.decode(mode.encode()) == mode

    def test_invalid(self):
        with pytest.raises(ValueError):
            RegisterMode(registers.AX, offset=OffsetKind.NUM)
        with pytest.raises(ValueError):
            RegisterMode(registers.AX, indirect=True, ppid=PPID.PRE_INC, offset=OffsetKind.NUM)
        with pytest.raises(ValueError):
            RegisterMode.decode(registers.AL | op_params.OFFSET_NUM)
        with pytest.raises(ValueError):
            RegisterMode(16)
