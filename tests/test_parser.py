"""
Operand recognizer tests: addresses, registers with addressing-mode
decorations, numbers, and the byte/word classification of each.
"""

import pytest

from maikor_asm.errors import (
    AddressHexFormatError, AddressNumFormatError, AddressTooBigError, AssemblerError,
    GeneralParseError, InvalidOffsetError, InvalidRegisterError, NumberTooBigError,
)
from maikor_asm.isa.op_params import (
    INDIRECT, IND_OFFSET_EXT_REG, IND_OFFSET_NUM, IND_OFFSET_REG, IND_POST_INC,
    IND_PRE_DEC, POST_INC, PRE_DEC,
)
from maikor_asm.nodes import (
    Address, AddressToken, Byte, ExtReg, IndirectReg, NumberToken, Offset, PPID,
    Register, RegisterToken, Word,
)
from maikor_asm.parser import (
    detect_indirect, detect_offset, detect_ppid, detect_register, expects_bytes,
    parse_argument, parse_register,
)


class TestParseArgument:
    def test_numbers(self):
        assert parse_argument("605") == NumberToken(605)
        assert parse_argument("xF11") == NumberToken(3857)
        assert parse_argument("-1") == NumberToken(65535)
        assert parse_argument("'A'") == NumberToken(65)

    def test_addresses(self):
        assert parse_argument("$100") == AddressToken(100)
        assert parse_argument("$xF") == AddressToken(15)
        assert parse_argument("$b101") == AddressToken(5)

    def test_registers(self):
        assert parse_argument("aL") == RegisterToken(1)
        assert parse_argument("(Bx)") == RegisterToken(10 | INDIRECT)
        assert parse_argument("-ch") == RegisterToken(4 | PRE_DEC)
        assert parse_argument("(dx)+") == RegisterToken(12 | IND_POST_INC)

    def test_offsets(self):
        assert parse_argument("(ax+563)") == RegisterToken(9 | IND_OFFSET_NUM, None, 563)
        assert parse_argument("(ax+dh)") == RegisterToken(9 | IND_OFFSET_REG, 6, None)
        assert parse_argument("(ax+bx)") == RegisterToken(9 | IND_OFFSET_EXT_REG, 10, None)

    def test_surrounding_whitespace(self):
        assert parse_argument(" AL ") == RegisterToken(1)
        assert parse_argument("30,") == NumberToken(30)

    def test_invalid(self):
        for text in ["a", "78021", "xFFFF1", "$121231", "(dx", "(dx+141351)",
                     "(dx+a)", "(-dx+a)", "((dx)+al)", "(dx+10)-", ""]:
            with pytest.raises(AssemblerError):
                parse_argument(text)

    def test_error_kinds(self):
        with pytest.raises(InvalidRegisterError):
            parse_argument("a")
        with pytest.raises(NumberTooBigError):
            parse_argument("78021")
        with pytest.raises(InvalidOffsetError):
            parse_argument("(dx+a)")
        with pytest.raises(GeneralParseError):
            parse_argument("$AL")

    def test_address_errors_are_retagged(self):
        with pytest.raises(AddressTooBigError) as info:
            parse_argument("$121231", line_num=3)
        assert info.value.line_num == 3
        assert "Address" in str(info.value)
        with pytest.raises(AddressHexFormatError):
            parse_argument("$xZZ")
        with pytest.raises(AddressNumFormatError):
            parse_argument("$b12")
        with pytest.raises(AddressNumFormatError) as info:
            parse_argument("$", line_num=2)
        assert info.value.detail == "cannot parse integer from empty string"
        assert info.value.line_num == 2

    def test_line_number_is_reported(self):
        with pytest.raises(InvalidRegisterError) as info:
            parse_argument("QQ", line_num=6)
        assert info.value.line_num == 6
        assert "on line 7" in str(info.value)


class TestParseRegister:
    def test_whitespace_is_ignored(self):
        assert parse_register("AH ") == RegisterToken(0)
        assert parse_register("AX") == RegisterToken(9)
        assert parse_register("(AX )") == RegisterToken(9 | INDIRECT)
        assert parse_register("- ( AX)") == RegisterToken(9 | IND_PRE_DEC)
        assert parse_register("CL +") == RegisterToken(5 | POST_INC)

    def test_offsets(self):
        assert parse_register("( DX + 10)") == RegisterToken(12 | IND_OFFSET_NUM, None, 10)
        assert parse_register("(DX + BH )") == RegisterToken(12 | IND_OFFSET_REG, 2, None)
        assert parse_register("( CX + AX)") == RegisterToken(11 | IND_OFFSET_EXT_REG, 9, None)

    def test_offset_needs_indirection(self):
        with pytest.raises(InvalidRegisterError):
            parse_register("AX+10")

    def test_offset_excludes_ppid(self):
        with pytest.raises(InvalidRegisterError):
            parse_register("-(AX+10)")
        with pytest.raises(InvalidRegisterError):
            parse_register("(AX+BL)+")

    def test_at_most_one_ppid(self):
        """Leading and trailing decorations are exclusive in both directions."""
        for text in ["-AL+", "+AL-", "AL+-", "AL--", "--AL", "+(AX)-", "-(AX)+", "(AX)++"]:
            with pytest.raises(InvalidRegisterError):
                parse_register(text)


class TestDetectors:
    def test_register(self):
        names = ["ah", "al", "bh", "bl", "ch", "cl", "dh", "dl", "flg", "ax", "bx", "cx", "dx"]
        for expected, name in enumerate(names):
            assert detect_register(name, name) == expected
        for text in ["", "a", "al)", "h", "x", "yh"]:
            with pytest.raises(InvalidRegisterError):
                detect_register("", text)

    def test_indirect(self):
        assert detect_indirect("(al)", "(al)") == (True, "al")
        assert detect_indirect("(ax)", "(ax)") == (True, "ax")
        assert detect_indirect("(al+ax)", "(al+ax)") == (True, "al+ax")
        assert detect_indirect("(ax+500)", "(ax+500)") == (True, "ax+500")
        assert detect_indirect("al)", "al)") == (False, "al)")
        with pytest.raises(InvalidRegisterError):
            detect_indirect("(", "(")
        with pytest.raises(InvalidRegisterError):
            detect_indirect("(al+500", "(al+500")

    def test_ppid(self):
        assert detect_ppid("", "-al") == (PPID.PRE_DEC, "al")
        assert detect_ppid("", "+ax") == (PPID.PRE_INC, "ax")
        assert detect_ppid("", "bx-") == (PPID.POST_DEC, "bx")
        assert detect_ppid("", "dh+") == (PPID.POST_INC, "dh")
        assert detect_ppid("", "-(ax)") == (PPID.PRE_DEC, "(ax)")
        assert detect_ppid("", "+(bx)") == (PPID.PRE_INC, "(bx)")
        assert detect_ppid("", "(cx)-") == (PPID.POST_DEC, "(cx)")
        assert detect_ppid("", "(cx)+") == (PPID.POST_INC, "(cx)")
        assert detect_ppid("", "cx") == (None, "cx")
        assert detect_ppid("", "(bx)") == (None, "(bx)")
        assert detect_ppid("", "(ax+al)") == (None, "(ax+al)")

    def test_offset(self):
        assert detect_offset("", "100") == Offset(num=100)
        assert detect_offset("", "x100") == Offset(num=256)
        assert detect_offset("", "-124") == Offset(num=65412)
        assert detect_offset("", "bl") == Offset(reg=3)
        assert detect_offset("", "dx") == Offset(ext_reg=12)
        for text in ["(ax)", "90000", "xFFFFF", "-ax", "al+"]:
            with pytest.raises(InvalidOffsetError):
                detect_offset("", text)


class TestClassification:
    def test_numbers(self):
        assert NumberToken(0).to_argument(False) == Word(0)
        assert NumberToken(0).to_argument(True) == Byte(0)
        assert NumberToken(100).to_argument(False) == Word(100)
        assert NumberToken(100).to_argument(True) == Byte(100)
        assert NumberToken(255).to_argument(True) == Byte(255)
        assert NumberToken(256).to_argument(True) == Word(256)
        assert NumberToken(1000).to_argument(True) == Word(1000)

    def test_narrowing_is_stable(self):
        for byte_sized in (False, True):
            arg = NumberToken(42).to_argument(byte_sized)
            assert NumberToken(arg.value).to_argument(byte_sized) == arg

    def test_addresses(self):
        for value in (0, 100, 1000, 10000):
            assert AddressToken(value).to_argument(False) == Address(value)
            assert AddressToken(value).to_argument(True) == Address(value)

    def test_registers(self):
        assert RegisterToken(0).to_argument(False) == Register(0)
        assert RegisterToken(8).to_argument(True) == Register(8)
        assert RegisterToken(4 | PRE_DEC).to_argument(False) == Register(4 | PRE_DEC)
        assert RegisterToken(9).to_argument(False) == ExtReg(9)
        assert RegisterToken(12).to_argument(True) == ExtReg(12)
        assert RegisterToken(9 | INDIRECT).to_argument(False) == IndirectReg(9 | INDIRECT)
        assert RegisterToken(9 | IND_OFFSET_NUM, None, 15).to_argument(False) \
            == IndirectReg(9 | IND_OFFSET_NUM, None, 15)
        assert RegisterToken(9 | IND_OFFSET_REG, 1, None).to_argument(False) \
            == IndirectReg(9 | IND_OFFSET_REG, 1, None)

    def test_byte_register_indirection_is_indirect(self):
        assert RegisterToken(1 | INDIRECT).to_argument(True) == IndirectReg(1 | INDIRECT)

    def test_letters(self):
        assert [a.letter for a in (Address(0), Register(0), ExtReg(9),
                                   IndirectReg(9 | INDIRECT), Word(0), Byte(0))] \
            == ["A", "R", "E", "I", "W", "B"]


class TestExpectsBytes:
    def test_sized(self):
        assert expects_bytes("ADD.B")
        assert expects_bytes("add.b")
        assert not expects_bytes("ADD.W")
        assert not expects_bytes("JMP")

    def test_unsized_byte_ops(self):
        for mnemonic in ("MCPY", "JBC", "JBS", "JRF", "JRB", "jrf"):
            assert expects_bytes(mnemonic)
