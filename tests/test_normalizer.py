"""Line normalizer and classification tests."""

import pytest
from hack_assembler.normalizer import InstrKind, classify, normalize, strip_line


class TestStripLine:
    """Comment and whitespace stripping."""

    @pytest.mark.parametrize("raw, expected", [
        ("   @SCREEN  // just a test comment", "@SCREEN"),
        ("D=M//comment", "D=M"),
        ("// Fill.asm", ""),
        ("\t\t", ""),
        ("", ""),
        ("  0;JMP  ", "0;JMP"),
        ("M=D / not a comment", "M=D / not a comment"),
    ])
    def test_strip(self, raw, expected):
        assert strip_line(raw) == expected

    def test_cuts_at_first_marker(self):
        assert strip_line("@x // a // b") == "@x"


class TestClassify:
    """One-time LABEL / ADDRESS / COMPUTE tagging."""

    def test_label(self):
        instr = classify("(LOOP)", 4)
        assert instr.kind is InstrKind.LABEL
        assert instr.symbol == "LOOP"
        assert instr.line_num == 4
        assert instr.is_label

    def test_address(self):
        instr = classify("@sum")
        assert instr.kind is InstrKind.ADDRESS
        assert instr.symbol == "sum"

    def test_compute(self):
        instr = classify("AM=M-1")
        assert instr.kind is InstrKind.COMPUTE
        assert instr.symbol is None

    def test_half_parenthesized_is_not_a_label(self):
        assert classify("(LOOP").kind is InstrKind.COMPUTE


class TestNormalize:
    """Blank-line removal, ordering and original line numbers."""

    def test_drops_blank_and_comment_lines_keeps_order(self):
        lines = ["// header", "", "@1", "   ", "D=A // load", "(END)", "@END"]
        result = normalize(lines)
        assert [i.text for i in result] == ["@1", "D=A", "(END)", "@END"]
        assert [i.kind for i in result] == [InstrKind.ADDRESS, InstrKind.COMPUTE,
                                           InstrKind.LABEL, InstrKind.ADDRESS]

    def test_keeps_original_line_numbers(self):
        result = normalize(["", "// c", "@1", "", "D=A"])
        assert [i.line_num for i in result] == [3, 5]
        assert result[1].raw == "D=A"

    def test_empty(self):
        assert normalize([]) == []
        assert normalize(["//", "  "]) == []

    def test_splits_elements_holding_several_lines(self):
        result = normalize(["@1\nD=A", "", "// c\r\n0;JMP"])
        assert [i.text for i in result] == ["@1", "D=A", "0;JMP"]
        assert [i.line_num for i in result] == [1, 2, 5]
