"""Symbol table and two-pass resolver tests."""

import pytest
from hack_assembler.errors import (DuplicateLabelError, MalformedInstructionError,
                                   UnresolvedSymbolError)
from hack_assembler.normalizer import InstrKind, normalize
from hack_assembler.resolver import resolve_labels, resolve_symbols
from hack_assembler.symbols import SymbolTable


class TestSymbolTable:
    """Predefined, label and variable ranges of the symbol table."""

    def test_predefined_present(self):
        st = SymbolTable()
        assert st.get("SCREEN") == 16384
        assert st.get("KBD") == 24576
        assert st.get("THAT") == st.get("R4") == 4
        assert st.is_predefined("LCL")
        assert "R15" in st

    def test_allocate_is_monotonic_and_stable(self):
        st = SymbolTable()
        assert st.allocate("a") == 16
        assert st.allocate("b") == 17
        assert st.allocate("a") == 16
        assert st.next_variable == 18

    def test_resolve_order(self):
        st = SymbolTable()
        st.define_label("LOOP", 7)
        assert st.resolve("LOOP") == 7
        assert st.resolve("SP") == 0
        assert st.resolve("123") == 123
        assert st.resolve("fresh") == 16
        assert st.variables == {"fresh": 16}

    def test_numeric_literal_not_allocated(self):
        st = SymbolTable()
        st.resolve("42")
        assert st.variables == {}
        assert st.next_variable == 16

    def test_lookup_unknown_raises(self):
        st = SymbolTable()
        with pytest.raises(UnresolvedSymbolError, match="Undefined symbol"):
            st.lookup("nowhere", 9)

    def test_duplicate_label(self):
        st = SymbolTable()
        st.define_label("X", 1)
        with pytest.raises(DuplicateLabelError):
            st.define_label("X", 5, 12)
        assert st.labels["X"] == 1

    def test_predefined_never_overwritten(self):
        st = SymbolTable()
        with pytest.raises(DuplicateLabelError, match="predefined"):
            st.define_label("R3", 99)
        assert st.get("R3") == 3

    def test_var_base_range_checked(self):
        assert SymbolTable(var_base=16).next_variable == 16
        assert SymbolTable(var_base=32767).next_variable == 32767
        with pytest.raises(ValueError):
            SymbolTable(var_base=0)
        with pytest.raises(ValueError):
            SymbolTable(var_base=32768)

    def test_tables_are_independent(self):
        a, b = SymbolTable(), SymbolTable()
        a.allocate("v")
        a.define_label("L", 0)
        assert "v" not in b
        assert "L" not in b
        assert b.next_variable == 16


class TestResolveLabels:
    """Pass 1: label addresses and label-line stripping."""

    def test_strips_labels_and_records_addresses(self):
        st = SymbolTable()
        stream = resolve_labels(normalize(["(A)", "@1", "(B)", "D=A", "(C)"]), st)
        assert [i.text for i in stream] == ["@1", "D=A"]
        assert st.labels == {"A": 0, "B": 1, "C": 2}

    def test_collects_instead_of_raising(self):
        st = SymbolTable()
        errors = []
        stream = resolve_labels(normalize(["(A)", "D=0", "(A)", "()", "(12)"]), st, errors)
        assert len(stream) == 1
        assert [type(e) for e in errors] == [DuplicateLabelError,
                                            MalformedInstructionError,
                                            MalformedInstructionError]
        assert [e.line_num for e in errors] == [3, 4, 5]

    def test_raises_without_error_list(self):
        with pytest.raises(DuplicateLabelError):
            resolve_labels(normalize(["(A)", "(A)"]), SymbolTable())


class TestResolveSymbols:
    """Pass 2: operand rewriting to concrete addresses."""

    def test_rewrites_operands(self):
        st = SymbolTable()
        stream = resolve_labels(normalize(["@i", "(L)", "@L", "@KBD", "@7", "D=M"]), st)
        stream = resolve_symbols(stream, st)
        assert [i.text for i in stream] == ["@16", "@1", "@24576", "@7", "D=M"]
        assert stream[0].symbol == "16"
        assert stream[-1].kind is InstrKind.COMPUTE

    def test_does_not_mutate_input(self):
        st = SymbolTable()
        stream = normalize(["@var"])
        resolve_symbols(stream, st)
        assert stream[0].text == "@var"

    def test_leading_zero_literal(self):
        stream = resolve_symbols(normalize(["@007"]), SymbolTable())
        assert stream[0].symbol == "7"

    def test_missing_operand(self):
        errors = []
        resolve_symbols(normalize(["@"]), SymbolTable(), errors)
        assert isinstance(errors[0], MalformedInstructionError)
