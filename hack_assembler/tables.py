"""
Static machine tables for the Hack CPU.

C-instruction layout:  1 1 1 a c1 c2 c3 c4 c5 c6 d1 d2 d3 j1 j2 j3
A-instruction layout:  0 v14 ... v0

The comp table is a single flat mapping from the literal mnemonic to its
(a-bit, 6-bit code) pair. "A" and "M" spellings share the same six control
bits and differ only in the a-bit.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

WORD_WIDTH = 16
ADDRESS_LIMIT = 1 << (WORD_WIDTH - 1)   # 32768, first value an A-instruction can't hold
VARIABLE_BASE = 16                       # first RAM address handed to variables

NULL = "null"


# ──────────────────────────────────────────────
# Computation table
# ──────────────────────────────────────────────
# Format: { 'MNEMONIC': (a_bit, c1..c6) }

COMP_TABLE: Dict[str, Tuple[str, str]] = {}


def _comp(bits: str, a_form: str, m_form: Optional[str] = None):
    """Register the a=0 spelling and, when it has one, the a=1 spelling."""
    COMP_TABLE[a_form] = ("0", bits)
    if m_form is not None:
        COMP_TABLE[m_form] = ("1", bits)


_comp("101010", "0")
_comp("111111", "1")
_comp("111010", "-1")
_comp("001100", "D")
_comp("110000", "A",   "M")
_comp("001101", "!D")
_comp("110001", "!A",  "!M")
_comp("001111", "-D")
_comp("110011", "-A",  "-M")
_comp("011111", "D+1")
_comp("110111", "A+1", "M+1")
_comp("001110", "D-1")
_comp("110010", "A-1", "M-1")
_comp("000010", "D+A", "D+M")
_comp("010011", "D-A", "D-M")
_comp("000111", "A-D", "M-D")
_comp("000000", "D&A", "D&M")
_comp("010101", "D|A", "D|M")


# ──────────────────────────────────────────────
# Destination / jump tables
# ──────────────────────────────────────────────

DEST_TABLE: Dict[str, str] = {
    NULL:  "000",
    "M":   "001",
    "D":   "010",
    "MD":  "011",
    "A":   "100",
    "AM":  "101",
    "AD":  "110",
    "AMD": "111",
}

JUMP_TABLE: Dict[str, str] = {
    NULL:  "000",
    "JGT": "001",
    "JEQ": "010",
    "JGE": "011",
    "JLT": "100",
    "JNE": "101",
    "JLE": "110",
    "JMP": "111",
}


# ──────────────────────────────────────────────
# Predefined symbols
# ──────────────────────────────────────────────

@dataclass(frozen=True)
class PredefinedSymbol:
    name: str
    value: int
    alias: Optional[str] = None


PREDEFINED_SYMBOLS: List[PredefinedSymbol] = [
    PredefinedSymbol("R0", 0, "SP"),
    PredefinedSymbol("R1", 1, "LCL"),
    PredefinedSymbol("R2", 2, "ARG"),
    PredefinedSymbol("R3", 3, "THIS"),
    PredefinedSymbol("R4", 4, "THAT"),
    *(PredefinedSymbol(f"R{i}", i) for i in range(5, 16)),
    PredefinedSymbol("SCREEN", 16384),
    PredefinedSymbol("KBD", 24576),
]


def predefined_lookup() -> Dict[str, int]:
    """Flatten the predefined list into name -> value, aliases included."""
    table: Dict[str, int] = {}
    for sym in PREDEFINED_SYMBOLS:
        table[sym.name] = sym.value
        if sym.alias:
            table[sym.alias] = sym.value
    return table
