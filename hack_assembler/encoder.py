"""
Instruction encoder: resolved instructions -> 16-character binary words.

  A-instruction  @value          ->  0 + 15-bit value
  C-instruction  dest=comp       ->  111 a cccccc ddd 000
                 comp;jump       ->  111 a cccccc 000 jjj

A C-instruction carries exactly one of '=' or ';'.
"""

from __future__ import annotations
from typing import Optional, Tuple

from .errors import (AssemblerError, MalformedInstructionError, UnknownMnemonicError,
                     ValueOutOfRangeError)
from .normalizer import InstrKind, Instruction
from .tables import ADDRESS_LIMIT, COMP_TABLE, DEST_TABLE, JUMP_TABLE, NULL, WORD_WIDTH


def split_compute(text: str, line_num: int = 0) -> Tuple[Optional[str], str, Optional[str]]:
    """Split 'dest=comp' or 'comp;jump' into (dest, comp, jump)."""
    has_dest = "=" in text
    has_jump = ";" in text
    if has_dest == has_jump:
        what = "both '=' and ';'" if has_dest else "neither '=' nor ';'"
        raise MalformedInstructionError(f"C-instruction has {what}: '{text}'", line_num, text)

    sep = "=" if has_dest else ";"
    parts = [p.strip() for p in text.split(sep)]
    if len(parts) != 2 or not parts[0] or not parts[1]:
        raise MalformedInstructionError(f"Malformed C-instruction: '{text}'", line_num, text)

    if has_dest:
        return parts[0], parts[1], None
    return None, parts[0], parts[1]


def encode_address(instr: Instruction) -> str:
    operand = instr.symbol or ""
    if not (operand.isdecimal() and operand.isascii()):
        raise MalformedInstructionError(
            f"A-instruction operand is not a resolved address: '{operand}'",
            instr.line_num, instr.raw)
    value = int(operand)
    if value >= ADDRESS_LIMIT:
        raise ValueOutOfRangeError(
            f"Address {value} out of range (max {ADDRESS_LIMIT - 1})",
            instr.line_num, instr.raw)
    return "0" + format(value, f"0{WORD_WIDTH - 1}b")


def encode_compute(instr: Instruction) -> str:
    dest, comp, jump = split_compute(instr.text, instr.line_num)

    if comp not in COMP_TABLE:
        raise UnknownMnemonicError(f"Unknown comp mnemonic: '{comp}'", instr.line_num, instr.raw)
    dest = dest or NULL
    if dest not in DEST_TABLE:
        raise UnknownMnemonicError(f"Unknown dest mnemonic: '{dest}'", instr.line_num, instr.raw)
    jump = jump or NULL
    if jump not in JUMP_TABLE:
        raise UnknownMnemonicError(f"Unknown jump mnemonic: '{jump}'", instr.line_num, instr.raw)

    a_bit, comp_bits = COMP_TABLE[comp]
    return "111" + a_bit + comp_bits + DEST_TABLE[dest] + JUMP_TABLE[jump]


def encode(instr: Instruction) -> str:
    """Encode one resolved instruction into a 16-character word."""
    if instr.kind is InstrKind.ADDRESS:
        return encode_address(instr)
    if instr.kind is InstrKind.COMPUTE:
        return encode_compute(instr)
    raise AssemblerError(f"Cannot encode a label declaration: '{instr.text}'",
                         instr.line_num, instr.raw)
