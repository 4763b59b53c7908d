"""
Two-pass symbol resolution.

  Pass 1 (resolve_labels):  walk the normalized stream with a ROM counter.
           A label is bound to the counter's current value and dropped from
           the stream; every other line is kept and advances the counter.
  Pass 2 (resolve_symbols): rewrite each A-instruction operand to a
           concrete integer. Labels are all known by now, so lookups never
           need to look ahead; unseen names become variables in RAM.

Both passes take an optional ``errors`` list. When given, per-line errors
are appended and processing continues; otherwise the first error is raised.
"""

from __future__ import annotations
import dataclasses
import logging
from typing import List, Optional

from .errors import AssemblerError, MalformedInstructionError
from .normalizer import ADDRESS_MARKER, InstrKind, Instruction
from .symbols import SymbolTable

log = logging.getLogger(__name__)


def _report(err: AssemblerError, errors: Optional[List[AssemblerError]]):
    if errors is None:
        raise err
    errors.append(err)


def resolve_labels(instructions: List[Instruction], symbols: SymbolTable,
                   errors: Optional[List[AssemblerError]] = None) -> List[Instruction]:
    """Pass 1: record label addresses and strip label lines."""
    result: List[Instruction] = []
    pc = 0
    for instr in instructions:
        if instr.kind is not InstrKind.LABEL:
            result.append(instr)
            pc += 1
            continue
        try:
            name = instr.symbol
            if not name:
                raise MalformedInstructionError("Empty label declaration", instr.line_num, instr.raw)
            if name.isdecimal():
                raise MalformedInstructionError(
                    f"Label name cannot be a number: '{name}'", instr.line_num, instr.raw)
            symbols.define_label(name, pc, instr.line_num)
            log.debug("label %s -> ROM %d", name, pc)
        except AssemblerError as e:
            e.line_text = e.line_text or instr.raw
            _report(e, errors)
    return result


def resolve_symbols(instructions: List[Instruction], symbols: SymbolTable,
                    errors: Optional[List[AssemblerError]] = None) -> List[Instruction]:
    """Pass 2: replace every A-instruction operand with its numeric value."""
    result: List[Instruction] = []
    for instr in instructions:
        if instr.kind is not InstrKind.ADDRESS:
            result.append(instr)
            continue
        operand = instr.symbol or ""
        if not operand:
            _report(MalformedInstructionError("Missing A-instruction operand",
                                              instr.line_num, instr.raw), errors)
            continue
        value = symbols.resolve(operand)
        if str(value) == operand:
            result.append(instr)
        else:
            result.append(dataclasses.replace(
                instr, text=f"{ADDRESS_MARKER}{value}", symbol=str(value)))
    log.debug("resolved symbols: %d labels, %d variables",
              len(symbols.labels), len(symbols.variables))
    return result
