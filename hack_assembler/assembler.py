"""
Hack Two-Pass Assembler.

Assembles Hack assembly text into 16-character binary words, one per
emitted instruction.

Input:  Assembly text (one string, or an iterable of lines)
Output: List of '0'/'1' words, ``.hack`` text, or a listing

Pipeline:
  normalize        -> strip comments/whitespace, classify each line once
  resolve_labels   -> Pass 1: bind labels to ROM addresses, drop label lines
  resolve_symbols  -> Pass 2: rewrite A-operands to integers, allocate variables
  encode           -> lookup-table encoding of every resolved line

Errors from every stage are collected rather than raised on the spot. If
any were found, ``assemble()`` raises one ``TranslationError`` listing all
of them and no words are produced.
"""

from __future__ import annotations
import logging
from typing import Iterable, List, Union

from .encoder import encode
from .errors import AssemblerError, EmptyInputError, TranslationError
from .normalizer import Instruction, normalize
from .resolver import resolve_labels, resolve_symbols
from .symbols import SymbolTable
from .tables import VARIABLE_BASE

__all__ = ['Assembler', 'AssemblerError', 'TranslationError', 'assemble', 'assemble_to_hack']

log = logging.getLogger(__name__)

Source = Union[str, Iterable[str]]


class Assembler:
    """Two-pass Hack assembler.

    Usage:
        asm = Assembler()
        words = asm.assemble(source_text)
        listing = asm.get_listing()

    Each ``assemble()`` call builds a new symbol table, so one instance can be
    reused without earlier runs leaking labels or variables.
    """

    def __init__(self, var_base: int = VARIABLE_BASE):
        self.var_base = var_base
        self.symbols = SymbolTable(var_base)
        self.words: List[str] = []
        self.errors: List[AssemblerError] = []
        self.instructions: List[Instruction] = []   # resolved, label-free stream
        self._lines: List[Instruction] = []          # normalized stream, labels included

    def assemble(self, source: Source) -> List[str]:
        """Assemble source into binary words, or raise TranslationError."""
        self.symbols = SymbolTable(self.var_base)
        self.words = []
        self.errors = []
        self.instructions = []

        if isinstance(source, str):
            source = source.splitlines()
        self._lines = normalize(source)

        if not self._lines:
            self.errors.append(EmptyInputError("No instructions in source"))
            raise TranslationError(self.errors)

        # Pass 1: labels
        stream = resolve_labels(self._lines, self.symbols, self.errors)
        if not stream:
            self.errors.append(EmptyInputError("Source declares labels but no instructions"))

        # Pass 2: operands
        stream = resolve_symbols(stream, self.symbols, self.errors)

        words = []
        for instr in stream:
            try:
                words.append(encode(instr))
            except AssemblerError as e:
                self.errors.append(e)

        if self.errors:
            log.debug("assembly failed with %d errors", len(self.errors))
            self._discard_run()
            raise TranslationError(self.errors)

        self.instructions = stream
        self.words = words
        log.info("assembled %d instructions (%d labels, %d variables)",
                 len(words), len(self.symbols.labels), len(self.symbols.variables))
        return self.words

    def _discard_run(self):
        """Drop everything a failed run built; a failed translation commits nothing."""
        self.symbols = SymbolTable(self.var_base)
        self._lines = []

    def to_hack(self) -> str:
        """Newline-terminated word per line, as written to a .hack file."""
        return "".join(w + "\n" for w in self.words)

    def get_listing(self) -> str:
        """ROM address, word and source text for the last successful run."""
        lines = []
        lines.append(f"{'ROM':>5}  {'WORD':<16}  SOURCE")
        lines.append("-" * 60)

        pc = 0
        for instr in self._lines:
            if instr.is_label:
                lines.append(f"{'':5}  {'':16}  {instr.text}")
                continue
            if pc >= len(self.words):
                break
            lines.append(f"{pc:5d}  {self.words[pc]}  {instr.text}")
            pc += 1

        return '\n'.join(lines)

    def dump_symbols(self) -> str:
        """User-defined symbols: labels (ROM) then variables (RAM)."""
        lines = []
        for name, value in self.symbols.labels.items():
            lines.append(f"{name:<24} ROM {value}")
        for name, value in self.symbols.variables.items():
            lines.append(f"{name:<24} RAM {value}")
        return '\n'.join(lines)


# ──────────────────────────────────────────────
# Convenience functions
# ──────────────────────────────────────────────

def assemble(source: Source) -> List[str]:
    """Assemble source, return the list of binary words."""
    return Assembler().assemble(source)


def assemble_to_hack(source: Source) -> str:
    """Assemble source, return .hack file text."""
    asm = Assembler()
    asm.assemble(source)
    return asm.to_hack()
