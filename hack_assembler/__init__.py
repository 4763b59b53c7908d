"""
Hack Assembler
==============
A two-pass assembler for the 16-bit Hack CPU. It turns symbolic Hack
assembly (.asm) into binary machine words (.hack), one 16-character
'0'/'1' string per instruction.

Architecture:
    ┌──────────┐    ┌────────────┐    ┌──────────┐    ┌──────────┐    ┌─────────┐
    │ .asm     │───>│ Normalizer │───>│  Labels  │───>│ Symbols  │───>│ Encoder │
    │ (lines)  │    │ (classify) │    │ (pass 1) │    │ (pass 2) │    │ (words) │
    └──────────┘    └────────────┘    └──────────┘    └──────────┘    └─────────┘

    - normalizer.py: strips comments/whitespace, tags LABEL / ADDRESS / COMPUTE
    - resolver.py:   label pass (ROM addresses) and operand pass (RAM variables)
    - symbols.py:    per-run symbol table: predefined, labels, variables
    - encoder.py:    A-/C-instruction bit packing from tables.py
    - assembler.py:  drives the stages and collects every error in one pass
"""

__version__ = "0.2.0"

from .errors import (AssemblerError, DuplicateLabelError, EmptyInputError, ErrorKind,
                     MalformedInstructionError, TranslationError, UnknownMnemonicError,
                     UnresolvedSymbolError, ValueOutOfRangeError)
from .normalizer import InstrKind, Instruction, normalize
from .symbols import SymbolTable
from .assembler import Assembler, assemble, assemble_to_hack
