"""
Error taxonomy for the Hack assembler.

Every per-line failure is an ``AssemblerError`` subclass carrying the
1-based source line it came from. The driver collects them across all
passes and raises a single ``TranslationError`` at the end, so one run
reports every problem in the program.
"""

from __future__ import annotations
import enum
from typing import List


class ErrorKind(enum.Enum):
    EMPTY_INPUT = "EmptyInput"
    DUPLICATE_LABEL = "DuplicateLabelDeclaration"
    UNRESOLVED_SYMBOL = "UnresolvedSymbol"
    UNKNOWN_MNEMONIC = "UnknownMnemonic"
    VALUE_OUT_OF_RANGE = "ValueOutOfRange"
    MALFORMED = "MalformedInstruction"
    TRANSLATION_FAILED = "TranslationFailed"   # aggregate; per-line kinds are in .kinds


class AssemblerError(Exception):
    """Raised on assembly errors."""
    kind: ErrorKind = ErrorKind.MALFORMED

    def __init__(self, message: str, line_num: int = 0, line_text: str = ""):
        self.message = message
        self.line_num = line_num
        self.line_text = line_text
        super().__init__(f"Line {line_num}: {message}" if line_num else message)


class EmptyInputError(AssemblerError):
    kind = ErrorKind.EMPTY_INPUT


class DuplicateLabelError(AssemblerError):
    kind = ErrorKind.DUPLICATE_LABEL


class UnresolvedSymbolError(AssemblerError):
    kind = ErrorKind.UNRESOLVED_SYMBOL


class UnknownMnemonicError(AssemblerError):
    kind = ErrorKind.UNKNOWN_MNEMONIC


class ValueOutOfRangeError(AssemblerError):
    kind = ErrorKind.VALUE_OUT_OF_RANGE


class MalformedInstructionError(AssemblerError):
    kind = ErrorKind.MALFORMED


class TranslationError(AssemblerError):
    """Aggregate failure: the whole unit produced no output.

    ``errors`` holds every collected per-line error, ordered by line.
    ``kind`` is always TRANSLATION_FAILED; use ``kinds`` for the per-line categories.
    """
    kind = ErrorKind.TRANSLATION_FAILED

    def __init__(self, errors: List[AssemblerError]):
        self.errors = sorted(errors, key=lambda e: e.line_num)
        noun = "error" if len(self.errors) == 1 else "errors"
        summary = f"{len(self.errors)} {noun}:\n" + "\n".join(str(e) for e in self.errors)
        super().__init__(summary)

    @property
    def kinds(self) -> List[ErrorKind]:
        return [e.kind for e in self.errors]
