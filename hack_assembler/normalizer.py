"""
Line normalizer and classifier.

Strips ``//`` comments and surrounding whitespace, drops lines that end up
empty, and tags every surviving line once as a label declaration, an
A-instruction or a C-instruction. Later stages dispatch on ``kind`` and never
re-inspect prefixes.

    (LOOP)      -> LABEL    symbol='LOOP'
    @i          -> ADDRESS  symbol='i'
    D=M;        -> COMPUTE
"""

from __future__ import annotations
import enum
import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional

log = logging.getLogger(__name__)

COMMENT = "//"
ADDRESS_MARKER = "@"


class InstrKind(enum.Enum):
    LABEL = "label"
    ADDRESS = "address"
    COMPUTE = "compute"


@dataclass
class Instruction:
    """One normalized, non-empty source line."""
    kind: InstrKind
    text: str
    line_num: int = 0
    raw: str = ""
    symbol: Optional[str] = None

    @property
    def is_label(self) -> bool:
        return self.kind is InstrKind.LABEL


def strip_line(line: str) -> str:
    """Cut at the first comment marker and trim whitespace."""
    pos = line.find(COMMENT)
    if pos >= 0:
        line = line[:pos]
    return line.strip()


def classify(text: str, line_num: int = 0, raw: str = "") -> Instruction:
    if text.startswith("(") and text.endswith(")"):
        return Instruction(InstrKind.LABEL, text, line_num, raw, text[1:-1].strip())
    if text.startswith(ADDRESS_MARKER):
        return Instruction(InstrKind.ADDRESS, text, line_num, raw, text[1:].strip())
    return Instruction(InstrKind.COMPUTE, text, line_num, raw)


def _physical_lines(lines: Iterable[str]) -> Iterator[str]:
    # An element may itself hold several lines; an empty element still counts as one.
    for chunk in lines:
        yield from chunk.splitlines() or [""]


def normalize(lines: Iterable[str]) -> List[Instruction]:
    """Turn raw source lines into classified instructions, order preserved."""
    result: List[Instruction] = []
    for i, line in enumerate(_physical_lines(lines), 1):
        raw = line.rstrip("\r\n")
        text = strip_line(raw)
        if not text:
            continue
        result.append(classify(text, i, raw))
    log.debug("normalized %d lines", len(result))
    return result
