"""
Per-translation symbol table.

Holds three disjoint ranges: predefined registers and aliases (fixed at
construction), program labels (ROM addresses), and variables (RAM addresses
handed out from ``var_base`` upward). A new table is built for every
translation; nothing here is module-level state.
"""

from __future__ import annotations
from typing import Dict, Optional

from .errors import DuplicateLabelError, UnresolvedSymbolError
from .tables import ADDRESS_LIMIT, VARIABLE_BASE, predefined_lookup


class SymbolTable:

    def __init__(self, var_base: int = VARIABLE_BASE):
        if not VARIABLE_BASE <= var_base < ADDRESS_LIMIT:
            raise ValueError(
                f"Variable base {var_base} must be in {VARIABLE_BASE}..{ADDRESS_LIMIT - 1} "
                f"(R0-R15 are reserved)")
        self._predefined: Dict[str, int] = predefined_lookup()
        self.labels: Dict[str, int] = {}
        self.variables: Dict[str, int] = {}
        self.var_base = var_base
        self.next_variable = var_base

    # ── queries ──

    def is_predefined(self, name: str) -> bool:
        return name in self._predefined

    def __contains__(self, name: str) -> bool:
        return name in self.labels or name in self._predefined or name in self.variables

    def get(self, name: str) -> Optional[int]:
        """Look a name up without allocating. Labels win over predefined names."""
        if name in self.labels:
            return self.labels[name]
        if name in self._predefined:
            return self._predefined[name]
        return self.variables.get(name)

    def lookup(self, name: str, line_num: int = 0) -> int:
        value = self.get(name)
        if value is None:
            raise UnresolvedSymbolError(f"Undefined symbol: '{name}'", line_num)
        return value

    # ── mutation ──

    def define_label(self, name: str, address: int, line_num: int = 0):
        """Bind a label to a ROM address. Re-declaring any known name is an error."""
        if name in self._predefined:
            raise DuplicateLabelError(
                f"Label '{name}' redefines a predefined symbol", line_num)
        if name in self.labels:
            raise DuplicateLabelError(
                f"Label '{name}' already declared (ROM {self.labels[name]})", line_num)
        self.labels[name] = address

    def allocate(self, name: str) -> int:
        """Return the variable's address, allocating the next free slot on first use."""
        if name in self.variables:
            return self.variables[name]
        addr = self.next_variable
        self.variables[name] = addr
        self.next_variable += 1
        return addr

    def resolve(self, operand: str) -> int:
        """Resolve an A-instruction operand: label, predefined, literal, then variable."""
        if operand in self.labels:
            return self.labels[operand]
        if operand in self._predefined:
            return self._predefined[operand]
        if operand.isdecimal() and operand.isascii():
            return int(operand)
        return self.allocate(operand)

