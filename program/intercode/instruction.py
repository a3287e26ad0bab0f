from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Operator(Enum):
    """Operators that may appear in an intermediate instruction."""

    ADD = '+'
    SUB = '-'
    MUL = '*'
    DIV = '/'
    MOD = '%'
    POW = '^'
    ASSIGN = '='

    @classmethod
    def from_symbol(cls, symbol: str) -> "Operator":
        """
        Look up the operator written as ``symbol``.

        Raises:
            ValueError: if ``symbol`` is not a known operator
        """
        return cls(symbol)

    @property
    def symbol(self) -> str:
        return self.value

    @property
    def precedence(self) -> int:
        return _PRECEDENCE[self]

    @property
    def is_right_associative(self) -> bool:
        return self is Operator.POW

    @property
    def is_binary(self) -> bool:
        return self is not Operator.ASSIGN


_PRECEDENCE = {
    Operator.ASSIGN: 0,
    Operator.ADD: 1,
    Operator.SUB: 1,
    Operator.MUL: 2,
    Operator.DIV: 2,
    Operator.MOD: 2,
    Operator.POW: 3,
}


@dataclass(frozen=True)
class Instruction:
    """
    One step of linear intermediate code: ``result = arg1 op arg2``.

    The same record backs every representation.  Quadruples show all four
    fields, triples drop ``result`` because an instruction is addressed by its
    position in the sequence.  Operands still name temporaries directly, so a
    triple never refers back to a position.
    """

    operator: Operator
    arg1: str
    arg2: Optional[str]
    result: str

    def __post_init__(self):
        if self.operator.is_binary and self.arg2 is None:
            raise ValueError(f"operator '{self.operator.symbol}' needs a second operand")
        if not self.operator.is_binary and self.arg2 is not None:
            raise ValueError("assignment takes a single operand")

    @classmethod
    def binary(cls, operator: Operator, arg1: str, arg2: str, result: str) -> "Instruction":
        return cls(operator, arg1, arg2, result)

    @classmethod
    def assign(cls, source: str, target: str) -> "Instruction":
        return cls(Operator.ASSIGN, source, None, target)

    @property
    def is_assignment(self) -> bool:
        return self.operator is Operator.ASSIGN

    def __str__(self) -> str:
        if self.is_assignment:
            # Copy: x = y
            return f"{self.result} = {self.arg1}"
        # Binary operation: x = y op z
        return f"{self.result} = {self.arg1} {self.operator.symbol} {self.arg2}"

    def to_quadruple(self) -> str:
        """Return the instruction as ``(op, arg1, arg2, result)``."""
        # Assignments leave a blank placeholder in the arg2 slot
        arg2 = " " if self.is_assignment else self.arg2
        return f"({self.operator.symbol}, {self.arg1}, {arg2}, {self.result})"

    def to_triple(self) -> str:
        """Return the instruction as ``(op, arg1, arg2)``."""
        arg2 = "" if self.arg2 is None else self.arg2
        return f"({self.operator.symbol}, {self.arg1}, {arg2})"
