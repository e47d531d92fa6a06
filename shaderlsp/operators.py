"""Unary, binary and compound-assignment operators."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Union


class UnaryOp(enum.Enum):
    MINUS = "-"
    NOT = "!"
    REF = "&"
    DEREF = "*"
    BIT_NOT = "~"

    def symbol(self) -> str:
        return self.value


class LogicOp(enum.Enum):
    AND = "&&"
    OR = "||"

    def symbol(self) -> str:
        return self.value


class ArithOp(enum.Enum):
    ADD = "+"
    MUL = "*"
    SUB = "-"
    DIV = "/"
    SHL = "<<"
    SHR = ">>"
    BIT_XOR = "^"
    BIT_OR = "|"
    BIT_AND = "&"
    MODULO = "%"

    def symbol(self) -> str:
        return self.value


class Ordering(enum.Enum):
    LESS = "less"
    GREATER = "greater"


@dataclass(frozen=True)
class EqualityOp:
    """An equality comparison; ``negated`` selects the symbol as the grammar does."""

    negated: bool

    def symbol(self) -> str:
        return "==" if self.negated else "!="


@dataclass(frozen=True)
class OrderingOp:
    ordering: Ordering
    strict: bool

    def symbol(self) -> str:
        if self.ordering is Ordering.LESS:
            return "<" if self.strict else "<="
        return ">" if self.strict else ">="


CmpOp = Union[EqualityOp, OrderingOp]
BinaryOp = Union[LogicOp, ArithOp, EqualityOp, OrderingOp]


class CompoundOp(enum.Enum):
    ADD = "add"
    MUL = "mul"
    SUB = "sub"
    DIV = "div"
    SHL = "shl"
    SHR = "shr"
    MODULO = "modulo"
    BIT_AND = "bit_and"
    BIT_OR = "bit_or"
    BIT_XOR = "bit_xor"

    def to_binary(self) -> ArithOp:
        """The arithmetic operator this compound assignment applies."""
        return ArithOp[self.name]