"""Operator table and node kinds for arithmetic expression trees."""

from enum import Enum, auto

from exprforge.errors import InvalidOperatorError


class NodeType(Enum):
    """Types of nodes in an expression tree."""

    LITERAL = auto()     # Leaf holding one input number
    OPERATOR = auto()    # Binary operator with two children


class Operator(Enum):
    """The four binary arithmetic operators."""

    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"

    @property
    def symbol(self) -> str:
        """Get the single-character symbol used when rendering."""
        return self.value

    @classmethod
    def from_symbol(cls, symbol: "str | Operator") -> "Operator":
        """Look up an operator by its symbol.

        Raises:
            InvalidOperatorError: If the symbol is not + - * or /.
        """
        if isinstance(symbol, Operator):
            return symbol
        try:
            return cls(symbol)
        except ValueError:
            raise InvalidOperatorError(symbol) from None

    def __str__(self) -> str:
        return self.value


# Generation order: every (left, right) pair is combined with these in turn
OPERATORS: tuple[Operator, ...] = (
    Operator.ADD,
    Operator.SUB,
    Operator.MUL,
    Operator.DIV,
)
