"""Exception hierarchy for expression search."""


class ExpressionError(Exception):
    """Base class for all exprforge errors."""


class InvalidOperatorError(ExpressionError, ValueError):
    """Raised when an operator symbol is not one of + - * /."""

    def __init__(self, symbol: object) -> None:
        self.symbol = symbol
        super().__init__(f"Invalid operator: {symbol!r}")


class InvalidInputError(ExpressionError, ValueError):
    """Raised when a search request or sub-range is malformed."""
