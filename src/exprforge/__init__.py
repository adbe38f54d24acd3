"""
exprforge: exhaustive search for arithmetic expressions that hit a target.

Given an ordered sequence of integers, every parenthesization and every
choice of + - * / between neighbours is generated, evaluated with
fixed-width integer rules and matched against a target value.
"""

__version__ = "0.1.0"

from exprforge.config import SearchConfig
from exprforge.errors import ExpressionError, InvalidInputError, InvalidOperatorError
from exprforge.search import ExpressionSearch, SearchResult, find_expressions

__all__ = [
    "__version__",
    "SearchConfig",
    "ExpressionError",
    "InvalidInputError",
    "InvalidOperatorError",
    "ExpressionSearch",
    "SearchResult",
    "find_expressions",
]
