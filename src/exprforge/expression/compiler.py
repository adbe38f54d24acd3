"""Vectorized evaluation of every candidate expression.

Computes the values of all trees of a range directly with numpy, without
constructing any nodes. For each split point the value arrays of the left
and right sub-ranges are combined by broadcasting, so one operator touches
every (left, right) pair at once.

Values come out in the same order as ``generate_expressions`` and follow the
same fixed-width rules as ``Node.evaluate``.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

from exprforge.errors import InvalidInputError
from exprforge.expression.arithmetic import DEFAULT_SEMANTICS, IntegerSemantics
from exprforge.expression.generator import tree_at_index
from exprforge.expression.nodes import Node
from exprforge.expression.types import OPERATORS, Operator


def evaluate_candidates(
    numbers: Sequence[int],
    start: int = 0,
    end: int | None = None,
    semantics: IntegerSemantics = DEFAULT_SEMANTICS,
    operators: Sequence[Operator] = OPERATORS,
) -> np.ndarray:
    """Evaluate every candidate tree over ``numbers[start:end + 1]``.

    Returns:
        int64 array; element i is the value of the i-th generated tree
    """
    if end is None:
        end = len(numbers) - 1
    if not 0 <= start <= end < len(numbers):
        raise InvalidInputError(
            f"Invalid range [{start}, {end}] for {len(numbers)} numbers"
        )
    return _range_values(numbers, start, end, semantics, tuple(operators))


def _range_values(
    numbers: Sequence[int],
    start: int,
    end: int,
    semantics: IntegerSemantics,
    operators: tuple[Operator, ...],
) -> np.ndarray:
    """Recursively compute the value array for one range."""
    if start == end:
        return np.array([numbers[start]], dtype=np.int64)

    parts = []
    for split in range(start, end):
        left = _range_values(numbers, start, split, semantics, operators)
        right = _range_values(numbers, split + 1, end, semantics, operators)

        # (n_left, n_right, n_ops) flattened in C order = left, right, operator
        combined = np.stack(
            [semantics.apply_array(op, left[:, None], right[None, :]) for op in operators],
            axis=-1,
        )
        parts.append(combined.reshape(-1))

    return np.concatenate(parts)


@dataclass
class CompiledRange:
    """Candidate values for one range of a number sequence.

    Attributes:
        numbers: The operands
        start: First index of the range
        end: Last index of the range
        values: Value of every candidate tree, in generation order
        operators: Operators used during generation
    """

    numbers: tuple[int, ...]
    start: int
    end: int
    values: np.ndarray
    operators: tuple[Operator, ...] = OPERATORS

    def __len__(self) -> int:
        return len(self.values)

    def matches(self, target: int) -> np.ndarray:
        """Get indices of candidates whose value equals target."""
        return np.flatnonzero(self.values == target)

    def tree(self, index: int) -> Node:
        """Rebuild the candidate tree at ``index``."""
        if not 0 <= index < len(self.values):
            raise IndexError(f"Index {index} out of range (candidates: {len(self.values)})")
        return tree_at_index(self.numbers, self.start, self.end, int(index), self.operators)


class ExpressionCompiler:
    """Compiles number ranges into arrays of candidate values.

    Holds the integer semantics and operator set so a search can compile
    several ranges with consistent rules.
    """

    def __init__(
        self,
        semantics: IntegerSemantics = DEFAULT_SEMANTICS,
        operators: Sequence[Operator] = OPERATORS,
    ) -> None:
        self.semantics = semantics
        self.operators = tuple(Operator.from_symbol(op) for op in operators)

    def compile(
        self,
        numbers: Sequence[int],
        start: int = 0,
        end: int | None = None,
    ) -> CompiledRange:
        """Evaluate all candidates of a range.

        Args:
            numbers: The operands
            start: First index (default: 0)
            end: Last index (default: last element)

        Returns:
            CompiledRange with one value per candidate tree
        """
        numbers = tuple(int(n) for n in numbers)
        if end is None:
            end = len(numbers) - 1
        values = evaluate_candidates(numbers, start, end, self.semantics, self.operators)
        return CompiledRange(
            numbers=numbers,
            start=start,
            end=end,
            values=values,
            operators=self.operators,
        )
