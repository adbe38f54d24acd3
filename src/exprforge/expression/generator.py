"""Exhaustive generation of expression trees over a number sequence.

For a contiguous range of the input, every split point divides it into a
left and a right range; every tree of the left range is combined with every
tree of the right range under every operator. The operands never change
order; only the parenthesization and the operators vary.

The number of trees for n operands is Catalan(n - 1) * 4 ** (n - 1), so cost
grows exponentially with the sequence length. Ranges are not cached: each
split regenerates its sub-ranges from scratch.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence

from exprforge.errors import InvalidInputError
from exprforge.expression.nodes import LiteralNode, Node, OperatorNode
from exprforge.expression.types import OPERATORS, Operator

logger = logging.getLogger(__name__)


def catalan(n: int) -> int:
    """Number of binary tree shapes with n internal nodes."""
    if n < 0:
        raise ValueError(f"catalan() needs n >= 0, got {n}")
    return math.comb(2 * n, n) // (n + 1)


def count_candidates(length: int, n_operators: int = len(OPERATORS)) -> int:
    """Number of distinct trees generated for ``length`` operands."""
    if length < 1:
        raise ValueError(f"Need at least one operand, got {length}")
    return catalan(length - 1) * n_operators ** (length - 1)


def generate_expressions(
    numbers: Sequence[int],
    start: int,
    end: int,
    operators: Sequence[Operator] = OPERATORS,
) -> list[Node]:
    """Generate every expression tree over ``numbers[start:end + 1]``.

    Trees are ordered by split point, then left subtree, then right subtree,
    then operator. Textually identical trees are all kept.

    The range must be non-empty (start <= end); this is not checked here.
    """
    if start == end:
        return [LiteralNode(numbers[start])]

    result: list[Node] = []
    for split in range(start, end):
        left_trees = generate_expressions(numbers, start, split, operators)
        right_trees = generate_expressions(numbers, split + 1, end, operators)

        for left in left_trees:
            for right in right_trees:
                for op in operators:
                    result.append(OperatorNode(op, left, right))

    return result


def tree_at_index(
    numbers: Sequence[int],
    start: int,
    end: int,
    index: int,
    operators: Sequence[Operator] = OPERATORS,
) -> Node:
    """Build only the tree at position ``index`` of the generation order.

    Equivalent to ``generate_expressions(numbers, start, end)[index]`` but
    without materializing the other trees.
    """
    if start == end:
        return LiteralNode(numbers[start])

    n_ops = len(operators)
    for split in range(start, end):
        n_left = count_candidates(split - start + 1, n_ops)
        n_right = count_candidates(end - split, n_ops)
        block = n_left * n_right * n_ops

        if index < block:
            left_idx, rest = divmod(index, n_right * n_ops)
            right_idx, op_idx = divmod(rest, n_ops)
            return OperatorNode(
                operators[op_idx],
                tree_at_index(numbers, start, split, left_idx, operators),
                tree_at_index(numbers, split + 1, end, right_idx, operators),
            )
        index -= block

    raise IndexError("Tree index out of range")


class TreeGenerator:
    """Generates all expression trees for one input sequence.

    Attributes:
        numbers: The operands, used in the given order
        operators: Operators tried at every internal node
    """

    def __init__(
        self,
        numbers: Sequence[int],
        operators: Sequence[Operator] = OPERATORS,
    ):
        if len(numbers) == 0:
            raise InvalidInputError("Cannot generate expressions for an empty sequence")
        self.numbers = tuple(int(n) for n in numbers)
        self.operators = tuple(Operator.from_symbol(op) for op in operators)

    def _check_range(self, start: int, end: int | None) -> tuple[int, int]:
        """Resolve ``end`` and validate the inclusive range."""
        if end is None:
            end = len(self.numbers) - 1
        if not 0 <= start <= end < len(self.numbers):
            raise InvalidInputError(
                f"Invalid range [{start}, {end}] for {len(self.numbers)} numbers"
            )
        return start, end

    def count(self, start: int = 0, end: int | None = None) -> int:
        """Number of trees ``generate`` would return for the range."""
        start, end = self._check_range(start, end)
        return count_candidates(end - start + 1, len(self.operators))

    def generate(self, start: int = 0, end: int | None = None) -> list[Node]:
        """Generate every tree over the inclusive range [start, end].

        Args:
            start: First index (default: 0)
            end: Last index (default: last element)

        Returns:
            List of trees in generation order
        """
        start, end = self._check_range(start, end)
        trees = generate_expressions(self.numbers, start, end, self.operators)
        logger.debug(
            f"Generated {len(trees)} trees for range [{start}, {end}] "
            f"of {len(self.numbers)} numbers"
        )
        return trees

    def tree_at(self, index: int, start: int = 0, end: int | None = None) -> Node:
        """Get a single tree by its position in generation order."""
        start, end = self._check_range(start, end)
        total = count_candidates(end - start + 1, len(self.operators))
        if not 0 <= index < total:
            raise IndexError(f"Index {index} out of range (candidates: {total})")
        return tree_at_index(self.numbers, start, end, index, self.operators)
