"""Find every expression over a number sequence that hits a target.

Ties generation, evaluation and rendering together:
1. Generate every tree over the whole sequence
2. Evaluate each tree with fixed-width integer rules
3. Render the trees whose value equals the target

Results keep generation order and are not deduplicated.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field

from pydantic import BaseModel, Field, ValidationError, field_validator

from exprforge.config import SearchConfig
from exprforge.errors import InvalidInputError
from exprforge.expression.arithmetic import IntegerSemantics
from exprforge.expression.compiler import ExpressionCompiler
from exprforge.expression.generator import TreeGenerator

logger = logging.getLogger(__name__)


class SearchRequest(BaseModel):
    """Validated input for one search."""

    int_bits: int = Field(default=32, description="Integer width")
    numbers: list[int] = Field(..., min_length=1, description="Operands, in order")
    target: int = Field(..., description="Value the expressions must reach")

    @field_validator("numbers")
    @classmethod
    def numbers_in_range(cls, v: list[int], info) -> list[int]:
        """Every operand must fit the integer width."""
        semantics = IntegerSemantics(info.data.get("int_bits", 32))
        for n in v:
            if not semantics.contains(n):
                raise ValueError(f"{n} does not fit in a {semantics.bits}-bit integer")
        return v

    @field_validator("target")
    @classmethod
    def target_in_range(cls, v: int, info) -> int:
        """Target must fit the integer width."""
        semantics = IntegerSemantics(info.data.get("int_bits", 32))
        if not semantics.contains(v):
            raise ValueError(f"{v} does not fit in a {semantics.bits}-bit integer")
        return v


@dataclass
class SearchResult:
    """Outcome of one search.

    Attributes:
        request: The validated request
        expressions: Matching expressions, in generation order
        candidates: Number of trees examined
        elapsed_seconds: Wall-clock time of the search
    """

    request: SearchRequest
    expressions: list[str] = field(default_factory=list)
    candidates: int = 0
    elapsed_seconds: float = 0.0

    def __len__(self) -> int:
        return len(self.expressions)

    def __iter__(self) -> Iterator[str]:
        return iter(self.expressions)


class ExpressionSearch:
    """Searches for expressions that evaluate to a target.

    Example:
        >>> search = ExpressionSearch()
        >>> search.run([2, 3, 4], 20).expressions
        ['((2+3)*4)']
    """

    def __init__(self, config: SearchConfig | None = None):
        self.config = config or SearchConfig()
        self.semantics = IntegerSemantics(self.config.int_bits)

    def validate(self, numbers: Sequence[int], target: int) -> SearchRequest:
        """Validate raw input into a SearchRequest.

        Raises:
            InvalidInputError: On empty or out-of-range input, or when the
                sequence is longer than ``config.max_operands``.
        """
        try:
            request = SearchRequest(
                int_bits=self.config.int_bits,
                numbers=list(numbers),
                target=target,
            )
        except ValidationError as e:
            raise InvalidInputError(f"Invalid search request: {e}") from e

        max_operands = self.config.max_operands
        if max_operands is not None and len(request.numbers) > max_operands:
            raise InvalidInputError(
                f"{len(request.numbers)} numbers exceeds max_operands={max_operands}"
            )
        return request

    def run(self, numbers: Sequence[int], target: int) -> SearchResult:
        """Find all expressions over ``numbers`` that evaluate to ``target``.

        Args:
            numbers: Operands, used once each in the given order
            target: Value to reach

        Returns:
            SearchResult with matching expressions in generation order
        """
        request = self.validate(numbers, target)
        started = time.perf_counter()

        if self.config.engine == "vectorized":
            expressions, candidates = self._run_vectorized(request)
        else:
            expressions, candidates = self._run_tree(request)

        elapsed = time.perf_counter() - started
        logger.info(
            f"Searched {candidates} candidates over {request.numbers} for "
            f"target {request.target}: {len(expressions)} matches in {elapsed:.3f}s"
        )

        return SearchResult(
            request=request,
            expressions=expressions,
            candidates=candidates,
            elapsed_seconds=elapsed,
        )

    def _run_tree(self, request: SearchRequest) -> tuple[list[str], int]:
        """Evaluate every generated tree."""
        trees = TreeGenerator(request.numbers).generate()
        expressions = [
            tree.to_string()
            for tree in trees
            if tree.evaluate(self.semantics) == request.target
        ]
        return expressions, len(trees)

    def _run_vectorized(self, request: SearchRequest) -> tuple[list[str], int]:
        """Evaluate with numpy and rebuild only the matching trees."""
        compiled = ExpressionCompiler(self.semantics).compile(request.numbers)
        indices = compiled.matches(request.target)
        logger.debug(f"{len(indices)} of {len(compiled)} candidates match")
        expressions = [compiled.tree(i).to_string() for i in indices]
        return expressions, len(compiled)


def find_expressions(
    numbers: Sequence[int],
    target: int,
    config: SearchConfig | None = None,
) -> list[str]:
    """Find all expressions over ``numbers`` that evaluate to ``target``.

    Each expression uses every number once, in the given order, combined
    with + - * / and fully parenthesized, e.g. ``((2+3)*4)``.
    """
    return ExpressionSearch(config).run(numbers, target).expressions
