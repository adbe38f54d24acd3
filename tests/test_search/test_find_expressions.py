"""Tests for the target expression search."""

import pytest

from exprforge import (
    ExpressionSearch,
    InvalidInputError,
    SearchConfig,
    SearchResult,
    find_expressions,
)
from exprforge.expression.generator import generate_expressions


class TestFindExpressions:
    """Test find_expressions on both engines."""

    def test_classic_example(self, sample_numbers, search_config):
        """[2, 3, 4] reaches 20 only as ((2+3)*4)."""
        assert find_expressions(sample_numbers, 20, search_config) == ["((2+3)*4)"]

    def test_results_evaluate_to_target(self, search_config):
        """Every returned expression evaluates to the target."""
        numbers = [1, 2, 3, 4]
        by_string = {t.to_string(): t for t in generate_expressions(numbers, 0, 3)}

        result = find_expressions(numbers, 10, search_config)

        assert result
        assert "(1+(2+(3+4)))" in result
        assert all(by_string[expr].evaluate() == 10 for expr in result)

    def test_single_number(self, search_config):
        """A single number matches only itself."""
        assert find_expressions([5], 5, search_config) == ["5"]
        assert find_expressions([5], 4, search_config) == []

    def test_pair(self, search_config):
        """Test [1, 1] against 2 and 0."""
        assert find_expressions([1, 1], 2, search_config) == ["(1+1)"]
        assert find_expressions([1, 1], 0, search_config) == ["(1-1)"]

    def test_no_deduplication(self, search_config):
        """Distinct trees with the same value are all reported."""
        assert find_expressions([1, 1], 1, search_config) == ["(1*1)", "(1/1)"]

    def test_sentinel_can_match(self, search_config):
        """Division by zero yields the maximum integer, which can match."""
        result = find_expressions([3, 0, 2], 2**31 - 1, search_config)
        assert result == ["(3/(0*2))", "(3/(0/2))"]

    def test_idempotent(self, search_config):
        """Repeated calls give identical output."""
        numbers = [6, 2, 3, 1]
        first = find_expressions(numbers, 6, search_config)
        second = find_expressions(numbers, 6, search_config)
        assert first == second

    def test_engines_agree(self):
        """Tree and vectorized engines return the same list."""
        numbers = [1, 2, 3, 4, 5]
        tree = find_expressions(numbers, 15, SearchConfig(engine="tree"))
        vectorized = find_expressions(numbers, 15, SearchConfig(engine="vectorized"))

        assert tree
        assert tree == vectorized

    def test_int_bits(self):
        """Narrow widths change which expressions match."""
        assert find_expressions([100, 3], 44) == []
        assert find_expressions([100, 3], 44, SearchConfig(int_bits=8)) == ["(100*3)"]


class TestExpressionSearch:
    """Test ExpressionSearch and SearchResult."""

    def test_result_fields(self, sample_numbers):
        """Test the SearchResult summary."""
        result = ExpressionSearch().run(sample_numbers, 20)

        assert isinstance(result, SearchResult)
        assert result.candidates == 32
        assert len(result) == 1
        assert list(result) == ["((2+3)*4)"]
        assert result.request.numbers == sample_numbers
        assert result.request.target == 20
        assert result.elapsed_seconds >= 0

    def test_empty_sequence(self):
        """An empty sequence is rejected."""
        with pytest.raises(InvalidInputError):
            find_expressions([], 0)

    def test_max_operands(self):
        """Sequences longer than max_operands are rejected."""
        search = ExpressionSearch(SearchConfig(max_operands=3))

        assert search.run([1, 2, 3], 6).expressions
        with pytest.raises(InvalidInputError, match="max_operands"):
            search.run([1, 2, 3, 4], 10)

    def test_out_of_range_numbers(self):
        """Operands and target must fit the integer width."""
        config = SearchConfig(int_bits=8)

        with pytest.raises(InvalidInputError):
            find_expressions([300, 1], 1, config)
        with pytest.raises(InvalidInputError):
            find_expressions([1, 1], 1000, config)
        with pytest.raises(InvalidInputError):
            find_expressions([2**31], 0)
