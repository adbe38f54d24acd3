"""Example: print every expression over [2, 3, 4] that evaluates to 20.

Also shows the candidate count growth and the vectorized engine, which
gives the same answer without building every tree.
"""

import logging

from exprforge import ExpressionSearch, SearchConfig, find_expressions
from exprforge.expression import count_candidates

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)


def main():
    """Run the expression search example."""
    numbers = [2, 3, 4]
    target = 20

    print("=" * 60)
    print(f"Expressions over {numbers} equal to {target}")
    print("=" * 60)

    for expr in find_expressions(numbers, target):
        print(expr)

    print("\nCandidate trees by sequence length:")
    for length in range(1, 8):
        print(f"  {length} numbers: {count_candidates(length):>10,}")

    search = ExpressionSearch(SearchConfig(engine="vectorized"))
    result = search.run([1, 2, 3, 4, 5, 6], 100)
    print(
        f"\n{len(result)} of {result.candidates:,} expressions over "
        f"{result.request.numbers} reach {result.request.target} "
        f"({result.elapsed_seconds:.2f}s)"
    )
    for expr in result.expressions[:10]:
        print(f"  {expr}")


if __name__ == "__main__":
    main()
