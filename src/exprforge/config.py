"""Search configuration.

Settings can be given directly or read from the environment (a ``.env``
file in the working directory is loaded first):

- EXPRFORGE_INT_BITS: integer width, one of 8/16/32/64
- EXPRFORGE_ENGINE: "tree" or "vectorized"
- EXPRFORGE_MAX_OPERANDS: longest accepted sequence, "none" to disable
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from exprforge.errors import InvalidInputError
from exprforge.expression.arithmetic import INTEGER_DTYPES

ENGINES = ("tree", "vectorized")


@dataclass
class SearchConfig:
    """Expression search configuration."""

    # Width of the signed integer used for every intermediate value
    int_bits: int = 32

    # "tree" evaluates every generated node; "vectorized" evaluates with numpy
    engine: str = "tree"

    # Cost is Catalan(n-1) * 4**(n-1) trees; 7 operands is ~540k trees
    max_operands: int | None = 7

    def __post_init__(self) -> None:
        if self.int_bits not in INTEGER_DTYPES:
            raise InvalidInputError(
                f"Unsupported integer width: {self.int_bits}. "
                f"Valid: {sorted(INTEGER_DTYPES)}"
            )
        if self.engine not in ENGINES:
            raise InvalidInputError(f"Unknown engine: {self.engine}. Valid: {ENGINES}")
        if self.max_operands is not None and self.max_operands < 1:
            raise InvalidInputError(
                f"max_operands must be >= 1 or None, got {self.max_operands}"
            )

    @classmethod
    def from_env(cls) -> "SearchConfig":
        """Build a config from EXPRFORGE_* environment variables."""
        load_dotenv()
        defaults = cls()

        int_bits = _env_int("EXPRFORGE_INT_BITS", defaults.int_bits)
        engine = os.environ.get("EXPRFORGE_ENGINE", defaults.engine).strip().lower()

        raw_max = os.environ.get("EXPRFORGE_MAX_OPERANDS")
        if raw_max is not None and raw_max.strip().lower() in ("", "none"):
            max_operands = None
        else:
            max_operands = _env_int("EXPRFORGE_MAX_OPERANDS", defaults.max_operands)

        return cls(int_bits=int_bits, engine=engine, max_operands=max_operands)


def _env_int(name: str, default: int | None) -> int | None:
    """Read an integer environment variable."""
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        raise InvalidInputError(f"{name} must be an integer, got {raw!r}") from None
