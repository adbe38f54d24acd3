"""Fixed-width signed integer arithmetic.

Expression values behave like a native signed integer of a chosen width:
- ``+ - *`` wrap around on overflow (two's complement)
- ``/`` truncates toward zero
- a zero divisor yields the maximum representable value instead of failing

The same rules are available for scalars (tree evaluation) and for numpy
arrays (vectorized evaluation), so both paths agree bit for bit.
"""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from exprforge.errors import InvalidInputError
from exprforge.expression.types import Operator


# Supported widths and the numpy dtype used for wraparound
INTEGER_DTYPES: dict[int, type[np.signedinteger]] = {
    8: np.int8,
    16: np.int16,
    32: np.int32,
    64: np.int64,
}


def truncating_div(left: int, right: int) -> int:
    """Integer division rounding toward zero (C semantics)."""
    quotient = abs(left) // abs(right)
    if (left < 0) != (right < 0):
        return -quotient
    return quotient


@dataclass(frozen=True)
class IntegerSemantics:
    """Arithmetic rules for a signed integer of ``bits`` width.

    Attributes:
        bits: Integer width (8, 16, 32 or 64)
    """

    bits: int = 32

    min_value: int = field(init=False, repr=False)
    max_value: int = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.bits not in INTEGER_DTYPES:
            raise InvalidInputError(
                f"Unsupported integer width: {self.bits}. "
                f"Valid: {sorted(INTEGER_DTYPES)}"
            )
        info = np.iinfo(INTEGER_DTYPES[self.bits])
        object.__setattr__(self, "min_value", int(info.min))
        object.__setattr__(self, "max_value", int(info.max))

    @property
    def dtype(self) -> type[np.signedinteger]:
        """Get the numpy dtype with the same width."""
        return INTEGER_DTYPES[self.bits]

    @property
    def sentinel(self) -> int:
        """Value produced by a division with a zero divisor."""
        return self.max_value

    def contains(self, value: int) -> bool:
        """Check whether value is representable without wrapping."""
        return self.min_value <= value <= self.max_value

    def wrap(self, value: int) -> int:
        """Reduce an unbounded integer into range, two's complement style."""
        return (value - self.min_value) % (1 << self.bits) + self.min_value

    def apply(self, operator: Operator | str, left: int, right: int) -> int:
        """Apply a binary operator to two in-range integers.

        Raises:
            InvalidOperatorError: If operator is not one of + - * /.
        """
        op = Operator.from_symbol(operator)

        if op is Operator.ADD:
            result = left + right
        elif op is Operator.SUB:
            result = left - right
        elif op is Operator.MUL:
            result = left * right
        else:
            if right == 0:
                return self.sentinel
            result = truncating_div(left, right)

        return self.wrap(result)

    def apply_array(
        self,
        operator: Operator | str,
        left: np.ndarray,
        right: np.ndarray,
    ) -> np.ndarray:
        """Vectorized ``apply`` over broadcastable int64 arrays.

        Inputs must already be in range. The result is an int64 array.
        """
        op = Operator.from_symbol(operator)
        left = np.asarray(left, dtype=np.int64)
        right = np.asarray(right, dtype=np.int64)

        # Widths up to 32 bits cannot overflow int64 here; 64-bit wraps natively
        with np.errstate(over="ignore", divide="ignore", invalid="ignore"):
            if op is Operator.ADD:
                result = left + right
            elif op is Operator.SUB:
                result = left - right
            elif op is Operator.MUL:
                result = left * right
            else:
                zero = right == 0
                divisor = np.where(zero, 1, right)
                quotient = np.floor_divide(left, divisor)
                remainder = left - quotient * divisor
                # floor -> truncation when the signs differ and it is inexact
                quotient = quotient + ((remainder != 0) & ((left < 0) != (divisor < 0)))
                result = self._wrap_array(quotient)
                return np.where(zero, np.int64(self.sentinel), result)

        return self._wrap_array(result)

    def _wrap_array(self, values: np.ndarray) -> np.ndarray:
        """Wrap int64 values to this width (astype truncates high bits)."""
        if self.bits == 64:
            return values
        return values.astype(self.dtype).astype(np.int64)


DEFAULT_SEMANTICS = IntegerSemantics()
