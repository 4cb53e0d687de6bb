"""A rational linear mapping between two 64-bit coordinate systems.

    f(a) = ((a - a_zero) * a_to_b_numer) / a_to_b_denom + b_zero
    F(b) = ((b - b_zero) * a_to_b_denom) / a_to_b_numer + a_zero

Division rounds towards negative infinity.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

_INT64_MIN = -(1 << 63)
_INT64_MAX = (1 << 63) - 1
_INT32_MIN = -(1 << 31)
_INT32_MAX = (1 << 31) - 1
_UINT32_MAX = (1 << 32) - 1


def _check_int64(value: int, what: str) -> int:
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise OverflowError(f"{what} {value} does not fit in 64 bits")
    return value


@dataclass(frozen=True)
class LinearTransform:
    """A transform from coordinate system A to B and back."""

    a_zero: int = 0
    b_zero: int = 0
    a_to_b_numer: int = 1
    a_to_b_denom: int = 1

    def __post_init__(self) -> None:
        _check_int64(self.a_zero, "a_zero")
        _check_int64(self.b_zero, "b_zero")
        if not _INT32_MIN <= self.a_to_b_numer <= _INT32_MAX:
            raise ValueError(f"numerator {self.a_to_b_numer} is not a 32-bit signed value")
        if not 0 <= self.a_to_b_denom <= _UINT32_MAX:
            raise ValueError(
                f"denominator {self.a_to_b_denom} is not a 32-bit unsigned value"
            )

    def forward(self, a: int) -> int:
        """Map ``a`` into B; raises on a singular transform or overflow."""
        _check_int64(a, "input")
        if self.a_to_b_denom == 0:
            raise ZeroDivisionError("transform is singular: denominator is zero")
        scaled = (a - self.a_zero) * self.a_to_b_numer // self.a_to_b_denom
        return _check_int64(scaled + self.b_zero, "result")

    def reverse(self, b: int) -> int:
        """Map ``b`` back into A; raises on a singular transform or overflow."""
        _check_int64(b, "input")
        if self.a_to_b_numer == 0:
            raise ZeroDivisionError("transform is singular: numerator is zero")
        scaled = (b - self.b_zero) * self.a_to_b_denom // self.a_to_b_numer
        return _check_int64(scaled + self.a_zero, "result")


def reduce_fraction(numer: int, denom: int) -> tuple[int, int]:
    """Reduce ``numer / denom`` to lowest terms; ``denom`` must be positive."""
    if denom <= 0:
        raise ValueError(f"denominator must be positive, got {denom}")
    g = math.gcd(numer, denom)
    return numer // g, denom // g