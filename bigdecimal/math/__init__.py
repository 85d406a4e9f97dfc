"""Arithmetic primitives for the bigdecimal package.

This package provides the scaled fixed-point engine BigDecimal delegates to:
- add/subtract/multiply/divide/pow/compare on (unscaled int, scale) pairs
"""

from bigdecimal.math.fixed_point import (
    add_scaled,
    compare_scaled,
    digits_to_int,
    divide_scaled,
    int_to_digits,
    multiply_scaled,
    pow10,
    pow_scaled,
    rescale,
    subtract_scaled,
)

__all__ = [
    "add_scaled",
    "compare_scaled",
    "digits_to_int",
    "divide_scaled",
    "int_to_digits",
    "multiply_scaled",
    "pow10",
    "pow_scaled",
    "rescale",
    "subtract_scaled",
]
