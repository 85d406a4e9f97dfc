"""Immutable arbitrary-precision decimal numbers with explicit scale."""

from bigdecimal.aggregates import decimal_avg, decimal_max, decimal_min, decimal_sum, of_values
from bigdecimal.big_decimal import BigDecimal
from bigdecimal.config import DEFAULT_ROUNDING_CONFIG, RoundingConfig
from bigdecimal.errors import (
    BigDecimalError,
    DivisionByZeroError,
    FormatError,
    InvalidExponentError,
    InvalidScaleError,
    NonScalarInputError,
    UnnecessaryRoundingError,
)
from bigdecimal.rounding import RoundingMode

__version__ = "0.1.0"
__all__ = [
    "BigDecimal",
    "BigDecimalError",
    "DEFAULT_ROUNDING_CONFIG",
    "DivisionByZeroError",
    "FormatError",
    "InvalidExponentError",
    "InvalidScaleError",
    "NonScalarInputError",
    "RoundingConfig",
    "RoundingMode",
    "UnnecessaryRoundingError",
    "__version__",
    "decimal_avg",
    "decimal_max",
    "decimal_min",
    "decimal_sum",
    "of_values",
]
