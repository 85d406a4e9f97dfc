"""Rounding configuration for BigDecimal."""

from __future__ import annotations

from dataclasses import dataclass

from bigdecimal.big_decimal import BigDecimal
from bigdecimal.parsing import validate_scale
from bigdecimal.rounding import DEFAULT_ROUNDING_MODE, RoundingMode


@dataclass(frozen=True)
class RoundingConfig:
    """A (scale, mode) pair to pass around instead of two loose arguments.

    This is a plain value handed to each call, not a global context:
    nothing in the package reads a "current" configuration.

    Attributes:
        scale: Target scale (default: 2, cents)
        mode: Rounding mode (default: HALF_UP). Strings such as
            "half_even" are converted to RoundingMode.
    """

    scale: int = 2
    mode: RoundingMode = DEFAULT_ROUNDING_MODE

    def __post_init__(self) -> None:
        validate_scale(self.scale)
        # frozen dataclass: bypass __setattr__ to store the coerced mode
        object.__setattr__(self, "mode", RoundingMode(self.mode))

    def apply(self, value: BigDecimal) -> BigDecimal:
        """Round value with this configuration."""
        return value.round(self.scale, self.mode)


# Default configuration instance
DEFAULT_ROUNDING_CONFIG = RoundingConfig()
