"""Rounding modes and the rounding policy.

The policy decides, for a value being cut at some scale, whether one unit at
that scale must be added away from zero to the truncated result.
"""

from __future__ import annotations

from enum import Enum

from bigdecimal.errors import UnnecessaryRoundingError


class RoundingMode(str, Enum):
    """How discarded digits affect the kept ones."""

    UP = "up"
    DOWN = "down"
    CEILING = "ceiling"
    FLOOR = "floor"
    HALF_UP = "half_up"
    HALF_DOWN = "half_down"
    HALF_EVEN = "half_even"
    HALF_ODD = "half_odd"
    UNNECESSARY = "unnecessary"


DEFAULT_ROUNDING_MODE = RoundingMode.HALF_UP


def is_round_addition_required(
    mode: RoundingMode,
    positive: bool,
    last_kept_digit: int,
    truncated: str,
) -> bool:
    """Decide whether rounding moves the truncated value one unit away from zero.

    Two different tests drive the half modes. The first truncated digit
    (truncated[0]) decides whether the remainder is below half. Whether it is
    exactly half is decided by the whole remainder being "5". For "51" the
    first digit is 5 but the remainder is more than half.

    Args:
        mode: Rounding mode
        positive: False only for values below zero
        last_kept_digit: Least significant digit that survives the cut
        truncated: Discarded digits with trailing zeros stripped; never empty

    Returns:
        True if one unit at the target scale must be added (with the value's sign)

    Raises:
        UnnecessaryRoundingError: If mode is UNNECESSARY
        ValueError: If mode is not a RoundingMode
    """
    first_digit = int(truncated[0])
    exactly_half = truncated == "5"

    if mode is RoundingMode.UP:
        return True
    if mode is RoundingMode.DOWN:
        return False
    if mode is RoundingMode.CEILING:
        return positive
    if mode is RoundingMode.FLOOR:
        return not positive
    if mode is RoundingMode.HALF_UP:
        return first_digit >= 5
    if mode is RoundingMode.HALF_DOWN:
        return not (exactly_half or first_digit < 5)
    if mode is RoundingMode.HALF_EVEN:
        return not (first_digit < 5 or (exactly_half and last_kept_digit % 2 == 0))
    if mode is RoundingMode.HALF_ODD:
        return not (first_digit < 5 or (exactly_half and last_kept_digit % 2 == 1))
    if mode is RoundingMode.UNNECESSARY:
        raise UnnecessaryRoundingError(f"Digits '{truncated}' would be discarded")
    raise ValueError(f"Unknown rounding mode: {mode!r}")


__all__ = [
    "DEFAULT_ROUNDING_MODE",
    "RoundingMode",
    "is_round_addition_required",
]
