"""Aggregate helpers over collections of BigDecimal.

Empty input is not an error: decimal_sum returns zero, the others return
None so callers must handle absence explicitly.
"""

from __future__ import annotations

from collections.abc import Iterable
from decimal import Decimal

import structlog

from bigdecimal.big_decimal import BigDecimal
from bigdecimal.rounding import RoundingMode

logger = structlog.get_logger()


def of_values(values: Iterable[str | int | Decimal | BigDecimal], scale: int | None = None) -> list[BigDecimal]:
    """Build a BigDecimal from each value, all with the same optional scale."""
    return [BigDecimal.of(value, scale) for value in values]


def decimal_sum(values: Iterable[BigDecimal]) -> BigDecimal:
    """Sum values starting from zero with scale 0.

    The result scale is the largest scale among the values.
    """
    total = BigDecimal.zero()
    for value in values:
        total = total.add(value)
    return total


def decimal_avg(values: Iterable[BigDecimal], scale: int | None = None) -> BigDecimal | None:
    """Arithmetic mean of values.

    Without a scale the mean is truncated at the sum's scale, like divide().
    With a scale it is computed one digit further and rounded HALF_UP.

    Args:
        values: Values to average
        scale: Optional result scale

    Returns:
        The mean, or None if values is empty
    """
    items = list(values)
    if not items:
        logger.debug("aggregate_empty_input", aggregate="avg")
        return None

    total = decimal_sum(items)
    count = BigDecimal.of(len(items))
    if scale is None:
        return total.divide(count)

    # The first discarded digit is exact after truncation, which is all HALF_UP needs
    working_scale = max(total.scale(), scale + 1)
    return total.set_scale(working_scale).divide(count).round(scale, RoundingMode.HALF_UP)


def decimal_min(values: Iterable[BigDecimal]) -> BigDecimal | None:
    """Smallest value (the first one on ties), or None if values is empty."""
    smallest: BigDecimal | None = None
    for value in values:
        _require_big_decimal(value)
        if smallest is None or value.is_less_than(smallest):
            smallest = value
    if smallest is None:
        logger.debug("aggregate_empty_input", aggregate="min")
    return smallest


def decimal_max(values: Iterable[BigDecimal]) -> BigDecimal | None:
    """Largest value (the first one on ties), or None if values is empty."""
    largest: BigDecimal | None = None
    for value in values:
        _require_big_decimal(value)
        if largest is None or value.is_greater_than(largest):
            largest = value
    if largest is None:
        logger.debug("aggregate_empty_input", aggregate="max")
    return largest


def _require_big_decimal(value: object) -> None:
    if not isinstance(value, BigDecimal):
        raise TypeError(f"BigDecimal value required, got {type(value).__name__}")


__all__ = [
    "decimal_avg",
    "decimal_max",
    "decimal_min",
    "decimal_sum",
    "of_values",
]
