"""Immutable arbitrary-precision decimal number.

A BigDecimal is an unscaled integer plus a scale: 123.45 is (12345, 2). The
scale is part of the value's identity for display purposes ("1.50" keeps two
fractional digits) but not for comparison (1.50 == 1.5).

Every operation returns a new BigDecimal. Instances have no mutable state,
so they can be shared freely between threads without locking.

Result scales:
- add/subtract: max(a.scale, b.scale)
- multiply: a.scale + b.scale
- divide: a.scale + b.scale, truncated toward zero
- pow(n): a.scale * n

Usage:
    from bigdecimal import BigDecimal, RoundingMode

    price = BigDecimal.of("19.99")
    total = price * BigDecimal.of("3")           # 59.97
    share = total.divide(BigDecimal.of("7.0"))   # 8.567 (truncated)
    share.round(2, RoundingMode.HALF_EVEN)       # 8.57
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any

import structlog

from bigdecimal.constants import DEFAULT_ROUND_SCALE
from bigdecimal.errors import DivisionByZeroError, InvalidExponentError, UnnecessaryRoundingError
from bigdecimal.math.fixed_point import (
    add_scaled,
    compare_scaled,
    divide_scaled,
    int_to_digits,
    multiply_scaled,
    pow10,
    pow_scaled,
    rescale,
    subtract_scaled,
)
from bigdecimal.parsing import parse, validate_scale
from bigdecimal.rounding import DEFAULT_ROUNDING_MODE, RoundingMode, is_round_addition_required

logger = structlog.get_logger()


class BigDecimal:
    """Immutable decimal number with an explicit scale.

    Attributes are private; use value(), scale(), precision() and
    unscaled_value() to read them.
    """

    __slots__ = ("_unscaled", "_scale")
    _unscaled: int
    _scale: int

    def __init__(self, value: str | int | Decimal | BigDecimal, scale: int | None = None) -> None:
        """Create a BigDecimal from text, an int, a decimal.Decimal or another BigDecimal.

        Args:
            value: Number to represent. Text may use scientific notation.
            scale: Optional scale. Extra fractional digits are truncated,
                missing ones are zero-padded.

        Raises:
            FormatError: If text does not match the number grammar
            NonScalarInputError: If value has an unsupported type (e.g. float)
            InvalidScaleError: If scale is negative or too large
        """
        if isinstance(value, BigDecimal):
            if scale is None:
                unscaled, new_scale = value._unscaled, value._scale
            else:
                new_scale = validate_scale(scale)
                unscaled = rescale(value._unscaled, value._scale, new_scale)
        else:
            unscaled, new_scale = parse(value, scale)
        object.__setattr__(self, "_unscaled", unscaled)
        object.__setattr__(self, "_scale", new_scale)

    @classmethod
    def _create(cls, unscaled: int, scale: int) -> BigDecimal:
        """Build directly from an already-normalized (unscaled, scale) pair."""
        instance = cls.__new__(cls)
        object.__setattr__(instance, "_unscaled", unscaled)
        object.__setattr__(instance, "_scale", scale)
        return instance

    @classmethod
    def of(cls, value: str | int | Decimal | BigDecimal, scale: int | None = None) -> BigDecimal:
        """Create a BigDecimal (same as the constructor)."""
        return cls(value, scale)

    @classmethod
    def zero(cls) -> BigDecimal:
        """Create the value 0 with scale 0."""
        return cls._create(0, 0)

    @classmethod
    def one(cls) -> BigDecimal:
        """Create the value 1 with scale 0."""
        return cls._create(1, 0)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self) -> tuple[Any, ...]:
        # The canonical string carries the scale
        return (type(self), (self.value(),))

    def __copy__(self) -> BigDecimal:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> BigDecimal:
        return self

    # --- Accessors ---

    def value(self) -> str:
        """Canonical text: optional '-', integer digits, then '.' and exactly scale digits."""
        sign = "-" if self._unscaled < 0 else ""
        magnitude = abs(self._unscaled)
        if self._scale == 0:
            return f"{sign}{int_to_digits(magnitude)}"
        integer, fraction = divmod(magnitude, pow10(self._scale))
        return f"{sign}{int_to_digits(integer)}.{int_to_digits(fraction).zfill(self._scale)}"

    def scale(self) -> int:
        """Number of fractional digits."""
        return self._scale

    def unscaled_value(self) -> int:
        """The signed significand: value * 10^scale."""
        return self._unscaled

    def precision(self) -> int:
        """Number of digits in the integer part, sign excluded (at least 1)."""
        return len(int_to_digits(abs(self._unscaled) // pow10(self._scale)))

    def to_decimal(self) -> Decimal:
        """Convert to decimal.Decimal (exact, keeps the scale as exponent)."""
        return Decimal(self.value())

    def __str__(self) -> str:
        return self.value()

    def __repr__(self) -> str:
        return f"BigDecimal('{self.value()}')"

    def __hash__(self) -> int:
        # Equal values with different scales must hash alike
        unscaled, scale = self._unscaled, self._scale
        while scale > 0 and unscaled % 10 == 0:
            unscaled //= 10
            scale -= 1
        return hash((unscaled, scale))

    def __bool__(self) -> bool:
        """True if non-zero."""
        return self.signum() != 0

    # --- Arithmetic ---

    def add(self, addend: BigDecimal) -> BigDecimal:
        """Add addend. Result scale is the larger of both scales."""
        _require_big_decimal(addend)
        scale = max(self._scale, addend._scale)
        return self._create(add_scaled(self._unscaled, self._scale, addend._unscaled, addend._scale, scale), scale)

    def subtract(self, subtrahend: BigDecimal) -> BigDecimal:
        """Subtract subtrahend. Result scale is the larger of both scales."""
        _require_big_decimal(subtrahend)
        scale = max(self._scale, subtrahend._scale)
        return self._create(
            subtract_scaled(self._unscaled, self._scale, subtrahend._unscaled, subtrahend._scale, scale),
            scale,
        )

    def multiply(self, multiplier: BigDecimal) -> BigDecimal:
        """Multiply by multiplier. Result scale is the sum of both scales (exact)."""
        _require_big_decimal(multiplier)
        scale = self._scale + multiplier._scale
        return self._create(
            multiply_scaled(self._unscaled, self._scale, multiplier._unscaled, multiplier._scale, scale),
            scale,
        )

    def divide(self, divisor: BigDecimal) -> BigDecimal:
        """Divide by divisor, truncating toward zero.

        The result scale is the sum of both scales. Digits beyond it are
        dropped, not rounded: 1.0 / 3.0 is 0.33. Scale the dividend up first
        (set_scale) and call round() afterwards for a rounded quotient.

        Raises:
            DivisionByZeroError: If divisor is zero (at any scale)
        """
        _require_big_decimal(divisor)
        if divisor.signum() == 0:
            raise DivisionByZeroError(f"Division by zero: {self.value()} / {divisor.value()}")
        scale = self._scale + divisor._scale
        return self._create(
            divide_scaled(self._unscaled, self._scale, divisor._unscaled, divisor._scale, scale),
            scale,
        )

    def pow(self, n: int) -> BigDecimal:
        """Raise to a non-negative integer power.

        The result is exact with scale self.scale() * n. pow(0) is 1 with
        scale 0.

        Raises:
            TypeError: If n is not an int
            InvalidExponentError: If n is negative
        """
        if isinstance(n, bool) or not isinstance(n, int):
            raise TypeError(f"Power must be int, got {type(n).__name__}")
        if n < 0:
            raise InvalidExponentError(f"Power {n} is negative")
        if n == 0:
            return self.one()
        scale = self._scale * n
        return self._create(pow_scaled(self._unscaled, self._scale, n, scale), scale)

    def signum(self) -> int:
        """Return -1, 0 or 1 for negative, zero and positive values."""
        return self.compare_to(self.zero())

    def negate(self) -> BigDecimal:
        """Flip the sign. Zero stays unsigned; the scale is kept."""
        return self._create(-self._unscaled, self._scale)

    def abs(self) -> BigDecimal:
        """Absolute value."""
        return self.negate() if self.signum() < 0 else self._create(self._unscaled, self._scale)

    def set_scale(self, scale: int) -> BigDecimal:
        """Change the scale by truncation or zero padding. Never rounds.

        Use round() when discarded digits should influence the result.

        Raises:
            InvalidScaleError: If scale is negative or too large
        """
        scale = validate_scale(scale)
        return self._create(rescale(self._unscaled, self._scale, scale), scale)

    def round(self, scale: int = DEFAULT_ROUND_SCALE, mode: RoundingMode | str = DEFAULT_ROUNDING_MODE) -> BigDecimal:
        """Round to the given scale.

        Growing the scale only pads with zeros. Shrinking it cuts the digits
        and lets the rounding mode decide whether to add one unit at the new
        scale (with the value's sign) to the truncated result.

        Args:
            scale: Target scale (default 0)
            mode: Rounding mode or its string value (default HALF_UP)

        Returns:
            Rounded value with exactly `scale` fractional digits

        Raises:
            UnnecessaryRoundingError: If mode is UNNECESSARY and non-zero digits
                would be discarded
            InvalidScaleError: If scale is negative or too large
            ValueError: If mode is not a known rounding mode
        """
        scale = validate_scale(scale)
        mode = RoundingMode(mode)
        if scale >= self._scale:
            return self.set_scale(scale)

        # Split '123.45678' at scale 3 into kept 123456 and truncated '78'
        dropped = self._scale - scale
        kept, remainder = divmod(abs(self._unscaled), pow10(dropped))
        truncated = int_to_digits(remainder).zfill(dropped).rstrip("0")

        negative = self._unscaled < 0
        rounded = self._create(-kept if negative else kept, scale)
        if truncated == "":
            return rounded

        if mode is RoundingMode.UNNECESSARY:
            logger.debug(
                "round_unnecessary_rejected",
                value=self.value(),
                scale=scale,
                truncated=truncated,
            )
            raise UnnecessaryRoundingError(
                f"Digits '{truncated}' of '{self.value()}' should not be truncated with scale {scale}"
            )

        if is_round_addition_required(mode, not negative, kept % 10, truncated):
            rounded = rounded.add(self._create(-1 if negative else 1, scale))
        return rounded

    # --- Comparison ---

    def compare_to(self, other: BigDecimal) -> int:
        """Compare numerically, ignoring scale differences.

        Returns:
            -1 if self < other, 0 if equal, 1 if self > other
        """
        _require_big_decimal(other)
        return compare_scaled(self._unscaled, self._scale, other._unscaled, other._scale)

    def is_equal_to(self, other: BigDecimal) -> bool:
        return self.compare_to(other) == 0

    def is_greater_than(self, other: BigDecimal) -> bool:
        return self.compare_to(other) == 1

    def is_greater_than_or_equal_to(self, other: BigDecimal) -> bool:
        return self.compare_to(other) >= 0

    def is_less_than(self, other: BigDecimal) -> bool:
        return self.compare_to(other) == -1

    def is_less_than_or_equal_to(self, other: BigDecimal) -> bool:
        return self.compare_to(other) <= 0

    def is_negative(self) -> bool:
        return self.is_less_than(self.zero())

    def is_positive(self) -> bool:
        return self.is_greater_than(self.zero())

    def is_zero(self) -> bool:
        return self.signum() == 0

    # --- Operators ---

    def __add__(self, other: object) -> BigDecimal:
        if not isinstance(other, BigDecimal):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> BigDecimal:
        if not isinstance(other, BigDecimal):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other: object) -> BigDecimal:
        if not isinstance(other, BigDecimal):
            return NotImplemented
        return self.multiply(other)

    def __truediv__(self, other: object) -> BigDecimal:
        if not isinstance(other, BigDecimal):
            return NotImplemented
        return self.divide(other)

    def __pow__(self, n: object) -> BigDecimal:
        if isinstance(n, bool) or not isinstance(n, int):
            return NotImplemented
        return self.pow(n)

    def __neg__(self) -> BigDecimal:
        return self.negate()

    def __pos__(self) -> BigDecimal:
        return self

    def __abs__(self) -> BigDecimal:
        return self.abs()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BigDecimal):
            return NotImplemented
        return self.is_equal_to(other)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, BigDecimal):
            return NotImplemented
        return self.is_less_than(other)

    def __le__(self, other: object) -> bool:
        if not isinstance(other, BigDecimal):
            return NotImplemented
        return self.is_less_than_or_equal_to(other)

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, BigDecimal):
            return NotImplemented
        return self.is_greater_than(other)

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, BigDecimal):
            return NotImplemented
        return self.is_greater_than_or_equal_to(other)


def _require_big_decimal(x: object) -> None:
    """Reject operands that are not BigDecimal (no implicit coercion)."""
    if not isinstance(x, BigDecimal):
        raise TypeError(f"BigDecimal operand required, got {type(x).__name__}")


__all__ = ["BigDecimal"]
