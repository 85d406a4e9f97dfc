"""BigDecimal error classes.

Each error also derives from the closest builtin exception so callers can
catch either the package error or the standard one.
"""


class BigDecimalError(Exception):
    """Base error for BigDecimal operations."""

    pass


class FormatError(BigDecimalError, ValueError):
    """Text does not match the decimal number grammar."""

    pass


class NonScalarInputError(BigDecimalError, TypeError):
    """Input cannot be interpreted as a decimal number at all."""

    pass


class InvalidScaleError(BigDecimalError, ValueError):
    """Scale is negative or exceeds MAX_SCALE."""

    pass


class DivisionByZeroError(BigDecimalError, ZeroDivisionError):
    """Divisor is zero."""

    pass


class InvalidExponentError(BigDecimalError, ValueError):
    """Power exponent is negative."""

    pass


class UnnecessaryRoundingError(BigDecimalError, ArithmeticError):
    """Rounding mode UNNECESSARY would discard non-zero digits."""

    pass
