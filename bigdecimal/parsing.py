"""Parsing and normalization of decimal number text.

Grammar:
    value     := sign? integer ('.' fraction)? exponent?
    sign      := '+' | '-'
    integer   := digit+
    fraction  := digit+
    exponent  := ('E' | 'e') sign? digit+

Parsed values come back as (unscaled, scale) pairs. The exponent is folded
into the pair, so nothing downstream ever sees scientific notation.
"""

from __future__ import annotations

import re
from decimal import Decimal
from typing import Any

from bigdecimal.constants import MAX_EXPONENT, MAX_SCALE
from bigdecimal.errors import FormatError, InvalidScaleError, NonScalarInputError
from bigdecimal.math.fixed_point import digits_to_int, int_to_digits, pow10, rescale

# ASCII digits only: \d would also accept other Unicode decimal digits
NUMBER_PATTERN = re.compile(
    r"(?P<sign>[-+])?(?P<integer>[0-9]+)(?:\.(?P<fraction>[0-9]+))?(?:[eE](?P<exponent>[-+]?[0-9]+))?"
)


def validate_scale(scale: Any) -> int:
    """Validate a scale argument.

    Args:
        scale: Candidate scale

    Returns:
        The scale as int

    Raises:
        TypeError: If scale is not an int (bool is rejected too)
        InvalidScaleError: If scale is negative or exceeds MAX_SCALE
    """
    if isinstance(scale, bool) or not isinstance(scale, int):
        raise TypeError(f"Scale must be int, got {type(scale).__name__}")
    if scale < 0:
        raise InvalidScaleError(f"Scale cannot be negative: {scale}")
    if scale > MAX_SCALE:
        raise InvalidScaleError(f"Scale {scale} exceeds max {MAX_SCALE}")
    return scale


def to_text(value: Any) -> str:
    """Turn an accepted scalar into the text the grammar is matched against.

    Raises:
        NonScalarInputError: If value is not a str, int or decimal.Decimal
    """
    if isinstance(value, str):
        return value
    # bool is an int subclass but True is not a number here
    if isinstance(value, int) and not isinstance(value, bool):
        return f"{'-' if value < 0 else ''}{int_to_digits(abs(value))}"
    if isinstance(value, Decimal):
        return str(value)
    raise NonScalarInputError(f"Value of type {type(value).__name__} is not a decimal scalar")


def parse(value: Any, scale: int | None = None) -> tuple[int, int]:
    """Parse a decimal scalar into an (unscaled, scale) pair.

    Without an explicit scale the number keeps its natural scale: the count
    of fractional digits left after the exponent is applied. With one, extra
    fractional digits are truncated (not rounded) and missing ones are
    zero-padded.

    Args:
        value: Text, int or decimal.Decimal
        scale: Optional explicit scale

    Returns:
        Tuple of (unscaled, scale)

    Raises:
        NonScalarInputError: If value is not an accepted scalar
        FormatError: If the text does not match the grammar
        InvalidScaleError: If the explicit or natural scale is out of range

    Examples:
        parse("123.456", 2) -> (12345, 2)
        parse("1E-10") -> (1, 10)
        parse("1.1E2") -> (110, 0)
    """
    if scale is not None:
        scale = validate_scale(scale)

    text = to_text(value)
    match = NUMBER_PATTERN.fullmatch(text)
    if match is None:
        raise FormatError(f"Wrong value '{_excerpt(text)}' format: expected [+-]digits[.digits][E[+-]digits]")

    integer = match.group("integer")
    fraction = match.group("fraction") or ""
    exponent = _parse_exponent(match.group("exponent") or "0")

    # Leading zeros of the integer part vanish in the int conversion
    significand = digits_to_int(integer + fraction)
    if match.group("sign") == "-":
        significand = -significand

    # Position of the decimal point relative to the end of the digits
    effective_exponent = exponent - len(fraction)
    if effective_exponent > MAX_EXPONENT:
        raise FormatError(f"Exponent of '{_excerpt(text)}' exceeds max {MAX_EXPONENT}")
    if effective_exponent >= 0:
        unscaled = significand * pow10(effective_exponent)
        natural_scale = 0
    else:
        unscaled = significand
        natural_scale = -effective_exponent

    if scale is None:
        if natural_scale > MAX_SCALE:
            raise InvalidScaleError(f"Scale {natural_scale} of '{_excerpt(text)}' exceeds max {MAX_SCALE}")
        return unscaled, natural_scale

    # Cutting more digits than the significand has always truncates to zero
    if natural_scale - scale > len(integer) + len(fraction):
        return 0, scale
    return rescale(unscaled, natural_scale, scale), scale


def _parse_exponent(text: str) -> int:
    """Convert exponent text (optional sign, digits) to int."""
    sign = -1 if text.startswith("-") else 1
    return sign * digits_to_int(text.lstrip("+-"))


def _excerpt(text: str, limit: int = 40) -> str:
    """Shorten long input for error messages."""
    return text if len(text) <= limit else f"{text[:limit]}..."


__all__ = [
    "NUMBER_PATTERN",
    "parse",
    "to_text",
    "validate_scale",
]
