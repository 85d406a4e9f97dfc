"""Scaled fixed-point arithmetic on arbitrary-precision integers.

Python's int is the arbitrary-precision primitive. This module layers decimal
scale on top of it: every operand is an (unscaled, scale) pair whose value is
unscaled * 10^-scale, and every operation takes the scale of its result.

Results that do not fit the requested scale are truncated toward zero, never
rounded. Rounding decisions belong to the caller.

Example: 123.45 is the pair (12345, 2).
"""

from __future__ import annotations

__all__ = [
    # Functions
    "pow10",
    "rescale",
    "add_scaled",
    "subtract_scaled",
    "multiply_scaled",
    "divide_scaled",
    "pow_scaled",
    "compare_scaled",
    "digits_to_int",
    "int_to_digits",
]

# Python refuses int <-> decimal str conversions above 4300 digits
# (sys.int_max_str_digits). Conversions are split into blocks below that.
CHUNK_DIGITS = 4000
CHUNK_BITS = 13_000  # 2^13000 has 3914 decimal digits

# log10(2), to estimate the decimal digit count from bit_length()
_LOG10_2 = 0.30102999566398120


# =============================================================================
# Helpers
# =============================================================================


def pow10(n: int) -> int:
    """Return 10^n for a non-negative n."""
    if n < 0:
        raise ValueError(f"Negative power of ten: {n}")
    return 10**n


def _div_trunc(a: int, b: int) -> int:
    """Integer division with truncation toward zero.

    Python's // operator rounds toward negative infinity, but decimal
    truncation drops digits regardless of sign. This matters for negative
    numbers.

    Args:
        a: Dividend (can be positive or negative)
        b: Divisor (must be non-zero)

    Returns:
        a / b truncated toward zero

    Raises:
        ZeroDivisionError: If b is zero

    Examples:
        Python: -7 // 3 = -3 (rounds toward -inf)
        Truncation: -7 / 3 = -2
    """
    if b == 0:
        raise ZeroDivisionError("Division by zero in _div_trunc")

    # Same sign: the quotient is non-negative and // already truncates.
    if (a >= 0) == (b >= 0):
        return a // b
    return -(abs(a) // abs(b))


def rescale(value: int, scale: int, new_scale: int) -> int:
    """Express an unscaled value at a different scale.

    Growing the scale pads with zeros (exact). Shrinking it truncates toward
    zero.

    Args:
        value: Unscaled integer
        scale: Current scale of value
        new_scale: Target scale

    Returns:
        Unscaled integer at new_scale
    """
    if new_scale >= scale:
        return value * pow10(new_scale - scale)
    return _div_trunc(value, pow10(scale - new_scale))


def _align(a: int, a_scale: int, b: int, b_scale: int) -> tuple[int, int, int]:
    """Bring two operands to their common (larger) scale."""
    common = max(a_scale, b_scale)
    return rescale(a, a_scale, common), rescale(b, b_scale, common), common


# =============================================================================
# Digit string conversion
# =============================================================================


def digits_to_int(digits: str) -> int:
    """Convert a string of ASCII decimal digits (no sign) to int.

    Long strings are split in halves and recombined, so no single int()
    call sees more than CHUNK_DIGITS digits.
    """
    if len(digits) <= CHUNK_DIGITS:
        return int(digits)
    low_len = len(digits) // 2
    high = digits_to_int(digits[:-low_len])
    return high * pow10(low_len) + digits_to_int(digits[-low_len:])


def int_to_digits(value: int) -> str:
    """Convert a non-negative int to its decimal digit string.

    The reverse of digits_to_int: large values are split with divmod by a
    power of ten and the low half is zero-padded back to its width.
    """
    if value < 0:
        raise ValueError("Cannot convert a negative value to digits")
    if value.bit_length() <= CHUNK_BITS:
        return str(value)
    # Below the real digit count, so the high half is never zero
    low_len = int(value.bit_length() * _LOG10_2) // 2
    high, low = divmod(value, pow10(low_len))
    return int_to_digits(high) + int_to_digits(low).zfill(low_len)


# =============================================================================
# Arithmetic
# =============================================================================


def add_scaled(a: int, a_scale: int, b: int, b_scale: int, scale: int) -> int:
    """Compute a + b at the given result scale."""
    a_aligned, b_aligned, common = _align(a, a_scale, b, b_scale)
    return rescale(a_aligned + b_aligned, common, scale)


def subtract_scaled(a: int, a_scale: int, b: int, b_scale: int, scale: int) -> int:
    """Compute a - b at the given result scale."""
    a_aligned, b_aligned, common = _align(a, a_scale, b, b_scale)
    return rescale(a_aligned - b_aligned, common, scale)


def multiply_scaled(a: int, a_scale: int, b: int, b_scale: int, scale: int) -> int:
    """Compute a * b at the given result scale.

    The exact product lives at a_scale + b_scale; any other result scale pads
    or truncates it.
    """
    return rescale(a * b, a_scale + b_scale, scale)


def divide_scaled(a: int, a_scale: int, b: int, b_scale: int, scale: int) -> int:
    """Compute a / b truncated toward zero at the given result scale.

    With a = ua * 10^-sa and b = ub * 10^-sb, the unscaled quotient at scale s
    is trunc(ua * 10^(s - sa + sb) / ub).

    Raises:
        ZeroDivisionError: If b is zero
    """
    if b == 0:
        raise ZeroDivisionError("Division by zero in divide_scaled")

    shift = scale - a_scale + b_scale
    if shift >= 0:
        return _div_trunc(a * pow10(shift), b)
    return _div_trunc(a, b * pow10(-shift))


def pow_scaled(base: int, base_scale: int, exponent: int, scale: int) -> int:
    """Compute base^exponent at the given result scale.

    The exact power lives at base_scale * exponent. Exponent zero yields one.

    Raises:
        ValueError: If exponent is negative
    """
    if exponent < 0:
        raise ValueError(f"Negative exponent: {exponent}")
    return rescale(base**exponent, base_scale * exponent, scale)


def compare_scaled(a: int, a_scale: int, b: int, b_scale: int) -> int:
    """Compare a and b exactly.

    Returns:
        -1 if a < b, 0 if a == b, 1 if a > b
    """
    a_aligned, b_aligned, _ = _align(a, a_scale, b, b_scale)
    if a_aligned < b_aligned:
        return -1
    if a_aligned > b_aligned:
        return 1
    return 0
