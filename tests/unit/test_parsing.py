"""Tests for decimal text parsing and normalization."""

from decimal import Decimal

import pytest

from bigdecimal.constants import MAX_EXPONENT, MAX_SCALE
from bigdecimal.errors import FormatError, InvalidScaleError, NonScalarInputError
from bigdecimal.parsing import parse, to_text, validate_scale


class TestParse:
    """Tests for parse()."""

    def test_natural_scale(self):
        assert parse("123.45") == (12345, 2)

    def test_integer(self):
        assert parse("123") == (123, 0)

    def test_leading_zeros_dropped(self):
        assert parse("-00123.45") == (-12345, 2)

    def test_explicit_scale_truncates(self):
        """Explicit scale drops digits without rounding."""
        assert parse("123.456", 2) == (12345, 2)
        assert parse("-123.459", 2) == (-12345, 2)

    def test_explicit_scale_pads(self):
        assert parse("123", 4) == (1230000, 4)

    def test_negative_zero_has_no_sign(self):
        assert parse("-0.00") == (0, 2)

    def test_exponent_positive(self):
        assert parse("1.1E2") == (110, 0)

    def test_exponent_negative(self):
        assert parse("1E-10") == (1, 10)

    def test_exponent_lowercase(self):
        assert parse("2.5e-1") == (25, 2)

    def test_exponent_partially_consumes_fraction(self):
        """10.0530E+1 keeps three fractional digits."""
        assert parse("10.0530E+1") == (100530, 3)

    def test_exponent_with_explicit_scale(self):
        assert parse("0.012E+9", 2) == (1200000000, 2)

    def test_int_input(self):
        assert parse(-42) == (-42, 0)

    def test_decimal_input(self):
        assert parse(Decimal("1.50")) == (150, 2)

    def test_decimal_input_scientific(self):
        """decimal.Decimal renders small values with an exponent."""
        assert parse(Decimal("1.5E-7")) == (15, 8)

    @pytest.mark.parametrize(
        "text",
        ["--123.45", "*123.45", "1a3.45", "123.45a", "123.", ".45", "", " 1", "1 ", "1E", "1E+", "1.2.3", "١٢٣"],
    )
    def test_wrong_format_raises(self, text):
        with pytest.raises(FormatError):
            parse(text)

    def test_format_error_is_value_error(self):
        with pytest.raises(ValueError):
            parse("abc")

    def test_non_finite_decimal_raises(self):
        with pytest.raises(FormatError):
            parse(Decimal("NaN"))
        with pytest.raises(FormatError):
            parse(Decimal("Infinity"))


class TestToText:
    """Tests for the accepted scalar types."""

    def test_str_unchanged(self):
        assert to_text("1.0") == "1.0"

    @pytest.mark.parametrize("value", [1.5, None, True, [1], object()])
    def test_non_scalar_raises(self, value):
        with pytest.raises(NonScalarInputError):
            to_text(value)

    def test_non_scalar_is_type_error(self):
        """Floats are never coerced implicitly."""
        with pytest.raises(TypeError):
            parse(0.1)


class TestValidateScale:
    """Tests for validate_scale()."""

    def test_valid(self):
        assert validate_scale(0) == 0
        assert validate_scale(MAX_SCALE) == MAX_SCALE

    def test_negative_raises(self):
        with pytest.raises(InvalidScaleError):
            validate_scale(-1)

    def test_too_large_raises(self):
        with pytest.raises(InvalidScaleError):
            validate_scale(MAX_SCALE + 1)

    def test_non_int_raises(self):
        with pytest.raises(TypeError):
            validate_scale(2.0)
        with pytest.raises(TypeError):
            validate_scale(True)

    def test_natural_scale_too_large_raises(self):
        with pytest.raises(InvalidScaleError):
            parse(f"1E-{MAX_SCALE + 1}")

    def test_natural_scale_out_of_range_truncates_with_explicit_scale(self):
        """Every digit is cut, so the result is zero at the requested scale."""
        assert parse(f"1E-{MAX_SCALE + 5}", 2) == (0, 2)
        assert parse(f"-123.45E-{MAX_SCALE}", 0) == (0, 0)

    def test_small_exponent_with_explicit_scale(self):
        """Digits within reach of the requested scale still count."""
        assert parse("12345E-6", 2) == (1, 2)


class TestLimits:
    """Tests for exponent and scale bounds."""

    def test_max_exponent_accepted(self):
        unscaled, scale = parse(f"1E{MAX_EXPONENT}")
        assert scale == 0
        assert unscaled == 10**MAX_EXPONENT

    def test_exponent_too_large_raises(self):
        with pytest.raises(FormatError):
            parse(f"1E{MAX_EXPONENT + 1}")

    def test_huge_exponent_raises(self):
        with pytest.raises(FormatError):
            parse("1E9999999999")

    def test_exponent_checked_after_fraction(self):
        """The fraction digits shift the decimal point back."""
        unscaled, scale = parse(f"0.1E{MAX_EXPONENT + 1}")
        assert scale == 0
        assert unscaled == 10**MAX_EXPONENT

    def test_huge_explicit_scale_raises(self):
        with pytest.raises(InvalidScaleError):
            parse("0", 10**12)

    def test_huge_negative_exponent_raises(self):
        with pytest.raises(InvalidScaleError):
            parse("1E-9999999999")

    def test_long_digit_string(self):
        """5000 digits exceed the int() text limit."""
        unscaled, scale = parse("-" + "1" * 5000 + ".5")
        assert scale == 1
        assert unscaled < 0

    def test_long_int_input(self):
        assert to_text(-(10**5000)) == "-1" + "0" * 5000
