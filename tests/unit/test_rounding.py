"""Tests for the rounding policy."""

import pytest

from bigdecimal.errors import UnnecessaryRoundingError
from bigdecimal.rounding import RoundingMode, is_round_addition_required


class TestRoundingMode:
    """Tests for the RoundingMode enumeration."""

    def test_has_nine_modes(self):
        assert len(RoundingMode) == 9

    def test_from_string_value(self):
        assert RoundingMode("half_even") is RoundingMode.HALF_EVEN

    def test_unknown_value_raises(self):
        with pytest.raises(ValueError):
            RoundingMode("half_random")


class TestDirectedModes:
    """UP/DOWN/CEILING/FLOOR ignore the truncated digits."""

    def test_up_always_adds(self):
        assert is_round_addition_required(RoundingMode.UP, True, 1, "1")
        assert is_round_addition_required(RoundingMode.UP, False, 1, "1")

    def test_down_never_adds(self):
        assert not is_round_addition_required(RoundingMode.DOWN, True, 1, "9")
        assert not is_round_addition_required(RoundingMode.DOWN, False, 1, "9")

    def test_ceiling_adds_for_positive_only(self):
        assert is_round_addition_required(RoundingMode.CEILING, True, 1, "1")
        assert not is_round_addition_required(RoundingMode.CEILING, False, 1, "1")

    def test_floor_adds_for_negative_only(self):
        assert not is_round_addition_required(RoundingMode.FLOOR, True, 1, "1")
        assert is_round_addition_required(RoundingMode.FLOOR, False, 1, "1")


class TestHalfModes:
    """Half modes look at the first truncated digit and at exact halves."""

    @pytest.mark.parametrize(
        "mode,last_kept,truncated,expected",
        [
            (RoundingMode.HALF_UP, 2, "5", True),
            (RoundingMode.HALF_UP, 2, "49", False),
            (RoundingMode.HALF_UP, 2, "06", False),
            (RoundingMode.HALF_DOWN, 2, "5", False),
            (RoundingMode.HALF_DOWN, 2, "51", True),
            (RoundingMode.HALF_DOWN, 2, "6", True),
            (RoundingMode.HALF_EVEN, 2, "5", False),
            (RoundingMode.HALF_EVEN, 5, "5", True),
            (RoundingMode.HALF_EVEN, 2, "51", True),
            (RoundingMode.HALF_EVEN, 3, "4", False),
            (RoundingMode.HALF_ODD, 2, "5", True),
            (RoundingMode.HALF_ODD, 5, "5", False),
            (RoundingMode.HALF_ODD, 5, "51", True),
            (RoundingMode.HALF_ODD, 2, "4", False),
        ],
    )
    def test_decision(self, mode, last_kept, truncated, expected):
        assert is_round_addition_required(mode, True, last_kept, truncated) is expected

    def test_sign_does_not_matter(self):
        """Half modes are symmetric around zero."""
        for mode in (RoundingMode.HALF_UP, RoundingMode.HALF_DOWN, RoundingMode.HALF_EVEN, RoundingMode.HALF_ODD):
            assert is_round_addition_required(mode, True, 3, "7") == is_round_addition_required(mode, False, 3, "7")


class TestUnnecessary:
    """UNNECESSARY never permits discarding digits."""

    def test_raises(self):
        with pytest.raises(UnnecessaryRoundingError) as exc_info:
            is_round_addition_required(RoundingMode.UNNECESSARY, True, 1, "25")
        assert "25" in str(exc_info.value)

    def test_is_arithmetic_error(self):
        with pytest.raises(ArithmeticError):
            is_round_addition_required(RoundingMode.UNNECESSARY, True, 1, "1")


def test_unknown_mode_raises():
    """Anything that is not a RoundingMode member is rejected."""
    with pytest.raises(ValueError):
        is_round_addition_required("half_up", True, 1, "5")  # type: ignore[arg-type]
