"""Pytest configuration and fixtures."""

import pytest

from bigdecimal import BigDecimal

# Operands shared by the arithmetic tests (27 and 22 integer digits)
LARGE_A = "192341864273423843765928364.12345"
LARGE_B = "1476127319823712827462.6789"


@pytest.fixture
def large_a() -> BigDecimal:
    """A large value with scale 5."""
    return BigDecimal.of(LARGE_A, 5)


@pytest.fixture
def large_b() -> BigDecimal:
    """A large value with scale 4."""
    return BigDecimal.of(LARGE_B, 4)


@pytest.fixture
def sample_values() -> list[BigDecimal]:
    """Values with mixed scales for aggregate tests."""
    return [BigDecimal.of("1.5"), BigDecimal.of("2.6"), BigDecimal.of("5.15")]
