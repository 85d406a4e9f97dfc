"""pydantic field type for BigDecimal.

Values are validated from their text (or int / decimal.Decimal) form and
serialized back to the canonical string, so the scale survives a round trip:

    class Invoice(BaseModel):
        total: BigDecimalStr

    Invoice(total="10.50").model_dump(mode="json")  # {"total": "10.50"}
"""

from __future__ import annotations

from typing import Annotated, Any

import structlog
from pydantic import PlainSerializer, PlainValidator, WithJsonSchema

from bigdecimal.big_decimal import BigDecimal
from bigdecimal.errors import FormatError, NonScalarInputError

logger = structlog.get_logger()


def validate_big_decimal(value: Any) -> BigDecimal:
    """Validate a value as a BigDecimal.

    Args:
        value: BigDecimal, decimal string, int or decimal.Decimal

    Returns:
        The parsed BigDecimal

    Raises:
        ValueError: If value has an unsupported type or malformed text
    """
    if isinstance(value, BigDecimal):
        return value
    try:
        return BigDecimal.of(value)
    except NonScalarInputError as err:
        logger.debug("big_decimal_validation_failed", value_type=type(value).__name__)
        raise ValueError(f"BigDecimal must be string, int or Decimal, got {type(value).__name__}") from err
    except FormatError:
        logger.debug("big_decimal_validation_failed", value=value)
        raise


# Arbitrary-precision decimal, exchanged as its canonical string
BigDecimalStr = Annotated[
    BigDecimal,
    PlainValidator(validate_big_decimal),
    PlainSerializer(lambda value: value.value(), return_type=str),
    WithJsonSchema(
        {
            "type": "string",
            "pattern": r"^[-+]?[0-9]+(\.[0-9]+)?([eE][-+]?[0-9]+)?$",
            "description": "Arbitrary-precision decimal number as string",
        }
    ),
]
