"""Pydantic field types for decimal values.

Use DecimalText in models that receive amounts as text or numbers and
should store them exactly, in canonical form:

    class Invoice(BaseModel):
        total: DecimalText

    Invoice(total="1,250.500").total  # "1250.5"
"""

from typing import Annotated, Any

from pydantic import BeforeValidator, Field

from bn.errors import FormatError
from bn.number import Bn


def validate_decimal_text(value: Any) -> str:
    """Validate a decimal literal and return its canonical text.

    Args:
        value: Bn, literal string, int, float or Decimal

    Returns:
        Canonical decimal string (no grouping, exponent or trailing zeros)

    Raises:
        ValueError: If value is not a legal decimal literal
    """
    try:
        return str(Bn(value))
    except FormatError as err:
        raise ValueError(f"Not a decimal literal: {value!r}") from err


# Exact decimal as canonical string (validated)
DecimalText = Annotated[
    str,
    BeforeValidator(validate_decimal_text),
    Field(description="Exact decimal number as canonical string"),
]
