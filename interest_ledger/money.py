"""
Money Helpers

Decimal conversion, rounding and display formatting for amounts and rates.
NEVER uses float for monetary values.
"""

from decimal import Decimal, ROUND_HALF_UP, InvalidOperation, getcontext
from typing import Union

# High precision for intermediate interest sums
getcontext().prec = 28

CENTS = Decimal('0.01')


def to_decimal(value: Union[str, int, Decimal]) -> Decimal:
    """
    Convert a value to Decimal without going through float

    Raises:
        ValueError: If the value is not a finite number
    """
    if isinstance(value, float):
        raise ValueError("Floats are not accepted for monetary values")
    if isinstance(value, Decimal):
        result = value
    else:
        try:
            result = Decimal(str(value).strip())
        except InvalidOperation:
            raise ValueError(f"Cannot convert '{value}' to Decimal")
    if not result.is_finite():
        raise ValueError(f"Cannot convert '{value}' to Decimal")
    return result


def round_money(value: Decimal, places: int = 2) -> Decimal:
    """Round half away from zero to the given number of places"""
    return value.quantize(Decimal('0.1') ** places, rounding=ROUND_HALF_UP)


def format_amount(value: Decimal, places: int = 2) -> str:
    """Format for display with a fixed number of places"""
    return f"{round_money(value, places):.{places}f}"
