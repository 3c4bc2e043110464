"""
Decimal Scaling Module

Conversion of caller values to Decimal and rounding of high precision results
down to presentation scales. NEVER goes through binary floating point for
values that are already exact.
"""

from decimal import Decimal, InvalidOperation, localcontext
from typing import Union

from .constants import CURRENCY_SCALE, EXACT_CONTEXT, PERCENTAGE_SCALE, ROUNDING_MODE
from .exceptions import InvalidArgument

Numeric = Union[Decimal, int, float, str]


def to_decimal(value: Numeric) -> Decimal:
    """
    Convert a caller supplied number to Decimal

    Decimals pass through untouched, ints and strings convert exactly and
    floats convert through their shortest repr so 0.1 becomes Decimal('0.1').

    Raises:
        InvalidArgument: If the value is not numeric or cannot be parsed
    """
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        raise InvalidArgument(f"Cannot convert boolean {value!r} to Decimal")
    if isinstance(value, int):
        return Decimal(value)
    if isinstance(value, float):
        return Decimal(str(value))
    if isinstance(value, str):
        try:
            return Decimal(value.strip())
        except InvalidOperation as e:
            raise InvalidArgument(f"Cannot convert '{value}' to Decimal") from e
    raise InvalidArgument(f"Cannot convert {type(value).__name__} to Decimal")


def round_to_scale(value: Numeric, scale: int) -> Decimal:
    """
    Round a value to a fixed number of fractional digits

    Args:
        value: Value to round, usually a working precision result
        scale: Number of digits after the decimal point

    Returns:
        Decimal with exactly ``scale`` fractional digits, rounded half-even
    """
    if scale < 0:
        raise InvalidArgument(f"scale has to be equal or greater than 0, got {scale}")
    decimal_value = to_decimal(value)
    if not decimal_value.is_finite():
        raise InvalidArgument(f"Cannot round non-finite value {decimal_value}")
    with localcontext(EXACT_CONTEXT):
        return decimal_value.quantize(Decimal(1).scaleb(-scale), rounding=ROUNDING_MODE)


def to_currency_scale(value: Numeric) -> Decimal:
    """Round to currency scale (2 fractional digits)"""
    return round_to_scale(value, CURRENCY_SCALE)


def to_percentage_scale(value: Numeric) -> Decimal:
    """Round to percentage scale (5 fractional digits)"""
    return round_to_scale(value, PERCENTAGE_SCALE)
