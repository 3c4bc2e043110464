"""
Fixed Point Math

Shared decimal math primitives for financial calculations: working precision
and rounding policy, argument guards and a correctly rounded n-th root.
"""

from .constants import (
    CURRENCY_SCALE,
    INTERNAL_OPERATIONS_PRECISION,
    MATH_CONTEXT,
    MIN_VALUE,
    MIN_VALUE_MESSAGE,
    PERCENTAGE_SCALE,
    ROUNDING_MODE,
    ULP,
)
from .exceptions import FixedPointMathError, InvalidArgument, RootConvergenceError
from .guards import check_argument_greater_than_or_equal
from .roots import nth_root
from .scaling import round_to_scale, to_currency_scale, to_decimal, to_percentage_scale

__version__ = "1.0.0"

__all__ = [
    "CURRENCY_SCALE",
    "INTERNAL_OPERATIONS_PRECISION",
    "MATH_CONTEXT",
    "MIN_VALUE",
    "MIN_VALUE_MESSAGE",
    "PERCENTAGE_SCALE",
    "ROUNDING_MODE",
    "ULP",
    "FixedPointMathError",
    "InvalidArgument",
    "RootConvergenceError",
    "check_argument_greater_than_or_equal",
    "nth_root",
    "round_to_scale",
    "to_currency_scale",
    "to_decimal",
    "to_percentage_scale",
]
