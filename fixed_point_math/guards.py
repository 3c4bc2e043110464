"""
Argument Guard Module

Fail-fast validation of numeric arguments. Operands may be of different
numeric types (int, Decimal, Fraction, float) as long as they compare.
"""

from typing import Any, Protocol

from .constants import MIN_VALUE_MESSAGE
from .exceptions import InvalidArgument


class Comparable(Protocol):
    """Anything that can be ordered against another numeric value"""

    def __lt__(self, other: Any) -> bool:
        ...


def check_argument_greater_than_or_equal(label: str, left: Comparable, right: Comparable) -> None:
    """
    Ensure that ``right`` is greater than or equal to ``left``.

    Args:
        label: Name of the argument, used in the error message
        left: Lower bound
        right: Value being checked

    Raises:
        InvalidArgument: If ``right`` is less than ``left``. The message states
            the ``label`` and the ``right`` argument.
    """
    if right < left:
        raise InvalidArgument(MIN_VALUE_MESSAGE % (label, right))
