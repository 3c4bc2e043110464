"""
N-th Root Module

Correctly rounded principal n-th root of a non-negative Decimal, computed with
Newton-Raphson on f(x) = x^n - a at the working precision.

Every division and the power x^(n-1) are rounded in MATH_CONTEXT (30
significant digits, half-even). The multiply and the add of the recurrence are
exact. Iteration stops once successive guesses differ by no more than ULP.

Guesses are kept inside a power-of-ten bracket derived from the exponent of
``a``, so a seed far below the root cannot overshoot by hundreds of orders of
magnitude. The converged guess is then moved to its correctly rounded
neighbour by comparing a with the n-th powers of the rounding midpoints.
"""

import math
from decimal import (
    Context, Decimal, DivisionByZero, MAX_EMAX, MIN_EMIN, Overflow,
    ROUND_CEILING, ROUND_FLOOR,
)
from typing import Optional, Tuple

from .config import get_config
from .constants import EXACT_CONTEXT, INTERNAL_OPERATIONS_PRECISION, MATH_CONTEXT, ULP
from .exceptions import InvalidArgument, RootConvergenceError
from .logging_config import TRACE, get_logger
from .scaling import Numeric, to_decimal

logger = get_logger(__name__)

_ZERO = Decimal(0)
_ONE = Decimal(1)
_HALF = Decimal('0.5')

# Steps allowed once the guess is within a factor of two of the root
_QUADRATIC_TAIL = 100


def _check_degree(n: int) -> None:
    if isinstance(n, bool) or not isinstance(n, int):
        raise InvalidArgument(f"nth root degree must be an integer, got {n!r}")
    if n < 1:
        raise InvalidArgument(f"nth root degree has to be equal or greater than 1, got {n}")


def _bracket_exponents(n: int, a: Decimal) -> Tuple[int, int]:
    """
    Powers of ten enclosing the root, with one decade of slack below.

    a lies in [10^e, 10^(e+1)) so its root lies in [10^(e/n), 10^((e+1)/n)).
    """
    e = a.adjusted()
    low = e // n - 1
    high = -(-(e + 1) // n)
    return low, high


def _iteration_budget(n: int, low: int, high: int) -> int:
    """
    Newton-Raphson updates needed from the top of the bracket.

    Far above the root each update shrinks the guess by about (n-1)/n, so
    crossing the bracket takes roughly n * ln(10^(high-low)) steps before the
    quadratic phase.
    """
    return math.ceil(n * ((high - low) * math.log(10) + 2)) + _QUADRATIC_TAIL


def _bounded_power(x: Decimal, n: int, context: Context) -> Decimal:
    """x^n by repeated squaring, every product rounded in ``context``"""
    result = _ONE
    base = x
    while n:
        if n & 1:
            result = context.multiply(result, base)
        n >>= 1
        if n:
            base = context.multiply(base, base)
    return result


def _compare_power(x: Decimal, n: int, a: Decimal, exact: Context) -> int:
    """Sign of x^n - a, exact"""
    prec = 2 * INTERNAL_OPERATIONS_PRECISION + len(str(n)) + 10
    lower = _bounded_power(x, n, Context(prec=prec, rounding=ROUND_FLOOR, Emax=MAX_EMAX, Emin=MIN_EMIN))
    if lower > a:
        return 1
    upper = _bounded_power(x, n, Context(prec=prec, rounding=ROUND_CEILING, Emax=MAX_EMAX, Emin=MIN_EMIN))
    if upper < a:
        return -1
    # a falls between the bounds: only the exact power decides
    return int(_bounded_power(x, n, exact).compare(a))


def _is_even(x: Decimal) -> bool:
    digits = x.as_tuple().digits
    return len(digits) < INTERNAL_OPERATIONS_PRECISION or digits[-1] % 2 == 0


def _round_correctly(x: Decimal, n: int, a: Decimal, working: Context, exact: Context) -> Decimal:
    """
    Move ``x`` to the working precision value nearest the true root.

    The root r lies above the midpoint m between x and its neighbour exactly
    when m^n < a, so no root digits beyond the working precision are needed.
    Ties go to the even neighbour.
    """
    while True:
        upper = working.next_plus(x)
        sign = _compare_power(exact.multiply(exact.add(x, upper), _HALF), n, a, exact)
        if sign < 0 or (sign == 0 and not _is_even(x)):
            x = upper
            continue

        lower = working.next_minus(x)
        sign = _compare_power(exact.multiply(exact.add(lower, x), _HALF), n, a, exact)
        if sign > 0 or (sign == 0 and not _is_even(x)):
            x = lower
            continue

        return x


def nth_root(n: int, a: Numeric, max_iterations: Optional[int] = None) -> Decimal:
    """
    Return the correctly rounded principal n-th root of ``a``.

    Args:
        n: Degree of the root, 2 for a square root
        a: Non-negative value; ints, strings and floats are converted to Decimal
        max_iterations: Cap on Newton-Raphson updates. Defaults to the
            ``max_root_iterations`` setting when set, otherwise to a budget
            worked out from ``n`` and the exponent of ``a``

    Returns:
        r such that r^n = a, at 30 significant digits rounded half-even.
        Callers round it to the currency or percentage scale themselves.

    Raises:
        InvalidArgument: If ``a`` is negative or not finite, or ``n`` is not a
            positive integer
        RootConvergenceError: If the cap is reached before convergence, or an
            intermediate power leaves the Decimal exponent range
    """
    _check_degree(n)
    a = to_decimal(a)
    if not a.is_finite():
        raise InvalidArgument(f"nth root can only be calculated for finite numbers, got {a}")
    if a < _ZERO:
        raise InvalidArgument("nth root can only be calculated for positive numbers")
    if max_iterations is not None and max_iterations < 1:
        raise InvalidArgument(f"max_iterations has to be equal or greater than 1, got {max_iterations}")

    if a == _ZERO:
        return _ZERO

    low_exponent, high_exponent = _bracket_exponents(n, a)
    if max_iterations is None:
        max_iterations = get_config().max_root_iterations
    if max_iterations is None:
        max_iterations = _iteration_budget(n, low_exponent, high_exponent)

    # Per-call copies so the shared contexts' flags are never touched
    working = MATH_CONTEXT.copy()
    exact = EXACT_CONTEXT.copy()

    bracket_low = exact.scaleb(_ONE, Decimal(low_exponent))
    bracket_high = exact.scaleb(_ONE, Decimal(high_exponent))

    n_decimal = Decimal(n)
    n_minus_1 = Decimal(n - 1)

    def step(x: Decimal) -> Decimal:
        if x < bracket_low:
            # Below the root the update overshoots it; restart from the top
            return bracket_high
        try:
            quotient = working.divide(a, working.power(x, n_minus_1))
        except (DivisionByZero, Overflow) as e:
            raise RootConvergenceError(n, a, x, iterations) from e
        x_next = working.divide(exact.add(exact.multiply(n_minus_1, x), quotient), n_decimal)
        return min(x_next, bracket_high)

    x_prev = a
    x = working.divide(a, n_decimal)
    iterations = 0

    while exact.subtract(x, x_prev).copy_abs() > ULP:
        if iterations >= max_iterations:
            raise RootConvergenceError(n, a, x, iterations)

        logger.log(TRACE, "Guess: %s, previous: %s", x, x_prev,
                   extra={"degree": n, "iteration": iterations})

        x_next = step(x)
        iterations += 1

        if x_next == x_prev:
            # Working precision exhausted: guesses repeat
            logger.debug("nth root (n=%s) of %s repeats at %s after %s iterations",
                         n, a, x_next, iterations)
            x_prev, x = x, x_next
            break

        x_prev, x = x, x_next

    # ULP is absolute, so roots well below one stop short of their last digit
    for _ in range(_QUADRATIC_TAIL):
        x_next = step(x)
        if x_next == x or x_next == x_prev:
            break
        x_prev, x = x, x_next

    return _round_correctly(x, n, a, working, exact)
