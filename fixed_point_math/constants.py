"""
Math Constants Module

Working precision and rounding policy shared by every internal operation,
plus the presentation scales callers round results to.
"""

from decimal import Context, Decimal, MAX_EMAX, MAX_PREC, MIN_EMIN, ROUND_HALF_EVEN

# Significant digits kept by every intermediate division and power
INTERNAL_OPERATIONS_PRECISION = 30

# Unit in the last place, 10^-31
ULP = Decimal('0.1').scaleb(-INTERNAL_OPERATIONS_PRECISION)

ROUNDING_MODE = ROUND_HALF_EVEN

# Read-only: enter it through decimal.localcontext(), never mutate it
MATH_CONTEXT = Context(prec=INTERNAL_OPERATIONS_PRECISION, rounding=ROUNDING_MODE)

CURRENCY_SCALE = 2  # Fractional digits for monetary amounts
PERCENTAGE_SCALE = 5  # Fractional digits for rates and percentages

MIN_VALUE = Decimal('0.01')
MIN_VALUE_MESSAGE = "%s has to be equal or greater than %s"

# Unbounded context for additions, subtractions and multiplications that must
# stay exact. Never use it for division.
EXACT_CONTEXT = Context(prec=MAX_PREC, Emax=MAX_EMAX, Emin=MIN_EMIN)
