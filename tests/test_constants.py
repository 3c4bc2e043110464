"""
Test suite for math constants
"""

from decimal import Decimal, ROUND_HALF_EVEN

import fixed_point_math
from fixed_point_math.constants import (
    CURRENCY_SCALE, INTERNAL_OPERATIONS_PRECISION, MATH_CONTEXT, MIN_VALUE,
    MIN_VALUE_MESSAGE, PERCENTAGE_SCALE, ROUNDING_MODE, ULP
)


class TestConstants:
    """Test precision, rounding and scale constants"""
    
    def test_working_context(self):
        """Test the 30 digit half-even working context"""
        assert INTERNAL_OPERATIONS_PRECISION == 30
        assert MATH_CONTEXT.prec == INTERNAL_OPERATIONS_PRECISION
        assert MATH_CONTEXT.rounding == ROUND_HALF_EVEN
        assert ROUNDING_MODE == ROUND_HALF_EVEN
    
    def test_ulp(self):
        """Test that the tolerance is 10^-31"""
        assert ULP == Decimal('1e-31')
    
    def test_scales(self):
        """Test output scales and that the working precision exceeds them"""
        assert CURRENCY_SCALE == 2
        assert PERCENTAGE_SCALE == 5
        assert INTERNAL_OPERATIONS_PRECISION > max(CURRENCY_SCALE, PERCENTAGE_SCALE)
    
    def test_minimum_value(self):
        """Test the minimum value bound and its message"""
        assert MIN_VALUE == Decimal('0.01')
        assert MIN_VALUE_MESSAGE % ("price", MIN_VALUE) == "price has to be equal or greater than 0.01"
    
    def test_context_untouched_by_kernel(self):
        """Test that computing roots leaves the shared context's flags clear"""
        MATH_CONTEXT.clear_flags()
        fixed_point_math.nth_root(2, Decimal('2'))
        
        assert not any(MATH_CONTEXT.flags.values())
    
    def test_public_api(self):
        """Test package level exports"""
        assert fixed_point_math.__version__ == "1.0.0"
        for name in fixed_point_math.__all__:
            assert hasattr(fixed_point_math, name)
