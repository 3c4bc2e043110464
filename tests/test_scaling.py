"""
Test suite for scaling helpers

Tests Decimal conversion and half-even rounding to presentation scales.
"""

import pytest
from decimal import Decimal

from fixed_point_math.exceptions import InvalidArgument
from fixed_point_math.roots import nth_root
from fixed_point_math.scaling import (
    round_to_scale, to_currency_scale, to_decimal, to_percentage_scale
)


class TestToDecimal:
    """Test conversion of caller values"""
    
    def test_decimal_passthrough(self):
        """Test that Decimals are returned unchanged"""
        value = Decimal('1.2300')
        assert to_decimal(value) is value
    
    def test_exact_conversions(self):
        """Test int, string and float conversion"""
        assert to_decimal(42) == Decimal('42')
        assert to_decimal(" 12.345 ") == Decimal('12.345')
        assert to_decimal(0.1) == Decimal('0.1')
    
    def test_invalid_values(self):
        """Test that non-numeric input is rejected"""
        with pytest.raises(InvalidArgument, match="Cannot convert 'abc' to Decimal"):
            to_decimal("abc")
        with pytest.raises(InvalidArgument):
            to_decimal(True)
        with pytest.raises(InvalidArgument):
            to_decimal(None)
        with pytest.raises(InvalidArgument):
            to_decimal([1])


class TestRounding:
    """Test rounding to output scales"""
    
    def test_currency_scale_half_even(self):
        """Test that ties round to the even digit"""
        assert to_currency_scale(Decimal('2.345')) == Decimal('2.34')
        assert to_currency_scale(Decimal('2.355')) == Decimal('2.36')
        assert to_currency_scale(Decimal('2.3451')) == Decimal('2.35')
    
    def test_currency_scale_exponent(self):
        """Test that results carry exactly two fractional digits"""
        assert to_currency_scale(Decimal('7')).as_tuple().exponent == -2
        assert str(to_currency_scale(Decimal('7'))) == "7.00"
    
    def test_percentage_scale(self):
        """Test rounding a working precision root to percentage scale"""
        assert to_percentage_scale(nth_root(2, Decimal('2'))) == Decimal('1.41421')
        assert to_percentage_scale(Decimal('0.123455')) == Decimal('0.12346')
        assert to_percentage_scale(Decimal('0.123445')) == Decimal('0.12344')
    
    def test_large_values_keep_all_digits(self):
        """Test that rounding never fails on values wider than the working precision"""
        value = Decimal('12345678901234567890123456789012345.678')
        assert to_currency_scale(value) == Decimal('12345678901234567890123456789012345.68')
    
    def test_negative_values(self):
        """Test rounding of negative values"""
        assert to_currency_scale(Decimal('-1.005')) == Decimal('-1.00')
    
    def test_zero_scale(self):
        """Test rounding to whole units"""
        assert round_to_scale(Decimal('2.5'), 0) == Decimal('2')
        assert round_to_scale(Decimal('3.5'), 0) == Decimal('4')
    
    def test_invalid_scale(self):
        """Test that negative scales are rejected"""
        with pytest.raises(InvalidArgument, match="scale"):
            round_to_scale(Decimal('1'), -1)
    
    def test_non_finite(self):
        """Test that infinities cannot be rounded"""
        with pytest.raises(InvalidArgument):
            to_currency_scale(Decimal('Infinity'))
