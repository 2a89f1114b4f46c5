import pytest

from keypad_calculator import arithmetic
from keypad_calculator.arithmetic import DivisionByZero


class TestArithmetic:

    def test_add(self):
        assert arithmetic.add(2.0, 3.5) == 5.5

    def test_subtract(self):
        assert arithmetic.subtract(2.0, 3.5) == -1.5

    def test_multiply(self):
        assert arithmetic.multiply(-4.0, 2.5) == -10.0

    def test_divide(self):
        assert arithmetic.divide(7.0, 2.0) == 3.5

    def test_divide_by_zero(self):
        with pytest.raises(DivisionByZero):
            arithmetic.divide(8.0, 0.0)

    def test_divide_by_negative_zero(self):
        with pytest.raises(DivisionByZero):
            arithmetic.divide(8.0, -0.0)

    def test_division_by_zero_is_arithmetic_error(self):
        assert issubclass(DivisionByZero, ArithmeticError)
