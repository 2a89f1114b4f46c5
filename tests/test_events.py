import pytest

from keypad_calculator.events import Operand, OperandPress, Operator, OperatorPress, decode


class TestDecode:

    @pytest.mark.parametrize('label', ['0', '1', '5', '9'])
    def test_digits_are_operands(self, label):
        event = decode(label)
        assert isinstance(event, OperandPress)
        assert event.operand.is_digit
        assert event.symbol == label

    def test_decimal_and_sign(self):
        assert decode('.') == OperandPress(Operand.DECIMAL)
        assert decode('+/-') == OperandPress(Operand.TOGGLE_SIGN)
        assert not Operand.DECIMAL.is_digit

    def test_minus_is_subtract(self):
        assert decode('-') == OperatorPress(Operator.SUBTRACT)

    @pytest.mark.parametrize('label,operator', [
        ('C', Operator.CLEAR),
        ('D', Operator.DELETE),
        ('%', Operator.PERCENTAGE),
        ('÷', Operator.DIVIDE),
        ('x', Operator.MULTIPLY),
        ('+', Operator.ADD),
        ('=', Operator.EQUALS),
    ])
    def test_operators(self, label, operator):
        assert decode(label) == OperatorPress(operator)

    def test_unknown_label(self):
        with pytest.raises(ValueError):
            decode('sin')

    def test_every_symbol_decodes(self):
        assert len(Operand) == 12
        assert len(Operator) == 8
        for key in list(Operand) + list(Operator):
            assert decode(key.symbol).symbol == key.symbol


class TestOperator:

    def test_arithmetic_operators(self):
        arithmetic = {op for op in Operator if op.is_arithmetic}
        assert arithmetic == {Operator.ADD, Operator.SUBTRACT, Operator.MULTIPLY, Operator.DIVIDE}
