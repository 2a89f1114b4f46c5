# events.py
# Python 3.x
# 버튼 입력 이벤트: 피연산자(숫자/점/부호)와 연산자 두 종류로 나눈다

from dataclasses import dataclass
from enum import Enum
from typing import Union


class Operand(Enum):
    """키패드 순서대로 나열한 피연산자 버튼"""

    SEVEN = '7'
    EIGHT = '8'
    NINE = '9'
    FOUR = '4'
    FIVE = '5'
    SIX = '6'
    ONE = '1'
    TWO = '2'
    THREE = '3'
    ZERO = '0'
    DECIMAL = '.'
    TOGGLE_SIGN = '+/-'

    @property
    def symbol(self) -> str:
        return self.value

    @property
    def is_digit(self) -> bool:
        return self.value.isdigit()


class Operator(Enum):
    """키패드 순서대로 나열한 연산자 버튼"""

    CLEAR = 'C'
    DELETE = 'D'
    PERCENTAGE = '%'
    DIVIDE = '÷'
    MULTIPLY = 'x'
    SUBTRACT = '-'
    ADD = '+'
    EQUALS = '='

    @property
    def symbol(self) -> str:
        return self.value

    @property
    def is_arithmetic(self) -> bool:
        return self in _ARITHMETIC_OPERATORS


_ARITHMETIC_OPERATORS = frozenset(
    {Operator.ADD, Operator.SUBTRACT, Operator.MULTIPLY, Operator.DIVIDE}
)


@dataclass(frozen=True)
class OperandPress:
    operand: Operand

    @property
    def symbol(self) -> str:
        return self.operand.symbol


@dataclass(frozen=True)
class OperatorPress:
    operator: Operator

    @property
    def symbol(self) -> str:
        return self.operator.symbol


Event = Union[OperandPress, OperatorPress]

# 두 열거형의 기호는 서로 겹치지 않는다 ('-'는 뺄셈, 부호 전환은 '+/-')
_BY_SYMBOL = {}
for _operand in Operand:
    _BY_SYMBOL[_operand.symbol] = OperandPress(_operand)
for _operator in Operator:
    _BY_SYMBOL[_operator.symbol] = OperatorPress(_operator)
del _operand, _operator


def decode(label: str) -> Event:
    """버튼 라벨을 이벤트로 변환한다. 알 수 없는 라벨이면 ValueError."""
    try:
        return _BY_SYMBOL[label]
    except KeyError:
        raise ValueError(f'unknown button label: {label!r}') from None
