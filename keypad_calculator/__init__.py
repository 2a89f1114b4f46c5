# keypad_calculator
# Python 3.x, PyQt5

from keypad_calculator.arithmetic import DivisionByZero
from keypad_calculator.events import Operand, Operator, OperandPress, OperatorPress, decode
from keypad_calculator.machine import Calculator, ErrorKind, Outcome, handle, resolve
from keypad_calculator.state import BLANK_BANNER, ERROR_TEXT, INITIAL_TEXT, CalculatorState

__all__ = [
    'BLANK_BANNER',
    'Calculator',
    'CalculatorState',
    'DivisionByZero',
    'ERROR_TEXT',
    'ErrorKind',
    'INITIAL_TEXT',
    'Operand',
    'OperandPress',
    'Operator',
    'OperatorPress',
    'Outcome',
    'decode',
    'handle',
    'resolve',
]

__version__ = '1.0.0'
