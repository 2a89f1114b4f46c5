# machine.py
# Python 3.x
# 상태 머신: 버튼 이벤트 하나를 받아 CalculatorState 를 갱신한다

import logging
import re
from enum import Enum
from typing import Callable, Dict, NamedTuple, Optional

from keypad_calculator import arithmetic
from keypad_calculator.events import Event, Operand, OperandPress, Operator, OperatorPress, decode
from keypad_calculator.state import BLANK_BANNER, ERROR_TEXT, INITIAL_TEXT, CalculatorState

logger = logging.getLogger(__name__)

NEGATION = '-'

_TRAILING_ZERO = re.compile(r'-?\d+\.0')

_OPERATIONS: Dict[Operator, Callable[[float, float], float]] = {
    Operator.ADD: arithmetic.add,
    Operator.SUBTRACT: arithmetic.subtract,
    Operator.MULTIPLY: arithmetic.multiply,
    Operator.DIVIDE: arithmetic.divide,
}


class ErrorKind(Enum):
    PARSE = 'parse'
    DIVISION_BY_ZERO = 'division_by_zero'


class Outcome(NamedTuple):
    """계산 결과 또는 오류 종류 중 하나를 담는다"""

    value: Optional[float] = None
    error: Optional[ErrorKind] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def parse_number(text: str) -> Outcome:
    try:
        return Outcome(value=float(text))
    except ValueError:
        return Outcome(error=ErrorKind.PARSE)


def compute(operator: Operator, a: float, b: float) -> Outcome:
    try:
        return Outcome(value=_OPERATIONS[operator](a, b))
    except arithmetic.DivisionByZero:
        return Outcome(error=ErrorKind.DIVISION_BY_ZERO)


def trim_text(text: str) -> str:
    """'-12.0' 같은 문자열에서 끝의 '.0' 만 제거한다"""
    if _TRAILING_ZERO.fullmatch(text):
        return text[:-2]
    return text


def trim_number(number: float) -> str:
    return trim_text(repr(number))


def _set_error(state: CalculatorState, kind: ErrorKind) -> None:
    logger.warning('[오류] %s (화면=%r)', kind.value, state.display)
    state.banner = BLANK_BANNER
    state.display = ERROR_TEXT


def resolve(state: CalculatorState, previous: float, current_text: str,
            operator: Optional[Operator]) -> None:
    """= 와 연속 연산이 공유하는 계산. 대기 연산자로 previous 와 화면 값을 계산한다."""
    if operator is None or not current_text.strip() or current_text == ERROR_TEXT:
        return

    parsed = parse_number(current_text)
    if not parsed.ok:
        _set_error(state, parsed.error)
        return

    result = compute(operator, previous, parsed.value)
    if not result.ok:
        _set_error(state, result.error)
        return

    state.accumulated = result.value
    state.banner = f'{trim_number(previous)} {operator.symbol} {trim_number(parsed.value)}'
    state.display = trim_number(result.value)


def _press_operand(state: CalculatorState, operand: Operand) -> None:
    # 오류 화면에서는 숫자/점/부호 입력을 무시한다
    if state.is_error:
        return
    text = state.display

    if operand.is_digit:
        if state.append_mode:
            state.display = text + operand.symbol
        else:
            state.display = operand.symbol
            state.append_mode = True

    elif operand is Operand.DECIMAL:
        dot = operand.symbol
        if state.is_initial or (dot in text and state.pending is not None):
            state.display = dot
            state.append_mode = True
        elif dot not in text:
            state.display = text + dot
            state.append_mode = True

    else:
        # 부호만 남은 '-' 를 벗기면 화면이 비므로 그대로 둔다
        if state.is_initial or text in ('0', Operand.DECIMAL.symbol, NEGATION):
            return
        if text.startswith(NEGATION):
            state.display = text[1:]
        else:
            state.display = NEGATION + text
        state.append_mode = True


def _press_operator(state: CalculatorState, operator: Operator) -> None:
    text = state.display.strip()
    state.append_mode = False

    if operator.is_arithmetic:
        if state.pending is None:
            parsed = parse_number(text)
            if not parsed.ok:
                _set_error(state, parsed.error)
                return
            state.accumulated = parsed.value
            state.pending = operator
            state.banner = f'{trim_number(parsed.value)} {operator.symbol}'
        else:
            # = 없이 연산자를 이어 누르면 직전 연산을 먼저 계산
            resolve(state, state.accumulated, text, state.pending)
            state.pending = operator

    elif operator is Operator.CLEAR:
        state.reset()

    elif operator is Operator.DELETE:
        if len(state.display) > 1:
            state.display = state.display[:-1]
        else:
            state.display = INITIAL_TEXT

    elif operator is Operator.PERCENTAGE:
        parsed = parse_number(text)
        if not parsed.ok:
            _set_error(state, parsed.error)
            return
        state.display = trim_number(arithmetic.divide(parsed.value, 100))

    elif operator is Operator.EQUALS:
        resolve(state, state.accumulated, text, state.pending)
        state.pending = None


def handle(state: CalculatorState, event: Event) -> CalculatorState:
    """이벤트 하나를 적용하고 같은 상태 객체를 돌려준다"""
    if isinstance(event, OperandPress):
        _press_operand(state, event.operand)
    elif isinstance(event, OperatorPress):
        _press_operator(state, event.operator)
    else:
        raise TypeError(f'not a button event: {event!r}')
    return state


class Calculator:
    """UI 가 사용하는 엔진: 상태 하나를 소유하고 버튼 라벨을 받는다"""

    def __init__(self, state: Optional[CalculatorState] = None) -> None:
        self.state = state if state is not None else CalculatorState()

    def reset(self) -> None:
        self.state.reset()

    def press(self, label: str) -> str:
        return self.handle(decode(label))

    def handle(self, event: Event) -> str:
        handle(self.state, event)
        logger.debug('[입력] %s -> 화면=%r 배너=%r 대기=%s 누적=%r',
                     event.symbol, self.state.display, self.state.banner,
                     self.state.pending.name if self.state.pending else None,
                     self.state.accumulated)
        return self.state.display

    def display_text(self) -> str:
        return self.state.display

    def banner_text(self) -> str:
        return self.state.banner
