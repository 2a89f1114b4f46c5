# arithmetic.py
# Python 3.x
# 사칙연산만 담당하는 순수 함수 모음


class DivisionByZero(ArithmeticError):
    """나누는 수가 0일 때 발생"""


def add(a: float, b: float) -> float:
    return a + b


def subtract(a: float, b: float) -> float:
    return a - b


def multiply(a: float, b: float) -> float:
    return a * b


def divide(a: float, b: float) -> float:
    # -0.0 도 0으로 취급
    if b == 0:
        raise DivisionByZero('Division by zero')
    return a / b
