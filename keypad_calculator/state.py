# state.py
# Python 3.x
# 계산기 상태: 화면 문자열, 대기 연산자, 누적값, 이어쓰기 여부, 배너

from dataclasses import dataclass
from typing import Optional

from keypad_calculator.events import Operator

INITIAL_TEXT = '_'  # 시작 화면 표시
ERROR_TEXT = 'Error'  # 오류 표시
BLANK_BANNER = ' '  # 배너가 비었을 때


@dataclass
class CalculatorState:
    """UI와 분리된 순수 상태. 이벤트마다 제자리에서 갱신된다."""

    display: str = INITIAL_TEXT
    pending: Optional[Operator] = None
    accumulated: float = 0.0
    append_mode: bool = False
    banner: str = BLANK_BANNER

    def reset(self) -> None:
        self.display = INITIAL_TEXT
        self.pending = None
        self.accumulated = 0.0
        self.append_mode = False
        self.banner = BLANK_BANNER

    @property
    def is_error(self) -> bool:
        return self.display == ERROR_TEXT

    @property
    def is_initial(self) -> bool:
        return self.display == INITIAL_TEXT
