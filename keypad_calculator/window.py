# window.py
# Python 3.x, PyQt5
# PyQt5 UI: 버튼 → Calculator 엔진 연결. 계산 로직은 두지 않는다.

from typing import Dict, List, Optional

from PyQt5.QtCore import Qt
from PyQt5.QtGui import QColor, QFont
from PyQt5.QtWidgets import (
    QGridLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from keypad_calculator.events import Operand, OperandPress, Operator, decode
from keypad_calculator.machine import Calculator

BUTTON_SIZE = 75
GRID_ROWS = 5
GRID_COLS = 4
GRID_GAP = 3

WINDOW_BACKGROUND = '#2b2d30'
OPERAND_COLOR = '#626567'
FUNCTION_COLOR = '#46494b'  # '.', '+/-', '%'
EDIT_COLOR = '#a84e4b'  # C, D
OPERATOR_COLOR = '#e67e22'

_FUNCTION_KEYS = {Operand.DECIMAL, Operand.TOGGLE_SIGN, Operator.PERCENTAGE}
_EDIT_KEYS = {Operator.CLEAR, Operator.DELETE}


def keypad_layout() -> List[List[str]]:
    """첫 행과 마지막 열은 연산자, 나머지는 피연산자를 열거형 순서대로 채운다"""
    operands = iter(Operand)
    operators = iter(Operator)
    rows = []
    for r in range(GRID_ROWS):
        row = []
        for c in range(GRID_COLS):
            key = next(operators) if r == 0 or c == GRID_COLS - 1 else next(operands)
            row.append(key.symbol)
        rows.append(row)
    return rows


def button_color(label: str) -> str:
    event = decode(label)
    key = event.operand if isinstance(event, OperandPress) else event.operator
    if key in _FUNCTION_KEYS:
        return FUNCTION_COLOR
    if key in _EDIT_KEYS:
        return EDIT_COLOR
    if isinstance(key, Operand):
        return OPERAND_COLOR
    return OPERATOR_COLOR


def pressed_color(label: str) -> str:
    # 누르고 있는 동안은 기본 색보다 어둡게
    return QColor(button_color(label)).darker().name()


def fitted_font_size(text: str, display_width: int, button_size: int = BUTTON_SIZE) -> int:
    # 글자 수가 많을수록 글꼴을 줄인다
    return max(1, min(button_size, display_width // max(1, len(text))))


class CalculatorWindow(QWidget):
    """계산기 창: 배너 + 화면 + 5x4 키패드"""

    def __init__(self, engine: Optional[Calculator] = None, button_size: int = BUTTON_SIZE) -> None:
        super().__init__()
        self.engine = engine if engine is not None else Calculator()
        self.button_size = button_size
        self.buttons: Dict[str, QPushButton] = {}
        self._build_ui()
        self._refresh()

    def _build_ui(self) -> None:
        size = self.button_size
        padding = size // GRID_COLS
        padding_top = size // 2
        screen_height = size + padding_top
        width = 2 * padding + (GRID_COLS * (size + GRID_GAP) - GRID_GAP)
        height = 2 * padding_top + screen_height + (GRID_ROWS * (size + GRID_GAP) - GRID_GAP)

        self.setWindowTitle('Calculator')
        self.setStyleSheet(f'background-color: {WINDOW_BACKGROUND};')
        root = QVBoxLayout()
        root.setContentsMargins(padding, padding_top, padding, padding)
        root.setSpacing(0)
        self.setLayout(root)

        # 배너(진행 중인 식)
        self.banner = QLabel(self.engine.banner_text())
        self.banner.setStyleSheet('color: white;')
        root.addWidget(self.banner)

        # 표시부
        self.display = QLineEdit()
        self.display.setReadOnly(True)
        self.display.setAlignment(Qt.AlignRight)
        self.display.setFixedHeight(screen_height)
        self.display.setStyleSheet('background-color: black; color: white; border: none;')
        root.addWidget(self.display)

        grid = QGridLayout()
        grid.setSpacing(GRID_GAP)
        grid.setContentsMargins(0, padding_top, 0, 0)
        root.addLayout(grid)

        for r, row in enumerate(keypad_layout()):
            for c, label in enumerate(row):
                btn = QPushButton(label)
                btn.setFixedSize(size, size)
                btn.setCursor(Qt.PointingHandCursor)
                btn.setFocusPolicy(Qt.NoFocus)
                font_size = size // 6 if label == Operand.TOGGLE_SIGN.symbol else size // 2
                btn.setStyleSheet(
                    f'QPushButton {{ background-color: {button_color(label)}; color: white;'
                    f' border-radius: 10px; font-size: {font_size}px; }}'
                    f' QPushButton:pressed {{ background-color: {pressed_color(label)}; }}'
                )
                # clicked는 checked(bool) 인자를 내보내므로 첫 인자를 흡수하도록 작성
                btn.clicked.connect(lambda checked=False, ch=label: self.on_button(ch))
                grid.addWidget(btn, r, c)
                self.buttons[label] = btn

        self.setFixedSize(width, height)

    def showEvent(self, event) -> None:
        super().showEvent(event)
        # 배치가 끝난 뒤의 화면 폭으로 글꼴 크기를 다시 맞춘다
        self._refresh()

    def on_button(self, ch: str) -> None:
        self.engine.press(ch)
        self._refresh()

    def _refresh(self) -> None:
        text = self.engine.display_text()
        self.display.setText(text)
        self.banner.setText(self.engine.banner_text())
        font = QFont(self.display.font())
        font.setPixelSize(fitted_font_size(text, self.display.width(), self.button_size))
        self.display.setFont(font)
