# calculator_window.py
# Python 3.x, PyQt5
# PEP 8 준수, 문자열은 기본적으로 ' ' 사용

import argparse
import logging
import sys
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from PyQt5.QtCore import Qt
from PyQt5.QtGui import QFont
from PyQt5.QtWidgets import (
    QApplication,
    QWidget,
    QGridLayout,
    QVBoxLayout,
    QPushButton,
    QLineEdit,
    QLabel,
)

from calculator import Calculator, Operator, setup_logger

logger = logging.getLogger('calculator.window')

GRID_COLUMNS = 4

STYLE_SHEET = '''
QLineEdit#display {
    background: #1c1c1e;
    color: #ffffff;
    border: none;
    padding: 8px 12px;
}
QLineEdit#display[error="true"] {
    color: #ff453a;
}
QPushButton {
    background: #333333;
    color: #ffffff;
    border-radius: 8px;
    font-size: 20px;
}
QPushButton[variant="control"] {
    background: #a5a5a5;
    color: #000000;
}
QPushButton[variant="operator"] {
    background: #ff9f0a;
}
QLabel#subtitle, QLabel#helper {
    color: #6e6e73;
}
'''


@dataclass(frozen=True)
class ButtonSpec:
    """버튼 한 개: 라벨과 엔진 동작의 고정 매핑"""

    label: str
    action: Callable[[Calculator], None]
    variant: str = 'default'  # 'default' | 'control' | 'operator'
    span: int = 1

    @property
    def accessible_name(self) -> str:
        if self.variant == 'operator' and self.label != '=':
            return 'Operate {}'.format(self.label)
        return self.label

    def press(self, engine: Calculator) -> None:
        self.action(engine)


def _digit(d: str) -> ButtonSpec:
    return ButtonSpec(d, lambda engine: engine.input_digit(d), span=2 if d == '0' else 1)


def _operator(op: Operator) -> ButtonSpec:
    return ButtonSpec(op.value, lambda engine: engine.apply_operator(op), 'operator')


BUTTONS: Tuple[ButtonSpec, ...] = (
    ButtonSpec('AC', Calculator.clear, 'control'),
    ButtonSpec('+/-', Calculator.toggle_sign, 'control'),
    ButtonSpec('%', Calculator.input_percent, 'control'),
    _operator(Operator.DIVIDE),
    _digit('7'), _digit('8'), _digit('9'),
    _operator(Operator.MULTIPLY),
    _digit('4'), _digit('5'), _digit('6'),
    _operator(Operator.SUBTRACT),
    _digit('1'), _digit('2'), _digit('3'),
    _operator(Operator.ADD),
    _digit('0'),
    ButtonSpec('.', Calculator.input_decimal),
    ButtonSpec('=', Calculator.evaluate, 'operator'),
)


def grid_positions(buttons: Sequence[ButtonSpec] = BUTTONS,
                   columns: int = GRID_COLUMNS) -> Dict[str, Tuple[int, int, int, int]]:
    """라벨 -> (행, 열, 행 span, 열 span). 왼쪽 위부터 차례로 채운다."""
    positions = {}
    row, col = 0, 0
    for spec in buttons:
        if col + spec.span > columns:
            row, col = row + 1, 0
        positions[spec.label] = (row, col, 1, spec.span)
        col += spec.span
        if col >= columns:
            row, col = row + 1, 0
    return positions


class CalculatorWindow(QWidget):
    """PyQt5 UI: 버튼 → Calculator 엔진 연결"""

    def __init__(self, engine: Optional[Calculator] = None) -> None:
        super().__init__()
        self.engine = engine if engine is not None else Calculator()
        self.buttons: Dict[str, QPushButton] = {}
        self._specs = {spec.label: spec for spec in BUTTONS}
        self._build_ui()

    def _build_ui(self) -> None:
        self.setWindowTitle('Calculator')
        self.setStyleSheet(STYLE_SHEET)
        root = QVBoxLayout()
        root.setContentsMargins(12, 12, 12, 12)
        root.setSpacing(8)
        self.setLayout(root)

        title = QLabel('Calculator')
        title_font = QFont(title.font())
        title_font.setPointSize(18)
        title_font.setBold(True)
        title.setFont(title_font)
        root.addWidget(title)

        subtitle = QLabel('Simple and fast arithmetic.')
        subtitle.setObjectName('subtitle')
        root.addWidget(subtitle)

        self.display = QLineEdit()
        self.display.setObjectName('display')
        self.display.setReadOnly(True)
        self.display.setAlignment(Qt.AlignRight)
        font = QFont(self.display.font())
        font.setPointSize(28)
        self.display.setFont(font)
        root.addWidget(self.display)

        grid = QGridLayout()
        grid.setSpacing(6)
        root.addLayout(grid)

        positions = grid_positions()
        for spec in BUTTONS:
            btn = QPushButton(spec.label)
            btn.setMinimumHeight(56)
            btn.setCursor(Qt.PointingHandCursor)
            btn.setAccessibleName(spec.accessible_name)
            btn.setProperty('variant', spec.variant)
            # clicked는 checked(bool) 인자를 내보내므로 첫 인자를 흡수하도록 작성
            btn.clicked.connect(lambda checked=False, label=spec.label: self.on_button(label))
            grid.addWidget(btn, *positions[spec.label])
            self.buttons[spec.label] = btn

        helper = QLabel('Use × to multiply and ÷ to divide. '
                        'Percent and sign keys help with everyday sums.')
        helper.setObjectName('helper')
        helper.setWordWrap(True)
        root.addWidget(helper)

        self.resize(360, 560)
        self.refresh()

    def on_button(self, label: str) -> None:
        self._specs[label].press(self.engine)
        self.refresh()

    def refresh(self) -> None:
        """엔진 표시 문자열과 오류 스타일을 디스플레이에 반영"""
        self.display.setText(self.engine.display_text())
        error = self.engine.is_error()
        if self.display.property('error') != error:
            self.display.setProperty('error', error)
            # 동적 속성 변경 후 스타일시트 재적용
            self.display.style().unpolish(self.display)
            self.display.style().polish(self.display)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description='사칙연산 계산기')
    parser.add_argument('--log-level', default='WARNING',
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                        help='로그 레벨(기본값: WARNING)')
    parser.add_argument('--log', default=None,
                        help='로그 파일 경로(기본값: 파일 로그 없음)')
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    setup_logger(getattr(logging, args.log_level), args.log)
    logger.info('[시작] 계산기 창을 엽니다')

    app = QApplication(sys.argv[:1])
    w = CalculatorWindow()
    w.show()
    sys.exit(app.exec())


if __name__ == '__main__':
    main()
