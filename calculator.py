# calculator.py
# Python 3.x
# PEP 8 준수, 문자열은 기본적으로 ' ' 사용

import logging
import math
import sys
from dataclasses import dataclass, replace
from decimal import Decimal, ROUND_HALF_UP, localcontext
from enum import Enum
from typing import Optional, Union

MAX_DISPLAY_LENGTH = 12  # 디스플레이 글자 수 제한
ERROR_MARKER = 'Error'
DIGITS = '0123456789'

# 표시 포맷 임계값
#   |x| >= SCIENTIFIC_UPPER 또는 |x| < SCIENTIFIC_LOWER  -> 지수 표기
#   그 외                                               -> 유효숫자 12자리 반올림 후 최단 표기
#   최단 표기가 MAX_DISPLAY_LENGTH 초과                   -> 지수 표기
SCIENTIFIC_UPPER = 1e12
SCIENTIFIC_LOWER = 1e-9
SIGNIFICANT_DIGITS = 12
EXPONENT_DIGITS = 6  # 지수 표기 가수의 소수 자릿수

# 최단 표기에서 위치 표기를 쓰는 하한 (그 아래는 1.5e-7 형태)
_POSITIONAL_LOWER = 1e-6

logger = logging.getLogger('calculator')


def setup_logger(level: int = logging.WARNING, log_path: Optional[str] = None) -> logging.Logger:
    """콘솔과 (선택적으로) 파일(UTF-8)로 로그를 남기는 'calculator' 로거를 설정한다."""
    logger.setLevel(level)
    # 재호출 시 핸들러 중복 방지
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(
        fmt='%(asctime)s %(levelname)s %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    # 콘솔
    sh = logging.StreamHandler(sys.stdout)
    sh.setLevel(level)
    sh.setFormatter(formatter)
    logger.addHandler(sh)

    # 파일(UTF-8)
    if log_path:
        fh = logging.FileHandler(log_path, mode='a', encoding='utf-8')
        fh.setLevel(level)
        fh.setFormatter(formatter)
        logger.addHandler(fh)

    return logger


class Operator(Enum):
    """대기 연산자. 값은 버튼에 표시되는 기호."""

    ADD = '+'
    SUBTRACT = '-'
    MULTIPLY = '×'
    DIVIDE = '÷'

    @classmethod
    def from_symbol(cls, symbol: str) -> 'Operator':
        """UI 기호(ASCII 별칭 포함)를 Operator로 변환"""
        aliases = {'−': '-', '*': '×', '/': '÷'}
        try:
            return cls(aliases.get(symbol, symbol))
        except ValueError:
            raise ValueError('unknown operator: {!r}'.format(symbol)) from None


# 사칙연산
def add(a: float, b: float) -> float:
    return a + b


def subtract(a: float, b: float) -> float:
    return a - b


def multiply(a: float, b: float) -> float:
    return a * b


def divide(a: float, b: float) -> float:
    if b == 0:
        raise ZeroDivisionError('division by zero')
    return a / b


_OPERATIONS = {
    Operator.ADD: add,
    Operator.SUBTRACT: subtract,
    Operator.MULTIPLY: multiply,
    Operator.DIVIDE: divide,
}


def apply_operation(left: float, op: Operator, right: float) -> float:
    """left op right. 0으로 나누면 ZeroDivisionError."""
    return _OPERATIONS[op](left, right)


def _round_significant(value: float, digits: int) -> Decimal:
    # 정확한 이진 값을 유효숫자 digits 자리로, 동률은 0에서 먼 쪽으로
    with localcontext() as ctx:
        ctx.prec = digits
        ctx.rounding = ROUND_HALF_UP
        return +Decimal(value)


def _to_scientific(value: float) -> str:
    # 2.500000e+15 -> 2.5e15, 1.000000e-03 -> 1e-3
    rounded = _round_significant(value, EXPONENT_DIGITS + 1)
    mantissa, exponent = '{:.{}e}'.format(rounded, EXPONENT_DIGITS).split('e')
    if '.' in mantissa:
        mantissa = mantissa.rstrip('0').rstrip('.')
    return '{}e{}'.format(mantissa, int(exponent))


def _to_shortest(value: float) -> str:
    # repr는 왕복 가능한 최단 자릿수를 준다. 표기 방식만 다시 정한다.
    text = repr(value)
    if abs(value) < _POSITIONAL_LOWER:
        mantissa, _, exponent = text.partition('e')
        return '{}e{}'.format(mantissa, int(exponent))
    return format(Decimal(text).normalize(), 'f')


def format_result(value: float) -> str:
    """계산 결과를 디스플레이 문자열로 변환한다.

    - 유한하지 않으면 ERROR_MARKER
    - 0 (음의 0 포함) 이면 '0'
    - |x| >= 1e12 또는 |x| < 1e-9 이면 지수 표기 (가수 소수 6자리, 끝의 0 제거, 'e' 뒤 '+' 없음)
    - 그 외에는 유효숫자 12자리로 반올림한 최단 표기, 12자를 넘으면 지수 표기
    """
    if not math.isfinite(value):
        return ERROR_MARKER

    magnitude = abs(value)
    if magnitude == 0:
        return '0'

    if magnitude >= SCIENTIFIC_UPPER or magnitude < SCIENTIFIC_LOWER:
        return _to_scientific(value)

    rounded = float(_round_significant(value, SIGNIFICANT_DIGITS))
    text = _to_shortest(rounded)
    if len(text) > MAX_DISPLAY_LENGTH:
        return _to_scientific(value)
    return text


def parse_display(text: str) -> Optional[float]:
    """디스플레이 문자열을 숫자로. 해석할 수 없으면 None."""
    try:
        value = float(text)
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return value


@dataclass(frozen=True)
class CalculatorState:
    """엔진 상태 전체. 이벤트마다 통째로 교체된다."""

    display: str = '0'
    stored: Optional[float] = None
    pending: Optional[Operator] = None
    overwrite: bool = False

    @property
    def is_error(self) -> bool:
        return self.display == ERROR_MARKER


class Calculator:
    """연산 엔진: 입력 순서대로 계산하는 사칙연산 상태 기계"""

    def __init__(self) -> None:
        self.state = CalculatorState()

    # 표시 문자열
    def display_text(self) -> str:
        return self.state.display

    def is_error(self) -> bool:
        return self.state.is_error

    # 이벤트
    def clear(self) -> None:
        logger.debug('[입력] AC')
        self.state = CalculatorState()

    def input_digit(self, d: str) -> None:
        if len(d) != 1 or d not in DIGITS:
            raise ValueError('not a decimal digit: {!r}'.format(d))
        logger.debug('[입력] 숫자=%s', d)
        self._leave_error()

        s = self.state
        if s.overwrite or s.display == '0':
            self.state = replace(s, display=d, overwrite=False)
        elif len(s.display) >= MAX_DISPLAY_LENGTH:
            return
        else:
            self.state = replace(s, display=s.display + d)

    def input_decimal(self) -> None:
        logger.debug('[입력] 소수점')
        self._leave_error()

        s = self.state
        if s.overwrite:
            self.state = replace(s, display='0.', overwrite=False)
        elif '.' in s.display or len(s.display) >= MAX_DISPLAY_LENGTH:
            return
        else:
            self.state = replace(s, display=s.display + '.')

    def toggle_sign(self) -> None:
        logger.debug('[입력] +/-')
        if self._leave_error():
            return

        s = self.state
        if s.display.startswith('-'):
            self.state = replace(s, display=s.display[1:])
        elif s.display != '0':
            self.state = replace(s, display='-' + s.display)

    def input_percent(self) -> None:
        logger.debug('[입력] %')
        if self._leave_error():
            return

        value = parse_display(self.state.display)
        if value is None:
            return
        self._apply_new_value(value / 100)

    def apply_operator(self, op: Union[Operator, str]) -> None:
        if not isinstance(op, Operator):
            op = Operator.from_symbol(op)
        logger.debug('[입력] 연산자=%s', op.value)
        if self._leave_error():
            return

        s = self.state
        current = parse_display(s.display)
        if current is None:
            return

        if s.stored is None:
            s = replace(s, stored=current)
        elif s.pending is not None:
            result = self._compute(s.stored, s.pending, current)
            if result is None:
                return
            s = replace(s, stored=result, display=format_result(result))

        self.state = replace(s, pending=op, overwrite=True)

    def evaluate(self) -> None:
        logger.debug('[입력] =')
        if self._leave_error():
            return

        s = self.state
        if s.pending is None or s.stored is None:
            # 대기 연산이 없으면 표시 유지
            self.state = replace(s, overwrite=True)
            return

        current = parse_display(s.display)
        if current is None:
            return
        result = self._compute(s.stored, s.pending, current)
        if result is None:
            return
        self.state = CalculatorState(display=format_result(result), overwrite=True)

    # 내부 유틸
    def _leave_error(self) -> bool:
        """오류 표시 중이면 초기화하고 True"""
        if not self.state.is_error:
            return False
        self.clear()
        return True

    def _compute(self, left: float, op: Operator, right: float) -> Optional[float]:
        try:
            result = apply_operation(left, op, right)
        except ArithmeticError as e:
            logger.info('[오류] %r %s %r: %s', left, op.value, right, e)
            self._set_error()
            return None
        if not math.isfinite(result):
            logger.info('[오류] %r %s %r: 유한하지 않은 결과', left, op.value, right)
            self._set_error()
            return None
        return result

    def _apply_new_value(self, value: float) -> None:
        formatted = format_result(value)
        if formatted == ERROR_MARKER:
            self._set_error()
            return
        self.state = replace(self.state, display=formatted, overwrite=True)

    def _set_error(self) -> None:
        self.state = CalculatorState(display=ERROR_MARKER, overwrite=True)
