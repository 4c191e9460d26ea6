import pytest

from calculator import ERROR_MARKER, Calculator, Operator
from calculator_window import BUTTONS, CalculatorWindow, grid_positions, parse_args


@pytest.fixture
def window(qapp):
    w = CalculatorWindow()
    yield w
    w.close()


def click(window, *labels):
    for label in labels:
        window.buttons[label].click()


# --- 버튼 배치 ---

def test_button_order():
    assert [spec.label for spec in BUTTONS] == [
        'AC', '+/-', '%', '÷',
        '7', '8', '9', '×',
        '4', '5', '6', '-',
        '1', '2', '3', '+',
        '0', '.', '=',
    ]


def test_button_variants():
    variants = {spec.label: spec.variant for spec in BUTTONS}
    assert variants['AC'] == variants['+/-'] == variants['%'] == 'control'
    assert all(variants[op.value] == 'operator' for op in Operator)
    assert variants['='] == 'operator'
    assert variants['7'] == variants['.'] == 'default'


def test_accessible_names():
    names = {spec.label: spec.accessible_name for spec in BUTTONS}
    assert names['÷'] == 'Operate ÷'
    assert names['+'] == 'Operate +'
    assert names['='] == '='
    assert names['AC'] == 'AC'


def test_grid_positions():
    positions = grid_positions()
    assert positions['AC'] == (0, 0, 1, 1)
    assert positions['÷'] == (0, 3, 1, 1)
    assert positions['+'] == (3, 3, 1, 1)
    assert positions['0'] == (4, 0, 1, 2)
    assert positions['.'] == (4, 2, 1, 1)
    assert positions['='] == (4, 3, 1, 1)


def test_button_press_maps_to_engine():
    engine = Calculator()
    specs = {spec.label: spec for spec in BUTTONS}
    for label in ['9', '×', '3', '=']:
        specs[label].press(engine)
    assert engine.display_text() == '27'


# --- 창 ---

def test_window_has_every_button(window):
    assert set(window.buttons) == {spec.label for spec in BUTTONS}
    assert window.buttons['÷'].accessibleName() == 'Operate ÷'
    assert window.buttons['÷'].property('variant') == 'operator'


def test_window_initial_display(window):
    assert window.display.text() == '0'
    assert window.display.isReadOnly()
    assert window.display.property('error') is False


def test_window_addition(window):
    click(window, '5', '+', '3', '=')
    assert window.display.text() == '8'


def test_window_percent_and_sign(window):
    click(window, '5', '0', '%')
    assert window.display.text() == '0.5'
    click(window, '+/-')
    assert window.display.text() == '-0.5'


def test_window_error_styling(window):
    click(window, '1', '÷', '0', '=')
    assert window.display.text() == ERROR_MARKER
    assert window.display.property('error') is True

    click(window, '7')
    assert window.display.text() == '7'
    assert window.display.property('error') is False


def test_window_uses_given_engine(qapp):
    engine = Calculator()
    w = CalculatorWindow(engine)
    w.on_button('4')
    assert engine.display_text() == '4'
    assert w.display.text() == '4'
    w.close()


# --- 명령행 ---

def test_parse_args_defaults():
    args = parse_args([])
    assert args.log_level == 'WARNING'
    assert args.log is None


def test_parse_args_options():
    args = parse_args(['--log-level', 'DEBUG', '--log', 'calc.log'])
    assert args.log_level == 'DEBUG'
    assert args.log == 'calc.log'


def test_parse_args_rejects_unknown_level():
    with pytest.raises(SystemExit):
        parse_args(['--log-level', 'LOUD'])
