"""Click-sequence scenarios against the Calculator controller."""

import pytest

from calcpanel.buttons import parse_buttons
from calcpanel.display import RecordingDisplay
from calcpanel.machine import Calculator
from calcpanel.models import (
    INITIAL_STATE,
    AwaitingTwo,
    Operator,
    ShowingResult,
    TypingOne,
    TypingTwo,
)


@pytest.fixture
def display():
    return RecordingDisplay()


@pytest.fixture
def calc(display):
    return Calculator(display)


def click(calc, *tokens):
    """Click each token in order (digits, '.', operator symbols, 'c')."""
    for button in parse_buttons(list(tokens)):
        calc.press(button)


# --- Typing operands ---

def test_starts_at_zero(calc, display):
    assert calc.state == INITIAL_STATE
    assert calc.display_text == "0"
    assert display.texts == []


def test_digits_concatenate(calc, display):
    click(calc, "1", "2", "3")
    assert calc.state == TypingOne("123")
    assert display.texts == ["1", "12", "123"]


def test_leading_zero_replaced(calc, display):
    click(calc, "0", "5")
    assert calc.state == TypingOne("5")
    assert display.text == "5"


def test_second_decimal_ignored(calc, display):
    click(calc, "3", ".", ".")
    assert calc.state == TypingOne("3.")
    assert display.texts == ["3", "3."]


def test_decimal_then_digits(calc):
    click(calc, ".", "5")
    assert calc.state == TypingOne("0.5")


def test_operand_two_decimal(calc, display):
    click(calc, "1", "/", ".", "5", "=")
    assert display.text == "2"


# --- Clear ---

def test_clear_resets_everything(calc, display):
    click(calc, "8", "-", "3")
    calc.on_clear()
    assert calc.state == INITIAL_STATE
    assert display.text == "0"


def test_clear_when_already_clear(calc, display):
    calc.on_clear()
    assert display.texts == ["0"]


def test_clear_after_result(calc, display):
    click(calc, "2", "+", "2", "=", "c")
    assert calc.state == INITIAL_STATE
    assert display.text == "0"


# --- Operators and evaluation ---

def test_left_to_right_no_precedence(calc, display):
    click(calc, "1", "+")
    assert calc.state == AwaitingTwo("1", Operator.ADD_EQUALS)
    click(calc, "4")
    assert calc.state == TypingTwo("1", Operator.ADD_EQUALS, "4")
    click(calc, "*")
    assert calc.state == AwaitingTwo("5", Operator.MULTIPLY)
    assert display.text == "5"
    click(calc, "3")
    assert calc.state == TypingTwo("5", Operator.MULTIPLY, "3")
    click(calc, "=")
    assert calc.state == ShowingResult("5", Operator.MULTIPLY, "3", "15")
    assert display.text == "15"


def test_add_equals_twice_only_arms(calc, display):
    click(calc, "7", "+")
    assert calc.state == AwaitingTwo("7", Operator.ADD_EQUALS)
    click(calc, "+")
    assert calc.state == AwaitingTwo("7", Operator.ADD_EQUALS)
    assert set(display.texts) == {"7"}


def test_digit_after_result_starts_new_operand(calc, display):
    click(calc, "8", "-", "3", "=")
    assert display.text == "5"
    click(calc, "2")
    assert calc.state == TypingOne("2")
    assert display.text == "2"


def test_decimal_after_result_starts_new_operand(calc, display):
    click(calc, "8", "-", "3", "=", ".")
    assert calc.state == TypingOne("0.")
    assert display.text == "0."


def test_addition_chain_needs_second_click(calc, display):
    click(calc, "2", "+", "3", "=")
    assert display.text == "5"
    click(calc, "+")
    assert calc.state == AwaitingTwo("5", Operator.ADD_EQUALS)
    click(calc, "4", "=")
    assert display.text == "9"


def test_subtraction_chains_automatically(calc, display):
    click(calc, "9", "-", "2", "-")
    assert display.text == "7"
    click(calc, "3", "=")
    assert display.text == "4"


def test_result_into_new_operation(calc, display):
    click(calc, "6", "+", "4", "=", "/", "4", "=")
    assert display.text == "2.5"


def test_operator_switch_before_operand_two(calc, display):
    click(calc, "6", "+", "*", "7", "=")
    assert display.text == "42"


def test_operator_first_uses_zero(calc, display):
    click(calc, "-", "5", "=")
    assert display.text == "-5"


def test_no_precision_correction(calc, display):
    click(calc, "0", ".", "1", "+", "0", ".", "2", "=")
    assert display.text == "0.30000000000000004"


# --- Arithmetic edge cases shown as-is ---

def test_divide_by_zero_shows_infinity(calc, display):
    click(calc, "1", "/", "0", "=")
    assert display.text == "Infinity"


def test_zero_over_zero_shows_nan(calc, display):
    click(calc, "0", "/", "0", "=")
    assert display.text == "NaN"


def test_infinity_carries_forward(calc, display):
    click(calc, "1", "/", "0", "-", "1", "=")
    assert display.text == "Infinity"


# --- Contract violations ---

def test_unknown_operator_rejected(calc, display):
    click(calc, "4")
    with pytest.raises(ValueError):
        calc.on_operator("%")
    assert calc.state == TypingOne("4")
    assert display.texts == ["4"]


def test_bad_digit_rejected(calc):
    with pytest.raises(ValueError):
        calc.on_digit("x")
    assert calc.state == INITIAL_STATE


def test_default_display_is_recording():
    calc = Calculator()
    calc.on_digit("9")
    assert calc.display.texts == ["9"]
