"""Calculator engine — evaluation and pure state transitions.

Every press_* function takes the current state and returns the next one.
Nothing here touches a display; see calcpanel.machine for that.

Left-to-right, one operation at a time: clicking an operator while operand
two is being typed evaluates what is pending before anything else happens.
ADD_EQUALS doubles as "=": it parks the calculator on the result instead of
arming a new addition.
"""

from __future__ import annotations

import math
import operator
from decimal import Decimal
from typing import Callable

from calcpanel.models import (
    INITIAL_STATE,
    AwaitingTwo,
    CalculatorState,
    Operator,
    ShowingResult,
    TypingOne,
    TypingTwo,
)

DIGITS = frozenset("0123456789")
DECIMAL_POINT = "."

# Browser number-to-string switches to exponent form outside [1e-6, 1e21)
_MAX_FIXED_EXPONENT = 21
_MIN_FIXED_EXPONENT = -6


def _divide(a: float, b: float) -> float:
    """IEEE-754 division: x/0 is a signed infinity and 0/0 is NaN."""
    if b == 0.0:
        if a == 0.0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


_OPERATIONS: dict[Operator, Callable[[float, float], float]] = {
    Operator.ADD_EQUALS: operator.add,
    Operator.SUBTRACT: operator.sub,
    Operator.MULTIPLY: operator.mul,
    Operator.DIVIDE: _divide,
}


def parse_operand(text: str) -> float:
    """Convert operand text to a number.

    An empty operand counts as 0. Text that is not a number (a lone ".")
    is NaN rather than an error.
    """
    if not text.strip():
        return 0.0
    try:
        return float(text)
    except ValueError:
        return math.nan


def format_number(value: float) -> str:
    """Shortest round-trip decimal text for a float.

    '5' not '5.0', '0.30000000000000004', '1e+21', '1.5e-7', 'Infinity',
    '-Infinity', 'NaN'. Negative zero shows as '0'.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0.0:
        return "0"

    sign, digit_tuple, exponent = Decimal(repr(value)).as_tuple()
    digits = "".join(str(d) for d in digit_tuple)
    stripped = digits.rstrip("0")
    exponent += len(digits) - len(stripped)
    digits = stripped

    k = len(digits)
    # n = position of the decimal point relative to the first digit
    n = k + exponent
    prefix = "-" if sign else ""

    if k <= n <= _MAX_FIXED_EXPONENT:
        return prefix + digits + "0" * (n - k)
    if 0 < n <= _MAX_FIXED_EXPONENT:
        return prefix + digits[:n] + "." + digits[n:]
    if _MIN_FIXED_EXPONENT < n <= 0:
        return prefix + "0." + "0" * (-n) + digits

    e = n - 1
    exp_text = f"e{'+' if e >= 0 else '-'}{abs(e)}"
    if k == 1:
        return prefix + digits + exp_text
    return prefix + digits[0] + "." + digits[1:] + exp_text


def evaluate(operand_one: str, op: Operator, operand_two: str) -> str:
    """Apply op to the two operand texts and return the result as text.

    No rounding: 0.1 + 0.2 gives '0.30000000000000004'. Division by zero
    gives 'Infinity' or 'NaN'.

    Raises:
        ValueError: op is not one of the four operators.
    """
    fn = _OPERATIONS[Operator.parse(op)]
    return format_number(fn(parse_operand(operand_one), parse_operand(operand_two)))


def press_digit(state: CalculatorState, digit: str) -> CalculatorState:
    """Type one digit into whichever operand is current."""
    if digit not in DIGITS:
        raise ValueError(f"Not a digit: {digit!r}")

    if isinstance(state, ShowingResult):
        state = INITIAL_STATE

    if isinstance(state, TypingOne):
        if state.operand_one == "0":
            return TypingOne(digit)
        return TypingOne(state.operand_one + digit)

    if isinstance(state, AwaitingTwo):
        return TypingTwo(state.operand_one, state.operation, digit)

    return TypingTwo(state.operand_one, state.operation, state.operand_two + digit)


def press_decimal(state: CalculatorState) -> CalculatorState:
    """Add a decimal point to the current operand; a second one is ignored."""
    if isinstance(state, ShowingResult):
        state = INITIAL_STATE

    if isinstance(state, TypingOne):
        if DECIMAL_POINT in state.operand_one:
            return state
        return TypingOne(state.operand_one + DECIMAL_POINT)

    if isinstance(state, AwaitingTwo):
        return TypingTwo(state.operand_one, state.operation, DECIMAL_POINT)

    if DECIMAL_POINT in state.operand_two:
        return state
    return TypingTwo(state.operand_one, state.operation, state.operand_two + DECIMAL_POINT)


def press_operator(state: CalculatorState, op: Operator | str) -> CalculatorState:
    """Handle an operator click.

    1. Showing a result -> result becomes operand one, op is armed
    2. Typing operand two -> evaluate. ADD_EQUALS shows the result;
       any other op rolls the result into operand one and arms op
    3. Typing operand one or already armed -> arm op (replaces the old one)
    """
    op = Operator.parse(op)

    if isinstance(state, ShowingResult):
        return AwaitingTwo(state.result, op)

    if isinstance(state, TypingTwo):
        result = evaluate(state.operand_one, state.operation, state.operand_two)
        if op is Operator.ADD_EQUALS:
            return ShowingResult(state.operand_one, state.operation, state.operand_two, result)
        return AwaitingTwo(result, op)

    return AwaitingTwo(state.operand_one, op)


def press_clear(state: CalculatorState) -> CalculatorState:
    """Back to a fresh operand one of '0', whatever the state."""
    return INITIAL_STATE
