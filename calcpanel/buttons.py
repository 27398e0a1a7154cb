"""Button binding: the validated input boundary of the calculator.

Maps the element ids of the HTML button panel (and the symbols a
person would type for them) onto Button values. Everything past this
module only ever sees a digit, the decimal point, a known Operator or clear.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from calcpanel.models import OPERATOR_SYMBOLS, Operator


class ButtonKind(str, Enum):
    """What a button click does."""

    DIGIT = "digit"
    DECIMAL = "decimal"
    OPERATOR = "operator"
    CLEAR = "clear"


class InvalidButtonError(ValueError):
    """A token that names no button on the panel."""


@dataclass(frozen=True)
class Button:
    """A single button on the panel."""

    kind: ButtonKind
    value: Optional[str] = None

    @property
    def label(self) -> str:
        if self.kind is ButtonKind.DIGIT:
            return self.value or ""
        if self.kind is ButtonKind.OPERATOR:
            return Operator(self.value).symbol
        if self.kind is ButtonKind.DECIMAL:
            return "."
        return "C"


DECIMAL_BUTTON = Button(ButtonKind.DECIMAL)
CLEAR_BUTTON = Button(ButtonKind.CLEAR)

_DIGIT_IDS: dict[str, str] = {
    "zero": "0",
    "one": "1",
    "two": "2",
    "three": "3",
    "four": "4",
    "five": "5",
    "six": "6",
    "seven": "7",
    "eight": "8",
    "nine": "9",
}

# element id -> Button, in panel order
BUTTON_LAYOUT: dict[str, Button] = {
    **{eid: Button(ButtonKind.DIGIT, d) for eid, d in _DIGIT_IDS.items()},
    "calc-dec": DECIMAL_BUTTON,
    **{op.value: Button(ButtonKind.OPERATOR, op.value) for op in Operator},
    "calc-clear": CLEAR_BUTTON,
}

_DECIMAL_TOKENS = frozenset({".", "dec", "decimal", "calc-dec"})
_CLEAR_TOKENS = frozenset({"c", "ac", "clear", "calc-clear"})


def parse_button(token: str) -> Button:
    """Resolve a typed token or element id to a Button.

    Accepts digits ("7"), element ids ("seven", "mult", "calc-dec"),
    operator symbols ("+", "=", "-", "*", "x", "/"), "." and "c"/"clear".
    Case-insensitive.

    Raises:
        InvalidButtonError: token names no button.
    """
    key = token.strip().lower()
    if not key:
        raise InvalidButtonError("Empty button token")

    if key in _DIGIT_IDS.values():
        return Button(ButtonKind.DIGIT, key)
    if key in _DIGIT_IDS:
        return Button(ButtonKind.DIGIT, _DIGIT_IDS[key])
    if key in _DECIMAL_TOKENS:
        return DECIMAL_BUTTON
    if key in _CLEAR_TOKENS:
        return CLEAR_BUTTON

    try:
        op = Operator.parse(key)
    except ValueError:
        raise InvalidButtonError(f"Unknown button: {token!r}") from None
    return Button(ButtonKind.OPERATOR, op.value)


def parse_buttons(tokens: list[str]) -> list[Button]:
    """Parse every token up front so a bad one rejects the whole sequence."""
    return [parse_button(t) for t in tokens]


def accepted_tokens(element_id: str) -> list[str]:
    """Every token parse_button maps to the same button as element_id."""
    button = BUTTON_LAYOUT[element_id]
    if button.kind is ButtonKind.DIGIT:
        return [button.value or "", element_id]
    if button.kind is ButtonKind.DECIMAL:
        return sorted(_DECIMAL_TOKENS)
    if button.kind is ButtonKind.CLEAR:
        return sorted(_CLEAR_TOKENS)
    symbols = sorted(s for s, op in OPERATOR_SYMBOLS.items() if op.value == element_id)
    return symbols + [element_id]
