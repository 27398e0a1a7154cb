"""Calculator controller. Owns the state and the display sink.

Each on_* handler runs one pure transition from calcpanel.engine and pushes
the new panel text to the display when the state changed. Clear always
writes "0".
"""

from __future__ import annotations

from typing import Optional

from calcpanel.buttons import Button, ButtonKind
from calcpanel.display import Display, RecordingDisplay
from calcpanel.engine import press_clear, press_decimal, press_digit, press_operator
from calcpanel.models import INITIAL_STATE, CalculatorState, Operator


class Calculator:
    """Four-function calculator driven by button clicks."""

    def __init__(self, display: Optional[Display] = None) -> None:
        self.display: Display = display if display is not None else RecordingDisplay()
        self._state: CalculatorState = INITIAL_STATE

    @property
    def state(self) -> CalculatorState:
        return self._state

    @property
    def display_text(self) -> str:
        return self._state.display

    def _apply(self, new_state: CalculatorState) -> None:
        if new_state == self._state:
            return
        self._state = new_state
        self.display.set_text(new_state.display)

    def on_digit(self, digit: str) -> None:
        self._apply(press_digit(self._state, digit))

    def on_decimal(self) -> None:
        self._apply(press_decimal(self._state))

    def on_operator(self, op: Operator | str) -> None:
        self._apply(press_operator(self._state, op))

    def on_clear(self) -> None:
        self._state = press_clear(self._state)
        self.display.set_text(self._state.display)

    def press(self, button: Button) -> None:
        """Dispatch one parsed button click."""
        if button.kind is ButtonKind.DIGIT:
            self.on_digit(button.value or "")
        elif button.kind is ButtonKind.DECIMAL:
            self.on_decimal()
        elif button.kind is ButtonKind.OPERATOR:
            self.on_operator(button.value or "")
        else:
            self.on_clear()
