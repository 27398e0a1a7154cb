"""Data models for the calcpanel calculator.

Operator enum, Mode tag and the four state variants: TypingOne, AwaitingTwo,
TypingTwo, ShowingResult. Each variant carries only the fields its mode
needs, so a state with a result but no operator cannot be built.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


class Operator(str, Enum):
    """The closed set of operator buttons.

    Values are the element ids of the HTML button panel.
    """

    ADD_EQUALS = "add-equals"
    SUBTRACT = "sub"
    MULTIPLY = "mult"
    DIVIDE = "div"

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self]

    @classmethod
    def parse(cls, token: str) -> Operator:
        """Resolve an operator from its id or its symbol.

        Args:
            token: Element id ("sub") or symbol ("-"). "+" and "=" both
                name ADD_EQUALS.

        Raises:
            ValueError: token is not one of the four operators.
        """
        if isinstance(token, cls):
            return token
        key = str(token).strip().lower()
        if key in OPERATOR_SYMBOLS:
            return OPERATOR_SYMBOLS[key]
        try:
            return cls(key)
        except ValueError:
            raise ValueError(f"Unknown operator: {token!r}") from None


_SYMBOLS: dict[Operator, str] = {
    Operator.ADD_EQUALS: "+/=",
    Operator.SUBTRACT: "-",
    Operator.MULTIPLY: "*",
    Operator.DIVIDE: "/",
}

OPERATOR_SYMBOLS: dict[str, Operator] = {
    "+": Operator.ADD_EQUALS,
    "=": Operator.ADD_EQUALS,
    "+/=": Operator.ADD_EQUALS,
    "-": Operator.SUBTRACT,
    "*": Operator.MULTIPLY,
    "x": Operator.MULTIPLY,
    "/": Operator.DIVIDE,
}


class Mode(str, Enum):
    """Which part of a calculation the panel is on."""

    TYPING_ONE = "typing-one"
    AWAITING_TWO = "awaiting-two"
    TYPING_TWO = "typing-two"
    SHOWING_RESULT = "showing-result"


@dataclass(frozen=True)
class TypingOne:
    """No operator yet; digits go into operand one."""

    operand_one: str = "0"

    @property
    def mode(self) -> Mode:
        return Mode.TYPING_ONE

    @property
    def display(self) -> str:
        return self.operand_one


@dataclass(frozen=True)
class AwaitingTwo:
    """Operator armed, nothing typed for operand two yet."""

    operand_one: str
    operation: Operator

    @property
    def mode(self) -> Mode:
        return Mode.AWAITING_TWO

    @property
    def display(self) -> str:
        # Panel still shows whatever became operand one.
        return self.operand_one


@dataclass(frozen=True)
class TypingTwo:
    """Operator armed and operand two has at least one character."""

    operand_one: str
    operation: Operator
    operand_two: str

    @property
    def mode(self) -> Mode:
        return Mode.TYPING_TWO

    @property
    def display(self) -> str:
        return self.operand_two


@dataclass(frozen=True)
class ShowingResult:
    """A finished computation is on the panel.

    Keeps the operands that produced it so the result can be traced back.
    """

    operand_one: str
    operation: Operator
    operand_two: str
    result: str

    @property
    def mode(self) -> Mode:
        return Mode.SHOWING_RESULT

    @property
    def display(self) -> str:
        return self.result


CalculatorState = Union[TypingOne, AwaitingTwo, TypingTwo, ShowingResult]

INITIAL_STATE: CalculatorState = TypingOne("0")
