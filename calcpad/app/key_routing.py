"""Keyboard and keypad mapping to calculator actions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from calcpad.core.operators import CalculatorOperator

DIGITS = "0123456789"

COMMIT_BUTTON_ID = "ok"
CANCEL_BUTTON_ID = "cancel"

_KEY_OPERATORS: dict[str, CalculatorOperator] = {
    "a": CalculatorOperator.CLEAR_ALL,
    "A": CalculatorOperator.CLEAR_ALL,
    "c": CalculatorOperator.CLEAR,
    "C": CalculatorOperator.CLEAR,
    "Clear": CalculatorOperator.CLEAR,
    "Backspace": CalculatorOperator.BACKSPACE,
    "/": CalculatorOperator.DIVIDE,
    "Divide": CalculatorOperator.DIVIDE,
    "*": CalculatorOperator.MULTIPLY,
    "Multiply": CalculatorOperator.MULTIPLY,
    "-": CalculatorOperator.SUBTRACT,
    "Subtract": CalculatorOperator.SUBTRACT,
    "+": CalculatorOperator.ADD,
    "Add": CalculatorOperator.ADD,
    ".": CalculatorOperator.DECIMAL,
    "Decimal": CalculatorOperator.DECIMAL,
    "=": CalculatorOperator.EQUALS,
}


class KeyActionKind(Enum):
    VALUE = auto()
    OPERATOR = auto()
    ENTER = auto()
    COMMIT = auto()
    CANCEL = auto()


@dataclass(frozen=True, slots=True)
class KeyAction:
    """Normalized calculator action produced by a key or keypad button."""

    kind: KeyActionKind
    value: str | None = None
    operator: CalculatorOperator | None = None


def map_key_name(key: str) -> KeyAction | None:
    """Map a key identifier to its calculator action.

    Key names are case sensitive and follow DOM ``KeyboardEvent.key`` naming
    (``"Enter"``, ``"Escape"``, ``"Backspace"``). Unknown keys map to ``None``.
    """
    if len(key) == 1 and key in DIGITS:
        return KeyAction(KeyActionKind.VALUE, value=key)
    operator = _KEY_OPERATORS.get(key)
    if operator is not None:
        return KeyAction(KeyActionKind.OPERATOR, operator=operator)
    if key == "Escape":
        return KeyAction(KeyActionKind.CANCEL)
    if key == "Enter":
        return KeyAction(KeyActionKind.ENTER)
    return None


def resolve_button(button_id: str) -> KeyAction | None:
    """Map a keypad button id to the same action its keyboard key produces."""
    if len(button_id) == 1 and button_id in DIGITS:
        return KeyAction(KeyActionKind.VALUE, value=button_id)
    if button_id == COMMIT_BUTTON_ID:
        return KeyAction(KeyActionKind.COMMIT)
    if button_id == CANCEL_BUTTON_ID:
        return KeyAction(KeyActionKind.CANCEL)
    try:
        operator = CalculatorOperator(button_id)
    except ValueError:
        return None
    return KeyAction(KeyActionKind.OPERATOR, operator=operator)
