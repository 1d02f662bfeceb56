"""Keypad button grid shared by every frontend."""

from __future__ import annotations

from dataclasses import dataclass

from calcpad.app.key_routing import CANCEL_BUTTON_ID, COMMIT_BUTTON_ID
from calcpad.core.operators import CalculatorOperator

KEYPAD_COLUMNS = 4


@dataclass(frozen=True, slots=True)
class KeypadButton:
    """One keypad cell. ``id`` is routed through ``resolve_button``."""

    id: str
    label: str
    row: int
    col: int
    is_operator: bool = False
    large_font: bool = False


def _value(key_char: str, row: int, col: int) -> KeypadButton:
    return KeypadButton(key_char, key_char, row, col)


def _operator(operator: CalculatorOperator, label: str, row: int, col: int, large_font: bool = True) -> KeypadButton:
    return KeypadButton(operator.value, label, row, col, is_operator=True, large_font=large_font)


KEYPAD_BUTTONS: tuple[KeypadButton, ...] = (
    _operator(CalculatorOperator.CLEAR_ALL, "AC", 0, 0, large_font=False),
    _operator(CalculatorOperator.CLEAR, "C", 0, 1, large_font=False),
    _operator(CalculatorOperator.BACKSPACE, "⌫", 0, 2, large_font=False),
    _operator(CalculatorOperator.DIVIDE, "÷", 0, 3),
    _value("7", 1, 0),
    _value("8", 1, 1),
    _value("9", 1, 2),
    _operator(CalculatorOperator.MULTIPLY, "×", 1, 3),
    _value("4", 2, 0),
    _value("5", 2, 1),
    _value("6", 2, 2),
    _operator(CalculatorOperator.SUBTRACT, "−", 2, 3),
    _value("1", 3, 0),
    _value("2", 3, 1),
    _value("3", 3, 2),
    _operator(CalculatorOperator.ADD, "+", 3, 3),
    _value("0", 4, 0),
    _operator(CalculatorOperator.NEG_POS, "±", 4, 1),
    _operator(CalculatorOperator.DECIMAL, ".", 4, 2),
    _operator(CalculatorOperator.EQUALS, "=", 4, 3),
)

FOOTER_BUTTONS: tuple[KeypadButton, ...] = (
    KeypadButton(CANCEL_BUTTON_ID, "Cancel", 0, 0),
    KeypadButton(COMMIT_BUTTON_ID, "OK", 0, 1),
)
