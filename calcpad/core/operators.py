"""Symbolic calculator operators shared by keypad, keyboard and engine."""

from __future__ import annotations

from enum import Enum


class CalculatorOperator(str, Enum):
    CLEAR_ALL = "clear_all"
    CLEAR = "clear"
    BACKSPACE = "backspace"
    DIVIDE = "divide"
    MULTIPLY = "multiply"
    SUBTRACT = "subtract"
    ADD = "add"
    DECIMAL = "decimal"
    EQUALS = "equals"
    NEG_POS = "neg_pos"


ARITHMETIC_OPERATORS = frozenset(
    {
        CalculatorOperator.DIVIDE,
        CalculatorOperator.MULTIPLY,
        CalculatorOperator.SUBTRACT,
        CalculatorOperator.ADD,
    }
)
