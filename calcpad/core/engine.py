"""Default immediate-execution calculation engine."""

from __future__ import annotations

import logging
from decimal import Decimal, DivisionByZero, InvalidOperation, Overflow, localcontext
from typing import Protocol

from calcpad.core.operators import ARITHMETIC_OPERATORS, CalculatorOperator

logger = logging.getLogger(__name__)

ERROR_DISPLAY = "Error"
MAX_DIGITS = 15


class CalculatorEngineProtocol(Protocol):
    """Computation contract consumed by the calculator controller."""

    @property
    def result(self) -> float:
        """Current numeric value."""

    @property
    def display_value(self) -> str:
        """Current display text."""

    def process_value(self, key_char: str) -> str:
        """Apply a digit or decimal point and return the display text."""

    def process_operator(self, operator: CalculatorOperator) -> str:
        """Apply an operator and return the display text."""

    def clear_all(self) -> None:
        """Reset entry, accumulator and pending operator."""


class CalculatorEngine:
    """Decimal calculator evaluating chained operators left to right.

    The engine never raises for keypad input. Division by zero and results wider
    than ``MAX_DIGITS`` switch it into an error display that the next value or
    ``CLEAR_ALL`` leaves.
    """

    def __init__(self) -> None:
        self._entry = "0"
        self._accumulator: Decimal | None = None
        self._pending: CalculatorOperator | None = None
        self._new_entry = False
        self._error = False

    @property
    def display_value(self) -> str:
        return ERROR_DISPLAY if self._error else self._entry

    @property
    def result(self) -> float:
        if self._error:
            return 0.0
        return float(Decimal(self._entry))

    def clear_all(self) -> None:
        self._entry = "0"
        self._accumulator = None
        self._pending = None
        self._new_entry = False
        self._error = False

    def process_value(self, key_char: str) -> str:
        """Apply one keypad character, or load a whole numeric string as a fresh entry."""
        if len(key_char) > 1:
            self._load_entry(key_char)
        elif key_char:
            self._append_char(key_char)
        return self.display_value

    def process_operator(self, operator: CalculatorOperator) -> str:
        if operator is CalculatorOperator.CLEAR_ALL:
            self.clear_all()
            return self.display_value
        if self._error:
            return self.display_value

        if operator is CalculatorOperator.CLEAR:
            self._entry = "0"
            self._new_entry = False
        elif operator is CalculatorOperator.BACKSPACE:
            self._backspace()
        elif operator is CalculatorOperator.DECIMAL:
            self._append_char(".")
        elif operator is CalculatorOperator.NEG_POS:
            self._negate()
        elif operator in ARITHMETIC_OPERATORS:
            self._set_pending(operator)
        elif operator is CalculatorOperator.EQUALS:
            self._equals()
        return self.display_value

    def _append_char(self, char: str) -> None:
        if self._error:
            self.clear_all()
        if self._new_entry:
            self._entry = "0"
            self._new_entry = False

        if char == ".":
            if "." not in self._entry:
                self._entry += "."
            return
        if char not in "0123456789":
            logger.debug("engine_value_ignored char=%r", char)
            return
        if self._entry in {"0", "-0"}:
            self._entry = self._entry[:-1] + char
            return
        if _digit_count(self._entry) >= MAX_DIGITS:
            return
        self._entry += char

    def _load_entry(self, text: str) -> None:
        self.clear_all()
        try:
            with localcontext() as ctx:
                ctx.prec = MAX_DIGITS
                self._entry = _format_decimal(ctx.create_decimal(text.strip()))
        except (InvalidOperation, Overflow):
            self._set_error(f"invalid value {text!r}")
            return
        self._new_entry = True

    def _backspace(self) -> None:
        if self._new_entry and self._pending is not None:
            return
        self._new_entry = False
        entry = self._entry[:-1]
        if entry in {"", "-", "-0"}:
            entry = "0"
        self._entry = entry

    def _negate(self) -> None:
        if self._entry.startswith("-"):
            self._entry = self._entry[1:]
        elif self._entry != "0":
            self._entry = "-" + self._entry
        if self._pending is not None:
            self._new_entry = False

    def _set_pending(self, operator: CalculatorOperator) -> None:
        if self._pending is None:
            self._accumulator = Decimal(self._entry)
        elif not self._new_entry:
            if not self._evaluate():
                return
            self._accumulator = Decimal(self._entry)
        self._pending = operator
        self._new_entry = True

    def _equals(self) -> None:
        if self._pending is not None:
            if not self._evaluate():
                return
        self._accumulator = None
        self._pending = None
        self._new_entry = True

    def _evaluate(self) -> bool:
        left = self._accumulator if self._accumulator is not None else Decimal(0)
        right = Decimal(self._entry)
        try:
            with localcontext() as ctx:
                ctx.prec = MAX_DIGITS
                value = _apply(left, right, self._pending)
                self._entry = _format_decimal(value)
        except (DivisionByZero, InvalidOperation, Overflow):
            self._set_error(f"{left} {self._pending.value if self._pending else '?'} {right}")
            return False
        return True

    def _set_error(self, reason: str) -> None:
        logger.debug("engine_error reason=%s", reason)
        self._error = True
        self._entry = "0"
        self._accumulator = None
        self._pending = None
        self._new_entry = False


def _apply(left: Decimal, right: Decimal, operator: CalculatorOperator | None) -> Decimal:
    if operator is CalculatorOperator.ADD:
        return left + right
    if operator is CalculatorOperator.SUBTRACT:
        return left - right
    if operator is CalculatorOperator.MULTIPLY:
        return left * right
    if operator is CalculatorOperator.DIVIDE:
        return left / right
    return right


def _format_decimal(value: Decimal) -> str:
    if not value.is_finite():
        raise InvalidOperation
    if value.is_zero():
        return "0"
    if value.adjusted() >= MAX_DIGITS:
        raise Overflow
    text = format(value.normalize(), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def _digit_count(entry: str) -> int:
    return sum(1 for char in entry if char.isdigit())
