from __future__ import annotations

import pytest

from calcpad.core.engine import ERROR_DISPLAY, MAX_DIGITS, CalculatorEngine
from calcpad.core.operators import CalculatorOperator as Op


def _run(engine: CalculatorEngine, *inputs: str | Op) -> str:
    display = engine.display_value
    for item in inputs:
        if isinstance(item, Op):
            display = engine.process_operator(item)
        else:
            for char in item:
                display = engine.process_value(char)
    return display


def test_engine_starts_at_zero() -> None:
    engine = CalculatorEngine()
    assert engine.display_value == "0"
    assert engine.result == 0


def test_engine_digits_replace_leading_zero() -> None:
    engine = CalculatorEngine()
    assert _run(engine, "0", "0", "7", "5") == "75"
    assert engine.result == 75


def test_engine_decimal_point_only_once() -> None:
    engine = CalculatorEngine()
    assert _run(engine, ".", "5", Op.DECIMAL, "2") == "0.52"
    assert engine.result == pytest.approx(0.52)


@pytest.mark.parametrize(
    ("inputs", "expected"),
    [
        (("7", Op.ADD, "3", Op.EQUALS), "10"),
        (("9", Op.SUBTRACT, "12", Op.EQUALS), "-3"),
        (("6", Op.MULTIPLY, "7", Op.EQUALS), "42"),
        (("1", Op.DIVIDE, "4", Op.EQUALS), "0.25"),
        (("2", Op.DIVIDE, "3", Op.EQUALS), "0.666666666666667"),
        (("1", Op.ADD, "2", Op.MULTIPLY, "4", Op.EQUALS), "12"),
        (("0.1", Op.ADD, "0.2", Op.EQUALS), "0.3"),
    ],
)
def test_engine_arithmetic(inputs: tuple[str | Op, ...], expected: str) -> None:
    assert _run(CalculatorEngine(), *inputs) == expected


def test_engine_chained_operator_shows_running_total() -> None:
    engine = CalculatorEngine()
    assert _run(engine, "5", Op.ADD, "4", Op.SUBTRACT) == "9"
    assert _run(engine, "2", Op.EQUALS) == "7"


def test_engine_repeated_operator_replaces_pending() -> None:
    engine = CalculatorEngine()
    assert _run(engine, "8", Op.ADD, Op.MULTIPLY, "2", Op.EQUALS) == "16"


def test_engine_value_after_equals_starts_new_entry() -> None:
    engine = CalculatorEngine()
    _run(engine, "2", Op.ADD, "2", Op.EQUALS)
    assert _run(engine, "5") == "5"
    assert _run(engine, Op.ADD, "1", Op.EQUALS) == "6"


def test_engine_operator_after_equals_continues_from_result() -> None:
    engine = CalculatorEngine()
    _run(engine, "3", Op.MULTIPLY, "3", Op.EQUALS)
    assert _run(engine, Op.SUBTRACT, "1", Op.EQUALS) == "8"


def test_engine_clear_resets_entry_only() -> None:
    engine = CalculatorEngine()
    assert _run(engine, "7", Op.ADD, "9", Op.CLEAR) == "0"
    assert _run(engine, "3", Op.EQUALS) == "10"


def test_engine_clear_all_resets_everything() -> None:
    engine = CalculatorEngine()
    assert _run(engine, "7", Op.ADD, "9", Op.CLEAR_ALL) == "0"
    assert _run(engine, "3", Op.EQUALS) == "3"


def test_engine_backspace_edits_entry() -> None:
    engine = CalculatorEngine()
    assert _run(engine, "1", "2", "3", Op.BACKSPACE) == "12"
    assert _run(engine, Op.BACKSPACE, Op.BACKSPACE) == "0"
    assert _run(engine, Op.BACKSPACE) == "0"


def test_engine_backspace_while_awaiting_operand_is_noop() -> None:
    engine = CalculatorEngine()
    assert _run(engine, "45", Op.ADD, Op.BACKSPACE) == "45"
    assert _run(engine, "1", Op.EQUALS) == "46"


def test_engine_backspace_after_equals_edits_result() -> None:
    engine = CalculatorEngine()
    _run(engine, "12", Op.MULTIPLY, "2", Op.EQUALS)
    assert _run(engine, Op.BACKSPACE) == "2"
    assert _run(engine, "5") == "25"


def test_engine_neg_pos_toggles_sign() -> None:
    engine = CalculatorEngine()
    assert _run(engine, Op.NEG_POS) == "0"
    assert _run(engine, "5", Op.NEG_POS) == "-5"
    assert engine.result == -5
    assert _run(engine, Op.NEG_POS) == "5"
    assert _run(engine, Op.NEG_POS, Op.BACKSPACE) == "0"


def test_engine_neg_pos_on_second_operand() -> None:
    engine = CalculatorEngine()
    assert _run(engine, "5", Op.ADD, "3", Op.NEG_POS, Op.EQUALS) == "2"


def test_engine_division_by_zero_enters_error_state() -> None:
    engine = CalculatorEngine()
    assert _run(engine, "4", Op.DIVIDE, "0", Op.EQUALS) == ERROR_DISPLAY
    assert engine.result == 0
    assert _run(engine, Op.ADD, Op.EQUALS) == ERROR_DISPLAY
    assert _run(engine, Op.CLEAR_ALL) == "0"


def test_engine_value_leaves_error_state() -> None:
    engine = CalculatorEngine()
    _run(engine, "0", Op.DIVIDE, "0", Op.EQUALS)
    assert engine.display_value == ERROR_DISPLAY
    assert _run(engine, "8") == "8"


def test_engine_entry_is_capped_at_max_digits() -> None:
    engine = CalculatorEngine()
    display = _run(engine, *(["9"] * (MAX_DIGITS + 3)))
    assert display == "9" * MAX_DIGITS


def test_engine_overflowing_result_is_an_error() -> None:
    engine = CalculatorEngine()
    big = "9" * MAX_DIGITS
    assert _run(engine, big, Op.MULTIPLY, big, Op.EQUALS) == ERROR_DISPLAY


@pytest.mark.parametrize(
    ("seed", "expected"),
    [("42", "42"), ("12.5", "12.5"), ("-3", "-3"), ("7.0", "7"), ("1e3", "1000")],
)
def test_engine_loads_multi_character_seed(seed: str, expected: str) -> None:
    engine = CalculatorEngine()
    assert engine.process_value(seed) == expected


def test_engine_seed_is_replaced_by_next_digit() -> None:
    engine = CalculatorEngine()
    engine.process_value("42")
    assert engine.process_value("1") == "1"


def test_engine_invalid_seed_is_an_error_not_an_exception() -> None:
    engine = CalculatorEngine()
    assert engine.process_value("abc") == ERROR_DISPLAY


def test_engine_ignores_characters_outside_alphabet() -> None:
    engine = CalculatorEngine()
    assert _run(engine, "1", "x", "2") == "12"
    assert engine.process_value("") == "12"
