from __future__ import annotations

import pytest

from calcpad.app.controller import CalculatorController
from calcpad.core.engine import CalculatorEngine
from calcpad.core.operators import CalculatorOperator


class RecordingEngine:
    """Real engine wrapper that records every call the controller makes."""

    def __init__(self) -> None:
        self._inner = CalculatorEngine()
        self.calls: list[tuple[str, object]] = []

    @property
    def result(self) -> float:
        return self._inner.result

    @property
    def display_value(self) -> str:
        return self._inner.display_value

    def process_value(self, key_char: str) -> str:
        self.calls.append(("value", key_char))
        return self._inner.process_value(key_char)

    def process_operator(self, operator: CalculatorOperator) -> str:
        self.calls.append(("operator", operator))
        return self._inner.process_operator(operator)

    def clear_all(self) -> None:
        self.calls.append(("clear_all", None))
        self._inner.clear_all()


class Callbacks:
    def __init__(self) -> None:
        self.committed: list[float] = []
        self.cancelled = 0
        self.focus_requests = 0

    def on_ok(self, value: float) -> None:
        self.committed.append(value)

    def on_cancel(self) -> None:
        self.cancelled += 1

    def request_focus(self) -> None:
        self.focus_requests += 1


@pytest.fixture
def engine() -> RecordingEngine:
    return RecordingEngine()


@pytest.fixture
def callbacks() -> Callbacks:
    return Callbacks()


@pytest.fixture
def controller_factory(engine: RecordingEngine, callbacks: Callbacks):
    def _make(initial_value: float | None = None, with_callbacks: bool = True) -> CalculatorController:
        if not with_callbacks:
            return CalculatorController(engine, initial_value=initial_value, debug_input=False)
        return CalculatorController(
            engine,
            initial_value=initial_value,
            on_ok=callbacks.on_ok,
            on_cancel=callbacks.on_cancel,
            request_focus=callbacks.request_focus,
            debug_input=False,
        )

    return _make
