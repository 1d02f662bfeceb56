"""Typed UI state exposed by the controller."""

from __future__ import annotations

from dataclasses import dataclass

from calcpad.app.state_machine import CalculatorState


@dataclass(frozen=True, slots=True)
class CalculatorUIState:
    """View-ready state snapshot."""

    display_value: str
    state: CalculatorState
    result_icon: str | None = None

    @property
    def result_finalized(self) -> bool:
        return self.state is CalculatorState.RESULT_SHOWN
