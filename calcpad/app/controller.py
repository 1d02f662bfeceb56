"""Calculator controller reconciling keypad and keyboard input."""

from __future__ import annotations

from collections.abc import Callable
import logging
import os

from calcpad.app.events import ButtonPressed, KeyPressed
from calcpad.app.key_routing import KeyAction, KeyActionKind, map_key_name, resolve_button
from calcpad.app.state_machine import CalculatorState
from calcpad.app.ui_state import CalculatorUIState
from calcpad.core.engine import CalculatorEngine, CalculatorEngineProtocol
from calcpad.core.operators import CalculatorOperator

OnCommit = Callable[[float], None]
OnCancel = Callable[[], None]

logger = logging.getLogger(__name__)


class CalculatorController:
    """Dispatches value and operator actions to one engine and owns widget state.

    Every action runs to completion before the next one is accepted; the engine
    is never invoked reentrantly and belongs to this controller alone.
    """

    def __init__(
        self,
        engine: CalculatorEngineProtocol | None = None,
        *,
        initial_value: float | None = None,
        result_icon: str | None = None,
        on_ok: OnCommit | None = None,
        on_cancel: OnCancel | None = None,
        request_focus: Callable[[], None] | None = None,
        debug_input: bool | None = None,
    ) -> None:
        self._engine: CalculatorEngineProtocol = engine if engine is not None else CalculatorEngine()
        self._result_icon = result_icon
        self._on_ok = on_ok
        self._on_cancel = on_cancel
        self._request_focus = request_focus
        if debug_input is None:
            debug_input = os.getenv("CALCPAD_DEBUG_INPUT", "0") == "1"
        self._debug_input = debug_input

        self._state = CalculatorState.IDLE
        self._display_value = "0"
        if initial_value:
            self._display_value = self._engine.process_value(str(initial_value))

    @property
    def engine(self) -> CalculatorEngineProtocol:
        return self._engine

    @property
    def display_value(self) -> str:
        return self._display_value

    @property
    def state(self) -> CalculatorState:
        return self._state

    @property
    def result_finalized(self) -> bool:
        return self._state is CalculatorState.RESULT_SHOWN

    def ui_state(self) -> CalculatorUIState:
        """Return current view-ready state."""
        return CalculatorUIState(
            display_value=self._display_value,
            state=self._state,
            result_icon=self._result_icon,
        )

    def set_focus_handler(self, request_focus: Callable[[], None] | None) -> None:
        """Attach the frontend hook that returns keyboard focus to the widget."""
        self._request_focus = request_focus

    def mount(self) -> None:
        """Acquire input focus once the frontend has shown the widget."""
        self._focus()

    def submit_value(self, key_char: str) -> None:
        """Forward a digit or decimal point to the engine."""
        self._display_value = self._engine.process_value(key_char)
        self._focus()

    def submit_operator(self, operator: CalculatorOperator) -> None:
        """Forward an operator to the engine, promoting Clear after a finalized result."""
        if operator is CalculatorOperator.CLEAR and self._state is CalculatorState.RESULT_SHOWN:
            logger.debug("calculator_clear_promoted to=%s", CalculatorOperator.CLEAR_ALL.value)
            operator = CalculatorOperator.CLEAR_ALL

        self._display_value = self._engine.process_operator(operator)
        self._focus()

        if operator is CalculatorOperator.EQUALS:
            self._state = CalculatorState.RESULT_SHOWN
        elif operator is CalculatorOperator.CLEAR_ALL:
            self._state = CalculatorState.IDLE

    def commit(self) -> None:
        """Deliver the engine result to the host, then reset."""
        value = self._engine.result
        logger.info("calculator_commit value=%s has_callback=%s", value, self._on_ok is not None)
        if self._on_ok is not None:
            self._on_ok(value)
        self._reset()

    def cancel(self) -> None:
        """Notify the host of cancellation, then reset."""
        logger.info("calculator_cancel has_callback=%s", self._on_cancel is not None)
        if self._on_cancel is not None:
            self._on_cancel()
        self._reset()

    def handle_key(self, event: KeyPressed) -> bool:
        """Route a key-down event. Return whether the key was handled."""
        action = map_key_name(event.key)
        if self._debug_input:
            logger.debug("calculator_key key=%r action=%s", event.key, action)
        if action is None:
            return False
        self._dispatch(action)
        return True

    def handle_button(self, event: ButtonPressed) -> bool:
        """Route a keypad button press. Return whether the button id was known."""
        action = resolve_button(event.button_id)
        if action is None:
            logger.warning("calculator_unknown_button id=%s", event.button_id)
            return False
        self._dispatch(action)
        return True

    def _dispatch(self, action: KeyAction) -> None:
        if action.kind is KeyActionKind.VALUE and action.value is not None:
            self.submit_value(action.value)
        elif action.kind is KeyActionKind.OPERATOR and action.operator is not None:
            self.submit_operator(action.operator)
        elif action.kind is KeyActionKind.CANCEL:
            self.cancel()
        elif action.kind is KeyActionKind.COMMIT:
            self.commit()
        elif action.kind is KeyActionKind.ENTER:
            if self._state is not CalculatorState.RESULT_SHOWN:
                self.submit_operator(CalculatorOperator.EQUALS)
            self.commit()

    def _reset(self) -> None:
        self._engine.clear_all()
        self._state = CalculatorState.IDLE
        self._display_value = self._engine.display_value

    def _focus(self) -> None:
        if self._request_focus is not None:
            self._request_focus()
