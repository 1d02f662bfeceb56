"""Frontend-independent keypad layout."""

from calcpad.ui.keypad import FOOTER_BUTTONS, KEYPAD_BUTTONS, KEYPAD_COLUMNS, KeypadButton

__all__ = ["FOOTER_BUTTONS", "KEYPAD_BUTTONS", "KEYPAD_COLUMNS", "KeypadButton"]
