"""Qt calculator widget: display, keypad grid and OK/Cancel buttons."""

from __future__ import annotations

import logging

from calcpad.app.controller import CalculatorController
from calcpad.app.events import ButtonPressed, KeyPressed
from calcpad.ui.keypad import FOOTER_BUTTONS, KEYPAD_BUTTONS, KeypadButton

try:
    from PyQt6.QtCore import Qt
    from PyQt6.QtGui import QIcon, QKeyEvent
    from PyQt6.QtWidgets import QGridLayout, QHBoxLayout, QLabel, QLineEdit, QPushButton, QVBoxLayout, QWidget
except Exception as exc:  # pragma: no cover
    raise RuntimeError("PyQt6 is required for the UI. Install dependency 'PyQt6'.") from exc

logger = logging.getLogger(__name__)

_NAMED_KEYS = {
    Qt.Key.Key_Return.value: "Enter",
    Qt.Key.Key_Enter.value: "Enter",
    Qt.Key.Key_Escape.value: "Escape",
    Qt.Key.Key_Backspace.value: "Backspace",
    Qt.Key.Key_Clear.value: "Clear",
}


def qt_key_name(event: QKeyEvent) -> str | None:
    """Translate a Qt key event to the key names understood by the key router."""
    named = _NAMED_KEYS.get(event.key())
    if named is not None:
        return named
    text = event.text()
    if len(text) == 1 and text.isprintable():
        return text
    return None


class CalculatorWidget(QWidget):
    def __init__(self, controller: CalculatorController) -> None:
        super().__init__()
        self._controller = controller
        self._mounted = False
        self.setObjectName("calculator")
        self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)
        controller.set_focus_handler(self.setFocus)

        root = QVBoxLayout(self)
        root.setContentsMargins(12, 12, 12, 12)
        root.setSpacing(8)

        top = QHBoxLayout()
        self._display = QLineEdit()
        self._display.setReadOnly(True)
        self._display.setFocusPolicy(Qt.FocusPolicy.NoFocus)
        self._display.setAlignment(Qt.AlignmentFlag.AlignRight)
        self._display.setObjectName("display")
        icon_label = self._build_icon_label(controller.ui_state().result_icon)
        if icon_label is not None:
            top.addWidget(icon_label)
        top.addWidget(self._display, 1)
        root.addLayout(top)

        grid = QGridLayout()
        grid.setSpacing(6)
        for cell in KEYPAD_BUTTONS:
            grid.addWidget(self._build_button(cell), cell.row, cell.col)
        root.addLayout(grid)

        footer = QHBoxLayout()
        for cell in FOOTER_BUTTONS:
            footer.addWidget(self._build_button(cell))
        root.addLayout(footer)

        self.sync_ui()

    def sync_ui(self) -> None:
        ui = self._controller.ui_state()
        self._display.setText(ui.display_value)

    def showEvent(self, event) -> None:  # type: ignore[override]
        super().showEvent(event)
        if not self._mounted:
            self._mounted = True
            self._controller.mount()

    def keyPressEvent(self, event) -> None:  # type: ignore[override]
        key_name = qt_key_name(event)
        if key_name is not None and self._controller.handle_key(KeyPressed(key_name)):
            self.sync_ui()
            event.accept()
            return
        super().keyPressEvent(event)

    def _click_button(self, button_id: str) -> None:
        if self._controller.handle_button(ButtonPressed(button_id)):
            self.sync_ui()

    def _build_button(self, cell: KeypadButton) -> QPushButton:
        button = QPushButton(cell.label)
        button.setMinimumHeight(48)
        button.setCursor(Qt.CursorShape.PointingHandCursor)
        button.setObjectName(f"key_{cell.id}")
        if cell.is_operator:
            button.setProperty("operator", True)
        if cell.large_font:
            button.setProperty("large", True)
        button.clicked.connect(lambda checked=False, button_id=cell.id: self._click_button(button_id))
        return button

    @staticmethod
    def _build_icon_label(result_icon: str | None) -> QLabel | None:
        if not result_icon:
            return None
        label = QLabel()
        icon = QIcon.fromTheme(result_icon)
        if icon.isNull():
            icon = QIcon(result_icon)
        if icon.isNull():
            logger.warning("calculator_result_icon_missing icon=%s", result_icon)
            label.setText(result_icon)
        else:
            label.setPixmap(icon.pixmap(24, 24))
        return label
