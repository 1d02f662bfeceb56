"""Qt frontend bootstrap and runtime wiring."""

from __future__ import annotations

from calcpad.app.controller import CalculatorController
from calcpad.app.frontend import FrontendBundle
from calcpad.qt.window import MainWindow, QtFrontendWindow

try:
    from PyQt6.QtWidgets import QApplication
except Exception as exc:  # pragma: no cover
    raise RuntimeError("PyQt6 is required for the UI. Install dependency 'PyQt6'.") from exc


def create_qt_frontend(controller: CalculatorController) -> FrontendBundle:
    """Build Qt window adapter and event-loop runner."""
    app = QApplication.instance() or QApplication([])
    app.setStyleSheet(
        """
        QWidget { font-size: 16px; }
        QLineEdit#display { font-size: 28px; padding: 6px 8px; }
        QPushButton { padding: 10px 16px; }
        QPushButton[operator="true"] { background: #1f2937; color: #e5e7eb; }
        QPushButton[large="true"] { font-size: 22px; }
        QPushButton#key_ok { background: #2563eb; color: #ffffff; }
        """
    )
    window = QtFrontendWindow(MainWindow(controller))
    return FrontendBundle(window=window, run_event_loop=lambda: app.exec())
