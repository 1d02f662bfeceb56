"""Top-level Qt window hosting the calculator widget."""

from __future__ import annotations

from calcpad.app.controller import CalculatorController
from calcpad.qt.widget import CalculatorWidget

try:
    from PyQt6.QtWidgets import QMainWindow
except Exception as exc:  # pragma: no cover
    raise RuntimeError("PyQt6 is required for the UI. Install dependency 'PyQt6'.") from exc


class MainWindow(QMainWindow):
    def __init__(self, controller: CalculatorController) -> None:
        super().__init__()
        self._calculator = CalculatorWidget(controller)
        self.setCentralWidget(self._calculator)
        self.setWindowTitle("Calculator")
        self.resize(320, 460)

    def sync_ui(self) -> None:
        self._calculator.sync_ui()


class QtFrontendWindow:
    """Adapter exposing the frontend window contract over a Qt main window."""

    def __init__(self, window: MainWindow) -> None:
        self._window = window

    def show_windowed(self) -> None:
        self._window.show()

    def sync_ui(self) -> None:
        self._window.sync_ui()
