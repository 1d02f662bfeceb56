"""Frontend factory and selection boundary."""

from __future__ import annotations

from calcpad.app.controller import CalculatorController
from calcpad.app.frontend import FrontendBundle

SUPPORTED_FRONTENDS = frozenset({"qt", "pyqt", "pyqt6"})


def create_frontend(controller: CalculatorController, frontend: str = "qt") -> FrontendBundle:
    """Create the configured frontend bundle."""
    name = frontend.strip().lower()
    if name not in SUPPORTED_FRONTENDS:
        raise ValueError(f"Unsupported frontend '{frontend}'.")
    from calcpad.qt.bootstrap import create_qt_frontend

    return create_qt_frontend(controller)
