"""Controller-visible calculator states."""

from enum import Enum, auto


class CalculatorState(Enum):
    """Interaction states of the calculator controller."""

    IDLE = auto()
    RESULT_SHOWN = auto()
