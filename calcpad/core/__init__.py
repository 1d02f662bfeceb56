"""Operator model and the default calculation engine."""

from calcpad.core.engine import CalculatorEngine, CalculatorEngineProtocol
from calcpad.core.operators import CalculatorOperator

__all__ = ["CalculatorEngine", "CalculatorEngineProtocol", "CalculatorOperator"]
