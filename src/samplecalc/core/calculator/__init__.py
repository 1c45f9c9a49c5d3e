"""Sample arithmetic model.

Submodules:
    accumulator  -- ArithmeticUnit protocol and the base Calculator
    wrapper      -- CalculatorWrapper, the composition base for variants
    memory       -- ScientificCalculator (memory register, square root)
    history      -- AdvancedCalculator (operation log)
    aggregate    -- calculate_sum, calculate_product

All public names are re-exported here, so callers can write
``from samplecalc.core.calculator import Calculator``.
"""

from __future__ import annotations

from samplecalc.core.calculator.accumulator import ArithmeticUnit, Calculator
from samplecalc.core.calculator.wrapper import CalculatorWrapper
from samplecalc.core.calculator.memory import ScientificCalculator
from samplecalc.core.calculator.history import AdvancedCalculator
from samplecalc.core.calculator.aggregate import calculate_product, calculate_sum

__all__ = [
    "AdvancedCalculator",
    "ArithmeticUnit",
    "Calculator",
    "CalculatorWrapper",
    "ScientificCalculator",
    "calculate_product",
    "calculate_sum",
]
