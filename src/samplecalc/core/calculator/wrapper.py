"""Composition base for the calculator variants.

``CalculatorWrapper`` holds a ``Calculator`` and forwards the base
operations to it. Variants subclass the wrapper and override only the
operations they extend, calling the wrapped unit first and then doing
their own bookkeeping.
"""

from __future__ import annotations

from typing import Optional

from .accumulator import Calculator


class CalculatorWrapper:
    """Forwards the base arithmetic operations to a wrapped Calculator.

    Args:
        initial_value: Seed for a fresh Calculator when *unit* is None.
        unit: An existing Calculator to wrap. When given, *initial_value*
            is ignored and the wrapper shares the unit's accumulator.
    """

    def __init__(
        self, initial_value: int = 0, *, unit: Optional[Calculator] = None
    ) -> None:
        self._unit = unit if unit is not None else Calculator(initial_value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._unit.get_value()})"

    @property
    def unit(self) -> Calculator:
        """The wrapped base calculator."""
        return self._unit

    def add(self, n: int) -> CalculatorWrapper:
        """Add a number to the wrapped value."""
        self._unit.add(n)
        return self

    def subtract(self, n: int) -> CalculatorWrapper:
        """Subtract a number from the wrapped value."""
        self._unit.subtract(n)
        return self

    def multiply(self, n: int) -> CalculatorWrapper:
        """Multiply the wrapped value by a number."""
        self._unit.multiply(n)
        return self

    def divide(self, n: int) -> float:
        """Divide the wrapped value by a number without changing it."""
        return self._unit.divide(n)

    def get_value(self) -> int:
        """Get the wrapped value."""
        return self._unit.get_value()

    def reset(self) -> CalculatorWrapper:
        """Reset the wrapped value to zero."""
        self._unit.reset()
        return self
