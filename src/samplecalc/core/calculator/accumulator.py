"""Base arithmetic unit: a single integer accumulator.

``Calculator`` owns one ``int`` and exposes the six base operations. The
mutating operations return the calculator itself so calls can be chained::

    Calculator(10).add(5).multiply(2).get_value()  # 30

``ArithmeticUnit`` is the structural type every calculator variant
satisfies, so callers can accept any of them interchangeably.
"""

from __future__ import annotations

import logging
from typing import Any, Protocol, runtime_checkable

from samplecalc.exceptions import InvalidArgumentError, InvalidOperandError

logger = logging.getLogger(__name__)


def require_int(value: Any, name: str = "operand") -> int:
    """Return *value* unchanged if it is an ``int`` (``bool`` excluded).

    Raises:
        InvalidOperandError: If *value* is not an int.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidOperandError(
            f"{name} must be an int, got {type(value).__name__}"
        )
    return value


@runtime_checkable
class ArithmeticUnit(Protocol):
    """Capability set shared by every calculator variant."""

    def add(self, n: int) -> ArithmeticUnit: ...

    def subtract(self, n: int) -> ArithmeticUnit: ...

    def multiply(self, n: int) -> ArithmeticUnit: ...

    def divide(self, n: int) -> float: ...

    def get_value(self) -> int: ...

    def reset(self) -> ArithmeticUnit: ...


class Calculator:
    """A simple calculator holding one integer accumulator.

    Args:
        initial_value: Starting accumulator value. Default 0.

    Raises:
        InvalidOperandError: If *initial_value* is not an int.
    """

    def __init__(self, initial_value: int = 0) -> None:
        self._value = require_int(initial_value, "initial_value")

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value})"

    def add(self, n: int) -> Calculator:
        """Add a number to the current value."""
        self._value += require_int(n)
        return self

    def subtract(self, n: int) -> Calculator:
        """Subtract a number from the current value."""
        self._value -= require_int(n)
        return self

    def multiply(self, n: int) -> Calculator:
        """Multiply the current value by a number."""
        self._value *= require_int(n)
        return self

    def divide(self, n: int) -> float:
        """Divide the current value by a number without changing it.

        Returns:
            The true quotient as a float.

        Raises:
            InvalidArgumentError: If *n* is zero.
        """
        if require_int(n) == 0:
            raise InvalidArgumentError("Division by zero")
        return self._value / n

    def get_value(self) -> int:
        """Get the current value."""
        return self._value

    def reset(self) -> Calculator:
        """Reset the calculator to zero."""
        logger.debug("Resetting %r", self)
        self._value = 0
        return self
