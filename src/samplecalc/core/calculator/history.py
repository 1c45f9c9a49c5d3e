"""Advanced calculator: an append-only operation log."""

from __future__ import annotations

import logging
from typing import Optional

from .accumulator import Calculator
from .wrapper import CalculatorWrapper

logger = logging.getLogger(__name__)


class AdvancedCalculator(CalculatorWrapper):
    """A calculator with operation history.

    Only ``add`` and ``subtract`` are recorded. An operation that raises is
    not recorded.
    """

    def __init__(
        self, initial_value: int = 0, *, unit: Optional[Calculator] = None
    ) -> None:
        super().__init__(initial_value, unit=unit)
        self._history: list[str] = []

    def _log_operation(self, operation: str) -> None:
        """Log an operation to history."""
        logger.debug("%r: %s", self, operation)
        self._history.append(operation)

    def add(self, n: int) -> AdvancedCalculator:
        """Add and log the operation."""
        super().add(n)
        self._log_operation(f"add {n}")
        return self

    def subtract(self, n: int) -> AdvancedCalculator:
        """Subtract and log the operation."""
        super().subtract(n)
        self._log_operation(f"subtract {n}")
        return self

    def get_history(self) -> list[str]:
        """Get a copy of the operation history, oldest first."""
        return self._history.copy()
