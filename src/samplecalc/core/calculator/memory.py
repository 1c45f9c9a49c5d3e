"""Scientific calculator: a memory register and square root."""

from __future__ import annotations

import logging
import math
from typing import Optional

from samplecalc.config import CalculatorConfig, SqrtPolicy, get_config
from samplecalc.exceptions import DomainError

from .accumulator import Calculator
from .wrapper import CalculatorWrapper

logger = logging.getLogger(__name__)


class ScientificCalculator(CalculatorWrapper):
    """A calculator with memory functionality.

    The memory register is independent of the accumulator: ``reset`` on the
    wrapped unit leaves it alone, while ``ScientificCalculator.reset`` clears
    both.

    Args:
        initial_value: Seed for a fresh Calculator when *unit* is None.
        unit: An existing Calculator to wrap.
        config: Configuration supplying the negative square root policy.
            Defaults to the process-wide config at call time.
    """

    def __init__(
        self,
        initial_value: int = 0,
        *,
        unit: Optional[Calculator] = None,
        config: Optional[CalculatorConfig] = None,
    ) -> None:
        super().__init__(initial_value, unit=unit)
        self._memory = 0
        self._config = config

    def store_memory(self) -> ScientificCalculator:
        """Store current value in memory."""
        self._memory = self.get_value()
        return self

    def recall_memory(self) -> int:
        """Recall value from memory."""
        return self._memory

    def clear_memory(self) -> ScientificCalculator:
        """Clear the memory."""
        self._memory = 0
        return self

    def reset(self) -> ScientificCalculator:
        """Reset calculator and memory."""
        super().reset()
        self.clear_memory()
        return self

    def compute_square_root(self) -> float:
        """Compute square root of current value.

        Raises:
            DomainError: If the value is negative and the policy is
                ``SqrtPolicy.RAISE``.
        """
        value = self.get_value()
        if value < 0:
            config = self._config or get_config()
            if config.sqrt_policy is SqrtPolicy.NAN:
                logger.warning("Square root of negative value %d; returning NaN", value)
                return math.nan
            raise DomainError(f"Square root of negative number: {value}")
        return math.sqrt(value)
