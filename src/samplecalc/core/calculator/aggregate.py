"""Fold helpers built on a fresh Calculator."""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from samplecalc.config import CalculatorConfig, get_config

from .accumulator import Calculator

logger = logging.getLogger(__name__)


def calculate_sum(
    numbers: Iterable[int],
    initial: Optional[int] = None,
    *,
    config: Optional[CalculatorConfig] = None,
) -> int:
    """Calculate the sum of a sequence of numbers.

    Args:
        numbers: Integers added in order.
        initial: Starting value. Defaults to ``config.sum_seed`` (0).
        config: Configuration to read the seed from. Defaults to the
            process-wide config.

    Raises:
        InvalidOperandError: If the seed or any number is not an int.
    """
    if initial is None:
        initial = (config or get_config()).sum_seed
    calc = Calculator(initial)
    for num in numbers:
        calc.add(num)
    logger.debug("calculate_sum from %d -> %d", initial, calc.get_value())
    return calc.get_value()


def calculate_product(
    numbers: Iterable[int],
    initial: Optional[int] = None,
    *,
    config: Optional[CalculatorConfig] = None,
) -> int:
    """Calculate the product of a sequence of numbers.

    Args:
        numbers: Integers multiplied in order.
        initial: Starting value. Defaults to ``config.product_seed`` (1).
        config: Configuration to read the seed from. Defaults to the
            process-wide config.

    Raises:
        InvalidOperandError: If the seed or any number is not an int.
    """
    if initial is None:
        initial = (config or get_config()).product_seed
    calc = Calculator(initial)
    for num in numbers:
        calc.multiply(num)
    logger.debug("calculate_product from %d -> %d", initial, calc.get_value())
    return calc.get_value()
