"""Demo routine and built-in self-check.

``run_demo`` drives each calculator variant through a short scripted
sequence and returns the outcome as a ``DemoReport``. ``run_self_check``
runs a handful of named sanity checks against the arithmetic model.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Any, Callable

from samplecalc.config import get_config
from samplecalc.core.calculator import (
    AdvancedCalculator,
    Calculator,
    ScientificCalculator,
    calculate_product,
    calculate_sum,
)
from samplecalc.exceptions import InvalidArgumentError, SelfCheckError

logger = logging.getLogger(__name__)


@dataclass
class DemoReport:
    """Outcome of ``run_demo``.

    Attributes:
        result: Final value of the base calculator.
        scientific_value: Accumulator of the scientific calculator.
        scientific_memory: Memory register of the scientific calculator.
        advanced_value: Accumulator of the advanced calculator.
        history: Operation log of the advanced calculator.
    """

    result: int
    scientific_value: int
    scientific_memory: int
    advanced_value: int
    history: list[str] = field(default_factory=list)

    def as_dict(self) -> dict[str, Any]:
        """Return the report as a JSON-serializable dictionary."""
        return {
            "result": self.result,
            "scientific_value": self.scientific_value,
            "scientific_memory": self.scientific_memory,
            "advanced_value": self.advanced_value,
            "history": list(self.history),
        }


def run_demo() -> DemoReport:
    """Main routine demonstrating calculator usage."""
    calc = Calculator(10)
    calc.add(5).multiply(2)

    sci_calc = ScientificCalculator(100)
    sci_calc.add(50).store_memory()

    adv_calc = AdvancedCalculator(200)
    adv_calc.add(100)

    report = DemoReport(
        result=calc.get_value(),
        scientific_value=sci_calc.get_value(),
        scientific_memory=sci_calc.recall_memory(),
        advanced_value=adv_calc.get_value(),
        history=adv_calc.get_history(),
    )
    logger.debug("Demo finished: %s", report)
    return report


def _check_add() -> bool:
    return Calculator().add(1).get_value() == 1


def _check_chain() -> bool:
    return Calculator(10).add(5).multiply(2).get_value() == 30


def _check_divide_by_zero() -> bool:
    calc = Calculator(7)
    try:
        calc.divide(0)
    except InvalidArgumentError:
        return calc.get_value() == 7
    return False


def _check_memory_reset() -> bool:
    sci = ScientificCalculator(9).store_memory()
    return sci.reset().recall_memory() == 0 and sci.get_value() == 0


def _check_square_root() -> bool:
    return math.isclose(ScientificCalculator(16).compute_square_root(), 4.0)


def _check_history() -> bool:
    adv = AdvancedCalculator(200).add(100)
    history = adv.get_history()
    history.append("tampered")
    return adv.get_history() == ["add 100"]


def _check_folds() -> bool:
    return (
        calculate_sum([1, 2, 3], 0) == 6
        and calculate_product([2, 3, 4], 1) == 24
    )


def _check_config() -> bool:
    """Load the process-wide config; an invalid environment raises ConfigError."""
    get_config().validate()
    return True


# Ordered so the simplest failure is reported first.
SELF_CHECKS: tuple[tuple[str, Callable[[], bool]], ...] = (
    ("add", _check_add),
    ("chain", _check_chain),
    ("divide_by_zero", _check_divide_by_zero),
    ("memory_reset", _check_memory_reset),
    ("square_root", _check_square_root),
    ("history", _check_history),
    ("folds", _check_folds),
    ("config", _check_config),
)


def run_self_check() -> list[str]:
    """Run basic sanity checks.

    Returns:
        Names of the checks that passed, in order.

    Raises:
        SelfCheckError: On the first failing check.
        ConfigError: If the environment holds an invalid SAMPLECALC_* value.
    """
    passed: list[str] = []
    for name, check in SELF_CHECKS:
        if not check():
            raise SelfCheckError(name, "unexpected result")
        passed.append(name)
    logger.debug("Self-check passed: %s", ", ".join(passed))
    return passed
