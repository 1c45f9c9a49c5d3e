"""``samplecalc run STEPS...`` -- Drive one calculator step by step.

Each step is ``name`` or ``name:operand``. Steps are applied in order to a
single calculator of the chosen variant, and the final state is printed.

Steps:
    add:N, subtract:N, multiply:N   -- any variant
    divide:N                        -- any variant, reports the quotient
    reset                           -- any variant
    store, recall, clear, sqrt      -- scientific only
    history                         -- advanced only, reports the log

Exit Codes:
    0 -- All steps applied.
    2 -- A step is malformed, unsupported by the variant, or failed.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

import click

from samplecalc.cli.common import dump_json, fail
from samplecalc.core.calculator import (
    AdvancedCalculator,
    ArithmeticUnit,
    Calculator,
    ScientificCalculator,
)
from samplecalc.exceptions import SampleCalcError

logger = logging.getLogger(__name__)

_OPERAND_STEPS = frozenset({"add", "subtract", "multiply", "divide"})
_BARE_STEPS = frozenset({"reset", "store", "recall", "clear", "sqrt", "history"})

# Steps that need a specific variant.
_VARIANT_ONLY: dict[str, str] = {
    "store": "scientific",
    "recall": "scientific",
    "clear": "scientific",
    "sqrt": "scientific",
    "history": "advanced",
}

_VARIANTS = ("basic", "scientific", "advanced")


@dataclass(frozen=True)
class Step:
    """One parsed ``run`` instruction."""

    name: str
    operand: Optional[int] = None

    def __str__(self) -> str:
        return self.name if self.operand is None else f"{self.name}:{self.operand}"


def parse_step(text: str) -> Step:
    """Parse ``name`` or ``name:operand`` into a Step.

    Raises:
        ValueError: If the name is unknown, the operand is missing where
            required, present where not allowed, or not an integer.
    """
    name, sep, raw = text.partition(":")
    name = name.strip().lower()
    if name in _OPERAND_STEPS:
        if not sep or not raw.strip():
            raise ValueError(f"step '{name}' needs an operand, e.g. {name}:5")
        try:
            return Step(name, int(raw))
        except ValueError:
            raise ValueError(f"operand of '{name}' must be an integer, got {raw!r}") from None
    if name in _BARE_STEPS:
        if sep:
            raise ValueError(f"step '{name}' takes no operand")
        return Step(name)
    raise ValueError(f"unknown step {text!r}")


def _parse_steps(ctx: click.Context, param: click.Parameter, value: tuple[str, ...]) -> list[Step]:
    try:
        return [parse_step(item) for item in value]
    except ValueError as exc:
        raise click.BadParameter(str(exc), ctx=ctx, param=param) from None


def build_unit(variant: str, initial: int) -> ArithmeticUnit:
    """Create a calculator of the named variant seeded with *initial*."""
    if variant == "scientific":
        return ScientificCalculator(initial)
    if variant == "advanced":
        return AdvancedCalculator(initial)
    return Calculator(initial)


def apply_step(unit: ArithmeticUnit, step: Step) -> Any:
    """Apply *step* to *unit*.

    Returns:
        The value a reporting step produces (quotient, memory, root or
        history), or None for a pure state change.

    Raises:
        SampleCalcError: If the operation itself fails.
        OverflowError: If divide or sqrt gets an accumulator beyond float range.
    """
    if step.name == "add":
        unit.add(step.operand)
    elif step.name == "subtract":
        unit.subtract(step.operand)
    elif step.name == "multiply":
        unit.multiply(step.operand)
    elif step.name == "divide":
        return unit.divide(step.operand)
    elif step.name == "reset":
        unit.reset()
    elif step.name == "store":
        unit.store_memory()
    elif step.name == "recall":
        return unit.recall_memory()
    elif step.name == "clear":
        unit.clear_memory()
    elif step.name == "sqrt":
        return unit.compute_square_root()
    elif step.name == "history":
        return unit.get_history()
    return None


def describe_state(variant: str, unit: ArithmeticUnit) -> dict[str, Any]:
    """Snapshot the observable state of *unit*."""
    state: dict[str, Any] = {"variant": variant, "value": unit.get_value()}
    if isinstance(unit, ScientificCalculator):
        state["memory"] = unit.recall_memory()
    if isinstance(unit, AdvancedCalculator):
        state["history"] = unit.get_history()
    return state


@click.command("run")
@click.argument("steps", nargs=-1, required=True, callback=_parse_steps)
@click.option(
    "--variant",
    type=click.Choice(_VARIANTS),
    default="basic",
    help="Calculator variant to drive (default: basic).",
)
@click.option("--initial", type=int, default=0, help="Starting value (default: 0).")
@click.option(
    "--format", "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format (default: text).",
)
def run_command(steps: list[Step], variant: str, initial: int, output_format: str) -> None:
    """Apply STEPS in order to one calculator and print its final state.

    Exit code 0 on success, 2 if a step is unsupported or fails.
    """
    for step in steps:
        required = _VARIANT_ONLY.get(step.name)
        if required is not None and required != variant:
            fail(f"step '{step}' requires --variant {required}", output_format)

    unit = build_unit(variant, initial)
    outputs: list[dict[str, Any]] = []
    for step in steps:
        try:
            result = apply_step(unit, step)
        except (SampleCalcError, OverflowError) as exc:
            logger.debug("Step %s failed on %r", step, unit, exc_info=True)
            fail(f"step '{step}' failed: {exc}", output_format)
        if result is not None:
            outputs.append({"step": str(step), "result": result})

    state = describe_state(variant, unit)
    state["outputs"] = outputs

    if output_format == "json":
        click.echo(dump_json(state))
    else:
        from samplecalc.cli.output import print_run_result
        print_run_result(state)
