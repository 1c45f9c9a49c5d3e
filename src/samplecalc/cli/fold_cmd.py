"""``samplecalc sum`` and ``samplecalc product`` -- Fold integers.

Both commands build a fresh Calculator seeded with ``--initial`` (or the
configured seed), fold the NUMBERS through it in order, and print the
final value. Negative numbers must follow ``--`` so Click does not read
them as options.

Exit Codes:
    0 -- Fold printed.
    2 -- Invalid configuration (e.g. a non-integer SAMPLECALC_SUM_SEED).
"""

from __future__ import annotations

from typing import Callable, Optional

import click

from samplecalc.cli.common import dump_json, fail
from samplecalc.config import get_config
from samplecalc.core.calculator import calculate_product, calculate_sum
from samplecalc.exceptions import SampleCalcError


def _emit(
    operation: str,
    initial: int,
    numbers: tuple[int, ...],
    value: int,
    output_format: str,
) -> None:
    if output_format == "json":
        click.echo(dump_json({
            "operation": operation,
            "initial": initial,
            "numbers": list(numbers),
            "result": value,
        }))
    else:
        from samplecalc.cli.output import print_fold_result
        print_fold_result(operation, initial, numbers, value)


def _fold_command(
    name: str,
    fold: Callable[..., int],
    seed_attr: str,
    help_text: str,
) -> click.Command:
    """Build a fold command around *fold*, reading its default seed from *seed_attr*."""

    @click.command(name, help=help_text)
    @click.argument("numbers", type=int, nargs=-1)
    @click.option(
        "--initial", type=int, default=None,
        help=f"Starting value (default: configured {seed_attr}).",
    )
    @click.option(
        "--format", "output_format",
        type=click.Choice(["text", "json"]),
        default="text",
        help="Output format (default: text).",
    )
    def command(
        numbers: tuple[int, ...], initial: Optional[int], output_format: str
    ) -> None:
        try:
            seed = initial if initial is not None else getattr(get_config(), seed_attr)
            value = fold(numbers, seed)
        except SampleCalcError as exc:
            fail(str(exc), output_format)
        _emit(name, seed, numbers, value, output_format)

    return command


sum_command = _fold_command(
    "sum", calculate_sum, "sum_seed",
    "Add NUMBERS in order to a fresh calculator and print the total.",
)
product_command = _fold_command(
    "product", calculate_product, "product_seed",
    "Multiply a fresh calculator by NUMBERS in order and print the product.",
)
