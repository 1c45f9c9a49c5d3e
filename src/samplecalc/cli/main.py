"""samplecalc CLI -- Drive the sample arithmetic model from the shell.

Entry point for the ``samplecalc`` command-line tool. Registers all
subcommands under a single Click group.

Commands:
    demo       -- Run the calculator demo, then the self-check.
    selfcheck  -- Run the built-in self-check.
    sum        -- Fold integers through ``add``.
    product    -- Fold integers through ``multiply``.
    run        -- Apply steps to one calculator and show its state.

Usage::

    samplecalc demo
    samplecalc demo --format json
    samplecalc sum 1 2 3 --initial 10
    samplecalc product -- -2 3
    samplecalc run --variant advanced --initial 200 add:100 subtract:5 history
"""

from __future__ import annotations

import logging

import click

from samplecalc import __version__
from samplecalc.cli.demo_cmd import demo_command, selfcheck_command
from samplecalc.cli.fold_cmd import product_command, sum_command
from samplecalc.cli.run_cmd import run_command


@click.group()
@click.version_option(version=__version__)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """samplecalc: A sample arithmetic model with memory and history.

    Run the demo, fold integers, or drive a calculator step by step.
    """
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )


# Register all subcommands
cli.add_command(demo_command)
cli.add_command(selfcheck_command)
cli.add_command(sum_command)
cli.add_command(product_command)
cli.add_command(run_command)
