"""``samplecalc demo`` and ``samplecalc selfcheck``.

``demo`` drives each calculator variant through a short scripted sequence,
prints the result line and the operation history, and then runs the
self-check. ``selfcheck`` runs the self-check alone.

Exit Codes:
    0 -- Demo finished and all self-checks passed.
    1 -- A self-check failed.
    2 -- The configuration read from the environment is invalid.
"""

from __future__ import annotations

import sys

import click

from samplecalc.cli.common import dump_json, fail
from samplecalc.demo import run_demo, run_self_check
from samplecalc.exceptions import SampleCalcError, SelfCheckError


@click.command("demo")
@click.option(
    "--format", "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format (default: text).",
)
@click.option(
    "--self-check/--no-self-check",
    default=True,
    help="Run the self-check after the demo (default: on).",
)
def demo_command(output_format: str, self_check: bool) -> None:
    """Run the calculator demo.

    Exit code 0 on success, 1 if the self-check fails, 2 if the
    configuration is invalid.
    """
    failure = None
    try:
        report = run_demo()
        data = report.as_dict()
        if self_check:
            try:
                data["self_check"] = run_self_check()
            except SelfCheckError as exc:
                failure = str(exc)
                data["error"] = failure
    except SampleCalcError as exc:
        fail(str(exc), output_format)

    if output_format == "json":
        click.echo(dump_json(data))
    else:
        from samplecalc.cli.output import (
            print_demo_report,
            print_self_check,
            print_self_check_failure,
        )
        print_demo_report(report)
        if failure is not None:
            print_self_check_failure(failure)
        elif self_check:
            print_self_check(data["self_check"])

    sys.exit(1 if failure is not None else 0)


@click.command("selfcheck")
def selfcheck_command() -> None:
    """Run the built-in self-check.

    Exit code 0 if every check passes, 1 if a check fails, 2 if the
    configuration is invalid.
    """
    from samplecalc.cli.output import print_self_check, print_self_check_failure

    try:
        passed = run_self_check()
    except SelfCheckError as exc:
        print_self_check_failure(str(exc))
        sys.exit(1)
    except SampleCalcError as exc:
        fail(str(exc), "text")
    print_self_check(passed)
