"""Rich output formatting helpers for the samplecalc CLI.

Provides consistent terminal output for the demo report, self-check
results, fold results, and ``run`` step traces.
"""

from __future__ import annotations

from typing import Any

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from samplecalc.demo import DemoReport

console = Console()


def print_demo_report(report: DemoReport) -> None:
    """Print the demo result line and the operation history.

    Args:
        report: Outcome of ``run_demo``.
    """
    console.print(f"Result: [bold]{report.result}[/bold]")

    table = Table(title="Calculator Variants", show_header=True, header_style="bold")
    table.add_column("Variant", style="bold")
    table.add_column("Value", justify="right")
    table.add_column("Memory", justify="right")
    table.add_row("scientific", str(report.scientific_value), str(report.scientific_memory))
    table.add_row("advanced", str(report.advanced_value), "-")
    console.print(table)

    console.print(f"History: {report.history}", markup=False)


def print_self_check(passed: list[str]) -> None:
    """Print the names of passing self-checks.

    Args:
        passed: Check names returned by ``run_self_check``.
    """
    for name in passed:
        console.print(Text.assemble(("PASS ", "bold green"), (name, "")))
    console.print(f"[bold]{len(passed)}[/bold] checks passed")


def print_self_check_failure(message: str) -> None:
    """Print a failed self-check message."""
    console.print(Text.assemble(("FAIL ", "bold red"), (message, "")))


def print_fold_result(operation: str, initial: int, numbers: tuple[int, ...], value: int) -> None:
    """Print the outcome of a sum or product fold.

    Args:
        operation: ``"sum"`` or ``"product"``.
        initial: Seed used for the fold.
        numbers: Folded operands, in order.
        value: Final accumulator value.
    """
    operands = ", ".join(str(n) for n in numbers) or "-"
    body = Text.assemble(
        ("Initial: ", "bold"), (str(initial), ""),
        ("  Numbers: ", "bold"), (operands, "dim"),
    )
    console.print(Panel(body, title=operation.capitalize()))
    console.print(f"  Result: [bold]{value}[/bold]")


def print_run_result(state: dict[str, Any]) -> None:
    """Print the step trace and final state of a ``run`` invocation.

    Args:
        state: Dictionary built by the ``run`` command.
    """
    if state["outputs"]:
        table = Table(title="Step Results", show_header=True)
        table.add_column("Step", style="bold")
        table.add_column("Result", justify="right")
        for entry in state["outputs"]:
            table.add_row(entry["step"], str(entry["result"]))
        console.print(table)

    header = Text.assemble(
        ("Variant: ", "bold"), (state["variant"], ""),
        ("  Value: ", "bold"), (str(state["value"]), ""),
    )
    console.print(Panel(header, title="Final State"))
    if "memory" in state:
        console.print(f"  Memory:  [bold]{state['memory']}[/bold]")
    if "history" in state:
        console.print(f"  History: {state['history']}", markup=False)
