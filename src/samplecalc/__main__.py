"""Allow ``python -m samplecalc``."""

from __future__ import annotations

from samplecalc.cli.main import cli

if __name__ == "__main__":
    cli(prog_name="samplecalc")
