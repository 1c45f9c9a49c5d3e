"""Helpers shared by the samplecalc commands.

``fail`` reports an error in the selected output format and exits with
code 2. ``dump_json`` renders a payload as strict JSON: non-finite floats
(the NaN a negative square root yields under ``SqrtPolicy.NAN``) become
``null``.
"""

from __future__ import annotations

import json
import math
import sys
from typing import Any, NoReturn

import click


def to_json_safe(value: Any) -> Any:
    """Return *value* with every non-finite float replaced by None."""
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, dict):
        return {key: to_json_safe(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_json_safe(item) for item in value]
    return value


def dump_json(data: Any, indent: int | None = 2) -> str:
    """Serialize *data* as standards-compliant JSON."""
    return json.dumps(to_json_safe(data), indent=indent, allow_nan=False)


def fail(message: str, output_format: str) -> NoReturn:
    """Print *message* as an error and exit with code 2."""
    if output_format == "json":
        click.echo(dump_json({"error": message}, indent=None))
    else:
        click.echo(f"Error: {message}")
    sys.exit(2)
