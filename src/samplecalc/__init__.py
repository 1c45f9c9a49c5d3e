"""samplecalc: A sample arithmetic model with memory and history variants."""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"
