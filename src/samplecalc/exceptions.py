"""samplecalc exception hierarchy.

All public exceptions inherit from SampleCalcError, giving callers a single
base class to catch when they want to handle any samplecalc-specific failure
without swallowing unrelated errors. The arithmetic errors also inherit from
the matching built-in (ValueError, TypeError) so plain ``except ValueError``
handlers keep working.
"""

from __future__ import annotations


class SampleCalcError(Exception):
    """Base exception for all samplecalc errors."""


class InvalidArgumentError(SampleCalcError, ValueError):
    """Raised when an operand is outside an operation's domain.

    The canonical case is division by zero. The accumulator is left
    untouched when this is raised.
    """


class DomainError(InvalidArgumentError):
    """Raised when the accumulator is outside an operation's domain.

    Covers the square root of a negative accumulator under the default
    ``SqrtPolicy.RAISE`` policy.
    """


class InvalidOperandError(SampleCalcError, TypeError):
    """Raised when an operand or initial value is not an ``int``."""


class ConfigError(SampleCalcError):
    """Raised for invalid configuration values.

    Covers unknown square root policies and non-integer fold seeds read
    from the environment.
    """


class SelfCheckError(SampleCalcError):
    """Raised when one of the built-in self-checks fails."""

    def __init__(self, check: str, message: str) -> None:
        super().__init__(f"Self-check '{check}' failed: {message}")
        self.check = check
