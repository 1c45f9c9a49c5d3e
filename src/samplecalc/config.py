"""Configuration for samplecalc.

Holds the dynamic defaults used by the calculators and fold helpers: the
seed values for ``calculate_sum`` / ``calculate_product`` and the policy
applied when a square root is requested for a negative accumulator.

Environment variables (``SAMPLECALC_`` prefix):
    SAMPLECALC_SQRT_POLICY: ``raise`` (default) or ``nan``
    SAMPLECALC_SUM_SEED: Integer seed for calculate_sum, default 0
    SAMPLECALC_PRODUCT_SEED: Integer seed for calculate_product, default 1
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Optional

from samplecalc.exceptions import ConfigError

logger = logging.getLogger(__name__)

ENV_PREFIX = "SAMPLECALC_"


class SqrtPolicy(Enum):
    """What ``compute_square_root`` does with a negative accumulator."""

    RAISE = "raise"
    NAN = "nan"


@dataclass
class CalculatorConfig:
    """Defaults shared by the calculators and the fold helpers.

    Attributes:
        sqrt_policy: Behaviour of ``compute_square_root`` for negative values.
        sum_seed: Initial accumulator for ``calculate_sum`` when none is given.
        product_seed: Initial accumulator for ``calculate_product`` when none
            is given.
    """

    sqrt_policy: SqrtPolicy = SqrtPolicy.RAISE
    sum_seed: int = 0
    product_seed: int = 1

    def validate(self) -> None:
        """Raise ConfigError if any field has the wrong type.

        Raises:
            ConfigError: If the policy is not a SqrtPolicy or a seed is not
                an int.
        """
        if not isinstance(self.sqrt_policy, SqrtPolicy):
            raise ConfigError(
                f"sqrt_policy must be a SqrtPolicy, got {self.sqrt_policy!r}"
            )
        for name in ("sum_seed", "product_seed"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigError(
                    f"{name} must be an int, got {type(value).__name__}"
                )

    @classmethod
    def from_env(
        cls, environ: Optional[Mapping[str, str]] = None
    ) -> "CalculatorConfig":
        """Create config from environment variables.

        Empty variables are treated as unset.

        Args:
            environ: Mapping to read from. Defaults to ``os.environ``.

        Raises:
            ConfigError: If a variable holds an unknown policy or a
                non-integer seed.
        """
        env = os.environ if environ is None else environ

        def get_env(suffix: str) -> Optional[str]:
            val = env.get(f"{ENV_PREFIX}{suffix}", "").strip()
            return val or None

        config = cls()

        policy = get_env("SQRT_POLICY")
        if policy is not None:
            try:
                config.sqrt_policy = SqrtPolicy(policy.lower())
            except ValueError:
                choices = ", ".join(p.value for p in SqrtPolicy)
                raise ConfigError(
                    f"{ENV_PREFIX}SQRT_POLICY must be one of: {choices}; "
                    f"got {policy!r}"
                ) from None

        for name in ("sum_seed", "product_seed"):
            raw = get_env(name.upper())
            if raw is None:
                continue
            try:
                setattr(config, name, int(raw))
            except ValueError:
                raise ConfigError(
                    f"{ENV_PREFIX}{name.upper()} must be an integer, got {raw!r}"
                ) from None

        logger.debug("Loaded config from environment: %s", config)
        return config


# Global config instance
_config: Optional[CalculatorConfig] = None


def get_config() -> CalculatorConfig:
    """Get the process-wide configuration, loading it from the environment once."""
    global _config
    if _config is None:
        _config = CalculatorConfig.from_env()
    return _config


def set_config(config: CalculatorConfig) -> None:
    """Set the process-wide configuration."""
    global _config
    config.validate()
    _config = config


def reset_config() -> None:
    """Forget the process-wide configuration; the next get_config() reloads it."""
    global _config
    _config = None
