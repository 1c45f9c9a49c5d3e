"""Tests for CalculatorConfig and the process-wide config accessors.

Verifies:
    - Defaults (raise policy, seeds 0 and 1).
    - Environment parsing, including empty values and case folding.
    - ConfigError on unknown policies and non-integer seeds.
    - get_config caching, set_config validation, reset_config reload.
"""

from __future__ import annotations

import pytest

from samplecalc.config import (
    CalculatorConfig,
    SqrtPolicy,
    get_config,
    reset_config,
    set_config,
)
from samplecalc.exceptions import ConfigError, SampleCalcError

pytestmark = pytest.mark.usefixtures("clean_config")


class TestDefaults:
    """Tests for default configuration values."""

    def test_default_policy_is_raise(self) -> None:
        assert CalculatorConfig().sqrt_policy is SqrtPolicy.RAISE

    def test_default_seeds(self) -> None:
        config = CalculatorConfig()
        assert config.sum_seed == 0
        assert config.product_seed == 1

    def test_defaults_validate(self) -> None:
        CalculatorConfig().validate()  # Should not raise


class TestFromEnv:
    """Tests for CalculatorConfig.from_env."""

    def test_empty_environment_gives_defaults(self) -> None:
        assert CalculatorConfig.from_env({}) == CalculatorConfig()

    def test_reads_all_variables(self) -> None:
        config = CalculatorConfig.from_env({
            "SAMPLECALC_SQRT_POLICY": "nan",
            "SAMPLECALC_SUM_SEED": "10",
            "SAMPLECALC_PRODUCT_SEED": "-3",
        })
        assert config.sqrt_policy is SqrtPolicy.NAN
        assert config.sum_seed == 10
        assert config.product_seed == -3

    def test_policy_is_case_insensitive(self) -> None:
        config = CalculatorConfig.from_env({"SAMPLECALC_SQRT_POLICY": "NaN"})
        assert config.sqrt_policy is SqrtPolicy.NAN

    def test_empty_value_treated_as_unset(self) -> None:
        config = CalculatorConfig.from_env({"SAMPLECALC_SUM_SEED": "  "})
        assert config.sum_seed == 0

    def test_unknown_policy_raises(self) -> None:
        with pytest.raises(ConfigError, match="SQRT_POLICY.*raise, nan"):
            CalculatorConfig.from_env({"SAMPLECALC_SQRT_POLICY": "complex"})

    def test_non_integer_seed_raises(self) -> None:
        with pytest.raises(ConfigError, match="PRODUCT_SEED must be an integer"):
            CalculatorConfig.from_env({"SAMPLECALC_PRODUCT_SEED": "1.5"})

    def test_reads_os_environ_by_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SAMPLECALC_SUM_SEED", "7")
        assert CalculatorConfig.from_env().sum_seed == 7


class TestValidate:
    """Tests for CalculatorConfig.validate."""

    def test_string_policy_rejected(self) -> None:
        with pytest.raises(ConfigError, match="sqrt_policy"):
            CalculatorConfig(sqrt_policy="nan").validate()

    def test_bool_seed_rejected(self) -> None:
        with pytest.raises(ConfigError, match="sum_seed must be an int"):
            CalculatorConfig(sum_seed=True).validate()

    def test_config_error_is_samplecalc_error(self) -> None:
        assert issubclass(ConfigError, SampleCalcError)


class TestGlobalConfig:
    """Tests for get_config / set_config / reset_config."""

    def test_get_config_is_cached(self) -> None:
        assert get_config() is get_config()

    def test_get_config_loads_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SAMPLECALC_SQRT_POLICY", "nan")
        reset_config()
        assert get_config().sqrt_policy is SqrtPolicy.NAN

    def test_set_config_replaces_instance(self) -> None:
        config = CalculatorConfig(sum_seed=5)
        set_config(config)
        assert get_config() is config

    def test_set_config_validates(self) -> None:
        with pytest.raises(ConfigError):
            set_config(CalculatorConfig(product_seed="1"))

    def test_reset_config_reloads(self) -> None:
        set_config(CalculatorConfig(sum_seed=5))
        reset_config()
        assert get_config().sum_seed == 0
