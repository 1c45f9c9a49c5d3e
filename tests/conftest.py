"""Shared fixtures for samplecalc tests."""

import pytest

from samplecalc.config import ENV_PREFIX, reset_config


@pytest.fixture
def clean_config(monkeypatch: pytest.MonkeyPatch):
    """Isolate a test from SAMPLECALC_* variables and the cached config."""
    for suffix in ("SQRT_POLICY", "SUM_SEED", "PRODUCT_SEED"):
        monkeypatch.delenv(f"{ENV_PREFIX}{suffix}", raising=False)
    reset_config()
    yield
    reset_config()
