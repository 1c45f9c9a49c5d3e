"""Fixtures for core calculator tests."""

import pytest


@pytest.fixture(autouse=True)
def _isolated_config(clean_config):
    """Every core test starts from the default configuration."""
