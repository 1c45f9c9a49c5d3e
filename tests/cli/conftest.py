"""Shared fixtures for CLI tests."""

from __future__ import annotations

import pytest
from click.testing import CliRunner


@pytest.fixture(autouse=True)
def _isolated_config(clean_config):
    """Every CLI test starts from the default configuration."""


@pytest.fixture
def runner() -> CliRunner:
    """Create a Click CliRunner for invoking commands."""
    return CliRunner()
