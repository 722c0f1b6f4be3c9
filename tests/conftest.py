"""Pytest configuration and fixtures for QuickProp tests.

This module provides shared fixtures for the QuickProp test suite: seeded
random sources, fresh registries and runners that never touch global state.
"""

import pytest
from typer.testing import CliRunner

from quickprop.config import CheckConfig
from quickprop.core.random_source import RandomSource
from quickprop.core.registry import ArbitraryRegistry
from quickprop.core.runner import PropertyRunner


@pytest.fixture
def source() -> RandomSource:
    """Random source with a fixed seed."""
    return RandomSource(seed=20180106)


@pytest.fixture
def registry() -> ArbitraryRegistry:
    """Fresh registry holding only the built-in instances."""
    return ArbitraryRegistry.default()


@pytest.fixture
def reported():
    """List collecting every outcome handed to a reporter."""
    return []


@pytest.fixture
def runner(registry, source, reported) -> PropertyRunner:
    """Runner with a seeded source and a collecting reporter."""
    return PropertyRunner(
        registry=registry,
        source=source,
        config=CheckConfig(),
        reporter=reported.append,
    )


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a CLI runner for testing."""
    return CliRunner()


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep QUICKPROP_* variables from the developer's shell out of tests."""
    for name in (
        "QUICKPROP_TRIALS",
        "QUICKPROP_QUICK_TRIALS",
        "QUICKPROP_MAX_SHRINK_STEPS",
        "QUICKPROP_SEED",
        "QUICKPROP_LIST_MAX_LENGTH",
    ):
        monkeypatch.delenv(name, raising=False)
