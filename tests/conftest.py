"""Pytest configuration for chartexec tests."""

import os

import pytest


def pytest_configure(config: pytest.Config) -> None:
    """Configure test environment before collection.

    Removes CHARTEXEC_* variables so a developer's shell cannot change
    FakeHelmConfig.from_env() defaults under test.
    """
    for name in list(os.environ):
        if name.startswith("CHARTEXEC_"):
            os.environ.pop(name, None)


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Mark tests without a category as unit tests so `-m unit` selects them."""
    for item in items:
        if any(marker in item.keywords for marker in ("unit", "integration", "e2e")):
            continue
        item.add_marker(pytest.mark.unit)
