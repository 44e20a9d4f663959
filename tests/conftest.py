"""
Shared test fixtures for the hyprdsl test suite.
"""

import pytest

from hyprdsl.registry import ConverterRegistry, default_registry


@pytest.fixture
def registry() -> ConverterRegistry:
    """Registry holding every built-in converter.

    A fresh registry is built per test so registrations made by one test do
    not leak into another.
    """
    return default_registry()
