"""Pytest configuration for animal-diagram tests."""

import pytest


def pytest_configure(config: pytest.Config) -> None:
    """Configure custom markers."""
    config.addinivalue_line(
        "markers",
        "integration: marks tests that exercise the CLI end to end",
    )
