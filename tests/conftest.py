# tests/conftest.py
"""
Pytest configuration and fixtures for SOLID principles tests.
"""

import logging

import pytest


@pytest.fixture(autouse=True)
def reset_package_logging():
    """Restore the package logger level around each test."""
    package_logger = logging.getLogger("solid_principles")
    level = package_logger.level

    yield

    package_logger.setLevel(level)


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "integration: Integration tests"
    )
    config.addinivalue_line(
        "markers", "unit: Unit tests"
    )
