"""Shared pytest fixtures and configuration."""

from pathlib import Path

import pytest

TESTDATA = Path(__file__).parent / "testdata"


# Register custom markers
def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for test categorization."""
    config.addinivalue_line("markers", "unit: fast tests with no external dependencies")
    config.addinivalue_line("markers", "integration: tests that read .pc files from disk")


@pytest.fixture
def testdata() -> Path:
    """Directory holding the sample .pc files."""
    return TESTDATA
